"""Effect and emitter descriptors.

The tree is owned top-down: an effect owns its emitters, an emitter owns
its optional sub-effect. Upward links are kept as ``owner_path`` strings and
sprite links are non-owning references into the caller's sprite set, so a
descriptor tree never contains cycles.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from sparkfx.core.formats.library.models.curves import AttributeCurve, new_curve_table
from sparkfx.core.formats.library.models.enums import EffectAttribute, EmitterAttribute
from sparkfx.core.formats.library.models.sprite import SpriteDescriptor


class AnimationProperties(BaseModel):
    """Settings used when an effect is rendered out to a sprite sheet."""

    frames: int = 0
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    seed: int = 0
    looped: bool = False
    zoom: float = 0.0
    frame_offset: int = 0


class EffectDescriptor(BaseModel):
    """A named particle-effect composition.

    Attributes:
        name: Effect name
        path: Slash-joined names from the enclosing folder or owner down to this effect
        owner_path: Path of the emitter that spawns this effect, None at top level
        folder: Name of the enclosing folder for top-level effects
        effect_class: Emission geometry (point, area, line, ellipse)
        emission_type: Direction of emission relative to the geometry
        end_behavior: What particles do when they reach the end of a line/area
        lock_aspect: Keep width and height scaling uniform
        animation: Sprite-sheet export settings, if declared
        curves: Keyframes per attribute category
        emitters: Child emitters in document order
    """

    name: str = ""
    path: str = ""
    owner_path: str | None = None
    folder: str = ""

    effect_class: int = 0
    emit_at_points: bool = False
    max_gx: int = 0
    max_gy: int = 0
    emission_type: int = 0
    ellipse_arc: float = 0.0
    effect_length: int = 0
    lock_aspect: bool = False
    handle_center: bool = False
    handle_x: int = 0
    handle_y: int = 0
    traverse_edge: bool = False
    end_behavior: int = 0
    distance_set_by_life: bool = False
    reverse_spawn: bool = False

    animation: AnimationProperties | None = None
    curves: dict[EffectAttribute, AttributeCurve] = Field(
        default_factory=lambda: new_curve_table(EffectAttribute)
    )
    emitters: list[EmitterDescriptor] = Field(default_factory=list)

    def curve(self, attribute: EffectAttribute) -> AttributeCurve:
        return self.curves[attribute]

    def add_emitter(self, emitter: EmitterDescriptor) -> None:
        self.emitters.append(emitter)

    def iter_effects(self) -> Iterator[EffectDescriptor]:
        """Yield this effect and every nested sub-effect, depth first."""
        yield self
        for emitter in self.emitters:
            if emitter.sub_effect is not None:
                yield from emitter.sub_effect.iter_effects()

    def iter_emitters(self) -> Iterator[EmitterDescriptor]:
        """Yield every emitter of this effect and of its sub-effects, depth first."""
        for emitter in self.emitters:
            yield emitter
            if emitter.sub_effect is not None:
                yield from emitter.sub_effect.iter_emitters()


class EmitterDescriptor(BaseModel):
    """A particle source within an effect.

    Attributes:
        name: Emitter name
        path: Owner effect path plus this emitter's name
        owner_path: Path of the owning effect
        shape_index: Sprite index as declared in the document (before merge offset)
        image: Resolved sprite, None when undeclared or not found
        animation_direction: Frame step direction, never 0
        curves: Keyframes per attribute category
        sub_effect: Effect spawned where particles die
    """

    name: str = ""
    path: str = ""
    owner_path: str | None = None

    handle_x: int = 0
    handle_y: int = 0
    handle_center: bool = False
    blend_mode: int = 0
    particles_relative: bool = False
    random_color: bool = False
    z_layer: int = 0
    single_particle: bool = False
    group_particles: bool = False
    uniform: bool = False

    animate: bool = False
    animate_once: bool = False
    current_frame: float = 0.0
    random_start_frame: bool = False
    animation_direction: int = 1

    angle_type: int = 0
    angle_offset: int = 0
    lock_angle: bool = False
    angle_relative: bool = False
    use_effect_emission: bool = False
    color_repeat: int = 0
    alpha_repeat: int = 0
    one_shot: bool = False

    shape_index: int | None = None
    image: SpriteDescriptor | None = Field(default=None, repr=False, exclude=True)

    curves: dict[EmitterAttribute, AttributeCurve] = Field(
        default_factory=lambda: new_curve_table(EmitterAttribute)
    )
    sub_effect: EffectDescriptor | None = None

    def curve(self, attribute: EmitterAttribute) -> AttributeCurve:
        return self.curves[attribute]


EffectDescriptor.model_rebuild()
EmitterDescriptor.model_rebuild()
