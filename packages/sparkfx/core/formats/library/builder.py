"""Effect tree builder.

Turns EFFECT / PARTICLE / IMAGE elements into descriptor models. Building
never fails: every absent attribute or element falls back to its typed
default, so documents from older and newer editor versions both load.

Element layout handled here:

    <EFFECT NAME=".." TYPE=".." ...>
        <ANIMATION_PROPERTIES FRAMES=".." .../>
        <AMOUNT FRAME="0" VALUE="1"><CURVE LEFT_CURVE_POINT_X=".." .../></AMOUNT>
        ...
        <PARTICLE NAME=".." ...>
            <SHAPE_INDEX>3</SHAPE_INDEX>
            <ANGLE_TYPE VALUE="1"/>
            <LIFE FRAME="0" VALUE="1000"/>
            ...
            <EFFECT ...>  (sub-effect)
        </PARTICLE>
    </EFFECT>
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, NamedTuple

from sparkfx.core.formats.library.models.curves import AttributeCurve
from sparkfx.core.formats.library.models.descriptors import (
    AnimationProperties,
    EffectDescriptor,
    EmitterDescriptor,
)
from sparkfx.core.formats.library.models.enums import (
    LINEAR_ONLY_ATTRIBUTES,
    EffectAttribute,
    EmitterAttribute,
)
from sparkfx.core.formats.library.models.sprite import SpriteDescriptor
from sparkfx.core.formats.library.resolver import find_sprite
from sparkfx.core.parsers.protocols import DocumentNode
from sparkfx.core.parsers.xml import parse_int
from sparkfx.core.utils.logging import get_logger

logger = get_logger(__name__)

PATH_SEPARATOR = "/"
CURVE_ELEMENT = "CURVE"
EMITTER_ELEMENT = "PARTICLE"
EFFECT_ELEMENT = "EFFECT"
SHAPE_INDEX_ELEMENT = "SHAPE_INDEX"
ANIMATION_ELEMENT = "ANIMATION_PROPERTIES"

# Effects authored before the stretch attribute existed get this keyframe
DEFAULT_STRETCH_KEYFRAME = (0.0, 1.0)


class AttributeKind(str, Enum):
    """Typed attribute reader to use for a field."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"


class ScalarField(NamedTuple):
    """Descriptor field read straight from a node attribute."""

    field: str
    attribute: str
    kind: AttributeKind


class FieldOverride(NamedTuple):
    """Descriptor field with a legacy attribute form and a newer child-element form.

    The child element's ``VALUE`` attribute wins whenever the child exists.
    """

    field: str
    attribute: str
    element: str
    kind: AttributeKind


_INT = AttributeKind.INT
_FLOAT = AttributeKind.FLOAT
_BOOL = AttributeKind.BOOL
_STRING = AttributeKind.STRING

SHAPE_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("filename", "URL", _STRING),
    ScalarField("width", "WIDTH", _FLOAT),
    ScalarField("height", "HEIGHT", _FLOAT),
    ScalarField("frames", "FRAMES", _INT),
    ScalarField("max_radius", "MAX_RADIUS", _FLOAT),
)

EFFECT_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("effect_class", "TYPE", _INT),
    ScalarField("emit_at_points", "EMITATPOINTS", _BOOL),
    ScalarField("max_gx", "MAXGX", _INT),
    ScalarField("max_gy", "MAXGY", _INT),
    ScalarField("emission_type", "EMISSION_TYPE", _INT),
    ScalarField("ellipse_arc", "ELLIPSE_ARC", _FLOAT),
    ScalarField("effect_length", "EFFECT_LENGTH", _INT),
    ScalarField("lock_aspect", "UNIFORM", _BOOL),
    ScalarField("name", "NAME", _STRING),
    ScalarField("handle_center", "HANDLE_CENTER", _BOOL),
    ScalarField("handle_x", "HANDLE_X", _INT),
    ScalarField("handle_y", "HANDLE_Y", _INT),
    ScalarField("traverse_edge", "TRAVERSE_EDGE", _BOOL),
    ScalarField("end_behavior", "END_BEHAVIOUR", _INT),
    ScalarField("distance_set_by_life", "DISTANCE_SET_BY_LIFE", _BOOL),
    ScalarField("reverse_spawn", "REVERSE_SPAWN_DIRECTION", _BOOL),
)

ANIMATION_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("frames", "FRAMES", _INT),
    ScalarField("width", "WIDTH", _INT),
    ScalarField("height", "HEIGHT", _INT),
    ScalarField("x", "X", _INT),
    ScalarField("y", "Y", _INT),
    ScalarField("seed", "SEED", _INT),
    ScalarField("looped", "LOOPED", _BOOL),
    ScalarField("zoom", "ZOOM", _FLOAT),
    ScalarField("frame_offset", "FRAME_OFFSET", _INT),
)

EMITTER_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("handle_x", "HANDLE_X", _INT),
    ScalarField("handle_y", "HANDLE_Y", _INT),
    ScalarField("blend_mode", "BLENDMODE", _INT),
    ScalarField("particles_relative", "RELATIVE", _BOOL),
    ScalarField("random_color", "RANDOM_COLOR", _BOOL),
    ScalarField("z_layer", "LAYER", _INT),
    ScalarField("single_particle", "SINGLE_PARTICLE", _BOOL),
    ScalarField("name", "NAME", _STRING),
    ScalarField("animate", "ANIMATE", _BOOL),
    ScalarField("animate_once", "ANIMATE_ONCE", _BOOL),
    ScalarField("current_frame", "FRAME", _FLOAT),
    ScalarField("random_start_frame", "RANDOM_START_FRAME", _BOOL),
    ScalarField("animation_direction", "ANIMATION_DIRECTION", _INT),
    ScalarField("uniform", "UNIFORM", _BOOL),
    ScalarField("group_particles", "GROUP_PARTICLES", _BOOL),
)

# Applied in this order; the shape index has only the child form and is
# resolved separately against the sprite set.
EMITTER_OVERRIDES: tuple[FieldOverride, ...] = (
    FieldOverride("angle_type", "ANGLE_TYPE", "ANGLE_TYPE", _INT),
    FieldOverride("angle_offset", "ANGLE_OFFSET", "ANGLE_OFFSET", _INT),
    FieldOverride("lock_angle", "LOCK_ANGLE", "LOCKED_ANGLE", _BOOL),
    FieldOverride("angle_relative", "ANGLE_RELATIVE", "ANGLE_RELATIVE", _BOOL),
    FieldOverride("use_effect_emission", "USE_EFFECT_EMISSION", "USE_EFFECT_EMISSION", _BOOL),
    FieldOverride("color_repeat", "COLOR_REPEAT", "COLOR_REPEAT", _INT),
    FieldOverride("alpha_repeat", "ALPHA_REPEAT", "ALPHA_REPEAT", _INT),
    FieldOverride("one_shot", "ONE_SHOT", "ONE_SHOT", _BOOL),
    FieldOverride("handle_center", "HANDLE_CENTERED", "HANDLE_CENTERED", _BOOL),
)


def read_attribute(node: DocumentNode, attribute: str, kind: AttributeKind) -> Any:
    """Read ``attribute`` from ``node`` with the typed reader for ``kind``."""
    reader = getattr(node, f"attribute_as_{kind.value}")
    return reader(attribute)


def read_fields(node: DocumentNode, fields: Sequence[ScalarField]) -> dict[str, Any]:
    """Read a table of scalar fields into a dict keyed by field name."""
    return {f.field: read_attribute(node, f.attribute, f.kind) for f in fields}


def read_override(node: DocumentNode, override: FieldOverride) -> Any:
    """Read a field from its child element when present, else from the attribute."""
    child = node.child_by_name(override.element)
    if child is not None:
        return read_attribute(child, "VALUE", override.kind)
    return read_attribute(node, override.attribute, override.kind)


def join_path(prefix: str | None, name: str) -> str:
    """Join a parent path and a name, without a leading separator at the top.

    Example:
        >>> join_path("Fire/Flame", "Sparks")
        'Fire/Flame/Sparks'
        >>> join_path("", "Smoke")
        'Smoke'
    """
    if not prefix:
        return name
    return f"{prefix}{PATH_SEPARATOR}{name}"


def load_attribute_curve(
    node: DocumentNode,
    element: str,
    curve: AttributeCurve,
    *,
    smooth: bool = True,
) -> None:
    """Append one keyframe per ``element`` child of ``node`` to ``curve``.

    Args:
        node: Effect or emitter element
        element: Category element name (e.g. "LIFE")
        curve: Curve receiving the keyframes
        smooth: Attach tangent handles from nested CURVE elements
    """
    for attribute_node in node.children_by_name(element):
        curve.add(
            attribute_node.attribute_as_float("FRAME"),
            attribute_node.attribute_as_float("VALUE"),
        )
        if not smooth:
            continue
        for control in attribute_node.children_by_name(CURVE_ELEMENT):
            curve.set_curve_points(
                control.attribute_as_float("LEFT_CURVE_POINT_X"),
                control.attribute_as_float("LEFT_CURVE_POINT_Y"),
                control.attribute_as_float("RIGHT_CURVE_POINT_X"),
                control.attribute_as_float("RIGHT_CURVE_POINT_Y"),
            )


def build_sprite(node: DocumentNode, shape_offset: int = 0) -> SpriteDescriptor:
    """Build a sprite descriptor from an IMAGE element.

    The stored index is the declared INDEX plus ``shape_offset``.
    """
    values = read_fields(node, SHAPE_FIELDS)
    values["index"] = node.attribute_as_int("INDEX") + shape_offset
    return SpriteDescriptor(**values)


class EffectTreeBuilder:
    """Recursive builder for effect subtrees.

    One builder serves one effect pull: it carries the caller's merged
    sprite set and the session merge offset down the recursion.

    Example:
        >>> builder = EffectTreeBuilder(sprites, shape_offset=0)
        >>> effect = builder.build_effect(effect_node, folder_path="Fire")
        >>> effect.path
        'Fire/Flame'
    """

    def __init__(self, sprites: Iterable[SpriteDescriptor], shape_offset: int = 0) -> None:
        self._sprites = list(sprites)
        self._shape_offset = shape_offset

    def build_effect(
        self,
        node: DocumentNode,
        owner: EmitterDescriptor | None = None,
        folder_path: str = "",
    ) -> EffectDescriptor:
        """Build an effect and its whole subtree.

        Args:
            node: EFFECT element
            owner: Emitter spawning this effect, None for library-level effects
            folder_path: Enclosing folder name for library-level effects

        Returns:
            Effect descriptor owning its emitters
        """
        values = read_fields(node, EFFECT_FIELDS)
        prefix = owner.path if owner is not None else folder_path
        effect = EffectDescriptor(
            **values,
            path=join_path(prefix, values["name"]),
            owner_path=owner.path if owner is not None else None,
            folder=folder_path if owner is None else "",
        )

        animation = node.child_by_name(ANIMATION_ELEMENT)
        if animation is not None:
            effect.animation = AnimationProperties(**read_fields(animation, ANIMATION_FIELDS))

        for attribute in EffectAttribute:
            load_attribute_curve(node, attribute.value, effect.curves[attribute])

        if node.child_by_name(EffectAttribute.STRETCH.value) is None:
            effect.curves[EffectAttribute.STRETCH].add(*DEFAULT_STRETCH_KEYFRAME)

        for particle in node.children_by_name(EMITTER_ELEMENT):
            effect.add_emitter(self.build_emitter(particle, effect))

        logger.debug(f"Built effect {effect.path} ({len(effect.emitters)} emitters)")
        return effect

    def build_emitter(self, node: DocumentNode, owner: EffectDescriptor) -> EmitterDescriptor:
        """Build an emitter, its curves and its optional sub-effect.

        Args:
            node: PARTICLE element
            owner: Effect the emitter belongs to

        Returns:
            Emitter descriptor
        """
        values = read_fields(node, EMITTER_FIELDS)
        # 0 is not a direction; documents leave it at 0 when unset
        if values["animation_direction"] == 0:
            values["animation_direction"] = 1
        for override in EMITTER_OVERRIDES:
            values[override.field] = read_override(node, override)

        shape = node.child_by_name(SHAPE_INDEX_ELEMENT)
        if shape is not None:
            shape_index = parse_int(shape.text_value(), allow_hex=False)
            values["shape_index"] = shape_index
            values["image"] = find_sprite(self._sprites, shape_index + self._shape_offset)
            if values["image"] is None:
                logger.warning(
                    f"Emitter {owner.path}{PATH_SEPARATOR}{values['name']} references unknown "
                    f"shape index {shape_index} (offset {self._shape_offset})"
                )

        emitter = EmitterDescriptor(
            **values,
            path=f"{owner.path}{PATH_SEPARATOR}{values['name']}",
            owner_path=owner.path,
        )

        for attribute in EmitterAttribute:
            load_attribute_curve(
                node,
                attribute.value,
                emitter.curves[attribute],
                smooth=attribute not in LINEAR_ONLY_ATTRIBUTES,
            )

        sub_effect = node.child_by_name(EFFECT_ELEMENT)
        if sub_effect is not None:
            emitter.sub_effect = self.build_effect(sub_effect, owner=emitter)

        return emitter
