"""Fully loaded effect library."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sparkfx.core.formats.library.models.descriptors import EffectDescriptor
from sparkfx.core.formats.library.models.sprite import SpriteDescriptor


class EffectLibrary(BaseModel):
    """Sprites and effects drained from one or more documents.

    ``sprites`` is the merged sprite set: it may also hold sprites of
    libraries loaded earlier with a lower merge offset.
    """

    sprites: list[SpriteDescriptor] = Field(default_factory=list)
    effects: list[EffectDescriptor] = Field(default_factory=list)

    def find_effect(self, path: str) -> EffectDescriptor | None:
        """Look up an effect, including nested sub-effects, by its path."""
        for effect in self.effects:
            for candidate in effect.iter_effects():
                if candidate.path == path:
                    return candidate
        return None

    @property
    def effect_paths(self) -> list[str]:
        return [effect.path for effect in self.effects]
