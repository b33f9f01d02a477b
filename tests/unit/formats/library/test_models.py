"""Tests for sprite, effect and library models."""

from __future__ import annotations

import math

from sparkfx.core.formats.library.models import (
    EffectAttribute,
    EffectDescriptor,
    EffectLibrary,
    EmitterDescriptor,
    SpriteDescriptor,
)


class TestSpriteDescriptor:
    def test_explicit_max_radius_is_kept(self):
        sprite = SpriteDescriptor(filename="flare.png", width=64, height=64, max_radius=30)
        assert sprite.max_radius == 30

    def test_max_radius_falls_back_to_half_diagonal(self):
        sprite = SpriteDescriptor(filename="spark.png", width=30, height=40)
        assert sprite.max_radius == 25.0

    def test_max_radius_zero_dimensions(self):
        assert SpriteDescriptor().max_radius == 0.0

    def test_name_derived_from_filename(self):
        assert SpriteDescriptor(filename="sprites/smoke.png").name == "smoke"
        assert SpriteDescriptor(filename="C:\\fx\\sprites\\flare.png").name == "flare"

    def test_explicit_name_is_kept(self):
        assert SpriteDescriptor(filename="smoke.png", name="Puff").name == "Puff"


class TestEffectDescriptor:
    def test_defaults(self):
        effect = EffectDescriptor(name="Smoke", path="Smoke")

        assert effect.owner_path is None
        assert effect.animation is None
        assert effect.emitters == []
        assert effect.curve(EffectAttribute.STRETCH).is_empty

    def test_walks_nested_effects_and_emitters(self):
        burst = EffectDescriptor(name="Burst", path="Fire/Flame/Sparks/Burst")
        embers = EmitterDescriptor(name="Embers", path="Fire/Flame/Sparks/Burst/Embers")
        burst.add_emitter(embers)
        sparks = EmitterDescriptor(name="Sparks", path="Fire/Flame/Sparks", sub_effect=burst)
        flame = EffectDescriptor(name="Flame", path="Fire/Flame")
        flame.add_emitter(sparks)

        assert [e.path for e in flame.iter_effects()] == ["Fire/Flame", "Fire/Flame/Sparks/Burst"]
        assert [e.name for e in flame.iter_emitters()] == ["Sparks", "Embers"]

    def test_sprite_reference_is_not_serialized(self):
        sprite = SpriteDescriptor(filename="spark.png", index=5)
        emitter = EmitterDescriptor(name="Sparks", shape_index=5, image=sprite)

        assert emitter.image is sprite
        dumped = emitter.model_dump()
        assert "image" not in dumped
        assert dumped["shape_index"] == 5


class TestEffectLibrary:
    def test_find_effect_by_path(self):
        burst = EffectDescriptor(name="Burst", path="Flame/Sparks/Burst")
        flame = EffectDescriptor(name="Flame", path="Flame")
        flame.add_emitter(EmitterDescriptor(name="Sparks", path="Flame/Sparks", sub_effect=burst))
        library = EffectLibrary(effects=[flame])

        assert library.find_effect("Flame") is flame
        assert library.find_effect("Flame/Sparks/Burst").name == "Burst"
        assert library.find_effect("Nope") is None
        assert library.effect_paths == ["Flame"]


def test_half_diagonal_matches_hypot():
    sprite = SpriteDescriptor(width=128, height=64)
    assert math.isclose(sprite.max_radius, math.hypot(128, 64) / 2)
