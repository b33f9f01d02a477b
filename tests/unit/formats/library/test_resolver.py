"""Tests for merged sprite-set lookup."""

from __future__ import annotations

from sparkfx.core.formats.library.models.sprite import SpriteDescriptor
from sparkfx.core.formats.library.resolver import find_sprite


def test_find_sprite_by_merged_index(merged_sprites):
    a, b = merged_sprites

    assert find_sprite(merged_sprites, 5 + 100) is b
    assert find_sprite(merged_sprites, 5 + 0) is a


def test_find_sprite_missing_returns_none(merged_sprites):
    assert find_sprite(merged_sprites, 999) is None
    assert find_sprite([], 0) is None


def test_find_sprite_returns_first_match():
    first = SpriteDescriptor(filename="first.png", index=3)
    duplicate = SpriteDescriptor(filename="second.png", index=3)

    assert find_sprite([first, duplicate], 3) is first


def test_find_sprite_accepts_any_iterable(merged_sprites):
    assert find_sprite(iter(merged_sprites), 105).filename == "b.png"
