"""Sprite lookup by merge-adjusted index."""

from __future__ import annotations

from collections.abc import Iterable

from sparkfx.core.formats.library.models.sprite import SpriteDescriptor


def find_sprite(sprites: Iterable[SpriteDescriptor], index: int) -> SpriteDescriptor | None:
    """Return the first sprite whose stored index equals ``index``.

    Args:
        sprites: Merged sprite set, possibly spanning several documents
        index: Document-local shape index plus the session's merge offset

    Returns:
        Matching sprite, or None when no sprite has that index

    Example:
        >>> a = SpriteDescriptor(filename="a.png", index=5)
        >>> b = SpriteDescriptor(filename="b.png", index=105)
        >>> find_sprite([a, b], 105).filename
        'b.png'
        >>> find_sprite([a, b], 999) is None
        True
    """
    for sprite in sprites:
        if sprite.index == index:
            return sprite
    return None
