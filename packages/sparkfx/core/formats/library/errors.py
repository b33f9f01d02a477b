"""Exceptions raised by the effect-library loader.

Malformed XML is reported by the parser as
``sparkfx.core.parsers.xml.DocumentParseError`` and passed through unchanged.
"""

from __future__ import annotations


class LibraryLoadError(Exception):
    """Base exception for effect-library loading failures."""


class MissingRootError(LibraryLoadError):
    """The document has no root container element."""

    def __init__(self, root_element: str) -> None:
        self.root_element = root_element
        super().__init__(f"Root element <{root_element}> is missing")


class CursorExhaustedError(LibraryLoadError):
    """An enumeration has no items left.

    This is the normal termination signal of ``next_shape``/``next_effect``,
    not a fault.
    """


class NoMoreShapesError(CursorExhaustedError):
    """No shape declarations remain."""

    def __init__(self) -> None:
        super().__init__("No more shapes there")


class NoMoreEffectsError(CursorExhaustedError):
    """No effects remain."""

    def __init__(self) -> None:
        super().__init__("No more effects there")
