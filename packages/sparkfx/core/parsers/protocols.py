"""Protocol for tree-shaped document navigation.

The effect-library builder only needs named-child lookup, named-sibling
iteration and typed attribute reads. Any backend that provides these can
feed the builder; ``sparkfx.core.parsers.xml.XMLNode`` is the bundled one.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentNode(Protocol):
    """
    Read-only view of a single element in a parsed document.

    Typed attribute reads never raise: an absent or unparsable attribute
    yields the type's default (``0``, ``0.0``, ``False`` or ``""``).
    """

    @property
    def name(self) -> str:
        """Element name (tag)."""
        ...

    def child_by_name(self, name: str) -> DocumentNode | None:
        """Return the first direct child with the given name, if any."""
        ...

    def next_sibling_by_name(self, name: str) -> DocumentNode | None:
        """Return the next following sibling with the given name, if any."""
        ...

    def children_by_name(self, name: str) -> Iterator[DocumentNode]:
        """Iterate direct children with the given name in document order."""
        ...

    def attribute_as_int(self, name: str) -> int:
        """Read an attribute as int (default 0)."""
        ...

    def attribute_as_float(self, name: str) -> float:
        """Read an attribute as float (default 0.0)."""
        ...

    def attribute_as_bool(self, name: str) -> bool:
        """Read an attribute as bool (default False)."""
        ...

    def attribute_as_string(self, name: str) -> str:
        """Read an attribute as str (default "")."""
        ...

    def text_value(self) -> str:
        """Return the element's own text content (default "")."""
        ...
