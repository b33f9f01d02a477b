"""XML parsing with ElementTree and lenient typed attribute access.

This module wraps ElementTree with:
- File existence validation
- Parse failures reported with a character offset and expat description
- ``XMLNode``, a ``DocumentNode`` adapter adding sibling navigation and
  typed attribute reads that fall back to defaults instead of raising
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import re
import xml.etree.ElementTree as ET
from xml.parsers import expat

from sparkfx.core.utils.logging import get_logger

logger = get_logger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRUE_CHARS = frozenset("1tTyY")


class DocumentParseError(ValueError):
    """Malformed document.

    Attributes:
        offset: Character offset (byte offset for bytes input) of the failure
        description: Human-readable parser diagnostic
    """

    def __init__(self, offset: int, description: str) -> None:
        self.offset = offset
        self.description = description
        super().__init__(f"Parsing error at #{offset} : {description}")


def parse_int(text: str | None, *, allow_hex: bool = True) -> int:
    """Parse the longest integer prefix of ``text``.

    Leading whitespace and a sign are accepted; a ``0x``/``0X`` prefix reads
    hexadecimal digits. With ``allow_hex=False`` the prefix reads as a plain
    ``0``, matching C ``atoi``.

    Example:
        >>> parse_int("12px")
        12
        >>> parse_int("1.9")
        1
        >>> parse_int("0x10")
        16
        >>> parse_int("abc")
        0
    """
    if not text:
        return 0
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    sign, hex_digits, digits = match.groups()
    if hex_digits:
        if not allow_hex:
            return 0
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_float(text: str | None) -> float:
    """Parse the longest float prefix of ``text`` (0.0 when none)."""
    if not text:
        return 0.0
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_bool(text: str | None) -> bool:
    """True when the first character is one of ``1 t T y Y``.

    Whitespace is not skipped: ``" 1"`` reads as False.
    """
    if not text:
        return False
    return text[0] in _TRUE_CHARS


def _error_offset(source: str | bytes, position: tuple[int, int]) -> int:
    """Convert an expat (line, column) position into a flat offset."""
    line, column = position
    newline: str | bytes = b"\n" if isinstance(source, bytes) else "\n"
    lines = source.split(newline)  # type: ignore[arg-type]
    preceding = sum(len(chunk) + 1 for chunk in lines[: max(line - 1, 0)])
    return preceding + column


class XMLNode:
    """ElementTree element with parent-aware navigation.

    ElementTree elements do not know their parent, so each node keeps a
    reference to its parent node and its index among the parent's children
    to support ``next_sibling_by_name``. The child element list is read once
    per node and shared by every child's sibling scan.
    """

    __slots__ = ("_element", "_parent", "_index", "_children")

    def __init__(
        self,
        element: ET.Element,
        parent: XMLNode | None = None,
        index: int = 0,
    ) -> None:
        self._element = element
        self._parent = parent
        self._index = index
        self._children: list[ET.Element] | None = None

    def _child_elements(self) -> list[ET.Element]:
        if self._children is None:
            self._children = list(self._element)
        return self._children

    def __repr__(self) -> str:
        return f"XMLNode({self._element.tag!r})"

    @property
    def name(self) -> str:
        return self._element.tag

    @property
    def element(self) -> ET.Element:
        """Underlying ElementTree element."""
        return self._element

    def child_by_name(self, name: str) -> XMLNode | None:
        for index, child in enumerate(self._child_elements()):
            if child.tag == name:
                return XMLNode(child, self, index)
        return None

    def next_sibling_by_name(self, name: str) -> XMLNode | None:
        if self._parent is None:
            return None
        siblings = self._parent._child_elements()
        for index in range(self._index + 1, len(siblings)):
            if siblings[index].tag == name:
                return XMLNode(siblings[index], self._parent, index)
        return None

    def children_by_name(self, name: str) -> Iterator[XMLNode]:
        node = self.child_by_name(name)
        while node is not None:
            yield node
            node = node.next_sibling_by_name(name)

    def attribute_as_string(self, name: str) -> str:
        return self._element.get(name, "")

    def attribute_as_int(self, name: str) -> int:
        return parse_int(self._element.get(name))

    def attribute_as_float(self, name: str) -> float:
        return parse_float(self._element.get(name))

    def attribute_as_bool(self, name: str) -> bool:
        return parse_bool(self._element.get(name))

    def text_value(self) -> str:
        return self._element.text or ""


class XMLParser:
    """ElementTree parser producing ``XMLNode`` document roots.

    The returned node is a synthetic document node whose only child is the
    parsed root element, so callers look the root container up by name
    exactly like any other child.

    Example:
        >>> parser = XMLParser()
        >>> document = parser.parse_string("<EFFECTS><EFFECT NAME='Smoke'/></EFFECTS>")
        >>> document.child_by_name("EFFECTS").child_by_name("EFFECT").attribute_as_string("NAME")
        'Smoke'
    """

    def parse(self, file_path: Path | str) -> XMLNode:
        """Parse XML file.

        Args:
            file_path: Path to XML file (Path object or string)

        Returns:
            Document node

        Raises:
            FileNotFoundError: If file does not exist
            DocumentParseError: If XML is malformed
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"XML file does not exist: {path}")

        logger.debug(f"Parsing XML file: {path}")
        return self.parse_bytes(path.read_bytes())

    def parse_bytes(self, data: bytes) -> XMLNode:
        """Parse XML from raw bytes (encoding taken from the XML declaration).

        Raises:
            DocumentParseError: If XML is malformed
        """
        return self._parse(data)

    def parse_string(self, xml_str: str) -> XMLNode:
        """Parse XML from string.

        Raises:
            DocumentParseError: If XML is malformed
        """
        return self._parse(xml_str)

    def _parse(self, source: str | bytes) -> XMLNode:
        try:
            root = ET.fromstring(source)
        except ET.ParseError as e:
            offset = _error_offset(source, e.position)
            raise DocumentParseError(offset, expat.ErrorString(e.code)) from e

        document = ET.Element("#document")
        document.append(root)
        return XMLNode(document)
