"""Document parsing backends."""

from sparkfx.core.parsers.protocols import DocumentNode
from sparkfx.core.parsers.xml import (
    DocumentParseError,
    XMLNode,
    XMLParser,
    parse_bool,
    parse_float,
    parse_int,
)

__all__ = [
    "DocumentNode",
    "DocumentParseError",
    "XMLNode",
    "XMLParser",
    "parse_bool",
    "parse_float",
    "parse_int",
]
