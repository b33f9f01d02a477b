"""Tests for the ElementTree-backed document parser."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from sparkfx.core.parsers.protocols import DocumentNode
from sparkfx.core.parsers.xml import (
    DocumentParseError,
    XMLNode,
    XMLParser,
    parse_bool,
    parse_float,
    parse_int,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        (" -7", -7),
        ("12px", 12),
        ("1.9", 1),
        ("0x10", 16),
        ("-0X1f", -31),
        ("0x", 0),
        ("abc", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(("text", "expected"), [("0x10", 0), (" 12", 12), ("-3", -3)])
def test_parse_int_decimal_only(text, expected):
    assert parse_int(text, allow_hex=False) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("1.5", 1.5), ("-0.25", -0.25), (".5", 0.5), ("1e3", 1000.0), ("3", 3.0), ("x", 0.0)],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("1", True), ("true", True), ("True", True), ("yes", True), ("0", False),
     ("false", False), (" 1", False), ("", False), (None, False)],
)
def test_parse_bool(text, expected):
    assert parse_bool(text) is expected


def test_document_exposes_root_by_name():
    document = XMLParser().parse_string("<EFFECTS><EFFECT NAME='Smoke'/></EFFECTS>")

    root = document.child_by_name("EFFECTS")

    assert root is not None
    assert root.name == "EFFECTS"
    assert document.child_by_name("LIBRARY") is None


def test_xml_node_satisfies_protocol():
    document = XMLParser().parse_string("<EFFECTS/>")
    assert isinstance(document, DocumentNode)


def test_sibling_navigation_skips_other_names(parse_element):
    root = parse_element(
        "<R><A N='1'/><B/><A N='2'/><C/><A N='3'/></R>"
    )

    first = root.child_by_name("A")
    second = first.next_sibling_by_name("A")
    third = second.next_sibling_by_name("A")

    assert [n.attribute_as_int("N") for n in (first, second, third)] == [1, 2, 3]
    assert third.next_sibling_by_name("A") is None
    assert [n.attribute_as_int("N") for n in root.children_by_name("A")] == [1, 2, 3]


class _CountingElement(ET.Element):
    """Element recording how often its children are listed."""

    iterations = 0

    def __iter__(self):
        type(self).iterations += 1
        return iter(self[:])


def test_sibling_scan_lists_children_once():
    parent = _CountingElement("PARTICLE")
    for i in range(50):
        parent.append(ET.Element("LIFE" if i % 2 else "AMOUNT"))
    _CountingElement.iterations = 0

    node = XMLNode(parent)
    life = list(node.children_by_name("LIFE"))
    amount = list(node.children_by_name("AMOUNT"))

    assert len(life) == 25
    assert len(amount) == 25
    assert _CountingElement.iterations == 1


def test_root_has_no_siblings(parse_element):
    root = parse_element("<R/>")
    assert root.next_sibling_by_name("R") is None


def test_typed_attributes_default_when_absent(parse_element):
    node = parse_element("<E/>")

    assert node.attribute_as_int("MISSING") == 0
    assert node.attribute_as_float("MISSING") == 0.0
    assert node.attribute_as_bool("MISSING") is False
    assert node.attribute_as_string("MISSING") == ""
    assert node.text_value() == ""


def test_typed_attributes_and_text(parse_element):
    node = parse_element("<E I='3' F='2.5' B='1' S='Flame'>17</E>")

    assert node.attribute_as_int("I") == 3
    assert node.attribute_as_float("F") == 2.5
    assert node.attribute_as_bool("B") is True
    assert node.attribute_as_string("S") == "Flame"
    assert node.text_value() == "17"


def test_malformed_xml_reports_offset_and_description():
    source = "<EFFECTS>\n  <EFFECT>\n</EFFECTS>"

    with pytest.raises(DocumentParseError) as exc_info:
        XMLParser().parse_string(source)

    error = exc_info.value
    assert error.description == "mismatched tag"
    # Line 3, column 2: after "<EFFECTS>\n" (10) and "  <EFFECT>\n" (11)
    assert error.offset == 23
    assert str(error) == "Parsing error at #23 : mismatched tag"


def test_malformed_xml_is_value_error():
    with pytest.raises(ValueError):
        XMLParser().parse_string("<EFFECTS>")


def test_parse_file(tmp_path):
    path = tmp_path / "library.xml"
    path.write_text('<?xml version="1.0" encoding="UTF-8"?>\n<EFFECTS/>', encoding="utf-8")

    document = XMLParser().parse(path)

    assert isinstance(document, XMLNode)
    assert document.child_by_name("EFFECTS") is not None


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        XMLParser().parse(tmp_path / "missing.xml")
