"""Shared pytest fixtures for sparkfx tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sparkfx.core.formats.library.models.sprite import SpriteDescriptor
from sparkfx.core.parsers.xml import XMLNode, XMLParser

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def libraries_dir(fixtures_dir: Path) -> Path:
    """Directory of effect-library XML documents."""
    return fixtures_dir / "libraries"


@pytest.fixture
def folders_library(libraries_dir: Path) -> Path:
    """Library with shapes, populated and empty folders, and nested sub-effects."""
    return libraries_dir / "folders.xml"


@pytest.fixture
def flat_library(libraries_dir: Path) -> Path:
    """Library whose effects sit directly under the root."""
    return libraries_dir / "flat.xml"


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def parse_element() -> Callable[[str], XMLNode]:
    """Parse an XML snippet and return its root element node."""

    def _parse(xml: str) -> XMLNode:
        document = XMLParser().parse_string(xml)
        root = next(iter(document.element))
        node = document.child_by_name(root.tag)
        assert node is not None
        return node

    return _parse


# ============================================================================
# Sprite Fixtures
# ============================================================================


@pytest.fixture
def merged_sprites() -> list[SpriteDescriptor]:
    """Two documents' sprites merged: index 5 from the first, 5 + 100 from the second."""
    return [
        SpriteDescriptor(filename="a.png", width=32, height=32, frames=1, index=5),
        SpriteDescriptor(filename="b.png", width=32, height=32, frames=1, index=105),
    ]
