"""Effect-library loader - pull-style enumeration of shapes and effects.

A library document looks like:

    <EFFECTS>
        <SHAPES>
            <IMAGE URL="flare.png" WIDTH="64" HEIGHT="64" FRAMES="1" INDEX="0"/>
        </SHAPES>
        <FOLDER NAME="Fire">
            <EFFECT NAME="Flame"> ... </EFFECT>
        </FOLDER>
        <EFFECT NAME="Smoke"> ... </EFFECT>
    </EFFECTS>

Callers open a document, pull shapes until ``NoMoreShapesError``, then pull
effects (passing the accumulated sprite set) until ``NoMoreEffectsError``.
Each effect pull builds the full subtree of that effect.

Example:
    >>> loader = EffectLibraryLoader(shape_offset=0)
    >>> loader.open("library.xml")
    >>> sprites = list(loader.iter_shapes())
    >>> effects = list(loader.iter_effects(sprites))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from sparkfx.core.config.models import LoaderConfig
from sparkfx.core.formats.library.builder import (
    EFFECT_ELEMENT,
    EffectTreeBuilder,
    build_sprite,
)
from sparkfx.core.formats.library.errors import (
    MissingRootError,
    NoMoreEffectsError,
    NoMoreShapesError,
)
from sparkfx.core.formats.library.models.descriptors import EffectDescriptor
from sparkfx.core.formats.library.models.library import EffectLibrary
from sparkfx.core.formats.library.models.sprite import SpriteDescriptor
from sparkfx.core.parsers.protocols import DocumentNode
from sparkfx.core.parsers.xml import DocumentParseError, XMLParser
from sparkfx.core.utils.logging import get_logger

logger = get_logger(__name__)

SHAPES_ELEMENT = "SHAPES"
IMAGE_ELEMENT = "IMAGE"
FOLDER_ELEMENT = "FOLDER"


@dataclass
class LibraryCursor:
    """Enumeration state of one opened document.

    Attributes:
        shape: Next IMAGE element to return
        folder: Folder holding ``effect`` (None in flat mode)
        effect: Next EFFECT element to build
        folder_mode: Effects are enumerated folder by folder
    """

    shape: DocumentNode | None = None
    folder: DocumentNode | None = None
    effect: DocumentNode | None = None
    folder_mode: bool = False


def _first_populated_folder(
    folder: DocumentNode | None,
) -> tuple[DocumentNode | None, DocumentNode | None]:
    """Return the first folder, from ``folder`` onward, holding an effect, and that effect."""
    while folder is not None:
        effect = folder.child_by_name(EFFECT_ELEMENT)
        if effect is not None:
            return folder, effect
        folder = folder.next_sibling_by_name(FOLDER_ELEMENT)
    return None, None


class EffectLibraryLoader:
    """Stateful reader of one effect-library document at a time.

    Not thread-safe; use one instance per thread. Descriptors returned by
    ``next_shape``/``next_effect`` are owned by the caller.
    """

    def __init__(
        self,
        config: LoaderConfig | None = None,
        *,
        shape_offset: int | None = None,
        parser: XMLParser | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            config: Loader options (defaults if None)
            shape_offset: Overrides ``config.shape_offset`` when given
            parser: XML parser to use (a new XMLParser if None)

        Raises:
            ValidationError: If ``shape_offset`` is negative
        """
        config = config or LoaderConfig()
        if shape_offset is not None:
            config = LoaderConfig.model_validate(
                {**config.model_dump(), "shape_offset": shape_offset}
            )
        self._config = config
        self._parser = parser or XMLParser()
        self._cursor = LibraryCursor()
        self._error = ""

    @property
    def shape_offset(self) -> int:
        return self._config.shape_offset

    @property
    def folder_mode(self) -> bool:
        return self._cursor.folder_mode

    @property
    def last_error(self) -> str:
        """Diagnostic of the latest failed call, "" when it succeeded."""
        return self._error

    def open(self, file_path: Path | str) -> None:
        """Open a library file.

        Raises:
            OSError: If the file does not exist or cannot be read
            DocumentParseError: If the XML is malformed
            MissingRootError: If the root container is absent
        """
        self._error = ""
        try:
            document = self._parser.parse(file_path)
        except (OSError, DocumentParseError) as e:
            self._error = str(e)
            raise
        logger.debug(f"Opened effect library {file_path}")
        self.open_document(document)

    def open_string(self, xml_content: str) -> None:
        """Open a library from an XML string.

        Raises:
            DocumentParseError: If the XML is malformed
            MissingRootError: If the root container is absent
        """
        self._error = ""
        try:
            document = self._parser.parse_string(xml_content)
        except DocumentParseError as e:
            self._error = str(e)
            raise
        self.open_document(document)

    def open_document(self, document: DocumentNode) -> None:
        """Start enumerating an already parsed document.

        Folder mode is decided here, once: if any folder holds an effect,
        effects are enumerated folder by folder and top-level effects are
        ignored; otherwise top-level effects are enumerated.

        Args:
            document: Node whose child is the root container

        Raises:
            MissingRootError: If the root container is absent. The previous
                cursor state is kept.
        """
        self._error = ""
        root = document.child_by_name(self._config.root_element)
        if root is None:
            error = MissingRootError(self._config.root_element)
            self._error = str(error)
            raise error

        cursor = LibraryCursor()
        shapes = root.child_by_name(SHAPES_ELEMENT)
        if shapes is not None:
            cursor.shape = shapes.child_by_name(IMAGE_ELEMENT)

        cursor.folder, cursor.effect = _first_populated_folder(
            root.child_by_name(FOLDER_ELEMENT)
        )
        cursor.folder_mode = cursor.folder is not None
        if not cursor.folder_mode:
            cursor.effect = root.child_by_name(EFFECT_ELEMENT)

        self._cursor = cursor
        logger.debug(f"Library opened in {'folder' if cursor.folder_mode else 'flat'} mode")

    def next_shape(self) -> SpriteDescriptor:
        """Return the next declared sprite.

        Raises:
            NoMoreShapesError: When every shape has been returned
        """
        self._error = ""
        node = self._cursor.shape
        if node is None:
            error = NoMoreShapesError()
            self._error = str(error)
            raise error

        sprite = build_sprite(node, self.shape_offset)
        self._cursor.shape = node.next_sibling_by_name(IMAGE_ELEMENT)
        return sprite

    def next_effect(self, sprites: Iterable[SpriteDescriptor]) -> EffectDescriptor:
        """Build and return the next effect with its whole subtree.

        Args:
            sprites: Merged sprite set used to resolve emitter shape indexes

        Raises:
            NoMoreEffectsError: When every effect has been returned
        """
        self._error = ""
        cursor = self._cursor
        node = cursor.effect
        if node is None:
            error = NoMoreEffectsError()
            self._error = str(error)
            raise error

        folder_path = ""
        if cursor.folder is not None:
            folder_path = cursor.folder.attribute_as_string("NAME")

        builder = EffectTreeBuilder(sprites, shape_offset=self.shape_offset)
        effect = builder.build_effect(node, folder_path=folder_path)

        cursor.effect = node.next_sibling_by_name(EFFECT_ELEMENT)
        if cursor.effect is None and cursor.folder is not None:
            cursor.folder, cursor.effect = _first_populated_folder(
                cursor.folder.next_sibling_by_name(FOLDER_ELEMENT)
            )

        return effect

    def iter_shapes(self) -> Iterator[SpriteDescriptor]:
        """Pull shapes until the shape cursor is exhausted."""
        while True:
            try:
                yield self.next_shape()
            except NoMoreShapesError:
                return

    def iter_effects(self, sprites: Iterable[SpriteDescriptor]) -> Iterator[EffectDescriptor]:
        """Pull effects until the effect cursor is exhausted."""
        sprite_set = list(sprites)
        while True:
            try:
                yield self.next_effect(sprite_set)
            except NoMoreEffectsError:
                return


def load_library(
    file_path: Path | str,
    *,
    shape_offset: int = 0,
    sprites: Iterable[SpriteDescriptor] | None = None,
) -> EffectLibrary:
    """Load every shape and effect of a library file.

    Shapes are appended to ``sprites`` (the sprite set of previously loaded
    libraries, if any) before effects are built, so emitters can reference
    sprites of this and earlier documents.

    Args:
        file_path: Library XML file
        shape_offset: Merge offset for this document's shape indexes
        sprites: Previously loaded sprites

    Returns:
        EffectLibrary with the merged sprite set and this document's effects

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If ``shape_offset`` is negative
        DocumentParseError: If the XML is malformed
        MissingRootError: If the root container is absent

    Example:
        >>> base = load_library("base.xml")
        >>> extra = load_library("extra.xml", shape_offset=len(base.sprites), sprites=base.sprites)
    """
    loader = EffectLibraryLoader(shape_offset=shape_offset)
    loader.open(file_path)

    sprite_set = list(sprites or [])
    sprite_set.extend(loader.iter_shapes())
    effects = list(loader.iter_effects(sprite_set))

    logger.debug(f"Loaded {len(effects)} effects and {len(sprite_set)} sprites from {file_path}")
    return EffectLibrary(sprites=sprite_set, effects=effects)
