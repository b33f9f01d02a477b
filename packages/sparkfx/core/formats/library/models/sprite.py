"""Sprite (shape) descriptors declared in a library's SHAPES section."""

from __future__ import annotations

import math
from pathlib import PureWindowsPath

from pydantic import BaseModel, model_validator


class SpriteDescriptor(BaseModel):
    """Metadata of one sprite sheet.

    ``index`` already includes the merge offset of the load session that
    produced the sprite, so sprites from several libraries can share one
    address space.

    Attributes:
        filename: Image location as written in the document
        name: Display name, derived from the filename when empty
        width: Frame width in pixels
        height: Frame height in pixels
        frames: Number of animation frames in the sheet
        index: Merge-adjusted sprite index
        max_radius: Radius enclosing a frame, half the diagonal unless declared
    """

    filename: str = ""
    name: str = ""
    width: float = 0.0
    height: float = 0.0
    frames: int = 0
    index: int = 0
    max_radius: float = 0.0

    @model_validator(mode="after")
    def _fill_derived(self) -> SpriteDescriptor:
        """Derive name and radius when the document leaves them out."""
        if not self.name and self.filename:
            # Documents authored on Windows use backslash separators
            self.name = PureWindowsPath(self.filename).stem
        if self.max_radius == 0.0:
            self.max_radius = math.hypot(self.width, self.height) / 2.0
        return self
