"""Keyframed attribute curves.

An ``AttributeCurve`` is the append-only list of keyframes declared for one
attribute category, in document order. Keyframes are never sorted, merged
or deduplicated; the consuming runtime interpolates them as given.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

AttributeT = TypeVar("AttributeT", bound=Enum)


class TangentHandle(BaseModel):
    """Bezier control points around a keyframe."""

    model_config = ConfigDict(frozen=True)

    left_x: float = 0.0
    left_y: float = 0.0
    right_x: float = 0.0
    right_y: float = 0.0


class Keyframe(BaseModel):
    """Single (frame, value) sample.

    Without a handle the segment to the next keyframe is linear.
    """

    frame: float
    value: float
    handle: TangentHandle | None = None

    @property
    def is_curved(self) -> bool:
        return self.handle is not None


class AttributeCurve(BaseModel):
    """Ordered keyframes of a single attribute category.

    Example:
        >>> curve = AttributeCurve()
        >>> _ = curve.add(0.0, 1.0)
        >>> curve.set_curve_points(-5.0, 1.0, 5.0, 1.0)
        >>> curve.keyframes[0].handle.right_x
        5.0
    """

    keyframes: list[Keyframe] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.keyframes)

    def __iter__(self) -> Iterator[Keyframe]:  # type: ignore[override]
        return iter(self.keyframes)

    def __getitem__(self, index: int) -> Keyframe:
        return self.keyframes[index]

    def add(self, frame: float, value: float) -> Keyframe:
        """Append a keyframe and return it."""
        keyframe = Keyframe(frame=frame, value=value)
        self.keyframes.append(keyframe)
        return keyframe

    def set_curve_points(
        self, left_x: float, left_y: float, right_x: float, right_y: float
    ) -> None:
        """Attach tangent handles to the most recently added keyframe.

        A later call replaces the handle set by an earlier one. No-op on an
        empty curve.
        """
        if not self.keyframes:
            return
        self.keyframes[-1].handle = TangentHandle(
            left_x=left_x, left_y=left_y, right_x=right_x, right_y=right_y
        )

    @property
    def is_empty(self) -> bool:
        return not self.keyframes

    @property
    def frames(self) -> list[float]:
        return [k.frame for k in self.keyframes]

    @property
    def values(self) -> list[float]:
        return [k.value for k in self.keyframes]


def new_curve_table(categories: Iterable[AttributeT]) -> dict[AttributeT, AttributeCurve]:
    """Create an empty curve for every category of a closed set."""
    return {category: AttributeCurve() for category in categories}
