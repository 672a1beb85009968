"""Sizes, positions and axes on a drawing grid."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple


class Size(NamedTuple):
    """Width and height of a grid."""

    width: int
    height: int

    def scale(self, other: Sequence[int]) -> Size:
        """Multiply width and height by the matching parts of ``other``."""
        width, height = other
        return Size(self.width * width, self.height * height)


class Position(NamedTuple):
    """A cell on a grid."""

    x: int
    y: int


class Axis(Enum):
    """Direction along which bars grow."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def main(self, size: Sequence[int]) -> int:
        """The extent of ``size`` along this axis."""
        width, height = size
        return width if self is Axis.HORIZONTAL else height

    def cross(self, size: Sequence[int]) -> int:
        """The extent of ``size`` across this axis."""
        width, height = size
        return height if self is Axis.HORIZONTAL else width

    def pack(self, main: int, cross: int) -> tuple[int, int]:
        """Turn along/across coordinates into an ``(x, y)`` pair."""
        if self is Axis.HORIZONTAL:
            return main, cross
        return cross, main