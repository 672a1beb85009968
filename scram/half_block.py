"""A canvas that packs two colour cells into one text cell using half blocks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from .geometry import Axis, Position, Size
from .surface import Rgba, Surface
from .visual import Canvas

UPPER = "\u2580"
LOWER = "\u2584"
LEFT = "\u258c"
RIGHT = "\u2590"


@dataclass(frozen=True)
class Pixel:
    """A text cell: a glyph with optional foreground and background colours.

    A colour of None means the terminal's default colour.
    """

    char: str
    fg: Rgba | None = None
    bg: Rgba | None = None


class Placer(Protocol):
    """Anything that text cells can be written to."""

    def put(self, pos: Position, pixel: Pixel) -> None: ...


def _scale_for(axis: Axis) -> Size:
    return Size(2, 1) if axis is Axis.HORIZONTAL else Size(1, 2)


def _glyph(
    first: Rgba | None, second: Rgba | None, lead: str, trail: str
) -> Pixel | None:
    if first is None and second is None:
        return None
    if second is None:
        return Pixel(lead, first, None)
    if first is None:
        return Pixel(trail, second, None)
    return Pixel(lead, first, second)


class HalfBlockRenderer(Canvas):
    """Doubles the resolution along one axis by drawing half-block glyphs."""

    def __init__(self, size: Sequence[int], axis: Axis) -> None:
        self._axis = axis
        self._size = Size(*size).scale(_scale_for(axis))
        self._surface: Surface[Rgba | None] = Surface(self._size, None)

    @property
    def axis(self) -> Axis:
        return self._axis

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    def clear(self) -> None:
        """Reset every cell to the default colour."""
        self._surface.clear()

    def put(self, x: int, y: int, color: Rgba) -> None:
        """Colour one half cell; positions outside the grid are ignored."""
        self._surface.set(Position(x, y), color)

    def resize(self, size: Sequence[int]) -> Size:
        """Resize to ``size`` text cells, discarding contents; returns ``size``."""
        unscaled = Size(*size)
        self._size = unscaled.scale(_scale_for(self._axis))
        self._surface.resize(self._size)
        return unscaled

    def dimensions(self) -> Size:
        """The size in half cells."""
        return self._size

    def cells(self, pos: Sequence[int]) -> Iterator[tuple[Position, Pixel]]:
        """The text cells to draw with the top-left corner at ``pos``.

        Cells whose two halves are both the default colour are skipped.
        """
        origin = Position(*pos)
        surface = self._surface
        if self._axis is Axis.VERTICAL:
            for y1 in range(self._size.height // 2):
                for x1 in range(self._size.width):
                    pixel = _glyph(
                        surface[(x1, 2 * y1)], surface[(x1, 2 * y1 + 1)], UPPER, LOWER
                    )
                    if pixel is not None:
                        yield Position(origin.x + x1, origin.y + y1), pixel
        else:
            for y1 in range(self._size.height):
                for x1 in range(self._size.width // 2):
                    pixel = _glyph(
                        surface[(2 * x1, y1)], surface[(2 * x1 + 1, y1)], LEFT, RIGHT
                    )
                    if pixel is not None:
                        yield Position(origin.x + x1, origin.y + y1), pixel

    def draw(self, placer: Placer, pos: Sequence[int]) -> None:
        """Write every non-empty text cell to ``placer``, offset by ``pos``."""
        for position, pixel in self.cells(pos):
            placer.put(position, pixel)