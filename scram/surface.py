"""Colours, styles and a fixed-size grid of cells."""

from __future__ import annotations

import math
import string
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar

from .geometry import Size

T = TypeVar("T")


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return round(min(max(value, 0.0), 1.0) * 255)


class Rgba(NamedTuple):
    """An 8-bit per channel colour."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def hex(cls, text: str) -> Rgba:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
        digits = text[1:] if text.startswith("#") else text
        if not digits or any(c not in string.hexdigits for c in digits):
            raise ValueError(f"invalid colour: {text!r}")
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"invalid colour: {text!r}")
        values = bytes.fromhex(digits)
        if len(values) == 3:
            values += b"\xff"
        return cls(*values)

    def to_float(self) -> tuple[float, float, float, float]:
        """The channels as fractions of 255."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)

    @classmethod
    def from_float(cls, values: Iterable[float]) -> Rgba:
        """Build a colour from four fractions, clamped to 0..1."""
        r, g, b, a = (_to_byte(float(v)) for v in values)
        return cls(r, g, b, a)


@dataclass(frozen=True)
class Style:
    """Base colour, accent colour and how far towards the accent to blend."""

    color: Rgba
    accent: Rgba
    ratio: float


class Surface(Generic[T]):
    """A grid of cells addressed by ``(x, y)``; cells start as ``fill``."""

    def __init__(self, size: Sequence[int], fill: T) -> None:
        self._fill = fill
        self._size = Size(*size)
        self._rows = self._blank(self._size)

    def _blank(self, size: Size) -> list[list[T]]:
        return [[self._fill] * size.width for _ in range(size.height)]

    @property
    def size(self) -> Size:
        return self._size

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._size.width and 0 <= y < self._size.height

    def __getitem__(self, pos: Sequence[int]) -> T:
        x, y = pos
        if not self._contains(x, y):
            raise IndexError(f"position {(x, y)} outside {tuple(self._size)}")
        return self._rows[y][x]

    def set(self, pos: Sequence[int], value: T) -> None:
        """Set a cell; positions outside the grid are ignored."""
        x, y = pos
        if self._contains(x, y):
            self._rows[y][x] = value

    def clear(self) -> None:
        """Reset every cell to the fill value."""
        self._rows = self._blank(self._size)

    def resize(self, size: Sequence[int]) -> None:
        """Change the size, discarding all contents."""
        self._size = Size(*size)
        self._rows = self._blank(self._size)

    def scroll_up_copy(self, row: int) -> None:
        """Copy the row below ``row`` into ``row``."""
        if not 0 <= row < self._size.height - 1:
            raise IndexError(f"row {row} has no row below it")
        self._rows[row] = list(self._rows[row + 1])

    def rows(self) -> Iterator[tuple[T, ...]]:
        """The cells, one tuple per row from the top."""
        return (tuple(row) for row in self._rows)