"""Drawing targets and the interface of a visualisation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .channel import Frequency
from .geometry import Size
from .surface import Rgba, Surface


class Canvas(ABC):
    """A grid that colours can be placed on."""

    @abstractmethod
    def put(self, x: int, y: int, color: Rgba) -> None:
        """Place ``color`` at ``(x, y)`` relative to the canvas origin."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Widest extent available to draw into."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Tallest extent available to draw into."""


class Visual(ABC):
    """Draws a pair of channel bars onto a canvas."""

    @abstractmethod
    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        """Render one frame."""

    def resize(self, size: Size) -> None:
        """React to a change of the canvas size; nothing by default."""


class GridCanvas(Canvas):
    """An in-memory canvas; positions outside it are ignored."""

    def __init__(self, width: int, height: int) -> None:
        self._surface: Surface[Rgba | None] = Surface(Size(width, height), None)

    def put(self, x: int, y: int, color: Rgba) -> None:
        self._surface.set((x, y), color)

    @property
    def width(self) -> int:
        return self._surface.size.width

    @property
    def height(self) -> int:
        return self._surface.size.height

    def __getitem__(self, pos: Sequence[int]) -> Rgba | None:
        return self._surface[pos]

    def painted(self) -> dict[tuple[int, int], Rgba]:
        """Every cell that has been given a colour."""
        return {
            (x, y): cell
            for y, row in enumerate(self._surface.rows())
            for x, cell in enumerate(row)
            if cell is not None
        }

    def clear(self) -> None:
        """Forget every colour placed so far."""
        self._surface.clear()