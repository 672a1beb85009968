"""The combination of visualisations shown by the application."""

from __future__ import annotations

from collections.abc import Sequence

from .channel import Frequency
from .geometry import Axis, Position, Size
from .half_block import HalfBlockRenderer, Placer
from .visualizers import RadialBloom, ScrollingSpectro, SpecSlice, StackedFreqs


class Visualizer:
    """Draws the spectrum strip, stacked bars and radial bloom through half blocks."""

    def __init__(self) -> None:
        self._renderer = HalfBlockRenderer(Size(0, 0), Axis.VERTICAL)
        self._spectro = ScrollingSpectro()

    @property
    def axis(self) -> Axis:
        return self._renderer.axis

    def resize(self, size: Sequence[int]) -> None:
        """Resize to ``size`` text cells."""
        self._renderer.resize(size)
        self._spectro.resize(self._renderer.dimensions())

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        placer: Placer,
    ) -> None:
        """Render one frame to ``placer``; nothing is drawn without bands."""
        if not left or not right:
            return

        renderer = self._renderer
        SpecSlice().draw(left, right, dt, renderer)
        StackedFreqs().draw(left, right, dt, renderer)
        RadialBloom().draw(left, right, dt, renderer)

        renderer.draw(placer, Position(0, 0))
        renderer.clear()