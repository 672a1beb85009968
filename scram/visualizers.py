"""Ready-made visualisations of a pair of channel bars."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .blend import Direction, gradient, lerp, lerp_color, spectro_color
from .channel import Frequency
from .geometry import Axis, Size
from .surface import Rgba, Style, Surface
from .visual import Canvas, Visual

__all__ = [
    "RadialBloom",
    "ScrollingSpectro",
    "SpecCircular",
    "SpecRibbon",
    "SpecSlice",
    "StackedChannels",
    "StackedFreqs",
    "StackedOutline",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
TAU = 2.0 * math.pi


def _to_int(value: float) -> int:
    """Truncate towards zero, saturating at the 32-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return int(max(min(value, _I32_MAX), _I32_MIN))


def _round_half_away(value: float) -> int:
    """Round a non-negative value, halves going up."""
    return max(math.floor(value + 0.5), 0)


def _clamp01(value: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, 0.0), 1.0)


class RadialBloom(Visual):
    """A ring of points around the centre whose radius follows the energy."""

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        if not left:
            raise ValueError("radial bloom needs at least one band")

        width, height = canvas.width, canvas.height
        cx, cy = width // 2, height // 2

        energy = sum(bar.value for bar in left) + sum(bar.value for bar in right)
        avg = energy / len(left)
        ceiling = 4.0 * len(left)
        norm = min(max(avg / ceiling, 0.0), 1.0)

        radius = (min(width, height) / 2.0) * 0.5
        current = math.sqrt(norm) * radius

        points = 500 + _to_int(norm * 1e5)
        for i in range(points):
            p = i % len(left)
            angle = (i / points) * TAU + 0.7 * dt

            influence = (left[p].value + right[p].value) / 2.0
            modulated = current + influence * (radius * 3.0)

            x = _to_int(cx + modulated * math.cos(angle))
            y = _to_int(cy + modulated * math.sin(angle))

            peak = (left[p].peak + right[p].peak) / 2.0
            color = lerp_color(spectro_color(influence), spectro_color(peak), modulated)

            if not (0 <= x < width and 0 <= y < height):
                continue
            canvas.put(x, y, color)

            if modulated < 50.0:
                continue

            if x + 1 < width:
                canvas.put(x + 1, y, color)
            if x > 0:
                canvas.put(x - 1, y, color)
            if y + 1 < height:
                canvas.put(x, y + 1, color)
            if y > 0:
                canvas.put(x, y - 1, color)


class ScrollingSpectro(Visual):
    """A spectrogram whose newest row is at the bottom and which scrolls up."""

    def __init__(self) -> None:
        self._buffer: Surface[Rgba] = Surface(Size(0, 0), spectro_color(0.0))
        self._max_value = 1.0

    def _color(self, magnitude: float) -> Rgba:
        return spectro_color(_clamp01(magnitude / self._max_value))

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        buffer = self._buffer
        width, height = buffer.size
        total = len(left)

        if height > 0:
            for row in range(height - 1):
                buffer.scroll_up_copy(row)

            y = height - 1
            if total:
                w = max(width / total, 1.0)
                span = math.ceil(w)
                for i in range(total):
                    x = int(i * w)
                    color = self._color((left[i].value + right[i].value) / 2.0 * 1.3)
                    for dx in range(span):
                        buffer.set((x + dx, y), color)

        for y, row in enumerate(buffer.rows()):
            for x, cell in enumerate(row):
                canvas.put(x, y, cell)

    def resize(self, size: Size) -> None:
        self._buffer.resize(size)


class SpecCircular(Visual):
    """One point per band on a circle, pushed outwards by its value."""

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        width, height = canvas.width, canvas.height
        cx, cy = width // 2, height // 2
        total = len(left)

        max_radius = (min(width, height) / 2.0) * 1.3
        base_radius = max_radius * 0.1

        for i, (l, r) in enumerate(zip(left, right)):
            angle = (i / total) * TAU

            value = (l.value + r.value) / 2.0
            peak = (l.peak + r.peak) / 2.0

            norm = _clamp01(value)
            current_radius = base_radius + norm * (max_radius - base_radius)
            color = spectro_color(_clamp01(peak))

            x = _to_int(cx + current_radius * math.cos(angle))
            y = _to_int(cy + current_radius * math.sin(angle))
            canvas.put(x, y, color)


class SpecRibbon(Visual):
    """A line of band heights with short horizontal trails."""

    TRAIL_DURATION = 0.2
    TRAIL_POINTS = 10

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        width, height = canvas.width, canvas.height
        total = len(left)
        max_y = height - 1

        for i, (l, r) in enumerate(zip(left, right)):
            x = _to_int(i / total * width)
            if x < 0 or x >= width:
                continue

            value = (l.value + r.value) / 2.0
            y = max_y - _to_int(_clamp01(value) * height)

            velocity = lerp(50.0, -50.0, i / total)
            color = spectro_color(_clamp01(value))

            if 0 <= y <= max_y:
                canvas.put(x, y, color)

            for j in range(1, self.TRAIL_POINTS + 1):
                dt_offset = j * (self.TRAIL_DURATION / self.TRAIL_POINTS)
                trail_x = x - _to_int(velocity * dt_offset)
                fade = j / self.TRAIL_POINTS
                trail_color = lerp_color(color, color, fade)
                if 0 <= trail_x < width and 0 <= y < height:
                    canvas.put(trail_x, y, trail_color)


class SpecSlice(Visual):
    """A three-row strip coloured by each band's value."""

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        if not left:
            return
        width = min(canvas.width / len(left), 1.0)
        span = math.ceil(width)

        for i, (l, r) in enumerate(zip(left, right)):
            color = spectro_color((l.value + r.value) / 2.0)
            x = _to_int(i * width)
            for dx in range(span):
                for y in range(3):
                    canvas.put(x + dx, y, color)


class StackedChannels(Visual):
    """Left bars grow up from the centre line, right bars grow down."""

    def __init__(self, left: Style, right: Style) -> None:
        self.left = left
        self.right = right
        self.axis = Axis.VERTICAL

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        for pos, freq in enumerate(left):
            self._draw_bar(freq, self.left, pos, Direction.UP, canvas)
        for pos, freq in enumerate(right):
            self._draw_bar(freq, self.right, pos, Direction.DOWN, canvas)

    def _draw_bar(
        self,
        freq: Frequency,
        style: Style,
        offset: int,
        direction: Direction,
        canvas: Canvas,
    ) -> None:
        center = self.axis.main((canvas.width, canvas.height)) // 2
        v = freq.value

        scaled = v * center
        lenf = min(0.0 if math.isnan(scaled) else max(scaled, 0.0), float(center))
        length = max(_round_half_away(lenf), 1)

        if direction.is_down():
            end = center + length + 1
        else:
            end = max(max(center - length, 0) - 1, 0)

        colors = gradient(v, length, style)
        ordered = colors if direction.is_down() else list(reversed(colors))

        for p, color in zip(range(min(center, end), max(center, end)), ordered):
            x, y = self.axis.pack(p, offset)
            canvas.put(x, y, color)


class StackedFreqs(Visual):
    """Left and right bars side by side in the bottom quarter of the canvas."""

    LEFT_COLOR = Rgba(0, 150, 255, 255)
    RIGHT_COLOR = Rgba(255, 100, 0, 255)

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        if not left:
            return
        width = canvas.width
        height = canvas.height // 4
        w = max(width / len(left), 1.0)

        for i, (l, r) in enumerate(zip(left, right)):
            cx = _to_int(i * w + w / 2.0)
            if cx < 0 or cx > width:
                continue

            lvh = _to_int(_clamp01(l.value) * height)
            rvh = _to_int(_clamp01(r.value) * height * 0.6)

            offset = cx + _to_int(w / 4.0)
            if offset < 0 or offset >= width:
                continue

            for y in range(min(lvh, height)):
                canvas.put(cx, height * 4 - 1 - y, self.LEFT_COLOR)
            for y in range(min(rvh, height)):
                canvas.put(offset, height * 4 - 1 - y, self.RIGHT_COLOR)


class StackedOutline(Visual):
    """Only the tip of each stacked bar is drawn."""

    def __init__(self, left: Style, right: Style) -> None:
        self.left = left
        self.right = right
        self.axis = Axis.VERTICAL

    def draw(
        self,
        left: Sequence[Frequency],
        right: Sequence[Frequency],
        dt: float,
        canvas: Canvas,
    ) -> None:
        for pos, freq in enumerate(left):
            self._draw_outline(freq, self.left, pos, Direction.UP, canvas)
        for pos, freq in enumerate(right):
            self._draw_outline(freq, self.right, pos, Direction.DOWN, canvas)

    def _draw_outline(
        self,
        bar: Frequency,
        style: Style,
        offset: int,
        direction: Direction,
        canvas: Canvas,
    ) -> None:
        center = self.axis.main((canvas.width, canvas.height)) // 2
        v = bar.value

        scaled = v * center
        lenf = min(0.0 if math.isnan(scaled) else max(scaled, 0.0), float(center))
        length = _round_half_away(lenf)

        end = center + length if direction.is_down() else max(center - length, 0)

        colors = gradient(bar.value, length, style)
        if not colors:
            return
        color = colors[0] if direction.is_down() else colors[-1]
        x, y = self.axis.pack(end, offset)
        canvas.put(x, y, color)