"""Interpolation, colour blending and colour ramps."""

from __future__ import annotations

from enum import Enum

from .surface import Rgba, Style


class Direction(Enum):
    """Which way a bar grows from the centre line."""

    UP = "up"
    DOWN = "down"

    def is_down(self) -> bool:
        return self is Direction.DOWN

    def is_up(self) -> bool:
        return self is Direction.UP


def inverse_lerp(a: float, b: float, t: float) -> float:
    """Where ``t`` lies between ``a`` and ``b``, as a fraction."""
    return (t - a) / (b - a)


def lerp(a: float, b: float, t: float) -> float:
    """The value a fraction ``t`` of the way from ``a`` to ``b``."""
    return a + (b - a) * t


def lerp_color(left: Rgba, right: Rgba, t: float) -> Rgba:
    """Blend colour channels; alpha is the larger of the two."""
    r0, g0, b0, a0 = left.to_float()
    r1, g1, b1, a1 = right.to_float()
    return Rgba.from_float((lerp(r0, r1, t), lerp(g0, g1, t), lerp(b0, b1, t), max(a0, a1)))


# Alpha is the larger of either input in all of the following.
# glow: lighten; filtering: darken; jitter: overlay.


def darken_color(left: Rgba, right: Rgba) -> Rgba:
    """The smaller of each colour channel."""
    return Rgba(min(left.r, right.r), min(left.g, right.g), min(left.b, right.b), max(left.a, right.a))


def lighten_color(left: Rgba, right: Rgba) -> Rgba:
    """The larger of each colour channel."""
    return Rgba(max(left.r, right.r), max(left.g, right.g), max(left.b, right.b), max(left.a, right.a))


def _overlay(a: int, b: int) -> int:
    if a < 128:
        return (2 * a * b) // 255
    return 255 - (2 * (255 - a) * (255 - b)) // 255


def overlay_color(left: Rgba, right: Rgba) -> Rgba:
    """The overlay blend of each colour channel."""
    return Rgba(
        _overlay(left.r, right.r),
        _overlay(left.g, right.g),
        _overlay(left.b, right.b),
        max(left.a, right.a),
    )


def gradient(t: float, steps: int, style: Style) -> list[Rgba]:
    """``steps`` colours running from the style's colour towards its accent."""
    reach = min(max(t, 0.0), 1.0) * style.ratio
    return [
        lerp_color(style.color, style.accent, reach * inverse_lerp(0.0, float(steps), float(y)))
        for y in range(steps)
    ]


_SPECTRO = [
    Rgba.hex("#303066"),
    Rgba.hex("#0000FF"),
    Rgba.hex("#00FFFF"),
    Rgba.hex("#00FF00"),
    Rgba.hex("#FFFF00"),
    Rgba.hex("#FF0000"),
    Rgba.hex("#FFFFFF"),
]


def spectro_color(t: float) -> Rgba:
    """A heat-map colour for an intensity ``t`` in 0..1."""
    c = _SPECTRO
    if t < 0.20:
        return lerp_color(c[0], c[1], inverse_lerp(0.00, 0.20, t))
    if t < 0.35:
        return lerp_color(c[1], c[2], inverse_lerp(0.20, 0.35, t))
    if t < 0.50:
        return lerp_color(c[2], c[3], inverse_lerp(0.35, 0.50, t))
    if t < 0.60:
        return lerp_color(c[3], c[4], inverse_lerp(0.50, 0.60, t))
    if t < 0.80:
        return lerp_color(c[4], c[5], inverse_lerp(0.70, 0.80, t))
    return lerp_color(c[5], c[6], inverse_lerp(0.80, 1.00, t))