import pytest
from hypothesis import given
from hypothesis import strategies as st

from scram.blend import (
    Direction,
    darken_color,
    gradient,
    inverse_lerp,
    lerp,
    lerp_color,
    lighten_color,
    overlay_color,
    spectro_color,
)
from scram.surface import Rgba, Style

bytes_ = st.integers(0, 255)
colors = st.builds(Rgba, bytes_, bytes_, bytes_, bytes_)
floats = st.floats(-1e3, 1e3, allow_nan=False)


def test_direction_predicates():
    assert Direction.DOWN.is_down() and not Direction.DOWN.is_up()
    assert Direction.UP.is_up() and not Direction.UP.is_down()


@given(floats, floats)
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == pytest.approx(b, abs=1e-9)


@given(floats, floats, st.floats(0, 1))
def test_inverse_lerp_undoes_lerp(a, b, t):
    if abs(b - a) > 1e-3:
        assert inverse_lerp(a, b, lerp(a, b, t)) == pytest.approx(t, abs=1e-6)


@given(colors, colors)
def test_lerp_color_endpoints(left, right):
    alpha = max(left.a, right.a)
    assert lerp_color(left, right, 0.0) == left._replace(a=alpha)
    assert lerp_color(left, right, 1.0) == right._replace(a=alpha)


@given(colors, colors)
def test_darken_and_lighten(left, right):
    dark = darken_color(left, right)
    light = lighten_color(left, right)
    for d, l, a, b in zip(dark[:3], light[:3], left[:3], right[:3]):
        assert d == min(a, b)
        assert l == max(a, b)
    assert dark.a == light.a == max(left.a, right.a)


@given(colors)
def test_overlay_extremes(color):
    black = Rgba(0, 0, 0, 0)
    white = Rgba(255, 255, 255, 0)
    assert overlay_color(black, color)[:3] == (0, 0, 0)
    assert overlay_color(white, color)[:3] == (255, 255, 255)
    assert overlay_color(black, color).a == color.a


@given(st.floats(0, 1), st.integers(0, 40))
def test_gradient_length_and_start(t, steps):
    style = Style(Rgba.hex("#0FF"), Rgba.hex("#F00"), 3.5)
    ramp = gradient(t, steps, style)
    assert len(ramp) == steps
    if ramp:
        assert ramp[0] == style.color


def test_gradient_at_zero_is_flat():
    style = Style(Rgba.hex("#933"), Rgba.hex("#909"), 1.5)
    assert gradient(0.0, 5, style) == [style.color] * 5


@pytest.mark.parametrize(
    "t, text",
    [
        (0.0, "#303066"),
        (0.2, "#0000FF"),
        (0.35, "#00FFFF"),
        (0.5, "#00FF00"),
        (0.8, "#FF0000"),
        (1.0, "#FFFFFF"),
    ],
)
def test_spectro_color_stops(t, text):
    assert spectro_color(t) == Rgba.hex(text)


def test_spectro_color_nan_falls_to_last_band():
    assert spectro_color(float("nan")).a == Rgba.hex("#FFFFFF").a