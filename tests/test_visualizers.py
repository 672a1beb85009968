import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from scram.blend import gradient, spectro_color
from scram.channel import Frequency
from scram.geometry import Size
from scram.surface import Rgba, Style
from scram.visual import Canvas, GridCanvas
from scram.visualizers import (
    RadialBloom,
    ScrollingSpectro,
    SpecCircular,
    SpecRibbon,
    SpecSlice,
    StackedChannels,
    StackedFreqs,
    StackedOutline,
)


class _Recorder(Canvas):
    def __init__(self, width, height):
        self._width = width
        self._height = height
        self.puts = []

    def put(self, x, y, color):
        self.puts.append((x, y, color))

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height


def _bars(values, peak=None):
    return [Frequency(v, v if peak is None else peak, 0.0) for v in values]


LEFT_STYLE = Style(Rgba.hex("#933"), Rgba.hex("#909"), 1.5)
RIGHT_STYLE = Style(Rgba.hex("#339"), Rgba.hex("#909"), 1.5)

unit = st.floats(min_value=0.0, max_value=1.0)


def test_spec_slice_paints_three_rows_per_band():
    canvas = GridCanvas(4, 5)
    left = _bars([0.0, 0.3, 0.6, 1.0])
    right = _bars([0.0, 0.1, 0.2, 0.4])
    SpecSlice().draw(left, right, 0.0, canvas)
    assert set(canvas.painted()) == {(x, y) for x in range(4) for y in range(3)}
    for x, (l, r) in enumerate(zip(left, right)):
        expected = spectro_color((l.value + r.value) / 2.0)
        assert all(canvas[(x, y)] == expected for y in range(3))
    assert canvas[(0, 3)] is None


def test_spec_slice_with_no_bands_paints_nothing():
    canvas = GridCanvas(4, 4)
    SpecSlice().draw([], [], 0.0, canvas)
    assert canvas.painted() == {}


def test_stacked_freqs_full_left_bars_fill_bottom_quarter():
    canvas = GridCanvas(8, 8)
    StackedFreqs().draw(_bars([1.0] * 4), _bars([0.0] * 4), 0.0, canvas)
    painted = canvas.painted()
    assert painted
    assert all(color == Rgba(0, 150, 255, 255) for color in painted.values())
    assert all(y >= 6 for _, y in painted)


def test_stacked_freqs_silence_paints_nothing():
    canvas = GridCanvas(8, 8)
    StackedFreqs().draw(_bars([0.0] * 4), _bars([0.0] * 4), 0.0, canvas)
    assert canvas.painted() == {}


def test_stacked_channels_full_bars_cover_column():
    canvas = GridCanvas(1, 10)
    StackedChannels(LEFT_STYLE, RIGHT_STYLE).draw(_bars([1.0]), _bars([1.0]), 0.0, canvas)
    painted = canvas.painted()
    assert set(painted) == {(0, y) for y in range(10)}
    assert canvas[(0, 4)] == LEFT_STYLE.color
    assert canvas[(0, 5)] == RIGHT_STYLE.color


def test_stacked_channels_silent_left_bar_is_one_cell_above_centre():
    canvas = _Recorder(1, 10)
    StackedChannels(LEFT_STYLE, RIGHT_STYLE).draw(_bars([0.0]), [], 0.0, canvas)
    assert len(canvas.puts) == 1
    x, y, color = canvas.puts[0]
    assert x == 0
    assert y < 5
    assert color == LEFT_STYLE.color


def test_stacked_outline_silence_draws_nothing():
    canvas = _Recorder(1, 10)
    StackedOutline(LEFT_STYLE, RIGHT_STYLE).draw(_bars([0.0]), _bars([0.0]), 0.0, canvas)
    assert canvas.puts == []


def test_stacked_outline_full_bars_put_tips_at_edges():
    canvas = _Recorder(1, 10)
    StackedOutline(LEFT_STYLE, RIGHT_STYLE).draw(_bars([1.0]), _bars([1.0]), 0.0, canvas)
    assert canvas.puts == [
        (0, 0, gradient(1.0, 5, LEFT_STYLE)[-1]),
        (0, 10, gradient(1.0, 5, RIGHT_STYLE)[0]),
    ]


def test_scrolling_spectro_without_size_draws_nothing():
    canvas = _Recorder(4, 4)
    ScrollingSpectro().draw(_bars([1.0]), _bars([1.0]), 0.0, canvas)
    assert canvas.puts == []


def test_scrolling_spectro_scrolls_rows_up():
    spectro = ScrollingSpectro()
    spectro.resize(Size(4, 3))
    white = Rgba.hex("#FFFFFF")
    base = Rgba.hex("#303066")

    first = GridCanvas(4, 3)
    spectro.draw(_bars([1.0] * 4), _bars([1.0] * 4), 0.0, first)
    assert [first[(x, 2)] for x in range(4)] == [white] * 4
    assert [first[(x, 0)] for x in range(4)] == [base] * 4

    second = GridCanvas(4, 3)
    spectro.draw(_bars([0.0] * 4), _bars([0.0] * 4), 0.0, second)
    assert [second[(x, 1)] for x in range(4)] == [white] * 4
    assert [second[(x, 2)] for x in range(4)] == [base] * 4
    assert len(second.painted()) == 12


def test_spec_circular_one_point_per_band():
    canvas = _Recorder(40, 40)
    SpecCircular().draw(_bars([0.0] * 16), _bars([0.0] * 16), 0.0, canvas)
    assert len(canvas.puts) == 16
    assert all(color == spectro_color(0.0) for _, _, color in canvas.puts)


def test_spec_circular_louder_bands_reach_further():
    def mean_distance(value):
        canvas = _Recorder(40, 40)
        SpecCircular().draw(_bars([value] * 16), _bars([value] * 16), 0.0, canvas)
        return sum(math.hypot(x - 20, y - 20) for x, y, _ in canvas.puts) / len(canvas.puts)

    assert mean_distance(1.0) > mean_distance(0.0)


def test_spec_ribbon_silent_band_sits_on_bottom_row():
    canvas = GridCanvas(10, 10)
    SpecRibbon().draw(_bars([0.0]), _bars([0.0]), 0.0, canvas)
    assert canvas.painted() == {(0, 9): spectro_color(0.0)}


@settings(max_examples=30)
@given(st.lists(unit, min_size=1, max_size=12))
def test_spec_ribbon_stays_inside_canvas(values):
    canvas = _Recorder(20, 15)
    SpecRibbon().draw(_bars(values), _bars(values), 0.0, canvas)
    assert all(0 <= x < 20 and 0 <= y < 15 for x, y, _ in canvas.puts)


def test_radial_bloom_requires_bands():
    with pytest.raises(ValueError):
        RadialBloom().draw([], [], 0.0, GridCanvas(10, 10))


def test_radial_bloom_silence_collapses_to_centre():
    canvas = _Recorder(20, 20)
    RadialBloom().draw(_bars([0.0] * 8), _bars([0.0] * 8), 0.0, canvas)
    assert len(canvas.puts) == 500
    assert {(x, y) for x, y, _ in canvas.puts} == {(10, 10)}


@settings(max_examples=20, deadline=None)
@given(st.lists(unit, min_size=1, max_size=8), st.floats(min_value=0.0, max_value=10.0))
def test_radial_bloom_stays_inside_canvas(values, dt):
    canvas = _Recorder(30, 24)
    RadialBloom().draw(_bars(values), _bars(values), dt, canvas)
    assert len(canvas.puts) >= 0 and all(0 <= x < 30 and 0 <= y < 24 for x, y, _ in canvas.puts)