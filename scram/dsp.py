"""Windowing, real FFT and magnitude extraction."""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence, Sequence

import numpy as np

from .channel import Channel
from .config import Window

TAU = 2.0 * math.pi

RFFT_SIZES = frozenset(1 << bits for bits in range(5, 13))

WindowFn = Callable[[object, float], np.ndarray]


def _none(d, n):
    return np.ones_like(np.asarray(d, dtype=np.float64))


def _hann(d, n):
    d = np.asarray(d, dtype=np.float64)
    return 0.5 * (1.0 - np.cos(TAU * d / n - 1.0))


def _hamming(d, n):
    d = np.asarray(d, dtype=np.float64)
    return 0.54 - 0.46 * np.cos(TAU * d / n - 1.0)


def _blackman(d, n):
    d = np.asarray(d, dtype=np.float64)
    return 0.42 - 0.5 * np.cos(TAU * d / n - 1.0) + 0.08 * np.cos(TAU * 2.0 * d / n - 1.0)


_WINDOWS: dict[Window, WindowFn] = {
    Window.NONE: _none,
    Window.HANN: _hann,
    Window.HAMMING: _hamming,
    Window.BLACKMAN: _blackman,
}


def window_function(window: Window) -> WindowFn:
    """The weighting function ``f(index, length)`` for ``window``."""
    return _WINDOWS[window]


def preprocess(
    samples: Sequence[float],
    left: Channel,
    right: Channel,
    window: Window,
    sample_size: int,
) -> None:
    """Split interleaved stereo samples into the channels' FFT inputs, windowed."""
    data = np.asarray(samples, dtype=np.float64)
    count = len(data) // 2
    if count > len(left.fft_input) or count > len(right.fft_input):
        raise ValueError(f"{count} frames do not fit the channel FFT input")
    frames = data[: count * 2].reshape(count, 2)
    weights = window_function(window)(np.arange(count), float(sample_size))
    left.fft_input[:count] = frames[:, 0] * weights
    right.fft_input[:count] = frames[:, 1] * weights


def apply_rfft(data: MutableSequence[float]) -> MutableSequence[float]:
    """Replace ``data`` in place by its packed real FFT.

    Element 0 holds the DC term, element 1 the Nyquist term, and the pairs
    that follow hold real and imaginary parts of bins 1 to n/2 - 1.
    """
    size = len(data)
    if size not in RFFT_SIZES:
        raise ValueError(f"unsupported FFT size: {size}")
    spectrum = np.fft.rfft(np.asarray(data, dtype=np.float64))
    half = size // 2
    packed = np.empty(size, dtype=np.float64)
    packed[0] = spectrum[0].real
    packed[1] = spectrum[half].real
    packed[2::2] = spectrum[1:half].real
    packed[3::2] = spectrum[1:half].imag
    data[:] = packed
    return data


def calculate_magnitudes(
    magnitudes: MutableSequence[float], raw: Sequence[float]
) -> MutableSequence[float]:
    """Fill ``magnitudes`` from packed FFT output ``raw`` and return it."""
    values = np.asarray(raw, dtype=np.float64)
    nyquist = len(values)
    bins = nyquist // 2 + 1
    pairs = values[1 : 1 + 2 * (bins - 2)].reshape(bins - 2, 2)
    magnitudes[0] = abs(values[0])
    magnitudes[1 : bins - 1] = np.hypot(pairs[:, 0], pairs[:, 1])
    magnitudes[bins - 1] = abs(values[nyquist - 1])
    return magnitudes