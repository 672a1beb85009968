"""Grouping FFT bins into frequency bands."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable

import numpy as np

from .channel import Channel
from .config import Banding, FrequencyScale

_Edges = list[tuple[float, float]]


def hz_to_mel(hz: float) -> float:
    """Convert a frequency in Hz to mels."""
    return float(2595.0 * np.log10(1.0 + np.float64(hz) / 700.0))


def mel_to_hz(mel: float) -> float:
    """Convert mels to a frequency in Hz."""
    return float(700.0 * (np.power(10.0, np.float64(mel) / 2595.0) - 1.0))


def hz_to_bark(hz: float) -> float:
    """Convert a frequency in Hz to barks."""
    ratio = np.float64(hz) / 600.0
    return float(7.0 * np.log(ratio + np.sqrt(ratio**2 + 1.0)))


def bark_to_hz(bark: float) -> float:
    """Convert barks to a frequency in Hz."""
    return float(600.0 * np.sinh(np.float64(bark) / 7.0))


def _index(value: float, rounding: Callable[[float], int]) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return rounding(value)


def _linear_edges(count: int, low: np.float64, high: np.float64) -> _Edges:
    ratio = (high - low) / count
    return [(low + band * ratio, low + (band + 1) * ratio) for band in range(count)]


def _log_edges(count: int, low: np.float64, high: np.float64) -> _Edges:
    base = (high / low) ** (1.0 / count)
    edges = [(low * base**band, low * base ** (band + 1)) for band in range(count - 1)]
    edges.append((low * base ** (count - 1), high))
    return edges


def _warped_edges(
    count: int,
    low: np.float64,
    high: np.float64,
    forward: Callable[[float], float],
    backward: Callable[[float], float],
) -> _Edges:
    start, stop = forward(low), forward(high)
    step = (stop - start) / count
    return [
        (backward(start + band * step), backward(start + (band + 1) * step))
        for band in range(count)
    ]


def _band_edges(scale: FrequencyScale, count: int, low: np.float64, high: np.float64) -> _Edges:
    if scale is FrequencyScale.LINEAR:
        return _linear_edges(count, low, high)
    if scale is FrequencyScale.LOGARITHMIC:
        return _log_edges(count, low, high)
    if scale is FrequencyScale.MEL:
        return _warped_edges(count, low, high, hz_to_mel, mel_to_hz)
    return _warped_edges(count, low, high, hz_to_bark, bark_to_hz)


def aggregate_bands(channel: Channel, sample_rate: int, banding: Banding) -> None:
    """Sum the channel's FFT magnitudes into its band magnitudes."""
    bands = channel.band_magnitudes
    bands[:] = 0.0
    count = len(bands)
    if count == 0:
        return

    magnitudes = channel.fft_magnitudes
    total = len(magnitudes)
    cutoff = banding.frequency_cutoff

    with np.errstate(all="ignore"):
        hz_per = (np.float64(sample_rate) / 2.0) / (np.float64(total) - 1.0)
        edges = _band_edges(
            banding.scale, count, np.float64(cutoff.low), np.float64(cutoff.high)
        )
        for band, (start_hz, end_hz) in enumerate(edges):
            start = min(_index(start_hz / hz_per, math.floor), total)
            end = min(_index(end_hz / hz_per, math.ceil), total)
            if end > start:
                bands[band] = magnitudes[start:end].sum() / total