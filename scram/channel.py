"""Per-channel processing state and the displayed frequency bars."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import numpy as np


@dataclass
class Frequency:
    """A displayed bar: current value, held peak and time the peak was set."""

    value: float = 0.0
    peak: float = 0.0
    ts: float = field(default_factory=time.monotonic)

    @classmethod
    def empty(cls) -> Frequency:
        """A silent bar stamped with the current time."""
        return cls(0.0, 0.0, time.monotonic())


def _empty_array() -> np.ndarray:
    return np.zeros(0, dtype=np.float64)


@dataclass
class Channel:
    """Buffers used while turning one channel of samples into bars."""

    fft_input: np.ndarray
    fft_magnitudes: np.ndarray
    band_magnitudes: np.ndarray = field(default_factory=_empty_array)
    smoothed_band_magnitudes: np.ndarray = field(default_factory=_empty_array)
    frequencies: list[Frequency] = field(default_factory=list)

    @classmethod
    def empty(cls, size: int) -> Channel:
        """A channel whose FFT input holds ``size`` samples."""
        return cls(
            fft_input=np.zeros(size, dtype=np.float64),
            fft_magnitudes=np.zeros(size // 2 + 1, dtype=np.float64),
        )