"""The full processing pipeline and a hand-off slot for its results."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from .bands import aggregate_bands
from .buffer import Buffer
from .channel import Channel, Frequency
from .config import Config
from .dsp import apply_rfft, calculate_magnitudes, preprocess
from .smoothing import apply_band_smoothing, apply_peak_smoothing, apply_scaling

FrequencyPair = tuple[list[Frequency], list[Frequency]]


def _next_power_of_two(value: int) -> int:
    return 1 if value <= 1 else 1 << (value - 1).bit_length()


def _copy_pair(pair: Sequence[Sequence[Frequency]]) -> FrequencyPair:
    left, right = pair
    return [replace(bar) for bar in left], [replace(bar) for bar in right]


class Processor:
    """Turns windows of interleaved stereo samples into per-band bars."""

    MIN_SAMPLE_SIZE = 32
    MAX_SAMPLE_SIZE = 4096

    def __init__(self, sample_rate: int, sample_size: int, config: Config | None = None) -> None:
        clamped = min(max(sample_size, self.MIN_SAMPLE_SIZE), self.MAX_SAMPLE_SIZE)
        self.sample_size = _next_power_of_two(clamped)
        self.sample_rate = sample_rate
        self.config = config if config is not None else Config()
        self.left = Channel.empty(self.sample_size // 2)
        self.right = Channel.empty(self.sample_size // 2)
        self.last_update = time.monotonic()

    def update(self, buffer: Buffer) -> bool:
        """Read one window from ``buffer`` and process it; False if none was ready."""
        samples = buffer.read_samples(self.sample_size)
        if samples is None or len(samples) != self.sample_size:
            return False
        self.process_samples(samples)
        return True

    def set_bands(self, bands: int) -> None:
        """Change the number of bands and reset every bar to silence."""
        bar = Frequency.empty()
        for channel in (self.left, self.right):
            resized = np.zeros(bands, dtype=np.float64)
            keep = min(bands, len(channel.band_magnitudes))
            resized[:keep] = channel.band_magnitudes[:keep]
            channel.band_magnitudes = resized
            channel.smoothed_band_magnitudes = np.zeros(bands, dtype=np.float64)
            channel.frequencies = [replace(bar) for _ in range(bands)]

    def current_frequencies(self) -> FrequencyPair:
        """The left and right bars as they stand now."""
        return self.left.frequencies, self.right.frequencies

    def process_samples(self, samples: Sequence[float]) -> None:
        """Run one window of interleaved samples through the whole pipeline."""
        current = time.monotonic()
        dt = current - self.last_update
        self.last_update = current

        left, right = self.left, self.right
        config = self.config

        preprocess(samples, left, right, config.window, self.sample_size)

        for channel in (left, right):
            apply_rfft(channel.fft_input)
            calculate_magnitudes(channel.fft_magnitudes, channel.fft_input)
            aggregate_bands(channel, self.sample_rate, config.banding)
            apply_band_smoothing(channel, config.band_smoothing)
            apply_scaling(channel, config.scaling)
            apply_peak_smoothing(channel, current, dt, config.peak_smoothing)


class Slot:
    """Holds the latest pair of bar lists, shared between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._frequencies: FrequencyPair | None = None

    def take(self) -> FrequencyPair | None:
        """A copy of the stored bars, or None if empty or currently being written."""
        if not self._lock.acquire(blocking=False):
            return None
        try:
            if self._frequencies is None:
                return None
            return _copy_pair(self._frequencies)
        finally:
            self._lock.release()

    def put(self, frequencies: Sequence[Sequence[Frequency]]) -> None:
        """Store a copy of a left and right list of bars, replacing any before."""
        stored = _copy_pair(frequencies)
        with self._lock:
            self._frequencies = stored