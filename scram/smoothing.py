"""Band smoothing, volume scaling and peak smoothing."""

from __future__ import annotations

import numpy as np

from .channel import Channel
from .config import (
    BandSmoothing,
    ExponentialSmoothing,
    MovingAverageSmoothing,
    NoBandSmoothing,
    PeakSmoothing,
    VolumeScale,
)

_MIN_DB = -60.0
_MAX_DB = 0.0


def apply_band_smoothing(channel: Channel, config: BandSmoothing) -> None:
    """Smooth the channel's band magnitudes across neighbouring bands."""
    magnitudes = channel.band_magnitudes
    smoothed = channel.smoothed_band_magnitudes
    count = len(magnitudes)
    if count == 0:
        return

    match config:
        case NoBandSmoothing():
            smoothed[:count] = magnitudes[:count]
        case ExponentialSmoothing(factor=factor):
            factor = min(max(factor, 0.0), 1.0)
            for i in range(count):
                previous = smoothed[max(i - 1, 0)]
                smoothed[i] = factor * magnitudes[i] + (1.0 - factor) * previous
        case MovingAverageSmoothing(window_size=window_size):
            half = max(window_size, 1) // 2
            with np.errstate(all="ignore"):
                for i in range(len(smoothed)):
                    start = max(i - half, 0)
                    end = min(i + half + 1, count)
                    span = magnitudes[start:end]
                    smoothed[i] = span.sum() / len(span) if len(span) else np.nan
        case _:
            raise TypeError(f"unknown band smoothing: {config!r}")

    smoothed[:] = np.fmax(smoothed, 0.0)


def apply_scaling(channel: Channel, config: VolumeScale) -> None:
    """Map smoothed magnitudes onto 0..1 and store them as band magnitudes."""
    smoothed = channel.smoothed_band_magnitudes
    count = min(len(smoothed), len(channel.band_magnitudes))
    source = smoothed[:count]

    if config is VolumeScale.LINEAR:
        peak = float(source.max()) if count else 0.0
        ceiling = min(max(peak, 0.0), 1.0) * 2.0
        with np.errstate(all="ignore"):
            scaled = np.clip(source / ceiling, 0.0, 1.0)
    elif config is VolumeScale.LOGARITHMIC:
        with np.errstate(all="ignore"):
            db = np.where(source > 0.0, 20.0 * np.log10(source), _MIN_DB)
        scaled = np.clip((db - _MIN_DB) / (_MAX_DB - _MIN_DB), 0.0, 1.0)
    else:
        raise TypeError(f"unknown volume scale: {config!r}")

    channel.band_magnitudes[:count] = scaled


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def apply_peak_smoothing(
    channel: Channel, current: float, dt: float, config: PeakSmoothing
) -> None:
    """Move each bar towards its band, rising quickly and falling slowly.

    ``current`` is a monotonic timestamp in seconds and ``dt`` the time since
    the previous update.
    """
    for bar, band in zip(channel.frequencies, channel.band_magnitudes):
        band = float(band)
        if band > bar.value:
            bar.value = min(bar.value + config.attack_rate * dt, band)
            bar.peak = bar.value
            bar.ts = current
        elif band < bar.value:
            bar.value = max(bar.value - config.decay_rate * dt, band)

            elapsed = max(current - bar.ts, 0.0)
            progress = min(elapsed / config.decay_limit, 1.0)
            target = bar.peak * (1.0 - progress)
            bar.value = _clamp(max(bar.value, target, band))

            if bar.value < config.peak_threshold:
                bar.value = 0.0
                bar.peak = 0.0

        bar.value = _clamp(bar.value)
        bar.peak = _clamp(bar.peak)