"""Settings that drive the spectrum processing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class FrequencyScale(Enum):
    """How the frequency axis is divided into bands."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    BARK = "bark"
    MEL = "mel"


class Window(Enum):
    """Window function applied to samples before the FFT."""

    NONE = "none"
    HANN = "hann"
    HAMMING = "hamming"
    BLACKMAN = "blackman"


class VolumeScale(Enum):
    """How band magnitudes are mapped onto the 0..1 range."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


@dataclass(frozen=True)
class FrequencyCutoff:
    """Lowest and highest frequency, in Hz, that is split into bands."""

    low: float = 20.0
    high: float = 18000.0


@dataclass(frozen=True)
class Banding:
    """Frequency range and scale used to build bands."""

    frequency_cutoff: FrequencyCutoff = field(default_factory=FrequencyCutoff)
    scale: FrequencyScale = FrequencyScale.MEL


@dataclass(frozen=True)
class PeakSmoothing:
    """Attack and decay behaviour of the displayed bars."""

    attack_rate: float = 20.0
    decay_rate: float = 0.5
    decay_limit: float = 1.0
    peak_threshold: float = 1e-4


@dataclass(frozen=True)
class NoBandSmoothing:
    """Bands are passed through unchanged."""


@dataclass(frozen=True)
class ExponentialSmoothing:
    """Each band is blended with its smoothed neighbour."""

    factor: float = 0.5


@dataclass(frozen=True)
class MovingAverageSmoothing:
    """Each band is the mean of a window of bands centred on it."""

    window_size: int


BandSmoothing = Union[NoBandSmoothing, ExponentialSmoothing, MovingAverageSmoothing]


@dataclass(frozen=True)
class Config:
    """Complete processing configuration."""

    banding: Banding = field(default_factory=Banding)
    window: Window = Window.BLACKMAN
    scaling: VolumeScale = VolumeScale.LOGARITHMIC
    band_smoothing: BandSmoothing = field(default_factory=ExponentialSmoothing)
    peak_smoothing: PeakSmoothing = field(default_factory=PeakSmoothing)