import dataclasses

import pytest

from scram.config import (
    Banding,
    Config,
    ExponentialSmoothing,
    FrequencyCutoff,
    FrequencyScale,
    MovingAverageSmoothing,
    NoBandSmoothing,
    PeakSmoothing,
    VolumeScale,
    Window,
)


def test_frequency_cutoff_defaults():
    cutoff = FrequencyCutoff()
    assert (cutoff.low, cutoff.high) == (20.0, 18000.0)


def test_peak_smoothing_defaults():
    peak = PeakSmoothing()
    assert peak.attack_rate == 20.0
    assert peak.decay_rate == 0.5
    assert peak.decay_limit == 1.0
    assert peak.peak_threshold == 1e-4


def test_config_defaults():
    config = Config()
    assert config.window is Window.BLACKMAN
    assert config.scaling is VolumeScale.LOGARITHMIC
    assert config.banding.scale is FrequencyScale.MEL
    assert config.banding.frequency_cutoff == FrequencyCutoff()
    assert config.band_smoothing == ExponentialSmoothing(0.5)
    assert config.peak_smoothing == PeakSmoothing()


def test_config_is_frozen():
    config = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.window = Window.HANN
    assert config.window is Window.BLACKMAN


def test_replace_builds_new_config():
    config = Config()
    changed = dataclasses.replace(config, band_smoothing=MovingAverageSmoothing(window_size=8))
    assert changed.band_smoothing.window_size == 8
    assert config.band_smoothing == ExponentialSmoothing()


def test_smoothing_variants_compare_by_value():
    assert NoBandSmoothing() == NoBandSmoothing()
    assert ExponentialSmoothing(0.3) != ExponentialSmoothing(0.5)
    assert MovingAverageSmoothing(4) == MovingAverageSmoothing(4)


def test_banding_custom_values():
    banding = Banding(FrequencyCutoff(20.0, 20000.0), FrequencyScale.BARK)
    assert banding.frequency_cutoff.high == 20000.0
    assert banding.scale is FrequencyScale.BARK