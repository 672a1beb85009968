"""Stereo audio spectrum analysis, band smoothing and spectrum visualizers."""

__version__ = "0.1.0"
__all__ = ["__version__"]