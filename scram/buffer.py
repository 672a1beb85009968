"""Sources of interleaved stereo samples."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence

import numpy as np


class Buffer(ABC):
    """Something that yields full windows of interleaved samples."""

    @abstractmethod
    def read_samples(self, sample_size: int) -> np.ndarray | None:
        """Return ``sample_size`` samples, or None when no full window is ready."""


class Source(ABC):
    """Describes the stream feeding a buffer."""

    @abstractmethod
    def sample_rate(self) -> int:
        """Samples per second."""

    @abstractmethod
    def sample_size(self) -> int:
        """Number of samples in one analysis window."""


class ChunkBuffer(Buffer):
    """Keeps a sliding window over chunks of samples arriving from an iterable."""

    def __init__(self, chunks: Iterable[Sequence[float]], sample_size: int) -> None:
        self._chunks = iter(chunks)
        self._window: deque[float] = deque()
        self._capacity = sample_size

    def read_samples(self, sample_size: int) -> np.ndarray | None:
        """Take the next chunk; return the window once it holds exactly ``sample_size``."""
        try:
            data = list(next(self._chunks))
        except StopIteration:
            return None

        overflow = max(0, len(self._window) + len(data) - sample_size)
        if overflow > len(self._window):
            raise ValueError(
                f"chunk of {len(data)} samples does not fit a window of {sample_size}"
            )
        for _ in range(overflow):
            self._window.popleft()
        self._window.extend(data)

        if len(self._window) == sample_size:
            return np.fromiter(self._window, dtype=np.float64, count=sample_size)
        return None