"""
Random scalar sources.

Every random operation in chromarand takes a ``RandomSource`` as its first
argument. A source is stateful: each draw advances it. The package never
shares a source behind the caller's back and adds no locking of its own.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Union

import numpy as np

from ..types.defaults import UNIT_RESOLUTION

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def _check_range(lower: float, upper: float) -> None:
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")


class RandomSource(ABC):
    """Uniform scalar draws over closed, half-open and open intervals."""
    __slots__ = ()

    @abstractmethod
    def closed_range(self, lower: float, upper: float) -> float:
        """Uniform sample from ``[lower, upper]``."""

    @abstractmethod
    def half_open_range(self, lower: float, upper: float) -> float:
        """Uniform sample from ``[lower, upper)``; ``lower`` when the range is empty."""

    @abstractmethod
    def open_range(self, lower: float, upper: float) -> float:
        """Uniform sample from ``(lower, upper)``; ``lower`` when the range is empty."""

    def closed_unit(self) -> float:
        return self.closed_range(0.0, 1.0)

    def half_open_unit(self) -> float:
        return self.half_open_range(0.0, 1.0)

    def open_unit(self) -> float:
        return self.open_range(0.0, 1.0)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NumpyRandom(RandomSource):
    """
    RandomSource backed by ``numpy.random.Generator``.

    Closed and open unit draws are built from 53-bit integers so both
    endpoints of a closed interval are reachable and neither endpoint of an
    open one is.

    Args:
        seed: None, an int seed, a SeedSequence or an existing Generator
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: SeedLike = None) -> None:
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def _closed_unit(self) -> float:
        return int(self._rng.integers(0, UNIT_RESOLUTION, endpoint=True)) / UNIT_RESOLUTION

    def _open_unit(self) -> float:
        return int(self._rng.integers(1, UNIT_RESOLUTION)) / UNIT_RESOLUTION

    def closed_range(self, lower: float, upper: float) -> float:
        _check_range(lower, upper)
        if lower == upper:
            return float(lower)
        # min() keeps rounding from stepping past the upper bound
        return min(float(upper), (upper - lower) * self._closed_unit() + lower)

    def half_open_range(self, lower: float, upper: float) -> float:
        _check_range(lower, upper)
        if lower == upper:
            return float(lower)
        value = (upper - lower) * float(self._rng.random()) + lower
        # rounding can land on upper; fold it back to lower
        return value if value < upper else float(lower)

    def open_range(self, lower: float, upper: float) -> float:
        _check_range(lower, upper)
        if lower == upper:
            return float(lower)
        return (upper - lower) * self._open_unit() + lower

    def __repr__(self) -> str:
        return f"NumpyRandom({self._rng!r})"


def default_random(seed: SeedLike = None) -> NumpyRandom:
    """Build the default random source, optionally seeded."""
    return NumpyRandom(seed)

