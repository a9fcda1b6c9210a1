"""
Perturbations of the hue channel, which is a circle of circumference 1.

Linear primitives would clamp at 0 and 1; these wrap instead. When the
requested arc covers the whole circle, or the two candidate arcs of an
interpolation are equally short, the result is a uniform draw over the full
circle so that neither direction is favored.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Optional, Union

from ..conversions.hue import wrap_hue
from .perturb import delta_interval, proportion_interval
from .source import RandomSource


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (<= half turn) - most common
    LONGEST:  Longest path (>= half turn)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def to_hue_mode(direction: Union[HueMode, str, None]) -> HueMode:
    """Convert a string direction (or None for shortest) to a HueMode."""
    if direction is None or direction == 'shortest' or direction == HueMode.SHORTEST:
        return HueMode.SHORTEST
    elif direction == 'cw' or direction == 'clockwise' or direction == HueMode.CW:
        return HueMode.CW
    elif direction == 'ccw' or direction == 'counterclockwise' or direction == HueMode.CCW:
        return HueMode.CCW
    elif direction == 'longest' or direction == HueMode.LONGEST:
        return HueMode.LONGEST
    else:
        raise ValueError(f"Invalid hue direction: {direction}")


def _full_circle(random: RandomSource) -> float:
    return random.half_open_unit()


def _offset(random: RandomSource, original: float, min_offset: float, max_offset: float) -> float:
    if max_offset - min_offset >= 1.0:
        return _full_circle(random)
    return wrap_hue(original + random.closed_range(min_offset, max_offset))


def shift_repeated(
    random: RandomSource,
    original: float,
    delta: float,
    max_delta: Optional[float] = None,
) -> float:
    """
    Shift a hue by a random offset, wrapping around the circle.

    Args:
        random: Random source
        original: Hue in turns
        delta: Maximum absolute offset (sign ignored), or the minimum
            offset when ``max_delta`` is given
        max_delta: Optional maximum offset; a signed pair forces direction

    Returns:
        Hue in [0, 1). Offset ranges spanning a full turn or more yield a
        uniform hue.
    """
    if max_delta is None:
        delta = abs(delta)
    min_delta, max_delta = delta_interval(delta, max_delta)
    return _offset(random, original, min_delta, max_delta)


def spread_repeated(
    random: RandomSource,
    original: float,
    proportion: float,
    max_proportion: Optional[float] = None,
) -> float:
    """
    Spread a hue by a proportion of the half turn toward its complement.

    A proportion of 1 reaches the complementary hue going clockwise, -1
    going counterclockwise. The one-bound form ignores sign. Spreading by
    the full ``[-1, 1]`` covers both half turns and yields a uniform hue.
    """
    if max_proportion is None:
        proportion = abs(proportion)
    min_p, max_p = proportion_interval(proportion, max_proportion)
    return _offset(random, original, min_p * 0.5, max_p * 0.5)


def shortest_delta(original: float, target: float) -> float:
    """Signed offset along the shorter arc, in [-0.5, 0.5]."""
    delta = wrap_hue(target) - wrap_hue(original)
    if delta > 0.5:
        delta -= 1.0
    elif delta < -0.5:
        delta += 1.0
    return delta


def arc_delta(
    original: float,
    target: float,
    mode: Union[HueMode, str, None] = HueMode.SHORTEST,
) -> Optional[float]:
    """
    Signed offset from ``original`` to ``target`` along the arc chosen by ``mode``.

    Returns:
        The offset, or None when SHORTEST or LONGEST face two arcs of
        exactly half a turn. Equal hues give 0.0 in every mode, LONGEST
        included: the zero-length arc is kept rather than a full turn.
    """
    mode = to_hue_mode(mode)
    original = wrap_hue(original)
    target = wrap_hue(target)
    if original == target:
        return 0.0
    if mode is HueMode.CW:
        return (target - original) % 1.0
    if mode is HueMode.CCW:
        return -((original - target) % 1.0)
    delta = shortest_delta(original, target)
    if abs(delta) == 0.5:
        return None
    if mode is HueMode.LONGEST:
        delta -= 1.0 if delta > 0.0 else -1.0
    return delta


def lerp_repeated(
    random: RandomSource,
    original: float,
    target: float,
    mode: Union[HueMode, str, None] = HueMode.SHORTEST,
) -> float:
    """
    Uniform sample along an arc from ``original`` to ``target``.

    Args:
        random: Random source
        original: Start hue in turns
        target: End hue in turns
        mode: Which arc to travel. SHORTEST and LONGEST fall back to a
            uniform hue when both arcs are exactly half a turn.

    Returns:
        Hue in [0, 1); ``original`` itself when the hues coincide, whatever
        the mode
    """
    delta = arc_delta(original, target, mode)
    if delta is None:
        return _full_circle(random)
    if delta == 0.0:
        return wrap_hue(original)
    return wrap_hue(original + random.closed_range(min(0.0, delta), max(0.0, delta)))


class Hue(float):
    """A hue in turns, wrapped into ``[0, 1)``, with circular perturbations."""

    def __new__(cls, value: float):
        return super().__new__(cls, wrap_hue(float(value)))

    def __repr__(self):
        return f"Hue({float(self)})"

    def distance(self, other: float) -> float:
        """Length of the shorter arc to ``other``."""
        return abs(shortest_delta(self, other))

    def shift(self, random: RandomSource, delta: float, max_delta: Optional[float] = None) -> Hue:
        return Hue(shift_repeated(random, self, delta, max_delta))

    def spread(self, random: RandomSource, proportion: float, max_proportion: Optional[float] = None) -> Hue:
        return Hue(spread_repeated(random, self, proportion, max_proportion))

    def lerp(self, random: RandomSource, target: float, mode: Union[HueMode, str, None] = HueMode.SHORTEST) -> Hue:
        return Hue(lerp_repeated(random, self, target, mode))
