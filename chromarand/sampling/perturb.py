"""
Bounded perturbations of a single linear channel.

Each primitive builds a closed interval around ``original`` and draws one
uniform sample from it:

- shift:  move by an absolute delta
- spread: move by a proportion of the remaining distance to a bound
- lerp:   land anywhere between ``original`` and a target

The ``*_clamped`` variants build the same interval and then clamp each
endpoint into caller-supplied ``[lower, upper]`` bounds; chroma-based models
pass the gamut limits of the channel here.
"""

from __future__ import annotations
from typing import Optional, Tuple

from boundednumbers import clamp

from .source import RandomSource

Interval = Tuple[float, float]


# ---------------------------------------------------------------------------
# Interval construction
# ---------------------------------------------------------------------------
def _check_bounds(lower: float, upper: float) -> None:
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")


def _clamp(value: float, lower: float, upper: float) -> float:
    return float(clamp(value, lower, upper))


def delta_interval(delta: float, max_delta: Optional[float] = None) -> Interval:
    """
    Normalize shift arguments into a ``(min_delta, max_delta)`` pair.

    With one argument ``delta`` is a maximum absolute change and must be
    non-negative; with two it is the minimum change and must not exceed
    ``max_delta``.
    """
    if max_delta is None:
        if delta < 0.0:
            raise ValueError(f"maximum absolute delta must be non-negative, got {delta}")
        return -delta, delta
    if delta > max_delta:
        raise ValueError(f"min_delta {delta} exceeds max_delta {max_delta}")
    return delta, max_delta


def proportion_interval(proportion: float, max_proportion: Optional[float] = None) -> Interval:
    """
    Normalize spread arguments into a ``(min_proportion, max_proportion)`` pair.

    With one argument the proportion must lie in [0, 1] and is applied in
    both directions; with two, both must lie in [-1, 1] in ascending order.
    """
    if max_proportion is None:
        if not 0.0 <= proportion <= 1.0:
            raise ValueError(f"proportion must be in [0, 1], got {proportion}")
        return -proportion, proportion
    for name, p in (("min_proportion", proportion), ("max_proportion", max_proportion)):
        if not -1.0 <= p <= 1.0:
            raise ValueError(f"{name} must be in [-1, 1], got {p}")
    if proportion > max_proportion:
        raise ValueError(f"min_proportion {proportion} exceeds max_proportion {max_proportion}")
    return proportion, max_proportion


def _spread_bound(original: float, proportion: float) -> float:
    if proportion >= 0.0:
        return original + (1.0 - original) * proportion
    return original + original * proportion


def _sample(random: RandomSource, lo: float, hi: float) -> float:
    if lo > hi:
        # Endpoints are clamped independently from monotone maps, so this is a bug.
        raise ValueError(f"inverted sampling interval [{lo}, {hi}]")
    return random.closed_range(lo, hi)


# ---------------------------------------------------------------------------
# Interval builders (exposed for callers that need the range itself)
# ---------------------------------------------------------------------------
def shift_interval(
    original: float,
    delta: float,
    max_delta: Optional[float] = None,
    lower: float = 0.0,
    upper: float = 1.0,
) -> Interval:
    _check_bounds(lower, upper)
    min_delta, max_delta = delta_interval(delta, max_delta)
    return (
        _clamp(original + min_delta, lower, upper),
        _clamp(original + max_delta, lower, upper),
    )


def spread_interval(
    original: float,
    proportion: float,
    max_proportion: Optional[float] = None,
    lower: float = 0.0,
    upper: float = 1.0,
) -> Interval:
    _check_bounds(lower, upper)
    min_p, max_p = proportion_interval(proportion, max_proportion)
    return (
        _clamp(_spread_bound(original, min_p), lower, upper),
        _clamp(_spread_bound(original, max_p), lower, upper),
    )


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------
def shift(random: RandomSource, original: float, delta: float, max_delta: Optional[float] = None) -> float:
    """
    Shift a unit channel by a random delta.

    Args:
        random: Random source
        original: Channel value in [0, 1]
        delta: Maximum absolute delta, or the minimum delta when
            ``max_delta`` is given
        max_delta: Optional maximum delta for the asymmetric form

    Returns:
        Uniform sample from ``[clamp01(original + min), clamp01(original + max)]``

    Raises:
        ValueError: for a negative absolute delta or reversed deltas
    """
    return shift_clamped(random, original, delta, max_delta, lower=0.0, upper=1.0)


def shift_clamped(
    random: RandomSource,
    original: float,
    delta: float,
    max_delta: Optional[float] = None,
    *,
    lower: float,
    upper: float,
) -> float:
    """Like ``shift`` but each endpoint is clamped into ``[lower, upper]`` instead of [0, 1]."""
    return _sample(random, *shift_interval(original, delta, max_delta, lower, upper))


def spread(random: RandomSource, original: float, proportion: float, max_proportion: Optional[float] = None) -> float:
    """
    Move a unit channel a random proportion of the way toward 0 or 1.

    ``spread(x, p)`` samples ``[x*(1-p), x + (1-x)*p]``. With two proportions
    each bound moves toward 0 when negative and toward 1 when positive.
    """
    return spread_clamped(random, original, proportion, max_proportion, lower=0.0, upper=1.0)


def spread_clamped(
    random: RandomSource,
    original: float,
    proportion: float,
    max_proportion: Optional[float] = None,
    *,
    lower: float,
    upper: float,
) -> float:
    """
    Like ``spread`` but the resulting interval is intersected with ``[lower, upper]``.

    Proportions still move toward 0 and 1; only the endpoints are clamped,
    so an out-of-gamut channel lands on the nearest bound.
    """
    return _sample(random, *spread_interval(original, proportion, max_proportion, lower, upper))


def lerp(random: RandomSource, original: float, target: float) -> float:
    """Uniform sample between ``original`` and ``target``; returns ``original`` when they match."""
    if original == target:
        return original
    return random.closed_range(min(original, target), max(original, target))


def lerp_clamped(random: RandomSource, original: float, target: float, *, lower: float, upper: float) -> float:
    _check_bounds(lower, upper)
    return lerp(random, _clamp(original, lower, upper), _clamp(target, lower, upper))


def randomize_clamped(random: RandomSource, *, lower: float = 0.0, upper: float = 1.0) -> float:
    """Redraw a channel uniformly over its whole legal range."""
    _check_bounds(lower, upper)
    return random.closed_range(lower, upper)
