"""
Per-channel dispatch of the perturbation primitives.

Every color class declares its channels as ``ChannelSpec`` entries. The
channel kind picks the primitive family and its bounds:

- LINEAR / ALPHA: clamped primitives over [0, 1]
- CIRCULAR:       wrapping primitives over the hue circle
- CHROMA:         clamped to [0, max chroma] at the current hue and second channel
- SECOND:         clamped to the value/lightness/luma range at the current hue and chroma

Gamut-dependent bounds are read from the color passed in, so a caller that
perturbs several channels in sequence sees each step's bounds move with the
channels already changed.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..colors.color_base import ColorBase, ChromaColorBase
from ..sampling.circular import HueMode, lerp_repeated, shift_repeated, spread_repeated
from ..sampling.perturb import lerp_clamped, randomize_clamped, shift_clamped, spread_clamped
from ..sampling.source import RandomSource
from ..types.channel_types import ChannelKind

ChannelArgument = Union[float, Sequence[float], None]
Interval = Tuple[float, float]


class ChannelOperation(str, Enum):
    SHIFT = "shift"
    SPREAD = "spread"
    LERP = "lerp"
    RANDOMIZE = "randomize"


def split_argument(argument: ChannelArgument) -> Tuple[float, Optional[float]]:
    """
    Split a per-channel argument into ``(first, second)``.

    A scalar is the one-bound form (``second`` is None); a pair is the
    ``(min, max)`` form.
    """
    if argument is None:
        raise ValueError("channel argument is required for this operation")
    if isinstance(argument, (tuple, list)):
        if len(argument) != 2:
            raise ValueError(f"expected a scalar or a (min, max) pair, got {argument!r}")
        return float(argument[0]), float(argument[1])
    return float(argument), None  # type: ignore[arg-type]


def ordered_channels(color: ColorBase, names: Iterable[str]) -> Tuple[str, ...]:
    """
    Canonical channel names in declaration order.

    Raises:
        ValueError: for unknown names, or one channel named twice (e.g. "l" and "lightness")
    """
    names = list(names)
    indices = [color.channel_index(name) for name in names]
    if len(set(indices)) != len(indices):
        raise ValueError(f"channel named more than once: {names}")
    return tuple(color.channels[i].name for i in sorted(indices))


def channel_bounds(color: ColorBase, name: str) -> Optional[Interval]:
    """
    Legal ``(lower, upper)`` range of a channel at the color's current state.

    Returns:
        None for the hue channel, which wraps instead of clamping
    """
    kind = color.channel_spec(name).kind
    if kind is ChannelKind.CIRCULAR:
        return None
    if kind is ChannelKind.LINEAR or kind is ChannelKind.ALPHA:
        return 0.0, 1.0

    if not isinstance(color, ChromaColorBase):
        raise TypeError(f"{type(color).__name__} declares a gamut channel but has no gamut")
    if kind is ChannelKind.CHROMA:
        return 0.0, color.max_chroma
    return color.second_range


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def _perturb_circular(
    random: RandomSource,
    original: float,
    operation: ChannelOperation,
    argument: ChannelArgument,
    hue_mode: HueMode,
) -> float:
    if operation is ChannelOperation.RANDOMIZE:
        return random.half_open_unit()
    if operation is ChannelOperation.LERP:
        return lerp_repeated(random, original, float(argument), hue_mode)  # type: ignore[arg-type]
    first, second = split_argument(argument)
    if operation is ChannelOperation.SHIFT:
        return shift_repeated(random, original, first, second)
    return spread_repeated(random, original, first, second)


def _perturb_linear(
    random: RandomSource,
    original: float,
    operation: ChannelOperation,
    argument: ChannelArgument,
    bounds: Interval,
) -> float:
    lower, upper = bounds
    if operation is ChannelOperation.RANDOMIZE:
        return randomize_clamped(random, lower=lower, upper=upper)
    if operation is ChannelOperation.LERP:
        return lerp_clamped(random, original, float(argument), lower=lower, upper=upper)  # type: ignore[arg-type]
    first, second = split_argument(argument)
    if operation is ChannelOperation.SHIFT:
        return shift_clamped(random, original, first, second, lower=lower, upper=upper)
    return spread_clamped(random, original, first, second, lower=lower, upper=upper)


def perturb_channel(
    random: RandomSource,
    color: ColorBase,
    name: str,
    operation: Union[ChannelOperation, str],
    argument: ChannelArgument = None,
    *,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> ColorBase:
    """
    Apply one primitive to one channel.

    Args:
        random: Random source
        color: Color to perturb
        name: Channel name, long or short
        operation: shift, spread, lerp or randomize
        argument: Delta or proportion (scalar or pair) for shift and spread,
            the target value for lerp, unused for randomize
        hue_mode: Arc used when lerping the hue channel

    Returns:
        A new color of the same class with only that channel changed
    """
    operation = ChannelOperation(operation)
    spec = color.channel_spec(name)
    original = color.channel(spec.name)

    bounds = channel_bounds(color, spec.name)
    if bounds is None:
        value = _perturb_circular(random, original, operation, argument, hue_mode)
    else:
        value = _perturb_linear(random, original, operation, argument, bounds)
    return color.replace(**{spec.name: value})
