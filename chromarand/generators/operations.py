"""
Color-level random operations
=============================

Each operation takes a random source and a color and returns a new color of
the same class; the input is never modified. Channels are addressed by long
or short name (``"lightness"`` or ``"l"``) and processed in the order the
color class declares them.

Shifting hue, chroma or the second channel of an HCV, HCL or HCY color can
leave the gamut, so every such operation runs through the gamut guard:
the whole recipe is retried until it lands in gamut, and the last attempt
is projected onto the gamut if it never does.

Example::

    rng = NumpyRandom(7)
    teal = ColorHCL((0.5, 0.4, 0.5))
    shift_channels(rng, teal, {"h": 0.05, "l": (-0.1, 0.0)})
    lerp_color(rng, teal, ColorHCL((0.9, 0.2, 0.7)), hue_mode="cw")
"""

from __future__ import annotations
from typing import Callable, Iterable, Mapping, Optional, Union

from ..colors.color_base import ColorBase, ChromaColorBase
from ..sampling.circular import HueMode, arc_delta, to_hue_mode
from ..sampling.gamut_guard import guard_mutation
from ..sampling.source import RandomSource
from ..sampling.triangle import sample_chroma_plane
from ..types.channel_types import ChannelKind
from .channels import ChannelArgument, ChannelOperation, ordered_channels, perturb_channel
from .whole_space import random_color

GAMUT_KINDS = frozenset({ChannelKind.CIRCULAR, ChannelKind.CHROMA, ChannelKind.SECOND})


# ---------------------------------------------------------------------------
# Gamut guard binding
# ---------------------------------------------------------------------------
def guard_chroma_mutation(
    color: ChromaColorBase,
    generate: Callable[[], ChromaColorBase],
    *,
    max_iterations_valid: Optional[int] = None,
    max_iterations_invalid: Optional[int] = None,
) -> ChromaColorBase:
    """Run ``generate`` under the gamut guard of ``color``'s own model."""
    return guard_mutation(
        color,
        generate,
        is_valid=lambda candidate: candidate.is_valid,
        nearest_valid=lambda candidate: candidate.nearest_valid(),
        max_iterations_valid=max_iterations_valid,
        max_iterations_invalid=max_iterations_invalid,
    )


def _touches_gamut(color: ColorBase, names: Iterable[str]) -> bool:
    return color.is_chroma_based and any(color.channel_spec(name).kind in GAMUT_KINDS for name in names)


def _run(color: ColorBase, names: Iterable[str], generate: Callable[[], ColorBase]) -> ColorBase:
    if _touches_gamut(color, names):
        return guard_chroma_mutation(color, generate)  # type: ignore[arg-type]
    return generate()


def _apply_each(
    random: RandomSource,
    color: ColorBase,
    arguments: Mapping[str, ChannelArgument],
    operation: ChannelOperation,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> ColorBase:
    names = ordered_channels(color, arguments)
    by_name = {color.channel_spec(key).name: value for key, value in arguments.items()}

    def generate() -> ColorBase:
        current = color
        for name in names:
            current = perturb_channel(random, current, name, operation, by_name[name], hue_mode=hue_mode)
        return current

    return _run(color, names, generate)


# ---------------------------------------------------------------------------
# Per-channel operations
# ---------------------------------------------------------------------------
def shift_channels(random: RandomSource, color: ColorBase, deltas: Mapping[str, ChannelArgument]) -> ColorBase:
    """
    Shift the named channels by random deltas.

    Args:
        random: Random source
        color: Color to perturb
        deltas: Channel name to a maximum absolute delta, or to a
            ``(min_delta, max_delta)`` pair. Hue deltas are in turns.

    Returns:
        New color of the same class

    Raises:
        ValueError: for unknown channels or malformed deltas
    """
    return _apply_each(random, color, deltas, ChannelOperation.SHIFT)


def spread_channels(random: RandomSource, color: ColorBase, proportions: Mapping[str, ChannelArgument]) -> ColorBase:
    """
    Move the named channels a random proportion of the way toward their bounds.

    A hue proportion of 1 covers half a turn in each direction.
    """
    return _apply_each(random, color, proportions, ChannelOperation.SPREAD)


def lerp_channels(
    random: RandomSource,
    color: ColorBase,
    targets: Mapping[str, float],
    *,
    hue_mode: Union[HueMode, str, None] = HueMode.SHORTEST,
) -> ColorBase:
    """Independently draw each named channel between its current value and a target."""
    return _apply_each(random, color, targets, ChannelOperation.LERP, to_hue_mode(hue_mode))


def randomize_channels(random: RandomSource, color: ColorBase, channels: Iterable[str]) -> ColorBase:
    """
    Redraw the named channels uniformly over their legal range.

    Redrawing every color channel draws a fresh color from the whole model
    (alpha kept unless named too). Redrawing chroma together with the second
    channel samples the gamut triangle at the current hue, so the pair stays
    uniform over the valid region instead of piling up near its edges.
    """
    names = ordered_channels(color, channels)
    color_names = color.channel_names()[:-1]
    alpha_name = color.channel_names()[-1]

    if all(name in names for name in color_names):
        fresh = random_color(random, color.mode, color.alpha)
        if alpha_name in names:
            fresh = fresh.with_alpha(random.closed_unit())
        return fresh

    if color.is_chroma_based and color_names[1] in names and color_names[2] in names:
        def generate() -> ColorBase:
            chroma, second = sample_chroma_plane(random, color.gamut.apex(color.hue))  # type: ignore[attr-defined]
            values = {color_names[1]: chroma, color_names[2]: second}
            if alpha_name in names:
                values[alpha_name] = random.closed_unit()
            return color.replace(**values)

        return _run(color, names, generate)

    return _apply_each(random, color, {name: None for name in names}, ChannelOperation.RANDOMIZE)


# ---------------------------------------------------------------------------
# Whole-color operations
# ---------------------------------------------------------------------------
def lerp_color(
    random: RandomSource,
    color: ColorBase,
    target: ColorBase,
    channels: Optional[Iterable[str]] = None,
    hue_mode: Union[HueMode, str, None] = HueMode.SHORTEST,
) -> ColorBase:
    """
    Random color on the segment from ``color`` to ``target``.

    One interpolation factor is drawn per attempt and shared by every
    selected channel, so the result lies on the straight path between the
    two colors (along the chosen hue arc).

    Args:
        random: Random source
        color: Start color
        target: End color of the same class
        channels: Channels to interpolate; all of them (alpha included) by default
        hue_mode: Arc to travel for the hue channel

    Returns:
        New color of the same class

    Raises:
        TypeError: if ``target`` belongs to a different color model
    """
    if type(target) is not type(color):
        raise TypeError(
            f"cannot interpolate {type(color).__name__} toward {type(target).__name__}; "
            f"convert the target first"
        )
    hue_mode = to_hue_mode(hue_mode)
    names = ordered_channels(color, color.channel_names() if channels is None else channels)

    def generate() -> ColorBase:
        t = random.closed_unit()
        values = {}
        for name in names:
            start, end = color.channel(name), target.channel(name)
            if color.channel_spec(name).kind is ChannelKind.CIRCULAR:
                delta = arc_delta(start, end, hue_mode)
                values[name] = random.half_open_unit() if delta is None else start + t * delta
            else:
                values[name] = start + t * (end - start)
        return color.replace(**values)

    return _run(color, names, generate)


def _whole_color_arguments(color: ColorBase, first: float, second: Optional[float], alpha: bool):
    argument = first if second is None else (first, second)
    names = color.channel_names() if alpha else color.channel_names()[:-1]
    return {name: argument for name in names}


def shift_color(
    random: RandomSource,
    color: ColorBase,
    delta: float,
    max_delta: Optional[float] = None,
    *,
    alpha: bool = False,
) -> ColorBase:
    """Shift every color channel (and alpha, if asked) by the same delta bounds."""
    return shift_channels(random, color, _whole_color_arguments(color, delta, max_delta, alpha))


def spread_color(
    random: RandomSource,
    color: ColorBase,
    proportion: float,
    max_proportion: Optional[float] = None,
    *,
    alpha: bool = False,
) -> ColorBase:
    """Spread every color channel (and alpha, if asked) by the same proportion bounds."""
    return spread_channels(random, color, _whole_color_arguments(color, proportion, max_proportion, alpha))
