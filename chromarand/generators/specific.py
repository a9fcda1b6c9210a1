"""Named random RGB colors: grays, tints of one primary, darkening and lightening."""

from __future__ import annotations

from ..colors.rgb import ColorRGB
from ..sampling.source import RandomSource


def gray(random: RandomSource) -> ColorRGB:
    value = random.closed_unit()
    return ColorRGB((value, value, value))


def dark_red(random: RandomSource) -> ColorRGB:
    """Black to pure red."""
    return ColorRGB((random.closed_unit(), 0.0, 0.0))


def dark_green(random: RandomSource) -> ColorRGB:
    return ColorRGB((0.0, random.closed_unit(), 0.0))


def dark_blue(random: RandomSource) -> ColorRGB:
    return ColorRGB((0.0, 0.0, random.closed_unit()))


def light_red(random: RandomSource) -> ColorRGB:
    """Pure red to white."""
    value = random.closed_unit()
    return ColorRGB((1.0, value, value))


def light_green(random: RandomSource) -> ColorRGB:
    value = random.closed_unit()
    return ColorRGB((value, 1.0, value))


def light_blue(random: RandomSource) -> ColorRGB:
    value = random.closed_unit()
    return ColorRGB((value, value, 1.0))


def _any_primary(random: RandomSource, index: int) -> ColorRGB:
    # lower half of the draw walks black -> primary, upper half primary -> white
    value = random.closed_unit()
    if value <= 0.5:
        channels = [0.0, 0.0, 0.0]
        channels[index] = value * 2.0
    else:
        value = value * 2.0 - 1.0
        channels = [value, value, value]
        channels[index] = 1.0
    return ColorRGB(tuple(channels))


def any_red(random: RandomSource) -> ColorRGB:
    """Anywhere on the black, red, white path."""
    return _any_primary(random, 0)


def any_green(random: RandomSource) -> ColorRGB:
    return _any_primary(random, 1)


def any_blue(random: RandomSource) -> ColorRGB:
    return _any_primary(random, 2)


def darken(random: RandomSource, rgb: ColorRGB) -> ColorRGB:
    """Scale every channel by one random factor in [0, 1]; alpha unchanged."""
    t = random.closed_unit()
    r, g, b = rgb.color
    return ColorRGB((r * t, g * t, b * t, rgb.alpha))


def lighten(random: RandomSource, rgb: ColorRGB) -> ColorRGB:
    """Move every channel the same random proportion of the way to 1; alpha unchanged."""
    t = random.closed_unit()
    r, g, b = rgb.color
    return ColorRGB((r + (1.0 - r) * t, g + (1.0 - g) * t, b + (1.0 - b) * t, rgb.alpha))
