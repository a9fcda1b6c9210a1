"""
Whole-space random color generators.

Rectangular models (RGB, CMY, CMYK, HSV, HSL, HSY) draw each channel
independently; hue is half-open so that 0 and 1 are not both produced.
The chroma-based models draw hue first and then a (chroma, second channel)
pair uniformly over the gamut triangle of that hue, so every result is
valid by construction.
"""

from __future__ import annotations
from typing import Callable, Dict, Union

from ..colors.color_base import ColorBase
from ..colors.rgb import ColorRGB
from ..colors.cmy import ColorCMY, ColorCMYK
from ..colors.hsv import ColorHSV
from ..colors.hsl import ColorHSL
from ..colors.hsy import ColorHSY
from ..colors.hcv import ColorHCV
from ..colors.hcl import ColorHCL
from ..colors.hcy import ColorHCY
from ..conversions.gamut import get_gamut
from ..sampling.source import RandomSource
from ..sampling.triangle import sample_chroma_plane
from ..types.color_types import ColorSpace, to_color_space


def _alpha(random: RandomSource, alpha: float, random_alpha: bool) -> float:
    return random.closed_unit() if random_alpha else alpha


def _random_rectangular(cls, random: RandomSource, alpha: float, random_alpha: bool, hue_first: bool):
    count = len(cls.channels) - 1
    values = []
    for i in range(count):
        if hue_first and i == 0:
            values.append(random.half_open_unit())
        else:
            values.append(random.closed_unit())
    values.append(_alpha(random, alpha, random_alpha))
    return cls(tuple(values))


def _random_chroma(cls, random: RandomSource, alpha: float, random_alpha: bool):
    gamut = get_gamut(cls.mode)
    hue = random.half_open_unit()
    chroma, second = sample_chroma_plane(random, gamut.apex(hue))
    return cls((hue, chroma, second, _alpha(random, alpha, random_alpha)))


def random_rgb(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorRGB:
    """Uniform over the RGB cube."""
    return _random_rectangular(ColorRGB, random, alpha, random_alpha, hue_first=False)


def random_cmy(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorCMY:
    return _random_rectangular(ColorCMY, random, alpha, random_alpha, hue_first=False)


def random_cmyk(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorCMYK:
    return _random_rectangular(ColorCMYK, random, alpha, random_alpha, hue_first=False)


def random_hsv(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHSV:
    """
    Uniform over the HSV box.

    Not uniform in color: dark colors are overrepresented because every
    saturation collapses to black at value 0. See ``random_hsv_uniform_chroma``.
    """
    return _random_rectangular(ColorHSV, random, alpha, random_alpha, hue_first=True)


def random_hsl(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHSL:
    return _random_rectangular(ColorHSL, random, alpha, random_alpha, hue_first=True)


def random_hsy(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHSY:
    return _random_rectangular(ColorHSY, random, alpha, random_alpha, hue_first=True)


def random_hcv(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHCV:
    """Uniform hue, then uniform over the (chroma, value) triangle."""
    return _random_chroma(ColorHCV, random, alpha, random_alpha)


def random_hcl(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHCL:
    return _random_chroma(ColorHCL, random, alpha, random_alpha)


def random_hcy(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHCY:
    """Uniform hue, then uniform over the (chroma, luma) triangle whose apex depends on that hue."""
    return _random_chroma(ColorHCY, random, alpha, random_alpha)


def random_hsv_uniform_chroma(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHSV:
    """HSV color whose chroma and value are uniform over the HCV triangle."""
    return random_hcv(random, alpha, random_alpha=random_alpha).convert(ColorSpace.HSV)


def random_hsl_uniform_chroma(random: RandomSource, alpha: float = 1.0, *, random_alpha: bool = False) -> ColorHSL:
    """HSL color whose chroma and lightness are uniform over the HCL triangle."""
    return random_hcl(random, alpha, random_alpha=random_alpha).convert(ColorSpace.HSL)


GENERATORS: Dict[ColorSpace, Callable[..., ColorBase]] = {
    ColorSpace.RGB: random_rgb,
    ColorSpace.CMY: random_cmy,
    ColorSpace.CMYK: random_cmyk,
    ColorSpace.HSV: random_hsv,
    ColorSpace.HSL: random_hsl,
    ColorSpace.HSY: random_hsy,
    ColorSpace.HCV: random_hcv,
    ColorSpace.HCL: random_hcl,
    ColorSpace.HCY: random_hcy,
}


def random_color(
    random: RandomSource,
    space: Union[ColorSpace, str],
    alpha: float = 1.0,
    *,
    random_alpha: bool = False,
) -> ColorBase:
    """
    Random color of the given model.

    Raises:
        ValueError: for an unknown color space
    """
    return GENERATORS[to_color_space(space)](random, alpha, random_alpha=random_alpha)
