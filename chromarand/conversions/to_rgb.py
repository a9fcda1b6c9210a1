"""Conversions from every supported model to unit RGB. Channels are in [0, 1], hue in turns."""

from typing import Tuple

from .hue import hue_to_unit_rgb, hue_luma
from .gamut import hcl_max_chroma, hcv_max_chroma, hcy_max_chroma

RGBTuple = Tuple[float, float, float]


def _from_chroma_offset(hue: float, chroma: float, offset: float) -> RGBTuple:
    r1, g1, b1 = hue_to_unit_rgb(hue)
    return chroma * r1 + offset, chroma * g1 + offset, chroma * b1 + offset


def hcv_to_unit_rgb(h: float, c: float, v: float) -> RGBTuple:
    """
    Convert HCV to RGB.

    Out-of-gamut inputs produce channels outside [0, 1]; the color classes
    clamp them on construction.
    """
    return _from_chroma_offset(h, c, v - c)


def hcl_to_unit_rgb(h: float, c: float, l: float) -> RGBTuple:
    return _from_chroma_offset(h, c, l - c / 2.0)


def hcy_to_unit_rgb(h: float, c: float, y: float) -> RGBTuple:
    return _from_chroma_offset(h, c, y - c * hue_luma(h))


def hsv_to_unit_rgb(h: float, s: float, v: float) -> RGBTuple:
    return hcv_to_unit_rgb(h, s * hcv_max_chroma(v), v)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> RGBTuple:
    return hcl_to_unit_rgb(h, s * hcl_max_chroma(l), l)


def hsy_to_unit_rgb(h: float, s: float, y: float) -> RGBTuple:
    return hcy_to_unit_rgb(h, s * hcy_max_chroma(h, y), y)


def cmy_to_unit_rgb(c: float, m: float, y: float) -> RGBTuple:
    return 1.0 - c, 1.0 - m, 1.0 - y


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> RGBTuple:
    white = 1.0 - k
    return (1.0 - c) * white, (1.0 - m) * white, (1.0 - y) * white
