"""Conversions from unit RGB to the hue-based models (HSV, HSL, HSY, HCV, HCL, HCY)."""

from typing import Tuple

from boundednumbers import clamp

from .hue import rgb_hue_chroma, luma
from .gamut import hcy_max_chroma

HueTuple = Tuple[float, float, float]


def unit_rgb_to_hcv(r: float, g: float, b: float) -> HueTuple:
    h, c, hi, _ = rgb_hue_chroma(r, g, b)
    return h, c, hi


def unit_rgb_to_hcl(r: float, g: float, b: float) -> HueTuple:
    h, c, hi, lo = rgb_hue_chroma(r, g, b)
    return h, c, (hi + lo) / 2.0


def unit_rgb_to_hcy(r: float, g: float, b: float) -> HueTuple:
    h, c, _, _ = rgb_hue_chroma(r, g, b)
    return h, c, luma(r, g, b)


def _saturation(chroma: float, max_chroma: float) -> float:
    if max_chroma <= 0.0:
        return 0.0
    return float(clamp(chroma / max_chroma, 0.0, 1.0))


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HueTuple:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue in turns, saturation, value); grays report hue 0
    """
    h, c, hi, _ = rgb_hue_chroma(r, g, b)
    return h, _saturation(c, hi), hi


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HueTuple:
    h, c, hi, lo = rgb_hue_chroma(r, g, b)
    l = (hi + lo) / 2.0
    return h, _saturation(c, 1.0 - abs(2.0 * l - 1.0)), l


def unit_rgb_to_hsy(r: float, g: float, b: float) -> HueTuple:
    """Convert RGB to HSY, where saturation is chroma over the hue's max chroma at that luma."""
    h, c, _, _ = rgb_hue_chroma(r, g, b)
    y = luma(r, g, b)
    return h, _saturation(c, hcy_max_chroma(h, y)), y
