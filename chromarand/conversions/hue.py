"""Hue helpers shared by every hue-based conversion. Hue is a turn fraction in [0, 1)."""

import math
from typing import Tuple

from boundednumbers.functions import cyclic_wrap_float

from ..types.defaults import LUMA_WEIGHTS


def wrap_hue(hue: float) -> float:
    """Wrap a hue into [0, 1)."""
    if not math.isfinite(hue):
        raise ValueError(f"hue must be finite, got {hue}")
    wrapped = float(cyclic_wrap_float(hue, 0.0, 1.0))
    # keep the half-open range
    return 0.0 if wrapped >= 1.0 else wrapped


def hue_to_unit_rgb(hue: float) -> Tuple[float, float, float]:
    """
    Fully saturated RGB color of a hue (one channel at 1, one at 0).

    Args:
        hue: Hue in turns; wrapped into [0, 1)

    Returns:
        (r, g, b) with max channel 1 and min channel 0
    """
    h6 = wrap_hue(hue) * 6.0
    x = 1.0 - abs(h6 % 2.0 - 1.0)
    sector = int(h6) % 6
    if sector == 0:
        return 1.0, x, 0.0
    if sector == 1:
        return x, 1.0, 0.0
    if sector == 2:
        return 0.0, 1.0, x
    if sector == 3:
        return 0.0, x, 1.0
    if sector == 4:
        return x, 0.0, 1.0
    return 1.0, 0.0, x


def luma(r: float, g: float, b: float) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def hue_luma(hue: float) -> float:
    """Luma of the fully saturated color at ``hue``; the HCY apex luma."""
    return luma(*hue_to_unit_rgb(hue))


def rgb_hue_chroma(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Hexcone hue and chroma of an RGB color.

    Returns:
        (hue, chroma, max channel, min channel); hue is 0 for grays
    """
    hi = max(r, g, b)
    lo = min(r, g, b)
    chroma = hi - lo
    if chroma <= 0.0:
        return 0.0, 0.0, hi, lo
    if hi == r:
        h6 = ((g - b) / chroma) % 6.0
    elif hi == g:
        h6 = (b - r) / chroma + 2.0
    else:
        h6 = (r - g) / chroma + 4.0
    return wrap_hue(h6 / 6.0), chroma, hi, lo
