"""
Gamut boundaries of the chroma-based color models.

In HCV, HCL and HCY the representable (chroma, second channel) pairs form a
triangle with vertices ``(0, 0)``, ``(0, 1)`` and ``(1, apex)``, where the
second channel is value, lightness or luma and ``apex`` is its value at
maximum chroma. The apex is fixed for HCV (1) and HCL (0.5); for HCY it is
the luma of the fully saturated hue, so the triangle changes shape with hue.

Every chroma, value, lightness or luma mutation reads its clamp range from
these functions before calling a perturbation primitive.
"""

from __future__ import annotations
from typing import Callable, Dict, NamedTuple, Tuple, Union

from boundednumbers import clamp

from ..types.color_types import ColorSpace, to_color_space
from ..types.defaults import GAMUT_TOLERANCE
from ..utils.geometry import closest_point_in_triangle
from .hue import hue_luma, wrap_hue

HCV_APEX = 1.0
HCL_APEX = 0.5

ChromaTriple = Tuple[float, float, float]


# ---------------------------------------------------------------------------
# HCV: value = max(r, g, b)
# ---------------------------------------------------------------------------
def hcv_max_chroma(value: float) -> float:
    return float(clamp(value, 0.0, 1.0))


def hcv_min_max_value(chroma: float) -> Tuple[float, float]:
    return float(clamp(chroma, 0.0, 1.0)), 1.0


# ---------------------------------------------------------------------------
# HCL: lightness = (max + min) / 2
# ---------------------------------------------------------------------------
def hcl_max_chroma(lightness: float) -> float:
    lightness = float(clamp(lightness, 0.0, 1.0))
    return 1.0 - abs(2.0 * lightness - 1.0)


def hcl_min_max_lightness(chroma: float) -> Tuple[float, float]:
    half = float(clamp(chroma, 0.0, 1.0)) / 2.0
    return half, 1.0 - half


# ---------------------------------------------------------------------------
# HCY: luma = weighted sum of r, g, b
# ---------------------------------------------------------------------------
def hcy_luma_at_max_chroma(hue: float) -> float:
    return hue_luma(hue)


def hcy_max_chroma(hue: float, luma: float) -> float:
    """
    Largest chroma representable at ``hue`` and ``luma``.

    The RGB minimum is ``luma - chroma * yh`` and the maximum is that plus
    chroma, where ``yh`` is the hue's apex luma; both must stay in [0, 1].
    """
    luma = float(clamp(luma, 0.0, 1.0))
    yh = hue_luma(hue)
    return min(1.0, luma / yh, (1.0 - luma) / (1.0 - yh))


def hcy_min_max_luma(hue: float, chroma: float) -> Tuple[float, float]:
    chroma = float(clamp(chroma, 0.0, 1.0))
    yh = hue_luma(hue)
    return chroma * yh, 1.0 - chroma * (1.0 - yh)


# ---------------------------------------------------------------------------
# Validity and projection
# ---------------------------------------------------------------------------
def _in_unit(x: float) -> bool:
    return -GAMUT_TOLERANCE <= x <= 1.0 + GAMUT_TOLERANCE


def _is_valid(chroma: float, second: float, max_chroma: float) -> bool:
    return _in_unit(chroma) and _in_unit(second) and chroma <= max_chroma + GAMUT_TOLERANCE


def _project(hue: float, chroma: float, second: float, apex: float) -> ChromaTriple:
    point = (float(clamp(chroma, 0.0, 1.0)), float(clamp(second, 0.0, 1.0)))
    c, s = closest_point_in_triangle(point, (0.0, 0.0), (0.0, 1.0), (1.0, apex))
    return wrap_hue(hue), float(clamp(c, 0.0, 1.0)), float(clamp(s, 0.0, 1.0))


def hcv_is_valid(hue: float, chroma: float, value: float) -> bool:
    return _is_valid(chroma, value, hcv_max_chroma(value))


def hcl_is_valid(hue: float, chroma: float, lightness: float) -> bool:
    return _is_valid(chroma, lightness, hcl_max_chroma(lightness))


def hcy_is_valid(hue: float, chroma: float, luma: float) -> bool:
    return _is_valid(chroma, luma, hcy_max_chroma(hue, luma))


def hcv_nearest_valid(hue: float, chroma: float, value: float) -> ChromaTriple:
    return _project(hue, chroma, value, HCV_APEX)


def hcl_nearest_valid(hue: float, chroma: float, lightness: float) -> ChromaTriple:
    return _project(hue, chroma, lightness, HCL_APEX)


def hcy_nearest_valid(hue: float, chroma: float, luma: float) -> ChromaTriple:
    return _project(hue, chroma, luma, hcy_luma_at_max_chroma(hue))


# ---------------------------------------------------------------------------
# Per-model bundle
# ---------------------------------------------------------------------------
class ChromaGamut(NamedTuple):
    """Gamut functions of one chroma-based model, all taking hue first."""
    space: ColorSpace
    apex: Callable[[float], float]
    max_chroma: Callable[[float, float], float]
    min_max_second: Callable[[float, float], Tuple[float, float]]
    is_valid: Callable[[float, float, float], bool]
    nearest_valid: Callable[[float, float, float], ChromaTriple]


GAMUTS: Dict[ColorSpace, ChromaGamut] = {
    ColorSpace.HCV: ChromaGamut(
        space=ColorSpace.HCV,
        apex=lambda hue: HCV_APEX,
        max_chroma=lambda hue, value: hcv_max_chroma(value),
        min_max_second=lambda hue, chroma: hcv_min_max_value(chroma),
        is_valid=hcv_is_valid,
        nearest_valid=hcv_nearest_valid,
    ),
    ColorSpace.HCL: ChromaGamut(
        space=ColorSpace.HCL,
        apex=lambda hue: HCL_APEX,
        max_chroma=lambda hue, lightness: hcl_max_chroma(lightness),
        min_max_second=lambda hue, chroma: hcl_min_max_lightness(chroma),
        is_valid=hcl_is_valid,
        nearest_valid=hcl_nearest_valid,
    ),
    ColorSpace.HCY: ChromaGamut(
        space=ColorSpace.HCY,
        apex=hcy_luma_at_max_chroma,
        max_chroma=hcy_max_chroma,
        min_max_second=hcy_min_max_luma,
        is_valid=hcy_is_valid,
        nearest_valid=hcy_nearest_valid,
    ),
}


def get_gamut(space: Union[ColorSpace, str]) -> ChromaGamut:
    gamut = GAMUTS.get(to_color_space(space))
    if gamut is None:
        raise ValueError(f"{space} is not a chroma-based color space")
    return gamut
