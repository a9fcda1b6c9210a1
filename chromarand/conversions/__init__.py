"""
Chromarand Color Space Conversions
==================================

Scalar conversions between RGB and the CMY, CMYK, HSV, HSL, HSY, HCV, HCL
and HCY models, plus the gamut boundaries of the chroma-based models.

Conventions
-----------
- Every channel is a float in [0, 1].
- Hue is measured in turns, wrapped into [0, 1).
- Luma uses the Rec. 601 weights (see ``types.defaults.LUMA_WEIGHTS``).

Gamut Functions
---------------
    hcv_max_chroma(value), hcv_min_max_value(chroma)
    hcl_max_chroma(lightness), hcl_min_max_lightness(chroma)
    hcy_max_chroma(hue, luma), hcy_min_max_luma(hue, chroma)
    hcv_is_valid / hcl_is_valid / hcy_is_valid(hue, chroma, second)
    hcv_nearest_valid / hcl_nearest_valid / hcy_nearest_valid(hue, chroma, second)

Examples
--------
>>> from chromarand.conversions import convert, hcl_max_chroma
>>> convert((1.0, 0.0, 0.0), "rgb", "hcl")
(0.0, 1.0, 0.5)
>>> hcl_max_chroma(1.0)
0.0
"""

from .hue import wrap_hue, hue_to_unit_rgb, hue_luma, luma, rgb_hue_chroma
from .to_rgb import (
    hcv_to_unit_rgb, hcl_to_unit_rgb, hcy_to_unit_rgb,
    hsv_to_unit_rgb, hsl_to_unit_rgb, hsy_to_unit_rgb,
    cmy_to_unit_rgb, cmyk_to_unit_rgb,
)
from .to_hue import (
    unit_rgb_to_hcv, unit_rgb_to_hcl, unit_rgb_to_hcy,
    unit_rgb_to_hsv, unit_rgb_to_hsl, unit_rgb_to_hsy,
)
from .to_cmy import unit_rgb_to_cmy, unit_rgb_to_cmyk
from .gamut import (
    HCV_APEX, HCL_APEX,
    hcv_max_chroma, hcv_min_max_value,
    hcl_max_chroma, hcl_min_max_lightness,
    hcy_max_chroma, hcy_min_max_luma, hcy_luma_at_max_chroma,
    hcv_is_valid, hcl_is_valid, hcy_is_valid,
    hcv_nearest_valid, hcl_nearest_valid, hcy_nearest_valid,
    ChromaGamut, GAMUTS, get_gamut,
)
from .wrapper import convert, to_unit_rgb

__all__ = [
    # hue helpers
    'wrap_hue', 'hue_to_unit_rgb', 'hue_luma', 'luma', 'rgb_hue_chroma',

    # → RGB
    'hcv_to_unit_rgb', 'hcl_to_unit_rgb', 'hcy_to_unit_rgb',
    'hsv_to_unit_rgb', 'hsl_to_unit_rgb', 'hsy_to_unit_rgb',
    'cmy_to_unit_rgb', 'cmyk_to_unit_rgb',

    # RGB →
    'unit_rgb_to_hcv', 'unit_rgb_to_hcl', 'unit_rgb_to_hcy',
    'unit_rgb_to_hsv', 'unit_rgb_to_hsl', 'unit_rgb_to_hsy',
    'unit_rgb_to_cmy', 'unit_rgb_to_cmyk',

    # gamut
    'HCV_APEX', 'HCL_APEX',
    'hcv_max_chroma', 'hcv_min_max_value',
    'hcl_max_chroma', 'hcl_min_max_lightness',
    'hcy_max_chroma', 'hcy_min_max_luma', 'hcy_luma_at_max_chroma',
    'hcv_is_valid', 'hcl_is_valid', 'hcy_is_valid',
    'hcv_nearest_valid', 'hcl_nearest_valid', 'hcy_nearest_valid',
    'ChromaGamut', 'GAMUTS', 'get_gamut',

    # high-level API
    'convert', 'to_unit_rgb',
]
