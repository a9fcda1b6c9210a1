"""Chromarand: random color generation and perturbation utilities."""

__version__ = "0.1.0"

from .types.color_types import ColorSpace
from .types.channel_types import ChannelKind, ChannelSpec
from .colors import (
    ColorBase,
    ChromaColorBase,
    ColorRGB,
    ColorCMY,
    ColorCMYK,
    ColorHSV,
    ColorHSL,
    ColorHSY,
    ColorHCV,
    ColorHCL,
    ColorHCY,
    color_convert,
    get_color_class,
)
from .conversions import convert, get_gamut
from .sampling import (
    RandomSource,
    NumpyRandom,
    default_random,
    HueMode,
    Hue,
    shift,
    shift_clamped,
    spread,
    spread_clamped,
    lerp,
    lerp_clamped,
    randomize_clamped,
    shift_repeated,
    spread_repeated,
    lerp_repeated,
    point_within_triangle,
    sample_chroma_plane,
    guard_mutation,
    GamutProjectionWarning,
)
from .generators import (
    random_rgb,
    random_cmy,
    random_cmyk,
    random_hsv,
    random_hsl,
    random_hsy,
    random_hcv,
    random_hcl,
    random_hcy,
    random_hsv_uniform_chroma,
    random_hsl_uniform_chroma,
    random_color,
    shift_channels,
    spread_channels,
    lerp_channels,
    randomize_channels,
    lerp_color,
    shift_color,
    spread_color,
    gray,
    darken,
    lighten,
)

__all__ = [
    "__version__",
    # models
    "ColorSpace",
    "ChannelKind",
    "ChannelSpec",
    "ColorBase",
    "ChromaColorBase",
    "ColorRGB",
    "ColorCMY",
    "ColorCMYK",
    "ColorHSV",
    "ColorHSL",
    "ColorHSY",
    "ColorHCV",
    "ColorHCL",
    "ColorHCY",
    "color_convert",
    "get_color_class",
    "convert",
    "get_gamut",
    # random sources and primitives
    "RandomSource",
    "NumpyRandom",
    "default_random",
    "HueMode",
    "Hue",
    "shift",
    "shift_clamped",
    "spread",
    "spread_clamped",
    "lerp",
    "lerp_clamped",
    "randomize_clamped",
    "shift_repeated",
    "spread_repeated",
    "lerp_repeated",
    "point_within_triangle",
    "sample_chroma_plane",
    "guard_mutation",
    "GamutProjectionWarning",
    # generators
    "random_rgb",
    "random_cmy",
    "random_cmyk",
    "random_hsv",
    "random_hsl",
    "random_hsy",
    "random_hcv",
    "random_hcl",
    "random_hcy",
    "random_hsv_uniform_chroma",
    "random_hsl_uniform_chroma",
    "random_color",
    "shift_channels",
    "spread_channels",
    "lerp_channels",
    "randomize_channels",
    "lerp_color",
    "shift_color",
    "spread_color",
    "gray",
    "darken",
    "lighten",
]
