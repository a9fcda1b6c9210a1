"""
Chromarand Color Classes
========================

Immutable unit-float colors, one class per model, each carrying an alpha
channel as its last component.

Features
--------
- Immutable color instances (frozen after initialization)
- Hue channels wrapped into [0, 1), other channels clamped to [0, 1]
- Named channel properties (long and short: ``luma`` / ``y``)
- Conversion between every model through RGB
- Chroma-based models (HCV, HCL, HCY) report ``is_valid`` and project with
  ``nearest_valid()``; they never correct gamut silently

Usage
-----
>>> from chromarand.colors import ColorRGB, ColorHCY
>>> red = ColorRGB((1.0, 0.0, 0.0))
>>> hcy = red.convert("hcy")
>>> hcy.is_valid
True
>>> ColorHCY((0.0, 1.0, 0.9)).is_valid
False

Color Classes
-------------
    ColorRGB, ColorCMY, ColorCMYK    rectangular, every point valid
    ColorHSV, ColorHSL, ColorHSY     rectangular hue-based
    ColorHCV, ColorHCL, ColorHCY     chroma-based, triangular gamut
"""

from .color_base import ColorBase, ChromaColorBase
from .rgb import ColorRGB
from .cmy import ColorCMY, ColorCMYK
from .hsv import ColorHSV
from .hsl import ColorHSL
from .hsy import ColorHSY
from .hcv import ColorHCV
from .hcl import ColorHCL
from .hcy import ColorHCY
from .color import color_convert, get_color_class, unified_space_to_class

__all__ = [
    'ColorBase', 'ChromaColorBase',
    'ColorRGB', 'ColorCMY', 'ColorCMYK',
    'ColorHSV', 'ColorHSL', 'ColorHSY',
    'ColorHCV', 'ColorHCL', 'ColorHCY',
    'color_convert', 'get_color_class', 'unified_space_to_class',
]
