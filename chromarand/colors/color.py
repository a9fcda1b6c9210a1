from __future__ import annotations
from typing import Dict, Union

from .color_base import ColorBase
from .rgb import rgb_space_to_class
from .cmy import cmy_space_to_class
from .hsv import hsv_space_to_class
from .hsl import hsl_space_to_class
from .hsy import hsy_space_to_class
from .hcv import hcv_space_to_class
from .hcl import hcl_space_to_class
from .hcy import hcy_space_to_class
from ..conversions import convert
from ..types.color_types import ColorSpace, to_color_space

unified_space_to_class: Dict[ColorSpace, type[ColorBase]] = {
    **rgb_space_to_class,
    **cmy_space_to_class,
    **hsv_space_to_class,
    **hsl_space_to_class,
    **hsy_space_to_class,
    **hcv_space_to_class,
    **hcl_space_to_class,
    **hcy_space_to_class,
}


def get_color_class(color_space: Union[ColorSpace, str]) -> type[ColorBase]:
    color_class = unified_space_to_class.get(to_color_space(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: Union[ColorSpace, str, None] = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Conversion goes through RGB, so hue is lost for grays and out-of-gamut
    chroma colors are clamped to the nearest RGB cube face. Alpha carries over.

    Args:
        to_space: Target color space; defaults to the current one

    Returns:
        New ColorBase instance in the target space
    """
    target = to_color_space(to_space or self.mode)
    if target == self.mode:
        return self
    result = convert(self.color, self.mode, target)
    cls = unified_space_to_class[target]
    return cls(tuple(result) + (self.alpha,))


def color_from_rgb(cls: type[ColorBase], rgb: ColorBase) -> ColorBase:
    return cls(rgb.convert(cls.mode))


ColorBase.convert = color_convert
ColorBase.from_rgb = classmethod(color_from_rgb)
