from typing import Callable, Dict, Tuple, Union

from boundednumbers import clamp

from ..types.color_types import ColorSpace, ScalarVector, to_color_space
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

RGBTuple = Tuple[float, float, float]

TO_RGB: Dict[ColorSpace, Callable[..., RGBTuple]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.CMY: cmy_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HSY: hsy_to_unit_rgb,
    ColorSpace.HCV: hcv_to_unit_rgb,
    ColorSpace.HCL: hcl_to_unit_rgb,
    ColorSpace.HCY: hcy_to_unit_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[[float, float, float], ScalarVector]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.CMY: unit_rgb_to_cmy,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
    ColorSpace.HSV: unit_rgb_to_hsv,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.HSY: unit_rgb_to_hsy,
    ColorSpace.HCV: unit_rgb_to_hcv,
    ColorSpace.HCL: unit_rgb_to_hcl,
    ColorSpace.HCY: unit_rgb_to_hcy,
}


def to_unit_rgb(color: ScalarVector, from_space: Union[ColorSpace, str]) -> RGBTuple:
    """Convert color channels (no alpha) to RGB clamped into [0, 1]."""
    r, g, b = TO_RGB[to_color_space(from_space)](*color)
    return (
        float(clamp(r, 0.0, 1.0)),
        float(clamp(g, 0.0, 1.0)),
        float(clamp(b, 0.0, 1.0)),
    )


def convert(
    color: ScalarVector,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> ScalarVector:
    """
    Convert color channels between two models, going through RGB.

    Args:
        color: Channel tuple without alpha, in ``from_space`` order
        from_space: Source color space
        to_space: Target color space

    Returns:
        Channel tuple in ``to_space`` order. Same-space conversion returns
        the input unchanged.
    """
    from_space = to_color_space(from_space)
    to_space = to_color_space(to_space)
    if from_space == to_space:
        return tuple(color)
    rgb = to_unit_rgb(color, from_space)
    return tuple(float(x) for x in FROM_RGB[to_space](*rgb))
