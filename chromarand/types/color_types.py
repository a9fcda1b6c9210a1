from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[float, ...]
Point2D = Tuple[float, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    CMY = "cmy"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"
    HSY = "hsy"
    HCV = "hcv"
    HCL = "hcl"
    HCY = "hcy"


HUE_SPACES = {
    ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HSY,
    ColorSpace.HCV, ColorSpace.HCL, ColorSpace.HCY,
}
CHROMA_SPACES = {ColorSpace.HCV, ColorSpace.HCL, ColorSpace.HCY}


def to_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Normalize a color space name.

    Args:
        space: ColorSpace member or its (case-insensitive) string value

    Returns:
        The matching ColorSpace

    Raises:
        ValueError: if the name is not a supported color space
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unsupported color space: {space!r}") from None


def is_hue_space(space: Union[ColorSpace, str]) -> bool:
    return to_color_space(space) in HUE_SPACES


def is_chroma_space(space: Union[ColorSpace, str]) -> bool:
    return to_color_space(space) in CHROMA_SPACES
