from typing import Tuple


def unit_rgb_to_cmy(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return 1.0 - r, 1.0 - g, 1.0 - b


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """Convert RGB to CMYK; black reports (0, 0, 0, 1)."""
    k = 1.0 - max(r, g, b)
    white = 1.0 - k
    if white <= 0.0:
        return 0.0, 0.0, 0.0, 1.0
    return (white - r) / white, (white - g) / white, (white - b) / white, k
