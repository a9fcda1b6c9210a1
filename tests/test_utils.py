import pytest

from chromarand.utils import budget_or_default, closest_point_in_triangle, triangle_point, value_or_default
from chromarand.types.color_types import ColorSpace, is_chroma_space, is_hue_space, to_color_space
from .utils import assert_close

TRIANGLE = ((0.0, 0.0), (0.0, 1.0), (1.0, 0.5))


def test_value_or_default():
    assert value_or_default(None, 5) == 5
    assert value_or_default(0, 5) == 0


def test_budget_or_default():
    assert budget_or_default(None, 100) == 100
    assert budget_or_default(3, 100) == 3
    with pytest.raises(ValueError):
        budget_or_default(0, 100)


def test_triangle_point():
    assert_close(triangle_point(*TRIANGLE, 0.5, 0.5), (0.5, 0.75))


@pytest.mark.parametrize("point, expected", [
    ((0.2, 0.5), (0.2, 0.5)),     # inside
    ((-1.0, -1.0), (0.0, 0.0)),   # vertex region
    ((2.0, 0.5), (1.0, 0.5)),     # apex region
    ((-0.5, 0.4), (0.0, 0.4)),    # chroma-zero edge
    ((1.0, 1.0), (0.8, 0.6)),     # upper edge
    ((0.6, 0.0), (0.48, 0.24)),   # lower edge
])
def test_closest_point_in_triangle(point, expected):
    assert_close(closest_point_in_triangle(point, *TRIANGLE), expected)


def test_color_space_names():
    assert to_color_space("HSL") is ColorSpace.HSL
    assert to_color_space(ColorSpace.HCY) is ColorSpace.HCY
    with pytest.raises(ValueError):
        to_color_space("lab")
    assert is_hue_space("hsy")
    assert not is_hue_space("cmyk")
    assert is_chroma_space("hcv")
    assert not is_chroma_space("hsv")
