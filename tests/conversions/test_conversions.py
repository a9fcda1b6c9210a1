import pytest

from chromarand.conversions import (
    convert,
    to_unit_rgb,
    unit_rgb_to_cmyk,
    unit_rgb_to_hcl,
    unit_rgb_to_hcv,
    unit_rgb_to_hcy,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_hsy,
    hue_to_unit_rgb,
    wrap_hue,
)
from ..samples import (
    samples_rgb_cmyk,
    samples_rgb_hcl,
    samples_rgb_hcv,
    samples_rgb_hcy,
    samples_rgb_hsl,
    samples_rgb_hsv,
    samples_rgb_hsy,
)
from ..utils import assert_close

FORWARD = [
    (unit_rgb_to_hsv, samples_rgb_hsv),
    (unit_rgb_to_hsl, samples_rgb_hsl),
    (unit_rgb_to_hsy, samples_rgb_hsy),
    (unit_rgb_to_hcv, samples_rgb_hcv),
    (unit_rgb_to_hcl, samples_rgb_hcl),
    (unit_rgb_to_hcy, samples_rgb_hcy),
    (unit_rgb_to_cmyk, samples_rgb_cmyk),
]

SPACES = ["cmy", "cmyk", "hsv", "hsl", "hsy", "hcv", "hcl", "hcy"]


@pytest.mark.parametrize("func, samples", FORWARD)
def test_from_rgb(func, samples):
    for rgb, expected in samples.items():
        assert_close(func(*rgb), expected, tol=1e-5)


@pytest.mark.parametrize("space", SPACES)
def test_round_trip_through_rgb(space):
    for rgb in samples_rgb_hsv:
        back = convert(convert(rgb, "rgb", space), space, "rgb")
        assert_close(back, rgb, tol=1e-9)


def test_same_space_is_identity():
    assert convert((0.1, 0.2, 0.3), "hcl", "HCL") == (0.1, 0.2, 0.3)


def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3), "rgb", "lab")


def test_out_of_gamut_is_clamped_to_cube():
    # chroma 1 at lightness 0.9 overshoots the RGB cube
    r, g, b = to_unit_rgb((0.0, 1.0, 0.9), "hcl")
    assert r == 1.0
    assert g == pytest.approx(0.4)
    assert b == pytest.approx(0.4)


def test_hue_helpers():
    assert wrap_hue(1.25) == pytest.approx(0.25)
    assert wrap_hue(-0.25) == pytest.approx(0.75)
    assert 0.0 <= wrap_hue(-1e-18) < 1.0
    with pytest.raises(ValueError):
        wrap_hue(float("nan"))
    assert_close(hue_to_unit_rgb(0.5), (0.0, 1.0, 1.0))
    assert_close(hue_to_unit_rgb(1 / 12), (1.0, 0.5, 0.0))
