import pytest

from chromarand.colors import (
    ColorCMY,
    ColorCMYK,
    ColorHCL,
    ColorHCV,
    ColorHCY,
    ColorHSL,
    ColorHSV,
    ColorHSY,
    ColorRGB,
)
from chromarand.generators.whole_space import (
    random_cmy,
    random_cmyk,
    random_color,
    random_hcl,
    random_hcv,
    random_hcy,
    random_hsl,
    random_hsv,
    random_hsl_uniform_chroma,
    random_hsv_uniform_chroma,
    random_hsy,
    random_rgb,
)
from chromarand.sampling.source import NumpyRandom
from ..utils import ScriptedRandom, assert_close

GENERATORS = [
    (random_rgb, ColorRGB),
    (random_cmy, ColorCMY),
    (random_cmyk, ColorCMYK),
    (random_hsv, ColorHSV),
    (random_hsl, ColorHSL),
    (random_hsy, ColorHSY),
    (random_hcv, ColorHCV),
    (random_hcl, ColorHCL),
    (random_hcy, ColorHCY),
]


@pytest.mark.parametrize("generate, cls", GENERATORS)
def test_generators_return_valid_colors(generate, cls, rng):
    for _ in range(300):
        color = generate(rng)
        assert type(color) is cls
        assert color.alpha == 1.0
        assert all(0.0 <= x <= 1.0 for x in color)
        if color.has_hue:
            assert color.hue < 1.0
        if color.is_chroma_based:
            assert color.is_valid


def test_alpha_options(rng):
    assert random_rgb(rng, 0.3).alpha == 0.3
    alphas = {random_hcl(rng, random_alpha=True).alpha for _ in range(50)}
    assert len(alphas) > 40
    assert all(0.0 <= a <= 1.0 for a in alphas)


def test_chroma_generator_uses_hue_apex():
    # hue first, then the triangle draw (u=0, v=1) lands on the apex of pure blue
    color = random_hcy(ScriptedRandom(2 / 3, 0.0, 1.0))
    assert_close(color.color, (2 / 3, 1.0, 0.114))
    assert color.is_valid


def test_random_color_dispatch(rng):
    assert isinstance(random_color(rng, "HCY"), ColorHCY)
    assert isinstance(random_color(rng, "cmyk", 0.5), ColorCMYK)
    with pytest.raises(ValueError):
        random_color(rng, "lab")


def test_hsv_uniform_chroma(rng):
    colors = [random_hsv_uniform_chroma(rng) for _ in range(2000)]
    assert all(isinstance(c, ColorHSV) for c in colors)
    # HCV triangle: value is never below chroma, so dark colors are rarer than in the HSV box
    box = [random_hsv(rng) for _ in range(2000)]
    assert sum(c.v for c in colors) > sum(c.v for c in box)


def test_hsl_uniform_chroma(rng):
    colors = [random_hsl_uniform_chroma(rng, 0.4) for _ in range(2000)]
    assert all(isinstance(c, ColorHSL) and c.alpha == 0.4 for c in colors)

    def chroma(c):
        return (1.0 - abs(2.0 * c.l - 1.0)) * c.s

    # chroma over the HCL triangle averages 1/3; the HSL box averages 1/4
    box = [random_hsl(rng) for _ in range(2000)]
    assert sum(chroma(c) for c in colors) / 2000 == pytest.approx(1 / 3, abs=0.03)
    assert sum(chroma(c) for c in box) / 2000 == pytest.approx(0.25, abs=0.03)


def test_hsl_uniform_chroma_converts_hcl_sample():
    hsl = random_hsl_uniform_chroma(NumpyRandom(11))
    hcl = random_hcl(NumpyRandom(11))
    assert_close(hsl.value, hcl.convert("hsl").value)
