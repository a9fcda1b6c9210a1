import pytest

from chromarand.sampling.circular import (
    Hue,
    HueMode,
    arc_delta,
    lerp_repeated,
    shift_repeated,
    shortest_delta,
    spread_repeated,
    to_hue_mode,
)
from chromarand.sampling.source import NumpyRandom
from ..utils import ScriptedRandom, hue_distance


def test_to_hue_mode():
    assert to_hue_mode(None) is HueMode.SHORTEST
    assert to_hue_mode("cw") is HueMode.CW
    assert to_hue_mode("counterclockwise") is HueMode.CCW
    assert to_hue_mode(HueMode.LONGEST) is HueMode.LONGEST
    with pytest.raises(ValueError):
        to_hue_mode("sideways")


def test_shift_repeated_wraps(midpoint):
    # offsets [0.1, 0.3] around 0.9 -> 1.1 -> 0.1
    assert hue_distance(shift_repeated(midpoint, 0.9, 0.1, 0.3), 0.1) < 1e-9


def test_shift_repeated_results_in_unit_circle(rng):
    for _ in range(2000):
        h = shift_repeated(rng, 0.95, 0.2)
        assert 0.0 <= h < 1.0
        assert hue_distance(h, 0.95) <= 0.2 + 1e-12


def test_shift_repeated_ignores_sign_of_single_delta():
    assert shift_repeated(NumpyRandom(5), 0.4, 0.2) == shift_repeated(NumpyRandom(5), 0.4, -0.2)


def test_shift_spanning_full_turn_is_uniform(midpoint):
    # a midpoint offset would give back 0.1; the full-circle draw gives 0.5
    assert shift_repeated(midpoint, 0.1, 0.5) == pytest.approx(0.5)
    assert shift_repeated(midpoint, 0.1, -0.7, 0.4) == pytest.approx(0.5)


def test_shift_repeated_is_symmetric(rng):
    offsets = [shortest_delta(0.02, shift_repeated(rng, 0.02, 0.2)) for _ in range(20000)]
    assert abs(sum(offsets) / len(offsets)) < 0.005
    assert min(offsets) < -0.19 and max(offsets) > 0.19


def test_spread_repeated(midpoint):
    # proportion 1 toward the complement is half a turn
    assert spread_repeated(midpoint, 0.2, 0.0, 1.0) == pytest.approx(0.45)
    assert spread_repeated(midpoint, 0.2, 1.0) == pytest.approx(0.5)
    with pytest.raises(ValueError):
        spread_repeated(midpoint, 0.2, 1.5)


def test_spread_repeated_stays_within_half_turn(rng):
    for _ in range(1000):
        h = spread_repeated(rng, 0.7, 0.4)
        assert hue_distance(h, 0.7) <= 0.2 + 1e-12


def test_arc_delta():
    assert arc_delta(0.2, 0.2) == 0.0
    assert arc_delta(0.8, 0.2) == pytest.approx(0.4)
    assert arc_delta(0.2, 0.1, "cw") == pytest.approx(0.9)
    assert arc_delta(0.1, 0.2, "ccw") == pytest.approx(-0.9)
    assert arc_delta(0.1, 0.2, HueMode.LONGEST) == pytest.approx(-0.9)
    assert arc_delta(0.0, 0.5) is None
    assert arc_delta(0.0, 0.5, "longest") is None


def test_lerp_repeated_same_hue(rng):
    assert lerp_repeated(rng, 0.3, 0.3) == 0.3
    assert lerp_repeated(rng, 0.3, 1.3) == pytest.approx(0.3)


def test_lerp_repeated_modes(midpoint):
    assert hue_distance(lerp_repeated(midpoint, 0.8, 0.2), 0.0) < 1e-9
    assert lerp_repeated(midpoint, 0.2, 0.1, HueMode.CW) == pytest.approx(0.65)
    assert lerp_repeated(midpoint, 0.1, 0.2, HueMode.CCW) == pytest.approx(0.65)
    assert lerp_repeated(midpoint, 0.1, 0.2, HueMode.LONGEST) == pytest.approx(0.65)


def test_lerp_repeated_half_turn_tie_is_uniform(midpoint):
    # either arc midpoint would be 0.25 or 0.75
    assert lerp_repeated(midpoint, 0.0, 0.5) == pytest.approx(0.5)
    source = ScriptedRandom(0.9)
    assert lerp_repeated(source, 0.0, 0.5) == pytest.approx(0.9)


def test_lerp_repeated_stays_on_short_arc(rng):
    for _ in range(2000):
        h = lerp_repeated(rng, 0.9, 0.1)
        assert h >= 0.9 or h <= 0.1 + 1e-12


def test_hue_value_object(midpoint):
    h = Hue(1.25)
    assert h == pytest.approx(0.25)
    assert Hue(-0.25) == pytest.approx(0.75)
    assert Hue(0.9).distance(0.1) == pytest.approx(0.2)
    shifted = h.shift(midpoint, 0.1, 0.3)
    assert isinstance(shifted, Hue)
    assert shifted == pytest.approx(0.45)
    assert isinstance(h.lerp(midpoint, 0.5), Hue)


@pytest.mark.parametrize("mode", list(HueMode))
def test_lerp_between_equal_hues_is_identity_in_every_mode(rng, mode):
    assert arc_delta(0.3, 0.3, mode) == 0.0
    assert arc_delta(0.0, 1.0, mode) == 0.0
    for _ in range(20):
        assert lerp_repeated(rng, 0.3, 0.3, mode) == pytest.approx(0.3)
