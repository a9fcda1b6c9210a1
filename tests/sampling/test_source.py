import numpy as np
import pytest

from chromarand.sampling.source import NumpyRandom, RandomSource, default_random


def test_closed_range_stays_inside(rng):
    for _ in range(2000):
        x = rng.closed_range(-0.25, 0.75)
        assert -0.25 <= x <= 0.75


def test_half_open_unit_never_returns_one(rng):
    draws = [rng.half_open_unit() for _ in range(5000)]
    assert all(0.0 <= x < 1.0 for x in draws)


def test_open_unit_excludes_both_ends(rng):
    draws = [rng.open_unit() for _ in range(5000)]
    assert all(0.0 < x < 1.0 for x in draws)


def test_empty_range_returns_lower(rng):
    assert rng.closed_range(0.3, 0.3) == 0.3
    assert rng.half_open_range(0.3, 0.3) == 0.3
    assert rng.open_range(0.3, 0.3) == 0.3


def test_reversed_range_raises(rng):
    with pytest.raises(ValueError):
        rng.closed_range(0.6, 0.4)
    with pytest.raises(ValueError):
        rng.half_open_range(0.6, 0.4)
    with pytest.raises(ValueError):
        rng.open_range(0.6, 0.4)


def test_seeded_sources_repeat():
    a = NumpyRandom(42)
    b = default_random(42)
    assert [a.closed_unit() for _ in range(10)] == [b.closed_unit() for _ in range(10)]


def test_wraps_existing_generator():
    gen = np.random.default_rng(3)
    source = NumpyRandom(gen)
    assert source.generator is gen
    assert isinstance(source, RandomSource)


def test_closed_unit_mean_is_one_half(rng):
    draws = [rng.closed_unit() for _ in range(20000)]
    assert abs(sum(draws) / len(draws) - 0.5) < 0.01


def test_numpy_random_has_no_instance_dict():
    source = NumpyRandom(3)
    assert not hasattr(source, "__dict__")
    with pytest.raises(AttributeError):
        source.seed = 4
