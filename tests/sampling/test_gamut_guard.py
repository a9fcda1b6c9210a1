import warnings

import pytest

from chromarand.sampling.gamut_guard import GamutProjectionWarning, guard_mutation


def _counter(values):
    calls = []

    def generate():
        value = values[min(len(calls), len(values) - 1)]
        calls.append(value)
        return value

    return generate, calls


def is_valid(x):
    return x <= 10


def nearest_valid(x):
    return 10


def test_returns_first_valid_candidate():
    generate, calls = _counter([50, 40, 7, 3])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert guard_mutation(5, generate, is_valid=is_valid, nearest_valid=nearest_valid) == 7
    assert len(calls) == 3


def test_valid_original_gets_hundred_attempts():
    generate, calls = _counter([99])
    with pytest.warns(GamutProjectionWarning):
        result = guard_mutation(5, generate, is_valid=is_valid, nearest_valid=nearest_valid)
    assert result == 10
    assert len(calls) == 100


def test_invalid_original_gets_five_attempts():
    generate, calls = _counter([99])
    with pytest.warns(GamutProjectionWarning):
        result = guard_mutation(50, generate, is_valid=is_valid, nearest_valid=nearest_valid)
    assert result == 10
    assert len(calls) == 5


def test_budgets_are_configurable():
    generate, calls = _counter([99])
    with pytest.warns(GamutProjectionWarning):
        guard_mutation(5, generate, is_valid=is_valid, nearest_valid=nearest_valid, max_iterations_valid=3)
    assert len(calls) == 3

    generate, calls = _counter([99])
    with pytest.warns(GamutProjectionWarning):
        guard_mutation(50, generate, is_valid=is_valid, nearest_valid=nearest_valid, max_iterations_invalid=1)
    assert len(calls) == 1


def test_zero_budget_raises():
    generate, _ = _counter([1])
    with pytest.raises(ValueError):
        guard_mutation(5, generate, is_valid=is_valid, nearest_valid=nearest_valid, max_iterations_valid=0)
