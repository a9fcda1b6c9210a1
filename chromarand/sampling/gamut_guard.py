"""
Retry-then-project wrapper for mutations of chroma-based colors.

A mutation recipe perturbs hue, chroma and the second channel one at a
time, so the joint result can leave the gamut (a hue shift moves the HCY
apex under an unchanged chroma/luma pair, for example). The guard reruns
the recipe until it yields a valid color and, once its budget is spent,
projects the last candidate onto the nearest valid color. It never raises
for a well-formed recipe.
"""

from __future__ import annotations
import warnings
from typing import Callable, Optional, TypeVar

from ..types.defaults import MAX_ITERATIONS_FROM_INVALID, MAX_ITERATIONS_FROM_VALID
from ..utils.default import budget_or_default

T = TypeVar('T')


class GamutProjectionWarning(UserWarning):
    """A mutation could not produce an in-gamut color and was projected back into gamut."""


def guard_mutation(
    original: T,
    generate: Callable[[], T],
    *,
    is_valid: Callable[[T], bool],
    nearest_valid: Callable[[T], T],
    max_iterations_valid: Optional[int] = None,
    max_iterations_invalid: Optional[int] = None,
) -> T:
    """
    Run ``generate`` until it returns a valid value, falling back to projection.

    Args:
        original: The value being mutated; only its validity is inspected
        generate: Zero-argument recipe producing one candidate per call
        is_valid: Gamut predicate
        nearest_valid: Projection onto the gamut
        max_iterations_valid: Budget when ``original`` is valid (default 100)
        max_iterations_invalid: Budget when it is not (default 5); an invalid
            start gives no guarantee the recipe can reach the gamut

    Returns:
        The first valid candidate, or ``nearest_valid`` of the last one

    Raises:
        ValueError: if a budget is smaller than 1
    """
    if is_valid(original):
        max_iterations = budget_or_default(max_iterations_valid, MAX_ITERATIONS_FROM_VALID, "max_iterations_valid")
    else:
        max_iterations = budget_or_default(max_iterations_invalid, MAX_ITERATIONS_FROM_INVALID, "max_iterations_invalid")

    candidate = generate()
    iterations = 1
    while not is_valid(candidate) and iterations < max_iterations:
        candidate = generate()
        iterations += 1

    if is_valid(candidate):
        return candidate

    warnings.warn(
        f"No in-gamut result after {iterations} attempts; projecting {candidate!r} into gamut",
        GamutProjectionWarning,
        stacklevel=3,
    )
    return nearest_valid(candidate)
