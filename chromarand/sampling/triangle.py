"""
Uniform sampling over a triangle.

Two unit draws ``u, v`` are folded onto the lower-left half of the unit
square (reflecting through its center when ``u + v > 1``) and mapped onto
the triangle by its affine vertex combination. The fold preserves area, so
the result is uniform with no rejection loop.

For the chroma-based models the triangle lives in the (chroma, second
channel) plane with vertices ``(0, 0)``, ``(0, 1)`` and ``(1, apex)``; the
apex is supplied by the caller, fixed for HCV and HCL and hue-dependent for
HCY.
"""

from __future__ import annotations
from typing import Sequence, Tuple

from ..types.color_types import Point2D
from ..utils.geometry import triangle_point
from .source import RandomSource

Triangle = Tuple[Point2D, Point2D, Point2D]


def fold_unit_pair(u: float, v: float) -> Tuple[float, float]:
    """Reflect ``(u, v)`` onto the triangle ``u + v <= 1`` of the unit square."""
    if u + v > 1.0:
        return 1.0 - u, 1.0 - v
    return u, v


def point_within_triangle(
    random: RandomSource,
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> Point2D:
    """
    Draw a point uniformly distributed over triangle ``abc``.

    Args:
        random: Random source; consumes exactly two closed unit draws
        a, b, c: Triangle vertices

    Returns:
        (x, y) tuple of floats
    """
    u, v = fold_unit_pair(random.closed_unit(), random.closed_unit())
    return triangle_point(a, b, c, u, v)


def chroma_triangle(apex: float) -> Triangle:
    """Valid (chroma, second channel) region with the given apex second channel."""
    return (0.0, 0.0), (0.0, 1.0), (1.0, float(apex))


def sample_chroma_plane(random: RandomSource, apex: float) -> Point2D:
    """
    Uniform (chroma, second channel) pair inside the gamut triangle.

    The result is valid by construction for a model whose apex second
    channel at maximum chroma is ``apex``.
    """
    return point_within_triangle(random, *chroma_triangle(apex))
