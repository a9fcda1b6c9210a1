"""Small 2D helpers shared by the triangle sampler and the gamut projection."""

from typing import Sequence, Tuple
import numpy as np

from ..types.color_types import Point2D


def triangle_point(a: Sequence[float], b: Sequence[float], c: Sequence[float], u: float, v: float) -> Point2D:
    """Affine vertex combination ``a + u*(b - a) + v*(c - a)``."""
    a_, b_, c_ = np.asarray(a, dtype=float), np.asarray(b, dtype=float), np.asarray(c, dtype=float)
    p = a_ + u * (b_ - a_) + v * (c_ - a_)
    return float(p[0]), float(p[1])


def closest_point_in_triangle(
    p: Sequence[float],
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> Point2D:
    """
    Return the point of triangle ``abc`` (boundary included) closest to ``p``.

    Points already inside the triangle are returned unchanged. Otherwise the
    result is the Euclidean projection onto the nearest vertex or edge,
    found by testing the Voronoi regions of the vertices and edges.

    Args:
        p: Query point
        a, b, c: Triangle vertices (non-degenerate)

    Returns:
        Closest point as an (x, y) tuple of floats
    """
    p_, a_, b_, c_ = (np.asarray(q, dtype=float) for q in (p, a, b, c))
    ab = b_ - a_
    ac = c_ - a_

    ap = p_ - a_
    d1 = float(np.dot(ab, ap))
    d2 = float(np.dot(ac, ap))
    if d1 <= 0.0 and d2 <= 0.0:
        return _as_point(a_)

    bp = p_ - b_
    d3 = float(np.dot(ab, bp))
    d4 = float(np.dot(ac, bp))
    if d3 >= 0.0 and d4 <= d3:
        return _as_point(b_)

    vc = d1 * d4 - d3 * d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
        t = d1 / (d1 - d3)
        return _as_point(a_ + t * ab)

    cp = p_ - c_
    d5 = float(np.dot(ab, cp))
    d6 = float(np.dot(ac, cp))
    if d6 >= 0.0 and d5 <= d6:
        return _as_point(c_)

    vb = d5 * d2 - d1 * d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
        t = d2 / (d2 - d6)
        return _as_point(a_ + t * ac)

    va = d3 * d6 - d5 * d4
    if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
        t = (d4 - d3) / ((d4 - d3) + (d5 - d6))
        return _as_point(b_ + t * (c_ - b_))

    # inside
    denom = 1.0 / (va + vb + vc)
    v = vb * denom
    w = vc * denom
    return _as_point(a_ + v * ab + w * ac)


def _as_point(q: np.ndarray) -> Point2D:
    return float(q[0]), float(q[1])
