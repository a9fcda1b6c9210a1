"""Random scalar sources, perturbation primitives, the triangle sampler and the gamut guard."""

from .source import RandomSource, NumpyRandom, default_random
from .perturb import (
    shift, shift_clamped,
    spread, spread_clamped,
    lerp, lerp_clamped,
    randomize_clamped,
    shift_interval, spread_interval,
)
from .circular import (
    HueMode, Hue, to_hue_mode,
    shift_repeated, spread_repeated, lerp_repeated, shortest_delta, arc_delta,
)
from .triangle import (
    fold_unit_pair, point_within_triangle, chroma_triangle, sample_chroma_plane,
)
from .gamut_guard import guard_mutation, GamutProjectionWarning

__all__ = [
    "RandomSource", "NumpyRandom", "default_random",
    "shift", "shift_clamped", "spread", "spread_clamped",
    "lerp", "lerp_clamped", "randomize_clamped",
    "shift_interval", "spread_interval",
    "HueMode", "Hue", "to_hue_mode",
    "shift_repeated", "spread_repeated", "lerp_repeated", "shortest_delta", "arc_delta",
    "fold_unit_pair", "point_within_triangle", "chroma_triangle", "sample_chroma_plane",
    "guard_mutation", "GamutProjectionWarning",
]
