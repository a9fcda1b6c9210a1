from .default import value_or_default, budget_or_default
from .geometry import triangle_point, closest_point_in_triangle

__all__ = ["value_or_default", "budget_or_default", "triangle_point", "closest_point_in_triangle"]
