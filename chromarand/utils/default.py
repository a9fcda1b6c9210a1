from typing import Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def budget_or_default(value: Optional[int], default: int, name: str = "max_iterations") -> int:
    """
    Resolve a per-call iteration budget against its module default.

    Raises:
        ValueError: if the resolved budget is smaller than 1
    """
    budget = int(value_or_default(value, default))
    if budget < 1:
        raise ValueError(f"{name} must be at least 1, got {budget}")
    return budget
