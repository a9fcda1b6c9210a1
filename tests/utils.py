from chromarand.sampling.source import RandomSource


def hue_distance(a, b):
    """Length of the shorter arc between two hues in turns."""
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


def assert_close(actual, expected, tol=1e-6):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(float(a) - e) < tol, f"{actual} != {expected}"


class MidpointRandom(RandomSource):
    """Always returns the center of the requested interval."""

    def closed_range(self, lower, upper):
        if lower > upper:
            raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
        return (lower + upper) / 2.0

    def half_open_range(self, lower, upper):
        return self.closed_range(lower, upper)

    def open_range(self, lower, upper):
        return self.closed_range(lower, upper)


class ScriptedRandom(RandomSource):
    """Replays a fixed list of unit values, mapped onto each requested interval."""

    def __init__(self, *units):
        self.units = list(units)
        self.calls = 0

    def _next(self):
        unit = self.units[self.calls % len(self.units)]
        self.calls += 1
        return unit

    def closed_range(self, lower, upper):
        if lower > upper:
            raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
        return lower + (upper - lower) * self._next()

    def half_open_range(self, lower, upper):
        return self.closed_range(lower, upper)

    def open_range(self, lower, upper):
        return self.closed_range(lower, upper)
