# No dependencies
"""Tunable constants shared by the conversions and the random generators."""

# Rec. 601 luma weights (r, g, b). HSY and HCY must agree on these.
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Slack allowed when testing a chroma-based color against its gamut.
GAMUT_TOLERANCE = 1e-9

# Retry budgets of the gamut guard.
MAX_ITERATIONS_FROM_VALID = 100
MAX_ITERATIONS_FROM_INVALID = 5

# 2**53: resolution of closed/open unit draws (one double mantissa).
UNIT_RESOLUTION = 1 << 53
