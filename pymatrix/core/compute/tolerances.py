"""
Tolerance constants for floating-point cleanup and comparison.

Two groups live here:
- Correction thresholds used by the cleanup pass that runs after row
  reduction and on cofactor matrices. The negative snap window is wider
  than the positive one.
- Comparison tiers used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass


# Fractional part above the floor beyond which a value is rounded to the
# nearest integer (1.99999999 -> 2.0)
ROUND_UP_THRESHOLD: float = 0.9999999

# Strictly positive values below this are snapped to 0.0
POSITIVE_SNAP: float = 0.000001

# Strictly negative values above this are snapped to 0.0
NEGATIVE_SNAP: float = -0.00001

# Pivot candidates in column c with |value| <= PIVOT_EPS * max(1, max|A[:, c]|)
# count as zero during partial-pivot elimination
PIVOT_EPS: float = 1e-12


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results of short exact-arithmetic chains (products, transposes)
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, a few roundings at most',
)

# Results that went through the correction pass (rref, inverse)
CORRECTED = ToleranceTier(
    rtol=0.0,
    atol=abs(NEGATIVE_SNAP),
    name='corrected',
    description='within the correction-pass snap thresholds',
)

