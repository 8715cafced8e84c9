"""
Shared compute infrastructure for PyMatrix.

This module provides timing utilities and the tolerance constants used by
the dense kernels and by matrix comparison.

Submodules:
    timing: Execution timing utilities
    tolerances: Correction thresholds, pivot epsilon, comparison tiers
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    CORRECTED,
    ROUND_UP_THRESHOLD,
    POSITIVE_SNAP,
    NEGATIVE_SNAP,
    PIVOT_EPS,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "CORRECTED",
    "ROUND_UP_THRESHOLD",
    "POSITIVE_SNAP",
    "NEGATIVE_SNAP",
    "PIVOT_EPS",
]
