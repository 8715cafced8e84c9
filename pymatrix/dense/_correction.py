"""
Floating-point cleanup pass.

Counteracts drift left behind by elimination and cofactor arithmetic:
values a hair below an integer are rounded up, tiny values are snapped to
zero, and negative zero is normalized.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import (
    ROUND_UP_THRESHOLD,
    POSITIVE_SNAP,
    NEGATIVE_SNAP,
)


def correct_buffer(data: NDArray[np.float64]) -> None:
    """
    Apply the correction pass to a flat buffer in place.

    Rules, in order:
        1. x - floor(x) > ROUND_UP_THRESHOLD      -> round(x)
        2. 0 < x < POSITIVE_SNAP                  -> 0.0
        3. NEGATIVE_SNAP < x < 0                  -> 0.0
        4. -0.0                                   -> 0.0

    NaN and infinities are left untouched.
    """
    with np.errstate(invalid='ignore'):
        frac = data - np.floor(data)
        round_up = frac > ROUND_UP_THRESHOLD
    data[round_up] = np.round(data[round_up])

    data[(data > 0.0) & (data < POSITIVE_SNAP)] = 0.0
    data[(data < 0.0) & (data > NEGATIVE_SNAP)] = 0.0

    # 0.0 == -0.0, so this rewrites every zero with a positive sign
    data[data == 0.0] = 0.0
