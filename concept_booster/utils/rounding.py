from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, e.g. 12.5 -> 13."""
    return math.floor(value + 0.5)
