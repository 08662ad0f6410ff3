"""Ratio-of-window budget thresholds shared by compaction and pruning."""

from __future__ import annotations

import math


def resolve_threshold(capacity: int | float, ratio: float) -> int:
    """Turn a context-window capacity and a ratio into an absolute threshold.

    The product is floored. Callers compare sizes with a strict ``>``, so a
    ratio of 0 makes any non-empty input exceed the threshold.

    Args:
        capacity: Context window capacity (tokens, used directly as a size budget)
        ratio: Fraction of the capacity to allow

    Returns:
        The threshold as an integer
    """
    return math.floor(capacity * ratio)
