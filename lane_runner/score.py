"""Score conversion and display formatting."""
from __future__ import annotations

import math


def score_for(traveled_x: float, divisor: float) -> int:
    """Whole score points for *traveled_x*, never negative."""
    if not math.isfinite(traveled_x) or traveled_x <= 0:
        return 0
    return math.floor(traveled_x / divisor)


def format_score(score: int, width: int = 5) -> str:
    """Zero-pad *score* to *width* digits.

    >>> format_score(42)
    '00042'
    """
    return f"{max(score, 0):0{width}d}"
