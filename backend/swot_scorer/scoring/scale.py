"""
Fibonacci scoring scale and snapping of raw judgments onto it.

Scores live on a fixed ascending scale. Users may also pick an explicit 0
("judged irrelevant"), but raw values coming from the external scorer are
never snapped to 0: anything at or below zero becomes the lowest member.
"""

import math
from typing import Any, Sequence

FIBONACCI_SCALE: tuple[int, ...] = (
    1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610, 987, 1597,
)

ZERO_SCORE = 0

# Valores seleccionables por el usuario
ALLOWED_SCORES: tuple[int, ...] = (ZERO_SCORE, *FIBONACCI_SCALE)


def is_finite_number(value: Any) -> bool:
    """Real, finite number. Booleans do not count; ints of any size do."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # math.isfinite overflows on ints beyond float range
    return isinstance(value, int) or math.isfinite(value)


def snap_to_scale(n: float, scale: Sequence[int] = FIBONACCI_SCALE) -> int:
    """
    Map a raw number onto the nearest scale member.

    Args:
        n: Raw numeric judgment.
        scale: Ascending scale to snap onto.

    Returns:
        The lowest member when ``n <= 0``; otherwise the member closest to
        ``n``, the lower one on a tie.

    Example:
        >>> snap_to_scale(4)
        3
        >>> snap_to_scale(-7)
        1
    """
    best = scale[0]
    if n <= 0:
        return best

    min_diff = abs(n - best)
    for member in scale:
        diff = abs(n - member)
        # Strict comparison keeps the first (lower) candidate on ties
        if diff < min_diff:
            best = member
            min_diff = diff
    return best


def is_allowed_score(value: int) -> bool:
    """Whether ``value`` can be stored as an explicit criterion score."""
    return value in ALLOWED_SCORES
