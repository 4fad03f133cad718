from swot_scorer.scoring.scale import (
    ALLOWED_SCORES,
    FIBONACCI_SCALE,
    ZERO_SCORE,
    is_allowed_score,
    is_finite_number,
    snap_to_scale,
)

__all__ = [
    "ALLOWED_SCORES",
    "FIBONACCI_SCALE",
    "ZERO_SCORE",
    "is_allowed_score",
    "is_finite_number",
    "snap_to_scale",
]
