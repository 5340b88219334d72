"""Composite scoring and bucket gating.

Composite range: 10-100 (clamped). Each must-have violation costs a fixed
penalty. The four sub-dimensions are the composite split 40:30:15:15, so
they always sum to ~100 at a perfect score.
"""

from screener.core.schemas import Bucket

VIOLATION_PENALTY = 9
MIN_SCORE = 10
MAX_SCORE = 100

STRONG_THRESHOLD = 80
POTENTIAL_THRESHOLD = 50

# (label, max) in display order.
DIMENSION_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("Skill Alignment", 40),
    ("Relevant Experience", 30),
    ("Role Context & Complexity", 15),
    ("Career Trajectory", 15),
)


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest int, ties away from zero.

    Integer arithmetic keeps results exact for values like 30 * 15 / 100.
    Both arguments must be non-negative.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def composite_score(base_score: int, violation_count: int) -> int:
    """Apply the violation penalty to a base score and clamp to [10, 100]."""
    penalized = base_score - VIOLATION_PENALTY * violation_count
    return max(MIN_SCORE, min(MAX_SCORE, penalized))


def dimension_score(composite: int, weight: int) -> int:
    """Share of ``composite`` for a dimension worth ``weight`` points."""
    return round_half_up(composite * weight, 100)


def dimension_scores(composite: int) -> list[tuple[str, int, int]]:
    """Return (label, score, max) for every dimension."""
    return [
        (label, dimension_score(composite, weight), weight)
        for label, weight in DIMENSION_WEIGHTS
    ]


def classify_bucket(score: int, violation_count: int) -> Bucket:
    """Place a candidate in a match tier.

    Only ``strong`` is gated on violations: a candidate with unmet
    must-haves and a score >= 80 lands in ``potential``, not ``low``.
    """
    if violation_count == 0 and score >= STRONG_THRESHOLD:
        return "strong"
    if score >= POTENTIAL_THRESHOLD:
        return "potential"
    return "low"


def score_percent(score: int, max_score: int) -> int:
    """Score as a whole percentage of its maximum."""
    return round_half_up(score * 100, max_score)
