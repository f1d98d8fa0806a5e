"""
Score Aggregator

Combines individual dimension scores into a single 0-100 match percentage.
"""

import math
from typing import List, Tuple
from .contracts import StudentProfile, ProgramCandidate, DimensionScore
from .dimension_scorers import (
    score_academic_fit,
    score_personality_fit,
    score_extracurricular_fit,
    score_career_fit,
)

SCORERS = [
    score_academic_fit,
    score_personality_fit,
    score_extracurricular_fit,
    score_career_fit,
]


def aggregate_scores(
    profile: StudentProfile,
    candidate: ProgramCandidate
) -> Tuple[int, List[DimensionScore]]:
    """
    Compute all dimension scores and aggregate into a match percentage.

    Args:
        profile: Student's normalized profile
        candidate: Program candidate to score

    Returns:
        (match percentage in [0, 100], dimension scores)
    """
    dimension_scores = [scorer(profile, candidate) for scorer in SCORERS]

    total_score = sum(d.score for d in dimension_scores)
    max_possible = sum(d.max_score for d in dimension_scores)

    return to_percentage(total_score, max_possible), dimension_scores


def to_percentage(total_score: float, max_possible: float) -> int:
    """Scale points to an integer percentage clamped to [0, 100]."""
    percentage = 100 * total_score / max(1.0, max_possible)
    return round_half_up(min(100.0, max(0.0, percentage)))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
