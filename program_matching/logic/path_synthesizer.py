"""
Career Path Synthesizer

Category-level alternative to the program matcher: scores five broad career
fields from subject-category averages and RIASEC traits, picks the best one
and attaches static sample universities and a templated recommendation.
"""

from typing import Dict, List, Optional
from .contracts import TranscriptData, AssessmentResults, PathData, CareerField
from .classifier import classify_subject, course_points
from .candidate_generator import get_career_path_catalog
from .aggregator import round_half_up
from .recommendation_text import generate_requirements, generate_ai_recommendation
from .constants import (
    CAREER_FIELDS,
    SUBJECT_BONUS_RULES,
    RIASEC_FIELD_WEIGHTS,
    RIASEC_NORMALIZED_MAX,
    FIELD_SCORE_PRECISION,
    PATH_MATCH_CAP,
)

PATH_SUBJECT_TABLE = "career_path"


def generate_career_path(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    career_catalog: Optional[Dict[str, CareerField]] = None
) -> PathData:
    """
    Recommend the single best broad career field for a student.

    Args:
        transcript: Student's academic record
        assessment: Behavioral assessment scores
        career_catalog: Static field content. If None, uses the bundled data.

    Returns:
        PathData with match percentage capped at 95
    """
    fields = career_catalog if career_catalog is not None else get_career_path_catalog()

    averages = calculate_category_averages(transcript)
    normalized_riasec = normalize_riasec(assessment.riasec)
    field_scores = score_career_fields(averages, normalized_riasec)

    career_field = pick_top_field(field_scores)
    match_percentage = min(round_half_up(field_scores[career_field]), PATH_MATCH_CAP)

    content = fields[career_field]

    return PathData(
        id=career_field,
        title=content.title,
        description=content.description,
        match_percentage=match_percentage,
        requirements=generate_requirements(career_field, match_percentage),
        universities=content.universities,
        ai_recommendation=generate_ai_recommendation(career_field, transcript, normalized_riasec),
        field_scores={f: round(s, 2) for f, s in field_scores.items()},
    )


def calculate_category_averages(transcript: TranscriptData) -> Dict[str, float]:
    """Average canonical score per career-path subject category."""
    totals: Dict[str, List[float]] = {}

    for course in transcript.courses:
        category = classify_subject(course.name, PATH_SUBJECT_TABLE)
        totals.setdefault(category, []).append(
            course_points(course, transcript.score_scale)
        )

    return {category: sum(s) / len(s) for category, s in totals.items()}


def normalize_riasec(riasec: Optional[Dict[str, float]]) -> Dict[str, float]:
    """
    Scale RIASEC scores to 0-100 by the largest score.
    An empty or all-zero mapping gives all zeros.
    """
    if not riasec:
        return {}

    scores = {trait.lower(): max(0.0, value or 0.0) for trait, value in riasec.items()}
    max_score = max(scores.values())
    if max_score <= 0:
        return {trait: 0.0 for trait in scores}

    return {
        trait: value / max_score * RIASEC_NORMALIZED_MAX
        for trait, value in scores.items()
    }


def score_career_fields(
    category_averages: Dict[str, float],
    normalized_riasec: Dict[str, float]
) -> Dict[str, float]:
    """
    Accumulate points per career field.

    Subject bonuses apply when a category average is strictly above its
    threshold; RIASEC traits then add weighted contributions.
    """
    field_scores = {field: 0.0 for field in CAREER_FIELDS}

    for category, threshold, bonuses in SUBJECT_BONUS_RULES:
        if category_averages.get(category, 0.0) > threshold:
            for field, points in bonuses.items():
                field_scores[field] += points

    for trait, weights in RIASEC_FIELD_WEIGHTS.items():
        value = normalized_riasec.get(trait, 0.0)
        if not value:
            continue
        for field, weight in weights.items():
            field_scores[field] += value * weight

    return field_scores


def pick_top_field(field_scores: Dict[str, float]) -> str:
    """Highest-scoring field; the first declared field wins a tie."""
    best = CAREER_FIELDS[0]
    best_score = round(field_scores.get(best, 0.0), FIELD_SCORE_PRECISION)

    for field in CAREER_FIELDS[1:]:
        score = round(field_scores.get(field, 0.0), FIELD_SCORE_PRECISION)
        if score > best_score:
            best, best_score = field, score

    return best
