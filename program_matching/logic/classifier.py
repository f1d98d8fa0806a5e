"""
Subject Classifier

Maps free-text course names to broad subject categories and converts course
grades onto the canonical 0-4.0 scale used everywhere inside the engine.
"""

from typing import Optional
from .contracts import Course
from .constants import (
    SUBJECT_KEYWORD_TABLES,
    DEFAULT_SUBJECT_TABLE,
    OTHER_SUBJECT,
    LETTER_GRADE_POINTS,
    GRADE_SCALE_MAX,
    PERCENTAGE_SCALE_MAX,
)


def classify_subject(course_name: str, table: str = DEFAULT_SUBJECT_TABLE) -> str:
    """
    Classify a course name into a subject category.

    Matching is a case-insensitive substring test; the first keyword of the
    table found in the name wins.

    Args:
        course_name: Free-text course name (e.g. "Calculus I")
        table: Name of the keyword table in SUBJECT_KEYWORD_TABLES

    Returns:
        Category name, or "Other" when nothing matches

    Raises:
        KeyError: if the table name is not registered
    """
    keywords = SUBJECT_KEYWORD_TABLES[table]
    name = (course_name or "").lower()

    for keyword, category in keywords:
        if keyword in name:
            return category

    return OTHER_SUBJECT


def letter_grade_to_points(grade: Optional[str]) -> float:
    """Letter grade to 4.0-scale points. Unknown or blank grades give 0."""
    if not grade:
        return 0.0
    return LETTER_GRADE_POINTS.get(grade.strip().upper(), 0.0)


def normalize_course_score(score: Optional[float], scale: str = "auto") -> float:
    """
    Convert a raw course score to the canonical 0-4.0 scale.

    Args:
        score: Raw score as submitted
        scale: "gpa" (already 0-4), "percentage" (0-100) or "auto"
            (values above 4.0 are read as percentages)

    Returns:
        Score clamped to [0, 4.0]
    """
    if score is None or score <= 0:
        return 0.0

    if scale == "percentage" or (scale == "auto" and score > GRADE_SCALE_MAX):
        score = score / PERCENTAGE_SCALE_MAX * GRADE_SCALE_MAX

    return min(GRADE_SCALE_MAX, score)


def course_points(course: Course, scale: str = "auto") -> float:
    """
    Canonical score for one course.

    A missing or zero score falls back to the letter grade. Letter grades are
    already on the 4.0 scale and are not rescaled.
    """
    if course.score:
        return normalize_course_score(course.score, scale)
    return letter_grade_to_points(course.grade)
