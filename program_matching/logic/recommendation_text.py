"""
Recommendation Text

Builds the requirement list and the templated natural-language
recommendation attached to a career path.
"""

from typing import Dict, List
from .contracts import TranscriptData
from .classifier import course_points
from .profile_builder import top_keys
from .constants import (
    BASE_REQUIREMENTS,
    FIELD_REQUIREMENTS,
    HIGH_MATCH_THRESHOLD,
    HIGH_MATCH_REQUIREMENT,
    FIELD_RECOMMENDATION_INFO,
    RECOMMENDATION_TOP_COURSES,
    RECOMMENDATION_TOP_TRAITS,
    RECOMMENDATION_TOP_ACTIVITIES,
)


def generate_requirements(career_field: str, match_percentage: int) -> List[str]:
    """Base admission requirements plus the field's own, with a note for strong matches."""
    requirements = BASE_REQUIREMENTS + FIELD_REQUIREMENTS[career_field]
    if match_percentage > HIGH_MATCH_THRESHOLD:
        requirements = requirements + [HIGH_MATCH_REQUIREMENT]
    return requirements


def generate_ai_recommendation(
    career_field: str,
    transcript: TranscriptData,
    normalized_riasec: Dict[str, float]
) -> str:
    """
    Fill the recommendation template for a career field.

    Mentions the student's top courses and top RIASEC traits that relate to
    the field, and their first two extracurricular activities.
    """
    info = FIELD_RECOMMENDATION_INFO[career_field]

    top_courses = sorted(
        transcript.courses,
        key=lambda c: course_points(c, transcript.score_scale),
        reverse=True
    )[:RECOMMENDATION_TOP_COURSES]
    field_subjects = [s.lower() for s in info["subjects"]]
    subject_match = [
        c.name for c in top_courses
        if any(s in c.name.lower() for s in field_subjects)
    ]

    positive = {k: v for k, v in normalized_riasec.items() if v > 0}
    trait_match = [
        trait for trait in top_keys(positive, RECOMMENDATION_TOP_TRAITS)
        if trait.lower() in info["traits"]
    ]

    activities = [
        a.name for a in transcript.extracurriculars[:RECOMMENDATION_TOP_ACTIVITIES]
        if a.name
    ]

    recommendation = f"Based on your assessment results, {career_field} is a strong match for your profile. "

    if subject_match:
        recommendation += (
            f"Your strong performance in {' and '.join(subject_match)} aligns well "
            f"with the academic requirements for this field. "
        )

    if trait_match:
        recommendation += (
            f"Your {' and '.join(trait_match)} personality traits indicate you would "
            f"thrive in {career_field}-related roles. "
        )

    if activities:
        recommendation += (
            f"Your involvement in {' and '.join(activities)} demonstrates relevant skills "
            f"and interests that would benefit you in this career path. "
        )

    recommendation += (
        f"Students with your profile typically excel in developing "
        f"{', '.join(info['strengths'])}."
    )

    return recommendation
