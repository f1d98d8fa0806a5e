"""
Profile Builder

Normalizes a raw transcript and assessment into the canonical StudentProfile.
Sparse or missing input degrades to zero/default values; nothing here raises.
"""

from typing import Dict, List, Optional
from .contracts import TranscriptData, AssessmentResults, StudentProfile
from .classifier import classify_subject, course_points
from .constants import (
    ACADEMIC_STRENGTH_THRESHOLD,
    OTHER_SUBJECT,
    CAREER_ANCHOR_FIELDS,
    RIASEC_CAREER_FIELDS,
    RIASEC_TRAITS,
    MULTIPLE_INTELLIGENCE_TRAITS,
    TOP_PREFERENCE_COUNT,
)


def build_student_profile(
    transcript: TranscriptData,
    assessment: AssessmentResults
) -> StudentProfile:
    """
    Create a student profile from transcript and assessment data.

    Args:
        transcript: Student's academic record
        assessment: Behavioral assessment scores

    Returns:
        StudentProfile built fresh for this request
    """
    subject_strengths = calculate_subject_strengths(transcript)

    return StudentProfile(
        gpa=max(0.0, transcript.gpa),
        subject_strengths=subject_strengths,
        academic_strengths=_academic_strengths(transcript.strengths, subject_strengths),
        extracurriculars=list(transcript.extracurriculars),
        career_preferences=extract_career_preferences(assessment),
        personality_traits=map_personality_traits(assessment),
    )


def calculate_subject_strengths(transcript: TranscriptData) -> Dict[str, float]:
    """Average canonical score per subject category, in first-seen order."""
    totals: Dict[str, List[float]] = {}

    for course in transcript.courses:
        category = classify_subject(course.name)
        totals.setdefault(category, []).append(
            course_points(course, transcript.score_scale)
        )

    return {
        category: sum(scores) / len(scores)
        for category, scores in totals.items()
    }


def _academic_strengths(
    declared: List[str],
    subject_strengths: Dict[str, float]
) -> List[str]:
    strengths = list(dict.fromkeys(declared))
    for category, average in subject_strengths.items():
        if category == OTHER_SUBJECT or category in strengths:
            continue
        if average >= ACADEMIC_STRENGTH_THRESHOLD:
            strengths.append(category)
    return strengths


def top_keys(scores: Optional[Dict[str, float]], count: int) -> List[str]:
    """
    Keys of the highest scores, descending.
    Ties keep the mapping's insertion order.
    """
    if not scores:
        return []
    ranked = sorted(scores.items(), key=lambda item: item[1] or 0, reverse=True)
    return [key for key, _ in ranked[:count]]


def extract_career_preferences(assessment: AssessmentResults) -> List[str]:
    """
    Career-field tags from the top career anchors and RIASEC traits.
    """
    preferences: List[str] = []

    for anchor in top_keys(assessment.career_anchors, TOP_PREFERENCE_COUNT):
        preferences.extend(CAREER_ANCHOR_FIELDS.get(anchor.lower(), []))

    for code in top_keys(assessment.riasec, TOP_PREFERENCE_COUNT):
        preferences.extend(RIASEC_CAREER_FIELDS.get(code.lower(), []))

    # Unique, first-seen order
    return list(dict.fromkeys(preferences))


def map_personality_traits(assessment: AssessmentResults) -> Dict[str, float]:
    """
    RIASEC and multiple-intelligence traits scaled to [0, 1].

    All 14 traits are always present. Values are divided by the largest one;
    when every value is 0 they stay at 0.
    """
    riasec = _lower_keys(assessment.riasec)
    intelligence = _lower_keys(assessment.multiple_intelligence)

    traits: Dict[str, float] = {}
    for trait in RIASEC_TRAITS:
        traits[trait] = max(0.0, riasec.get(trait) or 0.0)
    for source_key, trait in MULTIPLE_INTELLIGENCE_TRAITS.items():
        traits[trait] = max(0.0, intelligence.get(source_key) or 0.0)

    max_value = max(traits.values())
    if max_value > 0:
        traits = {trait: value / max_value for trait, value in traits.items()}

    return traits


def _lower_keys(scores: Optional[Dict[str, float]]) -> Dict[str, float]:
    return {key.lower(): value for key, value in (scores or {}).items()}
