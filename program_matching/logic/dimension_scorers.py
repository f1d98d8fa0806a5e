"""
Dimension Scorers

Individual scoring functions for each evaluation dimension of the program
matcher. Each scorer returns points between 0 and its own maximum.
All logic is deterministic - no AI/ML components.
"""

from typing import List, Optional
from .contracts import StudentProfile, ProgramCandidate, Program, DimensionScore, Extracurricular
from .classifier import classify_subject
from .constants import (
    OTHER_SUBJECT,
    RIASEC_TRAITS,
    GRADE_SCALE_MAX,
    GPA_BASELINE,
    GPA_MAX_POINTS,
    SUBJECT_POOL_POINTS,
    ACADEMIC_MAX_POINTS,
    TOP_TRAIT_COUNT,
    TRAIT_TAG_POINTS,
    PERSONALITY_MAX_POINTS,
    EXTRACURRICULAR_TAG_KEYWORDS,
    EXTRACURRICULAR_TAG_POINTS,
    EXTRACURRICULAR_MAX_POINTS,
    TOP_SUBJECT_COUNT,
    SUBJECT_COURSE_POINTS,
    CAREER_MAX_POINTS,
)


def score_academic_fit(
    profile: StudentProfile,
    candidate: ProgramCandidate
) -> DimensionScore:
    """
    Score GPA and subject strengths against the program.

    GPA is measured against a 3.0 baseline (up to 10 points). The remaining
    30 points are split evenly across the subject categories the program's
    courses cover.
    """
    gpa_score = min(GPA_MAX_POINTS, (profile.gpa / GPA_BASELINE) * GPA_MAX_POINTS)
    gpa_score = max(0.0, gpa_score)

    relevant = relevant_subjects(candidate.program)
    share = SUBJECT_POOL_POINTS / max(1, len(relevant))

    subject_score = 0.0
    for subject in relevant:
        strength = profile.subject_strengths.get(subject, 0.0)
        subject_score += (strength / GRADE_SCALE_MAX) * share

    score = min(ACADEMIC_MAX_POINTS, gpa_score + subject_score)

    return DimensionScore(
        dimension="academic_fit",
        score=score,
        max_score=ACADEMIC_MAX_POINTS,
        explanation=(
            f"GPA: {gpa_score:.1f}/{GPA_MAX_POINTS:.0f}, "
            f"subjects ({', '.join(relevant) or 'none'}): {subject_score:.1f}/{SUBJECT_POOL_POINTS:.0f}"
        )
    )


def score_personality_fit(
    profile: StudentProfile,
    candidate: ProgramCandidate
) -> DimensionScore:
    """
    Score overlap between the student's top RIASEC traits and program tags.
    """
    tags = [tag.lower() for tag in candidate.program.tags]
    matched = [
        trait for trait in top_riasec_traits(profile)
        if any(trait in tag for tag in tags)
    ]
    score = len(matched) * TRAIT_TAG_POINTS

    return DimensionScore(
        dimension="personality_fit",
        score=score,
        max_score=PERSONALITY_MAX_POINTS,
        explanation=f"Matched traits: {', '.join(matched) or 'none'}"
    )


def score_extracurricular_fit(
    profile: StudentProfile,
    candidate: ProgramCandidate
) -> DimensionScore:
    """
    Score activities whose mapped career tag is one of the program's tags.
    """
    tags = {tag.lower() for tag in candidate.program.tags}
    matched = []

    for activity in profile.extracurriculars:
        tag = activity_tag(activity)
        if tag and tag in tags:
            matched.append(activity.name)

    score = min(EXTRACURRICULAR_MAX_POINTS, len(matched) * EXTRACURRICULAR_TAG_POINTS)

    return DimensionScore(
        dimension="extracurricular_fit",
        score=score,
        max_score=EXTRACURRICULAR_MAX_POINTS,
        explanation=f"Relevant activities: {', '.join(matched) or 'none'}"
    )


def score_career_fit(
    profile: StudentProfile,
    candidate: ProgramCandidate
) -> DimensionScore:
    """
    Score the student's strongest subjects against the program's courses.
    """
    courses = candidate.program.courses
    matched = [
        subject for subject in top_subjects(profile)
        if any(course_covers_subject(course, subject) for course in courses)
    ]
    score = len(matched) * SUBJECT_COURSE_POINTS

    return DimensionScore(
        dimension="career_fit",
        score=score,
        max_score=CAREER_MAX_POINTS,
        explanation=f"Top subjects taught: {', '.join(matched) or 'none'}"
    )


# =============================================================================
# HELPERS
# =============================================================================

def relevant_subjects(program: Program) -> List[str]:
    """Subject categories covered by the program's courses, first-seen order."""
    subjects = [classify_subject(course) for course in program.courses]
    return [s for s in dict.fromkeys(subjects) if s != OTHER_SUBJECT]


def top_riasec_traits(profile: StudentProfile, count: int = TOP_TRAIT_COUNT) -> List[str]:
    """
    Highest RIASEC traits with a positive score.
    Ties keep RIASEC declaration order.
    """
    scored = [
        (trait, profile.personality_traits.get(trait, 0.0))
        for trait in RIASEC_TRAITS
    ]
    scored = [item for item in scored if item[1] > 0]
    scored.sort(key=lambda item: item[1], reverse=True)
    return [trait for trait, _ in scored[:count]]


def top_subjects(profile: StudentProfile, count: int = TOP_SUBJECT_COUNT) -> List[str]:
    """
    Subject categories with the highest average score.
    Ties keep transcript order.
    """
    ranked = sorted(profile.subject_strengths.items(), key=lambda item: item[1], reverse=True)
    return [subject for subject, _ in ranked[:count]]


def course_covers_subject(course_name: str, subject: str) -> bool:
    """True when the course name contains the subject name, case-insensitive."""
    return subject.lower() in course_name.lower()


def activity_tag(activity: Extracurricular) -> Optional[str]:
    """Career tag implied by an activity, first keyword wins."""
    text = " ".join([activity.name, activity.role, activity.description]).lower()
    for keyword, tag in EXTRACURRICULAR_TAG_KEYWORDS:
        if keyword in text:
            return tag
    return None
