"""
Data Adapter for the Matching Engine

Transforms the assessment documents submitted by the web client (academic
transcript with percentage scores, extracurricular activities, behavioral
results) into TranscriptData and AssessmentResults.

This is a pure TRANSFORM layer:
- NO scoring logic
- NO ranking
- NO I/O
"""

from typing import Any, Dict, List, Optional, Tuple
from .contracts import TranscriptData, AssessmentResults, Course, Extracurricular
from .constants import SUBJECT_AREAS, STRENGTH_PERCENTAGE_THRESHOLD, OTHER_SUBJECT


def calculate_strength_areas(subjects: List[Dict[str, Any]]) -> List[str]:
    """
    Strength areas from percentage scores.

    A broad area (e.g. "Science" for Physics/Chemistry/Biology) is a strength
    when its average reaches 85%; any single subject at 85% or more is also
    listed by name.

    Args:
        subjects: Rows of ``{"name": str, "percentage": float}``

    Returns:
        Unique strength names, areas first
    """
    area_scores: Dict[str, List[float]] = {}
    for subject in subjects:
        area = SUBJECT_AREAS.get(subject.get("name", ""), OTHER_SUBJECT)
        area_scores.setdefault(area, []).append(_percentage(subject))

    strengths = [
        area for area, scores in area_scores.items()
        if sum(scores) / len(scores) >= STRENGTH_PERCENTAGE_THRESHOLD
    ]
    strengths.extend(
        subject.get("name", "") for subject in subjects
        if _percentage(subject) >= STRENGTH_PERCENTAGE_THRESHOLD and subject.get("name")
    )

    return list(dict.fromkeys(strengths))


def transcript_from_academic_record(
    subjects: List[Dict[str, Any]],
    gpa: Optional[float] = None,
    activities: Optional[List[Dict[str, Any]]] = None
) -> TranscriptData:
    """
    Build a transcript from the academic assessment form.

    Subject percentages are kept as submitted and flagged with the percentage
    scale, so conversion to the 4.0 scale happens in one place.
    """
    courses = [
        Course(name=subject.get("name", ""), grade="", score=_percentage(subject), credits=1)
        for subject in subjects
    ]

    return TranscriptData(
        courses=courses,
        gpa=gpa or 0.0,
        strengths=calculate_strength_areas(subjects),
        extracurriculars=[extracurricular_from_activity(a) for a in activities or []],
        score_scale="percentage",
    )


def extracurricular_from_activity(activity: Dict[str, Any]) -> Extracurricular:
    """Map an activity form row (``position``) to an Extracurricular (``role``)."""
    return Extracurricular(
        name=activity.get("name") or "",
        role=activity.get("position") or activity.get("role") or "",
        description=activity.get("description") or "",
    )


def assessment_from_behavioral(behavioral: Optional[Dict[str, Any]]) -> AssessmentResults:
    """
    Extract the scored results from a behavioral assessment document.

    Accepts either the full ``{"responses": ..., "results": {...}}`` document
    or the results mapping itself.
    """
    behavioral = behavioral or {}
    results = behavioral.get("results", behavioral) or {}
    return AssessmentResults.model_validate({
        key: value for key, value in results.items()
        if key in (
            "riasec",
            "multiple_intelligence", "multipleIntelligence",
            "career_anchors", "careerAnchors",
            "work_dimensions", "workDimensions",
        )
    })


def from_combined_assessment(
    payload: Dict[str, Any]
) -> Tuple[TranscriptData, AssessmentResults]:
    """
    Split a combined assessment submission into engine inputs.

    Args:
        payload: ``{"academicTranscript": {...}, "extracurricular": {...},
            "behavioral": {...}}``

    Returns:
        (TranscriptData, AssessmentResults)
    """
    academic = payload.get("academicTranscript") or {}
    extracurricular = payload.get("extracurricular") or {}

    transcript = transcript_from_academic_record(
        subjects=academic.get("subjects") or [],
        gpa=academic.get("gpa"),
        activities=extracurricular.get("activities") or [],
    )
    assessment = assessment_from_behavioral(payload.get("behavioral"))

    return transcript, assessment


def _percentage(subject: Dict[str, Any]) -> float:
    value = subject.get("percentage")
    try:
        return float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0
