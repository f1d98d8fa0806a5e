"""
Test the subject classifier and the student profile builder.
"""

import pytest

from program_matching.logic.classifier import (
    classify_subject,
    letter_grade_to_points,
    normalize_course_score,
    course_points,
)
from program_matching.logic.profile_builder import (
    build_student_profile,
    calculate_subject_strengths,
    extract_career_preferences,
    map_personality_traits,
    top_keys,
)
from program_matching.logic.contracts import (
    TranscriptData,
    AssessmentResults,
    Course,
)
from program_matching.logic.constants import RIASEC_TRAITS, MULTIPLE_INTELLIGENCE_TRAITS


# =============================================================================
# CLASSIFIER
# =============================================================================

def test_classify_subject_keywords():
    assert classify_subject("Calculus I") == "Mathematics"
    assert classify_subject("Linear Algebra") == "Mathematics"
    assert classify_subject("PHYSICS") == "Physics"
    assert classify_subject("Computer Programming") == "Computer Science"
    assert classify_subject("Financial Accounting") == "Business"
    assert classify_subject("Underwater Basket Weaving") == "Other"
    assert classify_subject("") == "Other"


def test_classify_subject_first_keyword_wins():
    """'history' comes before 'art' in the table."""
    assert classify_subject("Art History") == "History"
    assert classify_subject("English Language") == "English"
    # 'math' appears before 'economics'
    assert classify_subject("Mathematical Economics") == "Mathematics"


def test_classify_subject_career_path_table():
    assert classify_subject("World History", "career_path") == "Humanities"
    assert classify_subject("Civics", "career_path") == "Humanities"
    assert classify_subject("Economics", "career_path") == "Business"
    assert classify_subject("Civics") == "Other"


def test_classify_subject_unknown_table():
    with pytest.raises(KeyError):
        classify_subject("Calculus", "no-such-table")


def test_letter_grades():
    assert letter_grade_to_points("A") == 4.0
    assert letter_grade_to_points(" b+ ") == 3.3
    assert letter_grade_to_points("F") == 0.0
    assert letter_grade_to_points("Z") == 0.0
    assert letter_grade_to_points("") == 0.0
    assert letter_grade_to_points(None) == 0.0


def test_normalize_course_score():
    assert normalize_course_score(3.5) == 3.5
    assert normalize_course_score(92) == pytest.approx(3.68)
    assert normalize_course_score(92, "percentage") == pytest.approx(3.68)
    assert normalize_course_score(3.0, "percentage") == pytest.approx(0.12)
    assert normalize_course_score(150) == 4.0
    assert normalize_course_score(None) == 0.0
    assert normalize_course_score(-5) == 0.0


def test_course_points_falls_back_to_grade():
    assert course_points(Course(name="History", grade="B+", score=0)) == 3.3
    assert course_points(Course(name="History", grade="B+")) == 3.3
    assert course_points(Course(name="History", grade="B+", score=3.9)) == 3.9
    assert course_points(Course(name="History", grade="?")) == 0.0


# =============================================================================
# PROFILE BUILDER
# =============================================================================

def _transcript():
    return TranscriptData(
        courses=[
            Course(name="Calculus I", grade="A", score=4.0),
            Course(name="Algebra", grade="B", score=3.0),
            Course(name="Physics", grade="B"),
            Course(name="Woodwork", grade="A"),
        ],
        gpa=3.4,
        strengths=["Leadership", "Leadership"],
        extracurriculars=["Debate Club"],
    )


def test_subject_strengths_average_per_category():
    strengths = calculate_subject_strengths(_transcript())

    assert list(strengths) == ["Mathematics", "Physics", "Other"]
    assert strengths["Mathematics"] == pytest.approx(3.5)
    assert strengths["Physics"] == pytest.approx(3.0)
    assert strengths["Other"] == pytest.approx(4.0)


def test_academic_strengths_merge_declared_and_derived():
    profile = build_student_profile(_transcript(), AssessmentResults())

    # Declared first and de-duplicated; Physics is below 3.4, Other never counts
    assert profile.academic_strengths == ["Leadership", "Mathematics"]
    assert profile.extracurriculars[0].name == "Debate Club"


def test_build_profile_is_idempotent():
    assessment = AssessmentResults(riasec={"social": 3, "artistic": 5})
    first = build_student_profile(_transcript(), assessment)
    second = build_student_profile(_transcript(), assessment)
    assert first == second


def test_negative_gpa_is_clamped():
    transcript = TranscriptData(courses=[Course(name="Physics", grade="A")], gpa=-1)
    assert build_student_profile(transcript, AssessmentResults()).gpa == 0.0


def test_transcript_tolerates_nulls():
    transcript = TranscriptData.model_validate({
        "courses": None,
        "gpa": None,
        "strengths": None,
        "extracurriculars": [{"name": "Red Cross", "position": "Volunteer"}],
    })
    assert transcript.courses == []
    assert transcript.gpa == 0.0
    assert transcript.extracurriculars[0].role == "Volunteer"


def test_personality_traits_all_zero():
    traits = map_personality_traits(AssessmentResults())

    assert len(traits) == len(RIASEC_TRAITS) + len(MULTIPLE_INTELLIGENCE_TRAITS)
    assert all(value == 0.0 for value in traits.values())


def test_personality_traits_scaled_by_max():
    traits = map_personality_traits(AssessmentResults(
        riasec={"realistic": 5, "investigative": 4},
        multiple_intelligence={"logical_mathematical": 10, "musical": -2},
    ))

    assert traits["logical"] == 1.0
    assert traits["realistic"] == pytest.approx(0.5)
    assert traits["investigative"] == pytest.approx(0.4)
    assert traits["musical"] == 0.0
    assert traits["social"] == 0.0


def test_top_keys_keeps_insertion_order_on_ties():
    assert top_keys({"a": 1, "b": 3, "c": 3}, 2) == ["b", "c"]
    assert top_keys(None, 3) == []


def test_career_preferences():
    preferences = extract_career_preferences(AssessmentResults(
        career_anchors={"technical": 5},
        riasec={"realistic": 5},
    ))
    assert preferences == ["Engineering", "Technology", "Agriculture", "Construction"]

    assert extract_career_preferences(AssessmentResults()) == []


def test_trait_keys_are_case_insensitive():
    traits = map_personality_traits(AssessmentResults(
        riasec={"Realistic": 5, "SOCIAL": 2},
        multiple_intelligence={"Musical": 4},
    ))

    assert traits["realistic"] == 1.0
    assert traits["social"] == pytest.approx(0.4)
    assert traits["musical"] == pytest.approx(0.8)
