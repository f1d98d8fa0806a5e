"""
Test the career path synthesizer.
"""

import json
import math

import pytest

from program_matching.logic import generate_career_path, run_career_path, InvalidMatchingRequest
from program_matching.logic.candidate_generator import (
    load_career_path_catalog,
    DEFAULT_CAREER_PATH_CATALOG_PATH,
)
from program_matching.logic.path_synthesizer import (
    normalize_riasec,
    pick_top_field,
    calculate_category_averages,
)
from program_matching.logic.contracts import (
    TranscriptData,
    AssessmentResults,
    Course,
    Extracurricular,
)
from program_matching.logic.constants import CAREER_FIELDS, HIGH_MATCH_REQUIREMENT

ALL_RIASEC = ["realistic", "investigative", "artistic", "social", "enterprising", "conventional"]


@pytest.fixture(scope="module")
def career_catalog():
    return load_career_path_catalog(DEFAULT_CAREER_PATH_CATALOG_PATH)


def _unclassified_transcript():
    return TranscriptData(courses=[Course(name="Underwater Basket Weaving", score=2.0)])


def test_equal_riasec_picks_engineering(career_catalog):
    """engineering, business and socialSciences tie at 35; first declared wins."""
    assessment = AssessmentResults(riasec={trait: 5 for trait in ALL_RIASEC})

    path = generate_career_path(_unclassified_transcript(), assessment, career_catalog)

    assert path.id == "engineering"
    assert path.match_percentage == 35
    assert path.field_scores["business"] == 35
    assert path.field_scores["socialSciences"] == 35
    assert path.title == "Engineering & Technology"


def test_all_zero_riasec_picks_engineering(career_catalog):
    assessment = AssessmentResults(riasec={trait: 0 for trait in ALL_RIASEC})

    path = generate_career_path(_unclassified_transcript(), assessment, career_catalog)

    assert path.id == "engineering"
    assert path.match_percentage == 0


def test_empty_riasec_has_no_nan(career_catalog):
    path = generate_career_path(_unclassified_transcript(), AssessmentResults(riasec={}), career_catalog)

    assert path.id == "engineering"
    assert all(not math.isnan(score) for score in path.field_scores.values())
    assert normalize_riasec({}) == {}
    assert normalize_riasec({"social": 0}) == {"social": 0.0}


def test_health_sciences_profile(career_catalog):
    transcript = TranscriptData(courses=[
        Course(name="Biology", grade="A", score=4.0),
        Course(name="Chemistry", grade="A", score=4.0),
    ])
    assessment = AssessmentResults(riasec={"social": 5, "investigative": 4})

    path = generate_career_path(transcript, assessment, career_catalog)

    # 30 + 25 subject bonuses, 100 * 0.15 social, 80 * 0.15 investigative
    assert path.id == "healthSciences"
    assert path.match_percentage == 82
    assert len(path.requirements) == 6
    assert HIGH_MATCH_REQUIREMENT not in path.requirements
    assert [u.name for u in path.universities][0] == "Addis Ababa University College of Health Sciences"

    # The field key is interpolated as-is
    assert path.ai_recommendation.startswith(
        "Based on your assessment results, healthSciences is a strong match"
    )
    assert "thrive in healthSciences-related roles" in path.ai_recommendation


def test_match_is_capped_and_flags_strong_profiles(career_catalog):
    transcript = TranscriptData(
        courses=[
            Course(name="Mathematics", score=4.0),
            Course(name="Physics", score=4.0),
            Course(name="Computer Science", score=4.0),
        ],
        extracurriculars=[
            Extracurricular(name="Robotics Club"),
            Extracurricular(name="Chess"),
            Extracurricular(name="Drama"),
        ],
    )
    assessment = AssessmentResults(riasec={"realistic": 5, "investigative": 5, "conventional": 5})

    path = generate_career_path(transcript, assessment, career_catalog)

    assert path.id == "engineering"
    assert path.match_percentage == 95
    assert path.requirements[-1] == HIGH_MATCH_REQUIREMENT

    text = path.ai_recommendation
    assert text.startswith("Based on your assessment results, engineering is a strong match")
    assert "Mathematics and Physics and Computer Science" in text
    assert "realistic and investigative personality traits" in text
    assert "Robotics Club and Chess" in text
    assert "Drama" not in text
    assert text.endswith("Problem Solving, Analytical Thinking, Technical Skills.")


def test_percentage_scale_transcripts(career_catalog):
    transcript = TranscriptData(
        courses=[Course(name="Biology", score=90)],
        score_scale="percentage",
    )

    averages = calculate_category_averages(transcript)
    assert averages["Biology"] == pytest.approx(3.6)

    path = generate_career_path(transcript, AssessmentResults(), career_catalog)
    assert path.id == "healthSciences"
    assert path.match_percentage == 30


def test_tie_break_ignores_float_noise():
    scores = {field: 0.0 for field in CAREER_FIELDS}
    scores["engineering"] = 0.1 + 0.2
    scores["business"] = 0.3
    assert pick_top_field(scores) == "engineering"

    scores["business"] = 0.31
    assert pick_top_field(scores) == "business"


def test_path_output_wire_names(career_catalog):
    path = generate_career_path(_unclassified_transcript(), AssessmentResults(), career_catalog)
    wire = path.model_dump(by_alias=True)

    assert {"matchPercentage", "aiRecommendation", "universities"} <= set(wire)
    assert "admissionDeadline" in wire["universities"][0]
    assert "studyMode" in wire["universities"][0]["programs"][0]


def test_career_catalog_must_list_every_field(tmp_path):
    raw = json.loads(DEFAULT_CAREER_PATH_CATALOG_PATH.read_text(encoding="utf-8"))
    del raw["agriculture"]
    path = tmp_path / "career_paths.json"
    path.write_text(json.dumps(raw), encoding="utf-8")

    with pytest.raises(ValueError):
        load_career_path_catalog(path)


def test_runner_rejects_empty_transcript(career_catalog):
    with pytest.raises(InvalidMatchingRequest):
        run_career_path(TranscriptData(), AssessmentResults(), career_catalog)
