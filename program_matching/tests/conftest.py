"""
Shared fixtures for the program matching tests.
"""

import pytest

from program_matching.logic.contracts import (
    UniversityData,
    University,
    Department,
    Program,
    TranscriptData,
    AssessmentResults,
    Course,
    Extracurricular,
)


def make_catalog(*programs: Program) -> UniversityData:
    """One university, one department, the given programs in order."""
    return UniversityData(universities=[
        University(
            id="test-u",
            name="Test University",
            location="Addis Ababa, Ethiopia",
            departments=[
                Department(id="test-d", name="Test Department", programs=list(programs)),
            ],
        ),
    ])


@pytest.fixture
def stem_student():
    """Strong in mathematics and physics, investigative/realistic."""
    transcript = TranscriptData(
        courses=[
            Course(name="Calculus I", grade="A", score=4.0),
            Course(name="Physics", grade="A-", score=3.8),
            Course(name="Chemistry", grade="B+", score=3.5),
            Course(name="Biology", grade="C", score=2.0),
        ],
        gpa=3.7,
        strengths=["Mathematics"],
        extracurriculars=[
            Extracurricular(name="Robotics Club", role="Member"),
            Extracurricular(name="Chess Club"),
        ],
    )
    assessment = AssessmentResults(riasec={
        "realistic": 4,
        "investigative": 5,
        "artistic": 1,
        "social": 2,
        "enterprising": 2,
        "conventional": 3,
    })
    return transcript, assessment
