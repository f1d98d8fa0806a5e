"""
Test the program matching HTTP endpoints.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import make_catalog
from program_matching.routes import router
from program_matching.logic.candidate_generator import (
    get_catalog,
    get_career_path_catalog,
    load_career_path_catalog,
    DEFAULT_CAREER_PATH_CATALOG_PATH,
)
from program_matching.logic.contracts import Program


TRANSCRIPT = {
    "courses": [
        {"name": "Calculus I", "grade": "A", "score": 4.0, "credits": 3},
        {"name": "Physics", "grade": "A-", "score": 3.8, "credits": 3},
    ],
    "gpa": 3.8,
    "strengths": ["Mathematics"],
    "extracurriculars": [{"name": "Robotics Club", "role": "Member", "description": ""}],
}

ASSESSMENT = {
    "riasec": {"realistic": 5, "investigative": 4, "artistic": 1,
               "social": 2, "enterprising": 2, "conventional": 3},
}


@pytest.fixture
def client():
    catalog = make_catalog(
        Program(
            id="math",
            name="Applied Mathematics",
            courses=["Calculus", "Physics"],
            tags=["investigative", "realistic", "engineering"],
            highlights=["Mathematics foundation"],
        ),
        Program(id="soc", name="Sociology", courses=["Sociology"], tags=["social"]),
    )
    career_catalog = load_career_path_catalog(DEFAULT_CAREER_PATH_CATALOG_PATH)

    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_career_path_catalog] = lambda: career_catalog
    return TestClient(app)


def test_generate(client):
    response = client.post("/program-matching/generate", json={
        "transcriptData": TRANSCRIPT,
        "assessmentResults": ASSESSMENT,
    })

    assert response.status_code == 200
    body = response.json()
    assert body["totalProgramsEvaluated"] == 2
    assert [m["program"]["id"] for m in body["matches"]] == ["math", "soc"]
    assert 0 <= body["matches"][0]["matchPercentage"] <= 100
    assert body["matches"][0]["university"] == {
        "id": "test-u", "name": "Test University", "location": "Addis Ababa, Ethiopia",
    }


def test_generate_requires_both_inputs(client):
    response = client.post("/program-matching/generate", json={"transcriptData": TRANSCRIPT})

    assert response.status_code == 400
    assert response.json()["detail"] == "Both transcript data and assessment results are required"


def test_generate_requires_courses(client):
    response = client.post("/program-matching/generate", json={
        "transcriptData": {"courses": [], "gpa": 3.0},
        "assessmentResults": ASSESSMENT,
    })

    assert response.status_code == 400
    assert "at least one course" in response.json()["detail"]


def test_generate_rejects_malformed_transcript(client):
    response = client.post("/program-matching/generate", json={
        "transcriptData": {"courses": "Calculus"},
        "assessmentResults": ASSESSMENT,
    })

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid matching request")


def test_quick(client):
    response = client.post("/program-matching/quick", json={
        "transcriptData": TRANSCRIPT,
        "assessmentResults": ASSESSMENT,
    })

    assert response.status_code == 200
    matches = response.json()["matches"]
    # Physics 30 + 2 traits * 20 + 1 strength * 15; "Calculus I" is not in "Calculus"
    assert [(m["program"]["id"], m["matchPercentage"]) for m in matches] == [("math", 85)]


def test_career_path(client):
    response = client.post("/program-matching/career-path", json={
        "transcriptData": TRANSCRIPT,
        "assessmentResults": ASSESSMENT,
    })

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "engineering"
    assert body["matchPercentage"] <= 95
    assert body["aiRecommendation"]
    assert len(body["universities"]) == 2


def test_combined(client):
    response = client.post("/program-matching/combined", json={
        "academicTranscript": {
            "subjects": [
                {"name": "Mathematics", "percentage": 95},
                {"name": "Physics", "percentage": 90},
            ],
            "gpa": 3.7,
        },
        "extracurricular": {"activities": [{"name": "Robotics Club", "position": "Member"}]},
        "behavioral": {"results": ASSESSMENT},
    })

    assert response.status_code == 200
    body = response.json()
    assert body["matches"]
    assert body["careerPath"]["id"] == "engineering"


def test_combined_without_subjects(client):
    response = client.post("/program-matching/combined", json={
        "academicTranscript": {"subjects": []},
    })

    assert response.status_code == 400


def test_health(client):
    response = client.get("/program-matching/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_app_loads_catalogs_on_import():
    import main

    assert get_catalog.cache_info().currsize == 1
    assert get_career_path_catalog.cache_info().currsize == 1

    response = TestClient(main.app).get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
