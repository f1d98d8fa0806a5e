"""
Program Matching API Routes

Exposes the matching engine via REST API. The handlers only parse the request
body, call the engine and serialize the result.
"""

import logging
from typing import Any, Dict, Optional, Tuple
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import TranscriptData, AssessmentResults, UniversityData, CareerField
from .logic.candidate_generator import get_catalog, get_career_path_catalog
from .logic.adapter import from_combined_assessment
from .logic.runner import InvalidMatchingRequest, run_program_matching, run_quick_matching, run_career_path
from .logic.constants import ENGINE_VERSION

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/program-matching", tags=["program-matching"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class MatchingRequest(BaseModel):
    """Request body for the matching endpoints."""
    transcript_data: Optional[Dict[str, Any]] = Field(
        default=None,
        alias="transcriptData",
        description="Academic transcript",
        examples=[{
            "courses": [{"name": "Calculus I", "grade": "A", "score": 4.0, "credits": 3}],
            "gpa": 3.8,
            "strengths": ["Mathematics"],
            "extracurriculars": [{"name": "Robotics Club", "role": "Member", "description": ""}],
        }]
    )
    assessment_results: Optional[Dict[str, Any]] = Field(
        default=None,
        alias="assessmentResults",
        description="Behavioral assessment scores",
        examples=[{
            "riasec": {"realistic": 5, "investigative": 4, "artistic": 1,
                       "social": 2, "enterprising": 2, "conventional": 3},
        }]
    )

    class Config:
        populate_by_name = True


class CombinedAssessmentRequest(BaseModel):
    """The combined document submitted at the end of the assessment flow."""
    academic_transcript: Dict[str, Any] = Field(alias="academicTranscript")
    extracurricular: Dict[str, Any] = Field(default_factory=dict)
    behavioral: Dict[str, Any] = Field(default_factory=dict)
    submitted_at: Optional[str] = Field(default=None, alias="submittedAt")

    class Config:
        populate_by_name = True


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/generate", summary="Generate a personalized pathway")
def generate_pathway(
    request: MatchingRequest,
    catalog: UniversityData = Depends(get_catalog)
):
    """
    Rank catalog programs for a student.

    **Request Body:**
    - `transcriptData`: courses, GPA, strengths, extracurriculars
    - `assessmentResults`: RIASEC and other assessment scores

    **Response:**
    - Top 10 programs with `matchPercentage` (0-100) and dimension scores
    """
    try:
        transcript, assessment = _parse_request(request)
        output = run_program_matching(transcript, assessment, catalog)
        return output.model_dump(by_alias=True)
    except HTTPException:
        raise
    except Exception as e:
        return _server_error(e, "Error generating personalized pathway")


@router.post("/quick", summary="Quick keyword-based program matches")
def quick_matches(
    request: MatchingRequest,
    catalog: UniversityData = Depends(get_catalog)
):
    """
    Top 5 programs scoring above 50 with the simple keyword matcher.
    """
    try:
        transcript, assessment = _parse_request(request)
        output = run_quick_matching(transcript, assessment, catalog)
        return output.model_dump(by_alias=True)
    except HTTPException:
        raise
    except Exception as e:
        return _server_error(e, "Error generating program matches")


@router.post("/career-path", summary="Recommend a broad career path")
def career_path(
    request: MatchingRequest,
    career_catalog: Dict[str, CareerField] = Depends(get_career_path_catalog)
):
    """
    Best of five broad career fields with sample universities and a
    recommendation text. `matchPercentage` is capped at 95.
    """
    try:
        transcript, assessment = _parse_request(request)
        path = run_career_path(transcript, assessment, career_catalog)
        return path.model_dump(by_alias=True)
    except HTTPException:
        raise
    except Exception as e:
        return _server_error(e, "Error generating career path")


@router.post("/combined", summary="Match from a combined assessment submission")
def combined_assessment(
    request: CombinedAssessmentRequest,
    catalog: UniversityData = Depends(get_catalog),
    career_catalog: Dict[str, CareerField] = Depends(get_career_path_catalog)
):
    """
    Convert the combined academic/extracurricular/behavioral submission and
    return both program matches and a career path.
    """
    try:
        try:
            transcript, assessment = from_combined_assessment(request.model_dump(by_alias=True))
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid assessment data: {str(e)}")

        output = run_program_matching(transcript, assessment, catalog)
        path = run_career_path(transcript, assessment, career_catalog)

        response_data = output.model_dump(by_alias=True)
        response_data["careerPath"] = path.model_dump(by_alias=True)
        return response_data
    except InvalidMatchingRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        return _server_error(e, "Error processing combined assessment")


# =============================================================================
# HELPERS
# =============================================================================

def _parse_request(request: MatchingRequest) -> Tuple[TranscriptData, AssessmentResults]:
    """Validate the body into engine contracts; any problem is a 400."""
    if request.transcript_data is None or request.assessment_results is None:
        raise HTTPException(
            status_code=400,
            detail="Both transcript data and assessment results are required"
        )

    try:
        transcript = TranscriptData.model_validate(request.transcript_data)
        assessment = AssessmentResults.model_validate(request.assessment_results)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid matching request: {str(e)}")

    if not transcript.courses:
        raise HTTPException(status_code=400, detail="Transcript must contain at least one course")

    return transcript, assessment


def _server_error(error: Exception, message: str) -> JSONResponse:
    logger.exception(f"{message}: {error}")
    return JSONResponse(
        status_code=500,
        content={"error": str(error) or message}
    )


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Matching engine health check")
def health_check():
    """Check if the matching engine is operational."""
    return {"status": "ok", "engine": "program-matching", "version": ENGINE_VERSION}
