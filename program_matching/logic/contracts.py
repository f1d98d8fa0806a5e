"""
Data Contracts for the Program Matching Engine

Defines Pydantic models for the transcript and assessment inputs, the static
university catalog, and the match/path outputs.
These contracts are the API boundary for the matching engine.

Wire names follow the camelCase used by the web client (``matchPercentage``,
``studyMode``); Python attributes are snake_case and either spelling is
accepted on input.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class _WireModel(BaseModel):
    class Config:
        populate_by_name = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class Course(_WireModel):
    """One transcript row. ``score`` may be on the 0-4 or 0-100 scale."""
    name: str = ""
    grade: str = ""
    score: Optional[float] = None
    credits: float = 1


class Extracurricular(_WireModel):
    """Extracurricular activity. A bare string is read as the activity name."""
    name: str = ""
    role: str = Field(default="", validation_alias=AliasChoices("role", "position"))
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _coerce_name_only(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


class TranscriptData(_WireModel):
    """A student's academic record."""
    courses: List[Course] = Field(default_factory=list)
    gpa: float = 0.0
    strengths: List[str] = Field(default_factory=list)
    extracurriculars: List[Extracurricular] = Field(default_factory=list)

    # auto: scores above 4.0 are read as percentages
    score_scale: Literal["auto", "gpa", "percentage"] = Field(
        default="auto", alias="scoreScale"
    )

    @field_validator("courses", "strengths", "extracurriculars", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("gpa", mode="before")
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class AssessmentResults(_WireModel):
    """
    Self-report assessment scores.

    Every mapping is optional; an absent key means "no signal", not zero.
    """
    riasec: Optional[Dict[str, float]] = None
    multiple_intelligence: Optional[Dict[str, float]] = Field(
        default=None, alias="multipleIntelligence"
    )
    career_anchors: Optional[Dict[str, float]] = Field(
        default=None, alias="careerAnchors"
    )
    work_dimensions: Optional[Dict[str, float]] = Field(
        default=None, alias="workDimensions"
    )


# =============================================================================
# CATALOG CONTRACTS
# =============================================================================

class Program(_WireModel):
    id: str
    name: str
    description: str = ""
    duration: str = ""
    study_mode: str = Field(default="", alias="studyMode")
    tuition_fee: str = Field(default="", alias="tuitionFee")
    entry_requirements: List[str] = Field(default_factory=list, alias="entryRequirements")
    highlights: List[str] = Field(default_factory=list)
    courses: List[str] = Field(default_factory=list)
    career_opportunities: List[str] = Field(default_factory=list, alias="careerOpportunities")
    tags: List[str] = Field(default_factory=list)
    application_deadline: Optional[str] = Field(default=None, alias="applicationDeadline")


class Department(_WireModel):
    id: str
    name: str
    programs: List[Program] = Field(default_factory=list)


class University(_WireModel):
    id: str
    name: str
    location: str = ""
    departments: List[Department] = Field(default_factory=list)


class UniversityData(_WireModel):
    """The bundled university -> department -> program catalog."""
    universities: List[University] = Field(default_factory=list)


class UniversityRef(_WireModel):
    """University identity without its department tree."""
    id: str
    name: str
    location: str = ""


class DepartmentRef(_WireModel):
    id: str
    name: str


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class StudentProfile(_WireModel):
    """
    Canonical, normalized form of one student's signals.
    Built fresh per request and never persisted.
    """
    gpa: float = 0.0
    subject_strengths: Dict[str, float] = Field(default_factory=dict, alias="subjectStrengths")
    academic_strengths: List[str] = Field(default_factory=list, alias="academicStrengths")
    extracurriculars: List[Extracurricular] = Field(default_factory=list)
    career_preferences: List[str] = Field(default_factory=list, alias="careerPreferences")
    personality_traits: Dict[str, float] = Field(default_factory=dict, alias="personalityTraits")


class ProgramCandidate(BaseModel):
    """One flattened catalog leaf. References catalog objects, never copies."""
    university: University
    department: Department
    program: Program


class DimensionScore(_WireModel):
    """Individual sub-score with its own maximum."""
    dimension: str
    score: float = Field(ge=0.0)
    max_score: float = Field(ge=0.0, alias="maxScore")
    explanation: str = ""


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ProgramMatch(_WireModel):
    """A ranked program with its 0-100 match percentage."""
    university: UniversityRef
    department: DepartmentRef
    program: Program
    match_percentage: int = Field(ge=0, le=100, alias="matchPercentage")
    dimension_scores: List[DimensionScore] = Field(default_factory=list, alias="dimensionScores")


class PathProgram(_WireModel):
    id: int
    name: str
    duration: str = ""
    study_mode: str = Field(default="", alias="studyMode")
    tuition_fee: str = Field(default="", alias="tuitionFee")
    description: str = ""
    highlights: List[str] = Field(default_factory=list)


class PathUniversity(_WireModel):
    id: int
    name: str
    location: str = ""
    logo: str = ""
    description: str = ""
    admission_deadline: str = Field(default="", alias="admissionDeadline")
    programs: List[PathProgram] = Field(default_factory=list)


class CareerField(_WireModel):
    """Static content for one broad career field."""
    title: str
    description: str
    universities: List[PathUniversity] = Field(default_factory=list)


class PathData(_WireModel):
    """Single best-field recommendation from the career path synthesizer."""
    id: str
    title: str
    description: str
    match_percentage: int = Field(ge=0, le=95, alias="matchPercentage")
    requirements: List[str] = Field(default_factory=list)
    universities: List[PathUniversity] = Field(default_factory=list)
    ai_recommendation: str = Field(default="", alias="aiRecommendation")
    field_scores: Dict[str, float] = Field(default_factory=dict, alias="fieldScores")


class MatchingOutput(_WireModel):
    """
    Envelope returned to the HTTP layer around a ranked match list.
    """
    request_id: Optional[str] = Field(default=None, alias="requestId")
    matches: List[ProgramMatch] = Field(default_factory=list)

    total_programs_evaluated: int = Field(default=0, alias="totalProgramsEvaluated")
    total_matched: int = Field(default=0, alias="totalMatched")

    processing_time_ms: Optional[float] = Field(default=None, alias="processingTimeMs")
    engine_version: str = Field(default="1.0.0", alias="engineVersion")
    timestamp: Optional[str] = None

    warnings: List[str] = Field(default_factory=list)
