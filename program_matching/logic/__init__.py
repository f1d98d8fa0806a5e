"""
Program Matching Logic Module

Provides the deterministic student-to-program matching engine and the
career path synthesizer.
"""

from .contracts import (
    Course,
    Extracurricular,
    TranscriptData,
    AssessmentResults,
    StudentProfile,
    University,
    Department,
    Program,
    UniversityData,
    ProgramCandidate,
    DimensionScore,
    ProgramMatch,
    PathData,
    MatchingOutput,
)
from .engine import ProgramMatchingEngine, match_student_to_programs, quick_match_programs
from .path_synthesizer import generate_career_path
from .profile_builder import build_student_profile
from .candidate_generator import load_catalog, get_catalog, generate_candidates
from .runner import InvalidMatchingRequest, run_program_matching, run_quick_matching, run_career_path

__all__ = [
    # Main engine
    "ProgramMatchingEngine",
    "match_student_to_programs",
    "quick_match_programs",
    "generate_career_path",
    "build_student_profile",

    # Catalog
    "load_catalog",
    "get_catalog",
    "generate_candidates",

    # Runner
    "InvalidMatchingRequest",
    "run_program_matching",
    "run_quick_matching",
    "run_career_path",

    # Contracts
    "Course",
    "Extracurricular",
    "TranscriptData",
    "AssessmentResults",
    "StudentProfile",
    "University",
    "Department",
    "Program",
    "UniversityData",
    "ProgramCandidate",
    "DimensionScore",
    "ProgramMatch",
    "PathData",
    "MatchingOutput",
]
