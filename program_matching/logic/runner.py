"""
Engine Runner

Orchestrates a matching request:
1. Checks the caller preconditions
2. Runs the pure matching function
3. Times it and wraps the result for the HTTP layer

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
import time
from typing import Dict, Optional

from .contracts import (
    TranscriptData,
    AssessmentResults,
    UniversityData,
    MatchingOutput,
    PathData,
    CareerField,
)
from .candidate_generator import generate_candidates
from .engine import ProgramMatchingEngine
from .output_assembler import assemble_output
from .path_synthesizer import generate_career_path

logger = logging.getLogger(__name__)


class InvalidMatchingRequest(ValueError):
    """The caller sent input the matching engine is not defined for."""


def validate_matching_request(
    transcript: Optional[TranscriptData],
    assessment: Optional[AssessmentResults]
) -> None:
    """
    Enforce the preconditions of every matching entry point.

    Raises:
        InvalidMatchingRequest: if either input is missing or the transcript
            has no courses
    """
    if transcript is None or assessment is None:
        raise InvalidMatchingRequest("Both transcript data and assessment results are required")
    if not transcript.courses:
        raise InvalidMatchingRequest("Transcript must contain at least one course")


def run_program_matching(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    catalog: Optional[UniversityData] = None,
    quick: bool = False
) -> MatchingOutput:
    """
    Main entry point: run the matching pipeline for one student.

    Args:
        transcript: Student's academic record
        assessment: Behavioral assessment scores
        catalog: University catalog. If None, uses the bundled catalog.
        quick: Use the simple keyword matcher instead of the profile matcher

    Returns:
        MatchingOutput with ranked matches

    Raises:
        InvalidMatchingRequest: if the preconditions do not hold
    """
    validate_matching_request(transcript, assessment)

    engine = ProgramMatchingEngine(catalog)
    mode = "quick" if quick else "profile"
    logger.info(f"🚀 Starting {mode} program matching for {len(transcript.courses)} courses")

    start_time = time.perf_counter()
    if quick:
        matches = engine.quick_match_programs(transcript, assessment)
    else:
        matches = engine.match_student_to_programs(transcript, assessment)
    processing_time = (time.perf_counter() - start_time) * 1000

    total_evaluated = sum(1 for _ in generate_candidates(engine.catalog))

    output = assemble_output(
        transcript=transcript,
        assessment=assessment,
        matches=matches,
        total_evaluated=total_evaluated,
        processing_time_ms=round(processing_time, 2),
    )

    top = matches[0] if matches else None
    logger.info(
        f"✅ Matched {output.total_matched}/{total_evaluated} programs in {output.processing_time_ms}ms"
        + (f" (top: {top.program.name} @ {top.match_percentage}%)" if top else "")
    )
    return output


def run_quick_matching(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    catalog: Optional[UniversityData] = None
) -> MatchingOutput:
    """Run the simple keyword matcher. Same contract as run_program_matching."""
    return run_program_matching(transcript, assessment, catalog, quick=True)


def run_career_path(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    career_catalog: Optional[Dict[str, CareerField]] = None
) -> PathData:
    """
    Run the career path synthesizer for one student.

    Raises:
        InvalidMatchingRequest: if the preconditions do not hold
    """
    validate_matching_request(transcript, assessment)

    logger.info(f"🧭 Generating career path for {len(transcript.courses)} courses")
    path = generate_career_path(transcript, assessment, career_catalog)
    logger.info(f"✅ Career path: {path.id} @ {path.match_percentage}%")

    return path
