"""
Output Assembler

Wraps ranked matches in the MatchingOutput envelope and generates warnings
about sparse input.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .contracts import TranscriptData, AssessmentResults, ProgramMatch, MatchingOutput
from .constants import ENGINE_VERSION

logger = logging.getLogger(__name__)


def assemble_output(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    matches: List[ProgramMatch],
    total_evaluated: int,
    processing_time_ms: Optional[float] = None
) -> MatchingOutput:
    """
    Assemble the final MatchingOutput.

    Args:
        transcript: Transcript the matches were computed from
        assessment: Assessment the matches were computed from
        matches: Ranked matches
        total_evaluated: Number of catalog programs scored
        processing_time_ms: Processing time in milliseconds

    Returns:
        Complete MatchingOutput
    """
    warnings = _generate_warnings(transcript, assessment)

    if not matches:
        warning_msg = "No programs matched your profile. Try completing more of the assessment."
        logger.warning(f"⚠️ {warning_msg}")
        warnings.append(warning_msg)

    return MatchingOutput(
        request_id=str(uuid.uuid4()),
        matches=matches,
        total_programs_evaluated=total_evaluated,
        total_matched=len(matches),
        processing_time_ms=processing_time_ms,
        engine_version=ENGINE_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        warnings=warnings,
    )


def _generate_warnings(
    transcript: TranscriptData,
    assessment: AssessmentResults
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if not assessment.riasec:
        warnings.append("No RIASEC scores provided. Personality fit was not scored.")

    if transcript.gpa <= 0:
        warnings.append("GPA not provided. Academic fit may be underestimated.")

    if not transcript.extracurriculars:
        warnings.append("No extracurricular activities provided.")

    return warnings
