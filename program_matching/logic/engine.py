"""
Program Matching Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for matching a student to catalog programs.

Every method is a pure, synchronous computation over in-memory data: the
catalog is only read, and each call builds and discards its own profile.
"""

from typing import List, Optional
from .contracts import (
    TranscriptData,
    AssessmentResults,
    UniversityData,
    ProgramCandidate,
    ProgramMatch,
    UniversityRef,
    DepartmentRef,
    DimensionScore,
)
from .candidate_generator import generate_candidates, get_catalog
from .profile_builder import build_student_profile, top_keys
from .aggregator import aggregate_scores
from .classifier import course_points
from .ranker import select_top
from .constants import (
    PROFILE_MATCH_LIMIT,
    QUICK_MATCH_LIMIT,
    QUICK_MATCH_THRESHOLD,
    QUICK_MATCH_CAP,
    QUICK_SUBJECT_POINTS,
    QUICK_TRAIT_POINTS,
    QUICK_STRENGTH_POINTS,
    TOP_SUBJECT_COUNT,
    TOP_TRAIT_COUNT,
)


class ProgramMatchingEngine:
    """
    Scores every catalog program against one student.

    Pipeline flow:
    1. Profile Building - Normalize transcript + assessment
    2. Candidate Generation - Flatten the catalog
    3. Dimension Scoring - Academic, personality, extracurricular, career
    4. Aggregation - Combine into a 0-100 match percentage
    5. Ranking - Stable sort and top-K selection
    """

    def __init__(self, catalog: Optional[UniversityData] = None):
        """
        Args:
            catalog: University catalog. If None, uses the bundled catalog.
        """
        self.catalog = catalog if catalog is not None else get_catalog()

    def match_student_to_programs(
        self,
        transcript: TranscriptData,
        assessment: AssessmentResults,
        limit: int = PROFILE_MATCH_LIMIT
    ) -> List[ProgramMatch]:
        """
        Rank catalog programs for a student using the full profile.

        No threshold is applied; the best ``limit`` programs are returned.

        Args:
            transcript: Student's academic record
            assessment: Behavioral assessment scores
            limit: Maximum number of matches

        Returns:
            Matches sorted by match percentage, best first
        """
        profile = build_student_profile(transcript, assessment)

        matches = []
        for candidate in generate_candidates(self.catalog):
            percentage, dimension_scores = aggregate_scores(profile, candidate)
            matches.append(_to_match(candidate, percentage, dimension_scores))

        return select_top(matches, limit)

    def quick_match_programs(
        self,
        transcript: TranscriptData,
        assessment: AssessmentResults,
        limit: int = QUICK_MATCH_LIMIT
    ) -> List[ProgramMatch]:
        """
        Simple keyword matcher used for quick pathway suggestions.

        Points:
        - 30 per top-3 course mentioned in the program's courses
        - 20 per top-2 RIASEC trait found in the program's tags
        - 15 per declared strength found in the program's highlights

        Scores are capped at 95 and only programs strictly above 50 are kept.
        """
        top_courses = sorted(
            transcript.courses,
            key=lambda c: course_points(c, transcript.score_scale),
            reverse=True
        )[:TOP_SUBJECT_COUNT]
        subjects = [c.name.lower() for c in top_courses if c.name]

        riasec = {k: v for k, v in (assessment.riasec or {}).items() if (v or 0) > 0}
        traits = [t.lower() for t in top_keys(riasec, TOP_TRAIT_COUNT)]

        strengths = [s.lower() for s in transcript.strengths if s]

        matches = []
        for candidate in generate_candidates(self.catalog):
            program = candidate.program
            courses = [c.lower() for c in program.courses]
            tags = [t.lower() for t in program.tags]
            highlights = [h.lower() for h in program.highlights]

            score = 0
            for subject in subjects:
                if any(_mentions(course, subject) for course in courses):
                    score += QUICK_SUBJECT_POINTS
            for trait in traits:
                if any(trait in tag for tag in tags):
                    score += QUICK_TRAIT_POINTS
            for strength in strengths:
                if any(strength in highlight for highlight in highlights):
                    score += QUICK_STRENGTH_POINTS

            matches.append(_to_match(candidate, min(score, QUICK_MATCH_CAP)))

        return select_top(matches, limit, threshold=QUICK_MATCH_THRESHOLD)

    def score_single_program(
        self,
        transcript: TranscriptData,
        assessment: AssessmentResults,
        candidate: ProgramCandidate
    ) -> dict:
        """
        Score a single program for a student.

        Useful for getting detailed scoring on a specific program
        the student is interested in.

        Returns:
            Dict with the match percentage and per-dimension details
        """
        profile = build_student_profile(transcript, assessment)
        percentage, dimension_scores = aggregate_scores(profile, candidate)

        return {
            "match_percentage": percentage,
            "dimension_scores": {
                d.dimension: {
                    "score": round(d.score, 2),
                    "max_score": d.max_score,
                    "explanation": d.explanation,
                }
                for d in dimension_scores
            },
        }


def _to_match(
    candidate: ProgramCandidate,
    percentage: int,
    dimension_scores: Optional[List[DimensionScore]] = None
) -> ProgramMatch:
    university = candidate.university
    department = candidate.department
    return ProgramMatch(
        university=UniversityRef(id=university.id, name=university.name, location=university.location),
        department=DepartmentRef(id=department.id, name=department.name),
        program=candidate.program,
        match_percentage=percentage,
        dimension_scores=dimension_scores or [],
    )


def _mentions(course: str, subject: str) -> bool:
    # Program course must contain the student's course name
    if not course or not subject:
        return False
    return subject in course


# Convenience functions for simple usage
def match_student_to_programs(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    catalog: Optional[UniversityData] = None
) -> List[ProgramMatch]:
    """Top-10 profile-based matches against the given or bundled catalog."""
    return ProgramMatchingEngine(catalog).match_student_to_programs(transcript, assessment)


def quick_match_programs(
    transcript: TranscriptData,
    assessment: AssessmentResults,
    catalog: Optional[UniversityData] = None
) -> List[ProgramMatch]:
    """Top-5 simple-matcher results against the given or bundled catalog."""
    return ProgramMatchingEngine(catalog).quick_match_programs(transcript, assessment)
