"""
Ranker

Orders program matches and selects the top results.
"""

from typing import List, Optional
from .contracts import ProgramMatch


def rank_matches(matches: List[ProgramMatch]) -> List[ProgramMatch]:
    """
    Rank matches by match percentage (descending).

    The sort is stable: equal scores keep catalog order.
    """
    return sorted(matches, key=lambda m: m.match_percentage, reverse=True)


def select_top(
    matches: List[ProgramMatch],
    limit: int,
    threshold: Optional[int] = None
) -> List[ProgramMatch]:
    """
    Rank, filter and truncate matches.

    Args:
        matches: Scored matches in catalog order
        limit: Maximum number of results
        threshold: When given, only matches strictly above it are kept

    Returns:
        At most ``limit`` matches, best first
    """
    ranked = rank_matches(matches)
    if threshold is not None:
        ranked = [m for m in ranked if m.match_percentage > threshold]
    return ranked[:max(0, limit)]
