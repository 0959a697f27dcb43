"""
Typo-tolerant campus search.

Short queries (one or two characters) are treated as a name prefix or a
state code. Longer queries are scored per field with difflib: a field
containing the query scores 1.0, otherwise the score is the share of query
characters covered by matching runs of at least two characters, wherever
they occur in the field.
"""

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Iterable, List, Protocol, Sequence

MAX_RESULTS = 50
SHORT_QUERY_LENGTH = 2
MIN_RUN_LENGTH = 2
MATCH_THRESHOLD = 0.6

NAME_WEIGHT = 0.7
CITY_WEIGHT = 0.2
STATE_WEIGHT = 0.1


class CampusLike(Protocol):
    name: str
    city: str
    state: str


@dataclass(frozen=True)
class _Scored:
    relevance: float
    exact: bool
    campus: CampusLike


def field_similarity(query: str, value: str) -> float:
    """
    Similarity of a lowercase query to a lowercase field value in [0, 1].
    """
    if not query or not value:
        return 0.0
    if query in value:
        return 1.0
    matcher = SequenceMatcher(None, query, value, autojunk=False)
    matched = sum(
        block.size for block in matcher.get_matching_blocks() if block.size >= MIN_RUN_LENGTH
    )
    return min(1.0, matched / len(query))


def _length_factor(query: str, value: str) -> float:
    # 1.0 when the field is no longer than the query, approaching 0.5 as it grows.
    if not value:
        return 0.0
    return 0.5 + 0.5 * min(1.0, len(query) / len(value))


def _search_short(campuses: Iterable[CampusLike], query: str, limit: int) -> List[CampusLike]:
    q = query.lower()
    code = query.upper()
    matches = [c for c in campuses if q in c.name.lower() or c.state == code]
    matches.sort(key=lambda c: (not c.name.lower().startswith(q), c.name.lower(), c.name))
    return matches[:limit]


def _search_fuzzy(campuses: Iterable[CampusLike], query: str, limit: int) -> List[CampusLike]:
    q = query.lower()
    scored = []
    for campus in campuses:
        name, city, state = campus.name.lower(), campus.city.lower(), campus.state.lower()
        name_sim = field_similarity(q, name)
        city_sim = field_similarity(q, city)
        state_sim = field_similarity(q, state)
        if max(name_sim, city_sim, state_sim) < MATCH_THRESHOLD:
            continue
        relevance = (
            NAME_WEIGHT * name_sim * _length_factor(q, name)
            + CITY_WEIGHT * city_sim * _length_factor(q, city)
            + STATE_WEIGHT * state_sim * _length_factor(q, state)
        )
        scored.append(_Scored(relevance, name == q, campus))

    scored.sort(key=lambda s: (-s.relevance, not s.exact, len(s.campus.name), s.campus.name))
    return [s.campus for s in scored[:limit]]


def search_campuses(
    campuses: Sequence[CampusLike],
    query: str,
    limit: int = MAX_RESULTS,
) -> List[CampusLike]:
    """
    Rank campuses against a free text query.

    Args:
        campuses: Candidate campuses
        query: User input; surrounding whitespace is ignored
        limit: Maximum results, never more than 50

    Returns:
        Matching campuses, best first; [] for a blank query
    """
    query = (query or "").strip()
    if not query:
        return []
    limit = max(0, min(limit, MAX_RESULTS))
    if len(query) <= SHORT_QUERY_LENGTH:
        return _search_short(campuses, query, limit)
    return _search_fuzzy(campuses, query, limit)
