"""
Preference-weighted ordering of a campus feed.

A post rated at least a full star above another always comes first. Posts
without reviews count as 2.5 stars here. Among the posts no remaining post
outranks that way, the next one is picked by the viewer's score (1-5,
default 3) for its food type, then the newer post, then the post id.

A plain pairwise comparator over these rules is not transitive, so the
feed is built by repeated selection instead of a sort.
"""

from typing import Any, Iterable, List, Mapping, Optional, Protocol

UNRATED_RATING = 2.5
RATING_GAP = 1.0
DEFAULT_PREFERENCE = 3
FAVORITE_THRESHOLD = 4


class Rankable(Protocol):
    id: str
    food_type: Any
    creation_time: int
    average_rating: Optional[float]
    review_count: int


def _type_key(food_type: Any) -> str:
    return getattr(food_type, "value", food_type)


def effective_rating(entry: Rankable) -> float:
    if entry.review_count and entry.average_rating is not None:
        return float(entry.average_rating)
    return UNRATED_RATING


def preference_score(preferences: Optional[Mapping[str, int]], food_type: Any) -> int:
    if not preferences:
        return DEFAULT_PREFERENCE
    return preferences.get(_type_key(food_type), DEFAULT_PREFERENCE)


def is_favorite(preferences: Optional[Mapping[str, int]], food_type: Any) -> bool:
    """Explicit score of 4 or 5 for the food type."""
    if not preferences:
        return False
    return preferences.get(_type_key(food_type), 0) >= FAVORITE_THRESHOLD


def outranks(a: Rankable, b: Rankable) -> bool:
    """True when a is rated at least a full star above b."""
    return effective_rating(a) - effective_rating(b) >= RATING_GAP


def _selection_key(entry: Rankable, preferences: Optional[Mapping[str, int]]):
    return (-preference_score(preferences, entry.food_type), -entry.creation_time, entry.id)


def rank_feed(entries: Iterable[Rankable], preferences: Optional[Mapping[str, int]] = None) -> List[Rankable]:
    """
    Order feed entries for a viewer.

    Args:
        entries: Feed entries; not modified
        preferences: Viewer's food type scores, or None for anonymous

    Returns:
        A new list, best first
    """
    remaining = sorted(entries, key=lambda e: _selection_key(e, preferences))
    ranked: List[Rankable] = []
    while remaining:
        # The highest rated remaining entry is never outranked
        best_rated = max(remaining, key=effective_rating)
        index = next(
            i for i, entry in enumerate(remaining) if not outranks(best_rated, entry)
        )
        ranked.append(remaining.pop(index))
    return ranked
