from __future__ import annotations

from typing import Iterable, Sequence

from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.models import Facility, FacilitySuggestion, GeoPoint

PREFIX_SCORE = 3.0
CONTAINS_SCORE = 1.0
POPULARITY_WEIGHT = 0.1
MAX_SUGGESTIONS = 10


def facility_score(facility: Facility, query: str) -> float:
    """Fuzzy relevance of a facility for a lower-cased query.

    Each searchable string contributes independently: a prefix hit is worth
    3, a substring hit 1. Popularity adds a small bias once per facility.
    """

    if not query:
        return 0.0

    score = 0.0
    for text in facility.searchable_strings():
        text = text.lower()
        if text.startswith(query):
            score += PREFIX_SCORE
        elif query in text:
            score += CONTAINS_SCORE
    score += facility.popularity * POPULARITY_WEIGHT
    return score


def rank_facilities(facilities: Iterable[Facility], query: str) -> list[Facility]:
    """Facilities with a positive score, best first (stable on ties)."""

    q = query.strip().lower()
    scored = [(facility_score(f, q), f) for f in facilities]
    matches = [(s, f) for s, f in scored if s > 0]
    matches.sort(key=lambda x: x[0], reverse=True)
    return [f for _, f in matches]


def suggest_facilities(
    facilities: Sequence[Facility],
    query: str,
    *,
    pickup: GeoPoint | None = None,
    limit: int = MAX_SUGGESTIONS,
) -> list[FacilitySuggestion]:
    """Destination suggestions as shown under the search box.

    With a query, the best lexical match is pinned first and the remaining
    matches are ordered by proximity to the pickup (or popularity when no
    pickup is known). Without a query every facility is a candidate.
    """

    q = query.strip().lower()

    top: Facility | None = None
    if q:
        ranked = rank_facilities(facilities, q)
        if not ranked:
            return []
        top, rest = ranked[0], ranked[1:]
    else:
        rest = list(facilities)

    rest_items = [_suggestion(f, pickup) for f in rest]
    if pickup is not None:
        rest_items.sort(key=lambda s: s.distance_km)
    else:
        rest_items.sort(key=lambda s: s.facility.popularity, reverse=True)

    items: list[FacilitySuggestion] = []
    if top is not None:
        items.append(_suggestion(top, pickup))
    for item in rest_items:
        if len(items) >= limit:
            break
        items.append(item)
    return items


def find_by_name(facilities: Iterable[Facility], name: str) -> Facility | None:
    for f in facilities:
        if f.name == name:
            return f
    return None


def find_mentioned(facilities: Iterable[Facility], text: str) -> Facility | None:
    """First facility whose full name appears inside free text."""

    lowered = text.lower()
    for f in facilities:
        if f.name.lower() in lowered:
            return f
    return None


def _suggestion(facility: Facility, pickup: GeoPoint | None) -> FacilitySuggestion:
    distance = (
        haversine_distance_km(pickup, facility.position) if pickup is not None else None
    )
    return FacilitySuggestion(facility=facility, distance_km=distance)
