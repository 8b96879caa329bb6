"""Ordered naming rules applied to a ``PlaceCandidate``.

Each table is a sequence of ``(predicate, extractor)`` pairs. ``classify``
walks a table top to bottom and hands the candidate to the extractor of the
first matching predicate; later rules are never consulted. An extractor may
return ``None``, in which case the caller falls back to the original query.
"""
from typing import Callable, Optional, Sequence
from .candidates import PlaceCandidate

Predicate = Callable[[PlaceCandidate], bool]
Extractor = Callable[[PlaceCandidate], Optional[str]]
RuleTable = Sequence[tuple[Predicate, Extractor]]

BUSINESS_TYPES: frozenset[str] = frozenset({
    "establishment",
    "point_of_interest",
    "store",
    "restaurant",
    "gas_station",
    "lodging",
    "gym",
    "supermarket",
})
INTERSECTION_TYPE: str = "intersection"
ROUTE_TYPE: str = "route"
RESIDENTIAL_TYPES: frozenset[str] = frozenset({"street_address", "premise"})
ROUTE_SEPARATOR: str = " & "


def is_business(candidate: PlaceCandidate) -> bool:
    return not candidate.semantic_types.isdisjoint(BUSINESS_TYPES)


def is_intersection(candidate: PlaceCandidate) -> bool:
    return INTERSECTION_TYPE in candidate.semantic_types


def is_residential(candidate: PlaceCandidate) -> bool:
    return not candidate.semantic_types.isdisjoint(RESIDENTIAL_TYPES)


def matches_anything(candidate: PlaceCandidate) -> bool:
    return True


def join_routes(candidate: PlaceCandidate) -> str:
    names = [
        comp.long_name or comp.short_name
        for comp in candidate.address_components
        if ROUTE_TYPE in comp.component_types
    ]
    return ROUTE_SEPARATOR.join(name for name in names if name)


def name_or_address(candidate: PlaceCandidate) -> Optional[str]:
    return candidate.display_name or candidate.formatted_address


def routes_or_address(candidate: PlaceCandidate) -> Optional[str]:
    return join_routes(candidate) or candidate.formatted_address


def address_only(candidate: PlaceCandidate) -> Optional[str]:
    return candidate.formatted_address


PLACE_SEARCH_RULES: RuleTable = (
    (is_business, name_or_address),
    (is_intersection, routes_or_address),
    (is_residential, address_only),
    (matches_anything, name_or_address),
)

GEOCODE_RULES: RuleTable = (
    (is_intersection, routes_or_address),
    (matches_anything, address_only),
)


def classify(candidate: PlaceCandidate, rules: RuleTable) -> Optional[str]:
    for predicate, extractor in rules:
        if predicate(candidate):
            return extractor(candidate)
    return None
