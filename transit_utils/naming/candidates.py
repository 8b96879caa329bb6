from dataclasses import dataclass, field
from typing import Optional
from ..fetching.models.google_maps_geocoding_response import AddressComponent, GMGeocodeResponse
from ..fetching.models.google_maps_places_response import GMPlaceSearchResponse


@dataclass(frozen=True)
class CandidateComponent:
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    component_types: frozenset[str] = frozenset()


@dataclass(frozen=True)
class PlaceCandidate:
    display_name: Optional[str] = None
    formatted_address: Optional[str] = None
    semantic_types: frozenset[str] = frozenset()
    address_components: tuple[CandidateComponent, ...] = field(default_factory=tuple)


def _components(raw: Optional[list[AddressComponent]]) -> tuple[CandidateComponent, ...]:
    return tuple(
        CandidateComponent(
            long_name=comp.long_name,
            short_name=comp.short_name,
            component_types=frozenset(comp.types or ()),
        )
        for comp in raw or ()
    )


def candidate_from_place_search(response: GMPlaceSearchResponse) -> Optional[PlaceCandidate]:
    if not response.results:
        return None
    top = response.results[0]
    return PlaceCandidate(
        display_name=top.name,
        formatted_address=top.formatted_address,
        semantic_types=frozenset(top.types or ()),
        address_components=_components(top.address_components),
    )


def candidate_from_geocode(response: GMGeocodeResponse) -> Optional[PlaceCandidate]:
    # Geocode results carry no business name.
    if not response.results:
        return None
    top = response.results[0]
    return PlaceCandidate(
        formatted_address=top.formatted_address,
        semantic_types=frozenset(top.types or ()),
        address_components=_components(top.address_components),
    )
