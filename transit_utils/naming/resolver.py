import logging
from typing import Callable, Optional
from ..config import Settings, configure_logging
from ..fetching.geocoding import GoogleMapsGeocoder
from ..fetching.places import GoogleMapsPlaceSearcher
from ..fetching.results import LookupMiss
from ..fetching.session import GoogleMapsSession
from .candidates import PlaceCandidate, candidate_from_geocode, candidate_from_place_search
from .classification import GEOCODE_RULES, PLACE_SEARCH_RULES, RuleTable, classify

logger = logging.getLogger(__name__)

Stage = tuple[type[GoogleMapsSession], Callable[..., Optional[PlaceCandidate]], RuleTable]

class DestinationResolver:
    """Pick a rider-facing name for a free-text destination.

    Place search runs first because it knows business names; the geocoder
    covers queries it cannot place. The first stage that yields a candidate
    decides the name, and the query itself is the terminal fallback.
    """
    STAGES: tuple[Stage, ...] = (
        (GoogleMapsPlaceSearcher, candidate_from_place_search, PLACE_SEARCH_RULES),
        (GoogleMapsGeocoder, candidate_from_geocode, GEOCODE_RULES),
    )

    def __init__(self, timeout: Optional[float] = None, api_key: Optional[str] = None):
        self.timeout = timeout
        self.api_key = api_key

    @classmethod
    def from_settings(cls, settings: Settings) -> "DestinationResolver":
        configure_logging(settings.log_level)
        return cls(timeout=settings.timeout_s, api_key=settings.api_key)

    def resolve(self, query: str, api_key: Optional[str] = None) -> str:
        if not query:
            return query
        try:
            return self.__resolve(query, api_key or self.api_key)
        except Exception:
            logger.exception("Error getting destination name for %r", query)
            return query

    def __resolve(self, query: str, api_key: Optional[str]) -> str:
        for client_cls, to_candidate, rules in self.STAGES:
            with client_cls(api_key=api_key, timeout=self.timeout) as client:
                result = client.lookup(query)
            if isinstance(result, LookupMiss):
                logger.info("%s fell through for %r: %s", client_cls.__name__, query, result.failure.value)
                continue

            candidate = to_candidate(result.response)
            if candidate is None:
                continue
            return classify(candidate, rules) or query

        logger.info("No provider could name %r, keeping the original text", query)
        return query


_default_resolver: Optional[DestinationResolver] = None


def get_default_resolver() -> DestinationResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = DestinationResolver()
    return _default_resolver


def resolve_destination_name(query: str, api_key: Optional[str] = None) -> str:
    return get_default_resolver().resolve(query, api_key)
