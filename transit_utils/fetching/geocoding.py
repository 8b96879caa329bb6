import logging
from typing import Optional
from .models.google_maps_geocoding_response import GMGeocodeResponse, Result
from .results import LookupHit
from .session import GoogleMapsSession

logger = logging.getLogger(__name__)

class GoogleMapsGeocoder(GoogleMapsSession):
    BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
    QUERY_PARAM = "address"
    RESPONSE_MODEL = GMGeocodeResponse

    def top_result(self, address: str) -> Optional[Result]:
        result = self.lookup(address)
        if not isinstance(result, LookupHit):
            return None
        return result.response.results[0]


def resolve_simple(address: Optional[str], api_key: Optional[str]) -> Optional[str]:
    """Minimal geocode-only name lookup.

    Unlike ``DestinationResolver.resolve`` this performs no place-type
    classification and returns ``None`` instead of the input when nothing
    usable comes back.
    """
    if not address or not api_key:
        return None

    try:
        with GoogleMapsGeocoder(api_key=api_key) as geocoder:
            result = geocoder.top_result(address)
    except Exception:
        logger.exception("Error getting destination name for %r", address)
        return None
    if result is None:
        logger.info("Geocoder gave no usable result for %r", address)
        return None

    components = result.address_components or []
    first_component = components[0].long_name if components else None
    return result.formatted_address or first_component or address
