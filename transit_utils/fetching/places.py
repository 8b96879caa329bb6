from .models.google_maps_places_response import GMPlaceSearchResponse
from .session import GoogleMapsSession

class GoogleMapsPlaceSearcher(GoogleMapsSession):
    BASE_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
    QUERY_PARAM = "query"
    RESPONSE_MODEL = GMPlaceSearchResponse
