from typing import Optional
from pydantic import BaseModel
from .google_maps_geocoding_response import AddressComponent, Geometry

class PlaceResult(BaseModel):
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    address_components: Optional[list[AddressComponent]] = None
    geometry: Optional[Geometry] = None
    place_id: Optional[str] = None
    types: Optional[list[str]] = None

class GMPlaceSearchResponse(BaseModel):
    results: list[PlaceResult] = []
    status: str
    error_message: Optional[str] = None
