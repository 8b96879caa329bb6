from pydantic import BaseModel
from typing import Optional

class AddressComponent(BaseModel):
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: Optional[list[str]] = None

class Location(BaseModel):
    lat: float
    lng: float

class Geometry(BaseModel):
    location: Optional[Location] = None
    location_type: Optional[str] = None

class Result(BaseModel):
    address_components: Optional[list[AddressComponent]] = None
    formatted_address: Optional[str] = None
    geometry: Optional[Geometry] = None
    place_id: Optional[str] = None
    types: Optional[list[str]] = None

class GMGeocodeResponse(BaseModel):
    results: list[Result] = []
    status: str
    error_message: Optional[str] = None
