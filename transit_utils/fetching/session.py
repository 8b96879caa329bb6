import requests, os, logging
from typing import Optional
from pydantic import BaseModel, ValidationError
from .results import LookupFailure, LookupHit, LookupMiss, LookupResult

logger = logging.getLogger(__name__)

API_KEY_ENV: str = "GOOGLE_MAPS_API_KEY"

class GoogleMapsSession(requests.Session):
    BASE_URL: str = ""
    QUERY_PARAM: str = ""
    RESPONSE_MODEL: type[BaseModel] = BaseModel

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__()
        self.api_key = api_key or os.getenv(API_KEY_ENV)
        if not self.api_key:
            raise ValueError("Google Maps API Key is missing. Pass it explicitly or set it in the environment variables.")
        self.timeout = timeout

    def lookup(self, text: str) -> LookupResult:
        params = {
            self.QUERY_PARAM: text,
            "key": self.api_key,
        }
        try:
            response = self.get(self.BASE_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request error for %r: %s", text, e)
            return LookupMiss(LookupFailure.TRANSPORT, str(e))

        if response.status_code != 200:
            logger.warning("Received status code %s for %r", response.status_code, text)
            return LookupMiss(LookupFailure.TRANSPORT, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Response for %r is not JSON: %s", text, e)
            return LookupMiss(LookupFailure.TRANSPORT, str(e))

        try:
            data = self.RESPONSE_MODEL.model_validate(payload)
        except ValidationError as e:
            logger.warning("Parsing error for %r: %s", text, e)
            return LookupMiss(LookupFailure.MALFORMED, str(e), payload if isinstance(payload, dict) else None)

        if data.status != "OK":
            logger.warning("Provider status %s for %r", data.status, text)
            return LookupMiss(LookupFailure.STATUS, data.status, payload)
        if not data.results:
            logger.warning("No results found for %r", text)
            return LookupMiss(LookupFailure.EMPTY, "no results", payload)
        return LookupHit(data)
