import logging
import requests
from collections.abc import Mapping
from typing import Any, Optional
from .fetching.results import LookupMiss

logger = logging.getLogger(__name__)

STATUS_MESSAGES: dict[str, str] = {
    "ZERO_RESULTS": "Can not route to destination",
    "NOT_FOUND": "Address does not exist",
    "INVALID_REQUEST": "Invalid request - please check your inputs",
}
FALLBACK_MESSAGE: str = "An error occurred"


def _provider_payload(error: Any) -> Optional[Mapping]:
    if isinstance(error, Mapping):
        return error
    if isinstance(error, LookupMiss):
        return error.payload
    if isinstance(error, requests.RequestException) and error.response is not None:
        try:
            payload = error.response.json()
        except ValueError:
            return None
        return payload if isinstance(payload, Mapping) else None
    return None


def _transport_message(error: Any) -> Optional[str]:
    if isinstance(error, LookupMiss):
        return error.detail or None
    if isinstance(error, BaseException):
        return str(error) or None
    return None


def translate_error(error: Any) -> str:
    """Return a message fit for showing to a rider. Never raises."""
    try:
        payload = _provider_payload(error) or {}
        if payload.get("error_message"):
            return str(payload["error_message"])

        status = payload.get("status")
        if status:
            return STATUS_MESSAGES.get(status, str(status))

        return _transport_message(error) or FALLBACK_MESSAGE
    except Exception:
        logger.exception("Could not translate error %r", error)
        return FALLBACK_MESSAGE
