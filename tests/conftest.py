from unittest.mock import MagicMock

import pytest


def make_response(payload=None, status_code=200, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_MAPS_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
