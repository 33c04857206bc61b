from __future__ import annotations

import json
import os

import pytest
import requests

from informdirect.client import InformDirectClient

SAMPLE_COMPANY = {
    "CompanyNumber": "00014259",
    "Name": "Example Ltd",
    "PublicUrl": "https://www.informdirect.co.uk/company/00014259",
}


def make_response(status: int = 200, payload=None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    res = requests.Response()
    res.status_code = status
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    res._content = text.encode("utf-8")
    res._content_consumed = True
    res.encoding = "utf-8"
    return res


def tokens_response(access: str = "access_1", refresh: str = "refresh_1") -> requests.Response:
    return make_response(200, {"AccessToken": access, "RefreshToken": refresh})


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Inform Direct variables and point .env loading at a missing file.

    The .env loader writes to os.environ directly, so the whole environment
    is restored afterwards.
    """
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("INFORM_DIRECT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("INFORM_DIRECT_ENV_FILE", "/nonexistent/.env")

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def client():
    return InformDirectClient(api_key="test_api_key_123456")
