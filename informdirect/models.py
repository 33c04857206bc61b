"""Data model for the Inform Direct Integration API.

Internal types use snake_case; the PascalCase wire format lives in
:mod:`informdirect.wire`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


BASE_URLS: dict[Environment, str] = {
    Environment.SANDBOX: "https://sandbox-api.informdirect.co.uk",
    Environment.PRODUCTION: "https://api.informdirect.co.uk",
}


@dataclass(frozen=True)
class AuthTokens:
    """Access/refresh token pair returned by /authenticate and /refresh.

    The access token is a short-lived JWT (about 15 minutes).
    """

    access_token: str
    refresh_token: str

    def __repr__(self) -> str:
        return "AuthTokens(access_token='***', refresh_token='***')"


@dataclass(frozen=True)
class CompanySummary:
    company_number: str
    name: str
    public_url: str


@dataclass(frozen=True)
class MessageResponse:
    message: str | None = None
