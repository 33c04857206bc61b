"""Mapping between internal types and the API's PascalCase JSON bodies."""

from __future__ import annotations

from typing import Any

from .errors import authentication_error
from .models import AuthTokens, CompanySummary, MessageResponse


def encode_authenticate(api_key: str) -> dict[str, Any]:
    return {"ApiKey": api_key}


def encode_refresh(refresh_token: str) -> dict[str, Any]:
    """Body for both /refresh and /logout."""
    return {"RefreshToken": refresh_token}


def decode_tokens(payload: dict[str, Any], status: int = 200) -> AuthTokens:
    access = payload.get("AccessToken") if isinstance(payload, dict) else None
    if not access:
        raise authentication_error(
            "Authentication succeeded but AccessToken missing in response",
            status,
            body=payload,
        )
    return AuthTokens(access_token=access, refresh_token=payload.get("RefreshToken") or "")


def decode_company(item: dict[str, Any]) -> CompanySummary:
    return CompanySummary(
        company_number=item.get("CompanyNumber") or "",
        name=item.get("Name") or "",
        public_url=item.get("PublicUrl") or "",
    )


def decode_companies(payload: dict[str, Any]) -> list[CompanySummary]:
    items = payload.get("Companies") if isinstance(payload, dict) else None
    if not items:
        return []
    return [decode_company(item) for item in items]


def decode_message(payload: dict[str, Any]) -> MessageResponse:
    message = payload.get("Message") if isinstance(payload, dict) else None
    return MessageResponse(message=message)


def encode_add_company(
    company_number: str, authentication_code: str | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {"CompanyNumber": company_number}
    if authentication_code:
        body["AuthenticationCode"] = authentication_code
    return body


def encode_remove_company(
    company_number: str,
    save_registers: bool | None = None,
    save_documents: bool | None = None,
) -> dict[str, Any]:
    # Unset flags are left out of the body rather than sent as null
    body: dict[str, Any] = {"CompanyNumber": company_number}
    if save_registers is not None:
        body["SaveRegisters"] = save_registers
    if save_documents is not None:
        body["SaveDocuments"] = save_documents
    return body
