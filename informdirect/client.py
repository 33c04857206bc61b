from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import requests

from .auth import build_auth_headers, mask_secret
from .config import ClientSettings
from .errors import InformDirectError, api_error, authentication_error, transport_error
from .models import BASE_URLS, AuthTokens, CompanySummary, Environment, MessageResponse
from .validation import validate_company_number
from .wire import (
    decode_companies,
    decode_message,
    decode_tokens,
    encode_add_company,
    encode_authenticate,
    encode_refresh,
    encode_remove_company,
)

logger = logging.getLogger(__name__)


def _build_session() -> requests.Session:
    # No retry adapter: the only retry is the single re-issue after a 401
    sess = requests.Session()
    sess.headers.update({"Accept": "application/json"})
    return sess


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


@dataclass
class InformDirectClient:
    """Client for the Inform Direct Integration API.

    The first API call authenticates lazily. A 401 triggers a token refresh,
    falling back to full re-authentication, and the call is re-issued once.

    One call in flight per instance: the token pair is not guarded by a lock,
    so concurrent callers need their own client.
    """

    api_key: str = field(repr=False)
    base_url: str | None = BASE_URLS[Environment.SANDBOX]
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = BASE_URLS[Environment.SANDBOX]
        if not self.base_url or not self.base_url.startswith("https://"):
            raise ValueError("base_url must use HTTPS")
        self.base_url = self.base_url.rstrip("/")
        self.session = _build_session()
        self._tokens: AuthTokens | None = None

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> InformDirectClient:
        return cls(api_key=settings.api_key, base_url=settings.base_url, timeout=settings.timeout)

    @classmethod
    def from_env(cls, sandbox: bool = False) -> InformDirectClient:
        return cls.from_settings(ClientSettings.from_env(sandbox=sandbox))

    @property
    def tokens(self) -> AuthTokens | None:
        return self._tokens

    @property
    def is_authenticated(self) -> bool:
        return self._tokens is not None

    # --- Transport ---

    def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        send_headers = dict(headers or {})
        data = None
        if body is not None:
            send_headers["Content-Type"] = "application/json"
            data = json.dumps(body)
        logger.debug(f"{method} {path}")
        try:
            return self.session.request(
                method, url, headers=send_headers, data=data, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise transport_error(f"Request failed: {method} {path}: {e}", e) from e

    # --- Authentication ---

    def authenticate(self) -> AuthTokens:
        """Authenticate with the API key and store the returned token pair.

        Any failure clears a previously held pair, so a stale pair is never
        reused after the server has rejected the key.
        """
        logger.info(f"Authenticating with API key {mask_secret(self.api_key)}")
        try:
            res = self._send("POST", "/authenticate", body=encode_authenticate(self.api_key))
        except InformDirectError:
            self._tokens = None
            raise

        if not res.ok:
            self._tokens = None
            raise authentication_error(
                f"Authentication failed: {res.status_code}", res.status_code, body=res.text
            )

        try:
            tokens = decode_tokens(_parse_json(res.text), res.status_code)
        except InformDirectError:
            self._tokens = None
            raise
        self._tokens = tokens
        logger.debug(f"Authenticated, access token {mask_secret(tokens.access_token)}")
        return tokens

    def _refresh(self) -> AuthTokens:
        """Exchange the held refresh token for a new pair.

        A failed refresh clears the pair: the refresh token itself is most
        likely dead.
        """
        if self._tokens is None or not self._tokens.refresh_token:
            raise authentication_error("No refresh token available", 0)

        try:
            res = self._send("POST", "/refresh", body=encode_refresh(self._tokens.refresh_token))
        except InformDirectError:
            self._tokens = None
            raise

        if not res.ok:
            self._tokens = None
            raise authentication_error(f"Token refresh failed: {res.status_code}", res.status_code)

        try:
            tokens = decode_tokens(_parse_json(res.text), res.status_code)
        except InformDirectError:
            self._tokens = None
            raise
        self._tokens = tokens
        logger.debug(f"Refreshed, access token {mask_secret(tokens.access_token)}")
        return tokens

    def logout(self) -> None:
        """Invalidate the refresh token server-side and drop the local pair.

        Best-effort: failures are logged, never raised.
        """
        if self._tokens is None or not self._tokens.refresh_token:
            return

        refresh_token = self._tokens.refresh_token
        try:
            res = self._send("POST", "/logout", body=encode_refresh(refresh_token))
            if not res.ok:
                logger.warning(f"Logout returned {res.status_code}, discarding tokens anyway")
            res.close()
        except InformDirectError as e:
            logger.warning(f"Logout request failed: {e}")
        finally:
            self._tokens = None

    # --- Gateway ---

    def _recover_from_unauthorized(self) -> None:
        try:
            self._refresh()
        except InformDirectError as refresh_err:
            logger.warning(f"{refresh_err}; falling back to re-authentication")
            try:
                self.authenticate()
            except InformDirectError as auth_err:
                raise authentication_error(
                    "Token refresh and re-authentication both failed",
                    401,
                    body=auth_err.body,
                    cause=auth_err,
                ) from auth_err

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request with automatic token management.

        1. Authenticate first when no token pair is held
        2. Send the request with the Bearer token
        3. On 401: refresh, falling back to re-authentication, then retry once
        """
        if self._tokens is None:
            self.authenticate()

        def attempt() -> requests.Response:
            call_headers = dict(headers or {})
            call_headers.update(build_auth_headers(self._tokens.access_token))
            return self._send(method, path, headers=call_headers, body=body)

        res = attempt()

        if res.status_code == 401:
            logger.info(f"401 on {method} {path}, renewing tokens")
            self._recover_from_unauthorized()
            res = attempt()

        text = res.text
        if not res.ok:
            message = f"API error {res.status_code}: {path}"
            parsed = _parse_json(text)
            if isinstance(parsed, dict) and "Message" in parsed:
                message = f"{parsed['Message']} ({res.status_code} {path})"
            raise api_error(message, res.status_code, body=parsed)

        if not text:
            return {}
        try:
            return json.loads(text)
        except ValueError as e:
            raise api_error(
                f"Invalid JSON in response ({res.status_code} {path})", res.status_code, body=text
            ) from e

    # --- Companies ---

    def get_companies(self) -> list[CompanySummary]:
        """List all companies in the portfolio."""
        return decode_companies(self._request("GET", "/companies"))

    def get_company(self, company_number: str) -> CompanySummary | None:
        """Get a single company by Companies House number.

        Returns None when the company is not in the portfolio.
        """
        validate_company_number(company_number)
        companies = decode_companies(
            self._request("GET", f"/companies/{quote(company_number, safe='')}")
        )
        return companies[0] if companies else None

    def add_company(
        self, company_number: str, authentication_code: str | None = None
    ) -> MessageResponse:
        validate_company_number(company_number)
        payload = self._request(
            "POST",
            "/companies/add",
            body=encode_add_company(company_number, authentication_code),
        )
        return decode_message(payload)

    def remove_company(
        self,
        company_number: str,
        save_registers: bool | None = None,
        save_documents: bool | None = None,
    ) -> MessageResponse:
        validate_company_number(company_number)
        payload = self._request(
            "PUT",
            "/companies/delete",
            body=encode_remove_company(company_number, save_registers, save_documents),
        )
        return decode_message(payload)
