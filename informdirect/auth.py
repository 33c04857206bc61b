from __future__ import annotations

import os

from .utils.env import load_env_file_if_present

API_KEY_ENV = "INFORM_DIRECT_API_KEY"
SANDBOX_API_KEY_ENV = "INFORM_DIRECT_SANDBOX_API_KEY"


class MissingApiKeyError(RuntimeError):
    pass


def load_api_key(env_key: str = API_KEY_ENV, dotenv: bool = True) -> str:
    """Return the Inform Direct API key from environment or .env.

    Raises MissingApiKeyError if missing.
    """
    if dotenv:
        load_env_file_if_present()
    key = os.getenv(env_key, "").strip()
    if not key:
        raise MissingApiKeyError(f"{env_key} not set in environment or .env file")
    return key


def build_auth_headers(access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def mask_secret(secret: str | None, visible: int = 6) -> str:
    """Render a secret as '...<last `visible` chars>' for logs and terminal output."""
    if not secret:
        return "<none>"
    if len(secret) <= visible:
        return "..." + "*" * len(secret)
    return f"...{secret[-visible:]}"
