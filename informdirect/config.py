"""Client configuration resolved from the environment and `.env`.

Variables:
- INFORM_DIRECT_API_KEY: main API key (production unless a sandbox URL is chosen)
- INFORM_DIRECT_SANDBOX_API_KEY: sandbox API key (used with ``sandbox=True``)
- INFORM_DIRECT_BASE_URL: base URL override
- INFORM_DIRECT_TIMEOUT: request timeout in seconds (unset = transport default)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .auth import API_KEY_ENV, SANDBOX_API_KEY_ENV, MissingApiKeyError, load_api_key
from .models import BASE_URLS, Environment
from .utils.env import load_env_file_if_present

logger = logging.getLogger(__name__)

BASE_URL_ENV = "INFORM_DIRECT_BASE_URL"
TIMEOUT_ENV = "INFORM_DIRECT_TIMEOUT"


class ConfigError(ValueError):
    """Raised when client settings are missing or invalid."""


@dataclass(frozen=True)
class ClientSettings:
    api_key: str = field(repr=False)
    base_url: str = BASE_URLS[Environment.SANDBOX]
    timeout: float | None = None

    @classmethod
    def from_env(
        cls,
        sandbox: bool = False,
        api_key_env: str | None = None,
        base_url: str | None = None,
        environment: Environment | None = None,
        dotenv: bool = True,
    ) -> ClientSettings:
        """Resolve settings from environment variables.

        Args:
            sandbox: Use the sandbox key and URL instead of production
            api_key_env: Explicit env var holding the key (overrides `sandbox`)
            base_url: Explicit base URL (overrides env and `sandbox`)
            environment: Environment whose URL is the fallback (defaults to the
                one implied by `sandbox`)
            dotenv: Load `.env` before reading the environment

        Raises:
            ConfigError: If the key is missing or a value is invalid
        """
        if dotenv:
            load_env_file_if_present()

        key_env = api_key_env or (SANDBOX_API_KEY_ENV if sandbox else API_KEY_ENV)
        try:
            api_key = load_api_key(key_env, dotenv=False)
        except MissingApiKeyError as e:
            raise ConfigError(str(e)) from e

        if environment is None:
            environment = Environment.SANDBOX if sandbox else Environment.PRODUCTION
        url = base_url or os.getenv(BASE_URL_ENV, "").strip() or BASE_URLS[environment]

        raw_timeout = os.getenv(TIMEOUT_ENV, "").strip()
        timeout: float | None = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from e

        settings = cls(api_key=api_key, base_url=url.rstrip("/"), timeout=timeout)
        settings.validate()
        logger.debug(f"Resolved settings from {key_env} for {settings.base_url}")
        return settings

    def validate(self) -> None:
        if not self.api_key:
            raise ConfigError("API key must not be empty")
        if not self.base_url.startswith("https://"):
            raise ConfigError(f"Base URL must use HTTPS: {self.base_url}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError(f"{TIMEOUT_ENV} must be greater than 0")
