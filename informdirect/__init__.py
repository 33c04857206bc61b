"""Inform Direct Integration API client.

This package provides:
- `InformDirectClient` with lazy authentication and 401 token refresh
- Typed company portfolio operations (list, get, add, remove)
- A small CLI (`informdirect`) for exploring an account from the terminal

Example:
    >>> from informdirect import InformDirectClient
    >>> client = InformDirectClient(api_key="your-key")
    >>> companies = client.get_companies()
"""

from .client import InformDirectClient
from .config import ClientSettings, ConfigError
from .errors import ErrorKind, InformDirectError
from .models import BASE_URLS, AuthTokens, CompanySummary, Environment, MessageResponse
from .validation import is_valid_company_number

__version__ = "0.1.0"

__all__ = [
    "BASE_URLS",
    "AuthTokens",
    "ClientSettings",
    "CompanySummary",
    "ConfigError",
    "Environment",
    "ErrorKind",
    "InformDirectClient",
    "InformDirectError",
    "MessageResponse",
    "is_valid_company_number",
]
