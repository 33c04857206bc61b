from __future__ import annotations

import re

from .errors import validation_error

# 8 digits, or a 2-letter prefix (SC, NI, OC, ...) followed by 6 digits
_COMPANY_NUMBER_RE = re.compile(r"(?:[A-Z]{2}[0-9]{6}|[0-9]{8})", re.ASCII)


def is_valid_company_number(value: str) -> bool:
    """Return True if `value` is a Companies House number.

    No trimming or case folding is applied: ``"sc123456"`` and
    ``" 00014259"`` are both rejected.
    """
    if not isinstance(value, str):
        return False
    return _COMPANY_NUMBER_RE.fullmatch(value) is not None


def validate_company_number(value: str) -> None:
    """Raise a validation error (status 0) if `value` is not a company number."""
    if not is_valid_company_number(value):
        raise validation_error(
            f'Invalid company number "{value}" - expected 8 digits or '
            "2-letter prefix + 6 digits (e.g. 00014259, SC123456)"
        )
