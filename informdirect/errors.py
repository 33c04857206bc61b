"""Error taxonomy for the Inform Direct client.

A single exception type carries a :class:`ErrorKind` tag instead of a
subclass per failure. Every kind shares the ``status``/``body`` payload;
``cause`` is only populated when two failures are reported as one.

Status ``0`` means the request was never answered by the server: a
client-side validation rejection, a missing refresh token or a transport
failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    API = "api"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    TRANSPORT = "transport"


class InformDirectError(Exception):
    """Raised for every failure surfaced by :class:`InformDirectClient`."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.API,
        status: int = 0,
        body: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status = status
        self.body = body
        self.cause = cause

    @property
    def is_authentication(self) -> bool:
        return self.kind is ErrorKind.AUTHENTICATION

    @property
    def is_client_side(self) -> bool:
        """True when the call was rejected before any request was sent."""
        return self.kind is ErrorKind.VALIDATION

    def __repr__(self) -> str:
        return (
            f"InformDirectError(kind={self.kind.value!r}, status={self.status}, "
            f"message={self.message!r})"
        )


def api_error(message: str, status: int, body: Any = None) -> InformDirectError:
    return InformDirectError(message, kind=ErrorKind.API, status=status, body=body)


def authentication_error(
    message: str,
    status: int,
    body: Any = None,
    cause: BaseException | None = None,
) -> InformDirectError:
    return InformDirectError(
        message, kind=ErrorKind.AUTHENTICATION, status=status, body=body, cause=cause
    )


def validation_error(message: str) -> InformDirectError:
    return InformDirectError(message, kind=ErrorKind.VALIDATION, status=0)


def transport_error(message: str, cause: BaseException) -> InformDirectError:
    return InformDirectError(message, kind=ErrorKind.TRANSPORT, status=0, cause=cause)
