from __future__ import annotations

from informdirect.errors import (
    ErrorKind,
    InformDirectError,
    api_error,
    authentication_error,
    transport_error,
    validation_error,
)


class TestErrorKinds:
    def test_api_error(self):
        err = api_error("API error 500: /companies", 500, body="oops")

        assert isinstance(err, Exception)
        assert err.kind is ErrorKind.API
        assert err.status == 500
        assert err.body == "oops"
        assert err.cause is None
        assert not err.is_authentication
        assert str(err) == "API error 500: /companies"

    def test_authentication_error_with_cause(self):
        inner = authentication_error("Authentication failed: 403", 403)
        err = authentication_error("both failed", 401, cause=inner)

        assert err.is_authentication
        assert err.status == 401
        assert err.cause is inner

    def test_validation_error_is_client_side(self):
        err = validation_error("bad number")
        assert err.status == 0
        assert err.is_client_side

    def test_transport_error_is_not_client_side(self):
        cause = OSError("reset")
        err = transport_error("Request failed", cause)
        assert err.status == 0
        assert err.kind is ErrorKind.TRANSPORT
        assert not err.is_client_side
        assert err.cause is cause

    def test_repr(self):
        err = InformDirectError("nope", kind=ErrorKind.API, status=404)
        assert repr(err) == "InformDirectError(kind='api', status=404, message='nope')"
