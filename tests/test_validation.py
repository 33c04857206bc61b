from __future__ import annotations

import pytest

from informdirect.errors import ErrorKind, InformDirectError
from informdirect.validation import is_valid_company_number, validate_company_number

VALID_NUMBERS = [
    "00014259",  # 8 digits
    "00006400",
    "12345678",
    "SC123456",  # Scottish company
    "NI000123",  # Northern Ireland
    "OC301234",  # LLP
    "SO300001",  # Scottish LLP
    "IP030000",  # Industrial & Provident
    "RC000001",  # Royal Charter
]

INVALID_NUMBERS = [
    "1234567",  # too short
    "123456789",  # too long
    "ABCDEFGH",
    "SC12345",
    "SC1234567",
    "sc123456",  # lowercase prefix
    "S1234567",
    "ABC12345",
    "",
    "0001 4259",
    "00014259!",
    " 00014259",
    "00014259\n",
    "１２３４５６７８",  # full-width digits
]


class TestIsValidCompanyNumber:
    @pytest.mark.parametrize("number", VALID_NUMBERS)
    def test_accepts(self, number):
        assert is_valid_company_number(number)

    @pytest.mark.parametrize("number", INVALID_NUMBERS)
    def test_rejects(self, number):
        assert not is_valid_company_number(number)

    def test_rejects_non_string(self):
        assert not is_valid_company_number(14259)  # type: ignore[arg-type]


class TestValidateCompanyNumber:
    def test_valid_returns_none(self):
        assert validate_company_number("SC123456") is None

    def test_invalid_raises_status_zero(self):
        with pytest.raises(InformDirectError, match='Invalid company number "sc123456"') as exc:
            validate_company_number("sc123456")

        assert exc.value.status == 0
        assert exc.value.kind is ErrorKind.VALIDATION
        assert exc.value.is_client_side
