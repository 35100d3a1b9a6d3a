"""Unit tests for Czech IBAN composition."""

import pytest

from spayd.domain.banking.exceptions import (
    InvalidAccountNumberError,
    InvalidBankCodeError,
    InvalidIbanLengthError,
    InvalidPrefixError,
)
from spayd.domain.banking.services import (
    calculate_check_digits,
    compose_czech_iban,
    format_iban,
    is_modulo11,
    try_compose_czech_iban,
    unformat_iban,
)
from spayd.domain.banking.value_objects import IbanResult
from spayd.domain.shared.exceptions import ErrorCode, ValidationError
from spayd.domain.shared.iban import is_valid_iban

VALID_ACCOUNT_NUMBER = "1234567899"


class TestComposeCzechIban:
    """Tests for converting known account numbers."""

    def test_known_account(self):
        """0800 / 1234567899 without prefix is CZ55..."""
        iban = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "")

        assert iban == "CZ5508000000001234567899"
        assert format_iban(iban) == "CZ55 0800 0000 0012 3456 7899"
        assert is_valid_iban(iban)

    def test_none_prefix_equals_empty_prefix(self):
        """A missing prefix is treated as zero."""
        with_none = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, None)
        with_empty = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "")

        assert with_none == with_empty

    def test_account_is_padded_with_leading_zeros(self):
        """Short accounts are padded to 10 digits."""
        result = format_iban(compose_czech_iban("0800", "51", ""))

        assert "0000 0051" in result

    def test_prefix_is_padded_into_bban(self):
        """The prefix occupies 6 digits between bank code and account."""
        iban = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "19")

        assert iban[4:8] == "0800"
        assert iban[8:14] == "000019"
        assert iban[14:] == VALID_ACCOUNT_NUMBER

    def test_check_digits_are_numeric(self):
        result = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "19")

        assert result[:2] == "CZ"
        assert result[2:4].isdigit()

    def test_composed_ibans_pass_mod97_check(self):
        """Every composed IBAN satisfies the international check."""
        cases = [
            ("0800", VALID_ACCOUNT_NUMBER, ""),
            ("0800", "51", ""),
            ("0800", VALID_ACCOUNT_NUMBER, "19"),
            ("0100", "9999999999", "999993"),
            ("2010", "19", "51"),
        ]
        for bank_code, account, prefix in cases:
            iban = compose_czech_iban(bank_code, account, prefix)
            assert len(iban) == 24
            assert is_valid_iban(iban), iban

    def test_max_length_account(self):
        result = format_iban(compose_czech_iban("0800", "9999999999", ""))

        assert "99 9999 9999" in result

    def test_max_length_prefix(self):
        result = format_iban(compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "999993"))

        assert "9999 93" in result

    def test_deterministic(self):
        first = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "19")
        second = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "19")

        assert first == second


class TestBankCodeValidation:
    """Tests for bank code rules."""

    def test_none_bank_code(self):
        with pytest.raises(InvalidBankCodeError, match="Bank code cannot be null"):
            compose_czech_iban(None, VALID_ACCOUNT_NUMBER, "")

    def test_empty_bank_code(self):
        with pytest.raises(InvalidBankCodeError, match="Bank code cannot be empty"):
            compose_czech_iban("", "123456789", "")

    @pytest.mark.parametrize("bank_code", ["1", "12", "123", "12345", "123456"])
    def test_invalid_length(self, bank_code):
        with pytest.raises(InvalidBankCodeError, match="must be exactly 4 digits"):
            compose_czech_iban(bank_code, "123456789", "")

    @pytest.mark.parametrize("bank_code", ["08a0", "080X", "08 0", "ABCD", "０８００"])
    def test_non_digits(self, bank_code):
        with pytest.raises(InvalidBankCodeError, match="must contain only digits"):
            compose_czech_iban(bank_code, "123456789", "")

    def test_error_carries_code_field_and_value(self):
        with pytest.raises(InvalidBankCodeError) as exc_info:
            compose_czech_iban("080", VALID_ACCOUNT_NUMBER, "")

        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert error.code == ErrorCode.INVALID_BANK_CODE
        assert error.details == {"field": "bank_code", "value": "080"}
        assert str(error) == "Bank code must be exactly 4 digits, got: 3"


class TestAccountNumberValidation:
    """Tests for account number rules."""

    def test_none_account(self):
        with pytest.raises(
            InvalidAccountNumberError, match="Account number cannot be null"
        ):
            compose_czech_iban("0800", None, "")

    def test_empty_account(self):
        with pytest.raises(
            InvalidAccountNumberError, match="Account number cannot be empty"
        ):
            compose_czech_iban("0800", "", "")

    def test_too_short(self):
        with pytest.raises(
            InvalidAccountNumberError, match="cannot be shorter than 2 digits"
        ):
            compose_czech_iban("0800", "5", "")

    def test_too_long(self):
        with pytest.raises(InvalidAccountNumberError, match="cannot exceed 10 digits"):
            compose_czech_iban("0800", "12345678901", "")

    @pytest.mark.parametrize("account", ["12345678a", "1234 5678", "ABCD"])
    def test_non_digits(self, account):
        with pytest.raises(InvalidAccountNumberError, match="must contain only digits"):
            compose_czech_iban("0800", account, "")

    def test_all_zeros(self):
        """An all-zero account is rejected before the modulo 11 check."""
        with pytest.raises(
            InvalidAccountNumberError, match="Account number cannot be zero"
        ):
            compose_czech_iban("0800", "0000000", "")

    def test_not_modulo11(self):
        with pytest.raises(
            InvalidAccountNumberError,
            match="Account number must have modulo 11 checksum",
        ):
            compose_czech_iban("0800", "0000012", "")

    def test_bank_code_is_checked_first(self):
        with pytest.raises(InvalidBankCodeError):
            compose_czech_iban("08", "0000012", "abc")


class TestPrefixValidation:
    """Tests for account prefix rules."""

    def test_valid_prefix(self):
        compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "51")

    def test_too_long(self):
        with pytest.raises(InvalidPrefixError, match="cannot exceed 6 digits"):
            compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "1234567")

    @pytest.mark.parametrize("prefix", ["12a", "1 2", "ABC"])
    def test_non_digits(self, prefix):
        with pytest.raises(InvalidPrefixError, match="must contain only digits"):
            compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, prefix)

    def test_not_modulo11(self):
        with pytest.raises(InvalidPrefixError, match="valid modulo 11 number"):
            compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "12")


class TestTryComposeCzechIban:
    """Tests for the result-returning variant."""

    def test_success(self):
        result = try_compose_czech_iban("0800", VALID_ACCOUNT_NUMBER)

        assert result.is_valid
        assert result.iban == "CZ5508000000001234567899"
        assert result.failure is None
        assert result.unwrap() == "CZ5508000000001234567899"

    def test_failure_is_returned_not_raised(self):
        result = try_compose_czech_iban("0800", "0000012")

        assert not result.is_valid
        assert result.iban is None
        assert result.failure.code == ErrorCode.INVALID_ACCOUNT_NUMBER
        assert result.failure.field == "account"
        assert result.failure.value == "0000012"
        assert "modulo 11" in result.failure.message

    def test_unwrap_raises_matching_exception(self):
        result = try_compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "1234567")

        with pytest.raises(InvalidPrefixError) as exc_info:
            result.unwrap()

        assert exc_info.value.code == ErrorCode.INVALID_PREFIX
        assert exc_info.value.details["value"] == "1234567"

    def test_unwrap_empty_result(self):
        with pytest.raises(ValueError, match="neither an IBAN nor a failure"):
            IbanResult().unwrap()


class TestModulo11:
    """Tests for the national modulo 11 self-check."""

    def test_valid_numbers(self):
        for number in ["1234567899", "51", "19", "999993", "9999999999"]:
            assert is_modulo11(number), number

    def test_invalid_numbers(self):
        for number in ["0000012", "12", "1234567890"]:
            assert not is_modulo11(number), number

    def test_empty_is_valid(self):
        assert is_modulo11("")
        assert is_modulo11(None)

    def test_non_digits_are_invalid(self):
        assert not is_modulo11("12a")

    def test_order_sensitive(self):
        """Weights run right to left, so reversing digits changes the result."""
        assert is_modulo11("51")
        assert not is_modulo11("15")


class TestCheckDigits:
    def test_known_bban(self):
        assert calculate_check_digits("08000000001234567899") == "55"


class TestFormatting:
    """Tests for grouping and ungrouping IBANs."""

    def test_format_groups_of_four(self):
        result = format_iban(compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, ""))
        parts = result.split(" ")

        assert len(parts) == 6
        assert all(len(part) == 4 for part in parts)

    def test_format_rejects_wrong_length(self):
        with pytest.raises(
            InvalidIbanLengthError, match="Invalid IBAN length: 23"
        ) as exc:
            format_iban("CZ550800000000123456789")

        assert exc.value.code == ErrorCode.INVALID_IBAN_LENGTH

    def test_unformat_removes_whitespace(self):
        unformatted = unformat_iban("CZ65 0800 0000 0012 3456 7890")

        assert unformatted == "CZ6508000000001234567890"
        assert len(unformatted) == 24

    def test_unformat_removes_tabs_and_newlines(self):
        assert unformat_iban("CZ55\t0800 0000\n0012 3456 7899") == (
            "CZ5508000000001234567899"
        )

    def test_round_trip(self):
        iban = compose_czech_iban("0800", VALID_ACCOUNT_NUMBER, "19")

        assert unformat_iban(format_iban(iban)) == iban
