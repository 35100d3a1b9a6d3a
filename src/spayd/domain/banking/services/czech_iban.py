"""Czech account number to IBAN composition.

A Czech account number consists of an optional prefix (up to 6 digits),
the account number itself (2 to 10 digits) and a 4-digit bank code. Both
the prefix and the account number carry a modulo 11 self-check. The IBAN
is ``CZ`` + 2 check digits + BBAN, where the BBAN is
``bank_code(4) + prefix(6) + account(10)``.
"""

from __future__ import annotations

import re

from spayd.domain.banking.exceptions import InvalidIbanLengthError
from spayd.domain.banking.value_objects import IbanResult, ValidationFailure
from spayd.domain.shared.exceptions import ErrorCode
from spayd.domain.shared.iban import letters_to_digits, mod97

COUNTRY_CODE = "CZ"
IBAN_LENGTH = 24
BANK_CODE_LENGTH = 4
MIN_ACCOUNT_LENGTH = 2
MAX_ACCOUNT_LENGTH = 10
PREFIX_MAX_LENGTH = 6
GROUP_SIZE = 4

_DIGITS = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s")


def _is_digits(value: str) -> bool:
    return _DIGITS.fullmatch(value) is not None


def is_modulo11(number: str | None) -> bool:
    """Check the Czech modulo 11 self-check of a digit string.

    Digits are weighted right to left with 1, 2, 4, 8, 5, 10, 9, 7, 3, 6
    (powers of two modulo 11). The string is valid when the weighted sum
    is divisible by 11. An empty string is valid (missing prefix).
    """
    if not number:
        return True
    if not _is_digits(number):
        return False

    total = 0
    weight = 1
    for char in reversed(number):
        total += int(char) * weight
        weight = (weight * 2) % 11

    return total % 11 == 0


def _check_bank_code(bank_code: str | None) -> ValidationFailure | None:
    def failure(message: str) -> ValidationFailure:
        return ValidationFailure(
            ErrorCode.INVALID_BANK_CODE, "bank_code", bank_code, message
        )

    if bank_code is None:
        return failure("Bank code cannot be null")
    if not bank_code:
        return failure("Bank code cannot be empty")
    if len(bank_code) != BANK_CODE_LENGTH:
        return failure(f"Bank code must be exactly 4 digits, got: {len(bank_code)}")
    if not _is_digits(bank_code):
        return failure("Bank code must contain only digits")
    return None


def _check_account(account: str | None) -> ValidationFailure | None:
    def failure(message: str) -> ValidationFailure:
        return ValidationFailure(
            ErrorCode.INVALID_ACCOUNT_NUMBER, "account", account, message
        )

    if account is None:
        return failure("Account number cannot be null")
    if not account:
        return failure("Account number cannot be empty")
    if len(account) < MIN_ACCOUNT_LENGTH:
        return failure(
            f"Account number cannot be shorter than 2 digits, got: {len(account)}"
        )
    if len(account) > MAX_ACCOUNT_LENGTH:
        return failure(f"Account number cannot exceed 10 digits, got: {len(account)}")
    if not _is_digits(account):
        return failure("Account number must contain only digits")
    if int(account) == 0:
        return failure("Account number cannot be zero")
    if not is_modulo11(account):
        return failure("Account number must have modulo 11 checksum")
    return None


def _check_prefix(prefix: str | None) -> ValidationFailure | None:
    def failure(message: str) -> ValidationFailure:
        return ValidationFailure(ErrorCode.INVALID_PREFIX, "prefix", prefix, message)

    if not prefix:
        return None  # Prefix is optional
    if len(prefix) > PREFIX_MAX_LENGTH:
        return failure(f"Prefix cannot exceed 6 digits, got: {len(prefix)}")
    if not _is_digits(prefix):
        return failure("Prefix must contain only digits")
    if not is_modulo11(prefix):
        return failure("Prefix must be valid modulo 11 number")
    return None


def calculate_check_digits(bban: str, country_code: str = COUNTRY_CODE) -> str:
    """Calculate the two IBAN check digits for a BBAN (mod-97 method)."""
    # Country code moves behind the BBAN, "00" stands in for the check digits
    rearranged = bban + letters_to_digits(country_code) + "00"
    return f"{98 - mod97(rearranged):02d}"


def try_compose_czech_iban(
    bank_code: str | None,
    account: str | None,
    prefix: str | None = None,
) -> IbanResult:
    """Compose a Czech IBAN, reporting the first violated rule as a value.

    Validation order is bank code, account number, prefix.
    """
    for failure in (
        _check_bank_code(bank_code),
        _check_account(account),
        _check_prefix(prefix),
    ):
        if failure is not None:
            return IbanResult(failure=failure)

    bban = (
        f"{bank_code}"
        f"{_zero_pad(prefix, PREFIX_MAX_LENGTH)}"
        f"{_zero_pad(account, MAX_ACCOUNT_LENGTH)}"
    )
    return IbanResult(iban=COUNTRY_CODE + calculate_check_digits(bban) + bban)


def _zero_pad(digits: str | None, width: int) -> str:
    # Numeric padding: leading zeros only, value unchanged
    return f"{int(digits or '0'):0{width}d}"


def compose_czech_iban(
    bank_code: str | None,
    account: str | None,
    prefix: str | None = None,
) -> str:
    """Convert a Czech account number to its 24-character IBAN.

    Parameters
    ----------
    bank_code
        Bank code, exactly 4 digits
    account
        Account number, 2 to 10 digits, modulo 11 valid and not zero
    prefix
        Optional account prefix, up to 6 digits, modulo 11 valid

    Returns
    -------
    IBAN without spaces, e.g. ``CZ5508000000001234567899``

    Raises
    ------
    InvalidBankCodeError, InvalidAccountNumberError, InvalidPrefixError
        If any input violates its rule
    """
    return try_compose_czech_iban(bank_code, account, prefix).unwrap()


def format_iban(iban: str) -> str:
    """Group a 24-character IBAN into blocks of four: ``CZ55 0800 0000 ...``."""
    if len(iban) != IBAN_LENGTH:
        msg = f"Invalid IBAN length: {len(iban)}"
        raise InvalidIbanLengthError(msg, value=iban)

    return " ".join(
        iban[start : start + GROUP_SIZE] for start in range(0, IBAN_LENGTH, GROUP_SIZE)
    )


def unformat_iban(iban: str) -> str:
    """Remove all whitespace from an IBAN. Does not validate it."""
    return _WHITESPACE.sub("", iban)
