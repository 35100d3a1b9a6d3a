"""IBAN normalization and check-digit utilities."""

from __future__ import annotations

import string

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34


def normalize_iban(value: str | None) -> str | None:
    """Normalize an IBAN for stable comparisons/storage.

    - Removes all spaces
    - Strips surrounding whitespace
    - Uppercases

    Returns None if value is None.
    """
    if value is None:
        return None
    normalized = value.strip().replace(" ", "").upper()
    return normalized or None


def mod97(digits: str) -> int:
    """Remainder of a decimal digit string modulo 97.

    Consumes the string left to right, so the number never has to be
    materialized as one integer.
    """
    remainder = 0
    for char in digits:
        remainder = (remainder * 10 + int(char)) % 97
    return remainder


def letters_to_digits(value: str) -> str:
    """Replace every letter with its base-36 value (A=10 ... Z=35)."""
    return "".join(str(int(char, 36)) for char in value.upper())


def iban_to_digits(iban: str) -> str:
    """Rearrange an IBAN for the ISO 13616 check.

    The country code and check digits move to the end and letters are
    converted to numbers.
    """
    return letters_to_digits(iban[4:] + iban[:4])


def is_valid_iban(value: str | None) -> bool:
    """Check IBAN structure and its mod-97 check digits.

    Accepts formatted input (spaces are ignored).
    """
    iban = normalize_iban(value)
    if iban is None:
        return False
    if not IBAN_MIN_LENGTH <= len(iban) <= IBAN_MAX_LENGTH:
        return False
    if not (iban[:2].isascii() and iban[:2].isalpha()):
        return False
    if not (iban[2:4].isascii() and iban[2:4].isdigit()):
        return False
    if any(char not in string.ascii_uppercase + string.digits for char in iban[4:]):
        return False
    return mod97(iban_to_digits(iban)) == 1
