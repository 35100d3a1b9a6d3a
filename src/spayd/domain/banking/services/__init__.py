"""Domain services for the banking domain."""

from spayd.domain.banking.services.czech_iban import (
    COUNTRY_CODE,
    IBAN_LENGTH,
    calculate_check_digits,
    compose_czech_iban,
    format_iban,
    is_modulo11,
    try_compose_czech_iban,
    unformat_iban,
)

__all__ = [
    "COUNTRY_CODE",
    "IBAN_LENGTH",
    "calculate_check_digits",
    "compose_czech_iban",
    "format_iban",
    "is_modulo11",
    "try_compose_czech_iban",
    "unformat_iban",
]
