"""Shared domain components.

This module exports shared exceptions and IBAN helpers used across
domain boundaries.
"""

# Re-export all exceptions from the exceptions module
from spayd.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from spayd.domain.shared.iban import (
    iban_to_digits,
    is_valid_iban,
    mod97,
    normalize_iban,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    # IBAN helpers
    "iban_to_digits",
    "is_valid_iban",
    "mod97",
    "normalize_iban",
]
