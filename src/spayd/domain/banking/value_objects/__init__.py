"""Value objects for banking domain."""

from spayd.domain.banking.value_objects.bank_account import BankAccount
from spayd.domain.banking.value_objects.iban_result import (
    IbanResult,
    ValidationFailure,
)

__all__ = [
    "BankAccount",
    "IbanResult",
    "ValidationFailure",
]
