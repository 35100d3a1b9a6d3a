"""Banking domain exceptions.

This module defines exceptions raised while composing and formatting
Czech account identifiers. Each exception carries the offending field
and value in ``details`` next to a stable error code.
"""

from spayd.domain.shared.exceptions import ErrorCode, ValidationError

# =============================================================================
# Account Identifier Exceptions
# =============================================================================


class AccountIdentifierError(ValidationError):
    """Base exception for invalid account identifier input."""

    field_name: str = "account"

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        value: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details={"field": self.field_name, "value": value},
        )
        self.field = self.field_name
        self.value = value


class InvalidBankCodeError(AccountIdentifierError):
    """Raised when the bank code is missing, too short/long or not numeric."""

    field_name = "bank_code"

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.INVALID_BANK_CODE, value=value)


class InvalidAccountNumberError(AccountIdentifierError):
    """Raised when the account number violates any national rule.

    Covers missing value, length outside 2..10, non-digit content, an
    all-zero number and a failed modulo 11 check.
    """

    field_name = "account"

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.INVALID_ACCOUNT_NUMBER, value=value)


class InvalidPrefixError(AccountIdentifierError):
    """Raised when the optional account prefix is malformed."""

    field_name = "prefix"

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.INVALID_PREFIX, value=value)


class InvalidIbanLengthError(AccountIdentifierError):
    """Raised when an IBAN to be grouped is not exactly 24 characters long."""

    field_name = "iban"

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.INVALID_IBAN_LENGTH, value=value)


EXCEPTIONS_BY_CODE: dict[ErrorCode, type[AccountIdentifierError]] = {
    ErrorCode.INVALID_BANK_CODE: InvalidBankCodeError,
    ErrorCode.INVALID_ACCOUNT_NUMBER: InvalidAccountNumberError,
    ErrorCode.INVALID_PREFIX: InvalidPrefixError,
    ErrorCode.INVALID_IBAN_LENGTH: InvalidIbanLengthError,
}
