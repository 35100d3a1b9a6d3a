"""Payment domain exceptions."""

from spayd.domain.shared.exceptions import DomainException, ErrorCode, ValidationError


class MissingPrimaryAccountError(ValidationError):
    """Raised when a payment without a bank account is serialized."""

    def __init__(self, message: str = "Bank account (IBAN) is required") -> None:
        super().__init__(
            message=message,
            code=ErrorCode.MISSING_PRIMARY_ACCOUNT,
            details={"field": "bank_account", "value": None},
        )


class UnencodableTextError(ValidationError):
    """Raised when payment text cannot be represented in ISO-8859-1."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(
            message=f"Text is not representable in ISO-8859-1: {reason}",
            code=ErrorCode.INVALID_ENCODING,
            details={"field": "payload", "value": text},
        )


class QrCodeCapacityError(DomainException):
    """Raised when a SPAYD string does not fit into a QR code of the given size."""

    def __init__(self, message: str, size: int | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.QR_CAPACITY_EXCEEDED,
            details={"size": size} if size is not None else None,
        )
