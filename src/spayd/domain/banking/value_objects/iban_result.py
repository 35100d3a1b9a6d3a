"""Explicit result values for IBAN composition."""

from __future__ import annotations

from dataclasses import dataclass

from spayd.domain.banking.exceptions import (
    EXCEPTIONS_BY_CODE,
    AccountIdentifierError,
)
from spayd.domain.shared.exceptions import ErrorCode


@dataclass(frozen=True)
class ValidationFailure:
    """A single violated rule: which field, which value and why."""

    code: ErrorCode
    field: str
    value: str | None
    message: str

    def to_exception(self) -> AccountIdentifierError:
        exception_class = EXCEPTIONS_BY_CODE[self.code]
        return exception_class(self.message, value=self.value)


@dataclass(frozen=True)
class IbanResult:
    """Outcome of composing an IBAN: either ``iban`` or ``failure`` is set."""

    iban: str | None = None
    failure: ValidationFailure | None = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    def unwrap(self) -> str:
        """Return the IBAN or raise the exception describing the failure."""
        if self.failure is not None:
            raise self.failure.to_exception()
        if self.iban is None:
            msg = "IbanResult carries neither an IBAN nor a failure"
            raise ValueError(msg)
        return self.iban
