"""Payment value object."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spayd.domain.banking.value_objects import BankAccount

CURRENCY_CZK = "CZK"


class Payment(BaseModel):
    """
    Value object representing a payment instruction to be serialized.

    Every field is optional on construction. The bank account is
    required by the serializer, which reports its absence as a
    validation failure instead of assuming a default.
    """

    bank_account: BankAccount | None = None
    alternative_bank_accounts: list[BankAccount] = Field(
        default_factory=list,
        description="Alternative accounts, emitted in the given order",
    )
    amount: Decimal | None = None
    currency_code: str | None = Field(default=None, max_length=3)
    payment_due_date: date | None = None
    variable_symbol: str | None = None
    constant_symbol: str | None = None
    specific_symbol: str | None = None
    originators_reference: str | None = None
    payment_note: str | None = None
    beneficiary_name: str | None = None
    notification_type: str | None = None
    notification_address: str | None = None
    instant_payment: bool | None = None

    model_config = ConfigDict(
        frozen=True,  # Immutable
    )

    @field_validator("alternative_bank_accounts", mode="before")
    @classmethod
    def validate_alternative_bank_accounts(cls, v: Any) -> Any:
        return [] if v is None else v
