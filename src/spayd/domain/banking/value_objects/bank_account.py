"""Bank account value object."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BankAccount(BaseModel):
    """
    Value object representing a payee account.

    Created by the Czech IBAN composer or supplied directly by the caller.
    """

    iban: str = Field(
        ...,
        min_length=15,
        max_length=34,
        description="International Bank Account Number",
    )
    bic: str | None = Field(
        default=None,
        max_length=11,
        description="Bank Identifier Code (SWIFT/BIC)",
    )

    model_config = ConfigDict(
        frozen=True,  # Immutable like dataclass(frozen=True)
        str_strip_whitespace=True,
    )

    # overriding pydantic init to allow positional arguments BankAccount(iban, bic)
    def __init__(self, iban: str | None = None, bic: str | None = None, **data: Any):
        if "iban" not in data:
            data["iban"] = iban
        if "bic" not in data:
            data["bic"] = bic
        super().__init__(**data)

    @field_validator("iban", mode="before")
    @classmethod
    def validate_iban(cls, v: Any) -> str:
        if not isinstance(v, str):
            msg = "IBAN must be a string"
            raise ValueError(msg)
        # Remove whitespace for flexibility
        v = "".join(v.split()).upper()
        if not v[:2].isalpha() or not v[2:4].isdigit():
            msg = "IBAN must start with 2 letters followed by 2 digits"
            raise ValueError(msg)
        return v

    @field_validator("bic")
    @classmethod
    def validate_bic(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.upper() or None

    @property
    def spayd_value(self) -> str:
        """Account as written into SPAYD fields: ``IBAN`` or ``IBAN+BIC``."""
        if self.bic is not None:
            return f"{self.iban}+{self.bic}"
        return self.iban

    def __str__(self) -> str:
        return self.spayd_value
