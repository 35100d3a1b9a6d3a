"""SPAYD (Short Payment Descriptor) serialization.

A SPAYD string is ``SPD*1.0*`` followed by ``KEY:VALUE`` pairs joined with
``*``. Keys are sorted by code point, which makes the output deterministic
for a given payment. An optional ``CRC32:<HEX>`` field is appended last and
covers only the sorted field body.
"""

from __future__ import annotations

import unicodedata
import zlib
from datetime import date
from decimal import ROUND_HALF_EVEN, Context, Decimal

from spayd.domain.banking.value_objects import BankAccount
from spayd.domain.payment.exceptions import (
    MissingPrimaryAccountError,
    UnencodableTextError,
)
from spayd.domain.payment.value_objects import Payment

HEADER = "SPD*1.0*"
FIELD_SEPARATOR = "*"
KEY_VALUE_SEPARATOR = ":"
ACCOUNT_LIST_SEPARATOR = ","
CHECKSUM_KEY = "CRC32"
# Byte encoding of the payload, shared with the QR code renderer
PAYLOAD_ENCODING = "iso-8859-1"
MAX_FRACTION_DIGITS = 9
INSTANT_PAYMENT = "IP"


class SpaydKeys:
    """Field keys of the SPAYD 1.0 format."""

    ACCOUNT = "ACC"
    ALTERNATIVE_ACCOUNTS = "ALT-ACC"
    AMOUNT = "AM"
    CURRENCY = "CC"
    REFERENCE = "RF"
    RECIPIENT_NAME = "RN"
    DUE_DATE = "DT"
    PAYMENT_TYPE = "PT"
    MESSAGE = "MSG"
    NOTIFICATION_TYPE = "NT"
    NOTIFICATION_ADDRESS = "NTA"
    CONSTANT_SYMBOL = "X-KS"
    VARIABLE_SYMBOL = "X-VS"
    SPECIFIC_SYMBOL = "X-SS"


def normalize_text(value: str) -> str:
    """Trim, strip diacritics and uppercase: ``" Zpráva "`` -> ``"ZPRAVA"``."""
    decomposed = unicodedata.normalize("NFD", value.strip())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.upper()


def format_amount(amount: Decimal) -> str:
    """Render an amount as its shortest exact decimal.

    No grouping, no exponent, at most 9 fraction digits (rounded half-even)
    and no trailing zeros: ``Decimal("100.50")`` -> ``"100.5"``.
    """
    value = Decimal(amount)
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -MAX_FRACTION_DIGITS:
        context = Context(prec=len(value.as_tuple().digits) + MAX_FRACTION_DIGITS)
        value = value.quantize(
            Decimal(1).scaleb(-MAX_FRACTION_DIGITS),
            rounding=ROUND_HALF_EVEN,
            context=context,
        )

    if value.is_zero():
        return "0"

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_due_date(value: date) -> str:
    """Basic ISO date, ``YYYYMMDD``."""
    return value.isoformat().replace("-", "")


def _text(value: str, normalize: bool) -> str:
    return normalize_text(value) if normalize else value


def _account_list(accounts: list[BankAccount]) -> str:
    return ACCOUNT_LIST_SEPARATOR.join(account.spayd_value for account in accounts)


def build_fields(payment: Payment, normalize_strings: bool = True) -> dict[str, str]:
    """Collect the present SPAYD fields of a payment (unsorted)."""
    if payment.bank_account is None:
        raise MissingPrimaryAccountError()

    fields: dict[str, str] = {SpaydKeys.ACCOUNT: payment.bank_account.spayd_value}

    if payment.alternative_bank_accounts:
        fields[SpaydKeys.ALTERNATIVE_ACCOUNTS] = _account_list(
            payment.alternative_bank_accounts
        )
    if payment.amount is not None:
        fields[SpaydKeys.AMOUNT] = format_amount(payment.amount)
    if payment.currency_code is not None:
        fields[SpaydKeys.CURRENCY] = payment.currency_code
    if payment.originators_reference is not None:
        fields[SpaydKeys.REFERENCE] = payment.originators_reference
    if payment.beneficiary_name is not None:
        fields[SpaydKeys.RECIPIENT_NAME] = _text(
            payment.beneficiary_name, normalize_strings
        )
    if payment.payment_due_date is not None:
        fields[SpaydKeys.DUE_DATE] = format_due_date(payment.payment_due_date)
    if payment.instant_payment:
        fields[SpaydKeys.PAYMENT_TYPE] = INSTANT_PAYMENT
    if payment.payment_note is not None:
        fields[SpaydKeys.MESSAGE] = _text(payment.payment_note, normalize_strings)
    if payment.notification_type is not None:
        fields[SpaydKeys.NOTIFICATION_TYPE] = payment.notification_type
    if payment.notification_address is not None:
        fields[SpaydKeys.NOTIFICATION_ADDRESS] = payment.notification_address
    if payment.constant_symbol is not None:
        fields[SpaydKeys.CONSTANT_SYMBOL] = payment.constant_symbol
    if payment.variable_symbol is not None:
        fields[SpaydKeys.VARIABLE_SYMBOL] = payment.variable_symbol
    if payment.specific_symbol is not None:
        fields[SpaydKeys.SPECIFIC_SYMBOL] = payment.specific_symbol

    return fields


def encode_payload(text: str) -> bytes:
    """Encode SPAYD text as ISO-8859-1 bytes."""
    try:
        return text.encode(PAYLOAD_ENCODING)
    except UnicodeEncodeError as e:
        raise UnencodableTextError(text, str(e)) from e


def checksum(field_body: str) -> str:
    """CRC-32 (ISO 3309) of the field body as uppercase hex."""
    return format(zlib.crc32(encode_payload(field_body)), "X")


def serialize(
    payment: Payment,
    include_checksum: bool = False,
    normalize_strings: bool = True,
) -> str:
    """Serialize a payment to a SPAYD 1.0 string.

    Parameters
    ----------
    payment
        Payment to serialize; ``bank_account`` is required
    include_checksum
        Append ``*CRC32:<HEX>`` computed over the field body
    normalize_strings
        Trim, strip accents and uppercase the message and recipient name

    Raises
    ------
    MissingPrimaryAccountError
        If the payment has no bank account
    UnencodableTextError
        If a checksum is requested for text outside ISO-8859-1
    """
    fields = build_fields(payment, normalize_strings)

    # Code point order of the keys is part of the format
    field_body = FIELD_SEPARATOR.join(
        f"{key}{KEY_VALUE_SEPARATOR}{fields[key]}" for key in sorted(fields)
    )

    result = HEADER + field_body
    if include_checksum:
        result += (
            f"{FIELD_SEPARATOR}{CHECKSUM_KEY}{KEY_VALUE_SEPARATOR}"
            f"{checksum(field_body)}"
        )
    return result
