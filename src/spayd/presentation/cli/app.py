"""SPAYD CLI application using Typer.

This module provides command-line utilities for composing Czech IBANs
and producing SPAYD payment strings and QR codes.
"""

import logging
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from spayd.application.services import QrPaymentService
from spayd.domain.banking.services import (
    compose_czech_iban,
    format_iban,
    unformat_iban,
)
from spayd.domain.banking.value_objects import BankAccount
from spayd.domain.payment.services import serialize
from spayd.domain.payment.value_objects import Payment
from spayd.domain.shared.exceptions import DomainException
from spayd.domain.shared.iban import is_valid_iban
from spayd.infrastructure.qr import QrCodeGenerator
from spayd_config import get_settings

app = typer.Typer(
    name="spayd",
    help="SPAYD - Czech IBAN and QR payment CLI",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# Create subcommand groups
iban_app = typer.Typer(
    name="iban",
    help="Czech IBAN utilities",
    no_args_is_help=True,
)
payment_app = typer.Typer(
    name="payment",
    help="SPAYD payment string and QR code generation",
    no_args_is_help=True,
)
app.add_typer(iban_app)
app.add_typer(payment_app)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure logging once, level taken from settings."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing config
    )
    logging.getLogger("spayd").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("PIL").setLevel(logging.WARNING)


@app.callback()
def main() -> None:
    """SPAYD command-line tools."""
    _configure_logging()


def _fail(error: DomainException | PydanticValidationError) -> NoReturn:
    logger.debug("Command failed: %r", error)
    if isinstance(error, PydanticValidationError):
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in error.errors()
        )
    else:
        message = error.message
    err_console.print(f"[red]Error:[/red] {message}", highlight=False, markup=True)
    raise typer.Exit(code=1)


def _output(text: str) -> None:
    console.print(text, soft_wrap=True, markup=False, highlight=False)


# =============================================================================
# IBAN commands
# =============================================================================


@iban_app.command("compose")
def compose(
    bank_code: str = typer.Argument(..., help="4-digit bank code"),
    account: str = typer.Argument(..., help="Account number (2-10 digits)"),
    prefix: str = typer.Option("", "--prefix", "-p", help="Account prefix"),
    formatted: bool = typer.Option(
        False, "--formatted", "-f", help="Group the IBAN in blocks of four"
    ),
) -> None:
    """Compose a Czech IBAN from bank code, account number and prefix."""
    try:
        iban = compose_czech_iban(bank_code, account, prefix)
    except DomainException as e:
        _fail(e)
    _output(format_iban(iban) if formatted else iban)


@iban_app.command("format")
def format_command(
    iban: str = typer.Argument(..., help="24-character Czech IBAN"),
) -> None:
    """Group an IBAN in blocks of four characters."""
    try:
        _output(format_iban(unformat_iban(iban)))
    except DomainException as e:
        _fail(e)


@iban_app.command("validate")
def validate(
    iban: str = typer.Argument(..., help="IBAN, spaces allowed"),
) -> None:
    """Check the IBAN structure and its mod-97 check digits."""
    if is_valid_iban(iban):
        console.print("[green]valid[/green]")
        return
    err_console.print("[red]invalid[/red]")
    raise typer.Exit(code=1)


# =============================================================================
# Payment commands
# =============================================================================


def _parse_amount(value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation as e:
        msg = f"Invalid amount: {value}"
        raise typer.BadParameter(msg, param_hint="--amount") from e


def _build_payment(
    iban: str,
    bic: str | None,
    alternative_accounts: list[str] | None,
    amount: str | None,
    currency: str | None,
    due_date: datetime | None,
    message: str | None,
    recipient: str | None,
    variable_symbol: str | None,
    constant_symbol: str | None,
    specific_symbol: str | None,
    instant: bool,
) -> Payment:
    alternatives = []
    for value in alternative_accounts or []:
        alt_iban, _, alt_bic = value.partition("+")
        alternatives.append(BankAccount(alt_iban, alt_bic or None))

    return Payment(
        bank_account=BankAccount(iban, bic),
        alternative_bank_accounts=alternatives,
        amount=_parse_amount(amount),
        currency_code=currency,
        payment_due_date=due_date.date() if due_date else None,
        payment_note=message,
        beneficiary_name=recipient,
        variable_symbol=variable_symbol,
        constant_symbol=constant_symbol,
        specific_symbol=specific_symbol,
        instant_payment=instant or None,
    )


_IBAN_OPTION = typer.Option(..., "--iban", help="Payee IBAN")
_BIC_OPTION = typer.Option(None, "--bic", help="Payee BIC")
_ALT_OPTION = typer.Option(
    None, "--alt", help="Alternative account as IBAN or IBAN+BIC (repeatable)"
)
_AMOUNT_OPTION = typer.Option(None, "--amount", help="Amount, e.g. 123.45")
_CURRENCY_OPTION = typer.Option(None, "--currency", help="ISO 4217 currency code")
_DUE_DATE_OPTION = typer.Option(
    None, "--due-date", formats=["%Y-%m-%d"], help="Due date (YYYY-MM-DD)"
)
_MESSAGE_OPTION = typer.Option(None, "--message", help="Message for the payee")
_RECIPIENT_OPTION = typer.Option(None, "--recipient", help="Payee name")
_VS_OPTION = typer.Option(None, "--vs", help="Variable symbol")
_KS_OPTION = typer.Option(None, "--ks", help="Constant symbol")
_SS_OPTION = typer.Option(None, "--ss", help="Specific symbol")
_INSTANT_OPTION = typer.Option(False, "--instant", help="Request instant payment")
_CHECKSUM_OPTION = typer.Option(
    None,
    "--checksum/--no-checksum",
    help="Append CRC32 field (settings default when omitted)",
)
_NORMALIZE_OPTION = typer.Option(
    None,
    "--normalize/--no-normalize",
    help="Strip diacritics and upper-case text (settings default when omitted)",
)


@payment_app.command("serialize")
def serialize_command(
    iban: str = _IBAN_OPTION,
    bic: str | None = _BIC_OPTION,
    alt: list[str] | None = _ALT_OPTION,
    amount: str | None = _AMOUNT_OPTION,
    currency: str | None = _CURRENCY_OPTION,
    due_date: datetime | None = _DUE_DATE_OPTION,
    message: str | None = _MESSAGE_OPTION,
    recipient: str | None = _RECIPIENT_OPTION,
    vs: str | None = _VS_OPTION,
    ks: str | None = _KS_OPTION,
    ss: str | None = _SS_OPTION,
    instant: bool = _INSTANT_OPTION,
    checksum: bool | None = _CHECKSUM_OPTION,
    normalize: bool | None = _NORMALIZE_OPTION,
) -> None:
    """Print the SPAYD string for a payment."""
    settings = get_settings()
    try:
        payment = _build_payment(
            iban,
            bic,
            alt,
            amount,
            currency,
            due_date,
            message,
            recipient,
            vs,
            ks,
            ss,
            instant,
        )
        spayd = serialize(
            payment,
            include_checksum=(
                settings.include_checksum if checksum is None else checksum
            ),
            normalize_strings=(
                settings.normalize_strings if normalize is None else normalize
            ),
        )
    except (DomainException, PydanticValidationError) as e:
        _fail(e)
    _output(spayd)


@payment_app.command("qr")
def qr_command(
    output: Path = typer.Option(..., "--output", "-o", help="PNG file to write"),
    size: int | None = typer.Option(None, "--size", min=1, help="Size in px"),
    iban: str = _IBAN_OPTION,
    bic: str | None = _BIC_OPTION,
    alt: list[str] | None = _ALT_OPTION,
    amount: str | None = _AMOUNT_OPTION,
    currency: str | None = _CURRENCY_OPTION,
    due_date: datetime | None = _DUE_DATE_OPTION,
    message: str | None = _MESSAGE_OPTION,
    recipient: str | None = _RECIPIENT_OPTION,
    vs: str | None = _VS_OPTION,
    ks: str | None = _KS_OPTION,
    ss: str | None = _SS_OPTION,
    instant: bool = _INSTANT_OPTION,
    checksum: bool | None = _CHECKSUM_OPTION,
    normalize: bool | None = _NORMALIZE_OPTION,
) -> None:
    """Write the SPAYD QR code for a payment as a PNG file."""
    settings = get_settings()
    service = QrPaymentService(QrCodeGenerator(), settings)
    try:
        payment = _build_payment(
            iban,
            bic,
            alt,
            amount,
            currency,
            due_date,
            message,
            recipient,
            vs,
            ks,
            ss,
            instant,
        )
        image = service.generate_qr_code(
            payment,
            size=size,
            include_checksum=checksum,
            normalize_strings=normalize,
        )
    except (DomainException, PydanticValidationError) as e:
        _fail(e)
    output.write_bytes(image)
    console.print(f"[green]QR code written to[/green] {output}", highlight=False)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
