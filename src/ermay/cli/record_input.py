"""CLI helpers for turning record options into domain values."""

from datetime import date
from decimal import Decimal

import click

from ermay.cli.error_handling import handle_domain_error
from ermay.domain.entities import CheckDetails, Currency, LineItem, Party
from ermay.utils.amount_parser import parse_amount
from ermay.utils.date_parser import parse_date


def parse_amount_and_date(ctx, amount: str, date_str: str) -> tuple[Decimal, date]:
    """Parse the --amount and --date options, exiting on bad input."""
    try:
        return parse_amount(amount), parse_date(date_str)
    except ValueError as e:
        handle_domain_error(ctx, e)


def record_currency(currency: str | None, party: Party) -> str:
    """Currency given on the command line, else the party's default, else TRY."""
    return currency or party.default_currency or Currency.TRY.value


def parse_line_items(ctx, items: tuple[str, ...]) -> tuple[LineItem, ...]:
    """Parse --item values of the form NAME:QUANTITY:UNIT_PRICE[:TAX_RATE]."""
    parsed = []
    for raw in items:
        parts = raw.split(":")
        if len(parts) not in (3, 4) or not parts[0].strip():
            click.echo(
                f"Error: Invalid item '{raw}', expected NAME:QUANTITY:UNIT_PRICE[:TAX_RATE]",
                err=True,
            )
            ctx.exit(1)
        try:
            parsed.append(
                LineItem(
                    product_name=parts[0].strip(),
                    quantity=parse_amount(parts[1]),
                    unit_price=parse_amount(parts[2]),
                    tax_rate=parse_amount(parts[3]) if len(parts) == 4 else None,
                )
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
    return tuple(parsed)


def check_details(
    serial_number: str | None, due_date: str | None, image_url: str | None
) -> CheckDetails | None:
    """Build check details if any check option was given."""
    if serial_number is None and due_date is None and image_url is None:
        return None
    return CheckDetails(serial_number=serial_number, due_date=due_date, image_url=image_url)


def parse_update_values(
    ctx, amount: str | None, date_str: str | None
) -> tuple[Decimal | None, date | None]:
    """Parse the optional --amount and --date options of an update command."""
    try:
        return (
            None if amount is None else parse_amount(amount),
            None if date_str is None else parse_date(date_str),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
