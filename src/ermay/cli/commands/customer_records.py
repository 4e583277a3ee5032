"""Sale and customer payment commands."""

import click
from ermay.cli.error_handling import HANDLED_ERRORS, handle_domain_error
from ermay.cli.record_input import (
    check_details,
    parse_amount_and_date,
    parse_line_items,
    parse_update_values,
    record_currency,
)
from ermay.domain.entities import PaymentMethod
from ermay.domain.party import CustomerService
from ermay.domain.records import RecordService
from ermay.utils.formatting import format_money
from ermay.utils.party_resolver import resolve_customer


@click.group()
def sale_group():
    """Record sales to customers."""
    pass


@sale_group.command("add")
@click.option("--customer", required=True, help="Customer name or ID")
@click.option("--amount", required=True, help="Amount (e.g. 1.234,56 or 1234.56)")
@click.option("--currency", help="TRY, USD or EUR (defaults to the customer's currency, then TRY)")
@click.option("--date", "date_str", default="today", show_default=True, help="Sale date")
@click.option("--description", help="Description (defaults to 'Genel Satış')")
@click.option("--invoice", is_flag=True, help="Mark the sale as invoiced")
@click.option("--item", "items", multiple=True, help="Line item NAME:QUANTITY:UNIT_PRICE[:TAX_RATE]")
@click.pass_context
def add_sale(
    ctx,
    customer: str,
    amount: str,
    currency: str | None,
    date_str: str,
    description: str | None,
    invoice: bool,
    items: tuple[str, ...],
):
    """Record a sale to a customer.

    Examples:
        ermay sale add --customer "Yılmaz Ticaret" --amount 1.500,00
        ermay sale add --customer 3 --amount 250 --currency USD --date 2024-03-01
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    customer_service = CustomerService(db)

    try:
        customer_id = resolve_customer(customer_service, owner_id, customer)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    value, day = parse_amount_and_date(ctx, amount, date_str)
    line_items = parse_line_items(ctx, items)
    code = record_currency(currency, customer_service.get_customer(owner_id, customer_id))

    try:
        sale_id = RecordService(db).add_sale(
            owner_id,
            customer_id,
            date=day,
            amount=value,
            currency=code,
            description=description,
            items=line_items,
            invoice_type="invoice" if invoice else "normal",
        )
        click.echo(f"Recorded sale {sale_id}: {format_money(value, code.upper())}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@sale_group.command("update")
@click.argument("sale_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--currency", help="New currency (TRY, USD or EUR)")
@click.option("--date", "date_str", help="New sale date")
@click.option("--description", help="New description")
@click.option("--invoice/--no-invoice", default=None, help="Mark or unmark the sale as invoiced")
@click.option("--item", "items", multiple=True, help="Replace line items (NAME:QUANTITY:UNIT_PRICE[:TAX_RATE])")
@click.pass_context
def update_sale(
    ctx,
    sale_id: int,
    amount: str | None,
    currency: str | None,
    date_str: str | None,
    description: str | None,
    invoice: bool | None,
    items: tuple[str, ...],
):
    """Change a recorded sale. Options that are not given keep their value.

    Examples:
        ermay sale update 12 --amount 1.750,00
        ermay sale update 12 --date 2024-03-02 --invoice
    """
    value, day = parse_update_values(ctx, amount, date_str)
    line_items = parse_line_items(ctx, items) if items else None

    try:
        sale = RecordService(ctx.obj["db"]).update_sale(
            ctx.obj["owner_id"],
            sale_id,
            date=day,
            amount=value,
            currency=currency,
            description=description,
            items=line_items,
            invoice_type=None if invoice is None else ("invoice" if invoice else "normal"),
        )
        click.echo(f"Updated sale {sale_id}: {format_money(sale.amount, sale.currency)}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@sale_group.command("delete")
@click.argument("sale_id", type=int)
@click.pass_context
def delete_sale(ctx, sale_id: int):
    """Delete a sale."""
    try:
        RecordService(ctx.obj["db"]).delete_sale(ctx.obj["owner_id"], sale_id)
        click.echo(f"Deleted sale {sale_id}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@click.group()
def payment_group():
    """Record payments received from customers."""
    pass


@payment_group.command("add")
@click.option("--customer", required=True, help="Customer name or ID")
@click.option("--amount", required=True, help="Amount (e.g. 1.234,56 or 1234.56)")
@click.option("--currency", help="TRY, USD or EUR (defaults to the customer's currency, then TRY)")
@click.option("--date", "date_str", default="today", show_default=True, help="Payment date")
@click.option(
    "--method",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
    help="Payment method",
)
@click.option("--description", help="Description")
@click.option("--reference", "reference_number", help="Reference number")
@click.option("--check-serial", help="Check serial number (method 'cek' only)")
@click.option("--check-due-date", help="Check due date (method 'cek' only)")
@click.option("--check-image", help="Check image URL (method 'cek' only)")
@click.pass_context
def add_payment(
    ctx,
    customer: str,
    amount: str,
    currency: str | None,
    date_str: str,
    method: str,
    description: str | None,
    reference_number: str | None,
    check_serial: str | None,
    check_due_date: str | None,
    check_image: str | None,
):
    """Record a payment received from a customer.

    Examples:
        ermay payment add --customer "Yılmaz Ticaret" --amount 500 --method havale
        ermay payment add --customer 3 --amount 1000 --method cek --check-serial A123 --check-due-date 2024-06-30
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    customer_service = CustomerService(db)

    try:
        customer_id = resolve_customer(customer_service, owner_id, customer)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    value, day = parse_amount_and_date(ctx, amount, date_str)
    code = record_currency(currency, customer_service.get_customer(owner_id, customer_id))

    try:
        payment_id = RecordService(db).add_payment(
            owner_id,
            customer_id,
            date=day,
            amount=value,
            currency=code,
            method=method,
            description=description,
            reference_number=reference_number,
            check=check_details(check_serial, check_due_date, check_image),
        )
        click.echo(f"Recorded payment {payment_id}: {format_money(value, code.upper())}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@payment_group.command("update")
@click.argument("payment_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--currency", help="New currency (TRY, USD or EUR)")
@click.option("--date", "date_str", help="New payment date")
@click.option("--method", type=click.Choice([m.value for m in PaymentMethod]), help="New payment method")
@click.option("--description", help="New description")
@click.option("--reference", "reference_number", help="New reference number")
@click.option("--check-serial", help="Check serial number (method 'cek' only)")
@click.option("--check-due-date", help="Check due date (method 'cek' only)")
@click.option("--check-image", help="Check image URL (method 'cek' only)")
@click.pass_context
def update_payment(
    ctx,
    payment_id: int,
    amount: str | None,
    currency: str | None,
    date_str: str | None,
    method: str | None,
    description: str | None,
    reference_number: str | None,
    check_serial: str | None,
    check_due_date: str | None,
    check_image: str | None,
):
    """Change a recorded customer payment.

    Options that are not given keep their value. Changing the method away
    from 'cek' drops the stored check details.
    """
    value, day = parse_update_values(ctx, amount, date_str)

    try:
        payment = RecordService(ctx.obj["db"]).update_payment(
            ctx.obj["owner_id"],
            payment_id,
            date=day,
            amount=value,
            currency=currency,
            method=method,
            description=description,
            reference_number=reference_number,
            check=check_details(check_serial, check_due_date, check_image),
        )
        click.echo(f"Updated payment {payment_id}: {format_money(payment.amount, payment.currency)}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@payment_group.command("delete")
@click.argument("payment_id", type=int)
@click.pass_context
def delete_payment(ctx, payment_id: int):
    """Delete a customer payment."""
    try:
        RecordService(ctx.obj["db"]).delete_payment(ctx.obj["owner_id"], payment_id)
        click.echo(f"Deleted payment {payment_id}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register sale and payment commands with main CLI."""
    cli.add_command(sale_group, name="sale")
    cli.add_command(payment_group, name="payment")
