"""Purchase and supplier payment commands."""

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
from ermay.domain.party import SupplierService
from ermay.domain.records import RecordService
from ermay.utils.formatting import format_money
from ermay.utils.party_resolver import resolve_supplier


@click.group()
def purchase_group():
    """Record purchases from suppliers."""
    pass


@purchase_group.command("add")
@click.option("--supplier", required=True, help="Supplier name or ID")
@click.option("--amount", required=True, help="Amount (e.g. 1.234,56 or 1234.56)")
@click.option("--currency", help="TRY, USD or EUR (defaults to the supplier's currency, then TRY)")
@click.option("--date", "date_str", default="today", show_default=True, help="Purchase date")
@click.option("--description", help="Description")
@click.option("--item", "items", multiple=True, help="Line item NAME:QUANTITY:UNIT_PRICE[:TAX_RATE]")
@click.pass_context
def add_purchase(
    ctx,
    supplier: str,
    amount: str,
    currency: str | None,
    date_str: str,
    description: str | None,
    items: tuple[str, ...],
):
    """Record a purchase from a supplier."""
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    supplier_service = SupplierService(db)

    try:
        supplier_id = resolve_supplier(supplier_service, owner_id, supplier)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    value, day = parse_amount_and_date(ctx, amount, date_str)
    line_items = parse_line_items(ctx, items)
    code = record_currency(currency, supplier_service.get_supplier(owner_id, supplier_id))

    try:
        purchase_id = RecordService(db).add_purchase(
            owner_id,
            supplier_id,
            date=day,
            amount=value,
            currency=code,
            description=description,
            items=line_items,
        )
        click.echo(f"Recorded purchase {purchase_id}: {format_money(value, code.upper())}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@purchase_group.command("update")
@click.argument("purchase_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--currency", help="New currency (TRY, USD or EUR)")
@click.option("--date", "date_str", help="New purchase date")
@click.option("--description", help="New description")
@click.option("--item", "items", multiple=True, help="Replace line items (NAME:QUANTITY:UNIT_PRICE[:TAX_RATE])")
@click.pass_context
def update_purchase(
    ctx,
    purchase_id: int,
    amount: str | None,
    currency: str | None,
    date_str: str | None,
    description: str | None,
    items: tuple[str, ...],
):
    """Change a recorded purchase. Options that are not given keep their value."""
    value, day = parse_update_values(ctx, amount, date_str)
    line_items = parse_line_items(ctx, items) if items else None

    try:
        purchase = RecordService(ctx.obj["db"]).update_purchase(
            ctx.obj["owner_id"],
            purchase_id,
            date=day,
            amount=value,
            currency=currency,
            description=description,
            items=line_items,
        )
        click.echo(f"Updated purchase {purchase_id}: {format_money(purchase.amount, purchase.currency)}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@purchase_group.command("delete")
@click.argument("purchase_id", type=int)
@click.pass_context
def delete_purchase(ctx, purchase_id: int):
    """Delete a purchase."""
    try:
        RecordService(ctx.obj["db"]).delete_purchase(ctx.obj["owner_id"], purchase_id)
        click.echo(f"Deleted purchase {purchase_id}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@click.group()
def supplier_payment_group():
    """Record payments made to suppliers."""
    pass


@supplier_payment_group.command("add")
@click.option("--supplier", required=True, help="Supplier name or ID")
@click.option("--amount", required=True, help="Amount (e.g. 1.234,56 or 1234.56)")
@click.option("--currency", help="TRY, USD or EUR (defaults to the supplier's currency, then TRY)")
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
def add_supplier_payment(
    ctx,
    supplier: str,
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
    """Record a payment made to a supplier."""
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    supplier_service = SupplierService(db)

    try:
        supplier_id = resolve_supplier(supplier_service, owner_id, supplier)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    value, day = parse_amount_and_date(ctx, amount, date_str)
    code = record_currency(currency, supplier_service.get_supplier(owner_id, supplier_id))

    try:
        payment_id = RecordService(db).add_payment_to_supplier(
            owner_id,
            supplier_id,
            date=day,
            amount=value,
            currency=code,
            method=method,
            description=description,
            reference_number=reference_number,
            check=check_details(check_serial, check_due_date, check_image),
        )
        click.echo(f"Recorded supplier payment {payment_id}: {format_money(value, code.upper())}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@supplier_payment_group.command("update")
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
def update_supplier_payment(
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
    """Change a recorded payment to a supplier.

    Options that are not given keep their value. Changing the method away
    from 'cek' drops the stored check details.

    Examples:
        ermay supplier-payment update 4 --method havale
        ermay supplier-payment update 4 --check-due-date 2024-08-01
    """
    value, day = parse_update_values(ctx, amount, date_str)

    try:
        payment = RecordService(ctx.obj["db"]).update_payment_to_supplier(
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
        click.echo(
            f"Updated supplier payment {payment_id}: {format_money(payment.amount, payment.currency)}"
        )
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@supplier_payment_group.command("delete")
@click.argument("payment_id", type=int)
@click.pass_context
def delete_supplier_payment(ctx, payment_id: int):
    """Delete a payment made to a supplier."""
    try:
        RecordService(ctx.obj["db"]).delete_payment_to_supplier(ctx.obj["owner_id"], payment_id)
        click.echo(f"Deleted supplier payment {payment_id}")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register purchase and supplier payment commands with main CLI."""
    cli.add_command(purchase_group, name="purchase")
    cli.add_command(supplier_payment_group, name="supplier-payment")
