"""Supplier management commands."""

import click
from ermay.cli.date_filters import resolve_cli_date_range
from ermay.cli.error_handling import HANDLED_ERRORS, handle_domain_error
from ermay.cli.ledger_view import echo_balances, echo_transactions
from ermay.domain.ledger import filter_transactions, sort_transactions
from ermay.domain.party import SupplierService
from ermay.domain.statement import LedgerService
from ermay.utils.party_resolver import resolve_supplier


@click.group()
def supplier_group():
    """Manage suppliers."""
    pass


@supplier_group.command("create")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.option("--email", help="E-mail address")
@click.option("--phone", help="Phone number")
@click.option("--address", help="Postal address")
@click.option("--tax-number", help="Tax number (VKN)")
@click.option("--tax-office", help="Tax office")
@click.option("--website", help="Website")
@click.option("--sector", help="Business sector")
@click.option("--city", help="City")
@click.option("--district", help="District")
@click.option("--notes", help="Free-form notes")
@click.option("--currency", "default_currency", help="Default currency (TRY, USD, EUR)")
@click.pass_context
def create_supplier(ctx, name: str, **details):
    """Create a new supplier.

    Examples:
        ermay supplier create "Demir Metal"
        ermay supplier create "Global Parts" --currency EUR --city İzmir
    """
    db = ctx.obj["db"]
    service = SupplierService(db)

    try:
        supplier_id = service.create_supplier(ctx.obj["owner_id"], name, **details)
        click.echo(f"Created supplier '{name.strip()}' (ID: {supplier_id})")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@supplier_group.command("list")
@click.pass_context
def list_suppliers(ctx):
    """List all suppliers."""
    db = ctx.obj["db"]
    service = SupplierService(db)

    try:
        suppliers = service.list_suppliers(ctx.obj["owner_id"])
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo("\nSuppliers:")
    click.echo("-" * 60)
    for s in suppliers:
        line = f"ID: {s.id:3d} | {s.name:30s}"
        if s.city:
            line += f" | {s.city}"
        click.echo(line)


@supplier_group.command("show")
@click.argument("supplier", metavar="SUPPLIER")
@click.pass_context
def show_supplier(ctx, supplier: str):
    """Show supplier details and balances.

    SUPPLIER can be a supplier name or ID.
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]

    try:
        supplier_id = resolve_supplier(SupplierService(db), owner_id, supplier)
        ledger = LedgerService(db).supplier_ledger(owner_id, supplier_id)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    s = ledger.party
    click.echo(f"Supplier: {s.name} (ID: {s.id})")
    for label, value in (
        ("E-mail", s.email),
        ("Phone", s.phone),
        ("Address", s.address),
        ("City", s.city),
        ("District", s.district),
        ("Sector", s.sector),
        ("Website", s.website),
        ("Tax number", s.tax_number),
        ("Tax office", s.tax_office),
        ("Default currency", s.default_currency),
        ("Notes", s.notes),
    ):
        if value:
            click.echo(f"  {label}: {value}")
    click.echo(f"  Transactions: {len(ledger.transactions)}")
    echo_balances(ledger.balances)


@supplier_group.command("update")
@click.argument("supplier", metavar="SUPPLIER")
@click.option("--name", help="New name")
@click.option("--email", help="E-mail address")
@click.option("--phone", help="Phone number")
@click.option("--address", help="Postal address")
@click.option("--tax-number", help="Tax number (VKN)")
@click.option("--tax-office", help="Tax office")
@click.option("--website", help="Website")
@click.option("--sector", help="Business sector")
@click.option("--city", help="City")
@click.option("--district", help="District")
@click.option("--notes", help="Free-form notes")
@click.option("--currency", "default_currency", help="Default currency (TRY, USD, EUR)")
@click.pass_context
def update_supplier(ctx, supplier: str, **fields):
    """Change supplier details.

    SUPPLIER can be a supplier name or ID. Options that are not given keep
    their value.

    Examples:
        ermay supplier update "Demir Metal" --city Bursa
        ermay supplier update 2 --currency EUR
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = SupplierService(db)
    changes = {key: value for key, value in fields.items() if value is not None}

    try:
        supplier_id = resolve_supplier(service, owner_id, supplier)
        if not changes:
            click.echo("Nothing to update.")
            return
        service.update_supplier(owner_id, supplier_id, **changes)
        updated = service.get_supplier(owner_id, supplier_id)
        click.echo(f"Updated supplier '{updated.name}' (ID: {supplier_id})")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@supplier_group.command("statement")
@click.argument("supplier", metavar="SUPPLIER")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Only this month")
@click.option("--this-year", is_flag=True, help="Only this year")
@click.option("--last-month", is_flag=True, help="Only last month")
@click.option("--last-year", is_flag=True, help="Only last year")
@click.option("--search", help="Match description, amount or payment method")
@click.option("--desc", "descending", is_flag=True, help="Newest first")
@click.pass_context
def supplier_statement(
    ctx,
    supplier: str,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    last_month: bool,
    last_year: bool,
    search: str | None,
    descending: bool,
):
    """Show a supplier's account statement.

    Purchases and payments are listed oldest first; entries with an
    unreadable date are always listed last.
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "last-month": last_month,
            "last-year": last_year,
        },
    )

    try:
        supplier_id = resolve_supplier(SupplierService(db), owner_id, supplier)
        ledger = LedgerService(db).supplier_ledger(owner_id, supplier_id)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    transactions = filter_transactions(ledger.transactions, start, end, search)
    if descending:
        transactions = sort_transactions(transactions, descending=True)

    click.echo(f"Statement for {ledger.party.name} (ID: {ledger.party.id})")
    echo_transactions(transactions)
    echo_balances(ledger.balances)


@supplier_group.command("delete")
@click.argument("supplier", metavar="SUPPLIER")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_supplier(ctx, supplier: str, yes: bool) -> None:
    """Delete a supplier together with all its purchases and payments.

    SUPPLIER can be a supplier name or ID.
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = SupplierService(db)

    try:
        supplier_id = resolve_supplier(service, owner_id, supplier)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    supplier_obj = service.get_supplier(owner_id, supplier_id)
    purchase_count = len(db.list_purchases(owner_id, supplier_id))
    payment_count = len(db.list_payments_to_suppliers(owner_id, supplier_id))

    if not yes and not click.confirm(
        f"Delete supplier '{supplier_obj.name}' (ID: {supplier_id}) with "
        f"{purchase_count} purchase(s) and {payment_count} payment(s)?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_supplier(owner_id, supplier_id)
        click.echo(f"Deleted supplier '{supplier_obj.name}'")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register supplier commands with main CLI."""
    cli.add_command(supplier_group, name="supplier")
