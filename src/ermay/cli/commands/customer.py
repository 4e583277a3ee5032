"""Customer management commands."""

import click
from ermay.cli.date_filters import resolve_cli_date_range
from ermay.cli.error_handling import HANDLED_ERRORS, handle_domain_error
from ermay.cli.ledger_view import echo_balances, echo_transactions
from ermay.domain.ledger import filter_transactions, sort_transactions
from ermay.domain.party import CustomerService
from ermay.domain.statement import LedgerService
from ermay.utils.party_resolver import resolve_customer


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("create")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--email", help="E-mail address")
@click.option("--phone", help="Phone number")
@click.option("--address", help="Postal address")
@click.option("--tax-number", help="Tax number (VKN/TCKN)")
@click.option("--tax-office", help="Tax office")
@click.option("--notes", help="Free-form notes")
@click.option("--currency", "default_currency", help="Default currency (TRY, USD, EUR)")
@click.pass_context
def create_customer(ctx, name: str, **details):
    """Create a new customer.

    Examples:
        ermay customer create "Yılmaz Ticaret"
        ermay customer create "Acme Ltd" --currency USD --phone "+90 212 555 0000"
    """
    db = ctx.obj["db"]
    service = CustomerService(db)

    try:
        customer_id = service.create_customer(ctx.obj["owner_id"], name, **details)
        click.echo(f"Created customer '{name.strip()}' (ID: {customer_id})")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@customer_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers."""
    db = ctx.obj["db"]
    service = CustomerService(db)

    try:
        customers = service.list_customers(ctx.obj["owner_id"])
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 60)
    for c in customers:
        line = f"ID: {c.id:3d} | {c.name:30s}"
        if c.phone:
            line += f" | {c.phone}"
        click.echo(line)


@customer_group.command("show")
@click.argument("customer", metavar="CUSTOMER")
@click.pass_context
def show_customer(ctx, customer: str):
    """Show customer details and balances.

    CUSTOMER can be a customer name or ID.
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]

    try:
        customer_id = resolve_customer(CustomerService(db), owner_id, customer)
        ledger = LedgerService(db).customer_ledger(owner_id, customer_id)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    c = ledger.party
    click.echo(f"Customer: {c.name} (ID: {c.id})")
    for label, value in (
        ("E-mail", c.email),
        ("Phone", c.phone),
        ("Address", c.address),
        ("Tax number", c.tax_number),
        ("Tax office", c.tax_office),
        ("Default currency", c.default_currency),
        ("Notes", c.notes),
    ):
        if value:
            click.echo(f"  {label}: {value}")
    click.echo(f"  Transactions: {len(ledger.transactions)}")
    echo_balances(ledger.balances)


@customer_group.command("update")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--name", help="New name")
@click.option("--email", help="E-mail address")
@click.option("--phone", help="Phone number")
@click.option("--address", help="Postal address")
@click.option("--tax-number", help="Tax number (VKN/TCKN)")
@click.option("--tax-office", help="Tax office")
@click.option("--notes", help="Free-form notes")
@click.option("--currency", "default_currency", help="Default currency (TRY, USD, EUR)")
@click.pass_context
def update_customer(ctx, customer: str, **fields):
    """Change customer details.

    CUSTOMER can be a customer name or ID. Options that are not given keep
    their value.

    Examples:
        ermay customer update "Yılmaz Ticaret" --phone "0212 555 11 11"
        ermay customer update 3 --name "Yılmaz Ticaret A.Ş."
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = CustomerService(db)
    changes = {key: value for key, value in fields.items() if value is not None}

    try:
        customer_id = resolve_customer(service, owner_id, customer)
        if not changes:
            click.echo("Nothing to update.")
            return
        service.update_customer(owner_id, customer_id, **changes)
        updated = service.get_customer(owner_id, customer_id)
        click.echo(f"Updated customer '{updated.name}' (ID: {customer_id})")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


@customer_group.command("statement")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Only this month")
@click.option("--this-year", is_flag=True, help="Only this year")
@click.option("--last-month", is_flag=True, help="Only last month")
@click.option("--last-year", is_flag=True, help="Only last year")
@click.option("--search", help="Match description, amount or payment method")
@click.option("--desc", "descending", is_flag=True, help="Newest first")
@click.pass_context
def customer_statement(
    ctx,
    customer: str,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    last_month: bool,
    last_year: bool,
    search: str | None,
    descending: bool,
):
    """Show a customer's account statement.

    Sales and payments are listed oldest first; entries with an
    unreadable date are always listed last. Balances cover all records,
    regardless of filters.

    Examples:
        ermay customer statement "Yılmaz Ticaret"
        ermay customer statement 3 --this-year --desc
        ermay customer statement 3 --search havale
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
        customer_id = resolve_customer(CustomerService(db), owner_id, customer)
        ledger = LedgerService(db).customer_ledger(owner_id, customer_id)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    transactions = filter_transactions(ledger.transactions, start, end, search)
    if descending:
        transactions = sort_transactions(transactions, descending=True)

    click.echo(f"Statement for {ledger.party.name} (ID: {ledger.party.id})")
    echo_transactions(transactions)
    echo_balances(ledger.balances)


@customer_group.command("delete")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_customer(ctx, customer: str, yes: bool) -> None:
    """Delete a customer together with all its sales and payments.

    CUSTOMER can be a customer name or ID.
    """
    db = ctx.obj["db"]
    owner_id = ctx.obj["owner_id"]
    service = CustomerService(db)

    try:
        customer_id = resolve_customer(service, owner_id, customer)
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    customer_obj = service.get_customer(owner_id, customer_id)
    sale_count = len(db.list_sales(owner_id, customer_id))
    payment_count = len(db.list_payments(owner_id, customer_id))

    if not yes and not click.confirm(
        f"Delete customer '{customer_obj.name}' (ID: {customer_id}) with "
        f"{sale_count} sale(s) and {payment_count} payment(s)?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_customer(owner_id, customer_id)
        click.echo(f"Deleted customer '{customer_obj.name}'")
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
