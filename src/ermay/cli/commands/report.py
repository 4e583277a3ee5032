"""Report commands."""

import click
from ermay.cli.error_handling import HANDLED_ERRORS, handle_domain_error
from ermay.cli.ledger_view import echo_balances
from ermay.domain.report import ReportService
from ermay.utils.formatting import format_money


@click.group()
def report_group():
    """Owner-wide reports."""
    pass


@report_group.command("receivables")
@click.pass_context
def receivables_report(ctx):
    """Show what customers owe and what is owed to suppliers.

    Only positive balances are counted, per currency. Currencies are not
    converted into each other.
    """
    db = ctx.obj["db"]
    try:
        report = ReportService(db).receivables_payables(ctx.obj["owner_id"])
    except HANDLED_ERRORS as e:
        handle_domain_error(ctx, e)

    click.echo("\nReceivables (customers):")
    click.echo("-" * 60)
    if not report.receivables:
        click.echo("  (none)")
    for entry in report.receivables:
        amounts = ", ".join(format_money(entry.amounts[code], code) for code in sorted(entry.amounts))
        click.echo(f"  {entry.party_name} (ID: {entry.party_id}): {amounts}")

    click.echo("\nPayables (suppliers):")
    click.echo("-" * 60)
    if not report.payables:
        click.echo("  (none)")
    for entry in report.payables:
        amounts = ", ".join(format_money(entry.amounts[code], code) for code in sorted(entry.amounts))
        click.echo(f"  {entry.party_name} (ID: {entry.party_id}): {amounts}")

    echo_balances(report.receivables_total, title="Total receivables")
    echo_balances(report.payables_total, title="Total payables")
    echo_balances(report.net_position, title="Net position")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
