"""CLI rendering of balances and transaction feeds."""

from typing import Iterable

import click

from ermay.domain.entities import BalanceMap, UnifiedTransaction
from ermay.utils.formatting import (
    format_money,
    format_record_date,
    payment_method_label,
    transaction_label,
)


def echo_balances(balances: BalanceMap, title: str = "Balance") -> None:
    """Print one line per currency, in currency code order."""
    click.echo(f"\n{title}:")
    if not balances:
        click.echo("  (none)")
        return
    for code in sorted(balances):
        click.echo(f"  {code}: {format_money(balances[code], code)}")


def echo_transactions(transactions: Iterable[UnifiedTransaction]) -> None:
    """Print a statement table."""
    transactions = list(transactions)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':>5s} | {'Date':14s} | {'Type':6s} | {'Amount':>16s} | {'Method':11s} | Description"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:5d} | {format_record_date(txn.date):14s} | "
            f"{transaction_label(txn.transaction_type):6s} | "
            f"{format_money(txn.amount, txn.currency):>16s} | "
            f"{payment_method_label(txn.method):11s} | {txn.description or ''}"
        )
