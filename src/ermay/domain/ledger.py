"""Ledger aggregation: per-currency balances and the unified transaction feed.

Everything here is a pure function over records that were already fetched
from the store. Nothing is cached and nothing raises on malformed records:
a record without a finite amount or without a currency does not count towards
balances, and a record without a parseable date sorts after all dated ones.
"""

import logging
import math
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

from dateutil.parser import isoparse

from ermay.domain.entities import (
    BalanceMap,
    Currency,
    CreditRecord,
    DebitRecord,
    LedgerRecord,
    UnifiedTransaction,
)

logger = logging.getLogger(__name__)

# Currencies every balance map starts with. EUR is supported but only shows
# up when seeded explicitly or present in the records.
DEFAULT_BALANCE_CURRENCIES: tuple[str, ...] = (Currency.TRY.value, Currency.USD.value)

SkipHook = Callable[[Any, str], None]


def finite_amount(value: Any) -> Optional[Decimal]:
    """Return the amount as a Decimal, or None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return Decimal(repr(value))
    return None


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def currency_code(value: Any) -> Optional[str]:
    """Return the currency as a plain code string, or None if it is falsy."""
    if not value:
        return None
    return _plain(value)


def parse_record_date(value: Any) -> Optional[datetime]:
    """Parse a record date leniently.

    Accepts ISO-8601 strings, dates and datetimes. Values without an offset
    are taken as UTC so that naive and offset timestamps compare.

    Returns:
        Timezone-aware datetime, or None if the value is not a valid date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def compute_balances(
    debits: Iterable[DebitRecord],
    credits: Iterable[CreditRecord],
    seed_currencies: Sequence[str] = DEFAULT_BALANCE_CURRENCIES,
    on_skip: Optional[SkipHook] = None,
) -> BalanceMap:
    """Compute per-currency balances for one party.

    balance[C] = sum of debit amounts in C - sum of credit amounts in C.
    Dates are ignored.

    Args:
        debits: Sales or purchases
        credits: Payments or payments to supplier
        seed_currencies: Currencies present in the result even with no records
        on_skip: Optional callback invoked as on_skip(record, reason) for
            every record left out of the totals

    Returns:
        Mapping of currency code to signed total
    """
    balances: BalanceMap = {code: Decimal(0) for code in seed_currencies}

    def apply(records: Iterable[LedgerRecord], sign: int) -> None:
        for record in records:
            amount = finite_amount(getattr(record, "amount", None))
            if amount is None:
                _report_skip(record, "amount is not a finite number", on_skip)
                continue
            code = currency_code(getattr(record, "currency", None))
            if code is None:
                _report_skip(record, "currency is missing", on_skip)
                continue
            balances[code] = balances.get(code, Decimal(0)) + sign * amount

    apply(debits, 1)
    apply(credits, -1)
    return balances


def _report_skip(record: Any, reason: str, on_skip: Optional[SkipHook]) -> None:
    logger.debug(
        "Skipping %s %s in balance: %s",
        type(record).__name__,
        getattr(record, "id", "?"),
        reason,
    )
    if on_skip is not None:
        on_skip(record, reason)


def _sort_key(txn: UnifiedTransaction, descending: bool) -> tuple[int, float]:
    parsed = parse_record_date(txn.date)
    if parsed is None:
        return (1, 0.0)
    timestamp = parsed.timestamp()
    return (0, -timestamp if descending else timestamp)


def sort_transactions(
    transactions: Iterable[UnifiedTransaction], descending: bool = False
) -> list[UnifiedTransaction]:
    """Sort a transaction feed by date.

    Undated or unparseable entries go last in either direction. The sort is
    stable, so entries with equal dates keep their encounter order.
    """
    return sorted(transactions, key=lambda txn: _sort_key(txn, descending))


def build_unified_timeline(
    debits: Iterable[DebitRecord],
    credits: Iterable[CreditRecord],
    debit_tag: str,
    credit_tag: str,
) -> list[UnifiedTransaction]:
    """Merge a party's debit and credit records into one dated feed.

    Args:
        debits: Sales or purchases, tagged with debit_tag
        credits: Payments, tagged with credit_tag
        debit_tag: e.g. "sale" or "purchase"
        credit_tag: e.g. "payment" or "paymentToSupplier"

    Returns:
        Tagged records in ascending date order, invalid dates last
    """
    debit_tag = _plain(debit_tag)
    credit_tag = _plain(credit_tag)
    tagged = [UnifiedTransaction(record=record, transaction_type=debit_tag) for record in debits]
    tagged.extend(
        UnifiedTransaction(record=record, transaction_type=credit_tag) for record in credits
    )
    return sort_transactions(tagged)


def filter_transactions(
    transactions: Iterable[UnifiedTransaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
    search: Optional[str] = None,
) -> list[UnifiedTransaction]:
    """Filter a feed by inclusive day range and free-text search.

    Entries whose date does not parse are never dropped by the date range.
    The search matches description, amount text or payment method, ignoring
    case.
    """
    needle = (search or "").strip().lower()
    result = []
    for txn in transactions:
        parsed = parse_record_date(txn.date)
        if parsed is not None:
            day = parsed.date()
            if start is not None and day < start:
                continue
            if end is not None and day > end:
                continue
        if needle and not _matches(txn, needle):
            continue
        result.append(txn)
    return result


def _matches(txn: UnifiedTransaction, needle: str) -> bool:
    if txn.description and needle in txn.description.lower():
        return True
    if txn.amount is not None and needle in str(txn.amount).lower():
        return True
    if txn.method and needle in str(_plain(txn.method)).lower():
        return True
    return False
