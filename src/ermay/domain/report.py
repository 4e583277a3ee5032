"""Receivables and payables report domain service."""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from ermay.database.base import Database
from ermay.domain.entities import (
    BalanceMap,
    CreditRecord,
    DebitRecord,
    Party,
    PartyBalance,
    ReceivablesPayablesReport,
)
from ermay.domain.ledger import compute_balances
from ermay.domain.statement import fetch_or_empty


class ReportService:
    """Service for owner-wide balance reports."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def receivables_payables(self, owner_id: str) -> ReceivablesPayablesReport:
        """Summarize what customers owe and what is owed to suppliers.

        Only positive balances count; a party that has paid in advance in
        some currency contributes nothing in that currency. Currencies are
        never converted into each other.
        """
        customers = self.db.list_customers(owner_id)
        sales = fetch_or_empty(lambda: self.db.list_sales(owner_id), "sales")
        payments = fetch_or_empty(lambda: self.db.list_payments(owner_id), "payments")

        suppliers = self.db.list_suppliers(owner_id)
        purchases = fetch_or_empty(lambda: self.db.list_purchases(owner_id), "purchases")
        supplier_payments = fetch_or_empty(
            lambda: self.db.list_payments_to_suppliers(owner_id), "payments to suppliers"
        )

        receivables = self.outstanding_by_party(customers, sales, payments, "customer_id")
        payables = self.outstanding_by_party(
            suppliers, purchases, supplier_payments, "supplier_id"
        )
        receivables_total = self.total_by_currency(receivables)
        payables_total = self.total_by_currency(payables)

        net_position: BalanceMap = {}
        for code in sorted(set(receivables_total) | set(payables_total)):
            net_position[code] = receivables_total.get(code, Decimal(0)) - payables_total.get(
                code, Decimal(0)
            )

        return ReceivablesPayablesReport(
            receivables=tuple(receivables),
            payables=tuple(payables),
            receivables_total=receivables_total,
            payables_total=payables_total,
            net_position=net_position,
        )

    def outstanding_by_party(
        self,
        parties: Sequence[Party],
        debits: Sequence[DebitRecord],
        credits: Sequence[CreditRecord],
        party_field: str,
    ) -> list[PartyBalance]:
        """Compute positive per-currency balances for every party that has one."""
        debits_by_party: dict[int, list[DebitRecord]] = defaultdict(list)
        credits_by_party: dict[int, list[CreditRecord]] = defaultdict(list)
        for record in debits:
            debits_by_party[getattr(record, party_field)].append(record)
        for record in credits:
            credits_by_party[getattr(record, party_field)].append(record)

        results = []
        for party in parties:
            balances = compute_balances(
                debits_by_party.get(party.id, []),
                credits_by_party.get(party.id, []),
                seed_currencies=(),
            )
            outstanding = {code: value for code, value in balances.items() if value > 0}
            if outstanding:
                results.append(
                    PartyBalance(party_id=party.id, party_name=party.name, amounts=outstanding)
                )
        return results

    def total_by_currency(self, balances: Sequence[PartyBalance]) -> BalanceMap:
        """Sum party balances per currency."""
        totals: BalanceMap = defaultdict(Decimal)
        for entry in balances:
            for code, value in entry.amounts.items():
                totals[code] += value
        return dict(totals)
