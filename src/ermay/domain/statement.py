"""Party ledger (account statement) domain service."""

import logging
from typing import Callable, TypeVar

from ermay.database.base import Database
from ermay.domain.entities import PartyLedger, TransactionType
from ermay.domain.errors import (
    NotFoundError,
    StorageError,
    customer_not_found,
    supplier_not_found,
)
from ermay.domain.ledger import build_unified_timeline, compute_balances

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_or_empty(fetch: Callable[[], list[T]], what: str) -> list[T]:
    """Run a store read, substituting an empty list if the store fails.

    The aggregator only ever sees records that loaded completely.
    """
    try:
        return fetch()
    except StorageError as e:
        logger.warning("Could not load %s, showing none: %s", what, e)
        return []


class LedgerService:
    """Service assembling balances and transaction feeds per party."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def customer_ledger(self, owner_id: str, customer_id: int) -> PartyLedger:
        """Build the ledger of one customer.

        Args:
            owner_id: Account owner
            customer_id: Customer ID

        Returns:
            PartyLedger with balances and the sale/payment feed

        Raises:
            NotFoundError: If the customer does not exist
        """
        customer = self.db.get_customer(owner_id, customer_id)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_id))

        sales = fetch_or_empty(lambda: self.db.list_sales(owner_id, customer_id), "sales")
        payments = fetch_or_empty(lambda: self.db.list_payments(owner_id, customer_id), "payments")

        return PartyLedger(
            party=customer,
            balances=compute_balances(sales, payments),
            transactions=tuple(
                build_unified_timeline(
                    sales, payments, TransactionType.SALE, TransactionType.PAYMENT
                )
            ),
        )

    def supplier_ledger(self, owner_id: str, supplier_id: int) -> PartyLedger:
        """Build the ledger of one supplier.

        Args:
            owner_id: Account owner
            supplier_id: Supplier ID

        Returns:
            PartyLedger with balances and the purchase/payment feed

        Raises:
            NotFoundError: If the supplier does not exist
        """
        supplier = self.db.get_supplier(owner_id, supplier_id)
        if supplier is None:
            raise NotFoundError(supplier_not_found(supplier_id))

        purchases = fetch_or_empty(
            lambda: self.db.list_purchases(owner_id, supplier_id), "purchases"
        )
        payments = fetch_or_empty(
            lambda: self.db.list_payments_to_suppliers(owner_id, supplier_id),
            "payments to supplier",
        )

        return PartyLedger(
            party=supplier,
            balances=compute_balances(purchases, payments),
            transactions=tuple(
                build_unified_timeline(
                    purchases,
                    payments,
                    TransactionType.PURCHASE,
                    TransactionType.PAYMENT_TO_SUPPLIER,
                )
            ),
        )
