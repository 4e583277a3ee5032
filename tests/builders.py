"""In-memory record builders for pure ledger tests."""

from datetime import datetime, UTC
from decimal import Decimal

from ermay.domain.entities import Payment, PaymentToSupplier, Purchase, Sale

OWNER = "owner-1"
OTHER_OWNER = "owner-2"
CREATED = datetime(2024, 1, 1, tzinfo=UTC)


def make_sale(id, amount, currency="TRY", date="2024-01-01", **kwargs):
    return Sale(
        id=id,
        owner_id=OWNER,
        customer_id=1,
        date=date,
        amount=amount,
        currency=currency,
        created_at=CREATED,
        **kwargs,
    )


def make_payment(id, amount, currency="TRY", date="2024-01-01", method="nakit", **kwargs):
    return Payment(
        id=id,
        owner_id=OWNER,
        customer_id=1,
        date=date,
        amount=amount,
        currency=currency,
        method=method,
        created_at=CREATED,
        **kwargs,
    )


def make_purchase(id, amount, currency="TRY", date="2024-01-01", **kwargs):
    return Purchase(
        id=id,
        owner_id=OWNER,
        supplier_id=1,
        date=date,
        amount=amount,
        currency=currency,
        created_at=CREATED,
        **kwargs,
    )


def make_supplier_payment(id, amount, currency="TRY", date="2024-01-01", method="havale", **kwargs):
    return PaymentToSupplier(
        id=id,
        owner_id=OWNER,
        supplier_id=1,
        date=date,
        amount=amount,
        currency=currency,
        method=method,
        created_at=CREATED,
        **kwargs,
    )


D = Decimal
