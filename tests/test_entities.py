"""Tests for domain entities."""

import dataclasses
from decimal import Decimal

import pytest

from ermay.domain.entities import (
    SUPPORTED_CURRENCIES,
    Currency,
    PaymentMethod,
    TransactionType,
    UnifiedTransaction,
)

from builders import make_payment, make_sale


def test_entities_are_frozen():
    sale = make_sale(1, Decimal("10"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        sale.amount = Decimal("20")


def test_supported_currencies():
    assert SUPPORTED_CURRENCIES == ("TRY", "USD", "EUR")
    assert Currency("USD") is Currency.USD


def test_enum_values_match_stored_codes():
    assert [m.value for m in PaymentMethod] == ["nakit", "krediKarti", "havale", "cek", "diger"]
    assert TransactionType.PAYMENT_TO_SUPPLIER == "paymentToSupplier"


def test_unified_transaction_delegates_to_record():
    payment = make_payment(3, Decimal("5"), "EUR", "2024-01-01", method="cek", description="Çek ile")
    txn = UnifiedTransaction(record=payment, transaction_type="payment")

    assert (txn.id, txn.date, txn.amount, txn.currency) == (3, "2024-01-01", Decimal("5"), "EUR")
    assert txn.description == "Çek ile"
    assert txn.method == "cek"
