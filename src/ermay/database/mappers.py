"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the store schema can change
without touching the domain entities.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ermay.domain import entities as domain
from ermay.database.models import (
    Customer as ORMCustomer,
    Supplier as ORMSupplier,
    Sale as ORMSale,
    Purchase as ORMPurchase,
    Payment as ORMPayment,
    PaymentToSupplier as ORMPaymentToSupplier,
)


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def line_items_to_json(items: tuple[domain.LineItem, ...]) -> list[dict[str, Any]]:
    """Serialize line items for the JSON column.

    Decimals are stored as strings to keep them exact.
    """
    return [
        {
            "product_name": item.product_name,
            "quantity": None if item.quantity is None else str(item.quantity),
            "unit": item.unit,
            "unit_price": None if item.unit_price is None else str(item.unit_price),
            "tax_rate": None if item.tax_rate is None else str(item.tax_rate),
        }
        for item in items
    ]


def line_items_from_json(data: Optional[list[dict[str, Any]]]) -> tuple[domain.LineItem, ...]:
    """Deserialize line items from the JSON column."""
    return tuple(
        domain.LineItem(
            product_name=entry.get("product_name") or "",
            quantity=_to_decimal(entry.get("quantity")),
            unit=entry.get("unit"),
            unit_price=_to_decimal(entry.get("unit_price")),
            tax_rate=_to_decimal(entry.get("tax_rate")),
        )
        for entry in data or []
    )


def _check_details(orm_payment: ORMPayment | ORMPaymentToSupplier) -> Optional[domain.CheckDetails]:
    if (
        orm_payment.check_serial_number is None
        and orm_payment.check_due_date is None
        and orm_payment.check_image_url is None
    ):
        return None
    return domain.CheckDetails(
        serial_number=orm_payment.check_serial_number,
        due_date=orm_payment.check_due_date,
        image_url=orm_payment.check_image_url,
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        owner_id=orm_customer.owner_id,
        name=orm_customer.name,
        created_at=orm_customer.created_at,
        email=orm_customer.email,
        phone=orm_customer.phone,
        address=orm_customer.address,
        tax_number=orm_customer.tax_number,
        tax_office=orm_customer.tax_office,
        notes=orm_customer.notes,
        default_currency=orm_customer.default_currency,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.id,
        owner_id=orm_supplier.owner_id,
        name=orm_supplier.name,
        created_at=orm_supplier.created_at,
        email=orm_supplier.email,
        phone=orm_supplier.phone,
        address=orm_supplier.address,
        tax_number=orm_supplier.tax_number,
        tax_office=orm_supplier.tax_office,
        notes=orm_supplier.notes,
        default_currency=orm_supplier.default_currency,
        website=orm_supplier.website,
        sector=orm_supplier.sector,
        city=orm_supplier.city,
        district=orm_supplier.district,
    )


def sale_to_domain(orm_sale: ORMSale) -> domain.Sale:
    """Convert SQLAlchemy Sale model to domain Sale entity."""
    return domain.Sale(
        id=orm_sale.id,
        owner_id=orm_sale.owner_id,
        customer_id=orm_sale.customer_id,
        date=orm_sale.date,
        amount=_to_decimal(orm_sale.amount),
        currency=orm_sale.currency,
        created_at=orm_sale.created_at,
        description=orm_sale.description,
        items=line_items_from_json(orm_sale.items),
        invoice_type=orm_sale.invoice_type,
    )


def purchase_to_domain(orm_purchase: ORMPurchase) -> domain.Purchase:
    """Convert SQLAlchemy Purchase model to domain Purchase entity."""
    return domain.Purchase(
        id=orm_purchase.id,
        owner_id=orm_purchase.owner_id,
        supplier_id=orm_purchase.supplier_id,
        date=orm_purchase.date,
        amount=_to_decimal(orm_purchase.amount),
        currency=orm_purchase.currency,
        created_at=orm_purchase.created_at,
        description=orm_purchase.description,
        items=line_items_from_json(orm_purchase.items),
    )


def payment_to_domain(orm_payment: ORMPayment) -> domain.Payment:
    """Convert SQLAlchemy Payment model to domain Payment entity."""
    return domain.Payment(
        id=orm_payment.id,
        owner_id=orm_payment.owner_id,
        customer_id=orm_payment.customer_id,
        date=orm_payment.date,
        amount=_to_decimal(orm_payment.amount),
        currency=orm_payment.currency,
        method=orm_payment.method,
        created_at=orm_payment.created_at,
        description=orm_payment.description,
        reference_number=orm_payment.reference_number,
        check=_check_details(orm_payment),
    )


def payment_to_supplier_to_domain(
    orm_payment: ORMPaymentToSupplier,
) -> domain.PaymentToSupplier:
    """Convert SQLAlchemy PaymentToSupplier model to domain entity."""
    return domain.PaymentToSupplier(
        id=orm_payment.id,
        owner_id=orm_payment.owner_id,
        supplier_id=orm_payment.supplier_id,
        date=orm_payment.date,
        amount=_to_decimal(orm_payment.amount),
        currency=orm_payment.currency,
        method=orm_payment.method,
        created_at=orm_payment.created_at,
        description=orm_payment.description,
        reference_number=orm_payment.reference_number,
        check=_check_details(orm_payment),
    )
