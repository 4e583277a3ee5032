"""Abstract database interface.

Every operation takes the owner id explicitly; implementations must never
return or touch rows belonging to another owner.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ermay.domain.entities import (
    CheckDetails,
    Customer,
    LineItem,
    Payment,
    PaymentToSupplier,
    Purchase,
    Sale,
    Supplier,
)


class Database(ABC):
    """Abstract owner-scoped store for ermay."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Customer operations
    @abstractmethod
    def create_customer(self, owner_id: str, name: str, **details: Optional[str]) -> int:
        """Create a customer. Returns customer ID.

        details may hold email, phone, address, tax_number, tax_office,
        notes and default_currency.
        """
        pass

    @abstractmethod
    def get_customer(self, owner_id: str, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def list_customers(self, owner_id: str) -> list[Customer]:
        """List all customers of the owner, ordered by name."""
        pass

    @abstractmethod
    def update_customer(self, owner_id: str, customer_id: int, **changes: Any) -> None:
        """Update customer fields."""
        pass

    @abstractmethod
    def delete_customer(self, owner_id: str, customer_id: int) -> None:
        """Delete a customer together with its sales and payments."""
        pass

    # Supplier operations
    @abstractmethod
    def create_supplier(self, owner_id: str, name: str, **details: Optional[str]) -> int:
        """Create a supplier. Returns supplier ID.

        details may hold the customer detail fields plus website, sector,
        city and district.
        """
        pass

    @abstractmethod
    def get_supplier(self, owner_id: str, supplier_id: int) -> Optional[Supplier]:
        """Get supplier by ID."""
        pass

    @abstractmethod
    def list_suppliers(self, owner_id: str) -> list[Supplier]:
        """List all suppliers of the owner, ordered by name."""
        pass

    @abstractmethod
    def update_supplier(self, owner_id: str, supplier_id: int, **changes: Any) -> None:
        """Update supplier fields."""
        pass

    @abstractmethod
    def delete_supplier(self, owner_id: str, supplier_id: int) -> None:
        """Delete a supplier together with its purchases and payments."""
        pass

    # Sale operations
    @abstractmethod
    def create_sale(
        self,
        owner_id: str,
        customer_id: int,
        date: str,
        amount: Decimal,
        currency: str,
        description: Optional[str] = None,
        items: tuple[LineItem, ...] = (),
        invoice_type: str = "normal",
    ) -> int:
        """Create a sale. Returns sale ID."""
        pass

    @abstractmethod
    def get_sale(self, owner_id: str, sale_id: int) -> Optional[Sale]:
        """Get sale by ID."""
        pass

    @abstractmethod
    def list_sales(self, owner_id: str, customer_id: Optional[int] = None) -> list[Sale]:
        """List sales, optionally for one customer."""
        pass

    @abstractmethod
    def update_sale(self, owner_id: str, sale_id: int, **changes: Any) -> None:
        """Update sale fields.

        changes may hold date, amount, currency, description, items and invoice_type.
        """
        pass

    @abstractmethod
    def delete_sale(self, owner_id: str, sale_id: int) -> None:
        """Delete a sale."""
        pass

    # Payment operations
    @abstractmethod
    def create_payment(
        self,
        owner_id: str,
        customer_id: int,
        date: str,
        amount: Decimal,
        currency: str,
        method: str,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> int:
        """Create a customer payment. Returns payment ID."""
        pass

    @abstractmethod
    def get_payment(self, owner_id: str, payment_id: int) -> Optional[Payment]:
        """Get customer payment by ID."""
        pass

    @abstractmethod
    def list_payments(self, owner_id: str, customer_id: Optional[int] = None) -> list[Payment]:
        """List customer payments, optionally for one customer."""
        pass

    @abstractmethod
    def update_payment(self, owner_id: str, payment_id: int, **changes: Any) -> None:
        """Update customer payment fields.

        changes may hold date, amount, currency, description, method,
        reference_number and check.
        """
        pass

    @abstractmethod
    def delete_payment(self, owner_id: str, payment_id: int) -> None:
        """Delete a customer payment."""
        pass

    # Purchase operations
    @abstractmethod
    def create_purchase(
        self,
        owner_id: str,
        supplier_id: int,
        date: str,
        amount: Decimal,
        currency: str,
        description: Optional[str] = None,
        items: tuple[LineItem, ...] = (),
    ) -> int:
        """Create a purchase. Returns purchase ID."""
        pass

    @abstractmethod
    def get_purchase(self, owner_id: str, purchase_id: int) -> Optional[Purchase]:
        """Get purchase by ID."""
        pass

    @abstractmethod
    def list_purchases(self, owner_id: str, supplier_id: Optional[int] = None) -> list[Purchase]:
        """List purchases, optionally for one supplier."""
        pass

    @abstractmethod
    def update_purchase(self, owner_id: str, purchase_id: int, **changes: Any) -> None:
        """Update purchase fields.

        changes may hold date, amount, currency, description and items.
        """
        pass

    @abstractmethod
    def delete_purchase(self, owner_id: str, purchase_id: int) -> None:
        """Delete a purchase."""
        pass

    # Payment to supplier operations
    @abstractmethod
    def create_payment_to_supplier(
        self,
        owner_id: str,
        supplier_id: int,
        date: str,
        amount: Decimal,
        currency: str,
        method: str,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> int:
        """Create a payment to a supplier. Returns payment ID."""
        pass

    @abstractmethod
    def get_payment_to_supplier(
        self, owner_id: str, payment_id: int
    ) -> Optional[PaymentToSupplier]:
        """Get payment to supplier by ID."""
        pass

    @abstractmethod
    def list_payments_to_suppliers(
        self, owner_id: str, supplier_id: Optional[int] = None
    ) -> list[PaymentToSupplier]:
        """List payments to suppliers, optionally for one supplier."""
        pass

    @abstractmethod
    def update_payment_to_supplier(self, owner_id: str, payment_id: int, **changes: Any) -> None:
        """Update payment to supplier fields.

        changes may hold date, amount, currency, description, method,
        reference_number and check.
        """
        pass

    @abstractmethod
    def delete_payment_to_supplier(self, owner_id: str, payment_id: int) -> None:
        """Delete a payment to a supplier."""
        pass
