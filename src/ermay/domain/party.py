"""Customer and supplier domain services."""

import logging
from typing import Any, Optional

from ermay.database.base import Database
from ermay.domain.entities import Customer as CustomerEntity, Supplier as SupplierEntity
from ermay.domain.errors import (
    ConflictError,
    NotFoundError,
    customer_not_found,
    party_delete_summary,
    supplier_not_found,
)
from ermay.domain.validation import validate_currency, validate_name

logger = logging.getLogger(__name__)


def _clean_details(details: dict[str, Any]) -> dict[str, Any]:
    """Drop empty values and validate the default currency."""
    cleaned = {key: value for key, value in details.items() if value not in (None, "")}
    if "default_currency" in cleaned:
        cleaned["default_currency"] = validate_currency(cleaned["default_currency"])
    return cleaned


def _ensure_unique_name(parties, name: str, kind: str, party_id: Optional[int] = None) -> None:
    # Check if a party with same name exists
    for party in parties:
        if party.id != party_id and party.name == name:
            raise ConflictError(f"{kind.capitalize()} with name '{name}' already exists")


class CustomerService:
    """Service for managing customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_customer(self, owner_id: str, name: str, **details: Optional[str]) -> int:
        """Create a new customer.

        Args:
            owner_id: Account owner
            name: Customer display name
            **details: Optional contact fields and default_currency

        Returns:
            Customer ID

        Raises:
            ValidationError: If the name is blank or the currency unsupported
            ConflictError: If the owner already has a party with that name
        """
        name = validate_name(name, "customer")
        _ensure_unique_name(self.db.list_customers(owner_id), name, "customer")
        return self.db.create_customer(owner_id, name, **_clean_details(details))

    def get_customer(self, owner_id: str, customer_id: int) -> Optional[CustomerEntity]:
        """Get customer by ID, or None if the owner has no such customer."""
        return self.db.get_customer(owner_id, customer_id)

    def list_customers(self, owner_id: str) -> list[CustomerEntity]:
        """List all customers of the owner."""
        return self.db.list_customers(owner_id)

    def update_customer(self, owner_id: str, customer_id: int, **changes: Any) -> None:
        """Update customer fields.

        Raises:
            NotFoundError: If the customer does not exist
            ValidationError: If a new name is blank or the currency unsupported
            ConflictError: If the new name is taken
        """
        if "name" in changes:
            changes["name"] = validate_name(changes["name"], "customer")
            _ensure_unique_name(
                self.db.list_customers(owner_id), changes["name"], "customer", customer_id
            )
        if changes.get("default_currency"):
            changes["default_currency"] = validate_currency(changes["default_currency"])
        self.db.update_customer(owner_id, customer_id, **changes)

    def delete_customer(self, owner_id: str, customer_id: int) -> None:
        """Delete a customer together with its sales and payments.

        Raises:
            NotFoundError: If the customer does not exist
        """
        if self.db.get_customer(owner_id, customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))

        sale_count = len(self.db.list_sales(owner_id, customer_id))
        payment_count = len(self.db.list_payments(owner_id, customer_id))
        self.db.delete_customer(owner_id, customer_id)
        logger.info(party_delete_summary("customer", customer_id, sale_count, payment_count))


class SupplierService:
    """Service for managing suppliers."""

    def __init__(self, db: Database):
        """Initialize supplier service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_supplier(self, owner_id: str, name: str, **details: Optional[str]) -> int:
        """Create a new supplier.

        Args:
            owner_id: Account owner
            name: Supplier display name
            **details: Optional contact fields, default_currency, website,
                sector, city and district

        Returns:
            Supplier ID

        Raises:
            ValidationError: If the name is blank or the currency unsupported
            ConflictError: If the owner already has a party with that name
        """
        name = validate_name(name, "supplier")
        _ensure_unique_name(self.db.list_suppliers(owner_id), name, "supplier")
        return self.db.create_supplier(owner_id, name, **_clean_details(details))

    def get_supplier(self, owner_id: str, supplier_id: int) -> Optional[SupplierEntity]:
        """Get supplier by ID, or None if the owner has no such supplier."""
        return self.db.get_supplier(owner_id, supplier_id)

    def list_suppliers(self, owner_id: str) -> list[SupplierEntity]:
        """List all suppliers of the owner."""
        return self.db.list_suppliers(owner_id)

    def update_supplier(self, owner_id: str, supplier_id: int, **changes: Any) -> None:
        """Update supplier fields.

        Raises:
            NotFoundError: If the supplier does not exist
            ValidationError: If a new name is blank or the currency unsupported
            ConflictError: If the new name is taken
        """
        if "name" in changes:
            changes["name"] = validate_name(changes["name"], "supplier")
            _ensure_unique_name(
                self.db.list_suppliers(owner_id), changes["name"], "supplier", supplier_id
            )
        if changes.get("default_currency"):
            changes["default_currency"] = validate_currency(changes["default_currency"])
        self.db.update_supplier(owner_id, supplier_id, **changes)

    def delete_supplier(self, owner_id: str, supplier_id: int) -> None:
        """Delete a supplier together with its purchases and payments.

        Raises:
            NotFoundError: If the supplier does not exist
        """
        if self.db.get_supplier(owner_id, supplier_id) is None:
            raise NotFoundError(supplier_not_found(supplier_id))

        purchase_count = len(self.db.list_purchases(owner_id, supplier_id))
        payment_count = len(self.db.list_payments_to_suppliers(owner_id, supplier_id))
        self.db.delete_supplier(owner_id, supplier_id)
        logger.info(party_delete_summary("supplier", supplier_id, purchase_count, payment_count))
