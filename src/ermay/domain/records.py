"""Sale, payment and purchase domain service."""

from typing import Any, Optional

from ermay.database.base import Database
from ermay.domain.entities import (
    CheckDetails,
    InvoiceType,
    LineItem,
    Payment,
    PaymentMethod,
    PaymentToSupplier,
    Purchase,
    Sale,
)
from ermay.domain.errors import (
    NotFoundError,
    ValidationError,
    customer_not_found,
    record_not_found,
    supplier_not_found,
)
from ermay.domain.validation import (
    validate_amount,
    validate_currency,
    validate_payment_method,
    validate_record_date,
)

DEFAULT_SALE_DESCRIPTION = "Genel Satış"


class RecordService:
    """Service for writing and reading a party's debit and credit records."""

    def __init__(self, db: Database):
        """Initialize record service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_customer(self, owner_id: str, customer_id: int) -> None:
        if self.db.get_customer(owner_id, customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))

    def _require_supplier(self, owner_id: str, supplier_id: int) -> None:
        if self.db.get_supplier(owner_id, supplier_id) is None:
            raise NotFoundError(supplier_not_found(supplier_id))

    @staticmethod
    def _payment_fields(method: Any, check: Optional[CheckDetails]) -> str:
        method = validate_payment_method(method)
        if check is not None and method != PaymentMethod.CHECK.value:
            raise ValidationError("Check details are only allowed for check payments")
        if check is not None and check.due_date is not None:
            validate_record_date(check.due_date)
        return method

    @staticmethod
    def _invoice_type(invoice_type: Any) -> str:
        try:
            return InvoiceType(invoice_type).value
        except ValueError:
            raise ValidationError(f"Unknown invoice type '{invoice_type}'")

    @staticmethod
    def _record_changes(date: Any, amount: Any, currency: Any) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if date is not None:
            changes["date"] = validate_record_date(date)
        if amount is not None:
            changes["amount"] = validate_amount(amount)
        if currency is not None:
            changes["currency"] = validate_currency(currency)
        return changes

    def _payment_changes(
        self, current: Payment | PaymentToSupplier, method: Any, check: Optional[CheckDetails]
    ) -> dict[str, Any]:
        """Resolve method and check details against the stored payment.

        Moving away from the check method drops the stored check details.
        """
        if method is None and check is None:
            return {}
        method = validate_payment_method(current.method if method is None else method)
        if check is None and method == PaymentMethod.CHECK.value:
            check = current.check
        return {"method": self._payment_fields(method, check), "check": check}

    # Sales
    def add_sale(
        self,
        owner_id: str,
        customer_id: int,
        date: Any,
        amount: Any,
        currency: Any,
        description: Optional[str] = None,
        items: tuple[LineItem, ...] = (),
        invoice_type: str = InvoiceType.NORMAL.value,
    ) -> int:
        """Record a sale to a customer.

        Args:
            owner_id: Account owner
            customer_id: Customer the sale belongs to
            date: ISO-8601 date string or date
            amount: Positive amount
            currency: TRY, USD or EUR
            description: Free text; defaults to "Genel Satış"
            items: Optional invoice lines
            invoice_type: "normal" or "invoice"

        Returns:
            Sale ID

        Raises:
            NotFoundError: If the customer does not exist
            ValidationError: If amount, currency, date or invoice type is invalid
        """
        self._require_customer(owner_id, customer_id)
        invoice_type = self._invoice_type(invoice_type)
        return self.db.create_sale(
            owner_id,
            customer_id,
            date=validate_record_date(date),
            amount=validate_amount(amount),
            currency=validate_currency(currency),
            description=(description or "").strip() or DEFAULT_SALE_DESCRIPTION,
            items=tuple(items),
            invoice_type=invoice_type,
        )

    def get_sale(self, owner_id: str, sale_id: int) -> Optional[Sale]:
        """Get sale by ID."""
        return self.db.get_sale(owner_id, sale_id)

    def update_sale(
        self,
        owner_id: str,
        sale_id: int,
        *,
        date: Any = None,
        amount: Any = None,
        currency: Any = None,
        description: Optional[str] = None,
        items: Optional[tuple[LineItem, ...]] = None,
        invoice_type: Optional[str] = None,
    ) -> Sale:
        """Change fields of a sale. Fields left as None keep their value.

        Returns:
            The updated sale

        Raises:
            NotFoundError: If the sale does not exist
            ValidationError: If a new value is invalid
        """
        if self.db.get_sale(owner_id, sale_id) is None:
            raise NotFoundError(record_not_found("sale", sale_id))
        changes = self._record_changes(date, amount, currency)
        if description is not None:
            changes["description"] = description.strip() or DEFAULT_SALE_DESCRIPTION
        if items is not None:
            changes["items"] = tuple(items)
        if invoice_type is not None:
            changes["invoice_type"] = self._invoice_type(invoice_type)
        if changes:
            self.db.update_sale(owner_id, sale_id, **changes)
        return self.db.get_sale(owner_id, sale_id)

    def delete_sale(self, owner_id: str, sale_id: int) -> None:
        """Delete a sale."""
        self.db.delete_sale(owner_id, sale_id)

    # Customer payments
    def add_payment(
        self,
        owner_id: str,
        customer_id: int,
        date: Any,
        amount: Any,
        currency: Any,
        method: Any,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> int:
        """Record a payment received from a customer.

        Raises:
            NotFoundError: If the customer does not exist
            ValidationError: If a field is invalid, or check details are
                given for a method other than check
        """
        self._require_customer(owner_id, customer_id)
        return self.db.create_payment(
            owner_id,
            customer_id,
            date=validate_record_date(date),
            amount=validate_amount(amount),
            currency=validate_currency(currency),
            method=self._payment_fields(method, check),
            description=description,
            reference_number=reference_number,
            check=check,
        )

    def get_payment(self, owner_id: str, payment_id: int) -> Optional[Payment]:
        """Get customer payment by ID."""
        return self.db.get_payment(owner_id, payment_id)

    def update_payment(
        self,
        owner_id: str,
        payment_id: int,
        *,
        date: Any = None,
        amount: Any = None,
        currency: Any = None,
        method: Any = None,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> Payment:
        """Change fields of a customer payment. Fields left as None keep their value.

        Raises:
            NotFoundError: If the payment does not exist
            ValidationError: If a new value is invalid
        """
        payment = self.db.get_payment(owner_id, payment_id)
        if payment is None:
            raise NotFoundError(record_not_found("payment", payment_id))
        changes = self._record_changes(date, amount, currency)
        changes.update(self._payment_changes(payment, method, check))
        if description is not None:
            changes["description"] = description
        if reference_number is not None:
            changes["reference_number"] = reference_number
        if changes:
            self.db.update_payment(owner_id, payment_id, **changes)
        return self.db.get_payment(owner_id, payment_id)

    def delete_payment(self, owner_id: str, payment_id: int) -> None:
        """Delete a customer payment."""
        self.db.delete_payment(owner_id, payment_id)

    # Purchases
    def add_purchase(
        self,
        owner_id: str,
        supplier_id: int,
        date: Any,
        amount: Any,
        currency: Any,
        description: Optional[str] = None,
        items: tuple[LineItem, ...] = (),
    ) -> int:
        """Record a purchase from a supplier.

        Raises:
            NotFoundError: If the supplier does not exist
            ValidationError: If amount, currency or date is invalid
        """
        self._require_supplier(owner_id, supplier_id)
        return self.db.create_purchase(
            owner_id,
            supplier_id,
            date=validate_record_date(date),
            amount=validate_amount(amount),
            currency=validate_currency(currency),
            description=description,
            items=tuple(items),
        )

    def get_purchase(self, owner_id: str, purchase_id: int) -> Optional[Purchase]:
        """Get purchase by ID."""
        return self.db.get_purchase(owner_id, purchase_id)

    def update_purchase(
        self,
        owner_id: str,
        purchase_id: int,
        *,
        date: Any = None,
        amount: Any = None,
        currency: Any = None,
        description: Optional[str] = None,
        items: Optional[tuple[LineItem, ...]] = None,
    ) -> Purchase:
        """Change fields of a purchase. Fields left as None keep their value."""
        if self.db.get_purchase(owner_id, purchase_id) is None:
            raise NotFoundError(record_not_found("purchase", purchase_id))
        changes = self._record_changes(date, amount, currency)
        if description is not None:
            changes["description"] = description
        if items is not None:
            changes["items"] = tuple(items)
        if changes:
            self.db.update_purchase(owner_id, purchase_id, **changes)
        return self.db.get_purchase(owner_id, purchase_id)

    def delete_purchase(self, owner_id: str, purchase_id: int) -> None:
        """Delete a purchase."""
        self.db.delete_purchase(owner_id, purchase_id)

    # Payments to suppliers
    def add_payment_to_supplier(
        self,
        owner_id: str,
        supplier_id: int,
        date: Any,
        amount: Any,
        currency: Any,
        method: Any,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> int:
        """Record a payment made to a supplier.

        Raises:
            NotFoundError: If the supplier does not exist
            ValidationError: If a field is invalid, or check details are
                given for a method other than check
        """
        self._require_supplier(owner_id, supplier_id)
        return self.db.create_payment_to_supplier(
            owner_id,
            supplier_id,
            date=validate_record_date(date),
            amount=validate_amount(amount),
            currency=validate_currency(currency),
            method=self._payment_fields(method, check),
            description=description,
            reference_number=reference_number,
            check=check,
        )

    def get_payment_to_supplier(self, owner_id: str, payment_id: int) -> Optional[PaymentToSupplier]:
        """Get payment to supplier by ID."""
        return self.db.get_payment_to_supplier(owner_id, payment_id)

    def update_payment_to_supplier(
        self,
        owner_id: str,
        payment_id: int,
        *,
        date: Any = None,
        amount: Any = None,
        currency: Any = None,
        method: Any = None,
        description: Optional[str] = None,
        reference_number: Optional[str] = None,
        check: Optional[CheckDetails] = None,
    ) -> PaymentToSupplier:
        """Change fields of a payment to a supplier.

        Same rules as update_payment.
        """
        payment = self.db.get_payment_to_supplier(owner_id, payment_id)
        if payment is None:
            raise NotFoundError(record_not_found("payment to supplier", payment_id))
        changes = self._record_changes(date, amount, currency)
        changes.update(self._payment_changes(payment, method, check))
        if description is not None:
            changes["description"] = description
        if reference_number is not None:
            changes["reference_number"] = reference_number
        if changes:
            self.db.update_payment_to_supplier(owner_id, payment_id, **changes)
        return self.db.get_payment_to_supplier(owner_id, payment_id)

    def delete_payment_to_supplier(self, owner_id: str, payment_id: int) -> None:
        """Delete a payment to a supplier."""
        self.db.delete_payment_to_supplier(owner_id, payment_id)
