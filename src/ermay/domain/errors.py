"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for this owner."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StorageError(RuntimeError):
    """The external store could not serve a request."""


def customer_not_found(customer_id: int) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def supplier_not_found(supplier_id: int) -> str:
    """Return message for missing supplier."""
    return f"Supplier {supplier_id} not found"


def record_not_found(kind: str, record_id: int) -> str:
    """Return message for a missing sale, payment or purchase."""
    return f"{kind.capitalize()} {record_id} not found"


def unsupported_currency(currency: str) -> str:
    """Return message for a currency outside the supported set."""
    return f"Unsupported currency '{currency}'. Supported currencies: TRY, USD, EUR"


def party_delete_summary(kind: str, party_id: int, debit_count: int, credit_count: int) -> str:
    """Return message describing records removed together with a party."""
    parts = []
    if debit_count > 0:
        parts.append(f"{debit_count} debit record{'s' if debit_count != 1 else ''}")
    if credit_count > 0:
        parts.append(f"{credit_count} payment{'s' if credit_count != 1 else ''}")
    if not parts:
        return f"Deleted {kind} {party_id}"
    return f"Deleted {kind} {party_id} with {', '.join(parts)}"
