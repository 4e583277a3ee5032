"""Utility for resolving customer and supplier names to IDs."""

from ermay.domain.errors import NotFoundError
from ermay.domain.party import CustomerService, SupplierService


def _resolve(owner_id: str, party: str | int, get, list_all, kind: str) -> int:
    # If it's already an integer, use it as ID
    if isinstance(party, int):
        if get(owner_id, party) is None:
            raise NotFoundError(f"{kind.capitalize()} ID {party} not found")
        return party

    # Try to parse as integer (handles string IDs like "1")
    try:
        party_id = int(party)
    except (ValueError, TypeError):
        party_id = None

    if party_id is not None:
        if get(owner_id, party_id) is None:
            raise NotFoundError(f"{kind.capitalize()} ID {party_id} not found")
        return party_id

    # Try to find by name
    for candidate in list_all(owner_id):
        if candidate.name == party:
            return candidate.id

    raise NotFoundError(f"{kind.capitalize()} '{party}' not found")


def resolve_customer(service: CustomerService, owner_id: str, customer: str | int) -> int:
    """Resolve customer name or ID to customer ID.

    Args:
        service: CustomerService instance
        owner_id: Account owner
        customer: Customer name or ID (int or string representation of int)

    Returns:
        Customer ID

    Raises:
        NotFoundError: If the customer is not found
    """
    return _resolve(owner_id, customer, service.get_customer, service.list_customers, "customer")


def resolve_supplier(service: SupplierService, owner_id: str, supplier: str | int) -> int:
    """Resolve supplier name or ID to supplier ID.

    Raises:
        NotFoundError: If the supplier is not found
    """
    return _resolve(owner_id, supplier, service.get_supplier, service.list_suppliers, "supplier")
