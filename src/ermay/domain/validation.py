"""Validation of values written to the store.

Reads are lenient (see ermay.domain.ledger); writes are not.
"""

from decimal import Decimal
from typing import Any, Optional

from ermay.domain.entities import (
    AMOUNT_DIGITS,
    AMOUNT_PLACES,
    SUPPORTED_CURRENCIES,
    PaymentMethod,
)
from ermay.domain.errors import ValidationError, unsupported_currency
from ermay.domain.ledger import currency_code, finite_amount, parse_record_date

AMOUNT_STEP = Decimal(1).scaleb(-AMOUNT_PLACES)
MAX_AMOUNT = Decimal(10) ** (AMOUNT_DIGITS - AMOUNT_PLACES)


def validate_name(name: Optional[str], kind: str) -> str:
    """Return the stripped name or raise if it is blank."""
    if name is None or not name.strip():
        raise ValidationError(f"{kind.capitalize()} name is required")
    return name.strip()


def validate_currency(currency: Any) -> str:
    """Return the currency code if it is supported."""
    code = currency_code(currency)
    if code is None:
        raise ValidationError("Currency is required")
    code = str(code).upper()
    if code not in SUPPORTED_CURRENCIES:
        raise ValidationError(unsupported_currency(code))
    return code


def validate_amount(amount: Any) -> Decimal:
    """Return the amount if it is a positive finite number the store can hold.

    The store keeps AMOUNT_PLACES decimals and AMOUNT_DIGITS digits in
    total, so sub-cent amounts and amounts beyond that range are rejected
    instead of being rounded on write.
    """
    value = finite_amount(amount)
    if value is None:
        raise ValidationError(f"Amount must be a finite number, got {amount!r}")
    if value <= 0:
        raise ValidationError(f"Amount must be positive, got {value}")
    if value >= MAX_AMOUNT:
        raise ValidationError(f"Amount {value} is too large, must be below {MAX_AMOUNT}")
    if value != value.quantize(AMOUNT_STEP):
        raise ValidationError(
            f"Amount {value} has more than {AMOUNT_PLACES} decimal places"
        )
    return value


def validate_record_date(value: Any) -> str:
    """Return the date as an ISO-8601 string if it parses."""
    if parse_record_date(value) is None:
        raise ValidationError(f"Invalid date {value!r}, expected ISO-8601 (YYYY-MM-DD)")
    if isinstance(value, str):
        return value.strip()
    return value.isoformat()


def validate_payment_method(method: Any) -> str:
    """Return the payment method value if it is known."""
    try:
        return PaymentMethod(method).value
    except ValueError:
        known = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(f"Unknown payment method '{method}'. Known methods: {known}")
