"""Display formatting in Turkish conventions.

Balances are kept unrounded; rounding to two decimals happens only here.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from ermay.domain.ledger import currency_code, finite_amount, parse_record_date

CURRENCY_SYMBOLS = {
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
}

INVALID_DATE_LABEL = "Geçersiz Tarih"

TRANSACTION_LABELS = {
    "sale": "Satış",
    "payment": "Ödeme",
    "purchase": "Alış",
    "paymentToSupplier": "Ödeme",
}

PAYMENT_METHOD_LABELS = {
    "nakit": "Nakit",
    "krediKarti": "Kredi Kartı",
    "havale": "Havale/EFT",
    "cek": "Çek",
    "diger": "Diğer",
}


def format_number(amount: Any) -> str:
    """Format a number with Turkish grouping and two decimals ("1.234,56").

    Any magnitude is formatted in full. Non-finite values show as zero.
    """
    value = finite_amount(amount)
    if value is None:
        value = Decimal(0)
    with localcontext() as context:
        # room for every integer digit plus the two decimals
        context.prec = max(context.prec, value.adjusted() + 3)
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        text = f"{abs(value):,.2f}"
    text = text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return f"-{text}" if value < 0 else text


def format_money(amount: Any, currency: Any) -> str:
    """Format an amount with its currency symbol ("₺1.234,56").

    Codes outside the supported set fall back to "1.234,56 GBP".
    Non-finite amounts are shown as zero.
    """
    number = format_number(amount)
    code = currency_code(currency) or ""
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{number} {code}".rstrip()
    if number.startswith("-"):
        return f"-{symbol}{number[1:]}"
    return f"{symbol}{number}"


def format_record_date(value: Any) -> str:
    """Format a record date as dd.mm.yyyy, or a placeholder if it is invalid."""
    parsed = parse_record_date(value)
    if parsed is None:
        return INVALID_DATE_LABEL
    return parsed.strftime("%d.%m.%Y")


def transaction_label(transaction_type: Any) -> str:
    """Turkish label for a transaction type."""
    key = getattr(transaction_type, "value", transaction_type) or ""
    return TRANSACTION_LABELS.get(key, key)


def payment_method_label(method: Any) -> str:
    """Turkish label for a payment method; unknown methods are shown as-is."""
    if not method:
        return ""
    key = getattr(method, "value", method)
    return PAYMENT_METHOD_LABELS.get(key, key)
