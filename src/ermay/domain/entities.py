"""Domain model entities for ermay.

These are pure data classes representing business concepts, independent of
the storage schema. Records read back from the store are trusted as-is, so
amount, currency and date may be missing or malformed on old data; the ledger
aggregator tolerates that instead of the entities rejecting it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class Currency(str, Enum):
    """Supported currencies."""

    TRY = "TRY"
    USD = "USD"
    EUR = "EUR"


SUPPORTED_CURRENCIES = tuple(c.value for c in Currency)

# Stored amounts: at most AMOUNT_DIGITS digits, AMOUNT_PLACES of them decimals.
AMOUNT_DIGITS = 14
AMOUNT_PLACES = 2


class PaymentMethod(str, Enum):
    """How a payment was made."""

    CASH = "nakit"
    CREDIT_CARD = "krediKarti"
    TRANSFER = "havale"
    CHECK = "cek"
    OTHER = "diger"


class TransactionType(str, Enum):
    """Discriminator for records shown in a party's transaction feed."""

    SALE = "sale"
    PAYMENT = "payment"
    PURCHASE = "purchase"
    PAYMENT_TO_SUPPLIER = "paymentToSupplier"


class InvoiceType(str, Enum):
    """Whether a sale was invoiced."""

    NORMAL = "normal"
    INVOICE = "invoice"


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: int
    owner_id: str
    name: str
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_number: Optional[str] = None
    tax_office: Optional[str] = None
    notes: Optional[str] = None
    default_currency: Optional[str] = None


@dataclass(frozen=True)
class Supplier:
    """Supplier domain entity."""

    id: int
    owner_id: str
    name: str
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_number: Optional[str] = None
    tax_office: Optional[str] = None
    notes: Optional[str] = None
    default_currency: Optional[str] = None
    website: Optional[str] = None
    sector: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None


Party = Union[Customer, Supplier]


@dataclass(frozen=True)
class LineItem:
    """Invoice line of a sale or purchase."""

    product_name: str
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None
    unit_price: Optional[Decimal] = None
    tax_rate: Optional[Decimal] = None


@dataclass(frozen=True)
class CheckDetails:
    """Check fields, present only on payments made by check."""

    serial_number: Optional[str] = None
    due_date: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class Sale:
    """Sale to a customer. Increases what the customer owes."""

    id: int
    owner_id: str
    customer_id: int
    date: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    created_at: datetime
    description: Optional[str] = None
    items: tuple[LineItem, ...] = ()
    invoice_type: str = InvoiceType.NORMAL.value


@dataclass(frozen=True)
class Purchase:
    """Purchase from a supplier. Increases what we owe the supplier."""

    id: int
    owner_id: str
    supplier_id: int
    date: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    created_at: datetime
    description: Optional[str] = None
    items: tuple[LineItem, ...] = ()


@dataclass(frozen=True)
class Payment:
    """Payment received from a customer."""

    id: int
    owner_id: str
    customer_id: int
    date: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    method: str
    created_at: datetime
    description: Optional[str] = None
    reference_number: Optional[str] = None
    check: Optional[CheckDetails] = None


@dataclass(frozen=True)
class PaymentToSupplier:
    """Payment made to a supplier."""

    id: int
    owner_id: str
    supplier_id: int
    date: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    method: str
    created_at: datetime
    description: Optional[str] = None
    reference_number: Optional[str] = None
    check: Optional[CheckDetails] = None


DebitRecord = Union[Sale, Purchase]
CreditRecord = Union[Payment, PaymentToSupplier]
LedgerRecord = Union[Sale, Purchase, Payment, PaymentToSupplier]

# Currency code -> signed running total for one party.
BalanceMap = dict[str, Decimal]


@dataclass(frozen=True)
class UnifiedTransaction:
    """A debit or credit record tagged with its transaction type.

    Display-only projection used to render a running statement.
    """

    record: LedgerRecord
    transaction_type: str

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def date(self) -> Optional[str]:
        return self.record.date

    @property
    def amount(self) -> Optional[Decimal]:
        return self.record.amount

    @property
    def currency(self) -> Optional[str]:
        return self.record.currency

    @property
    def description(self) -> Optional[str]:
        return self.record.description

    @property
    def method(self) -> Optional[str]:
        return getattr(self.record, "method", None)


@dataclass(frozen=True)
class PartyLedger:
    """Balances and transaction feed of a single customer or supplier."""

    party: Party
    balances: BalanceMap
    transactions: tuple[UnifiedTransaction, ...] = ()


@dataclass(frozen=True)
class PartyBalance:
    """Outstanding per-currency amounts for one party in a report."""

    party_id: int
    party_name: str
    amounts: BalanceMap = field(default_factory=dict)


@dataclass(frozen=True)
class ReceivablesPayablesReport:
    """What customers owe us and what we owe suppliers."""

    receivables: tuple[PartyBalance, ...]
    payables: tuple[PartyBalance, ...]
    receivables_total: BalanceMap
    payables_total: BalanceMap
    net_position: BalanceMap
