"""SQLAlchemy models for the ermay store.

Every table carries the owner id; all reads and writes are scoped by it.
Record dates are kept as the ISO-8601 strings they were entered with, and
amount/currency are nullable so that legacy rows survive a round trip.
"""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    JSON,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from ermay.domain.entities import AMOUNT_DIGITS, AMOUNT_PLACES

Base = declarative_base()


def _now() -> datetime:
    return datetime.now(UTC)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    tax_number = Column(String, nullable=True)
    tax_office = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    default_currency = Column(String(3), nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    sales = relationship("Sale", back_populates="customer", cascade="all, delete-orphan")
    payments = relationship("Payment", back_populates="customer", cascade="all, delete-orphan")


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    tax_number = Column(String, nullable=True)
    tax_office = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    default_currency = Column(String(3), nullable=True)
    website = Column(String, nullable=True)
    sector = Column(String, nullable=True)
    city = Column(String, nullable=True)
    district = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    purchases = relationship("Purchase", back_populates="supplier", cascade="all, delete-orphan")
    payments = relationship(
        "PaymentToSupplier", back_populates="supplier", cascade="all, delete-orphan"
    )


class Sale(Base):
    """Sale model."""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    date = Column(String, nullable=True)
    amount = Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=True)
    currency = Column(String(3), nullable=True)
    description = Column(String, nullable=True)
    items = Column(JSON, nullable=True)
    invoice_type = Column(String, default="normal", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    customer = relationship("Customer", back_populates="sales")


class Purchase(Base):
    """Purchase model."""

    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    date = Column(String, nullable=True)
    amount = Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=True)
    currency = Column(String(3), nullable=True)
    description = Column(String, nullable=True)
    items = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    supplier = relationship("Supplier", back_populates="purchases")


class Payment(Base):
    """Payment received from a customer."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    date = Column(String, nullable=True)
    amount = Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=True)
    currency = Column(String(3), nullable=True)
    method = Column(String, nullable=False)
    description = Column(String, nullable=True)
    reference_number = Column(String, nullable=True)
    check_serial_number = Column(String, nullable=True)
    check_due_date = Column(String, nullable=True)
    check_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    customer = relationship("Customer", back_populates="payments")


class PaymentToSupplier(Base):
    """Payment made to a supplier."""

    __tablename__ = "supplier_payments"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    date = Column(String, nullable=True)
    amount = Column(Numeric(AMOUNT_DIGITS, AMOUNT_PLACES), nullable=True)
    currency = Column(String(3), nullable=True)
    method = Column(String, nullable=False)
    description = Column(String, nullable=True)
    reference_number = Column(String, nullable=True)
    check_serial_number = Column(String, nullable=True)
    check_due_date = Column(String, nullable=True)
    check_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    supplier = relationship("Supplier", back_populates="payments")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
