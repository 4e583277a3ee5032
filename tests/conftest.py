"""Shared pytest fixtures for ermay tests."""

import tempfile
import os

import pytest

from ermay.database.factories import create_sqlite_database
from ermay.domain.party import CustomerService, SupplierService
from ermay.domain.records import RecordService
from ermay.domain.report import ReportService
from ermay.domain.statement import LedgerService

from builders import OWNER


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def customer_service(temp_db):
    """Create a CustomerService with a temporary database."""
    return CustomerService(temp_db)


@pytest.fixture
def supplier_service(temp_db):
    """Create a SupplierService with a temporary database."""
    return SupplierService(temp_db)


@pytest.fixture
def record_service(temp_db):
    """Create a RecordService with a temporary database."""
    return RecordService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def sample_customer(customer_service):
    """Create a sample customer for testing."""
    customer_id = customer_service.create_customer(OWNER, "Yılmaz Ticaret", phone="0212 555 00 00")
    return customer_service.get_customer(OWNER, customer_id)


@pytest.fixture
def sample_supplier(supplier_service):
    """Create a sample supplier for testing."""
    supplier_id = supplier_service.create_supplier(OWNER, "Demir Metal", city="İzmir")
    return supplier_service.get_supplier(OWNER, supplier_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Common leading arguments for CLI invocations."""
    return ["--db-path", temp_db.database_path, "--owner", OWNER]
