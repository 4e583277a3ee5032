"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from ermay.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV = "ERMAY_DB_PATH"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Return the SQLite file the ledger lives in.

    The argument wins, then ERMAY_DB_PATH, then ~/.ermay/ermay.db. A
    leading "~" is expanded and missing parent directories are created.
    """
    raw = database_path or os.environ.get(DB_PATH_ENV)
    path = Path(raw).expanduser() if raw else Path.home() / ".ermay" / "ermay.db"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Using ledger store %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
