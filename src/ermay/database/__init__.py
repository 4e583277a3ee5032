"""Database layer for ermay application."""

from ermay.database.base import Database
from ermay.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
