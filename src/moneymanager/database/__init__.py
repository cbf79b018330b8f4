"""Database layer for moneymanager application."""

from moneymanager.database.base import Database
from moneymanager.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
