"""Database layer for the wallet ledger."""

from wallet.database.base import Database
from wallet.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
