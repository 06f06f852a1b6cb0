"""Database layer for receipt-points application."""

from receipt_points.database.base import Database
from receipt_points.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
