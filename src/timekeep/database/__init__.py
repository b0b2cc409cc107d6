"""Database layer for timekeep application."""

from timekeep.database.base import Database
from timekeep.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
