"""
Base repository class for database access.

Provides a common abstraction layer for Supabase-backed stores.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all Supabase repositories.

    Subclasses own a single table, named by ``table_name``, and map
    rows to Pydantic models internally.
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        """Query builder for this repository's table."""
        return self._db.table(self.table_name)
