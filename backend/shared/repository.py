"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating store failures into the
application's exception taxonomy.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DuplicateKeyError, StoreError


T = TypeVar("T")

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Error translation via self._execute
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            table = "users"

            def get_by_id(self, user_id: str) -> Optional[User]:
                result = self._execute(
                    self._db.table(self.table).select("*").eq("id", user_id)
                )
                if not result.data:
                    return None
                return self._map_to_user(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query builder.

        Raises:
            DuplicateKeyError: The write hit a unique index.
            StoreError: Any other store or transport failure.
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateKeyError(self.table) from e
            logger.error("Store rejected query on %s: %s", self.table, e.message)
            raise StoreError(
                f"Store query failed on table '{self.table}'",
                details={"table": self.table},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Store unreachable while querying %s: %s", self.table, e)
            raise StoreError(
                "Store is unreachable",
                details={"table": self.table},
            ) from e
