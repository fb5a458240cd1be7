"""
University Repository

Read-only access to the ``universities`` table through the Supabase client.
Rows are returned as plain dictionaries; the domain layer types them.
"""

import logging
from typing import Any, Dict, List, Sequence

from supabase import Client

from app.infrastructure.exceptions import DatabaseError, NotFoundError


logger = logging.getLogger(__name__)


class UniversityRepository:
    """Repository for university catalog rows."""

    TABLE = "universities"

    def __init__(self, client: Client):
        self._client = client

    async def get_all(self) -> List[Dict[str, Any]]:
        """
        Fetch the full catalog ordered by name.

        Raises:
            DatabaseError: If the query fails
        """
        try:
            result = self._client.table(self.TABLE).select("*").order("name").execute()
            rows = list(result.data or [])
            logger.debug(f"[CATALOG] Loaded {len(rows)} universities")
            return rows
        except Exception as e:
            raise DatabaseError(
                f"Error fetching universities: {str(e)}",
                operation="select",
                table=self.TABLE,
                original_error=e
            )

    async def get_by_id(self, university_id: str) -> Dict[str, Any]:
        """
        Fetch one university.

        Raises:
            NotFoundError: If no university has this id
            DatabaseError: If the query fails
        """
        try:
            result = self._client.table(self.TABLE).select("*").eq(
                "id", university_id
            ).maybe_single().execute()

            if result is None or not result.data:
                raise NotFoundError(
                    f"University {university_id} not found",
                    operation="select",
                    table=self.TABLE
                )

            return result.data

        except NotFoundError:
            raise
        except Exception as e:
            raise DatabaseError(
                f"Error retrieving university: {str(e)}",
                operation="select",
                table=self.TABLE,
                original_error=e
            )

    async def get_by_ids(self, university_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Fetch several universities, returned in the order requested.

        Raises:
            NotFoundError: If any id does not exist
            DatabaseError: If the query fails
        """
        if not university_ids:
            return []

        try:
            result = self._client.table(self.TABLE).select("*").in_(
                "id", list(dict.fromkeys(university_ids))
            ).execute()
            rows = result.data or []
        except Exception as e:
            raise DatabaseError(
                f"Error fetching universities: {str(e)}",
                operation="select",
                table=self.TABLE,
                original_error=e
            )

        by_id = {str(row.get("id")): row for row in rows}
        missing = [uid for uid in university_ids if str(uid) not in by_id]
        if missing:
            raise NotFoundError(
                f"Universities not found: {', '.join(missing)}",
                operation="select",
                table=self.TABLE
            )

        return [by_id[str(uid)] for uid in university_ids]

