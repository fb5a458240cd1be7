"""
Financial Profile Repository

Stores one financial profile per student in ``user_financial_profiles``,
keyed on ``user_id``. Writes are upserts.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from supabase import Client

from app.domain.models import FinancialProfile, FinancialProfileUpdate
from app.infrastructure.exceptions import DatabaseError


logger = logging.getLogger(__name__)


class FinancialProfileRepository:
    """Repository for student financial profiles."""

    TABLE = "user_financial_profiles"

    def __init__(self, client: Client):
        self._client = client

    async def get(self, user_id: str) -> Optional[FinancialProfile]:
        """
        Retrieve a student's profile.

        Returns:
            The stored profile, or None if the student has not saved one

        Raises:
            DatabaseError: If the query fails
        """
        try:
            result = self._client.table(self.TABLE).select("*").eq(
                "user_id", str(user_id)
            ).maybe_single().execute()
        except Exception as e:
            raise DatabaseError(
                f"Error retrieving financial profile: {str(e)}",
                operation="select",
                table=self.TABLE,
                original_error=e
            )

        if result is None or not result.data:
            return None
        return FinancialProfile(**result.data)

    async def upsert(self, user_id: str, data: FinancialProfileUpdate) -> FinancialProfile:
        """
        Create or replace a student's profile.

        Every field is written, so omitted fields are cleared.

        Raises:
            DatabaseError: If the write fails or returns no row
        """
        payload = {
            "user_id": str(user_id),
            **data.model_dump(),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        try:
            result = self._client.table(self.TABLE).upsert(
                payload, on_conflict="user_id"
            ).execute()
        except Exception as e:
            raise DatabaseError(
                f"Error saving financial profile: {str(e)}",
                operation="upsert",
                table=self.TABLE,
                original_error=e
            )

        if not result.data:
            raise DatabaseError(
                "Failed to save financial profile",
                operation="upsert",
                table=self.TABLE
            )

        logger.info(f"Financial profile saved for user {user_id}")
        return FinancialProfile(**result.data[0])
