"""
Supabase Personal Record Repository Implementation.

This module implements the PersonalRecordRepository protocol using Supabase.
`replace_all` goes through the `replace_personal_records` database function
so that the delete and the insert commit in one transaction.
"""
from typing import List
import logging

from supabase import Client

from domain.models import PersonalRecord

logger = logging.getLogger(__name__)

TABLE = "personal_records"
REPLACE_RPC = "replace_personal_records"


class SupabasePersonalRecordRepository:
    """Supabase implementation of PersonalRecordRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def fetch_all(self) -> List[PersonalRecord]:
        result = self._client.table(TABLE).select("*").order("achieved_at").execute()
        return [PersonalRecord.model_validate(row) for row in result.data or []]

    def fetch_for_exercise(self, exercise_id: str) -> List[PersonalRecord]:
        result = (
            self._client.table(TABLE)
            .select("*")
            .eq("exercise_id", exercise_id)
            .order("achieved_at")
            .execute()
        )
        return [PersonalRecord.model_validate(row) for row in result.data or []]

    def save(self, record: PersonalRecord) -> PersonalRecord:
        result = self._client.table(TABLE).insert(record.model_dump(mode="json")).execute()
        if result.data:
            return PersonalRecord.model_validate(result.data[0])
        return record

    def clear_all(self) -> None:
        # PostgREST refuses unfiltered deletes; every row has a non-null id
        self._client.table(TABLE).delete().neq("id", "").execute()

    def replace_all(self, records: List[PersonalRecord]) -> None:
        payload = [r.model_dump(mode="json") for r in records]
        self._client.rpc(REPLACE_RPC, {"records": payload}).execute()
        logger.info(f"Replaced personal records with {len(payload)} rows")

    def delete_for_workout(self, workout_id: str) -> int:
        result = self._client.table(TABLE).delete().eq("workout_id", workout_id).execute()
        return len(result.data or [])
