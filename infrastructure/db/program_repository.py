"""
Supabase Program Repository Implementation.

This module implements the ProgramRepository protocol using Supabase.
Weeks and days are stored together in the `weeks` JSONB column of
`training_programs`, so a program is always read and written as a whole.
"""
from typing import List, Optional
import logging

from supabase import Client

from application.exceptions import ProgramNotFoundError
from domain.models import TrainingProgram

logger = logging.getLogger(__name__)

TABLE = "training_programs"


class SupabaseProgramRepository:
    """Supabase implementation of ProgramRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def fetch_by_id(self, program_id: str) -> Optional[TrainingProgram]:
        result = self._client.table(TABLE).select("*").eq("id", program_id).limit(1).execute()
        if not result.data:
            return None
        return TrainingProgram.model_validate(result.data[0])

    def fetch_all(self) -> List[TrainingProgram]:
        result = self._client.table(TABLE).select("*").execute()
        programs = [TrainingProgram.model_validate(row) for row in result.data or []]
        return sorted(programs, key=lambda p: p.sort_key)

    def save(self, program: TrainingProgram) -> TrainingProgram:
        result = self._client.table(TABLE).upsert(program.model_dump(mode="json")).execute()
        if result.data:
            return TrainingProgram.model_validate(result.data[0])
        return program

    def update(self, program: TrainingProgram) -> TrainingProgram:
        result = (
            self._client.table(TABLE)
            .update(program.model_dump(mode="json", exclude={"id", "created_at"}))
            .eq("id", program.id)
            .execute()
        )
        if not result.data:
            raise ProgramNotFoundError(program.id)
        return TrainingProgram.model_validate(result.data[0])

    def delete(self, program_id: str) -> bool:
        result = self._client.table(TABLE).delete().eq("id", program_id).execute()
        return bool(result.data)
