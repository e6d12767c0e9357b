"""
Supabase Exercise Resolver Implementation.

Looks exercises up in the canonical `exercises` table. Name resolution is
cosmetic, so lookup failures are logged and treated as misses.
"""
from typing import Optional
import logging

from supabase import Client

from domain.models import ExerciseIdentity

logger = logging.getLogger(__name__)

TABLE = "exercises"


class SupabaseExerciseResolver:
    """Supabase implementation of ExerciseResolver."""

    def __init__(self, client: Client):
        self._client = client

    def resolve_by_id(self, exercise_id: str) -> Optional[ExerciseIdentity]:
        try:
            result = (
                self._client.table(TABLE)
                .select("id, name")
                .eq("id", exercise_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.warning(f"Error resolving exercise {exercise_id}: {e}")
            return None

        if not result.data:
            return None
        row = result.data[0]
        return ExerciseIdentity(id=row["id"], name=row["name"])
