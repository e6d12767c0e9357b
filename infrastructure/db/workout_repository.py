"""
Supabase Workout Repository Implementation.

This module implements the WorkoutRepository protocol using Supabase.
The exercise/set tree of a workout is stored in the `exercises` JSONB column
and re-validated into domain models on read.
"""
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from domain.models import Workout, WorkoutType

logger = logging.getLogger(__name__)

TABLE = "workouts"


def workout_to_row(workout: Workout) -> Dict[str, Any]:
    """Serialize a workout into a `workouts` row."""
    return workout.model_dump(mode="json")


def row_to_workout(row: Dict[str, Any]) -> Workout:
    """Deserialize a `workouts` row; unknown columns are ignored."""
    return Workout.model_validate(row)


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository.

    Handles all workout CRUD operations using the Supabase client.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def fetch_all(self) -> List[Workout]:
        result = self._client.table(TABLE).select("*").order("date", desc=True).execute()
        return [row_to_workout(row) for row in result.data or []]

    def fetch_recent(self, limit: int = 20) -> List[Workout]:
        result = (
            self._client.table(TABLE)
            .select("*")
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [row_to_workout(row) for row in result.data or []]

    def fetch_by_type(self, workout_type: WorkoutType) -> List[Workout]:
        result = (
            self._client.table(TABLE)
            .select("*")
            .eq("type", WorkoutType(workout_type).value)
            .order("date", desc=True)
            .execute()
        )
        return [row_to_workout(row) for row in result.data or []]

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        result = self._client.table(TABLE).select("*").eq("id", workout_id).limit(1).execute()
        if not result.data:
            return None
        return row_to_workout(result.data[0])

    def save(self, workout: Workout) -> Workout:
        result = self._client.table(TABLE).upsert(workout_to_row(workout)).execute()
        if result.data:
            return row_to_workout(result.data[0])
        return workout

    def delete(self, workout_id: str) -> bool:
        result = self._client.table(TABLE).delete().eq("id", workout_id).execute()
        deleted = bool(result.data)
        if not deleted:
            logger.warning(f"Delete requested for unknown workout {workout_id}")
        return deleted
