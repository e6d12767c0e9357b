"""
Workout Repository Interface (Port).

This module defines the abstract interface for logged-workout persistence.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import Workout, WorkoutType


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Domain types are used instead of database-specific types to maintain
    clean architecture boundaries.
    """

    def fetch_all(self) -> List[Workout]:
        """
        Get every logged workout.

        Returns:
            Workouts ordered by date, newest first
        """
        ...

    def fetch_recent(self, limit: int = 20) -> List[Workout]:
        """
        Get the most recent workouts.

        Args:
            limit: Maximum number of workouts to return

        Returns:
            Workouts ordered by date, newest first
        """
        ...

    def fetch_by_type(self, workout_type: WorkoutType) -> List[Workout]:
        """Get workouts of one type, newest first."""
        ...

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Returns:
            Workout or None if not found
        """
        ...

    def save(self, workout: Workout) -> Workout:
        """
        Insert or update a workout (keyed by its id).

        Returns:
            The stored workout
        """
        ...

    def delete(self, workout_id: str) -> bool:
        """
        Delete a workout.

        Returns:
            True if a workout was deleted, False if it did not exist
        """
        ...
