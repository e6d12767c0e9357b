"""
Fake Workout Repository for testing.

This module provides an in-memory implementation of WorkoutRepository
for fast, isolated testing without database dependencies.
"""
from typing import Dict, List, Optional

from domain.models import Workout, WorkoutType


class FakeWorkoutRepository:
    """
    In-memory fake implementation of WorkoutRepository for testing.

    Stores deep copies of workouts keyed by workout ID so tests cannot
    mutate stored state through returned objects.

    Usage:
        repo = FakeWorkoutRepository()
        repo.seed([workout_a, workout_b])
        recent = repo.fetch_recent(limit=5)
    """

    def __init__(self, workouts: Optional[List[Workout]] = None):
        self._workouts: Dict[str, Workout] = {}
        self.fetch_recent_calls: List[int] = []
        if workouts:
            self.seed(workouts)

    def reset(self) -> None:
        """Clear all stored workouts."""
        self._workouts.clear()
        self.fetch_recent_calls.clear()

    def seed(self, workouts: List[Workout]) -> None:
        for workout in workouts:
            self._workouts[workout.id] = workout.model_copy(deep=True)

    def get_all(self) -> List[Workout]:
        """Stored workouts in insertion order (test helper)."""
        return [w.model_copy(deep=True) for w in self._workouts.values()]

    def _newest_first(self) -> List[Workout]:
        return sorted(self._workouts.values(), key=lambda w: w.date, reverse=True)

    # =========================================================================
    # WorkoutRepository Protocol Methods
    # =========================================================================

    def fetch_all(self) -> List[Workout]:
        return [w.model_copy(deep=True) for w in self._newest_first()]

    def fetch_recent(self, limit: int = 20) -> List[Workout]:
        self.fetch_recent_calls.append(limit)
        return [w.model_copy(deep=True) for w in self._newest_first()[:limit]]

    def fetch_by_type(self, workout_type: WorkoutType) -> List[Workout]:
        return [w.model_copy(deep=True) for w in self._newest_first() if w.type == workout_type]

    def get_by_id(self, workout_id: str) -> Optional[Workout]:
        workout = self._workouts.get(workout_id)
        return workout.model_copy(deep=True) if workout else None

    def save(self, workout: Workout) -> Workout:
        self._workouts[workout.id] = workout.model_copy(deep=True)
        return workout.model_copy(deep=True)

    def delete(self, workout_id: str) -> bool:
        return self._workouts.pop(workout_id, None) is not None
