"""
LogWorkout Use Case.

Saves a completed workout and runs personal record detection on it. Also
owns workout deletion (records go with it) and full record recalculation.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from application.exceptions import WorkoutNotFoundError
from application.ports import PersonalRecordRepository, WorkoutRepository
from backend.core.pr_detection import PRDetectionEngine
from domain.models import PersonalRecord, Workout

logger = logging.getLogger(__name__)


@dataclass
class LogWorkoutResult:
    """Result of the LogWorkout use case execution."""

    workout: Workout
    new_records: List[PersonalRecord] = field(default_factory=list)
    is_update: bool = False


class LogWorkoutUseCase:
    """
    Use case for logging workouts.

    Orchestrates the following workflow:
    1. Persist the workout (create or update by id)
    2. Detect records against prior bests; an update re-detects the workout's
       records instead of appending a second set
    3. Return the saved workout with any new records

    Usage:
        >>> use_case = LogWorkoutUseCase(workout_repo, record_repo)
        >>> result = use_case.execute(workout)
        >>> [r.exercise_id for r in result.new_records]
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        record_repo: PersonalRecordRepository,
    ) -> None:
        """
        Args:
            workout_repo: Repository for persisting workouts
            record_repo: Repository for personal records
        """
        self._workout_repo = workout_repo
        self._pr_engine = PRDetectionEngine(record_repo)

    def execute(self, workout: Workout) -> LogWorkoutResult:
        is_update = self._workout_repo.get_by_id(workout.id) is not None
        saved = self._workout_repo.save(workout)
        logger.info(
            f"{'Updated' if is_update else 'Logged'} {saved.type.value} workout {saved.id} "
            f"on {saved.calendar_day} ({len(saved.exercises)} exercises)"
        )

        if is_update:
            records = self._pr_engine.recalculate_for_workout(saved)
        else:
            records = self._pr_engine.detect_and_save(saved)

        return LogWorkoutResult(workout=saved, new_records=records, is_update=is_update)

    def delete(self, workout_id: str) -> int:
        """
        Delete a workout and the records it produced.

        Returns:
            Number of personal records removed

        Raises:
            WorkoutNotFoundError: Unknown workout id
        """
        if self._workout_repo.get_by_id(workout_id) is None:
            raise WorkoutNotFoundError(workout_id)

        # Records first: a failure here must not orphan record rows
        removed = self._pr_engine.forget_workout(workout_id)
        self._workout_repo.delete(workout_id)
        return removed

    def recalculate_records(self) -> List[PersonalRecord]:
        """Rebuild every personal record from the full workout history."""
        return self._pr_engine.recalculate_all(self._workout_repo.fetch_all())
