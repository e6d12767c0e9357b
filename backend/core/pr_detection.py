"""
Personal record detection.

A set qualifies when it is completed and carries both load and reps. Each
exercise's best Brzycki e1RM in a workout is compared with the exercise's
prior best; only a strict improvement produces a new PersonalRecord. Cardio
and metcon workouts never produce records.

Records are append-only history. `recalculate_all` rebuilds the whole history
by replaying workouts oldest first and swaps it in atomically, so running it
twice yields the same record set.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Tuple

from application.ports import PersonalRecordRepository
from backend.core.strength_metrics import estimated_one_rep_max
from domain.models import PersonalRecord, Workout, WorkoutSet, best_by_exercise

logger = logging.getLogger(__name__)


def _best_sets(workout: Workout) -> Dict[str, Tuple[str, WorkoutSet, float]]:
    """exercise_id -> (exercise_name, best set, e1RM) for qualifying sets."""
    best: Dict[str, Tuple[str, WorkoutSet, float]] = {}
    for exercise in workout.exercises:
        # Exercise deleted from the library: nothing to attach a record to
        if not exercise.exercise_id:
            continue
        for workout_set in exercise.completed_sets:
            if not workout_set.is_pr_candidate:
                continue
            e1rm = estimated_one_rep_max(workout_set.weight, workout_set.reps)
            current = best.get(exercise.exercise_id)
            if current is None or e1rm > current[2]:
                best[exercise.exercise_id] = (exercise.exercise_name, workout_set, e1rm)
    return best


def find_new_records(
    workout: Workout, prior_best: Mapping[str, float]
) -> List[PersonalRecord]:
    """
    Records a workout would set against a map of prior bests.

    Args:
        workout: Logged workout
        prior_best: exercise_id -> best e1RM before this workout

    Returns:
        At most one new PersonalRecord per exercise, in workout order
    """
    if not workout.is_lifting:
        return []

    records: List[PersonalRecord] = []
    for exercise_id, (name, best_set, e1rm) in _best_sets(workout).items():
        previous = prior_best.get(exercise_id)
        if previous is not None and e1rm <= previous:
            continue
        records.append(
            PersonalRecord(
                exercise_id=exercise_id,
                exercise_name=name,
                estimated_1rm=e1rm,
                actual_weight=best_set.weight,
                actual_reps=best_set.reps,
                achieved_at=workout.date,
                workout_id=workout.id,
            )
        )
    return records


class PRDetectionEngine:
    """
    Detects and persists personal records.

    Usage:
        >>> engine = PRDetectionEngine(record_repo)
        >>> new_records = engine.detect_and_save(workout)
    """

    def __init__(self, record_repo: PersonalRecordRepository):
        """
        Args:
            record_repo: Repository for personal record persistence
        """
        self._record_repo = record_repo

    def detect_and_save(self, workout: Workout) -> List[PersonalRecord]:
        """
        Detect records set by a workout and append them to the history.

        Records already attributed to this workout are ignored when computing
        prior bests, so re-detecting a workout does not compete with itself.

        Returns:
            The newly saved records (empty when nothing improved)
        """
        prior_best = best_by_exercise(
            r for r in self._record_repo.fetch_all() if r.workout_id != workout.id
        )
        records = find_new_records(workout, prior_best)

        for record in records:
            self._record_repo.save(record)
            logger.info(
                f"New PR for {record.exercise_id}: e1RM {record.estimated_1rm:.1f} "
                f"({record.actual_reps} x {record.actual_weight}) in workout {workout.id}"
            )

        return records

    def recalculate_all(self, workouts: Iterable[Workout]) -> List[PersonalRecord]:
        """
        Rebuild the record history from scratch.

        Workouts are replayed in ascending date order (stable for equal dates)
        against a running best map, then the repository swaps the full set in
        one atomic step.

        Returns:
            The complete rebuilt record history
        """
        ordered = sorted(workouts, key=lambda w: w.date)
        running_best: Dict[str, float] = {}
        records: List[PersonalRecord] = []

        for workout in ordered:
            new_records = find_new_records(workout, running_best)
            for record in new_records:
                running_best[record.exercise_id] = record.estimated_1rm
            records.extend(new_records)

        self._record_repo.replace_all(records)
        logger.info(
            f"Recalculated personal records: {len(records)} records "
            f"from {len(ordered)} workouts"
        )
        return records

    def recalculate_for_workout(self, workout: Workout) -> List[PersonalRecord]:
        """Drop a workout's records and detect them again (after an edit)."""
        self._record_repo.delete_for_workout(workout.id)
        return self.detect_and_save(workout)

    def forget_workout(self, workout_id: str) -> int:
        """
        Delete the records a workout produced.

        Returns:
            Number of records deleted
        """
        deleted = self._record_repo.delete_for_workout(workout_id)
        if deleted:
            logger.info(f"Deleted {deleted} personal records for workout {workout_id}")
        return deleted
