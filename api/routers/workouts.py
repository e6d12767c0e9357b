"""
Workouts router.

Logging a workout runs personal record detection on it; deleting one removes
the records it produced.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel

from api.deps import get_log_workout_use_case
from application.use_cases import LogWorkoutUseCase
from domain.models import PersonalRecord, Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


class LogWorkoutResponse(BaseModel):
    workout: Workout
    new_records: List[PersonalRecord]
    is_update: bool = False


@router.post("", response_model=LogWorkoutResponse, status_code=201)
def log_workout(
    workout: Workout,
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
) -> LogWorkoutResponse:
    """
    Save a workout (create or update by id) and detect new personal records.
    """
    result = use_case.execute(workout)
    if result.new_records:
        logger.info(f"Workout {result.workout.id} set {len(result.new_records)} new PRs")
    return LogWorkoutResponse(
        workout=result.workout,
        new_records=result.new_records,
        is_update=result.is_update,
    )


@router.delete("/{workout_id}")
def delete_workout(
    workout_id: str = Path(..., description="Workout ID"),
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """Delete a workout and its personal records (404 if unknown)."""
    records_deleted = use_case.delete(workout_id)
    return {"success": True, "workout_id": workout_id, "records_deleted": records_deleted}
