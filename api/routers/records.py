"""
Personal records router.

This router provides endpoints for:
- Current record per exercise
- Record history for one exercise (progression chart data)
- Full recalculation from workout history
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from api.deps import get_log_workout_use_case, get_personal_records_use_case
from application.use_cases import GetPersonalRecordsUseCase, LogWorkoutUseCase
from domain.models import PersonalRecord

router = APIRouter(
    prefix="/records",
    tags=["Records"],
)


# =============================================================================
# Response Models
# =============================================================================


class RecordsResponse(BaseModel):
    records: List[PersonalRecord]
    total: int


class RecordHistoryResponse(BaseModel):
    exercise_id: str
    records: List[PersonalRecord]
    current: Optional[PersonalRecord] = None


class RecalculateResponse(BaseModel):
    success: bool
    records_count: int


# =============================================================================
# Endpoints
# =============================================================================


# Valid exercise ID pattern: lowercase letters, numbers, and hyphens
EXERCISE_ID_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*[a-z0-9]$|^[a-z0-9]$")


def _validate_exercise_id(exercise_id: str) -> None:
    """Validate exercise ID format."""
    if not EXERCISE_ID_PATTERN.match(exercise_id):
        raise HTTPException(
            status_code=400,
            detail="Invalid exercise_id format. Use lowercase letters, numbers, and hyphens only."
        )


@router.get("", response_model=RecordsResponse)
def list_records(
    limit: Optional[int] = Query(None, ge=1, le=200, description="Maximum records to return"),
    use_case: GetPersonalRecordsUseCase = Depends(get_personal_records_use_case),
) -> RecordsResponse:
    """Current record per exercise, strongest estimated 1RM first."""
    result = use_case.list_current(limit=limit)
    return RecordsResponse(records=result.records, total=result.total)


@router.get("/{exercise_id}/history", response_model=RecordHistoryResponse)
def get_record_history(
    exercise_id: str = Path(..., description="Canonical exercise ID"),
    use_case: GetPersonalRecordsUseCase = Depends(get_personal_records_use_case),
) -> RecordHistoryResponse:
    """Every record an exercise has set, oldest first."""
    _validate_exercise_id(exercise_id)
    result = use_case.history(exercise_id)
    return RecordHistoryResponse(
        exercise_id=result.exercise_id,
        records=result.records,
        current=result.current,
    )


@router.post("/recalculate", response_model=RecalculateResponse)
def recalculate_records(
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
) -> RecalculateResponse:
    """Rebuild all personal records by replaying every workout in date order."""
    records = use_case.recalculate_records()
    return RecalculateResponse(success=True, records_count=len(records))
