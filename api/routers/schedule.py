"""
Schedule router.

Unified calendar of logged workouts and the active program's projected days.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import get_schedule_use_case
from application.use_cases import GetScheduleUseCase
from domain.models import CalendarItem

router = APIRouter(
    prefix="/schedule",
    tags=["Schedule"],
)


class ScheduleResponse(BaseModel):
    today: date
    window_days: int
    active_program_id: Optional[str] = None
    current_week: Optional[int] = None
    items: List[CalendarItem]


@router.get("", response_model=ScheduleResponse)
def get_schedule(
    window_days: Optional[int] = Query(
        None, ge=1, le=90, description="Days to project from today (default from settings)"
    ),
    use_case: GetScheduleUseCase = Depends(get_schedule_use_case),
) -> ScheduleResponse:
    """
    Calendar items sorted by date.

    Logged workouts appear on their own dates; projected planned/rest days
    start today and skip any date that already has a logged workout.
    """
    result = use_case.execute(window_days=window_days)
    return ScheduleResponse(
        today=result.today,
        window_days=result.window_days,
        active_program_id=result.active_program_id,
        current_week=result.current_week,
        items=result.items,
    )
