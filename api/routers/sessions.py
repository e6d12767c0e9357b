"""
Sessions router.

Overload suggestions for the session about to start.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_start_session_use_case
from application.use_cases import StartSessionUseCase
from domain.models import ProgramDay, SuggestedWorkout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


class SuggestionRequest(BaseModel):
    template_id: Optional[str] = Field(
        None, description="Template to start; defaults to today's program day"
    )


class SuggestionResponse(BaseModel):
    suggestion: SuggestedWorkout
    program_id: Optional[str] = None
    program_day: Optional[ProgramDay] = None
    week_number: Optional[int] = None
    volume_modifier: float = 1.0
    is_from_program: bool = False


@router.post("/suggestion", response_model=SuggestionResponse)
async def suggest_session(
    request: SuggestionRequest,
    use_case: StartSessionUseCase = Depends(get_start_session_use_case),
) -> SuggestionResponse:
    """
    Suggested weight, reps and sets for every exercise of a template.

    Without a template_id, today's program day is used; 404 when nothing is
    scheduled today.
    """
    result = await use_case.execute(template_id=request.template_id)
    if result is None:
        raise HTTPException(
            status_code=404,
            detail="No workout scheduled for today. Pass a template_id to start one.",
        )

    return SuggestionResponse(
        suggestion=result.suggestion,
        program_id=result.program_id,
        program_day=result.program_day,
        week_number=result.week_number,
        volume_modifier=result.volume_modifier,
        is_from_program=result.is_from_program,
    )
