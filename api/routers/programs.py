"""
Programs router for the training program lifecycle.

This router provides:
- Program library listing and lookup
- Activation, weekly advancement and deactivation of the active program
- Deletion of custom programs
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, Field

from api.deps import get_manage_program_use_case
from application.use_cases import ManageProgramUseCase, ProgramStatusResult
from backend.core.program_progression import ProgramState
from domain.models import (
    DifficultyLevel,
    ProgramCategory,
    ProgramDay,
    ProgramWeek,
    TrainingProgram,
    WeekProgressionPattern,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


# =============================================================================
# Response Models
# =============================================================================


class ProgramSummary(BaseModel):
    """Program library entry without the week/day tree."""
    id: str
    name: str
    description: Optional[str] = None
    category: ProgramCategory
    difficulty: DifficultyLevel
    duration_weeks: int
    progression_pattern: WeekProgressionPattern
    is_custom: bool
    usage_count: int
    last_used_at: Optional[datetime] = None
    is_fully_configured: bool

    @classmethod
    def from_program(cls, program: TrainingProgram) -> "ProgramSummary":
        return cls(
            id=program.id,
            name=program.name,
            description=program.description,
            category=program.category,
            difficulty=program.difficulty,
            duration_weeks=program.duration_weeks,
            progression_pattern=program.progression_pattern,
            is_custom=program.is_custom,
            usage_count=program.usage_count,
            last_used_at=program.last_used_at,
            is_fully_configured=program.is_fully_configured,
        )


class ProgramListResponse(BaseModel):
    programs: List[ProgramSummary]
    total: int


class ProgramStatusResponse(BaseModel):
    """Active program state."""
    state: ProgramState
    program: Optional[ProgramSummary] = None
    start_date: Optional[date] = None
    current_week: Optional[int] = Field(None, description="Week advanced to explicitly")
    computed_week: Optional[int] = Field(None, description="Week implied by elapsed days")
    progress_percentage: float = 0.0
    completed_at: Optional[datetime] = None
    todays_workout: Optional[ProgramDay] = None
    current_program_week: Optional[ProgramWeek] = None

    @classmethod
    def from_result(cls, result: ProgramStatusResult) -> "ProgramStatusResponse":
        return cls(
            state=result.state,
            program=ProgramSummary.from_program(result.program) if result.program else None,
            start_date=result.start_date,
            current_week=result.current_week,
            computed_week=result.computed_week,
            progress_percentage=result.progress_percentage,
            completed_at=result.completed_at,
            todays_workout=result.todays_workout,
            current_program_week=result.current_program_week,
        )


# =============================================================================
# Active Program Endpoints
# =============================================================================
# Registered before /{program_id} so "active" is not captured as an ID.


@router.get("/active", response_model=ProgramStatusResponse)
def get_active_program(
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> ProgramStatusResponse:
    """Current program state, today's scheduled day and progress."""
    return ProgramStatusResponse.from_result(use_case.status())


@router.post("/active/advance", response_model=ProgramStatusResponse)
def advance_active_program(
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> ProgramStatusResponse:
    """
    Move the active program to its next week.

    At the final week the program is marked completed instead. Returns 409
    when no program is active.
    """
    return ProgramStatusResponse.from_result(use_case.advance_week())


@router.delete("/active", response_model=ProgramStatusResponse)
def deactivate_program(
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> ProgramStatusResponse:
    """Stop the active program (any state)."""
    return ProgramStatusResponse.from_result(use_case.deactivate())


# =============================================================================
# Library Endpoints
# =============================================================================


@router.get("", response_model=ProgramListResponse)
def list_programs(
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> ProgramListResponse:
    """All programs, presets first."""
    programs = use_case.list_programs()
    return ProgramListResponse(
        programs=[ProgramSummary.from_program(p) for p in programs],
        total=len(programs),
    )


@router.get("/{program_id}", response_model=TrainingProgram)
def get_program(
    program_id: str = Path(..., description="Program ID"),
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> TrainingProgram:
    """A program with its full week/day structure."""
    return use_case.get_program(program_id)


@router.post("/{program_id}/activate", response_model=ProgramStatusResponse)
def activate_program(
    program_id: str = Path(..., description="Program ID"),
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
) -> ProgramStatusResponse:
    """
    Start a program at week 1 today.

    Returns 409 when another program is active.
    """
    result = use_case.activate(program_id)
    logger.info(f"Program {program_id} activated via API")
    return ProgramStatusResponse.from_result(result)


@router.delete("/{program_id}")
def delete_program(
    program_id: str = Path(..., description="Program ID"),
    use_case: ManageProgramUseCase = Depends(get_manage_program_use_case),
):
    """
    Delete a custom program.

    Presets cannot be deleted (403). If the program is active, the profile
    reference is cleared first.
    """
    deleted = use_case.delete_program(program_id)
    return {"success": deleted, "program_id": program_id}
