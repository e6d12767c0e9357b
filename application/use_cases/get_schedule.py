"""
GetSchedule Use Case.

Fetches logged workouts, the profile and its active program, then runs the
schedule merge to build the calendar.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, List, Optional

from application.ports import (
    ProgramRepository,
    TemplateRepository,
    UserProfileRepository,
    WorkoutRepository,
)
from backend.core.schedule_merger import DEFAULT_WINDOW_DAYS, ScheduleMerger
from domain.models import CalendarItem, utc_now

logger = logging.getLogger(__name__)


@dataclass
class ScheduleResult:
    """Result of the GetSchedule use case execution."""

    today: date
    window_days: int
    items: List[CalendarItem] = field(default_factory=list)
    active_program_id: Optional[str] = None
    current_week: Optional[int] = None


class GetScheduleUseCase:
    """
    Use case for the unified training calendar.

    Usage:
        >>> use_case = GetScheduleUseCase(workout_repo, profile_repo, program_repo, template_repo)
        >>> result = use_case.execute(window_days=14)
        >>> [item.kind for item in result.items]
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        profile_repo: UserProfileRepository,
        program_repo: ProgramRepository,
        template_repo: TemplateRepository,
        *,
        window_days: int = DEFAULT_WINDOW_DAYS,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._workout_repo = workout_repo
        self._profile_repo = profile_repo
        self._program_repo = program_repo
        self._template_repo = template_repo
        self._merger = ScheduleMerger(window_days=window_days)
        self._clock = clock or utc_now

    def execute(
        self,
        today: Optional[date] = None,
        window_days: Optional[int] = None,
    ) -> ScheduleResult:
        """
        Build the calendar.

        Args:
            today: Projection anchor; defaults to the current UTC date
            window_days: Override for the configured projection window

        Returns:
            ScheduleResult with date-sorted CalendarItems
        """
        today = today or self._clock().date()
        window = window_days if window_days is not None else self._merger.window_days

        workouts = self._workout_repo.fetch_all()
        profile = self._profile_repo.fetch_or_create()

        program = None
        template_ids = None
        if profile.has_active_program:
            program = self._program_repo.fetch_by_id(profile.active_program_id)
            if program is None:
                logger.warning(
                    f"Active program {profile.active_program_id} not found; "
                    f"showing logged workouts only"
                )
            else:
                template_ids = {t.id for t in self._template_repo.fetch_all()}

        items = self._merger.merge(
            workouts,
            active_program=program,
            start_date=profile.active_program_start_date if program else None,
            current_week=profile.current_week_number if program else None,
            window_days=window,
            today=today,
            template_ids=template_ids,
        )

        return ScheduleResult(
            today=today,
            window_days=window,
            items=items,
            active_program_id=program.id if program else None,
            current_week=profile.current_week_number if program else None,
        )
