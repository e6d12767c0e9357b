"""
Program progression state machine.

Owns the activation / weekly advancement / completion lifecycle of the single
active program on a user profile:

    Inactive --activate--> Active --advance_week (final week)--> Completed
        ^                    |                                      |
        +-----deactivate-----+-------------deactivate---------------+

Two notions of "which week is it" coexist on purpose:
- `current_week_number` on the profile only moves on explicit `advance_week`
  calls and drives progress/completion.
- `computed_week(today)` is derived from elapsed calendar days since the start
  date and drives "what should I train today" and the calendar projection.

The engine mutates the profile/program objects it is given and never performs
I/O; persisting the result is the caller's job.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional, Tuple

from application.exceptions import ProgramStateError
from domain.models import (
    ProgramDay,
    ProgramWeek,
    TrainingProgram,
    UserProfile,
    Weekday,
    utc_now,
)

logger = logging.getLogger(__name__)

ACTIVE_PROGRAM_EXISTS_MESSAGE = (
    "You already have an active program. Finish or cancel your current program first."
)
NO_ACTIVE_PROGRAM_MESSAGE = "No active program. Activate a program first."


class ProgramState(str, Enum):
    """Lifecycle state of the profile's program."""

    INACTIVE = "inactive"
    ACTIVE = "active"
    COMPLETED = "completed"


def program_position(start_date: date, on: date) -> Tuple[int, int]:
    """
    Locate a calendar date inside a program.

    Args:
        start_date: Day the program was activated
        on: Date to locate

    Returns:
        (week_number, day_of_week) where week_number is
        floor(days_since_start / 7) + 1 and day_of_week is ISO (Monday=1).
        Dates before the start yield a week number below 1.
    """
    days_since_start = (on - start_date).days
    return days_since_start // 7 + 1, int(Weekday.from_date(on))


def clear_program_reference(profile: UserProfile, program_id: str) -> bool:
    """
    Nullify the profile's active-program reference when that program is deleted.

    Returns:
        True if the profile pointed at the deleted program
    """
    if profile.active_program_id != program_id:
        return False
    profile.set_program_state(None, None, None)
    profile.program_completed_at = None
    logger.info(f"Cleared active program reference to deleted program {program_id}")
    return True


class ProgramProgressionEngine:
    """
    State machine over a user profile's program fields.

    Usage:
        >>> engine = ProgramProgressionEngine(profile)
        >>> engine.activate(program)
        >>> engine.advance_week()
        >>> engine.todays_workout()
    """

    def __init__(
        self,
        profile: UserProfile,
        program: Optional[TrainingProgram] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            profile: Profile whose program fields are managed
            program: The profile's active program, already resolved by the caller
            clock: Returns "now"; defaults to local time
        """
        if program is not None and profile.active_program_id not in (None, program.id):
            raise ValueError(
                f"Profile is on program {profile.active_program_id}, not {program.id}"
            )
        self._profile = profile
        self._program = program if profile.has_active_program else None
        self._clock = clock or utc_now

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def profile(self) -> UserProfile:
        return self._profile

    @property
    def program(self) -> Optional[TrainingProgram]:
        return self._program

    @property
    def current_week(self) -> Optional[int]:
        return self._profile.current_week_number

    @property
    def is_completed(self) -> bool:
        if self._program is None or not self._profile.has_active_program:
            return False
        return (
            self._profile.current_week_number > self._program.duration_weeks
            or self._profile.program_completed_at is not None
        )

    @property
    def state(self) -> ProgramState:
        if not self._profile.has_active_program:
            return ProgramState.INACTIVE
        if self.is_completed:
            return ProgramState.COMPLETED
        return ProgramState.ACTIVE

    @property
    def progress_percentage(self) -> float:
        """Fraction of the program behind the user, in [0, 1]."""
        if self._program is None or not self._profile.has_active_program:
            return 0.0
        if self.is_completed:
            return 1.0
        week = self._profile.current_week_number
        return min(max((week - 1) / self._program.duration_weeks, 0.0), 1.0)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def activate(self, program: TrainingProgram, start_date: Optional[date] = None) -> None:
        """
        Start a program at week 1.

        Raises:
            ProgramStateError: If a program is already active
        """
        if self._profile.has_active_program:
            raise ProgramStateError(
                ACTIVE_PROGRAM_EXISTS_MESSAGE,
                current_program_id=self._profile.active_program_id,
            )

        now = self._clock()
        self._profile.set_program_state(program.id, start_date or now.date(), 1)
        self._profile.program_completed_at = None
        program.mark_as_used(now)
        self._program = program
        logger.info(
            f"Activated program '{program.name}' ({program.id}), "
            f"{program.duration_weeks} weeks starting {self._profile.active_program_start_date}"
        )

    def advance_week(self) -> int:
        """
        Move to the next week.

        At the final week the week number stays put and the program is marked
        completed instead; detecting completion is left to `is_completed`.

        Returns:
            The current week number after the call

        Raises:
            ProgramStateError: If no program is active
        """
        program = self._require_active()
        week = self._profile.current_week_number

        if week < program.duration_weeks:
            self._profile.set_program_state(
                self._profile.active_program_id,
                self._profile.active_program_start_date,
                week + 1,
            )
            logger.info(f"Advanced program {program.id} to week {week + 1}")
        elif self._profile.program_completed_at is None:
            self._profile.program_completed_at = self._clock()
            logger.info(f"Program {program.id} completed at week {week}")

        return self._profile.current_week_number

    def deactivate(self) -> None:
        """Return to Inactive from any state."""
        previous = self._profile.active_program_id
        self._profile.set_program_state(None, None, None)
        self._profile.program_completed_at = None
        self._program = None
        if previous:
            logger.info(f"Deactivated program {previous}")

    # -------------------------------------------------------------------------
    # Date-based queries
    # -------------------------------------------------------------------------

    def computed_week(self, today: Optional[date] = None) -> Optional[int]:
        """Week number implied by elapsed days since the start date."""
        start = self._profile.active_program_start_date
        if start is None:
            return None
        week, _ = program_position(start, today or self._clock().date())
        return week

    def todays_workout(self, today: Optional[date] = None) -> Optional[ProgramDay]:
        """
        The program day scheduled for a date (default: today).

        Looked up by elapsed time, independent of `current_week_number`.
        Returns None without an active program or when nothing is scheduled.
        """
        if self._program is None or self._profile.active_program_start_date is None:
            return None
        week_number, day_of_week = program_position(
            self._profile.active_program_start_date, today or self._clock().date()
        )
        return self._program.day(week_number, day_of_week)

    def current_program_week(self, today: Optional[date] = None) -> Optional[ProgramWeek]:
        """The ProgramWeek containing a date (default: today)."""
        if self._program is None:
            return None
        week_number = self.computed_week(today)
        return self._program.week(week_number) if week_number else None

    def _require_active(self) -> TrainingProgram:
        if not self._profile.has_active_program or self._program is None:
            raise ProgramStateError(NO_ACTIVE_PROGRAM_MESSAGE)
        return self._program
