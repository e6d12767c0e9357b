"""
ManageProgram Use Case.

Orchestrates the active-program lifecycle: load the profile and its program,
run the transition on ProgramProgressionEngine, persist the result.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional

from application.exceptions import PresetDeletionError, ProgramNotFoundError
from application.ports import ProgramRepository, UserProfileRepository
from backend.core.program_progression import (
    ProgramProgressionEngine,
    ProgramState,
    clear_program_reference,
)
from domain.models import ProgramDay, ProgramWeek, TrainingProgram, utc_now

logger = logging.getLogger(__name__)


@dataclass
class ProgramStatusResult:
    """Snapshot of the profile's program state after an operation."""

    state: ProgramState
    program: Optional[TrainingProgram] = None
    start_date: Optional[date] = None
    current_week: Optional[int] = None
    computed_week: Optional[int] = None
    progress_percentage: float = 0.0
    completed_at: Optional[datetime] = None
    todays_workout: Optional[ProgramDay] = None
    current_program_week: Optional[ProgramWeek] = None


class ManageProgramUseCase:
    """
    Use case for activating, advancing and deactivating programs.

    Usage:
        >>> use_case = ManageProgramUseCase(profile_repo, program_repo)
        >>> status = use_case.activate("stronglifts-5x5")
        >>> status.current_week
        1
    """

    def __init__(
        self,
        profile_repo: UserProfileRepository,
        program_repo: ProgramRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            profile_repo: Repository for the user profile
            program_repo: Repository for training programs
            clock: Returns "now"; defaults to local time
        """
        self._profile_repo = profile_repo
        self._program_repo = program_repo
        self._clock = clock or utc_now

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_programs(self) -> List[TrainingProgram]:
        return self._program_repo.fetch_all()

    def get_program(self, program_id: str) -> TrainingProgram:
        program = self._program_repo.fetch_by_id(program_id)
        if program is None:
            raise ProgramNotFoundError(program_id)
        return program

    def status(self, today: Optional[date] = None) -> ProgramStatusResult:
        return self._status(self._load_engine(), today)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def activate(self, program_id: str) -> ProgramStatusResult:
        """
        Activate a program for the profile.

        Raises:
            ProgramNotFoundError: Unknown program id
            ProgramStateError: Another program is already active
        """
        program = self.get_program(program_id)
        engine = self._load_engine()
        engine.activate(program)

        self._profile_repo.persist(engine.profile)
        self._program_repo.update(program)
        return self._status(engine)

    def advance_week(self) -> ProgramStatusResult:
        """
        Raises:
            ProgramStateError: No program is active
        """
        engine = self._load_engine()
        engine.advance_week()
        self._profile_repo.persist(engine.profile)
        return self._status(engine)

    def deactivate(self) -> ProgramStatusResult:
        engine = self._load_engine()
        engine.deactivate()
        self._profile_repo.persist(engine.profile)
        return self._status(engine)

    def delete_program(self, program_id: str) -> bool:
        """
        Delete a custom program, clearing the profile reference first.

        Raises:
            ProgramNotFoundError: Unknown program id
            PresetDeletionError: The program is a catalog preset
        """
        program = self.get_program(program_id)
        if not program.is_custom:
            raise PresetDeletionError(program_id)

        profile = self._profile_repo.fetch_or_create()
        if clear_program_reference(profile, program_id):
            self._profile_repo.persist(profile)

        deleted = self._program_repo.delete(program_id)
        logger.info(f"Deleted program {program_id}")
        return deleted

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _load_engine(self) -> ProgramProgressionEngine:
        profile = self._profile_repo.fetch_or_create()
        program = None

        if profile.has_active_program:
            program = self._program_repo.fetch_by_id(profile.active_program_id)
            if program is None:
                logger.warning(
                    f"Active program {profile.active_program_id} no longer exists; "
                    f"clearing profile reference"
                )
                clear_program_reference(profile, profile.active_program_id)
                self._profile_repo.persist(profile)

        return ProgramProgressionEngine(profile, program, clock=self._clock)

    def _status(
        self, engine: ProgramProgressionEngine, today: Optional[date] = None
    ) -> ProgramStatusResult:
        today = today or self._clock().date()
        profile = engine.profile
        return ProgramStatusResult(
            state=engine.state,
            program=engine.program,
            start_date=profile.active_program_start_date,
            current_week=profile.current_week_number,
            computed_week=engine.computed_week(today),
            progress_percentage=engine.progress_percentage,
            completed_at=profile.program_completed_at,
            todays_workout=engine.todays_workout(today),
            current_program_week=engine.current_program_week(today),
        )
