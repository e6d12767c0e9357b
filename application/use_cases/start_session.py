"""
StartSession Use Case.

Builds the overload suggestion shown when a training session starts.

The profile and the recent workout history are fetched concurrently and
joined before anything is computed; the suggestion engine itself is pure.
Repository and resolver calls are synchronous, so each runs in a worker
thread rather than on the event loop.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from application.exceptions import TemplateNotFoundError
from application.ports import (
    ExerciseResolver,
    ProgramRepository,
    TemplateRepository,
    UserProfileRepository,
    WorkoutRepository,
)
from backend.core.overload_suggestion import OverloadSuggestionEngine, scale_set_count
from backend.core.program_progression import ProgramProgressionEngine
from domain.models import ProgramDay, SuggestedWorkout, WorkoutTemplate, utc_now

logger = logging.getLogger(__name__)


@dataclass
class StartSessionResult:
    """Suggestion plus the program context it was computed in."""

    suggestion: SuggestedWorkout
    template: WorkoutTemplate
    program_id: Optional[str] = None
    program_day: Optional[ProgramDay] = None
    week_number: Optional[int] = None
    volume_modifier: float = 1.0

    @property
    def is_from_program(self) -> bool:
        return self.program_day is not None


class StartSessionUseCase:
    """
    Use case for preparing a new session.

    With no explicit template, today's program day decides the template. An
    explicit template still picks up the current program week's modifiers.

    Usage:
        >>> use_case = StartSessionUseCase(
        ...     profile_repo, workout_repo, program_repo, template_repo, resolver
        ... )
        >>> result = await use_case.execute()
        >>> result.suggestion.exercises[0].suggested_weight
    """

    def __init__(
        self,
        profile_repo: UserProfileRepository,
        workout_repo: WorkoutRepository,
        program_repo: ProgramRepository,
        template_repo: TemplateRepository,
        exercise_resolver: ExerciseResolver,
        *,
        recent_workouts_limit: int = 20,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._profile_repo = profile_repo
        self._workout_repo = workout_repo
        self._program_repo = program_repo
        self._template_repo = template_repo
        self._exercise_resolver = exercise_resolver
        self._recent_workouts_limit = recent_workouts_limit
        self._clock = clock or utc_now
        self._engine = OverloadSuggestionEngine()

    async def execute(
        self,
        template_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Optional[StartSessionResult]:
        """
        Compute the suggestion for a session.

        Args:
            template_id: Template to start; defaults to today's program day
            today: Session date; defaults to the current UTC date

        Returns:
            StartSessionResult, or None when no template was given and nothing
            trainable is scheduled today

        Raises:
            TemplateNotFoundError: An explicit template_id does not exist
        """
        today = today or self._clock().date()

        profile, recent_workouts = await asyncio.gather(
            asyncio.to_thread(self._profile_repo.fetch_or_create),
            asyncio.to_thread(self._workout_repo.fetch_recent, self._recent_workouts_limit),
        )

        program = None
        if profile.has_active_program:
            program = await asyncio.to_thread(
                self._program_repo.fetch_by_id, profile.active_program_id
            )

        program_day = None
        program_week = None
        week_number = None
        if program is not None:
            progression = ProgramProgressionEngine(profile, program, clock=self._clock)
            program_day = progression.todays_workout(today)
            program_week = progression.current_program_week(today)
            week_number = progression.computed_week(today)

        if template_id is None:
            if program_day is None or not program_day.has_workout:
                logger.info(f"No program workout scheduled for {today}")
                return None
            template_id = program_day.template_id
            template = await asyncio.to_thread(self._template_repo.fetch_by_id, template_id)
            if template is None:
                logger.warning(
                    f"Program day {program_day.id} references missing template {template_id}"
                )
                return None
        else:
            template = await asyncio.to_thread(self._template_repo.fetch_by_id, template_id)
            if template is None:
                raise TemplateNotFoundError(template_id)
            if program_day is not None and program_day.template_id != template_id:
                program_day = None

        if program_day is not None:
            week_modifier = program_day.effective_intensity_modifier(program_week)
            volume_modifier = program_day.effective_volume_modifier(program_week)
        elif program_week is not None:
            week_modifier = program_week.intensity_modifier
            volume_modifier = program_week.volume_modifier
        else:
            week_modifier = volume_modifier = 1.0

        template = await self._refresh_exercise_names(template)
        suggestion = self._engine.suggest(template, week_modifier, recent_workouts)
        suggestion = suggestion.model_copy(
            update={
                "exercises": [
                    e.model_copy(
                        update={"suggested_sets": scale_set_count(e.suggested_sets, volume_modifier)}
                    )
                    for e in suggestion.exercises
                ]
            }
        )

        logger.info(
            f"Suggested {template.name} for {today} "
            f"(intensity x{week_modifier:.3f}, volume x{volume_modifier:.2f})"
        )
        return StartSessionResult(
            suggestion=suggestion,
            template=template,
            program_id=program.id if program is not None else None,
            program_day=program_day,
            week_number=week_number if program is not None else None,
            volume_modifier=volume_modifier,
        )

    async def _refresh_exercise_names(self, template: WorkoutTemplate) -> WorkoutTemplate:
        """Swap name snapshots for current library names where they resolve."""
        identities = await asyncio.gather(
            *(
                asyncio.to_thread(self._exercise_resolver.resolve_by_id, exercise.exercise_id)
                for exercise in template.exercises
            )
        )
        exercises = []
        for exercise, identity in zip(template.exercises, identities):
            if identity is not None and identity.name != exercise.exercise_name:
                exercise = exercise.model_copy(update={"exercise_name": identity.name})
            exercises.append(exercise)
        return template.model_copy(update={"exercises": exercises})
