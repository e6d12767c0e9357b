"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test objects

Usage:
    from tests.fakes import FakeWorkoutRepository, make_workout

    repo = FakeWorkoutRepository()
    repo.seed([make_workout(datetime(2025, 3, 3), {"barbell-back-squat": [(100, 5)]})])
"""
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from domain.models import (
    DifficultyLevel,
    ProgramCategory,
    ProgramDay,
    ProgramWeek,
    TemplateExercise,
    TrainingProgram,
    WeekProgressionPattern,
    Workout,
    WorkoutExercise,
    WorkoutSet,
    WorkoutTemplate,
    WorkoutType,
)

# Import all fake implementations
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.personal_record_repository import FakePersonalRecordRepository
from tests.fakes.program_repository import FakeProgramRepository, FakeTemplateRepository
from tests.fakes.user_profile_repository import FakeExerciseResolver, FakeUserProfileRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_workout(
    when: datetime,
    sets_by_exercise: Dict[str, Sequence[Tuple[float, int]]],
    *,
    workout_id: Optional[str] = None,
    workout_type: WorkoutType = WorkoutType.LIFTING,
    completed: bool = True,
) -> Workout:
    """
    Build a workout from {exercise_id: [(weight, reps), ...]}.

    Exercise names are derived from the slug ("barbell-back-squat" ->
    "Barbell Back Squat").
    """
    exercises = [
        WorkoutExercise(
            exercise_id=exercise_id,
            exercise_name=exercise_id.replace("-", " ").title(),
            order=order,
            sets=[
                WorkoutSet(weight=weight, reps=reps, is_completed=completed)
                for weight, reps in sets
            ],
        )
        for order, (exercise_id, sets) in enumerate(sets_by_exercise.items())
    ]
    kwargs = {"id": workout_id} if workout_id else {}
    return Workout(date=when, type=workout_type, exercises=exercises, **kwargs)


def make_template(
    template_id: str,
    exercises: Sequence[Tuple[str, int, int, int]],
    *,
    name: Optional[str] = None,
    is_preset: bool = False,
) -> WorkoutTemplate:
    """Build a template from [(exercise_id, set_count, rep_min, rep_max), ...]."""
    return WorkoutTemplate(
        id=template_id,
        name=name or template_id.replace("-", " ").title(),
        is_preset=is_preset,
        exercises=[
            TemplateExercise(
                order=order,
                exercise_id=exercise_id,
                exercise_name=exercise_id.replace("-", " ").title(),
                set_count=set_count,
                rep_range_min=rep_min,
                rep_range_max=rep_max,
            )
            for order, (exercise_id, set_count, rep_min, rep_max) in enumerate(exercises)
        ],
    )


def make_program(
    program_id: str = "program-1",
    *,
    duration_weeks: int = 4,
    training_days: Optional[Dict[int, str]] = None,
    rest_days: Sequence[int] = (),
    pattern: WeekProgressionPattern = WeekProgressionPattern.LINEAR,
    configured_weeks: Optional[int] = None,
    is_custom: bool = True,
) -> TrainingProgram:
    """
    Build a program with the same day layout every week.

    Week intensity follows `pattern`; deload weeks get 0.6 volume.

    Args:
        training_days: {day_of_week: template_id}
        rest_days: day_of_week values emitted as explicit rest days
        configured_weeks: Number of weeks to create (defaults to duration)
    """
    training_days = training_days if training_days is not None else {1: "template-a"}
    weeks: List[ProgramWeek] = []
    for number in range(1, (configured_weeks or duration_weeks) + 1):
        days = [
            ProgramDay(id=f"{program_id}-w{number}-d{dow}", day_of_week=dow, template_id=tid)
            for dow, tid in sorted(training_days.items())
        ]
        days += [
            ProgramDay(id=f"{program_id}-w{number}-d{dow}", day_of_week=dow)
            for dow in rest_days
        ]
        deload = pattern.is_deload_week(number)
        weeks.append(
            ProgramWeek(
                id=f"{program_id}-w{number}",
                week_number=number,
                intensity_modifier=pattern.intensity_modifier(number),
                volume_modifier=0.6 if deload else 1.0,
                is_deload=deload,
                days=days,
            )
        )
    return TrainingProgram(
        id=program_id,
        name=program_id.replace("-", " ").title(),
        category=ProgramCategory.STRENGTH_TRAINING,
        difficulty=DifficultyLevel.BEGINNER,
        duration_weeks=duration_weeks,
        progression_pattern=pattern,
        is_custom=is_custom,
        weeks=weeks,
    )


__all__ = [
    # Fakes
    "FakeWorkoutRepository",
    "FakePersonalRecordRepository",
    "FakeProgramRepository",
    "FakeTemplateRepository",
    "FakeUserProfileRepository",
    "FakeExerciseResolver",
    # Factories
    "make_workout",
    "make_template",
    "make_program",
]
