"""
Logged workout aggregate: workout → exercises → sets.

Part of the domain layer; independent of persistence. A Workout is created
when a session is logged. Its identity never changes after save, while notes
and rating remain editable.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class WorkoutType(str, Enum):
    """Kind of logged session."""

    LIFTING = "lifting"
    CARDIO = "cardio"
    METCON = "metcon"


class WorkoutSet(BaseModel):
    """A single performed (or planned-then-performed) set."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)
    is_completed: bool = False
    notes: Optional[str] = Field(default=None, max_length=500)

    @property
    def is_pr_candidate(self) -> bool:
        """Only sets with both load and reps can set a record."""
        return self.reps > 0 and self.weight > 0

    @property
    def volume(self) -> float:
        return self.reps * self.weight


class WorkoutExercise(BaseModel):
    """An exercise performed within a workout."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    exercise_id: Optional[str] = Field(
        default=None, description="None when the exercise was deleted from the library"
    )
    exercise_name: str = Field(..., min_length=1)
    order: int = Field(default=0, ge=0)
    sets: List[WorkoutSet] = Field(default_factory=list)

    @property
    def completed_sets(self) -> List[WorkoutSet]:
        return [s for s in self.sets if s.is_completed]


class Workout(BaseModel):
    """
    Aggregate root for a logged training session.

    Examples:
        >>> workout = Workout(
        ...     date=datetime(2025, 3, 3, 18, 0),
        ...     type=WorkoutType.LIFTING,
        ...     exercises=[
        ...         WorkoutExercise(
        ...             exercise_id="barbell-back-squat",
        ...             exercise_name="Barbell Back Squat",
        ...             sets=[WorkoutSet(reps=5, weight=100, is_completed=True)],
        ...         )
        ...     ],
        ... )
        >>> workout.total_volume
        500.0
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    date: datetime
    type: WorkoutType = WorkoutType.LIFTING
    duration_seconds: float = Field(default=0, ge=0)
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=2000)
    rating: Optional[int] = Field(default=None, ge=1, le=5)

    # Provenance when started from a program day
    program_id: Optional[str] = None
    program_day_id: Optional[str] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def calendar_day(self) -> date:
        """Day the session took place, in UTC."""
        return self.date.date()

    @property
    def is_lifting(self) -> bool:
        return self.type == WorkoutType.LIFTING

    @property
    def is_from_program(self) -> bool:
        return self.program_id is not None

    @property
    def total_volume(self) -> float:
        return float(
            sum(s.volume for e in self.exercises for s in e.completed_sets)
        )

    def exercise(self, exercise_id: str) -> Optional[WorkoutExercise]:
        return next((e for e in self.exercises if e.exercise_id == exercise_id), None)
