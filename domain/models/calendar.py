"""
Calendar items produced by the schedule merger.

Derived view objects: never persisted.
"""

from datetime import date as Date
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from domain.models.program import ProgramDay
from domain.models.workout import Workout


class CalendarItemKind(str, Enum):
    COMPLETED = "completed"
    PLANNED = "planned"
    REST = "rest"


class CalendarItem(BaseModel):
    """A single dated entry in the unified training calendar."""

    date: Date
    kind: CalendarItemKind
    workout: Optional[Workout] = None
    program_day: Optional[ProgramDay] = None
    week_number: Optional[int] = None
    intensity_modifier: Optional[float] = None
    is_current_week: bool = False

    @classmethod
    def completed(cls, workout: Workout) -> "CalendarItem":
        return cls(date=workout.calendar_day, kind=CalendarItemKind.COMPLETED, workout=workout)

    @classmethod
    def planned(
        cls,
        on: Date,
        day: ProgramDay,
        week_number: int,
        intensity_modifier: float,
        is_current_week: bool = False,
    ) -> "CalendarItem":
        return cls(
            date=on,
            kind=CalendarItemKind.PLANNED,
            program_day=day,
            week_number=week_number,
            intensity_modifier=intensity_modifier,
            is_current_week=is_current_week,
        )

    @classmethod
    def rest(
        cls,
        on: Date,
        day: ProgramDay,
        week_number: int,
        is_current_week: bool = False,
    ) -> "CalendarItem":
        return cls(
            date=on,
            kind=CalendarItemKind.REST,
            program_day=day,
            week_number=week_number,
            is_current_week=is_current_week,
        )

    @property
    def is_completed(self) -> bool:
        return self.kind == CalendarItemKind.COMPLETED

    @property
    def is_planned(self) -> bool:
        return self.kind == CalendarItemKind.PLANNED

    @property
    def is_rest(self) -> bool:
        return self.kind == CalendarItemKind.REST
