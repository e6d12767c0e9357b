"""
Training program aggregate: program → weeks → days.

A program owns its weeks and a week owns its days. Days reference workout
templates by ID only; the template itself is resolved by lookup so that a
deleted custom template degrades into a rest-like day instead of a dangling
pointer.

Day-of-week numbering is ISO 8601 (Monday=1 … Sunday=7) regardless of locale.
"""

from datetime import date, datetime, timezone
from enum import Enum, IntEnum
from typing import List, Optional, Set
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Pattern deload weeks run at this fraction of the cycle baseline, capped so a
# late-cycle deload still reduces load.
DELOAD_INTENSITY_FACTOR = 0.6
MAX_DELOAD_INTENSITY = 0.95


# =============================================================================
# Enums
# =============================================================================


class ProgramCategory(str, Enum):
    """Training program category."""

    POWERLIFTING = "powerlifting"
    BODYBUILDING = "bodybuilding"
    STRENGTH_TRAINING = "strength_training"
    CROSSFIT = "crossfit"
    GENERAL_FITNESS = "general_fitness"
    SPORT_SPECIFIC = "sport_specific"


class DifficultyLevel(str, Enum):
    """Training program difficulty level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def level(self) -> int:
        """Numeric representation used for sorting."""
        return {"beginner": 1, "intermediate": 2, "advanced": 3}[self.value]


class TrainingPhase(str, Enum):
    """Periodization phase tag for a week."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    PEAKING = "peaking"
    DELOAD = "deload"
    TESTING = "testing"


class Weekday(IntEnum):
    """ISO 8601 weekday numbering (Monday=1, Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        return cls(day.isoweekday())

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class WeekProgressionPattern(str, Enum):
    """
    Weekly periodization pattern used to derive week intensity modifiers.

    Examples:
        >>> WeekProgressionPattern.LINEAR.intensity_modifier(3)
        1.05
        >>> WeekProgressionPattern.THREE_ONE_DELOAD.is_deload_week(4)
        True
    """

    LINEAR = "linear"
    WAVE = "wave"
    THREE_ONE_DELOAD = "three_one_deload"
    FOUR_ONE_DELOAD = "four_one_deload"
    CUSTOM = "custom"

    def intensity_modifier(self, week_number: int, base_increment: float = 0.025) -> float:
        """
        Calculate the intensity modifier for a 1-indexed week.

        Args:
            week_number: Week number (1-indexed)
            base_increment: Weekly increment (0.025 = +2.5% per week)

        Returns:
            Multiplier relative to baseline load (1.0 = 100%)
        """
        if week_number < 1:
            raise ValueError(f"week_number must be >= 1, got {week_number}")

        if self is WeekProgressionPattern.WAVE:
            cycle = (week_number - 1) % 3
            base = 1.0 + ((week_number - 1) // 3) * base_increment * 2
            return base + (0.0, 0.05, -0.05)[cycle]

        if self in (WeekProgressionPattern.THREE_ONE_DELOAD, WeekProgressionPattern.FOUR_ONE_DELOAD):
            period = self._deload_period
            cycle = (week_number - 1) % period
            base = 1.0 + ((week_number - 1) // period) * period * base_increment
            if cycle == period - 1:
                return min(base * DELOAD_INTENSITY_FACTOR, MAX_DELOAD_INTENSITY)
            return base + cycle * base_increment

        # LINEAR and CUSTOM
        return 1.0 + (week_number - 1) * base_increment

    def is_deload_week(self, week_number: int) -> bool:
        """Whether the pattern schedules a deload for this week."""
        if self in (WeekProgressionPattern.THREE_ONE_DELOAD, WeekProgressionPattern.FOUR_ONE_DELOAD):
            period = self._deload_period
            return (week_number - 1) % period == period - 1
        return False

    @property
    def _deload_period(self) -> int:
        return 4 if self is WeekProgressionPattern.THREE_ONE_DELOAD else 5


# =============================================================================
# Program structure
# =============================================================================


class ProgramDay(BaseModel):
    """A single day within a program week. No template means a rest day."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=_new_id)
    day_of_week: int = Field(ge=1, le=7, description="1=Monday, 7=Sunday")
    template_id: Optional[str] = Field(
        default=None, description="Reference to a workout template"
    )
    name: Optional[str] = None
    notes: Optional[str] = Field(default=None, max_length=500)
    intensity_override: Optional[float] = Field(default=None, gt=0, le=2.0)
    volume_override: Optional[float] = Field(default=None, gt=0, le=2.0)

    @property
    def is_rest_day(self) -> bool:
        return self.template_id is None

    @property
    def has_workout(self) -> bool:
        return self.template_id is not None

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.day_of_week)

    def effective_intensity_modifier(self, week: Optional["ProgramWeek"]) -> float:
        """Day override, else the week's modifier, else 1.0."""
        if self.intensity_override is not None:
            return self.intensity_override
        return week.intensity_modifier if week is not None else 1.0

    def effective_volume_modifier(self, week: Optional["ProgramWeek"]) -> float:
        if self.volume_override is not None:
            return self.volume_override
        return week.volume_modifier if week is not None else 1.0

    def display_name(self, template_name: Optional[str] = None) -> str:
        if self.name:
            return self.name
        if template_name:
            return template_name
        return self.weekday.display_name


class ProgramWeek(BaseModel):
    """A week (microcycle) within a program."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=_new_id)
    week_number: int = Field(ge=1)
    name: Optional[str] = None
    notes: Optional[str] = Field(default=None, max_length=500)
    phase_tag: Optional[TrainingPhase] = None
    intensity_modifier: float = Field(default=1.0, gt=0, le=2.0)
    volume_modifier: float = Field(default=1.0, gt=0, le=2.0)
    is_deload: bool = False
    days: List[ProgramDay] = Field(default_factory=list)

    @field_validator("days")
    @classmethod
    def validate_unique_days(cls, v: List[ProgramDay]) -> List[ProgramDay]:
        """A weekday can appear at most once per week."""
        seen = [d.day_of_week for d in v]
        if len(seen) != len(set(seen)):
            raise ValueError("Each day of week may appear only once per week")
        return v

    @model_validator(mode="after")
    def validate_deload(self) -> "ProgramWeek":
        if self.is_deload and (self.intensity_modifier >= 1.0 or self.volume_modifier >= 1.0):
            raise ValueError(
                "Deload weeks must reduce both intensity and volume below 1.0"
            )
        return self

    @property
    def training_days(self) -> int:
        return sum(1 for d in self.days if d.has_workout)

    @property
    def combined_modifier(self) -> float:
        return self.intensity_modifier * self.volume_modifier

    @property
    def display_name(self) -> str:
        return self.name or f"Week {self.week_number}"

    def day_for(self, day_of_week: int) -> Optional[ProgramDay]:
        return next((d for d in self.days if d.day_of_week == day_of_week), None)


class TrainingProgram(BaseModel):
    """
    A complete multi-week training program (macrocycle).

    Presets are seeded from the catalog and never mutated except for the
    usage bookkeeping (`usage_count`, `last_used_at`). Custom programs are
    user-owned.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)
    category: ProgramCategory
    difficulty: DifficultyLevel
    duration_weeks: int = Field(ge=1, le=52)
    progression_pattern: WeekProgressionPattern = WeekProgressionPattern.LINEAR
    is_custom: bool = True
    usage_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)
    last_used_at: Optional[datetime] = None
    weeks: List[ProgramWeek] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Program name cannot be blank")
        return v.strip()

    @model_validator(mode="after")
    def validate_weeks(self) -> "TrainingProgram":
        numbers = sorted(w.week_number for w in self.weeks)
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(
                f"Week numbers must be unique and contiguous from 1, got {numbers}"
            )
        if len(numbers) > self.duration_weeks:
            raise ValueError(
                f"Program has {len(numbers)} weeks but duration is {self.duration_weeks}"
            )
        return self

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def week(self, number: int) -> Optional[ProgramWeek]:
        return next((w for w in self.weeks if w.week_number == number), None)

    def day(self, week_number: int, day_of_week: int) -> Optional[ProgramDay]:
        week = self.week(week_number)
        return week.day_for(day_of_week) if week else None

    def template_ids(self) -> Set[str]:
        return {d.template_id for w in self.weeks for d in w.days if d.template_id}

    @property
    def is_fully_configured(self) -> bool:
        """All weeks exist and every week has at least one day."""
        return len(self.weeks) == self.duration_weeks and all(w.days for w in self.weeks)

    @property
    def sort_key(self):
        """Presets first, then alphabetical."""
        return (self.is_custom, self.name.casefold())

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def mark_as_used(self, now: Optional[datetime] = None) -> None:
        self.usage_count += 1
        self.last_used_at = now or _utcnow()

    def duplicate(self, new_name: str) -> "TrainingProgram":
        """Deep copy as a new custom program with fresh identities."""
        weeks = []
        for week in self.weeks:
            days = [d.model_copy(update={"id": _new_id()}) for d in week.days]
            weeks.append(week.model_copy(update={"id": _new_id(), "days": days}))
        data = self.model_dump(exclude={"id", "weeks", "usage_count", "last_used_at", "created_at"})
        data.update(name=new_name, is_custom=True)
        return TrainingProgram(**data, weeks=weeks)
