"""
Workout template value objects.

A template prescribes exercises with set counts and rep ranges. Templates own
their exercises; preset templates come from the catalog and cannot be deleted.
"""

from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemplateCategory(str, Enum):
    """Template classification."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    CALISTHENICS = "calisthenics"
    WEIGHTLIFTING = "weightlifting"
    BEGINNER = "beginner"
    CUSTOM = "custom"


class TemplateExercise(BaseModel):
    """
    A prescribed exercise within a template.

    Examples:
        >>> TemplateExercise(
        ...     order=0,
        ...     exercise_id="barbell-back-squat",
        ...     exercise_name="Barbell Back Squat",
        ...     set_count=5,
        ...     rep_range_min=5,
        ...     rep_range_max=5,
        ... )
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    order: int = Field(default=0, ge=0)
    exercise_id: str = Field(..., min_length=1, description="Stable exercise ID")
    exercise_name: str = Field(
        ..., min_length=1, description="Name snapshot for display if the exercise disappears"
    )
    set_count: int = Field(default=3, ge=1, le=10)
    rep_range_min: int = Field(default=8, gt=0)
    rep_range_max: int = Field(default=12, gt=0)
    notes: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def validate_rep_range(self) -> "TemplateExercise":
        if self.rep_range_min > self.rep_range_max:
            raise ValueError(
                f"rep_range_min ({self.rep_range_min}) cannot exceed "
                f"rep_range_max ({self.rep_range_max})"
            )
        return self

    @property
    def rep_range_display(self) -> str:
        if self.rep_range_min == self.rep_range_max:
            return str(self.rep_range_min)
        return f"{self.rep_range_min}-{self.rep_range_max}"


class WorkoutTemplate(BaseModel):
    """A reusable workout prescription."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(..., min_length=1, max_length=100)
    category: TemplateCategory = TemplateCategory.CUSTOM
    exercises: List[TemplateExercise] = Field(default_factory=list)
    is_preset: bool = False
    version: int = Field(default=1, ge=1)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    def ordered_exercises(self) -> List[TemplateExercise]:
        return sorted(self.exercises, key=lambda e: e.order)
