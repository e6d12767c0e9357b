"""
Personal record entity.

Records are append-only: a new row is written each time an exercise's best
estimated 1RM improves, so the full history can drive progression charts.
The exercise's *current* record is the one with the highest estimated 1RM.
"""

from datetime import datetime
from typing import Dict, Iterable, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.workout import as_utc


class PersonalRecord(BaseModel):
    """A best estimated 1RM achieved for an exercise in a given workout."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    exercise_id: str = Field(..., min_length=1)
    exercise_name: str = Field(..., min_length=1)
    estimated_1rm: float = Field(..., gt=0)
    actual_weight: float = Field(..., gt=0)
    actual_reps: int = Field(..., gt=0)
    achieved_at: datetime
    workout_id: str
    version: int = 1

    @field_validator("achieved_at")
    @classmethod
    def normalize_achieved_at(cls, v: datetime) -> datetime:
        return as_utc(v)

    def formatted(self, unit: str = "kg") -> str:
        """e.g. "Bench Press: 100.0kg (8 reps x 80.0kg)"."""
        if self.actual_reps == 1:
            return f"{self.exercise_name}: {self.estimated_1rm:.1f}{unit}"
        return (
            f"{self.exercise_name}: {self.estimated_1rm:.1f}{unit} "
            f"({self.actual_reps} reps x {self.actual_weight:.1f}{unit})"
        )


def best_by_exercise(records: Iterable[PersonalRecord]) -> Dict[str, float]:
    """Map exercise_id to its highest estimated 1RM."""
    best: Dict[str, float] = {}
    for record in records:
        if record.estimated_1rm > best.get(record.exercise_id, 0.0):
            best[record.exercise_id] = record.estimated_1rm
    return best


def current_records(records: Iterable[PersonalRecord]) -> List[PersonalRecord]:
    """One record per exercise (the highest e1RM), strongest first."""
    current: Dict[str, PersonalRecord] = {}
    for record in records:
        existing = current.get(record.exercise_id)
        if existing is None or record.estimated_1rm > existing.estimated_1rm:
            current[record.exercise_id] = record
    return sorted(current.values(), key=lambda r: r.estimated_1rm, reverse=True)
