"""
Exercise identity value object.

Exercises are referenced by a stable ID everywhere in the domain. Templates,
logged workouts and records also keep a name snapshot so that they still
display sensibly if the library entry is renamed or removed.
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseIdentity(BaseModel):
    """Stable ID plus the current display name of a library exercise."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable exercise ID (e.g. 'barbell-back-squat')")
    name: str = Field(..., min_length=1)
