"""
Progressive-overload suggestion results.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SuggestionReasoning(str, Enum):
    """Why a weight was suggested."""

    NO_HISTORY = "no_history"
    DELOAD = "deload"
    WEEK_MODIFIER = "week_modifier"

    @property
    def display_text(self) -> str:
        return {
            "no_history": "No previous data - set your starting weight",
            "deload": "Deload week - reduced intensity",
            "week_modifier": "Based on program week progression",
        }[self.value]


class ExerciseSuggestion(BaseModel):
    """Suggested target for one template exercise. Weights are unrounded."""

    exercise_id: str
    exercise_name: str
    suggested_sets: int = Field(ge=1)
    suggested_reps: int = Field(ge=1)
    suggested_weight: float = Field(ge=0)
    reasoning: SuggestionReasoning
    last_weight: Optional[float] = None
    last_reps: Optional[int] = None


class SuggestedWorkout(BaseModel):
    """Suggestions for every exercise of a template, in template order."""

    template_id: str
    template_name: str
    week_modifier: float
    exercises: List[ExerciseSuggestion] = Field(default_factory=list)

    def for_exercise(self, exercise_id: str) -> Optional[ExerciseSuggestion]:
        return next((e for e in self.exercises if e.exercise_id == exercise_id), None)
