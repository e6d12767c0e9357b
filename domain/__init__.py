"""
Domain layer for the training progression service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    PersonalRecord,
    TrainingProgram,
    UserProfile,
    Workout,
    WorkoutTemplate,
)

__all__ = [
    "PersonalRecord",
    "TrainingProgram",
    "UserProfile",
    "Workout",
    "WorkoutTemplate",
]
