"""
Repository Interfaces (Ports) for the Training Progression API.

This package defines abstract interfaces that decouple the progression
engines from infrastructure (database, external services). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, PersonalRecordRepository

    class LogWorkoutUseCase:
        def __init__(self, workout_repo: WorkoutRepository, ...):
            self._workout_repo = workout_repo
"""

# Logged workouts
from application.ports.workout_repository import WorkoutRepository

# Personal records
from application.ports.personal_record_repository import PersonalRecordRepository

# Programs and templates
from application.ports.program_repository import ProgramRepository
from application.ports.template_repository import TemplateRepository

# Profile
from application.ports.user_profile_repository import UserProfileRepository

# Exercise library
from application.ports.exercise_resolver import ExerciseResolver

__all__ = [
    "WorkoutRepository",
    "PersonalRecordRepository",
    "ProgramRepository",
    "TemplateRepository",
    "UserProfileRepository",
    "ExerciseResolver",
]
