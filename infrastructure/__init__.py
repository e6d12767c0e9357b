"""
Infrastructure Layer for the Training Progression API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutRepository,
    SupabasePersonalRecordRepository,
    SupabaseProgramRepository,
    SupabaseTemplateRepository,
    SupabaseUserProfileRepository,
    SupabaseExerciseResolver,
)

__all__ = [
    "SupabaseWorkoutRepository",
    "SupabasePersonalRecordRepository",
    "SupabaseProgramRepository",
    "SupabaseTemplateRepository",
    "SupabaseUserProfileRepository",
    "SupabaseExerciseResolver",
]
