"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations can be
injected into use cases and routers for clean separation of concerns and
testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutRepository,
        SupabasePersonalRecordRepository,
        SupabaseProgramRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    workout_repo = SupabaseWorkoutRepository(client)
    record_repo = SupabasePersonalRecordRepository(client)
    program_repo = SupabaseProgramRepository(client)
"""

from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.personal_record_repository import SupabasePersonalRecordRepository
from infrastructure.db.program_repository import SupabaseProgramRepository
from infrastructure.db.template_repository import SupabaseTemplateRepository
from infrastructure.db.user_profile_repository import SupabaseUserProfileRepository
from infrastructure.db.exercise_resolver import SupabaseExerciseResolver

__all__ = [
    # Logged workouts
    "SupabaseWorkoutRepository",

    # Personal records
    "SupabasePersonalRecordRepository",

    # Programs and templates
    "SupabaseProgramRepository",
    "SupabaseTemplateRepository",

    # Profile
    "SupabaseUserProfileRepository",

    # Exercise library
    "SupabaseExerciseResolver",
]
