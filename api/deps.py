"""
FastAPI Dependency Providers for the Training Progression API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers compose repositories and settings

Usage in routers:
    from api.deps import get_log_workout_use_case
    from application.use_cases import LogWorkoutUseCase

    @router.post("/workouts")
    def log_workout(
        workout: Workout,
        use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
    ):
        return use_case.execute(workout)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseResolver,
    PersonalRecordRepository,
    ProgramRepository,
    TemplateRepository,
    UserProfileRepository,
    WorkoutRepository,
)

# Use cases
from application.use_cases import (
    GetPersonalRecordsUseCase,
    GetScheduleUseCase,
    LogWorkoutUseCase,
    ManageProgramUseCase,
    StartSessionUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseExerciseResolver,
    SupabasePersonalRecordRepository,
    SupabaseProgramRepository,
    SupabaseTemplateRepository,
    SupabaseUserProfileRepository,
    SupabaseWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()
    if not settings.supabase_configured:
        return None
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseWorkoutRepository(client)


def get_record_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PersonalRecordRepository:
    return SupabasePersonalRecordRepository(client)


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    return SupabaseProgramRepository(client)


def get_template_repo(
    client: Client = Depends(get_supabase_client_required),
) -> TemplateRepository:
    return SupabaseTemplateRepository(client)


def get_user_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserProfileRepository:
    return SupabaseUserProfileRepository(client)


def get_exercise_resolver(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseResolver:
    return SupabaseExerciseResolver(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_manage_program_use_case(
    profile_repo: UserProfileRepository = Depends(get_user_profile_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> ManageProgramUseCase:
    return ManageProgramUseCase(profile_repo, program_repo)


def get_start_session_use_case(
    profile_repo: UserProfileRepository = Depends(get_user_profile_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
    template_repo: TemplateRepository = Depends(get_template_repo),
    exercise_resolver: ExerciseResolver = Depends(get_exercise_resolver),
    settings: Settings = Depends(get_settings),
) -> StartSessionUseCase:
    return StartSessionUseCase(
        profile_repo,
        workout_repo,
        program_repo,
        template_repo,
        exercise_resolver,
        recent_workouts_limit=settings.recent_workouts_limit,
    )


def get_schedule_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    profile_repo: UserProfileRepository = Depends(get_user_profile_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
    template_repo: TemplateRepository = Depends(get_template_repo),
    settings: Settings = Depends(get_settings),
) -> GetScheduleUseCase:
    return GetScheduleUseCase(
        workout_repo,
        profile_repo,
        program_repo,
        template_repo,
        window_days=settings.schedule_window_days,
    )


def get_log_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    record_repo: PersonalRecordRepository = Depends(get_record_repo),
) -> LogWorkoutUseCase:
    return LogWorkoutUseCase(workout_repo, record_repo)


def get_personal_records_use_case(
    record_repo: PersonalRecordRepository = Depends(get_record_repo),
) -> GetPersonalRecordsUseCase:
    return GetPersonalRecordsUseCase(record_repo)
