"""
API package for the Training Progression API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
    get_record_repo,
    get_program_repo,
    get_template_repo,
    get_user_profile_repo,
    get_exercise_resolver,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_record_repo",
    "get_program_repo",
    "get_template_repo",
    "get_user_profile_repo",
    "get_exercise_resolver",
]
