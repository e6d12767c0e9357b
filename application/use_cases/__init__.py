"""
Application Use Cases for the Training Progression API.

This package contains application-level use cases that orchestrate the
progression engines and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import LogWorkoutUseCase, StartSessionUseCase

    log_use_case = LogWorkoutUseCase(workout_repo=workout_repo, record_repo=record_repo)
    result = log_use_case.execute(workout)

    start_use_case = StartSessionUseCase(
        profile_repo, workout_repo, program_repo, template_repo, exercise_resolver
    )
    result = await start_use_case.execute()
"""

from application.use_cases.get_personal_records import (
    GetPersonalRecordsUseCase,
    ListRecordsResult,
    RecordHistoryResult,
)
from application.use_cases.get_schedule import GetScheduleUseCase, ScheduleResult
from application.use_cases.log_workout import LogWorkoutResult, LogWorkoutUseCase
from application.use_cases.manage_program import ManageProgramUseCase, ProgramStatusResult
from application.use_cases.start_session import StartSessionResult, StartSessionUseCase

__all__ = [
    # Program lifecycle
    "ManageProgramUseCase",
    "ProgramStatusResult",
    # Session start
    "StartSessionUseCase",
    "StartSessionResult",
    # Calendar
    "GetScheduleUseCase",
    "ScheduleResult",
    # Workouts and records
    "LogWorkoutUseCase",
    "LogWorkoutResult",
    "GetPersonalRecordsUseCase",
    "ListRecordsResult",
    "RecordHistoryResult",
]
