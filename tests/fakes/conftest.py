"""
Test Fixtures and Helpers for Fake Repositories.

This module provides helper functions for overriding FastAPI dependencies
with fake repository implementations.

Usage:
    from tests.fakes.conftest import override_repositories

    def test_something(app):
        fakes = override_repositories(app)
        fakes.workouts.seed([...])
        response = client.get("/schedule")
"""

from dataclasses import dataclass, field

from fastapi import FastAPI

# Import the dependency getter functions from api/deps
from api import deps
from tests.fakes.personal_record_repository import FakePersonalRecordRepository
from tests.fakes.program_repository import FakeProgramRepository, FakeTemplateRepository
from tests.fakes.user_profile_repository import FakeExerciseResolver, FakeUserProfileRepository
from tests.fakes.workout_repository import FakeWorkoutRepository


@dataclass
class FakeRepositories:
    """One fake per port, shared by every request of a test."""

    workouts: FakeWorkoutRepository = field(default_factory=FakeWorkoutRepository)
    records: FakePersonalRecordRepository = field(default_factory=FakePersonalRecordRepository)
    programs: FakeProgramRepository = field(default_factory=FakeProgramRepository)
    templates: FakeTemplateRepository = field(default_factory=FakeTemplateRepository)
    profiles: FakeUserProfileRepository = field(default_factory=FakeUserProfileRepository)
    exercises: FakeExerciseResolver = field(default_factory=FakeExerciseResolver)


def override_repositories(app: FastAPI, fakes: FakeRepositories = None) -> FakeRepositories:
    """Route every repository provider of `app` to in-memory fakes."""
    fakes = fakes or FakeRepositories()
    app.dependency_overrides[deps.get_workout_repo] = lambda: fakes.workouts
    app.dependency_overrides[deps.get_record_repo] = lambda: fakes.records
    app.dependency_overrides[deps.get_program_repo] = lambda: fakes.programs
    app.dependency_overrides[deps.get_template_repo] = lambda: fakes.templates
    app.dependency_overrides[deps.get_user_profile_repo] = lambda: fakes.profiles
    app.dependency_overrides[deps.get_exercise_resolver] = lambda: fakes.exercises
    return fakes


def reset_overrides(app: FastAPI) -> None:
    """Clear all dependency overrides."""
    app.dependency_overrides.clear()
