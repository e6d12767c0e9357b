"""
Unit tests for ManageProgramUseCase.

Uses in-memory fakes for the profile and program repositories.
"""
import pytest
from datetime import date, datetime

from application.exceptions import PresetDeletionError, ProgramNotFoundError, ProgramStateError
from application.use_cases import ManageProgramUseCase
from backend.core.program_progression import ProgramState
from domain.models import UserProfile
from tests.fakes import FakeProgramRepository, FakeUserProfileRepository, make_program

pytestmark = pytest.mark.unit

# Wednesday
NOW = datetime(2025, 3, 5, 8, 0)


@pytest.fixture
def program_repo():
    return FakeProgramRepository(
        [
            make_program("custom-block", duration_weeks=2, training_days={3: "template-a"}),
            make_program("preset-block", duration_weeks=6, is_custom=False),
        ]
    )


@pytest.fixture
def profile_repo():
    return FakeUserProfileRepository()


@pytest.fixture
def use_case(profile_repo, program_repo):
    return ManageProgramUseCase(profile_repo, program_repo, clock=lambda: NOW)


class TestQueries:
    def test_list_programs_presets_first(self, use_case):
        assert [p.id for p in use_case.list_programs()] == ["preset-block", "custom-block"]

    def test_get_unknown_program(self, use_case):
        with pytest.raises(ProgramNotFoundError):
            use_case.get_program("missing")

    def test_status_without_program(self, use_case):
        status = use_case.status()
        assert status.state is ProgramState.INACTIVE
        assert status.program is None
        assert status.progress_percentage == 0.0


class TestActivate:
    def test_activate_persists_profile_and_usage(self, use_case, profile_repo, program_repo):
        status = use_case.activate("custom-block")

        assert status.state is ProgramState.ACTIVE
        assert status.current_week == 1
        assert status.start_date == NOW.date()
        assert status.todays_workout.template_id == "template-a"
        assert profile_repo.stored.active_program_id == "custom-block"
        assert program_repo.fetch_by_id("custom-block").usage_count == 1

    def test_activate_unknown_program(self, use_case, profile_repo):
        with pytest.raises(ProgramNotFoundError):
            use_case.activate("missing")
        assert profile_repo.persist_count == 0

    def test_activate_while_active_is_rejected(self, use_case, profile_repo):
        use_case.activate("custom-block")
        persisted = profile_repo.persist_count

        with pytest.raises(ProgramStateError) as exc_info:
            use_case.activate("preset-block")

        assert exc_info.value.current_program_id == "custom-block"
        assert profile_repo.persist_count == persisted
        assert profile_repo.stored.active_program_id == "custom-block"


class TestAdvanceAndDeactivate:
    def test_advance_then_complete(self, use_case, profile_repo):
        use_case.activate("custom-block")

        status = use_case.advance_week()
        assert status.current_week == 2
        assert status.state is ProgramState.ACTIVE

        status = use_case.advance_week()
        assert status.state is ProgramState.COMPLETED
        assert status.completed_at == NOW
        assert status.progress_percentage == 1.0
        assert profile_repo.stored.program_completed_at == NOW

    def test_advance_without_program(self, use_case):
        with pytest.raises(ProgramStateError):
            use_case.advance_week()

    def test_deactivate(self, use_case, profile_repo):
        use_case.activate("custom-block")
        status = use_case.deactivate()

        assert status.state is ProgramState.INACTIVE
        assert not profile_repo.stored.has_active_program

    def test_status_reports_computed_week(self, use_case):
        use_case.activate("custom-block")
        status = use_case.status(today=date(2025, 3, 12))

        assert status.current_week == 1
        assert status.computed_week == 2
        assert status.current_program_week.week_number == 2


class TestDeleteProgram:
    def test_delete_custom_program(self, use_case, program_repo):
        assert use_case.delete_program("custom-block") is True
        assert program_repo.fetch_by_id("custom-block") is None

    def test_delete_active_program_clears_profile(self, use_case, profile_repo):
        use_case.activate("custom-block")
        use_case.delete_program("custom-block")

        assert not profile_repo.stored.has_active_program
        assert use_case.status().state is ProgramState.INACTIVE

    def test_delete_preset_is_forbidden(self, use_case, program_repo):
        with pytest.raises(PresetDeletionError):
            use_case.delete_program("preset-block")
        assert program_repo.fetch_by_id("preset-block") is not None

    def test_delete_unknown_program(self, use_case):
        with pytest.raises(ProgramNotFoundError):
            use_case.delete_program("missing")


class TestDanglingReference:
    def test_missing_active_program_is_cleared(self, program_repo):
        profile_repo = FakeUserProfileRepository(
            UserProfile(
                active_program_id="gone",
                active_program_start_date=date(2025, 3, 3),
                current_week_number=2,
            )
        )
        use_case = ManageProgramUseCase(profile_repo, program_repo, clock=lambda: NOW)

        status = use_case.status()

        assert status.state is ProgramState.INACTIVE
        assert profile_repo.stored.active_program_id is None
        assert profile_repo.persist_count == 1
