"""
Unit tests for GetScheduleUseCase.
"""
import pytest
from datetime import date, datetime

from application.use_cases import GetScheduleUseCase
from domain.models import CalendarItemKind, UserProfile
from tests.fakes import (
    FakeProgramRepository,
    FakeTemplateRepository,
    FakeUserProfileRepository,
    FakeWorkoutRepository,
    make_program,
    make_template,
    make_workout,
)

pytestmark = pytest.mark.unit

# Monday
START = date(2025, 3, 3)


@pytest.fixture
def workouts():
    return FakeWorkoutRepository(
        [make_workout(datetime(2025, 3, 3, 18, 0), {"barbell-back-squat": [(100, 5)]})]
    )


@pytest.fixture
def program_repo():
    return FakeProgramRepository(
        [make_program("block", duration_weeks=4, training_days={1: "a", 3: "b"}, rest_days=[2])]
    )


@pytest.fixture
def template_repo():
    return FakeTemplateRepository([make_template("a", [("barbell-back-squat", 5, 5, 5)])])


def _profile(program_id="block", week=1):
    return UserProfile(
        active_program_id=program_id,
        active_program_start_date=START,
        current_week_number=week,
    )


class TestGetSchedule:
    def test_without_program(self, workouts, program_repo, template_repo):
        use_case = GetScheduleUseCase(
            workouts, FakeUserProfileRepository(), program_repo, template_repo
        )
        result = use_case.execute(today=START)

        assert [i.kind for i in result.items] == [CalendarItemKind.COMPLETED]
        assert result.active_program_id is None
        assert result.window_days == 30

    def test_with_program(self, workouts, program_repo, template_repo):
        use_case = GetScheduleUseCase(
            workouts, FakeUserProfileRepository(_profile()), program_repo, template_repo,
            window_days=7,
        )
        result = use_case.execute(today=START)

        kinds = [(i.date, i.kind) for i in result.items]
        assert kinds == [
            (date(2025, 3, 3), CalendarItemKind.COMPLETED),
            (date(2025, 3, 4), CalendarItemKind.REST),
            # Template "b" is not stored: shown as rest
            (date(2025, 3, 5), CalendarItemKind.REST),
        ]
        assert result.active_program_id == "block"
        assert result.current_week == 1

    def test_window_override(self, workouts, program_repo, template_repo):
        use_case = GetScheduleUseCase(
            workouts, FakeUserProfileRepository(_profile()), program_repo, template_repo,
            window_days=7,
        )
        result = use_case.execute(today=START, window_days=14)

        assert result.window_days == 14
        assert sum(1 for i in result.items if i.is_planned) == 1

    def test_current_week_flag(self, workouts, program_repo, template_repo):
        use_case = GetScheduleUseCase(
            workouts, FakeUserProfileRepository(_profile(week=2)), program_repo, template_repo,
            window_days=14,
        )
        result = use_case.execute(today=START)

        flagged = {i.week_number for i in result.items if i.is_current_week}
        assert flagged == {2}

    def test_missing_program_shows_logged_workouts_only(self, workouts, template_repo):
        use_case = GetScheduleUseCase(
            workouts,
            FakeUserProfileRepository(_profile("gone")),
            FakeProgramRepository(),
            template_repo,
        )
        result = use_case.execute(today=START)

        assert [i.kind for i in result.items] == [CalendarItemKind.COMPLETED]
        assert result.active_program_id is None
