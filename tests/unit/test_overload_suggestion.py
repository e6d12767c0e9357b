"""
Unit tests for backend/core/overload_suggestion.py

Tests cover:
- Suggestions with and without history
- Most-recent-session and heaviest-set selection
- Deload reasoning below the threshold
- Set count scaling
"""
import pytest
from datetime import datetime, timedelta, timezone

from backend.core.overload_suggestion import (
    DELOAD_THRESHOLD,
    OverloadSuggestionEngine,
    last_completed_set,
    scale_set_count,
)
from domain.models import SuggestionReasoning
from tests.fakes import make_template, make_workout

pytestmark = pytest.mark.unit

SQUAT = "barbell-back-squat"
BENCH = "barbell-bench-press"


@pytest.fixture
def engine():
    return OverloadSuggestionEngine()


@pytest.fixture
def template():
    return make_template("day-a", [(SQUAT, 5, 5, 5), (BENCH, 3, 8, 12)])


class TestLastCompletedSet:
    def test_no_history(self):
        assert last_completed_set(SQUAT, []) is None

    def test_picks_most_recent_session(self):
        older = make_workout(datetime(2025, 3, 1), {SQUAT: [(120, 5)]})
        newer = make_workout(datetime(2025, 3, 5), {SQUAT: [(100, 5)]})

        assert last_completed_set(SQUAT, [newer, older]).weight == 100
        assert last_completed_set(SQUAT, [older, newer]).weight == 100

    def test_picks_heaviest_set_of_session(self):
        workout = make_workout(datetime(2025, 3, 5), {SQUAT: [(90, 5), (105, 3), (100, 5)]})
        best = last_completed_set(SQUAT, [workout])
        assert (best.weight, best.reps) == (105, 3)

    def test_weight_tie_keeps_first_set(self):
        workout = make_workout(datetime(2025, 3, 5), {SQUAT: [(100, 5), (100, 3)]})
        assert last_completed_set(SQUAT, [workout]).reps == 5

    def test_ignores_incomplete_sets(self):
        latest = make_workout(datetime(2025, 3, 8), {SQUAT: [(140, 5)]}, completed=False)
        earlier = make_workout(datetime(2025, 3, 5), {SQUAT: [(100, 5)]})
        assert last_completed_set(SQUAT, [latest, earlier]).weight == 100

    def test_ignores_sessions_without_the_exercise(self):
        latest = make_workout(datetime(2025, 3, 8), {BENCH: [(80, 5)]})
        earlier = make_workout(datetime(2025, 3, 5), {SQUAT: [(100, 5)]})
        assert last_completed_set(SQUAT, [latest, earlier]).weight == 100

    def test_mixed_naive_and_aware_dates(self):
        naive = make_workout(datetime(2025, 3, 3, 18, 0), {SQUAT: [(100, 5)]})
        aware = make_workout(datetime(2025, 3, 5, 18, 0, tzinfo=timezone.utc), {SQUAT: [(110, 5)]})

        assert last_completed_set(SQUAT, [naive, aware]).weight == 110
        assert last_completed_set(SQUAT, [aware, naive]).weight == 110


class TestSuggest:
    def test_week_modifier_applied_to_last_weight(self, engine, template):
        history = [make_workout(datetime(2025, 3, 3), {SQUAT: [(100, 5)]})]

        suggestion = engine.suggest(template, 1.05, history)
        squat = suggestion.for_exercise(SQUAT)

        assert squat.suggested_weight == pytest.approx(105.0)
        assert squat.suggested_reps == 5
        assert squat.suggested_sets == 5
        assert squat.reasoning is SuggestionReasoning.WEEK_MODIFIER
        assert squat.last_weight == 100
        assert squat.last_reps == 5

    def test_no_history_suggests_rep_minimum_at_zero(self, engine, template):
        suggestion = engine.suggest(template, 1.05, [])
        bench = suggestion.for_exercise(BENCH)

        assert bench.suggested_weight == 0.0
        assert bench.suggested_reps == 8
        assert bench.reasoning is SuggestionReasoning.NO_HISTORY
        assert bench.last_weight is None

    def test_deload_reasoning_below_threshold(self, engine, template):
        history = [make_workout(datetime(2025, 3, 3), {SQUAT: [(100, 5)]})]
        suggestion = engine.suggest(template, 0.6, history)
        squat = suggestion.for_exercise(SQUAT)

        assert squat.reasoning is SuggestionReasoning.DELOAD
        assert squat.suggested_weight == pytest.approx(60.0)

    def test_threshold_itself_is_not_deload(self, engine, template):
        history = [make_workout(datetime(2025, 3, 3), {SQUAT: [(100, 5)]})]
        squat = engine.suggest(template, DELOAD_THRESHOLD, history).for_exercise(SQUAT)
        assert squat.reasoning is SuggestionReasoning.WEEK_MODIFIER

    def test_one_suggestion_per_exercise_in_template_order(self, engine, template):
        suggestion = engine.suggest(template, 1.0, [])

        assert [e.exercise_id for e in suggestion.exercises] == [SQUAT, BENCH]
        assert suggestion.template_id == "day-a"
        assert suggestion.week_modifier == 1.0

    def test_mixed_naive_and_aware_history(self, engine, template):
        history = [
            make_workout(datetime(2025, 3, 3, 18, 0), {SQUAT: [(100, 5)]}),
            make_workout(datetime(2025, 3, 5, 18, 0, tzinfo=timezone.utc), {SQUAT: [(110, 5)]}),
        ]

        squat = engine.suggest(template, 1.05, history).for_exercise(SQUAT)
        assert squat.suggested_weight == pytest.approx(115.5)

    def test_same_inputs_same_output(self, engine, template):
        history = [make_workout(datetime(2025, 3, 3), {SQUAT: [(100, 5)], BENCH: [(60, 10)]})]
        first = engine.suggest(template, 1.025, history)
        second = engine.suggest(template, 1.025, history)
        assert first == second

    def test_weights_are_not_rounded(self, engine, template):
        history = [make_workout(datetime(2025, 3, 3), {SQUAT: [(97.5, 5)]})]
        squat = engine.suggest(template, 1.025, history).for_exercise(SQUAT)
        assert squat.suggested_weight == pytest.approx(97.5 * 1.025)


class TestScaleSetCount:
    @pytest.mark.parametrize(
        "sets,modifier,expected",
        [(5, 1.0, 5), (5, 0.6, 3), (3, 0.6, 2), (1, 0.5, 1), (4, 1.5, 6)],
    )
    def test_scale(self, sets, modifier, expected):
        assert scale_set_count(sets, modifier) == expected
