"""
Progressive overload suggestions.

Given a template, the active week's intensity modifier and recent workout
history, suggest the next target for each prescribed exercise:

- No completed history for the exercise: rep range minimum at weight 0, so the
  user picks a starting weight.
- Otherwise: the heaviest completed set from the most recent session that
  trained the exercise, scaled by the week modifier.

Suggested weights are left unrounded; plate rounding is a display concern.
"""

import logging
from typing import Iterable, List, Optional

from domain.models import (
    ExerciseSuggestion,
    SuggestedWorkout,
    SuggestionReasoning,
    TemplateExercise,
    Workout,
    WorkoutSet,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

# Week modifiers below this are treated as deload weeks
DELOAD_THRESHOLD = 0.9


def scale_set_count(set_count: int, volume_modifier: float) -> int:
    """
    Apply a volume modifier to a prescribed set count.

    Examples:
        >>> scale_set_count(5, 0.6)
        3
        >>> scale_set_count(1, 0.5)
        1
    """
    return max(1, int(round(set_count * volume_modifier)))


def last_completed_set(
    exercise_id: str, previous_workouts: Iterable[Workout]
) -> Optional[WorkoutSet]:
    """
    Heaviest completed set of an exercise in its most recent session.

    Sessions are ranked by workout date; a session counts only when it holds at
    least one completed set of the exercise. Ties on weight keep the first set.
    """
    latest: Optional[Workout] = None
    latest_sets: List[WorkoutSet] = []

    for workout in previous_workouts:
        sets = [
            s
            for e in workout.exercises
            if e.exercise_id == exercise_id
            for s in e.completed_sets
        ]
        if not sets:
            continue
        if latest is None or workout.date > latest.date:
            latest = workout
            latest_sets = sets

    if not latest_sets:
        return None

    best = latest_sets[0]
    for workout_set in latest_sets[1:]:
        if workout_set.weight > best.weight:
            best = workout_set
    return best


class OverloadSuggestionEngine:
    """
    Pure suggestion engine: same inputs always give the same output.

    Usage:
        >>> engine = OverloadSuggestionEngine()
        >>> suggestion = engine.suggest(template, 1.05, recent_workouts)
        >>> suggestion.for_exercise("barbell-back-squat").reasoning
        <SuggestionReasoning.WEEK_MODIFIER: 'week_modifier'>
    """

    def suggest(
        self,
        template: WorkoutTemplate,
        week_modifier: float,
        previous_workouts: Iterable[Workout],
    ) -> SuggestedWorkout:
        """
        Suggest targets for every exercise in a template.

        Args:
            template: Template being started
            week_modifier: Intensity modifier for the current program week
                (1.0 outside a program)
            previous_workouts: Recent logged workouts, any order

        Returns:
            SuggestedWorkout with one entry per template exercise, in order
        """
        history = list(previous_workouts)
        suggestions = [
            self._suggest_exercise(exercise, week_modifier, history)
            for exercise in template.ordered_exercises()
        ]

        return SuggestedWorkout(
            template_id=template.id,
            template_name=template.name,
            week_modifier=week_modifier,
            exercises=suggestions,
        )

    def _suggest_exercise(
        self,
        exercise: TemplateExercise,
        week_modifier: float,
        history: List[Workout],
    ) -> ExerciseSuggestion:
        last_set = last_completed_set(exercise.exercise_id, history)

        if last_set is None:
            return ExerciseSuggestion(
                exercise_id=exercise.exercise_id,
                exercise_name=exercise.exercise_name,
                suggested_sets=exercise.set_count,
                suggested_reps=exercise.rep_range_min,
                suggested_weight=0.0,
                reasoning=SuggestionReasoning.NO_HISTORY,
            )

        reasoning = (
            SuggestionReasoning.DELOAD
            if week_modifier < DELOAD_THRESHOLD
            else SuggestionReasoning.WEEK_MODIFIER
        )
        return ExerciseSuggestion(
            exercise_id=exercise.exercise_id,
            exercise_name=exercise.exercise_name,
            suggested_sets=exercise.set_count,
            suggested_reps=exercise.rep_range_min,
            suggested_weight=last_set.weight * week_modifier,
            reasoning=reasoning,
            last_weight=last_set.weight,
            last_reps=last_set.reps,
        )
