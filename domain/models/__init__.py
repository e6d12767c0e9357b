"""
Domain models for the training progression service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):

- TrainingProgram → ProgramWeek → ProgramDay: the multi-week plan
- WorkoutTemplate → TemplateExercise: set/rep prescriptions
- Workout → WorkoutExercise → WorkoutSet: logged sessions
- PersonalRecord: append-only e1RM bests
- UserProfile: active-program state
- CalendarItem, SuggestedWorkout: derived views

Usage:
    >>> from domain.models import Workout, WorkoutExercise, WorkoutSet
    >>> workout = Workout.model_validate_json(payload)
"""

from domain.models.calendar import CalendarItem, CalendarItemKind
from domain.models.exercise import ExerciseIdentity
from domain.models.personal_record import PersonalRecord, best_by_exercise, current_records
from domain.models.program import (
    DifficultyLevel,
    ProgramCategory,
    ProgramDay,
    ProgramWeek,
    TrainingPhase,
    TrainingProgram,
    WeekProgressionPattern,
    Weekday,
)
from domain.models.suggestion import ExerciseSuggestion, SuggestedWorkout, SuggestionReasoning
from domain.models.template import TemplateCategory, TemplateExercise, WorkoutTemplate
from domain.models.user_profile import UserProfile
from domain.models.workout import Workout, WorkoutExercise, WorkoutSet, WorkoutType, as_utc, utc_now

__all__ = [
    # Program
    "TrainingProgram",
    "ProgramWeek",
    "ProgramDay",
    "ProgramCategory",
    "DifficultyLevel",
    "TrainingPhase",
    "WeekProgressionPattern",
    "Weekday",
    # Template
    "WorkoutTemplate",
    "TemplateExercise",
    "TemplateCategory",
    # Workout
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "WorkoutType",
    "as_utc",
    "utc_now",
    # Records / profile
    "PersonalRecord",
    "best_by_exercise",
    "current_records",
    "UserProfile",
    "ExerciseIdentity",
    # Derived views
    "CalendarItem",
    "CalendarItemKind",
    "SuggestedWorkout",
    "ExerciseSuggestion",
    "SuggestionReasoning",
]
