"""
Exercise Resolver Interface (Port).

Templates and workouts keep a name snapshot next to each exercise ID. The
resolver looks up the exercise library so current names can be shown; a miss
means the exercise was deleted and the snapshot is used instead.
"""
from typing import Optional, Protocol

from domain.models import ExerciseIdentity


class ExerciseResolver(Protocol):
    """Abstract interface for resolving exercise identities."""

    def resolve_by_id(self, exercise_id: str) -> Optional[ExerciseIdentity]:
        """
        Look up an exercise by its canonical ID (slug).

        Returns:
            ExerciseIdentity or None if the exercise no longer exists
        """
        ...
