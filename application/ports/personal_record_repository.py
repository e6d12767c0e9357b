"""
Personal Record Repository Interface (Port).

Records are append-only history rows. Full recomputation replaces the whole
set in one atomic step via `replace_all`.
"""
from typing import List, Protocol

from domain.models import PersonalRecord


class PersonalRecordRepository(Protocol):
    """Abstract interface for personal record persistence."""

    def fetch_all(self) -> List[PersonalRecord]:
        """
        Get every stored record.

        Returns:
            Records ordered by achieved_at, oldest first
        """
        ...

    def fetch_for_exercise(self, exercise_id: str) -> List[PersonalRecord]:
        """
        Get the record history of one exercise.

        Args:
            exercise_id: Canonical exercise ID (slug)

        Returns:
            Records ordered by achieved_at, oldest first
        """
        ...

    def save(self, record: PersonalRecord) -> PersonalRecord:
        """Append a record."""
        ...

    def clear_all(self) -> None:
        """Delete every record."""
        ...

    def replace_all(self, records: List[PersonalRecord]) -> None:
        """
        Replace the whole record set.

        Clear and insert must commit together: a failure leaves the previous
        records in place.
        """
        ...

    def delete_for_workout(self, workout_id: str) -> int:
        """
        Delete the records achieved in a workout.

        Returns:
            Number of records deleted
        """
        ...
