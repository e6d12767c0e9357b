"""
Program Repository Interface (Port).

Programs are stored as whole aggregates (weeks and days included).
"""
from typing import List, Optional, Protocol

from domain.models import TrainingProgram


class ProgramRepository(Protocol):
    """Abstract interface for training program persistence."""

    def fetch_by_id(self, program_id: str) -> Optional[TrainingProgram]:
        """
        Get a program with its weeks and days.

        Returns:
            TrainingProgram or None if not found
        """
        ...

    def fetch_all(self) -> List[TrainingProgram]:
        """
        Get every program.

        Returns:
            Programs ordered presets first, then by name
        """
        ...

    def save(self, program: TrainingProgram) -> TrainingProgram:
        """Insert a program, or overwrite it when the id already exists."""
        ...

    def update(self, program: TrainingProgram) -> TrainingProgram:
        """
        Persist changes to an existing program.

        Raises:
            ProgramNotFoundError: If the program does not exist
        """
        ...

    def delete(self, program_id: str) -> bool:
        """
        Delete a program.

        Returns:
            True if deleted, False if not found
        """
        ...
