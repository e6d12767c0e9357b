"""
Template Repository Interface (Port).
"""
from typing import List, Optional, Protocol

from domain.models import WorkoutTemplate


class TemplateRepository(Protocol):
    """Abstract interface for workout template persistence."""

    def fetch_by_id(self, template_id: str) -> Optional[WorkoutTemplate]:
        """
        Get a template with its exercises.

        Returns:
            WorkoutTemplate or None if not found
        """
        ...

    def fetch_all(self) -> List[WorkoutTemplate]:
        """Get every template, ordered by name."""
        ...

    def save(self, template: WorkoutTemplate) -> WorkoutTemplate:
        """Insert a template, or overwrite it when the id already exists."""
        ...
