"""
User profile program-state fields.

`active_program_id` is a weak reference: deleting a program clears it
explicitly (see `clear_program_reference`) rather than cascading.
"""

from datetime import date, datetime
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


class UserProfile(BaseModel):
    """The single local user's profile."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = ""
    active_program_id: Optional[str] = None
    active_program_start_date: Optional[date] = None
    current_week_number: Optional[int] = Field(default=None, ge=1)
    program_completed_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_program_state(self) -> "UserProfile":
        self._check_program_state()
        return self

    def _check_program_state(self) -> None:
        fields = (
            self.active_program_id,
            self.active_program_start_date,
            self.current_week_number,
        )
        if any(f is not None for f in fields) and not all(f is not None for f in fields):
            raise ValueError(
                "active_program_id, active_program_start_date and "
                "current_week_number must be set together"
            )

    @property
    def has_active_program(self) -> bool:
        return self.active_program_id is not None

    def set_program_state(
        self,
        program_id: Optional[str],
        start_date: Optional[date],
        week: Optional[int],
    ) -> None:
        """Update all three program fields at once, keeping the invariant."""
        if week is not None and week < 1:
            raise ValueError(f"current_week_number must be >= 1, got {week}")
        self.active_program_id = program_id
        self.active_program_start_date = start_date
        self.current_week_number = week
        self._check_program_state()
