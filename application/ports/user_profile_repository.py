"""
User Profile Repository Interface (Port).

The service is single-user: there is exactly one profile, created on first
access.
"""
from typing import Protocol

from domain.models import UserProfile


class UserProfileRepository(Protocol):
    """Abstract interface for the user profile."""

    def fetch_or_create(self) -> UserProfile:
        """
        Get the profile, creating an empty one if none exists.

        Returns:
            The single UserProfile
        """
        ...

    def persist(self, profile: UserProfile) -> UserProfile:
        """Write the profile's fields back to storage."""
        ...
