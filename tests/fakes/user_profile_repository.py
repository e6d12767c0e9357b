"""
Fake User Profile Repository and Exercise Resolver for testing.
"""
from typing import Dict, Optional

from domain.models import ExerciseIdentity, UserProfile


class FakeUserProfileRepository:
    """
    In-memory fake implementation of UserProfileRepository.

    Holds a single profile; `persist_count` lets tests assert writes.
    """

    def __init__(self, profile: Optional[UserProfile] = None):
        self._profile: Optional[UserProfile] = (
            profile.model_copy(deep=True) if profile else None
        )
        self.persist_count = 0

    def reset(self) -> None:
        self._profile = None
        self.persist_count = 0

    @property
    def stored(self) -> Optional[UserProfile]:
        """The stored profile (test helper)."""
        return self._profile

    # =========================================================================
    # UserProfileRepository Protocol Methods
    # =========================================================================

    def fetch_or_create(self) -> UserProfile:
        if self._profile is None:
            self._profile = UserProfile(id="profile-1", name="Test User")
        return self._profile.model_copy(deep=True)

    def persist(self, profile: UserProfile) -> UserProfile:
        self._profile = profile.model_copy(deep=True)
        self.persist_count += 1
        return profile


class FakeExerciseResolver:
    """In-memory fake implementation of ExerciseResolver."""

    def __init__(self, names: Optional[Dict[str, str]] = None):
        self._names: Dict[str, str] = dict(names or {})

    def seed(self, names: Dict[str, str]) -> None:
        self._names.update(names)

    def resolve_by_id(self, exercise_id: str) -> Optional[ExerciseIdentity]:
        name = self._names.get(exercise_id)
        return ExerciseIdentity(id=exercise_id, name=name) if name else None
