"""
Supabase User Profile Repository Implementation.

The service keeps a single profile row in `user_profiles`; the first read
creates it.
"""
import logging

from supabase import Client

from domain.models import UserProfile

logger = logging.getLogger(__name__)

TABLE = "user_profiles"


class SupabaseUserProfileRepository:
    """Supabase implementation of UserProfileRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def fetch_or_create(self) -> UserProfile:
        result = self._client.table(TABLE).select("*").limit(1).execute()
        if result.data:
            return UserProfile.model_validate(result.data[0])

        profile = UserProfile()
        self._client.table(TABLE).insert(profile.model_dump(mode="json")).execute()
        logger.info(f"Created user profile {profile.id}")
        return profile

    def persist(self, profile: UserProfile) -> UserProfile:
        self._client.table(TABLE).upsert(profile.model_dump(mode="json")).execute()
        return profile
