"""
Supabase Template Repository Implementation.

Template exercises live in the `exercises` JSONB column of
`workout_templates`.
"""
from typing import List, Optional

from supabase import Client

from domain.models import WorkoutTemplate

TABLE = "workout_templates"


class SupabaseTemplateRepository:
    """Supabase implementation of TemplateRepository."""

    def __init__(self, client: Client):
        self._client = client

    def fetch_by_id(self, template_id: str) -> Optional[WorkoutTemplate]:
        result = self._client.table(TABLE).select("*").eq("id", template_id).limit(1).execute()
        if not result.data:
            return None
        return WorkoutTemplate.model_validate(result.data[0])

    def fetch_all(self) -> List[WorkoutTemplate]:
        result = self._client.table(TABLE).select("*").order("name").execute()
        return [WorkoutTemplate.model_validate(row) for row in result.data or []]

    def save(self, template: WorkoutTemplate) -> WorkoutTemplate:
        result = self._client.table(TABLE).upsert(template.model_dump(mode="json")).execute()
        if result.data:
            return WorkoutTemplate.model_validate(result.data[0])
        return template
