"""
GetPersonalRecords Use Case.

Read side of the personal record history.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import PersonalRecordRepository
from domain.models import PersonalRecord, current_records


@dataclass
class ListRecordsResult:
    """Current record per exercise, strongest first."""

    records: List[PersonalRecord] = field(default_factory=list)
    total: int = 0


@dataclass
class RecordHistoryResult:
    """Chronological record history for one exercise."""

    exercise_id: str
    records: List[PersonalRecord] = field(default_factory=list)
    current: Optional[PersonalRecord] = None


class GetPersonalRecordsUseCase:
    def __init__(self, record_repo: PersonalRecordRepository) -> None:
        self._record_repo = record_repo

    def list_current(self, limit: Optional[int] = None) -> ListRecordsResult:
        records = current_records(self._record_repo.fetch_all())
        total = len(records)
        if limit is not None:
            records = records[:limit]
        return ListRecordsResult(records=records, total=total)

    def history(self, exercise_id: str) -> RecordHistoryResult:
        records = sorted(
            self._record_repo.fetch_for_exercise(exercise_id), key=lambda r: r.achieved_at
        )
        best = max(records, key=lambda r: r.estimated_1rm) if records else None
        return RecordHistoryResult(exercise_id=exercise_id, records=records, current=best)
