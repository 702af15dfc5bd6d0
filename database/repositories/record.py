import logging
from typing import Optional, Dict, Any
from sqlalchemy import select

from database.models import Record
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RecordRepository(BaseRepository):
    def get_by_record_id(self, record_id: str) -> Optional[Record]:
        stmt = select(Record).where(Record.record_id == record_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_matching_id(self, matching_id: int) -> Optional[Record]:
        stmt = select(Record).where(Record.matching_id == matching_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists_for_matching(self, matching_id: int) -> bool:
        stmt = select(Record.id).where(Record.matching_id == matching_id)
        return self.db.execute(stmt).first() is not None

    def create_record(
        self,
        record_id: str,
        matching_id: int,
        temperature: float,
        temperature_diff: float,
        summary: Dict[str, Any],
    ) -> Record:
        record = Record(
            record_id=record_id,
            matching_id=matching_id,
            temperature=temperature,
            temperature_diff=temperature_diff,
            is_active=True,
            summary=summary,
        )
        self.db.add(record)
        self.flush()
        return record

    def update_active_status(self, record: Record, is_active: bool) -> Record:
        record.is_active = is_active
        self.flush()
        return record
