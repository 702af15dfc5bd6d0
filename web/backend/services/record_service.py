#!/usr/bin/env python3
"""
Record service - record creation, lookup and deactivation.
"""

import logging
from sqlalchemy.orm import Session

from core.matching import RecordOrchestrator
from core.scorer import TemperatureScorer
from database.models import Record
from database.repository import Repository
from ..models.responses import RecordResponse
from ..utils import safe_float, safe_int, safe_str, safe_datetime_iso

logger = logging.getLogger(__name__)


class RecordService:
    """Service wrapping the record orchestrator."""

    def __init__(self, db: Session, scorer: TemperatureScorer):
        self.orchestrator = RecordOrchestrator(Repository(db), scorer)

    def create_record(self, matching_id: int) -> RecordResponse:
        return self._to_record_response(self.orchestrator.create_record(matching_id))

    def get_record(self, record_id: str) -> RecordResponse:
        return self._to_record_response(self.orchestrator.get_record(record_id))

    def get_by_matching(self, matching_id: int) -> RecordResponse:
        return self._to_record_response(self.orchestrator.get_by_matching(matching_id))

    def deactivate(self, record_id: str) -> None:
        self.orchestrator.deactivate(record_id)

    @staticmethod
    def _to_record_response(record: Record) -> RecordResponse:
        return RecordResponse(
            record_id=safe_str(record.record_id),
            matching_id=safe_int(record.matching_id),
            temperature=safe_float(record.temperature),
            temperature_diff=safe_float(record.temperature_diff),
            is_active=bool(record.is_active),
            created_at=safe_datetime_iso(record.created_at),
            summary=record.summary or {}
        )
