#!/usr/bin/env python3
"""
Matching service - maps matching lifecycle operations to API responses.
"""

import logging
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matching import MatchingLifecycle
from database.models import Matching, Participant
from database.repository import Repository
from ..models.responses import (
    MatchingResponse,
    ParticipantResponse,
    MatchingStatusResponse
)
from ..utils import safe_int, safe_str, safe_datetime_iso

logger = logging.getLogger(__name__)


class MatchingService:
    """Service for creating, joining and inspecting matchings."""

    def __init__(self, db: Session, config: MatchingConfig):
        self.lifecycle = MatchingLifecycle(Repository(db), config)

    def create_matching(self) -> MatchingResponse:
        return self._to_matching_response(self.lifecycle.create_matching())

    def join_matching(self, code: str) -> ParticipantResponse:
        participant = self.lifecycle.join_matching(code)
        return self._to_participant_response(participant, code)

    def get_matching(self, code: str) -> MatchingResponse:
        return self._to_matching_response(self.lifecycle.get_matching(code))

    def get_status(self, code: str) -> MatchingStatusResponse:
        view = self.lifecycle.get_status(code)
        return MatchingStatusResponse(
            code=view.code,
            status=view.status,
            participant_count=view.participant_count,
            max_participants=view.max_participants
        )

    @staticmethod
    def _to_matching_response(matching: Matching) -> MatchingResponse:
        return MatchingResponse(
            id=safe_int(matching.id),
            code=safe_str(matching.code),
            status=safe_str(matching.status),
            created_at=safe_datetime_iso(matching.created_at),
            completed_at=safe_datetime_iso(matching.completed_at)
        )

    @staticmethod
    def _to_participant_response(participant: Participant, code: str) -> ParticipantResponse:
        return ParticipantResponse(
            id=safe_int(participant.id),
            participant_code=safe_str(participant.participant_code),
            slot=safe_int(participant.slot),
            joined_at=safe_datetime_iso(participant.joined_at),
            matching_code=code
        )
