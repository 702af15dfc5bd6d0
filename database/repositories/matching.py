import logging
from typing import Optional
from sqlalchemy import select, func

from database.models import Matching, Participant
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchingRepository(BaseRepository):
    def code_exists(self, code: str) -> bool:
        stmt = select(Matching.id).where(Matching.code == code)
        return self.db.execute(stmt).first() is not None

    def get_by_code(self, code: str, for_update: bool = False) -> Optional[Matching]:
        stmt = select(Matching).where(Matching.code == code)
        if for_update:
            # Row lock serialises joins/record creation on the same matching
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_id(self, matching_id: int, for_update: bool = False) -> Optional[Matching]:
        stmt = select(Matching).where(Matching.id == matching_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def create_matching(self, code: str, status: str) -> Matching:
        matching = Matching(code=code, status=status)
        self.db.add(matching)
        self.flush()  # Generate ID
        return matching

    def count_participants(self, matching_id: int) -> int:
        stmt = select(func.count(Participant.id)).where(Participant.matching_id == matching_id)
        return self.db.execute(stmt).scalar_one()

    def add_participant(self, matching: Matching, participant_code: str, slot: int) -> Participant:
        participant = Participant(
            matching_id=matching.id,
            participant_code=participant_code,
            slot=slot,
        )
        self.db.add(participant)
        self.flush()
        return participant

    def get_participant_by_code(self, participant_code: str) -> Optional[Participant]:
        stmt = select(Participant).where(Participant.participant_code == participant_code)
        return self.db.execute(stmt).scalar_one_or_none()
