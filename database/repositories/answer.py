import logging
from typing import List
from sqlalchemy import select, delete
from sqlalchemy.orm import joinedload

from database.models import Answer, Participant, Question
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AnswerRepository(BaseRepository):
    def delete_for_participant(self, participant_id: int) -> int:
        stmt = delete(Answer).where(Answer.participant_id == participant_id)
        result = self.db.execute(stmt, execution_options={"synchronize_session": "fetch"})
        return result.rowcount or 0

    def add_answers(self, answers: List[Answer]) -> List[Answer]:
        self.db.add_all(answers)
        self.flush()
        return answers

    def get_for_participant(self, participant_id: int) -> List[Answer]:
        stmt = (
            select(Answer)
            .join(Question, Answer.question_id == Question.id)
            .options(joinedload(Answer.question), joinedload(Answer.choice))
            .where(Answer.participant_id == participant_id)
            .order_by(Question.order, Answer.id)
        )
        return self.db.execute(stmt).scalars().all()

    def get_for_matching(self, matching_id: int) -> List[Answer]:
        """All answers of a matching, ordered by participant slot then answer id."""
        stmt = (
            select(Answer)
            .join(Participant, Answer.participant_id == Participant.id)
            .options(
                joinedload(Answer.participant),
                joinedload(Answer.question),
                joinedload(Answer.choice),
            )
            .where(Participant.matching_id == matching_id)
            .order_by(Participant.slot, Answer.id)
        )
        return self.db.execute(stmt).scalars().all()
