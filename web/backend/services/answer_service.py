#!/usr/bin/env python3
"""
Answer service - submission and listing of participant answers.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from core.matching import AnswerStore
from database.models import Answer
from database.repository import Repository
from ..models.requests import AnswerSubmission
from ..models.responses import AnswerResponse
from ..utils import safe_int, safe_datetime_iso

logger = logging.getLogger(__name__)


class AnswerService:
    """Service wrapping the answer store."""

    def __init__(self, db: Session):
        self.store = AnswerStore(Repository(db))

    def submit(self, participant_code: str, submission: AnswerSubmission) -> None:
        pairs = [(item.question_id, item.choice_id) for item in submission.answers]
        self.store.submit(participant_code, pairs)

    def get_answers(self, participant_code: str) -> List[AnswerResponse]:
        answers = self.store.get_by_participant(participant_code)
        return [self._to_answer_response(a) for a in answers]

    @staticmethod
    def _to_answer_response(answer: Answer) -> AnswerResponse:
        choice = answer.choice
        return AnswerResponse(
            id=safe_int(answer.id),
            question_id=safe_int(answer.question_id),
            choice_id=safe_int(answer.choice_id),
            question_order=safe_int(answer.question_order),
            choice_text=choice.choice_text if choice else None,
            choice_value=choice.choice_value if choice else None,
            answered_at=safe_datetime_iso(answer.answered_at)
        )
