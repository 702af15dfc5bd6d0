#!/usr/bin/env python3
"""
Question service - read access to the question catalog.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from core.errors import NotFoundError
from database.models import Question
from database.repository import Repository
from ..models.responses import QuestionResponse, ChoiceResponse
from ..utils import safe_int, safe_str


class QuestionService:
    """Service for listing active questions."""

    def __init__(self, db: Session):
        self.repo = Repository(db)

    def get_questions(self, category: Optional[str] = None) -> List[QuestionResponse]:
        questions = self.repo.questions.get_active_questions(category)
        return [self._to_question_response(q) for q in questions]

    def get_question(self, question_id: int) -> QuestionResponse:
        question = self.repo.questions.get_question(question_id)
        if question is None:
            raise NotFoundError(f"Question not found: {question_id}")
        return self._to_question_response(question)

    @staticmethod
    def _to_question_response(question: Question) -> QuestionResponse:
        return QuestionResponse(
            id=safe_int(question.id),
            question_text=safe_str(question.question_text),
            question_type=safe_str(question.question_type),
            question_category=safe_str(question.question_category),
            order=safe_int(question.order),
            choices=[
                ChoiceResponse(
                    id=safe_int(c.id),
                    choice_text=safe_str(c.choice_text),
                    choice_value=safe_str(c.choice_value),
                    order=safe_int(c.order)
                )
                for c in question.choices
            ]
        )
