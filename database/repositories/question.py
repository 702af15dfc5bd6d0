import logging
from typing import Dict, Iterable, List, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from database.models import Question, QuestionChoice
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class QuestionRepository(BaseRepository):
    def get_active_questions(self, category: Optional[str] = None) -> List[Question]:
        stmt = (
            select(Question)
            .options(selectinload(Question.choices))
            .where(Question.is_active.is_(True))
        )
        if category is not None:
            stmt = stmt.where(Question.question_category == category)
        stmt = stmt.order_by(Question.order)
        return self.db.execute(stmt).scalars().all()

    def get_question(self, question_id: int) -> Optional[Question]:
        stmt = (
            select(Question)
            .options(selectinload(Question.choices))
            .where(Question.id == question_id)
            .where(Question.is_active.is_(True))
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_questions_by_ids(self, question_ids: Iterable[int]) -> Dict[int, Question]:
        """Batch fetch questions in one query, keyed by id."""
        ids = set(question_ids)
        if not ids:
            return {}
        stmt = select(Question).where(Question.id.in_(ids))
        return {q.id: q for q in self.db.execute(stmt).scalars().all()}

    def get_choices_by_ids(self, choice_ids: Iterable[int]) -> Dict[int, QuestionChoice]:
        """Batch fetch choices in one query, keyed by id."""
        ids = set(choice_ids)
        if not ids:
            return {}
        stmt = select(QuestionChoice).where(QuestionChoice.id.in_(ids))
        return {c.id: c for c in self.db.execute(stmt).scalars().all()}

    def count_questions(self) -> int:
        return self.db.execute(select(func.count(Question.id))).scalar_one()

    def add_question(
        self,
        question_text: str,
        question_type: str,
        order: int,
        choices: List[dict],
        question_category: Optional[str] = None,
    ) -> Question:
        question = Question(
            question_text=question_text,
            question_type=question_type,
            order=order,
            is_active=True,
            version=1,
        )
        if question_category is not None:
            question.question_category = question_category

        for choice in choices:
            question.choices.append(QuestionChoice(
                choice_text=choice['choice_text'],
                choice_value=choice['choice_value'],
                order=choice['order'],
                temperature_weight=choice.get('temperature_weight', 0.0),
            ))

        self.db.add(question)
        self.flush()
        return question
