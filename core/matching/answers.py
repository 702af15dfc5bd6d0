#!/usr/bin/env python3
"""
Answer store - full-replace submission of a participant's answers.

A submission deletes whatever the participant submitted before and inserts
the new set in the same transaction. There is no incremental save: answers
only exist once a complete submission has committed.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from core.errors import NotFoundError, BusinessRuleError, EmptySubmissionError
from database.models import Answer, Participant
from database.repository import Repository

logger = logging.getLogger(__name__)

AnswerPair = Tuple[int, int]  # (question_id, choice_id)


def _dedupe_by_question(answers: Iterable[AnswerPair]) -> List[AnswerPair]:
    """Keep one answer per question; a later entry replaces an earlier one."""
    by_question = {}
    for question_id, choice_id in answers:
        by_question.pop(question_id, None)
        by_question[question_id] = choice_id
    return list(by_question.items())


class AnswerStore:
    """Submission and lookup of participant answers."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def _get_participant(self, participant_code: str) -> Participant:
        participant = self.repo.matchings.get_participant_by_code(participant_code)
        if participant is None:
            raise NotFoundError(f"Participant not found: {participant_code}")
        return participant

    def submit(self, participant_code: str, answers: Sequence[AnswerPair]) -> List[Answer]:
        """
        Replace all answers of a participant.

        Args:
            participant_code: Bearer code of the participant.
            answers: Ordered (question_id, choice_id) pairs.

        Returns:
            The stored answers.

        Raises:
            NotFoundError: Unknown participant, question or choice.
            EmptySubmissionError: No answers given.
            BusinessRuleError: A choice does not belong to its question.
        """
        if not answers:
            raise EmptySubmissionError("Answer list is empty")

        pairs = _dedupe_by_question(answers)

        with self.repo.transaction():
            participant = self._get_participant(participant_code)

            # One query each for all referenced questions and choices
            questions = self.repo.questions.get_questions_by_ids(q for q, _ in pairs)
            choices = self.repo.questions.get_choices_by_ids(c for _, c in pairs)

            new_answers = []
            for question_id, choice_id in pairs:
                question = questions.get(question_id)
                if question is None:
                    raise NotFoundError(f"Question not found: {question_id}")

                choice = choices.get(choice_id)
                if choice is None:
                    raise NotFoundError(f"Choice not found: {choice_id}")
                if choice.question_id != question.id:
                    raise BusinessRuleError(
                        f"Choice {choice_id} does not belong to question {question_id}"
                    )

                new_answers.append(Answer(
                    participant_id=participant.id,
                    question_id=question.id,
                    choice_id=choice.id,
                    question_order=question.order,
                    choice_weight=choice.temperature_weight,
                ))

            removed = self.repo.answers.delete_for_participant(participant.id)
            self.repo.answers.add_answers(new_answers)
            self.repo.db.expire(participant, ['answers'])

        logger.info(
            f"Answers submitted for participant: {participant_code}, "
            f"count: {len(new_answers)} (replaced {removed})"
        )
        return new_answers

    def get_by_participant(self, participant_code: str) -> List[Answer]:
        participant = self._get_participant(participant_code)
        return self.repo.answers.get_for_participant(participant.id)

    def get_by_matching(self, matching_id: int) -> List[Answer]:
        return self.repo.answers.get_for_matching(matching_id)
