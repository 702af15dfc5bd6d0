#!/usr/bin/env python3
"""
Record orchestration - scores an established matching exactly once.

create_record reads every answer of the matching, scores them with the
TemperatureScorer, stores the Record and completes the matching. The record
insert and the status change commit together or not at all.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from core.errors import NotFoundError, ConflictError, NoAnswersError, InvalidStateError
from core.matching.answers import AnswerStore
from core.matching.codes import CodeGenerator
from core.matching.lifecycle import transition
from core.scorer import TemperatureScorer, ScoringAnswer, TemperatureResult
from database.models import Answer, MatchingStatus, Record
from database.models.base import utcnow
from database.repository import Repository

logger = logging.getLogger(__name__)


def build_scoring_input(answers: List[Answer]) -> List[ScoringAnswer]:
    """
    Reduce stored answers to scorer input.

    Each answer carries the weight and ordering key captured when it was
    submitted, so two answers to the same choice may score differently if the
    catalog changed in between.
    """
    return [
        ScoringAnswer(
            participant_id=answer.participant_id,
            question_id=answer.question_id,
            choice_id=answer.choice_id,
            choice_weight=answer.choice_weight,
            question_order=answer.question_order,
        )
        for answer in answers
    ]


def build_summary(answers: List[Answer]) -> Dict[str, Any]:
    """
    Per-question summary keyed by "Q<order>".

    Example:
        {"Q3": {"question_text": "...", "question_type": "sentiment",
                "answers": [{"participant_slot": 1, "choice_text": "Exciting",
                             "choice_value": "excited"}]}}
    """
    summary: Dict[str, Any] = {}
    for answer in sorted(answers, key=lambda a: (a.question_order, a.participant.slot, a.id)):
        entry = summary.setdefault(f"Q{answer.question_order}", {
            "question_text": answer.question.question_text,
            "question_type": answer.question.question_type,
            "answers": [],
        })
        entry["answers"].append({
            "participant_slot": answer.participant.slot,
            "choice_text": answer.choice.choice_text,
            "choice_value": answer.choice.choice_value,
        })
    return summary


class RecordOrchestrator:
    """Creates, reads and deactivates matching records."""

    def __init__(
        self,
        repo: Repository,
        scorer: TemperatureScorer,
        code_generator: Optional[CodeGenerator] = None,
    ):
        self.repo = repo
        self.scorer = scorer
        self.codes = code_generator or CodeGenerator()
        self.answers = AnswerStore(repo)

    def create_record(self, matching_id: int) -> Record:
        """
        Score a matching and persist its record.

        Raises:
            NotFoundError: Unknown matching.
            ConflictError: The matching already has a record.
            InvalidStateError: The matching is not established.
            NoAnswersError: Nobody in the matching has submitted answers.
        """
        try:
            with self.repo.transaction():
                matching = self.repo.matchings.get_by_id(matching_id, for_update=True)
                if matching is None:
                    raise NotFoundError(f"Matching not found: {matching_id}")

                if self.repo.records.exists_for_matching(matching_id):
                    raise ConflictError(f"Record already created for matching {matching_id}")

                if matching.status != MatchingStatus.ESTABLISHED.value:
                    raise InvalidStateError(
                        f"Matching {matching_id} is {matching.status}, expected established"
                    )

                answers = self.answers.get_by_matching(matching_id)
                if not answers:
                    raise NoAnswersError(f"No answers submitted for matching {matching_id}")

                result = self._score(answers)

                record = self.repo.records.create_record(
                    record_id=self.codes.generate_record_id(),
                    matching_id=matching.id,
                    temperature=result.average_temperature,
                    temperature_diff=result.temperature_diff,
                    summary=build_summary(answers),
                )

                transition(matching, MatchingStatus.COMPLETED)
                matching.completed_at = utcnow()
                self.repo.db.flush()
        except IntegrityError as e:
            logger.warning(f"Concurrent record creation lost for matching {matching_id}: {e.orig}")
            raise ConflictError(f"Record already created for matching {matching_id}") from e

        logger.info(
            f"Record created for matching: {matching_id}, recordId: {record.record_id}, "
            f"temperature: {record.temperature:.4f}, diff: {record.temperature_diff:.4f}"
        )
        return record

    def _score(self, answers: List[Answer]) -> TemperatureResult:
        result = self.scorer.score(build_scoring_input(answers))
        if result.participant_count == 0:
            logger.warning(f"Degenerate temperature for {len(answers)} answers")
        return result

    def get_record(self, record_id: str) -> Record:
        record = self.repo.records.get_by_record_id(record_id)
        if record is None:
            raise NotFoundError(f"Record not found: {record_id}")
        return record

    def get_by_matching(self, matching_id: int) -> Record:
        record = self.repo.records.get_by_matching_id(matching_id)
        if record is None:
            raise NotFoundError(f"Record not found for matching: {matching_id}")
        return record

    def deactivate(self, record_id: str) -> Record:
        """Soft-deactivate a record. The owning matching is left untouched."""
        with self.repo.transaction():
            record = self.get_record(record_id)
            self.repo.records.update_active_status(record, False)

        logger.info(f"Record deactivated: {record_id}")
        return record
