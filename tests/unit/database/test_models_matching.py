#!/usr/bin/env python3
"""
Unit tests for the matching, answer and record models.

Tests verify constraints and cascades through the SQLAlchemy ORM interface.

These tests require a database - marked with @pytest.mark.db
"""

import pytest
from sqlalchemy.exc import IntegrityError

from database.models import (
    Matching,
    MatchingStatus,
    Participant,
    Question,
    QuestionChoice,
    Answer,
    Record,
)
from database.repository import Repository
from tests import create_test_session


@pytest.fixture(scope="function")
def db_session(test_engine):
    """Create a fresh database session for each test."""
    session = create_test_session(test_engine)
    yield session
    session.close()


def _matching(db_session, code="ABCDEF"):
    matching = Matching(code=code, status=MatchingStatus.WAITING.value)
    db_session.add(matching)
    db_session.flush()
    return matching


def _question(db_session, order=3, is_active=True):
    question = Question(
        question_text=f"Question {order}",
        question_type="sentiment",
        order=order,
        is_active=is_active,
    )
    question.choices.append(QuestionChoice(
        choice_text="Warm", choice_value="warm", order=1, temperature_weight=0.7
    ))
    db_session.add(question)
    db_session.flush()
    return question


@pytest.mark.db
class TestMatchingStatus:

    def test_forward_transitions_only(self):
        assert MatchingStatus.WAITING.can_transition_to(MatchingStatus.ESTABLISHED)
        assert MatchingStatus.ESTABLISHED.can_transition_to(MatchingStatus.COMPLETED)
        assert not MatchingStatus.WAITING.can_transition_to(MatchingStatus.COMPLETED)
        assert not MatchingStatus.COMPLETED.can_transition_to(MatchingStatus.WAITING)
        assert not MatchingStatus.ESTABLISHED.can_transition_to(MatchingStatus.ESTABLISHED)


@pytest.mark.db
class TestMatchingModel:

    def test_defaults(self, db_session):
        matching = _matching(db_session)
        db_session.commit()

        assert matching.id is not None
        assert matching.created_at is not None
        assert matching.completed_at is None
        assert matching.status == MatchingStatus.WAITING.value

    def test_code_is_unique(self, db_session):
        _matching(db_session, "SAME22")
        with pytest.raises(IntegrityError):
            _matching(db_session, "SAME22")

    def test_slot_is_unique_per_matching(self, db_session):
        matching = _matching(db_session)
        db_session.add(Participant(matching_id=matching.id, participant_code="p-1", slot=1))
        db_session.flush()

        db_session.add(Participant(matching_id=matching.id, participant_code="p-2", slot=1))
        with pytest.raises(IntegrityError):
            db_session.flush()

    def test_slot_must_be_positive(self, db_session):
        matching = _matching(db_session)
        db_session.add(Participant(matching_id=matching.id, participant_code="p-0", slot=0))
        with pytest.raises(IntegrityError):
            db_session.flush()

    def test_one_record_per_matching(self, db_session):
        matching = _matching(db_session)
        repo = Repository(db_session)
        repo.records.create_record("r-1", matching.id, 0.5, 0.0, {})

        with pytest.raises(IntegrityError):
            repo.records.create_record("r-2", matching.id, 0.6, 0.1, {})

    def test_delete_cascades(self, db_session):
        matching = _matching(db_session)
        question = _question(db_session)
        participant = Participant(matching_id=matching.id, participant_code="p-1", slot=1)
        db_session.add(participant)
        db_session.flush()
        db_session.add(Answer(
            participant_id=participant.id,
            question_id=question.id,
            choice_id=question.choices[0].id,
            question_order=question.order,
            choice_weight=0.7,
        ))
        db_session.add(Record(record_id="r-1", matching_id=matching.id, temperature=0.7, temperature_diff=0.0))
        db_session.commit()

        db_session.delete(matching)
        db_session.commit()

        assert db_session.query(Participant).count() == 0
        assert db_session.query(Answer).count() == 0
        assert db_session.query(Record).count() == 0
        assert db_session.query(Question).count() == 1


@pytest.mark.db
class TestQuestionModel:

    def test_active_order_is_unique(self, db_session):
        _question(db_session, order=3)
        with pytest.raises(IntegrityError):
            _question(db_session, order=3)

    def test_inactive_question_may_reuse_order(self, db_session):
        _question(db_session, order=3)
        _question(db_session, order=3, is_active=False)
        db_session.commit()

        assert db_session.query(Question).filter(Question.order == 3, Question.is_active.is_(True)).count() == 1
        assert db_session.query(Question).filter(Question.order == 3).count() == 2

    def test_one_answer_per_question_and_participant(self, db_session):
        matching = _matching(db_session)
        question = _question(db_session)
        participant = Participant(matching_id=matching.id, participant_code="p-1", slot=1)
        db_session.add(participant)
        db_session.flush()

        for _ in range(2):
            db_session.add(Answer(
                participant_id=participant.id,
                question_id=question.id,
                choice_id=question.choices[0].id,
                question_order=3,
                choice_weight=0.7,
            ))
        with pytest.raises(IntegrityError):
            db_session.flush()
