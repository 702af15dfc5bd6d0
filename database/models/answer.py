from sqlalchemy import Column, Integer, Float, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class Answer(Base):
    """
    A participant's choice for one question.

    question_order and choice_weight are copied from the question and choice
    when the answer is submitted; scoring reads these copies, so editing a
    question later does not change the temperature of answers already given.
    """
    __tablename__ = 'answers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    participant_id = Column(Integer, ForeignKey('participants.id', ondelete='CASCADE'), nullable=False)
    question_id = Column(Integer, ForeignKey('questions.id'), nullable=False)
    choice_id = Column(Integer, ForeignKey('question_choices.id'), nullable=False)

    # Snapshot at submission time
    question_order = Column(Integer, nullable=False)
    choice_weight = Column(Float, nullable=False)

    answered_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    participant = relationship("Participant", back_populates="answers")
    question = relationship("Question")
    choice = relationship("QuestionChoice")

    __table_args__ = (
        UniqueConstraint('participant_id', 'question_id', name='uq_answers_participant_question'),
        Index('idx_answers_participant', 'participant_id'),
    )
