import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, Float, TIMESTAMP, ForeignKey, Index, func
from sqlalchemy.sql import text as sql_text
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class QuestionCategory(str, enum.Enum):
    """When a question is asked."""
    INITIAL_MATCHING = "INITIAL_MATCHING"
    TEMPERATURE_REFINE = "TEMPERATURE_REFINE"


class Question(Base):
    """
    A questionnaire question.

    order is both the display position and the key into the scoring
    coefficient table. Questions are soft-deleted through is_active; at most
    one active question may hold a given order.
    """
    __tablename__ = 'questions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_text = Column(Text, nullable=False)
    question_type = Column(String(50), nullable=False)  # context, sentiment, expectation, distance, comfort
    question_category = Column(String(50), nullable=False, default=QuestionCategory.INITIAL_MATCHING.value)
    order = Column("order", Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=True, onupdate=utcnow)

    choices = relationship(
        "QuestionChoice",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionChoice.order",
    )

    __table_args__ = (
        Index(
            'uq_questions_active_order',
            'order',
            unique=True,
            postgresql_where=sql_text('is_active'),
            sqlite_where=sql_text('is_active = 1'),
        ),
        Index('idx_questions_category', 'question_category'),
    )


class QuestionChoice(Base):
    """
    A selectable answer of a question.

    temperature_weight is author supplied (0.0-1.0 by convention) and is not
    normalised anywhere.
    """
    __tablename__ = 'question_choices'

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Integer, ForeignKey('questions.id', ondelete='CASCADE'), nullable=False)
    choice_text = Column(Text, nullable=False)
    choice_value = Column(String(100), nullable=False)
    order = Column("order", Integer, nullable=False)
    temperature_weight = Column(Float, nullable=False, default=0.0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    question = relationship("Question", back_populates="choices")

    __table_args__ = (
        Index('idx_question_choices_question', 'question_id'),
    )
