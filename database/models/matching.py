import enum

from sqlalchemy import Column, Integer, String, TIMESTAMP, ForeignKey, UniqueConstraint, CheckConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class MatchingStatus(str, enum.Enum):
    """Lifecycle states of a matching. Transitions only move forward, one step at a time."""
    WAITING = "waiting"
    ESTABLISHED = "established"
    COMPLETED = "completed"

    def can_transition_to(self, target: "MatchingStatus") -> bool:
        return _NEXT_STATUS.get(self) is target


_NEXT_STATUS = {
    MatchingStatus.WAITING: MatchingStatus.ESTABLISHED,
    MatchingStatus.ESTABLISHED: MatchingStatus.COMPLETED,
}


class Matching(Base):
    """
    A session pairing up to max_participants anonymous participants.

    Owns its participants and its record; deleting a matching deletes both.
    """
    __tablename__ = 'matchings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(10), nullable=False, unique=True)
    status = Column(String(20), nullable=False, default=MatchingStatus.WAITING.value)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    completed_at = Column(TIMESTAMP(timezone=True), nullable=True)

    participants = relationship(
        "Participant",
        back_populates="matching",
        cascade="all, delete-orphan",
        order_by="Participant.slot",
    )
    record = relationship("Record", back_populates="matching", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_matchings_status', 'status'),
    )


class Participant(Base):
    """
    One side of a matching.

    participant_code is the bearer handle used to submit answers. slot is the
    1-based join position; UNIQUE(matching_id, slot) stops two concurrent
    joins from taking the same free seat.
    """
    __tablename__ = 'participants'

    id = Column(Integer, primary_key=True, autoincrement=True)
    matching_id = Column(Integer, ForeignKey('matchings.id', ondelete='CASCADE'), nullable=False)
    participant_code = Column(String(36), nullable=False, unique=True)
    slot = Column(Integer, nullable=False)
    joined_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    matching = relationship("Matching", back_populates="participants")
    answers = relationship(
        "Answer",
        back_populates="participant",
        cascade="all, delete-orphan",
        order_by="Answer.id",
    )

    __table_args__ = (
        UniqueConstraint('matching_id', 'slot', name='uq_participants_matching_slot'),
        CheckConstraint('slot >= 1', name='ck_participants_slot_positive'),
        Index('idx_participants_matching', 'matching_id'),
    )
