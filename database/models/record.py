from sqlalchemy import Column, Integer, String, Float, Boolean, TIMESTAMP, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType, utcnow


class Record(Base):
    """
    The scored outcome of a completed matching.

    Created exactly once per matching (matching_id is unique) and immutable
    afterwards except for the is_active flag.
    """
    __tablename__ = 'records'

    id = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String(36), nullable=False, unique=True)
    matching_id = Column(Integer, ForeignKey('matchings.id', ondelete='CASCADE'), nullable=False, unique=True)

    temperature = Column(Float)
    temperature_diff = Column(Float)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    summary = Column(JSONType, default=dict)

    matching = relationship("Matching", back_populates="record")

    __table_args__ = (
        Index('idx_records_active', 'is_active'),
        Index('idx_records_created', 'created_at'),
    )
