#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy.orm import Session

from core.scorer import TemperatureScorer, TableWeightingPolicy, WeightingPolicy
from database.database import create_db_engine, create_session_factory
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str):
        self.engine = create_db_engine(url)
        self.SessionLocal = create_session_factory(self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Services commit their own transactions; the session is only closed here.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Create the global database manager on first use."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(get_config().database.url)
    return _db_manager


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_db_manager().get_session()


@lru_cache()
def get_weighting_policy() -> WeightingPolicy:
    """Weighting policy built once from the scorer configuration."""
    return TableWeightingPolicy.from_config(get_config().scorer)


def get_scorer() -> TemperatureScorer:
    return TemperatureScorer(get_weighting_policy())
