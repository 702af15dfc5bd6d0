import contextlib
import logging

from sqlalchemy.orm import Session

from database.repositories import (
    MatchingRepository,
    QuestionRepository,
    AnswerRepository,
    RecordRepository,
)

logger = logging.getLogger(__name__)


class Repository:
    """
    All aggregate repositories bound to one Session.

    Every sub-repository shares the session, so work done through any of them
    commits or rolls back together.
    """

    def __init__(self, db: Session):
        self.db = db
        self.matchings = MatchingRepository(db)
        self.questions = QuestionRepository(db)
        self.answers = AnswerRepository(db)
        self.records = RecordRepository(db)

    @contextlib.contextmanager
    def transaction(self):
        """Commit everything done inside the block, or roll all of it back."""
        try:
            yield self
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
