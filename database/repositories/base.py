from sqlalchemy.orm import Session


class BaseRepository:
    """Session holder shared by the aggregate repositories."""

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        """Send pending changes so generated ids and constraint errors surface now."""
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
