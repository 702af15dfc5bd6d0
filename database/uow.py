import contextlib
import logging

from database.database import SessionLocal
from database.repository import Repository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def repository_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a Repository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with repository_uow() as repo:
            matching = repo.matchings.get_by_code(code)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        repo = Repository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
