import contextlib
import logging
from typing import Iterator

from sqlalchemy.orm import sessionmaker

from database.repository import Repository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def storage_uow(session_factory: sessionmaker) -> Iterator[Repository]:
    """Per-unit-of-work transaction scope.

    Yields a Repository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with storage_uow(session_factory) as repo:
            resume = repo.resumes.get_by_id(resume_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        repo = Repository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
