# storefront/database.py
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings
from storefront.core.errors import StorageFailure

settings = get_settings()
logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Local SQLite data file by default.
#
# - check_same_thread=False: FastAPI runs sync endpoints in a thread
#   pool, so a pooled connection may be used by a different thread than
#   the one that opened it.
# ---------------------------------------------------------

db_url = settings.DATABASE_URL

connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

engine = create_engine(
    db_url,
    echo=settings.DATABASE_ECHO,  # set to True if you want to debug SQL queries
    connect_args=connect_args,
)

# Single writer for the shared cart. Held for the whole read-modify-write
# of every cart mutation, including checkout's read-then-clear.
_write_lock = threading.Lock()


def create_db_and_tables(bind: Engine | None = None) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """
    Translate driver/ORM errors raised inside the block into StorageFailure.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Storage error while %s", action)
        raise StorageFailure(f"Storage failure while {action}") from exc


@contextmanager
def write_transaction(session: Session, action: str = "writing") -> Iterator[Session]:
    """
    Run a cart mutation as one serialized, all-or-nothing unit of work.

    - acquires the process-wide writer lock
    - expires cached instances so reads inside the block see current rows
    - commits once on success, rolls back on any exception

    Repositories called inside the block must not commit on their own.
    """
    with _write_lock:
        session.expire_all()
        try:
            with storage_errors(action):
                yield session
                session.commit()
        except Exception:
            session.rollback()
            raise
