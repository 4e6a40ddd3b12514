from pathlib import Path

from sqlalchemy import create_engine, text, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from muro.core import config
from muro.core.db.tables.base import Base
from muro.core.db.tables.account import Account  # noqa: F401
from muro.core.db.tables.story import Story  # noqa: F401
from muro.core.db.tables.post import Post  # noqa: F401
from muro.core.db.tables.comment import Comment  # noqa: F401
from muro.core.logger import get_logger

logger = get_logger(__name__)


class RecordStore:
    """
    Handle on the relational store.

    Availability is checked on demand with is_available() instead of being
    recorded once at startup, so an outage at any point is reported the
    same way.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=engine
        )

    def session(self) -> Session:
        return self._session_factory()

    def is_available(self) -> bool:
        """Run a trivial query and report whether the store answered."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Record store unavailable: {e}")
            return False

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)


def build_engine(database_url: str) -> Engine:
    if ":memory:" in database_url:
        # In-memory SQLite uses a single-connection pool without sizing options
        return create_engine(database_url, echo=False)

    if database_url.startswith("sqlite:///"):
        # Ensure the directory of the SQLite file exists
        Path(database_url.removeprefix("sqlite:///")).parent.mkdir(
            parents=True, exist_ok=True
        )

    # Configure engine with connection pooling
    return create_engine(
        database_url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


store = RecordStore(build_engine(config.DATABASE_URL))
