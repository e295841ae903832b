# ============================================================
# Core DB connection
# ============================================================
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from madlib.core.errors import SchemaInitError, StorageError
from madlib.db.models import Base


def build_engine(database_url: str) -> Engine:
    """Create the single shared engine the plugin talks to."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    """Create the madlib tables if they are missing.

    Raises:
        SchemaInitError: If the tables cannot be created. Callers must not
            continue without them.
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        raise SchemaInitError(f"Could not create madlib tables: {exc}") from exc


@contextmanager
def storage_guard(db: Session) -> Iterator[None]:
    """Roll back and re-raise any backend failure as a StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(str(exc)) from exc
