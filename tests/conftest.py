from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from madlib.db.connection import build_session_factory, init_schema
from madlib.domain.fields import FieldRepository
from madlib.domain.templates import TemplateRepository
from madlib.plugin import MadlibPlugin

from tests.fixtures.recording import RecordingLogger, RecordingSender


@pytest.fixture
def engine():
    # One shared in-memory database for every session in the test.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def templates(db) -> TemplateRepository:
    return TemplateRepository(db)


@pytest.fixture
def fields(db) -> FieldRepository:
    return FieldRepository(db)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def plugin(engine, sender, logger) -> MadlibPlugin:
    return MadlibPlugin(engine=engine, send_reply=sender, logger=logger)
