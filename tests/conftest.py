"""
pytest Fixtures

Shared fixtures for the library and demo service tests.

FIXTURE SCOPES:
- session scope for the engine (tables created once)
- function scope for sessions (each test rolls back its changes)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the demo app,
# the engine is created from settings at import time.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DIRECTIVE_NAME"] = "connection"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from relay_connection.demo.database import Base, get_db
from relay_connection.demo.main import app
from relay_connection.demo.seed import seed_demo_data


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    SQLite in-memory engine shared by the whole test session.

    StaticPool keeps a single connection alive; without it the in-memory
    database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Session wrapped in a transaction that is rolled back after the test.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def seeded_db(db_session: Session) -> Session:
    """Session with the demo people, films and credits loaded."""
    seed_demo_data(db_session)
    return db_session


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client for the demo app using the test database session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def items() -> list[dict]:
    """Three items with an id, a secondary id and a name."""
    return [
        {"id": 10001, "otherId": 8001, "name": "foo"},
        {"id": 10002, "otherId": 8002, "name": "bar"},
        {"id": 10003, "otherId": 8003, "name": "baz"},
    ]
