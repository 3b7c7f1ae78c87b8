"""
Database Configuration Module

SQLAlchemy 2.0 setup for the demo service.

Session Management Pattern
==========================
One session per request:
1. Request arrives -> create a new session
2. Resolvers read through ``info.context["db"]``
3. Close the session when the request ends

The engine is synchronous; the demo data set is tiny and the resolvers
are plain functions.
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from relay_connection.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# SQLite needs check_same_thread=False because FastAPI may use the session
# from a different thread than the one that created it.
connect_args = (
    {"check_same_thread": False}
    if settings.database_url.startswith("sqlite")
    else {}
)

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,
    echo=settings.debug,  # Log SQL in debug mode
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """Base class for the demo models."""
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Usage in Routes:
        @app.post("/graphql")
        def graphql_server(request: Request, data: dict = Body(...), db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """Create all demo tables (no-op for tables that already exist)."""
    Base.metadata.create_all(bind=engine)

