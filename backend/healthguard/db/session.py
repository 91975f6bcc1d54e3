"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

The session factory hands one session to every request through the
get_db() dependency; all record access for a user action goes through it.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from healthguard.core.config import settings


def _engine_options(database_url: str) -> dict:
    """
    Build create_engine() keyword arguments for the configured backend.

    PostgreSQL gets connection health checks and recycling; SQLite (used for
    local development) needs check_same_thread disabled because FastAPI runs
    sync endpoints in a thread pool.
    """
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Check connection health before using
        "pool_recycle": 3600,  # Recycle connections every hour
    }


# Create SQLAlchemy engine
# - echo=settings.DEBUG: Log all SQL queries when debug mode is enabled
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL)
)

# Session factory
# - autocommit=False: Require explicit commit() calls
# - autoflush=False: Require explicit flush() calls
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    Yields:
        Database session object

    Usage in FastAPI endpoint:
        @router.get("/health-records")
        def list_records(db: Session = Depends(get_db)):
            ...

    The session is closed after the endpoint returns, even if an exception
    occurs.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
