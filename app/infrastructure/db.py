"""SQLAlchemy engine and sessions for the Postgres repositories."""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.config.settings import settings


@lru_cache
def get_engine() -> Engine:
    """
    Create the engine on first use, so in-memory deployments never need a database.

    Returns:
        Engine bound to DATABASE_URL

    Raises:
        ValueError: If DATABASE_URL is not configured
    """
    if not settings.database_url:
        raise ValueError("DATABASE_URL is required for database operations")
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,  # Verify connections before using
        echo=settings.debug_mode,  # Log SQL queries in debug mode
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    """Get the process-wide session factory."""
    return sessionmaker(autoflush=False, bind=get_engine())


def get_db_session() -> Session:
    """
    Open a database session. The caller closes it.

    Returns:
        SQLAlchemy session instance
    """
    return get_session_factory()()
