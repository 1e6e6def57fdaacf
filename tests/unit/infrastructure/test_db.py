"""Unit tests for database session setup."""

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.infrastructure import db
from app.infrastructure.config.settings import settings


@pytest.fixture(autouse=True)
def reset_engine():
    """Drop cached engines around each test."""
    db.get_engine.cache_clear()
    db.get_session_factory.cache_clear()
    yield
    db.get_engine.cache_clear()
    db.get_session_factory.cache_clear()


def test_session_requires_database_url(monkeypatch):
    """Test that sessions cannot be opened without DATABASE_URL."""
    monkeypatch.setattr(settings, "database_url", "")

    with pytest.raises(ValueError, match="DATABASE_URL"):
        db.get_db_session()


def test_session_uses_database_url(monkeypatch):
    """Test that sessions are bound to the configured database."""
    monkeypatch.setattr(settings, "database_url", "sqlite://")

    session = db.get_db_session()
    try:
        assert isinstance(session, Session)
        assert session.execute(text("SELECT 1")).scalar() == 1
    finally:
        session.close()

    assert db.get_engine() is db.get_engine()
