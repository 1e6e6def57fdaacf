"""Unit tests for counselor repositories (in-memory, and Postgres using SQLite in-memory)."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.counselor import (
    InMemoryCounselorRepository,
    PostgresCounselorRepository,
)
from app.adapters.outbound.lead.models import Base
from app.application.dtos.counselor import Counselor
from app.domain.errors import ConflictError, ServiceUnavailableError


def make_counselor(pk: str, username: str, counselor_id=None) -> Counselor:
    return Counselor(
        pk=pk,
        id=counselor_id,
        username=username,
        name=f"{username.title()} Doe",
        email=f"{username}@example.com",
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def sqlite_session_factory():
    """Create a session factory bound to a SQLite in-memory database."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture(params=["in_memory", "postgres"])
def repository(request, sqlite_session_factory):
    """Create each counselor repository implementation."""
    if request.param == "postgres":
        return PostgresCounselorRepository(session_factory=sqlite_session_factory)
    return InMemoryCounselorRepository()


@pytest.mark.asyncio
async def test_add_and_get_by_username(repository):
    """Test storing and finding a counselor."""
    await repository.add(make_counselor("c1", "jane", 7))

    counselor = await repository.get_by_username("jane")

    assert counselor.pk == "c1"
    assert counselor.id == 7
    assert counselor.name == "Jane Doe"
    assert await repository.get_by_username("Jane") is None


@pytest.mark.asyncio
async def test_add_rejects_duplicate_username(repository):
    """Test that usernames are unique."""
    await repository.add(make_counselor("c1", "jane"))

    with pytest.raises(ConflictError):
        await repository.add(make_counselor("c2", "jane"))


@pytest.mark.asyncio
async def test_get_by_pk(repository):
    """Test lookup by storage primary key."""
    await repository.add(make_counselor("c1", "jane"))

    assert (await repository.get_by_pk("c1")).username == "jane"
    assert await repository.get_by_pk("missing") is None


@pytest.mark.asyncio
async def test_list_newest_first(repository):
    """Test list ordering."""
    await repository.add(make_counselor("c1", "jane"))
    await repository.add(make_counselor("c2", "omar"))

    assert [c.pk for c in await repository.list()] == ["c2", "c1"]


@pytest.mark.asyncio
async def test_update_fields_by_numeric_id(repository):
    """Test updating a counselor by its numeric id."""
    await repository.add(make_counselor("c1", "jane", 7))

    updated = await repository.update_fields(7, {"designation": "Senior Counselor"})

    assert updated.designation == "Senior Counselor"
    assert (await repository.get_by_pk("c1")).designation == "Senior Counselor"
    assert await repository.update_fields(8, {"designation": "x"}) is None


@pytest.mark.asyncio
async def test_update_fields_by_pk(repository):
    """Test updating a counselor by primary key."""
    await repository.add(make_counselor("c1", "jane"))

    updated = await repository.update_fields_by_pk("c1", {"phone": "+8801800000000"})

    assert updated.phone == "+8801800000000"
    assert updated.username == "jane"
    assert await repository.update_fields_by_pk("missing", {"phone": "1"}) is None


@pytest.mark.asyncio
async def test_delete(repository):
    """Test deleting a counselor by numeric id."""
    await repository.add(make_counselor("c1", "jane", 7))

    assert await repository.delete(7) is True
    assert await repository.delete(7) is False
    assert await repository.list() == []


@pytest.mark.asyncio
async def test_database_error_is_service_unavailable():
    """Test that SQLAlchemy errors surface as ServiceUnavailableError."""
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    repository = PostgresCounselorRepository(session_factory=lambda: session)

    with pytest.raises(ServiceUnavailableError):
        await repository.get_by_username("jane")

    session.close.assert_called_once()
