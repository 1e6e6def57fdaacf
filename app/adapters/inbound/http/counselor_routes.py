"""HTTP routes for counselors."""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, Query, status

from app.application.dtos.counselor import (
    Counselor,
    CounselorCreate,
    CounselorProfile,
    CounselorUpdate,
)
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.wiring.container import Container, get_container

router = APIRouter(tags=["counselors"])


def _parse_counselor_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid counselor ID: {raw!r} is not a number") from None


def _changed_fields(body: CounselorUpdate) -> dict[str, Any]:
    fields = body.model_dump(exclude_unset=True)
    if not fields:
        raise ValidationError("No fields to update")
    return fields


def _counselor_response(counselor: Counselor) -> dict[str, Any]:
    return counselor.model_dump(mode="json", by_alias=True)


@router.post("/add_new_counselor", status_code=status.HTTP_201_CREATED)
async def add_new_counselor(
    body: CounselorCreate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Register a counselor.

    Args:
        body: Counselor fields

    Returns:
        Stored counselor

    Raises:
        ConflictError: If the username is taken
    """
    counselor = Counselor(
        pk=uuid4().hex,
        created_at=datetime.now(timezone.utc),
        **body.model_dump(),
    )
    stored = await container.counselor_repository.add(counselor)
    return _counselor_response(stored)


@router.get("/all_counselor_data")
async def all_counselor_data(
    container: Container = Depends(get_container),
) -> list[dict[str, Any]]:
    """List every counselor, newest first."""
    return [_counselor_response(c) for c in await container.counselor_repository.list()]


@router.get("/api/counselors/me")
async def current_counselor(
    counselor_username: Optional[str] = Query(default=None, alias="counselorUsername"),
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Get the profile of the counselor named in the query string.

    Args:
        counselor_username: Login name

    Returns:
        Profile with the storage primary key as ``id``
    """
    username = (counselor_username or "").strip()
    if not username:
        raise ValidationError("Counselor username is required")

    counselor = await container.counselor_repository.get_by_username(username)
    if counselor is None:
        raise NotFoundError("Counselor not found")
    profile = CounselorProfile(id=counselor.pk, name=counselor.name, username=counselor.username)
    return profile.model_dump(by_alias=True)


@router.patch("/api/counselors/{counselor_id}")
async def update_counselor(
    counselor_id: str,
    body: CounselorUpdate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Update a counselor by numeric id."""
    updated = await container.counselor_repository.update_fields(
        _parse_counselor_id(counselor_id), _changed_fields(body)
    )
    if updated is None:
        raise NotFoundError("Counselor not found")
    return _counselor_response(updated)


@router.delete("/api/counselors/{counselor_id}")
async def delete_counselor(
    counselor_id: str,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Delete a counselor by numeric id."""
    deleted = await container.counselor_repository.delete(_parse_counselor_id(counselor_id))
    if not deleted:
        raise NotFoundError("Counselor not found")
    return {"message": "Counselor deleted", "deletedCount": 1}


async def _update_profile(container: Container, pk: str, body: CounselorUpdate) -> dict[str, Any]:
    updated = await container.counselor_repository.update_fields_by_pk(pk, _changed_fields(body))
    if updated is None:
        raise NotFoundError("Counselor not found")
    return _counselor_response(updated)


@router.patch("/update_counselor_data/{pk}")
async def update_counselor_data(
    pk: str,
    body: CounselorUpdate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Update a counselor from the admin dashboard."""
    return await _update_profile(container, pk, body)


@router.patch("/update_account_counselor_information/{pk}")
async def update_account_counselor_information(
    pk: str,
    body: CounselorUpdate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Update a counselor from their own account page."""
    return await _update_profile(container, pk, body)
