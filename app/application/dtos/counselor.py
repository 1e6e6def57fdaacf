"""Counselor DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.application.dtos.base import DTO, InputDTO


class Counselor(DTO):
    """Counselor who handles leads."""

    pk: str
    id: Optional[int] = None
    username: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    designation: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime


class CounselorCreate(InputDTO):
    """Body of the counselor creation endpoint."""

    id: Optional[int] = Field(default=None, ge=0)
    username: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    designation: Optional[str] = None
    profile_image: Optional[str] = None


class CounselorUpdate(InputDTO):
    """Profile fields a counselor record may change. Username is immutable."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    designation: Optional[str] = None
    profile_image: Optional[str] = None


class CounselorProfile(DTO):
    """Public view returned by the current-counselor endpoint."""

    id: str
    name: str
    username: str
