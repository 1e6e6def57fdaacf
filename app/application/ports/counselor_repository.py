"""Counselor repository port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.application.dtos.counselor import Counselor


class CounselorRepository(ABC):
    """Port interface for counselor repository."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Counselor]:
        """
        Get a counselor by exact username.

        Args:
            username: Login name

        Returns:
            Counselor DTO, or None if not found
        """
        pass

    @abstractmethod
    async def get_by_pk(self, pk: str) -> Optional[Counselor]:
        """Get a counselor by storage primary key."""
        pass

    @abstractmethod
    async def list(self) -> list[Counselor]:
        """List all counselors, newest first."""
        pass

    @abstractmethod
    async def add(self, counselor: Counselor) -> Counselor:
        """
        Insert a new counselor.

        Raises:
            ConflictError: If the username is already taken
        """
        pass

    @abstractmethod
    async def update_fields(self, counselor_id: int, fields: dict[str, Any]) -> Optional[Counselor]:
        """
        Update a counselor found by numeric id.

        Returns:
            Updated counselor, or None if not found
        """
        pass

    @abstractmethod
    async def update_fields_by_pk(self, pk: str, fields: dict[str, Any]) -> Optional[Counselor]:
        """
        Update a counselor found by storage primary key.

        Returns:
            Updated counselor, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, counselor_id: int) -> bool:
        """
        Delete a counselor by numeric id.

        Returns:
            True if a record was deleted
        """
        pass
