"""In-memory counselor repository adapter."""

from __future__ import annotations

from typing import Any, Optional

from app.application.dtos.counselor import Counselor
from app.application.ports.counselor_repository import CounselorRepository
from app.domain.errors import ConflictError


class InMemoryCounselorRepository(CounselorRepository):
    """In-memory implementation of counselor repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: list[Counselor] = []

    def _replace(self, index: int, fields: dict[str, Any]) -> Counselor:
        updated = self._storage[index].model_copy(update=fields)
        self._storage[index] = updated
        return updated

    async def get_by_username(self, username: str) -> Optional[Counselor]:
        """
        Get a counselor by exact username.

        Args:
            username: Login name

        Returns:
            Counselor DTO, or None if not found
        """
        for counselor in self._storage:
            if counselor.username == username:
                return counselor
        return None

    async def get_by_pk(self, pk: str) -> Optional[Counselor]:
        """Get a counselor by storage primary key."""
        for counselor in self._storage:
            if counselor.pk == pk:
                return counselor
        return None

    async def list(self) -> list[Counselor]:
        """List all counselors, newest first."""
        return list(reversed(self._storage))

    async def add(self, counselor: Counselor) -> Counselor:
        """Insert a new counselor, rejecting duplicate usernames."""
        if await self.get_by_username(counselor.username) is not None:
            raise ConflictError(f"Counselor username '{counselor.username}' is already taken")
        self._storage.append(counselor)
        return counselor

    async def update_fields(self, counselor_id: int, fields: dict[str, Any]) -> Optional[Counselor]:
        """Update the first counselor with a numeric id."""
        for index, counselor in enumerate(self._storage):
            if counselor.id == counselor_id:
                return self._replace(index, fields)
        return None

    async def update_fields_by_pk(self, pk: str, fields: dict[str, Any]) -> Optional[Counselor]:
        """Update a counselor by storage primary key."""
        for index, counselor in enumerate(self._storage):
            if counselor.pk == pk:
                return self._replace(index, fields)
        return None

    async def delete(self, counselor_id: int) -> bool:
        """Delete the first counselor with a numeric id."""
        for index, counselor in enumerate(self._storage):
            if counselor.id == counselor_id:
                del self._storage[index]
                return True
        return False
