"""In-memory lead repository adapter."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from app.application.dtos.lead import Lead, LeadDocument, normalize_phone
from app.application.ports.lead_repository import LeadRepository
from app.domain.errors import ConflictError

FIRST_LINK_ID = 1000


class InMemoryLeadRepository(LeadRepository):
    """In-memory implementation of lead repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: list[Lead] = []  # insertion order

    def _index_of(self, link_id: int) -> Optional[int]:
        for index, lead in enumerate(self._storage):
            if lead.id == link_id:
                return index
        return None

    def _next_link_id(self) -> int:
        ids = [lead.id for lead in self._storage if lead.id is not None]
        return max(ids) + 1 if ids else FIRST_LINK_ID

    async def get_by_link_id(self, link_id: int) -> Optional[Lead]:
        """
        Get a lead by its numeric id.

        Args:
            link_id: Numeric lead identifier

        Returns:
            Lead DTO, or None if not found
        """
        index = self._index_of(link_id)
        return None if index is None else self._storage[index]

    async def get_by_phone(self, phone: str) -> Optional[Lead]:
        """
        Get the oldest lead with a phone number.

        Args:
            phone: Phone number, whitespace ignored

        Returns:
            Lead DTO, or None if not found
        """
        wanted = normalize_phone(phone)
        for lead in self._storage:
            if lead.phone is not None and normalize_phone(lead.phone) == wanted:
                return lead
        return None

    async def list(self) -> list[Lead]:
        """
        List all leads.

        Returns:
            Leads, newest first
        """
        return list(reversed(self._storage))

    async def add(self, lead: Lead) -> Lead:
        """
        Insert a new lead.

        Args:
            lead: Lead DTO

        Returns:
            Stored lead
        """
        if lead.id is not None and self._index_of(lead.id) is not None:
            raise ConflictError(f"Lead with id {lead.id} already exists")
        update: dict[str, Any] = {}
        if lead.id is None:
            update["id"] = self._next_link_id()
        if lead.phone is not None:
            update["phone"] = normalize_phone(lead.phone)
        lead = lead.model_copy(update=update)
        self._storage.append(lead)
        return lead

    async def update_fields(self, link_id: int, fields: dict[str, Any]) -> Optional[Lead]:
        """
        Replace a subset of fields on a lead.

        Args:
            link_id: Numeric lead identifier
            fields: Field name to new value

        Returns:
            Updated lead, or None if not found
        """
        index = self._index_of(link_id)
        if index is None:
            return None
        updated = self._storage[index].model_copy(update=fields)
        self._storage[index] = updated
        return updated

    async def replace_documents_by_phone(
        self, phone: str, documents: list[LeadDocument]
    ) -> Lead:
        """
        Replace documents of the lead with a phone number, creating it if absent.

        Args:
            phone: Phone number
            documents: New document list

        Returns:
            Updated or created lead
        """
        wanted = normalize_phone(phone)
        for index, lead in enumerate(self._storage):
            if lead.phone is not None and normalize_phone(lead.phone) == wanted:
                updated = lead.model_copy(update={"documents": list(documents)})
                self._storage[index] = updated
                return updated

        created = Lead(
            pk=uuid4().hex,
            id=self._next_link_id(),
            phone=wanted,
            documents=list(documents),
            created_at=datetime.now(timezone.utc),
        )
        self._storage.append(created)
        return created
