"""Lead repository port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.application.dtos.lead import Lead, LeadDocument


class LeadRepository(ABC):
    """Port interface for lead repository."""

    @abstractmethod
    async def get_by_link_id(self, link_id: int) -> Optional[Lead]:
        """
        Get a lead by its numeric id.

        Args:
            link_id: Numeric lead identifier

        Returns:
            Lead DTO, or None if not found
        """
        pass

    @abstractmethod
    async def get_by_phone(self, phone: str) -> Optional[Lead]:
        """
        Get the first (oldest) lead registered with a phone number.

        Phone numbers are compared with whitespace removed. Uniqueness is not
        enforced, so callers must not assume a single match exists.

        Args:
            phone: Phone number

        Returns:
            Lead DTO, or None if not found
        """
        pass

    @abstractmethod
    async def list(self) -> list[Lead]:
        """
        List all leads.

        Returns:
            Leads, newest first
        """
        pass

    @abstractmethod
    async def add(self, lead: Lead) -> Lead:
        """
        Insert a new lead.

        Args:
            lead: Lead DTO; when ``id`` is None the next numeric id is assigned

        Returns:
            Stored lead

        Raises:
            ConflictError: If the numeric id is already taken
        """
        pass

    @abstractmethod
    async def update_fields(self, link_id: int, fields: dict[str, Any]) -> Optional[Lead]:
        """
        Replace a subset of fields on a lead in one write.

        Args:
            link_id: Numeric lead identifier
            fields: Field name (snake_case) to new value

        Returns:
            Updated lead, or None if not found
        """
        pass

    @abstractmethod
    async def replace_documents_by_phone(
        self, phone: str, documents: list[LeadDocument]
    ) -> Lead:
        """
        Replace the documents of the lead with a phone number, creating it if absent.

        Args:
            phone: Phone number
            documents: New document list

        Returns:
            Updated or created lead
        """
        pass
