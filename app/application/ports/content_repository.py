"""Content repository port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.application.dtos.content import ContentCollection, ContentItem


class ContentRepository(ABC):
    """Port interface for the marketing content collections."""

    @abstractmethod
    async def list(self, collection: ContentCollection) -> list[ContentItem]:
        """
        List items of a collection.

        Args:
            collection: Collection to read

        Returns:
            Items, newest first
        """
        pass

    @abstractmethod
    async def get(self, collection: ContentCollection, pk: str) -> Optional[ContentItem]:
        """Get one item by primary key."""
        pass

    @abstractmethod
    async def add(self, collection: ContentCollection, data: dict[str, Any]) -> ContentItem:
        """
        Insert an item.

        Args:
            collection: Target collection
            data: camelCase field mapping

        Returns:
            Stored item with its assigned primary key
        """
        pass

    @abstractmethod
    async def update(
        self, collection: ContentCollection, pk: str, data: dict[str, Any]
    ) -> Optional[ContentItem]:
        """
        Merge fields into an item.

        Returns:
            Updated item, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, collection: ContentCollection, pk: str) -> bool:
        """
        Delete an item.

        Returns:
            True if an item was deleted
        """
        pass

    @abstractmethod
    async def increment(self, collection: ContentCollection, pk: str, field: str) -> bool:
        """
        Add one to a numeric field, treating a missing field as 0.

        Returns:
            True if the item exists and was updated
        """
        pass
