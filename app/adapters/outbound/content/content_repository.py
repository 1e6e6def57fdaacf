"""In-memory content repository adapter."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from app.application.dtos.content import ContentCollection, ContentItem
from app.application.ports.content_repository import ContentRepository


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of content repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[ContentCollection, list[ContentItem]] = {}

    def _items(self, collection: ContentCollection) -> list[ContentItem]:
        return self._storage.setdefault(collection, [])

    def _index_of(self, collection: ContentCollection, pk: str) -> Optional[int]:
        for index, item in enumerate(self._items(collection)):
            if item.pk == pk:
                return index
        return None

    async def list(self, collection: ContentCollection) -> list[ContentItem]:
        """List items of a collection, newest first."""
        return list(reversed(self._items(collection)))

    async def get(self, collection: ContentCollection, pk: str) -> Optional[ContentItem]:
        """Get one item by primary key."""
        index = self._index_of(collection, pk)
        return None if index is None else self._items(collection)[index]

    async def add(self, collection: ContentCollection, data: dict[str, Any]) -> ContentItem:
        """Insert an item and assign its primary key."""
        item = ContentItem(
            pk=uuid4().hex,
            collection=collection,
            data=dict(data),
            created_at=datetime.now(timezone.utc),
        )
        self._items(collection).append(item)
        return item

    async def update(
        self, collection: ContentCollection, pk: str, data: dict[str, Any]
    ) -> Optional[ContentItem]:
        """Merge fields into an item."""
        index = self._index_of(collection, pk)
        if index is None:
            return None
        items = self._items(collection)
        updated = items[index].model_copy(update={"data": {**items[index].data, **data}})
        items[index] = updated
        return updated

    async def delete(self, collection: ContentCollection, pk: str) -> bool:
        """Delete an item."""
        index = self._index_of(collection, pk)
        if index is None:
            return False
        del self._items(collection)[index]
        return True

    async def increment(self, collection: ContentCollection, pk: str, field: str) -> bool:
        """Add one to a counter field."""
        item = await self.get(collection, pk)
        if item is None:
            return False
        current = item.data.get(field) or 0
        await self.update(collection, pk, {field: current + 1})
        return True
