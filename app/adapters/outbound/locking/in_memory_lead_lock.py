"""Process-local lead lock adapter."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.ports.lead_lock import LeadLock


class InMemoryLeadLock(LeadLock):
    """One asyncio lock per lead. Only serializes requests within a single process."""

    def __init__(self) -> None:
        """Initialize lock registry."""
        self._locks: dict[int, asyncio.Lock] = {}
        self._holders: dict[int, int] = {}

    @asynccontextmanager
    async def hold(self, link_id: int) -> AsyncIterator[None]:
        """
        Hold the lock of a lead.

        Args:
            link_id: Numeric lead identifier
        """
        lock = self._locks.setdefault(link_id, asyncio.Lock())
        self._holders[link_id] = self._holders.get(link_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[link_id] -= 1
            if self._holders[link_id] == 0:
                del self._holders[link_id]
                del self._locks[link_id]
