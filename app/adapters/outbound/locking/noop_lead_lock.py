"""No-op lead lock adapter for when serialization is disabled."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.ports.lead_lock import LeadLock


class NoOpLeadLock(LeadLock):
    """No-op adapter: concurrent intakes for one lead race, last writer wins."""

    @asynccontextmanager
    async def hold(self, link_id: int) -> AsyncIterator[None]:
        """
        Yield immediately.

        Args:
            link_id: Numeric lead identifier (ignored)
        """
        yield
