"""Redis lead lock adapter."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from redis import asyncio as aioredis
from redis.exceptions import LockError, RedisError

from app.application.ports.lead_lock import LeadLock
from app.domain.errors import ServiceUnavailableError
from app.infrastructure.logging.logger import logger


class RedisLeadLock(LeadLock):
    """Redis adapter for lead lock, shared by every API process."""

    KEY_PREFIX = "lead:lock:"

    def __init__(
        self,
        redis_url: str,
        timeout_seconds: int = 30,
        blocking_timeout_seconds: int = 10,
    ) -> None:
        """
        Initialize Redis lead lock.

        Args:
            redis_url: Redis connection URL
            timeout_seconds: Lock expiry, bounds how long a crashed holder blocks a lead
            blocking_timeout_seconds: How long to wait for the lock before failing
        """
        self._redis_url = redis_url
        self._timeout_seconds = timeout_seconds
        self._blocking_timeout_seconds = blocking_timeout_seconds
        self._client: Optional[aioredis.Redis] = None

    def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, link_id: int) -> str:
        """
        Make Redis key for a lead lock.

        Args:
            link_id: Numeric lead identifier

        Returns:
            Redis key string
        """
        return f"{self.KEY_PREFIX}{link_id}"

    @asynccontextmanager
    async def hold(self, link_id: int) -> AsyncIterator[None]:
        """
        Hold the distributed lock of a lead.

        Args:
            link_id: Numeric lead identifier

        Raises:
            ServiceUnavailableError: If Redis fails or the lock is not acquired in time
        """
        lock = self._get_client().lock(
            self._make_key(link_id),
            timeout=self._timeout_seconds,
            blocking_timeout=self._blocking_timeout_seconds,
        )
        try:
            acquired = await lock.acquire()
        except RedisError as e:
            logger.error(f"Redis error while locking lead {link_id}: {str(e)}")
            raise ServiceUnavailableError("Failed to lock lead", e) from e
        if not acquired:
            raise ServiceUnavailableError(f"Lead {link_id} is busy, try again later")

        try:
            yield
        finally:
            try:
                await lock.release()
            except (LockError, RedisError) as e:
                # The lock expired or Redis went away; the write already happened
                logger.warning(f"Unable to release lock of lead {link_id}: {str(e)}")

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
