"""Lead lock adapters."""

from app.adapters.outbound.locking.in_memory_lead_lock import InMemoryLeadLock
from app.adapters.outbound.locking.noop_lead_lock import NoOpLeadLock
from app.adapters.outbound.locking.redis_lead_lock import RedisLeadLock

__all__ = [
    "InMemoryLeadLock",
    "NoOpLeadLock",
    "RedisLeadLock",
]
