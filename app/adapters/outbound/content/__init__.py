"""Content repository adapters."""

from app.adapters.outbound.content.content_repository import InMemoryContentRepository
from app.adapters.outbound.content.postgres_content_repository import PostgresContentRepository

__all__ = [
    "InMemoryContentRepository",
    "PostgresContentRepository",
]
