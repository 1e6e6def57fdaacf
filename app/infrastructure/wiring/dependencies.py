"""Dependency injection factory functions."""

from app.adapters.outbound.content import (
    InMemoryContentRepository,
    PostgresContentRepository,
)
from app.adapters.outbound.counselor import (
    InMemoryCounselorRepository,
    PostgresCounselorRepository,
)
from app.adapters.outbound.lead import (
    InMemoryLeadRepository,
    PostgresLeadRepository,
)
from app.adapters.outbound.locking import InMemoryLeadLock, NoOpLeadLock, RedisLeadLock
from app.adapters.outbound.storage import LocalFileStorage
from app.application.ports.content_repository import ContentRepository
from app.application.ports.counselor_repository import CounselorRepository
from app.application.ports.file_storage import FileStorage
from app.application.ports.lead_lock import LeadLock
from app.application.ports.lead_repository import LeadRepository
from app.domain.value_objects.upload_policy import UploadPolicy
from app.infrastructure.config.settings import Settings


def _require_database_url(settings: Settings, setting_name: str) -> None:
    if not settings.database_url:
        raise ValueError(f"DATABASE_URL is required when {setting_name}=postgres")


def create_lead_repository(settings: Settings) -> LeadRepository:
    """
    Factory function to create lead repository.

    Returns:
        LeadRepository instance
    """
    if settings.lead_repository == "postgres":
        _require_database_url(settings, "LEAD_REPOSITORY")
        return PostgresLeadRepository()
    else:
        return InMemoryLeadRepository()


def create_counselor_repository(settings: Settings) -> CounselorRepository:
    """
    Factory function to create counselor repository.

    Returns:
        CounselorRepository instance
    """
    if settings.counselor_repository == "postgres":
        _require_database_url(settings, "COUNSELOR_REPOSITORY")
        return PostgresCounselorRepository()
    else:
        return InMemoryCounselorRepository()


def create_content_repository(settings: Settings) -> ContentRepository:
    """
    Factory function to create content repository.

    Returns:
        ContentRepository instance
    """
    if settings.content_repository == "postgres":
        _require_database_url(settings, "CONTENT_REPOSITORY")
        return PostgresContentRepository()
    else:
        return InMemoryContentRepository()


def create_file_storage(settings: Settings) -> FileStorage:
    """
    Factory function to create file storage.

    Returns:
        FileStorage instance rooted at UPLOAD_DIR
    """
    policy = UploadPolicy(max_bytes=settings.max_upload_size_bytes)
    return LocalFileStorage(settings.upload_dir, policy=policy)


def create_lead_lock(settings: Settings) -> LeadLock:
    """
    Factory function to create lead lock.

    Returns:
        LeadLock instance (Redis, in-memory or NoOp)
    """
    if settings.lead_lock_backend == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when LEAD_LOCK_BACKEND=redis")
        return RedisLeadLock(
            settings.redis_url,
            timeout_seconds=settings.lead_lock_timeout_seconds,
            blocking_timeout_seconds=settings.lead_lock_blocking_timeout_seconds,
        )
    if settings.lead_lock_backend == "none":
        return NoOpLeadLock()
    return InMemoryLeadLock()
