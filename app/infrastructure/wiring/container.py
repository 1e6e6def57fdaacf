"""Dependency injection container."""

from functools import lru_cache
from typing import Optional

from app.application.ports.content_repository import ContentRepository
from app.application.ports.counselor_repository import CounselorRepository
from app.application.ports.file_storage import FileStorage
from app.application.ports.lead_lock import LeadLock
from app.application.ports.lead_repository import LeadRepository
from app.application.use_cases.get_lead_document import GetLeadDocument
from app.application.use_cases.upload_lead_documents import UploadLeadDocuments
from app.infrastructure.config.settings import Settings, settings
from app.infrastructure.logging.logger import log_event
from app.infrastructure.wiring.dependencies import (
    create_content_repository,
    create_counselor_repository,
    create_file_storage,
    create_lead_lock,
    create_lead_repository,
)


class Container:
    """Dependency injection container."""

    def __init__(self, app_settings: Optional[Settings] = None) -> None:
        """
        Initialize container with dependencies.

        Args:
            app_settings: Settings to build adapters from, defaults to the environment
        """
        self._settings = app_settings or settings

        # Repositories
        self._lead_repository = create_lead_repository(self._settings)
        self._counselor_repository = create_counselor_repository(self._settings)
        self._content_repository = create_content_repository(self._settings)

        # Storage and locking
        self._file_storage = create_file_storage(self._settings)
        self._lead_lock = create_lead_lock(self._settings)

        # Use cases
        self._upload_lead_documents = UploadLeadDocuments(
            self._lead_repository,
            self._counselor_repository,
            self._file_storage,
            self._lead_lock,
            logger=log_event,
        )
        self._get_lead_document = GetLeadDocument(self._lead_repository, self._file_storage)

    @property
    def settings(self) -> Settings:
        """Get settings."""
        return self._settings

    @property
    def lead_repository(self) -> LeadRepository:
        """Get lead repository."""
        return self._lead_repository

    @property
    def counselor_repository(self) -> CounselorRepository:
        """Get counselor repository."""
        return self._counselor_repository

    @property
    def content_repository(self) -> ContentRepository:
        """Get content repository."""
        return self._content_repository

    @property
    def file_storage(self) -> FileStorage:
        """Get file storage."""
        return self._file_storage

    @property
    def lead_lock(self) -> LeadLock:
        """Get lead lock."""
        return self._lead_lock

    async def close(self) -> None:
        """Close adapter connections."""
        await self._lead_lock.close()

    @property
    def upload_lead_documents(self) -> UploadLeadDocuments:
        """Get upload lead documents use case."""
        return self._upload_lead_documents

    @property
    def get_lead_document(self) -> GetLeadDocument:
        """Get lead document use case."""
        return self._get_lead_document


@lru_cache
def get_container() -> Container:
    """
    FastAPI dependency returning the process-wide container.

    Tests replace it through ``app.dependency_overrides``.
    """
    return Container()


async def close_container() -> None:
    """Release the connections of the process-wide container, if one was built."""
    if get_container.cache_info().currsize:
        await get_container().close()
        get_container.cache_clear()
