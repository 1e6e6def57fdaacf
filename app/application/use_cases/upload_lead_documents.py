"""Upload lead documents use case (student document intake)."""

import logging
import math
from datetime import datetime, timezone
from types import TracebackType
from typing import Any, Callable, Optional
from uuid import uuid4

from app.application.dtos.intake import DocumentIntakeRequest, StoredFile
from app.application.dtos.lead import Lead, LeadDocument
from app.application.ports.counselor_repository import CounselorRepository
from app.application.ports.file_storage import FileStorage
from app.application.ports.lead_lock import LeadLock
from app.application.ports.lead_repository import LeadRepository
from app.domain.errors import DomainError, NotFoundError, ValidationError
from app.domain.value_objects.document_category import (
    missing_required_categories,
    resolve_category,
)
from app.domain.value_objects.lead_status import LeadStatus

DOCUMENT_ID_LENGTH = 9


def new_document_id() -> str:
    """Random short opaque token. Uniqueness is not checked."""
    return uuid4().hex[:DOCUMENT_ID_LENGTH]


def parse_link_id(raw: str) -> int:
    """
    Parse the numeric lead identifier of a URL.

    Args:
        raw: Path segment

    Returns:
        Numeric identifier

    Raises:
        ValidationError: If the value is not an integer
    """
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"Invalid lead ID: {raw!r} is not a number") from None


def lead_id_of(raw: str) -> Optional[int]:
    """
    Read a lead identifier the way the public intake link carries it.

    Whitespace is ignored and integral decimal forms such as ``"1042.0"``
    name the same lead as ``"1042"``.

    Args:
        raw: Path segment

    Returns:
        Numeric identifier, or None when the segment names no lead
    """
    text = str(raw).strip()
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


class StagedBatch:
    """Scoped holder of staged uploads.

    Every file staged or promoted through the batch is discarded when the
    ``async with`` block exits, unless ``retain`` was called first.
    """

    def __init__(self, storage: FileStorage) -> None:
        """
        Initialize staged batch.

        Args:
            storage: File storage the files are written to
        """
        self._storage = storage
        self._files: list[StoredFile] = []
        self._retained = False

    async def __aenter__(self) -> "StagedBatch":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self._retained:
            for stored in self._files:
                await self._storage.discard(stored)

    async def stage(self, original_name: str, media_type: str, stream: Any) -> StoredFile:
        """Stage one file and track it for cleanup."""
        stored = await self._storage.stage(original_name, media_type, stream)
        self._files.append(stored)
        return stored

    async def promote(self) -> None:
        """Move every staged file to permanent storage."""
        for stored in self._files:
            await self._storage.promote(stored)

    def retain(self) -> None:
        """Keep the files after the block exits."""
        self._retained = True


class UploadLeadDocuments:
    """Use case validating and recording a batch of documents for one lead."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        counselor_repository: CounselorRepository,
        file_storage: FileStorage,
        lead_lock: LeadLock,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize upload lead documents use case.

        Args:
            lead_repository: Repository for leads
            counselor_repository: Repository for counselors
            file_storage: Storage for the uploaded files
            lead_lock: Serializes intakes of the same lead
            logger: Optional logger function (request_id, component, **kwargs)
        """
        self._lead_repository = lead_repository
        self._counselor_repository = counselor_repository
        self._file_storage = file_storage
        self._lead_lock = lead_lock
        self._logger = logger

    def _log(self, request_id: str, **kwargs: Any) -> None:
        """
        Log event if logger is available.

        Args:
            request_id: Request identifier
            **kwargs: Additional log fields
        """
        if self._logger:
            self._logger(request_id, "intake", **kwargs)

    async def execute(self, request: DocumentIntakeRequest, request_id: Optional[str] = None) -> Lead:
        """
        Execute document intake.

        Args:
            request: Intake request with the lead link id, counselor and files
            request_id: Optional correlation identifier for logging

        Returns:
            Updated lead

        Raises:
            ValidationError: Missing counselor or missing categories
            NotFoundError: Lead or counselor does not exist, including unreadable link ids
            UnsupportedMediaError: A file is not an allowed type
            FileTooLargeError: A file exceeds the size limit
            ServiceUnavailableError: Storage, lock or repository failure
        """
        request_id = request_id or "unknown"
        try:
            lead = await self._execute(request)
        except DomainError as e:
            self._log(
                request_id,
                level=logging.WARNING,
                link_id=request.link_id,
                outcome="rejected",
                reason=type(e).__name__,
                error=e.message,
            )
            raise

        self._log(
            request_id,
            link_id=lead.id,
            outcome="completed",
            document_count=len(lead.documents),
            categories=sorted({doc.type for doc in lead.documents}),
        )
        return lead

    async def _execute(self, request: DocumentIntakeRequest) -> Lead:
        counselor_username = request.counselor_username or ""
        if not counselor_username.strip():
            raise ValidationError("Counselor username is required")

        link_id = lead_id_of(request.link_id)
        lead = None if link_id is None else await self._lead_repository.get_by_link_id(link_id)
        if lead is None:
            raise NotFoundError("Lead not found")

        counselor = await self._counselor_repository.get_by_username(counselor_username)
        if counselor is None:
            raise NotFoundError("Counselor not found")

        async with self._lead_lock.hold(link_id):
            async with StagedBatch(self._file_storage) as batch:
                documents: list[LeadDocument] = []
                for incoming in request.files:
                    stored = await batch.stage(
                        incoming.filename, incoming.content_type, incoming.stream
                    )
                    documents.append(
                        LeadDocument(
                            id=new_document_id(),
                            name=stored.name,
                            size=stored.size,
                            type=resolve_category(
                                incoming.field_name,
                                request.type_overrides.get(incoming.filename),
                            ),
                        )
                    )

                missing = missing_required_categories(doc.type for doc in documents)
                if missing:
                    raise ValidationError(f"Missing required documents: {', '.join(missing)}")

                await batch.promote()
                updated = await self._lead_repository.update_fields(
                    link_id,
                    {
                        "documents": documents,
                        "counselor_id": counselor.pk,
                        "counselor_name": counselor.name,
                        "status": LeadStatus.FILE_OPEN.value,
                        "last_contact": datetime.now(timezone.utc).date().isoformat(),
                    },
                )
                if updated is None:
                    raise NotFoundError("Lead not found")
                batch.retain()

        return updated
