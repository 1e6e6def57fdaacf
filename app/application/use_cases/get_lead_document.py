"""Get lead document use case."""

from dataclasses import dataclass

from app.application.dtos.lead import LeadDocument
from app.application.ports.file_storage import FileStorage
from app.application.ports.lead_repository import LeadRepository
from app.domain.errors import NotFoundError, ValidationError
from app.domain.value_objects.upload_policy import media_type_for


@dataclass(frozen=True)
class DocumentFile:
    """A stored document ready to be streamed."""

    document: LeadDocument
    path: str
    media_type: str


class GetLeadDocument:
    """Use case resolving one document of a lead to a file on disk."""

    def __init__(self, lead_repository: LeadRepository, file_storage: FileStorage) -> None:
        """
        Initialize get lead document use case.

        Args:
            lead_repository: Repository for leads
            file_storage: Storage holding the uploaded files
        """
        self._lead_repository = lead_repository
        self._file_storage = file_storage

    async def execute(self, student_id: str, document_id: str) -> DocumentFile:
        """
        Find a document of a lead.

        Args:
            student_id: Numeric lead identifier as received in the URL
            document_id: Document identifier inside the lead

        Returns:
            Document with its file path and content type

        Raises:
            ValidationError: If student_id is not numeric
            NotFoundError: If the lead, the document or the file is missing
        """
        try:
            link_id = int(student_id)
        except ValueError:
            raise ValidationError("Invalid student ID: must be a number") from None

        lead = await self._lead_repository.get_by_link_id(link_id)
        if lead is None:
            raise NotFoundError(f"Lead not found for studentId: {student_id}")

        document = next((doc for doc in lead.documents if doc.id == document_id), None)
        if document is None:
            raise NotFoundError(f"Document not found for documentId: {document_id}")

        path = self._file_storage.locate(document.name)
        if path is None:
            raise NotFoundError(f"File not found on server: {document.name}")

        return DocumentFile(
            document=document,
            path=path,
            media_type=media_type_for(document.name),
        )
