"""Document intake DTOs."""

from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from app.application.dtos.base import DTO


@dataclass
class IncomingFile:
    """One file part of a multipart upload, still unread."""

    field_name: str
    filename: str
    content_type: str
    stream: BinaryIO


@dataclass
class DocumentIntakeRequest:
    """Everything the intake workflow needs for one batch."""

    link_id: str
    counselor_username: Optional[str]
    files: list[IncomingFile] = field(default_factory=list)
    # original file name -> caller supplied category label
    type_overrides: dict[str, str] = field(default_factory=dict)


class StoredFile(DTO):
    """File written by the storage adapter."""

    name: str
    size: int
    original_name: str
    media_type: str
