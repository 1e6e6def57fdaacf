"""Lead DTOs."""

from datetime import datetime
from typing import Optional, Union

from pydantic import ConfigDict, Field, field_validator

from app.application.dtos.base import DTO, InputDTO
from app.domain.value_objects.lead_status import LeadStatus


def normalize_phone(phone: str) -> str:
    """Strip all whitespace from a phone number."""
    return "".join(phone.split())


class LeadDocument(DTO):
    """Document embedded in a lead."""

    id: str
    name: str
    size: int = Field(ge=0)
    type: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "k3j9x0a1b",
                "name": "1729339200000-transcript.pdf",
                "size": 482133,
                "type": "transcript",
            }
        }
    )


class Lead(DTO):
    """Prospective student tracked through the recruitment pipeline."""

    pk: str
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    destination: Optional[str] = None
    program: Optional[str] = None
    notes: Optional[str] = None
    status: str = LeadStatus.NEW.value
    counselor: Optional[str] = None
    counselor_id: Optional[str] = None
    counselor_name: Optional[str] = None
    last_contact: Optional[str] = None  # YYYY-MM-DD
    documents: list[LeadDocument] = Field(default_factory=list)
    created_at: datetime

    @property
    def display_id(self) -> Union[int, str]:
        """Numeric id, or the storage primary key when the lead has none."""
        return self.id if self.id is not None else self.pk

    def to_response(self) -> dict:
        """
        Serialize for API responses.

        Returns:
            camelCase dictionary with ``id`` replaced by ``display_id``
        """
        data = self.model_dump(mode="json", by_alias=True)
        data["id"] = self.display_id
        return data


class LeadCreate(InputDTO):
    """Body of the lead creation endpoint."""

    id: Optional[int] = Field(default=None, ge=0)
    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: str = Field(min_length=1)
    destination: Optional[str] = None
    program: Optional[str] = None
    notes: Optional[str] = None
    status: str = LeadStatus.NEW.value

    @field_validator("phone")
    @classmethod
    def _strip_phone(cls, value: str) -> str:
        return normalize_phone(value)


class LeadStatusUpdate(InputDTO):
    """Status change performed by an admin."""

    status: str = Field(min_length=1)
    admin_email: Optional[str] = None


class LeadCounselorUpdate(InputDTO):
    """Fields a counselor may edit on a lead."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    destination: Optional[str] = None
    program: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    counselor_id: Optional[str] = None
    counselor_name: Optional[str] = None
    last_contact: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def _strip_phone(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else normalize_phone(value)


class LeadCounselorUpdateRequest(InputDTO):
    """Envelope used by the counselor update endpoint."""

    updated_data: LeadCounselorUpdate


class PhoneVerificationRequest(InputDTO):
    """Body of the phone verification endpoint."""

    phone: Optional[str] = None
