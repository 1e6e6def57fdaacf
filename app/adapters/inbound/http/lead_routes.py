"""HTTP routes for leads and their documents."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import FileResponse
from starlette.datastructures import FormData, UploadFile

from app.adapters.inbound.http.middleware import request_id_of
from app.application.dtos.intake import DocumentIntakeRequest, IncomingFile
from app.application.dtos.lead import (
    Lead,
    LeadCounselorUpdateRequest,
    LeadCreate,
    LeadDocument,
    LeadStatusUpdate,
    PhoneVerificationRequest,
)
from app.application.use_cases.upload_lead_documents import parse_link_id
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.wiring.container import Container, get_container

COUNSELOR_USERNAME_FIELD = "counselorUsername"
TYPE_OVERRIDE_PREFIX = "documentType_"

router = APIRouter(tags=["leads"])


def intake_request_from_form(link_id: str, form: FormData) -> DocumentIntakeRequest:
    """
    Split a multipart form into files and text fields.

    Args:
        link_id: Lead identifier from the URL
        form: Parsed multipart form

    Returns:
        Intake request; every file part counts, whatever its field name
    """
    counselor_username = None
    files: list[IncomingFile] = []
    type_overrides: dict[str, str] = {}

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            files.append(
                IncomingFile(
                    field_name=key,
                    filename=value.filename or "",
                    content_type=value.content_type or "",
                    stream=value.file,
                )
            )
        elif key == COUNSELOR_USERNAME_FIELD:
            counselor_username = value
        elif key.startswith(TYPE_OVERRIDE_PREFIX):
            type_overrides[key[len(TYPE_OVERRIDE_PREFIX):]] = value

    return DocumentIntakeRequest(
        link_id=link_id,
        counselor_username=counselor_username,
        files=files,
        type_overrides=type_overrides,
    )


@router.post("/api/leads/{link_id}/documents", status_code=status.HTTP_200_OK)
async def upload_lead_documents(
    link_id: str,
    request: Request,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Upload the documents of a lead and open its file.

    Args:
        link_id: Numeric lead identifier
        request: Multipart request with the files and ``counselorUsername``

    Returns:
        Updated lead
    """
    form = await request.form()
    try:
        intake = intake_request_from_form(link_id, form)
        lead = await container.upload_lead_documents.execute(
            intake, request_id=request_id_of(request)
        )
    finally:
        await form.close()
    return lead.to_response()


@router.get("/api/leads/{student_id}/documents/{document_id}")
async def get_lead_document(
    student_id: str,
    document_id: str,
    container: Container = Depends(get_container),
) -> FileResponse:
    """Stream a stored document inline."""
    found = await container.get_lead_document.execute(student_id, document_id)
    return FileResponse(
        found.path,
        media_type=found.media_type,
        filename=found.document.name,
        content_disposition_type="inline",
    )


@router.post("/add_new_lead", status_code=status.HTTP_201_CREATED)
async def add_new_lead(
    body: LeadCreate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Create a lead.

    Args:
        body: Lead fields; the numeric id is assigned when absent

    Returns:
        Stored lead
    """
    lead = Lead(
        pk=uuid4().hex,
        created_at=datetime.now(timezone.utc),
        **body.model_dump(),
    )
    stored = await container.lead_repository.add(lead)
    return stored.to_response()


@router.get("/get_all_lead_data")
async def get_all_lead_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    """List every lead, newest first."""
    return [lead.to_response() for lead in await container.lead_repository.list()]


@router.patch("/api/leads/{lead_id}")
async def update_lead_status(
    lead_id: str,
    body: LeadStatusUpdate,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Change the status of a lead on behalf of an admin.

    Args:
        lead_id: Numeric lead identifier
        body: New status and the acting admin's email

    Returns:
        Updated lead
    """
    updated = await container.lead_repository.update_fields(
        parse_link_id(lead_id),
        {
            "status": body.status,
            "counselor": "Admin",
            "counselor_name": body.admin_email,
        },
    )
    if updated is None:
        raise NotFoundError("Lead not found")
    return updated.to_response()


@router.patch("/update_leads_by_counselor/{lead_id}")
async def update_lead_by_counselor(
    lead_id: str,
    body: LeadCounselorUpdateRequest,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Apply a counselor's edits to a lead."""
    fields = body.updated_data.model_dump(exclude_unset=True)
    if not fields:
        raise ValidationError("No fields to update")
    if "counselor_name" in fields:
        fields["counselor"] = fields["counselor_name"]

    updated = await container.lead_repository.update_fields(parse_link_id(lead_id), fields)
    if updated is None:
        raise NotFoundError("Lead not found")
    return updated.to_response()


@router.get("/api/leads/link/{link_id}")
async def get_lead_by_link(
    link_id: str,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Get a lead by its numeric identifier."""
    lead = await container.lead_repository.get_by_link_id(parse_link_id(link_id))
    if lead is None:
        raise NotFoundError("Lead not found")
    return lead.to_response()


@router.post("/api/leads/verify-phone")
async def verify_phone(
    body: PhoneVerificationRequest,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """
    Check that a phone number belongs to a registered lead.

    Args:
        body: Phone number to look up

    Returns:
        The matching lead
    """
    phone = (body.phone or "").strip()
    if not phone:
        raise ValidationError("Phone number is required")

    lead = await container.lead_repository.get_by_phone(phone)
    if lead is None:
        raise NotFoundError("Phone number not registered")
    return lead.to_response()


@router.patch("/add_new_document/{phone}")
async def replace_documents_by_phone(
    phone: str,
    documents: list[LeadDocument] = Body(...),
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Replace the documents of the lead with a phone number, creating the lead if needed."""
    lead = await container.lead_repository.replace_documents_by_phone(phone, documents)
    return lead.to_response()
