"""Postgres-backed lead repository adapter."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.lead import Lead, LeadDocument, normalize_phone
from app.application.ports.lead_repository import LeadRepository
from app.domain.errors import ConflictError, ServiceUnavailableError
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .lead_repository import FIRST_LINK_ID
from .models import LeadModel

_COLUMN_FOR_FIELD = {"id": "lead_id"}


class PostgresLeadRepository(LeadRepository):
    """Postgres implementation of lead repository."""

    def __init__(self, session_factory: Callable[[], Session] = get_db_session) -> None:
        """
        Initialize Postgres repository.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self._session_factory = session_factory

    def _model_to_dto(self, model: LeadModel) -> Lead:
        """
        Convert LeadModel to Lead DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Lead DTO
        """
        # Ensure created_at is timezone-aware (SQLite returns naive datetimes)
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Lead(
            pk=model.pk,
            id=model.lead_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            destination=model.destination,
            program=model.program,
            notes=model.notes,
            status=model.status,
            counselor=model.counselor,
            counselor_id=model.counselor_id,
            counselor_name=model.counselor_name,
            last_contact=model.last_contact,
            documents=[LeadDocument.model_validate(doc) for doc in model.documents or []],
            created_at=created_at,
        )

    def _apply_fields(self, model: LeadModel, fields: dict[str, Any]) -> None:
        """
        Copy DTO field values onto a model.

        Args:
            model: SQLAlchemy model instance
            fields: DTO field name to value
        """
        for name, value in fields.items():
            if name == "documents":
                value = [
                    doc.model_dump() if isinstance(doc, LeadDocument) else dict(doc)
                    for doc in value
                ]
            setattr(model, _COLUMN_FOR_FIELD.get(name, name), value)

    def _next_link_id(self, db: Session) -> int:
        current = db.query(func.max(LeadModel.lead_id)).scalar()
        return FIRST_LINK_ID if current is None else current + 1

    def _find_by_phone(self, db: Session, phone: str) -> Optional[LeadModel]:
        return (
            db.query(LeadModel)
            .filter(LeadModel.phone == normalize_phone(phone))
            .order_by(LeadModel.seq.asc())
            .first()
        )

    async def get_by_link_id(self, link_id: int) -> Optional[Lead]:
        """
        Get a lead by its numeric id.

        Args:
            link_id: Numeric lead identifier

        Returns:
            Lead DTO, or None if not found
        """
        db: Session = self._session_factory()
        try:
            model = db.query(LeadModel).filter(LeadModel.lead_id == link_id).first()
            return None if model is None else self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting lead {link_id}: {str(e)}")
            raise ServiceUnavailableError("Failed to fetch lead", e) from e
        finally:
            db.close()

    async def get_by_phone(self, phone: str) -> Optional[Lead]:
        """
        Get the oldest lead with a phone number.

        Args:
            phone: Phone number, whitespace ignored

        Returns:
            Lead DTO, or None if not found
        """
        db: Session = self._session_factory()
        try:
            model = self._find_by_phone(db, phone)
            return None if model is None else self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while looking up lead by phone: {str(e)}")
            raise ServiceUnavailableError("Failed to verify phone number", e) from e
        finally:
            db.close()

    async def list(self) -> list[Lead]:
        """
        List all leads.

        Returns:
            Leads, newest first
        """
        db: Session = self._session_factory()
        try:
            models = db.query(LeadModel).order_by(LeadModel.seq.desc()).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing leads: {str(e)}")
            raise ServiceUnavailableError("Failed to list leads", e) from e
        finally:
            db.close()

    async def add(self, lead: Lead) -> Lead:
        """
        Insert a new lead.

        Args:
            lead: Lead DTO; the next numeric id is assigned when ``id`` is None

        Returns:
            Stored lead
        """
        db: Session = self._session_factory()
        try:
            if lead.id is not None:
                taken = db.query(LeadModel.seq).filter(LeadModel.lead_id == lead.id).first()
                if taken is not None:
                    raise ConflictError(f"Lead with id {lead.id} already exists")

            fields = lead.model_dump(exclude={"documents"})
            if fields["id"] is None:
                fields["id"] = self._next_link_id(db)
            if fields["phone"] is not None:
                fields["phone"] = normalize_phone(fields["phone"])

            model = LeadModel(documents=[])
            self._apply_fields(model, fields)
            self._apply_fields(model, {"documents": lead.documents})
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(f"Lead with id {lead.id} already exists") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while adding lead {lead.pk}: {str(e)}")
            raise ServiceUnavailableError("Failed to add lead", e) from e
        finally:
            db.close()

    async def update_fields(self, link_id: int, fields: dict[str, Any]) -> Optional[Lead]:
        """
        Replace a subset of fields on a lead in one transaction.

        Args:
            link_id: Numeric lead identifier
            fields: Field name to new value

        Returns:
            Updated lead, or None if not found
        """
        db: Session = self._session_factory()
        try:
            model = db.query(LeadModel).filter(LeadModel.lead_id == link_id).first()
            if model is None:
                return None
            self._apply_fields(model, fields)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating lead {link_id}: {str(e)}")
            raise ServiceUnavailableError("Failed to update lead", e) from e
        finally:
            db.close()

    async def replace_documents_by_phone(
        self, phone: str, documents: list[LeadDocument]
    ) -> Lead:
        """
        Replace documents of the lead with a phone number (upsert).

        Args:
            phone: Phone number
            documents: New document list

        Returns:
            Updated or created lead
        """
        db: Session = self._session_factory()
        try:
            model = self._find_by_phone(db, phone)
            if model is None:
                model = LeadModel(
                    pk=uuid4().hex,
                    lead_id=self._next_link_id(db),
                    phone=normalize_phone(phone),
                    status=Lead.model_fields["status"].default,
                    created_at=datetime.now(timezone.utc),
                )
                db.add(model)
            self._apply_fields(model, {"documents": documents})
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while replacing documents by phone: {str(e)}")
            raise ServiceUnavailableError("Failed to save documents", e) from e
        finally:
            db.close()
