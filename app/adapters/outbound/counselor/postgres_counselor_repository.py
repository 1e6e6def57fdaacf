"""Postgres-backed counselor repository adapter."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timezone
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.application.dtos.counselor import Counselor
from app.application.ports.counselor_repository import CounselorRepository
from app.domain.errors import ConflictError, ServiceUnavailableError
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import CounselorModel

_COLUMN_FOR_FIELD = {"id": "counselor_id"}


class PostgresCounselorRepository(CounselorRepository):
    """Postgres implementation of counselor repository."""

    def __init__(self, session_factory: Callable[[], Session] = get_db_session) -> None:
        """
        Initialize Postgres repository.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self._session_factory = session_factory

    def _model_to_dto(self, model: CounselorModel) -> Counselor:
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Counselor(
            pk=model.pk,
            id=model.counselor_id,
            username=model.username,
            name=model.name,
            email=model.email,
            phone=model.phone,
            designation=model.designation,
            profile_image=model.profile_image,
            created_at=created_at,
        )

    async def _get_one(self, query: Callable[[Session], Query], action: str) -> Optional[Counselor]:
        db: Session = self._session_factory()
        try:
            model = query(db).first()
            return None if model is None else self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while {action}: {str(e)}")
            raise ServiceUnavailableError("Failed to fetch counselor", e) from e
        finally:
            db.close()

    async def _update_one(
        self, query: Callable[[Session], Query], fields: dict[str, Any]
    ) -> Optional[Counselor]:
        db: Session = self._session_factory()
        try:
            model = query(db).first()
            if model is None:
                return None
            for name, value in fields.items():
                setattr(model, _COLUMN_FOR_FIELD.get(name, name), value)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating counselor: {str(e)}")
            raise ServiceUnavailableError("Failed to update counselor", e) from e
        finally:
            db.close()

    async def get_by_username(self, username: str) -> Optional[Counselor]:
        """
        Get a counselor by exact username.

        Args:
            username: Login name

        Returns:
            Counselor DTO, or None if not found
        """
        return await self._get_one(
            lambda db: db.query(CounselorModel).filter(CounselorModel.username == username),
            f"getting counselor {username!r}",
        )

    async def get_by_pk(self, pk: str) -> Optional[Counselor]:
        """Get a counselor by storage primary key."""
        return await self._get_one(
            lambda db: db.query(CounselorModel).filter(CounselorModel.pk == pk),
            f"getting counselor {pk}",
        )

    async def list(self) -> list[Counselor]:
        """List all counselors, newest first."""
        db: Session = self._session_factory()
        try:
            models = db.query(CounselorModel).order_by(CounselorModel.seq.desc()).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing counselors: {str(e)}")
            raise ServiceUnavailableError("Failed to list counselors", e) from e
        finally:
            db.close()

    async def add(self, counselor: Counselor) -> Counselor:
        """Insert a new counselor, rejecting duplicate usernames."""
        db: Session = self._session_factory()
        try:
            model = CounselorModel()
            for name, value in counselor.model_dump().items():
                setattr(model, _COLUMN_FOR_FIELD.get(name, name), value)
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(
                f"Counselor username '{counselor.username}' is already taken"
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while adding counselor: {str(e)}")
            raise ServiceUnavailableError("Failed to add counselor", e) from e
        finally:
            db.close()

    async def update_fields(self, counselor_id: int, fields: dict[str, Any]) -> Optional[Counselor]:
        """Update the first counselor with a numeric id."""
        return await self._update_one(
            lambda db: db.query(CounselorModel)
            .filter(CounselorModel.counselor_id == counselor_id)
            .order_by(CounselorModel.seq.asc()),
            fields,
        )

    async def update_fields_by_pk(self, pk: str, fields: dict[str, Any]) -> Optional[Counselor]:
        """Update a counselor by storage primary key."""
        return await self._update_one(
            lambda db: db.query(CounselorModel).filter(CounselorModel.pk == pk),
            fields,
        )

    async def delete(self, counselor_id: int) -> bool:
        """Delete the first counselor with a numeric id."""
        db: Session = self._session_factory()
        try:
            model = (
                db.query(CounselorModel)
                .filter(CounselorModel.counselor_id == counselor_id)
                .order_by(CounselorModel.seq.asc())
                .first()
            )
            if model is None:
                return False
            db.delete(model)
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting counselor {counselor_id}: {str(e)}")
            raise ServiceUnavailableError("Failed to delete counselor", e) from e
        finally:
            db.close()
