"""Postgres-backed content repository adapter."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.content import ContentCollection, ContentItem
from app.application.ports.content_repository import ContentRepository
from app.domain.errors import ServiceUnavailableError
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import ContentItemModel


class PostgresContentRepository(ContentRepository):
    """Postgres implementation of content repository, JSON document per row."""

    def __init__(self, session_factory: Callable[[], Session] = get_db_session) -> None:
        """
        Initialize Postgres repository.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self._session_factory = session_factory

    def _model_to_dto(self, model: ContentItemModel) -> ContentItem:
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return ContentItem(
            pk=model.pk,
            collection=ContentCollection(model.collection),
            data=dict(model.data or {}),
            created_at=created_at,
        )

    def _find(self, db: Session, collection: ContentCollection, pk: str) -> Optional[ContentItemModel]:
        return (
            db.query(ContentItemModel)
            .filter(
                ContentItemModel.collection == collection.value,
                ContentItemModel.pk == pk,
            )
            .first()
        )

    async def list(self, collection: ContentCollection) -> list[ContentItem]:
        """List items of a collection, newest first."""
        db: Session = self._session_factory()
        try:
            models = (
                db.query(ContentItemModel)
                .filter(ContentItemModel.collection == collection.value)
                .order_by(ContentItemModel.seq.desc())
                .all()
            )
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing {collection.value}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to list {collection.value}", e) from e
        finally:
            db.close()

    async def get(self, collection: ContentCollection, pk: str) -> Optional[ContentItem]:
        """Get one item by primary key."""
        db: Session = self._session_factory()
        try:
            model = self._find(db, collection, pk)
            return None if model is None else self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting {collection.value}/{pk}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to fetch {collection.value}", e) from e
        finally:
            db.close()

    async def add(self, collection: ContentCollection, data: dict[str, Any]) -> ContentItem:
        """Insert an item and assign its primary key."""
        db: Session = self._session_factory()
        try:
            model = ContentItemModel(
                pk=uuid4().hex,
                collection=collection.value,
                data=dict(data),
                created_at=datetime.now(timezone.utc),
            )
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while adding to {collection.value}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to add {collection.value}", e) from e
        finally:
            db.close()

    async def update(
        self, collection: ContentCollection, pk: str, data: dict[str, Any]
    ) -> Optional[ContentItem]:
        """Merge fields into an item."""
        db: Session = self._session_factory()
        try:
            model = self._find(db, collection, pk)
            if model is None:
                return None
            # Reassign so the JSON column is flagged as modified
            model.data = {**(model.data or {}), **data}
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating {collection.value}/{pk}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to update {collection.value}", e) from e
        finally:
            db.close()

    async def delete(self, collection: ContentCollection, pk: str) -> bool:
        """Delete an item."""
        db: Session = self._session_factory()
        try:
            model = self._find(db, collection, pk)
            if model is None:
                return False
            db.delete(model)
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting {collection.value}/{pk}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to delete {collection.value}", e) from e
        finally:
            db.close()

    async def increment(self, collection: ContentCollection, pk: str, field: str) -> bool:
        """Add one to a counter field inside a single transaction."""
        db: Session = self._session_factory()
        try:
            model = (
                db.query(ContentItemModel)
                .filter(
                    ContentItemModel.collection == collection.value,
                    ContentItemModel.pk == pk,
                )
                .with_for_update()
                .first()
            )
            if model is None:
                return False
            data = dict(model.data or {})
            data[field] = (data.get(field) or 0) + 1
            model.data = data
            db.commit()
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while incrementing {field} on {pk}: {str(e)}")
            raise ServiceUnavailableError(f"Failed to update {field}", e) from e
        finally:
            db.close()
