"""SQLAlchemy ORM models for marketing content."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

# Import Base from lead models to reuse the same declarative base
from app.adapters.outbound.lead.models import Base


class ContentItemModel(Base):
    """SQLAlchemy model for content_items table (one row per document)."""

    __tablename__ = "content_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    pk = Column(String, nullable=False, unique=True, index=True)
    collection = Column(String, nullable=False, index=True)
    data = Column(JSON, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
