"""SQLAlchemy ORM models for counselors."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

# Import Base from lead models to reuse the same declarative base
from app.adapters.outbound.lead.models import Base


class CounselorModel(Base):
    """SQLAlchemy model for counselors table."""

    __tablename__ = "counselors"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    pk = Column(String, nullable=False, unique=True, index=True)
    counselor_id = Column(Integer, nullable=True, index=True)
    username = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    designation = Column(String, nullable=True)
    profile_image = Column(String, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
