"""SQLAlchemy ORM models for leads."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

# Shared declarative base for every table of the application
Base = declarative_base()


class LeadModel(Base):
    """SQLAlchemy model for leads table."""

    __tablename__ = "leads"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # insertion order
    pk = Column(String, nullable=False, unique=True, index=True)
    lead_id = Column(Integer, nullable=True, unique=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True, index=True)  # not unique, see get_by_phone
    destination = Column(String, nullable=True)
    program = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    status = Column(String, nullable=False)
    counselor = Column(String, nullable=True)
    counselor_id = Column(String, nullable=True)
    counselor_name = Column(String, nullable=True)
    last_contact = Column(String, nullable=True)
    documents = Column(JSON, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
