"""Lead repository adapters (in-memory and Postgres)."""

from app.adapters.outbound.lead.lead_repository import FIRST_LINK_ID, InMemoryLeadRepository
from app.adapters.outbound.lead.postgres_lead_repository import PostgresLeadRepository

__all__ = [
    "FIRST_LINK_ID",
    "InMemoryLeadRepository",
    "PostgresLeadRepository",
]
