"""Counselor repository adapters."""

from app.adapters.outbound.counselor.counselor_repository import InMemoryCounselorRepository
from app.adapters.outbound.counselor.postgres_counselor_repository import (
    PostgresCounselorRepository,
)

__all__ = [
    "InMemoryCounselorRepository",
    "PostgresCounselorRepository",
]
