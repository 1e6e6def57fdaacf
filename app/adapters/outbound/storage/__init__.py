"""File storage adapters."""

from app.adapters.outbound.storage.local_file_storage import LocalFileStorage

__all__ = [
    "LocalFileStorage",
]
