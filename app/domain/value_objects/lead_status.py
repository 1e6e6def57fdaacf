"""Lead pipeline status values."""

from enum import Enum


class LeadStatus(str, Enum):
    """Well-known lead statuses. Stored as plain strings; admins may set others."""

    NEW = "New"
    CONTACTED = "Contacted"
    FILE_OPEN = "File Open"
