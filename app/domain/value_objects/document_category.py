"""Document category rules."""

from collections.abc import Iterable
from typing import Optional

# Ordered: error messages list missing categories in this order
REQUIRED_DOCUMENT_CATEGORIES: tuple[str, ...] = ("transcript", "ielts", "passport")


def normalize_category(label: Optional[str]) -> str:
    """Trim and lower-case a category label."""
    return (label or "").strip().lower()


def resolve_category(field_name: str, override: Optional[str] = None) -> str:
    """
    Resolve the category of one uploaded file.

    Args:
        field_name: Multipart field the file was sent under
        override: Explicit category supplied for the file's original name

    Returns:
        Normalized category label
    """
    explicit = normalize_category(override)
    if explicit:
        return explicit
    return normalize_category(field_name)


def missing_required_categories(present: Iterable[str]) -> list[str]:
    """
    Get required categories absent from a batch.

    Args:
        present: Category labels found in the batch

    Returns:
        Missing categories, in required order
    """
    present_set = {normalize_category(label) for label in present}
    return [
        category for category in REQUIRED_DOCUMENT_CATEGORIES if category not in present_set
    ]
