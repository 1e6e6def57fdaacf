"""Domain error taxonomy."""

from typing import Optional


class DomainError(Exception):
    """Base class for errors raised by use cases and adapters."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Human readable description, returned to API callers
        """
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Caller input is malformed or incomplete."""


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class ConflictError(DomainError):
    """A record with the same unique key already exists."""


class UnsupportedMediaError(DomainError):
    """An uploaded file is not an allowed type."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Rejected file '{filename}': {reason}")
        self.filename = filename
        self.reason = reason


class FileTooLargeError(DomainError):
    """An uploaded file exceeds the size limit."""

    def __init__(self, filename: str, max_bytes: int) -> None:
        super().__init__(f"Rejected file '{filename}': exceeds the {max_bytes} byte limit")
        self.filename = filename
        self.max_bytes = max_bytes


class ServiceUnavailableError(DomainError):
    """Storage, database or lock backend failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """
        Initialize service unavailable error.

        Args:
            message: What was being attempted
            cause: Low-level exception, appended to the message
        """
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause
