"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """Durable storage could not be read or written."""


class StorageReadError(StorageError):
    """Persisted content exists but cannot be turned back into products."""


class StorageWriteError(StorageError):
    """Durable storage rejected a write (disk full, permissions, ...)."""


class CsvParseError(ValidationError):
    """A backup file could not be parsed.

    ``line_number`` is 1-based and points at the offending line of the
    file (line 1 is the header).
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
