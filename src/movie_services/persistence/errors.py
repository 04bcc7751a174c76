"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class UnsavedRecordError(RepositoryError):
    """Raised when a record without an identifier reaches the store."""
