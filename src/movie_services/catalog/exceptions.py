"""Exceptions raised by the catalog services."""

from __future__ import annotations

from collections.abc import Sequence

from movie_services.domain import FieldViolation, render_violations


class CatalogError(RuntimeError):
    """Base class for catalog service failures."""


class ValidationError(CatalogError):
    """Raised when a record violates one or more field constraints."""

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations = tuple(violations)
        super().__init__(render_violations(self.violations))


class NotFoundError(CatalogError):
    """Raised when a referenced record does not exist."""


__all__ = ["CatalogError", "NotFoundError", "ValidationError"]
