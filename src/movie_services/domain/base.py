"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class WireModel(BaseModel):
    """Immutable record exchanged over HTTP using camelCase aliases.

    Unknown keys are dropped so payloads from peers running a newer schema
    still decode. Numeric ids are read as strings.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )
