"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

MovieInfoId = NewType("MovieInfoId", str)
ReviewId = NewType("ReviewId", str)

__all__ = [
    "MovieInfoId",
    "ReviewId",
]
