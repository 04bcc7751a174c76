"""Protocols for outbound peer clients."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import Protocol

from movie_services.domain import MovieInfo, Review


class MovieInfoSource(Protocol):
    """Contract implemented by movie-info peer adapters."""

    async def fetch(self, movie_id: str) -> MovieInfo:
        """Return the movie info published under ``movie_id``."""


class ReviewSource(Protocol):
    """Contract implemented by review peer adapters."""

    def iter_reviews(self, movie_id: str) -> AsyncIterator[Review]:
        """Yield reviews for ``movie_id`` in the order the peer returned them."""

    async def fetch_all(self, movie_id: str) -> Sequence[Review]:
        """Return every review for ``movie_id``; an empty result is not an error."""


__all__ = ["MovieInfoSource", "ReviewSource"]
