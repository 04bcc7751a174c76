"""Client for the review peer service."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

from pydantic import ValidationError as PayloadError

from movie_services.domain import Review

from .base import PeerClient
from .exceptions import RemoteError
from .interfaces import ReviewSource


class ReviewClient(PeerClient, ReviewSource):
    """Lists reviews from ``{base_url}?movieInfoId={id}``.

    A 404 from the review peer is treated like any other failure: only the
    movie-info peer is authoritative about whether a movie exists.
    """

    peer_name = "review service"

    async def iter_reviews(self, movie_id: str) -> AsyncIterator[Review]:
        payload = await self._get_json(
            self.base_url,
            params={"movieInfoId": movie_id},
            translate_not_found=False,
        )
        if not isinstance(payload, list):
            msg = f"{self.peer_name} returned {type(payload).__name__}, expected a list"
            raise RemoteError(msg)
        for item in payload:
            try:
                yield Review.model_validate(item)
            except PayloadError as exc:
                msg = f"{self.peer_name} returned a malformed review"
                raise RemoteError(msg) from exc

    async def fetch_all(self, movie_id: str) -> Sequence[Review]:
        return tuple([review async for review in self.iter_reviews(movie_id)])


__all__ = ["ReviewClient"]
