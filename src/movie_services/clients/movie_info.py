"""Client for the movie-info peer service."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import ValidationError as PayloadError

from movie_services.domain import MovieInfo

from .base import PeerClient
from .exceptions import RemoteError
from .interfaces import MovieInfoSource


class MovieInfoClient(PeerClient, MovieInfoSource):
    """Fetches a single movie info record from ``{base_url}/{id}``."""

    peer_name = "movie-info service"

    def url_for(self, movie_id: str) -> str:
        return f"{self.base_url}/{quote(movie_id, safe='')}"

    async def fetch(self, movie_id: str) -> MovieInfo:
        payload = await self._get_json(self.url_for(movie_id))
        try:
            return MovieInfo.model_validate(payload)
        except PayloadError as exc:
            msg = f"{self.peer_name} returned a malformed movie info"
            raise RemoteError(msg) from exc


__all__ = ["MovieInfoClient"]
