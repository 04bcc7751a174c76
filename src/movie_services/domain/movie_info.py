"""Movie metadata records owned by the movie-info service."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from .base import WireModel
from .types import MovieInfoId


class MovieInfo(WireModel):
    """Catalog entry for a single movie.

    Field constraints are enforced by :func:`validate_movie_info` at the write
    boundary rather than at decode time, so that every violation can be
    reported together.
    """

    movie_info_id: MovieInfoId | None = Field(default=None, alias="movieInfoId")
    name: str | None = None
    year: int | None = None
    cast: tuple[str, ...] | None = None
    release_date: date | None = None

    def with_id(self, movie_info_id: MovieInfoId) -> MovieInfo:
        return self.model_copy(update={"movie_info_id": movie_info_id})


__all__ = ["MovieInfo"]
