"""Read-only aggregate composed by the movies service."""

from __future__ import annotations

from pydantic import Field

from .base import WireModel
from .movie_info import MovieInfo
from .review import Review


class Movie(WireModel):
    """Movie metadata together with the reviews that existed at read time."""

    movie_info: MovieInfo = Field(alias="movieInfo")
    reviews: tuple[Review, ...] = ()


__all__ = ["Movie"]
