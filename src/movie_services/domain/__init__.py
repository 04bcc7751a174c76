"""Domain models for the movie services."""

from .base import DomainModel, WireModel
from .movie import Movie
from .movie_info import MovieInfo
from .review import Review
from .types import MovieInfoId, ReviewId
from .validation import (
    FieldViolation,
    render_violations,
    validate_movie_info,
    validate_review,
)

__all__ = [
    "DomainModel",
    "FieldViolation",
    "Movie",
    "MovieInfo",
    "MovieInfoId",
    "Review",
    "ReviewId",
    "WireModel",
    "render_violations",
    "validate_movie_info",
    "validate_review",
]
