"""Catalog services owning movie info and review records."""

from .exceptions import CatalogError, NotFoundError, ValidationError
from .movie_info import MovieInfoService, UnitOfWorkFactory
from .reviews import ReviewService

__all__ = [
    "CatalogError",
    "MovieInfoService",
    "NotFoundError",
    "ReviewService",
    "UnitOfWorkFactory",
    "ValidationError",
]
