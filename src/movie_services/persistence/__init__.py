"""Persistence layer exports."""

from .errors import RepositoryError, UnsavedRecordError
from .interfaces import MovieInfoRepository, ReviewRepository, UnitOfWork
from .memory import InMemoryMovieInfoRepository, InMemoryReviewRepository, InMemoryUnitOfWork

__all__ = [
    "InMemoryMovieInfoRepository",
    "InMemoryReviewRepository",
    "InMemoryUnitOfWork",
    "MovieInfoRepository",
    "RepositoryError",
    "ReviewRepository",
    "UnitOfWork",
    "UnsavedRecordError",
]
