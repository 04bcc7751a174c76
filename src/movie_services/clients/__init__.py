"""Outbound clients for the movie-info and review peers."""

from .base import PeerClient
from .exceptions import RemoteError, RemoteNotFound
from .interfaces import MovieInfoSource, ReviewSource
from .movie_info import MovieInfoClient
from .reviews import ReviewClient

__all__ = [
    "MovieInfoClient",
    "MovieInfoSource",
    "PeerClient",
    "RemoteError",
    "RemoteNotFound",
    "ReviewClient",
    "ReviewSource",
]
