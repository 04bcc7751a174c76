"""Composes movie info and reviews fetched from peer services."""

from __future__ import annotations

import logging

from movie_services.catalog import NotFoundError
from movie_services.clients import MovieInfoSource, RemoteError, RemoteNotFound, ReviewSource
from movie_services.domain import Movie


class MovieAggregator:
    """Builds a :class:`Movie` from one movie-info call and one review call.

    The review call is only issued once the movie info is known to exist, and
    both calls are keyed by the public movie id the caller supplied. Any
    failure fails the whole aggregate; nothing partial is ever returned and
    nothing is retried.
    """

    def __init__(
        self,
        movie_info_source: MovieInfoSource,
        review_source: ReviewSource,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._movie_info_source = movie_info_source
        self._review_source = review_source
        self._logger = logger or logging.getLogger(__name__)

    async def retrieve_movie(self, movie_id: str) -> Movie:
        try:
            movie_info = await self._movie_info_source.fetch(movie_id)
        except RemoteNotFound as exc:
            self._logger.info("Movie %s unknown to the movie-info service", movie_id)
            msg = f"Movie {movie_id} not found"
            raise NotFoundError(msg) from exc
        except RemoteError:
            self._logger.warning("Movie info lookup failed for %s", movie_id)
            raise

        try:
            reviews = await self._review_source.fetch_all(movie_id)
        except RemoteNotFound as exc:
            # absence is only meaningful from the movie-info peer
            self._logger.warning("Review service reported %s missing", movie_id)
            raise RemoteError(str(exc), status_code=exc.status_code) from exc
        except RemoteError:
            self._logger.warning("Review lookup failed for %s; discarding movie info", movie_id)
            raise

        self._logger.debug("Composed movie %s with %d reviews", movie_id, len(reviews))
        return Movie(movie_info=movie_info, reviews=tuple(reviews))


__all__ = ["MovieAggregator"]
