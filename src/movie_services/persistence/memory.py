"""In-memory repository implementations for unit testing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import TracebackType

from movie_services.domain import MovieInfo, MovieInfoId, Review, ReviewId
from movie_services.persistence.errors import UnsavedRecordError
from movie_services.persistence.interfaces import (
    MovieInfoRepository,
    ReviewRepository,
    UnitOfWork,
)


@dataclass
class InMemoryMovieInfoRepository(MovieInfoRepository):
    _movie_infos: dict[MovieInfoId, MovieInfo] = field(default_factory=dict)

    async def get(self, movie_info_id: MovieInfoId) -> MovieInfo | None:
        return self._movie_infos.get(movie_info_id)

    async def list_all(self) -> Sequence[MovieInfo]:
        return list(self._movie_infos.values())

    async def list_by_year(self, year: int) -> Sequence[MovieInfo]:
        return [info for info in self._movie_infos.values() if info.year == year]

    async def find_first_by_name(self, name: str) -> MovieInfo | None:
        for info in self._movie_infos.values():
            if info.name == name:
                return info
        return None

    async def save(self, movie_info: MovieInfo) -> MovieInfo:
        if movie_info.movie_info_id is None:
            msg = "Movie info must carry an id before it is saved"
            raise UnsavedRecordError(msg)
        self._movie_infos[movie_info.movie_info_id] = movie_info
        return movie_info

    async def delete(self, movie_info_id: MovieInfoId) -> None:
        self._movie_infos.pop(movie_info_id, None)

    async def delete_all(self) -> None:
        self._movie_infos.clear()


@dataclass
class InMemoryReviewRepository(ReviewRepository):
    _reviews: dict[ReviewId, Review] = field(default_factory=dict)

    async def get(self, review_id: ReviewId) -> Review | None:
        return self._reviews.get(review_id)

    async def list_all(self) -> Sequence[Review]:
        return list(self._reviews.values())

    async def list_by_movie_info(self, movie_info_id: MovieInfoId) -> Sequence[Review]:
        return [
            review for review in self._reviews.values() if review.movie_info_id == movie_info_id
        ]

    async def save(self, review: Review) -> Review:
        if review.review_id is None:
            msg = "Review must carry an id before it is saved"
            raise UnsavedRecordError(msg)
        self._reviews[review.review_id] = review
        return review

    async def delete(self, review_id: ReviewId) -> None:
        self._reviews.pop(review_id, None)

    async def delete_all(self) -> None:
        self._reviews.clear()


@dataclass
class InMemoryUnitOfWork(UnitOfWork):
    movie_info_repository: InMemoryMovieInfoRepository = field(
        default_factory=InMemoryMovieInfoRepository
    )
    review_repository: InMemoryReviewRepository = field(
        default_factory=InMemoryReviewRepository
    )
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self._lock.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._lock.release()

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None
