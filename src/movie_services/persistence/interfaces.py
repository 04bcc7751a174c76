"""Persistence layer abstractions for repositories and unit of work."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Protocol

from movie_services.domain import MovieInfo, MovieInfoId, Review, ReviewId


class MovieInfoRepository(Protocol):
    """Document storage for movie metadata."""

    async def get(self, movie_info_id: MovieInfoId) -> MovieInfo | None: ...

    async def list_all(self) -> Sequence[MovieInfo]: ...

    async def list_by_year(self, year: int) -> Sequence[MovieInfo]: ...

    async def find_first_by_name(self, name: str) -> MovieInfo | None: ...

    async def save(self, movie_info: MovieInfo) -> MovieInfo: ...

    async def delete(self, movie_info_id: MovieInfoId) -> None: ...

    async def delete_all(self) -> None: ...


class ReviewRepository(Protocol):
    """Document storage for reviews."""

    async def get(self, review_id: ReviewId) -> Review | None: ...

    async def list_all(self) -> Sequence[Review]: ...

    async def list_by_movie_info(self, movie_info_id: MovieInfoId) -> Sequence[Review]: ...

    async def save(self, review: Review) -> Review: ...

    async def delete(self, review_id: ReviewId) -> None: ...

    async def delete_all(self) -> None: ...


class UnitOfWork(Protocol):
    """Transactional boundary for repository operations."""

    movie_info_repository: MovieInfoRepository
    review_repository: ReviewRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
