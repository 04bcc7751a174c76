"""Movie-info catalog service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from uuid import uuid4

from movie_services.domain import MovieInfo, MovieInfoId, validate_movie_info
from movie_services.persistence import UnitOfWork

from .exceptions import NotFoundError, ValidationError

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = logging.getLogger(__name__)


class MovieInfoService:
    """Thin pass-through over the movie-info store with write validation."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> Sequence[MovieInfo]:
        async with self._uow_factory() as uow:
            return await uow.movie_info_repository.list_all()

    async def get_by_year(self, year: int) -> Sequence[MovieInfo]:
        async with self._uow_factory() as uow:
            return await uow.movie_info_repository.list_by_year(year)

    async def get_by_id(self, movie_info_id: MovieInfoId) -> MovieInfo:
        async with self._uow_factory() as uow:
            movie_info = await uow.movie_info_repository.get(movie_info_id)
        if movie_info is None:
            msg = f"Movie info {movie_info_id} not found"
            raise NotFoundError(msg)
        return movie_info

    async def get_by_name(self, name: str) -> MovieInfo:
        async with self._uow_factory() as uow:
            movie_info = await uow.movie_info_repository.find_first_by_name(name)
        if movie_info is None:
            msg = f"Movie info named {name!r} not found"
            raise NotFoundError(msg)
        return movie_info

    async def add(self, movie_info: MovieInfo) -> MovieInfo:
        violations = validate_movie_info(movie_info)
        if violations:
            raise ValidationError(violations)
        if movie_info.movie_info_id is None:
            movie_info = movie_info.with_id(MovieInfoId(uuid4().hex))
        async with self._uow_factory() as uow:
            saved = await uow.movie_info_repository.save(movie_info)
            await uow.commit()
        logger.info("Stored movie info %s (%s)", saved.movie_info_id, saved.name)
        return saved

    async def update(self, movie_info: MovieInfo, movie_info_id: MovieInfoId) -> MovieInfo:
        """Replace the stored record wholesale, keeping its id."""

        async with self._uow_factory() as uow:
            existing = await uow.movie_info_repository.get(movie_info_id)
            if existing is None:
                msg = f"Movie info {movie_info_id} not found"
                raise NotFoundError(msg)
            saved = await uow.movie_info_repository.save(movie_info.with_id(movie_info_id))
            await uow.commit()
        return saved

    async def delete(self, movie_info_id: MovieInfoId) -> None:
        async with self._uow_factory() as uow:
            await uow.movie_info_repository.delete(movie_info_id)
            await uow.commit()


__all__ = ["MovieInfoService", "UnitOfWorkFactory"]
