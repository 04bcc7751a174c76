"""SQLite repository implementations.

Each record is stored as one JSON document per row; the columns next to the
payload only exist so lookups can be filtered in SQL.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, delete, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_services.domain import MovieInfo, MovieInfoId, Review, ReviewId
from movie_services.persistence.errors import UnsavedRecordError
from movie_services.persistence.interfaces import MovieInfoRepository, ReviewRepository

from .models import MovieInfoRecord, ReviewRecord

# rows come back in the order they were first written
_INSERTION_ORDER = literal_column("rowid")


class SQLiteMovieInfoRepository(MovieInfoRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, movie_info_id: MovieInfoId) -> MovieInfo | None:
        record = await self._session.get(MovieInfoRecord, str(movie_info_id))
        if record is None:
            return None
        return MovieInfo.model_validate(record.payload)

    async def list_all(self) -> Sequence[MovieInfo]:
        stmt: Select[tuple[MovieInfoRecord]] = select(MovieInfoRecord).order_by(_INSERTION_ORDER)
        result = await self._session.execute(stmt)
        return [MovieInfo.model_validate(r.payload) for r in result.scalars().all()]

    async def list_by_year(self, year: int) -> Sequence[MovieInfo]:
        stmt = (
            select(MovieInfoRecord)
            .where(MovieInfoRecord.year == year)
            .order_by(_INSERTION_ORDER)
        )
        result = await self._session.execute(stmt)
        return [MovieInfo.model_validate(r.payload) for r in result.scalars().all()]

    async def find_first_by_name(self, name: str) -> MovieInfo | None:
        stmt = (
            select(MovieInfoRecord)
            .where(MovieInfoRecord.name == name)
            .order_by(_INSERTION_ORDER)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        record = result.scalars().first()
        return MovieInfo.model_validate(record.payload) if record else None

    async def save(self, movie_info: MovieInfo) -> MovieInfo:
        if movie_info.movie_info_id is None:
            msg = "Movie info must carry an id before it is saved"
            raise UnsavedRecordError(msg)
        payload = movie_info.model_dump(mode="json", by_alias=True)
        record = await self._session.get(MovieInfoRecord, str(movie_info.movie_info_id))
        if record is None:
            record = MovieInfoRecord(
                id=str(movie_info.movie_info_id),
                name=movie_info.name,
                year=movie_info.year,
                payload=payload,
            )
            self._session.add(record)
        else:
            record.name = movie_info.name
            record.year = movie_info.year
            record.payload = payload
        await self._session.flush()
        return movie_info

    async def delete(self, movie_info_id: MovieInfoId) -> None:
        record = await self._session.get(MovieInfoRecord, str(movie_info_id))
        if record is not None:
            await self._session.delete(record)

    async def delete_all(self) -> None:
        await self._session.execute(delete(MovieInfoRecord))


class SQLiteReviewRepository(ReviewRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, review_id: ReviewId) -> Review | None:
        record = await self._session.get(ReviewRecord, str(review_id))
        if record is None:
            return None
        return Review.model_validate(record.payload)

    async def list_all(self) -> Sequence[Review]:
        stmt: Select[tuple[ReviewRecord]] = select(ReviewRecord).order_by(_INSERTION_ORDER)
        result = await self._session.execute(stmt)
        return [Review.model_validate(r.payload) for r in result.scalars().all()]

    async def list_by_movie_info(self, movie_info_id: MovieInfoId) -> Sequence[Review]:
        stmt = (
            select(ReviewRecord)
            .where(ReviewRecord.movie_info_id == str(movie_info_id))
            .order_by(_INSERTION_ORDER)
        )
        result = await self._session.execute(stmt)
        return [Review.model_validate(r.payload) for r in result.scalars().all()]

    async def save(self, review: Review) -> Review:
        if review.review_id is None:
            msg = "Review must carry an id before it is saved"
            raise UnsavedRecordError(msg)
        payload = review.model_dump(mode="json", by_alias=True)
        movie_info_id = str(review.movie_info_id) if review.movie_info_id is not None else None
        record = await self._session.get(ReviewRecord, str(review.review_id))
        if record is None:
            record = ReviewRecord(
                id=str(review.review_id),
                movie_info_id=movie_info_id,
                payload=payload,
            )
            self._session.add(record)
        else:
            record.movie_info_id = movie_info_id
            record.payload = payload
        await self._session.flush()
        return review

    async def delete(self, review_id: ReviewId) -> None:
        record = await self._session.get(ReviewRecord, str(review_id))
        if record is not None:
            await self._session.delete(record)

    async def delete_all(self) -> None:
        await self._session.execute(delete(ReviewRecord))
