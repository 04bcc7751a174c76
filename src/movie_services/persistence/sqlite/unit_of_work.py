"""Unit of work over one SQLAlchemy session per block."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from movie_services.persistence.errors import RepositoryError
from movie_services.persistence.interfaces import UnitOfWork

from .migrations import apply_migrations
from .repositories import SQLiteMovieInfoRepository, SQLiteReviewRepository


class _SchemaGate:
    """Runs the migrations once per engine, on first use."""

    def __init__(self, migrate: Callable[[], Awaitable[None]]) -> None:
        self._migrate = migrate
        self._lock = asyncio.Lock()
        self._ready = False

    async def wait(self) -> None:
        if self._ready:
            return
        async with self._lock:
            if not self._ready:
                await self._migrate()
                self._ready = True


class SQLiteUnitOfWork(UnitOfWork):
    """Opens a session on enter; commits a clean block and rolls back a failed one."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        schema: _SchemaGate,
    ) -> None:
        self._session_factory = session_factory
        self._schema = schema
        self._session: AsyncSession | None = None

    def _active_session(self) -> AsyncSession:
        if self._session is None:
            msg = "unit of work used outside its async with block"
            raise RepositoryError(msg)
        return self._session

    async def __aenter__(self) -> SQLiteUnitOfWork:
        await self._schema.wait()
        session = self._session_factory()
        self._session = session
        self.movie_info_repository = SQLiteMovieInfoRepository(session)
        self.review_repository = SQLiteReviewRepository(session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            if exc_type is None:
                await session.commit()
            else:
                await session.rollback()
        finally:
            await session.close()

    async def commit(self) -> None:
        await self._active_session().commit()

    async def rollback(self) -> None:
        await self._active_session().rollback()


def create_sqlite_unit_of_work_factory(database_url: str) -> Callable[[], SQLiteUnitOfWork]:
    """Return a factory whose units of work share one engine and one schema check."""

    engine = create_async_engine(database_url)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    schema = _SchemaGate(lambda: apply_migrations(engine))

    def factory() -> SQLiteUnitOfWork:
        return SQLiteUnitOfWork(session_factory, schema)

    return factory


__all__ = ["SQLiteUnitOfWork", "create_sqlite_unit_of_work_factory"]
