"""SQLAlchemy ORM models for the movie services document store."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class MovieInfoRecord(Base):
    __tablename__ = "movie_infos"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str | None] = mapped_column(String, index=True)
    year: Mapped[int | None] = mapped_column(Integer, index=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)


class ReviewRecord(Base):
    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    movie_info_id: Mapped[str | None] = mapped_column(String, index=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
