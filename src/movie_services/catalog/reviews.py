"""Review catalog service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import uuid4

from movie_services.domain import MovieInfoId, Review, ReviewId, validate_review

from .exceptions import NotFoundError, ValidationError
from .movie_info import UnitOfWorkFactory

REVIEW_NOT_FOUND = "Review not found for the given Review Id"

logger = logging.getLogger(__name__)


class ReviewService:
    """Pass-through over the review store; updates merge comment and rating only."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def get_all(self, movie_info_id: MovieInfoId | None = None) -> Sequence[Review]:
        async with self._uow_factory() as uow:
            if movie_info_id is not None:
                return await uow.review_repository.list_by_movie_info(movie_info_id)
            return await uow.review_repository.list_all()

    async def get_by_id(self, review_id: ReviewId) -> Review:
        async with self._uow_factory() as uow:
            review = await uow.review_repository.get(review_id)
        if review is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        return review

    async def add(self, review: Review) -> Review:
        violations = validate_review(review)
        if violations:
            logger.info("Rejected review: %s", [v.message for v in violations])
            raise ValidationError(violations)
        if review.review_id is None:
            review = review.with_id(ReviewId(uuid4().hex))
        async with self._uow_factory() as uow:
            saved = await uow.review_repository.save(review)
            await uow.commit()
        return saved

    async def update(self, changes: Review, review_id: ReviewId) -> Review:
        async with self._uow_factory() as uow:
            existing = await uow.review_repository.get(review_id)
            if existing is None:
                raise NotFoundError(REVIEW_NOT_FOUND)
            saved = await uow.review_repository.save(existing.merged_with(changes))
            await uow.commit()
        return saved

    async def delete(self, review_id: ReviewId) -> None:
        async with self._uow_factory() as uow:
            await uow.review_repository.delete(review_id)
            await uow.commit()


__all__ = ["REVIEW_NOT_FOUND", "ReviewService"]
