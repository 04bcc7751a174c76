"""Review records owned by the review service."""

from __future__ import annotations

from pydantic import Field

from .base import WireModel
from .types import MovieInfoId, ReviewId


class Review(WireModel):
    """A single user review attached to a movie by its public id."""

    review_id: ReviewId | None = Field(default=None, alias="reviewId")
    movie_info_id: MovieInfoId | None = Field(default=None, alias="movieInfoId")
    comment: str | None = None
    rating: float | None = None

    def with_id(self, review_id: ReviewId) -> Review:
        return self.model_copy(update={"review_id": review_id})

    def merged_with(self, changes: Review) -> Review:
        """Return a copy carrying ``changes``' comment and rating only."""

        return self.model_copy(update={"comment": changes.comment, "rating": changes.rating})


__all__ = ["Review"]
