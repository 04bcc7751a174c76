"""Review service endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from movie_services.catalog import ReviewService
from movie_services.domain import MovieInfoId, Review, ReviewId

from .deps import get_review_service

router = APIRouter(prefix="/v1", tags=["reviews"])


@router.get("/reviews", response_model=list[Review])
async def list_reviews(
    movie_info_id: str | None = Query(
        None, alias="movieInfoId", description="Only return reviews for this movie"
    ),
    service: ReviewService = Depends(get_review_service),
) -> list[Review]:
    target = MovieInfoId(movie_info_id) if movie_info_id is not None else None
    return list(await service.get_all(target))


@router.post("/reviews", response_model=Review, status_code=status.HTTP_201_CREATED)
async def add_review(
    review: Review,
    service: ReviewService = Depends(get_review_service),
) -> Review:
    return await service.add(review)


@router.put("/reviews/{review_id}", response_model=Review)
async def update_review(
    review_id: str,
    review: Review,
    service: ReviewService = Depends(get_review_service),
) -> Review:
    """Copy comment and rating onto the stored review; other fields are ignored."""

    return await service.update(review, ReviewId(review_id))


@router.delete("/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(
    review_id: str,
    service: ReviewService = Depends(get_review_service),
) -> Response:
    await service.delete(ReviewId(review_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
