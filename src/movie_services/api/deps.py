"""FastAPI dependency helpers."""

from __future__ import annotations

from fastapi import Request

from movie_services.aggregation import MovieAggregator
from movie_services.catalog import MovieInfoService, ReviewService
from movie_services.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    container: ServiceContainer = request.app.state.container
    return container


def get_movie_info_service(request: Request) -> MovieInfoService:
    return get_container(request).movie_info_service


def get_review_service(request: Request) -> ReviewService:
    return get_container(request).review_service


def get_movie_aggregator(request: Request) -> MovieAggregator:
    return get_container(request).movie_aggregator


__all__ = [
    "get_container",
    "get_movie_aggregator",
    "get_movie_info_service",
    "get_review_service",
]
