"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from movie_services.aggregation import MovieAggregator
from movie_services.catalog import MovieInfoService, ReviewService, UnitOfWorkFactory
from movie_services.clients import MovieInfoClient, ReviewClient
from movie_services.config import AppSettings
from movie_services.persistence.sqlite import create_sqlite_unit_of_work_factory

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the services behind all three HTTP apps."""

    settings: AppSettings
    unit_of_work_factory: UnitOfWorkFactory
    movie_info_service: MovieInfoService
    review_service: ReviewService
    movie_info_client: MovieInfoClient
    review_client: ReviewClient
    movie_aggregator: MovieAggregator


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(
    settings: AppSettings | None = None,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ServiceContainer:
    """Construct the primary service container.

    ``unit_of_work_factory`` and ``http_client`` replace the SQLite store and
    the per-call peer connections, mainly for tests.
    """

    resolved_settings = settings or AppSettings.from_env()

    if unit_of_work_factory is None:
        _ensure_sqlite_directory(resolved_settings.database_url)
        unit_of_work_factory = create_sqlite_unit_of_work_factory(resolved_settings.database_url)

    movie_info_client = MovieInfoClient(
        resolved_settings.movie_info_base_url,
        client=http_client,
        timeout=resolved_settings.client_timeout,
    )
    review_client = ReviewClient(
        resolved_settings.reviews_base_url,
        client=http_client,
        timeout=resolved_settings.client_timeout,
    )
    logger.debug(
        "Peers configured: movie info at %s, reviews at %s",
        movie_info_client.base_url,
        review_client.base_url,
    )

    return ServiceContainer(
        settings=resolved_settings,
        unit_of_work_factory=unit_of_work_factory,
        movie_info_service=MovieInfoService(unit_of_work_factory),
        review_service=ReviewService(unit_of_work_factory),
        movie_info_client=movie_info_client,
        review_client=review_client,
        movie_aggregator=MovieAggregator(movie_info_client, review_client),
    )


__all__ = ["ServiceContainer", "UnitOfWorkFactory", "build_container"]
