"""FastAPI application factories for the three services."""

from __future__ import annotations

from enum import StrEnum

from fastapi import APIRouter, FastAPI

from movie_services import __version__
from movie_services.container import ServiceContainer, build_container
from movie_services.domain import DomainModel

from . import movie_info, movies, reviews
from .errors import install_error_handlers


class ServiceName(StrEnum):
    """Deployable services sharing this code base."""

    MOVIE_INFO = "movie-info"
    REVIEWS = "reviews"
    MOVIES = "movies"


class HealthStatus(DomainModel):
    service: ServiceName
    status: str = "ok"


_ROUTERS: dict[ServiceName, APIRouter] = {
    ServiceName.MOVIE_INFO: movie_info.router,
    ServiceName.REVIEWS: reviews.router,
    ServiceName.MOVIES: movies.router,
}


def create_app(
    service: ServiceName | str,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Build the FastAPI app for one service, sharing a container if given."""

    name = ServiceName(service)
    app = FastAPI(title=f"{name.value} service", version=__version__)
    app.state.container = container or build_container()
    app.include_router(_ROUTERS[name])
    install_error_handlers(app)

    @app.get("/health", response_model=HealthStatus, tags=["health"])
    async def health() -> HealthStatus:
        return HealthStatus(service=name)

    return app


__all__ = ["HealthStatus", "ServiceName", "create_app"]
