"""Typer CLI wiring the movie services."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import date

import typer
import uvicorn

from movie_services.api import ServiceName, create_app
from movie_services.catalog import CatalogError, NotFoundError
from movie_services.clients import RemoteError
from movie_services.domain import MovieInfo, MovieInfoId, Review

from .deps import get_container, get_settings

app = typer.Typer(help="Movie services command-line interface")

SAMPLE_MOVIE_INFOS = (
    MovieInfo(
        name="Batman Begins",
        year=2005,
        cast=("Christian Bale", "Michael Cane"),
        release_date=date(2005, 6, 15),
    ),
    MovieInfo(
        name="The Dark Knight",
        year=2008,
        cast=("Christian Bale", "HeathLedger"),
        release_date=date(2008, 7, 18),
    ),
    MovieInfo(
        movie_info_id=MovieInfoId("abc"),
        name="Dark Knight Rises",
        year=2012,
        cast=("Christian Bale", "Tom Hardy"),
        release_date=date(2012, 7, 20),
    ),
)


def _echo_movie_info(movie_info: MovieInfo) -> None:
    typer.echo(f"{movie_info.movie_info_id}\t{movie_info.name}\t{movie_info.year}")


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Movie info URL:\t" + settings.movie_info_base_url)
    typer.echo("Reviews URL:\t" + settings.reviews_base_url)
    typer.echo(f"Client timeout:\t{settings.client_timeout}s")


@app.command("serve")
def serve(
    service: ServiceName = typer.Argument(..., help="Which service to run"),
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8080, min=1, max=65535),
) -> None:
    """Run one of the HTTP services under uvicorn."""

    container = get_container()
    logging.basicConfig(
        level=container.settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(service, container), host=host, port=port)


@app.command("seed-movie-infos")
def seed_movie_infos() -> None:
    """Store the three sample movie info records in the local store."""

    service = get_container().movie_info_service

    async def _persist() -> list[MovieInfo]:
        return [await service.add(movie_info) for movie_info in SAMPLE_MOVIE_INFOS]

    for saved in asyncio.run(_persist()):
        _echo_movie_info(saved)


@app.command("list-movie-infos")
def list_movie_infos(
    year: int | None = typer.Option(None, help="Only list movies released in this year"),
) -> None:
    """List movie info records in the local store."""

    service = get_container().movie_info_service

    async def _load() -> list[MovieInfo]:
        if year is not None:
            return list(await service.get_by_year(year))
        return list(await service.get_all())

    movie_infos = asyncio.run(_load())
    if not movie_infos:
        typer.echo("No movie infos found")
        return
    for movie_info in movie_infos:
        _echo_movie_info(movie_info)


@app.command("find-movie-info")
def find_movie_info(name: str = typer.Option(..., help="Exact movie name")) -> None:
    """Show the first movie info record with the given name."""

    service = get_container().movie_info_service
    try:
        movie_info = asyncio.run(service.get_by_name(name))
    except NotFoundError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(movie_info.model_dump(mode="json", by_alias=True), indent=2))


@app.command("add-review")
def add_review(
    movie_info_id: str,
    comment: str = typer.Option("", help="Review text"),
    rating: float = typer.Option(..., help="Non-negative rating"),
) -> None:
    """Store a review in the local store."""

    service = get_container().review_service
    review = Review(movie_info_id=MovieInfoId(movie_info_id), comment=comment, rating=rating)
    try:
        saved = asyncio.run(service.add(review))
    except CatalogError as exc:
        typer.echo(f"Review rejected: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created review {saved.review_id}")


@app.command("show-movie")
def show_movie(movie_id: str) -> None:
    """Compose a movie from the configured peer services and print it as JSON."""

    aggregator = get_container().movie_aggregator
    try:
        movie = asyncio.run(aggregator.retrieve_movie(movie_id))
    except NotFoundError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except RemoteError as exc:
        typer.echo(f"Peer failure: {exc}")
        raise typer.Exit(code=2) from exc
    typer.echo(json.dumps(movie.model_dump(mode="json", by_alias=True), indent=2))
