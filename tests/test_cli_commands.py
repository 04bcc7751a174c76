from __future__ import annotations

import json
from importlib import import_module
from pathlib import Path

import pytest
from typer.testing import CliRunner

from movie_services.catalog import NotFoundError
from movie_services.cli.app import app
from movie_services.cli.deps import reset_container
from movie_services.clients import RemoteError
from movie_services.domain import Movie, MovieInfo, MovieInfoId

app_module = import_module("movie_services.cli.app")


def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("MOVIES_DATABASE_URL", db_url)
    monkeypatch.setenv("MOVIES_ENV", "test")
    reset_container()


class StubAggregator:
    def __init__(self, result: Movie | Exception) -> None:
        self._result = result

    async def retrieve_movie(self, movie_id: str) -> Movie:
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class StubContainer:
    def __init__(self, aggregator: StubAggregator) -> None:
        self.movie_aggregator = aggregator


def test_cli_seed_list_and_find(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    seeded = runner.invoke(app, ["seed-movie-infos"])
    assert seeded.exit_code == 0
    assert "abc\tDark Knight Rises\t2012" in seeded.stdout

    listed = runner.invoke(app, ["list-movie-infos"])
    assert listed.exit_code == 0
    assert len(listed.stdout.strip().splitlines()) == 3

    by_year = runner.invoke(app, ["list-movie-infos", "--year", "2008"])
    assert by_year.exit_code == 0
    assert "The Dark Knight" in by_year.stdout
    assert "Batman Begins" not in by_year.stdout

    found = runner.invoke(app, ["find-movie-info", "--name", "Dark Knight Rises"])
    assert found.exit_code == 0
    assert json.loads(found.stdout)["movieInfoId"] == "abc"

    missing = runner.invoke(app, ["find-movie-info", "--name", "Nope"])
    assert missing.exit_code == 1


def test_cli_list_empty_store(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)

    result = CliRunner().invoke(app, ["list-movie-infos"])

    assert result.exit_code == 0
    assert "No movie infos found" in result.stdout


def test_cli_add_review(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    created = runner.invoke(app, ["add-review", "abc", "--comment", "Great", "--rating", "9"])
    assert created.exit_code == 0
    assert created.stdout.startswith("Created review ")

    rejected = runner.invoke(app, ["add-review", "abc", "--rating", "-1"])
    assert rejected.exit_code == 1
    assert "rating.negative" in rejected.stdout


def test_cli_show_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    monkeypatch.setenv("MOVIES_REVIEWS_URL", "http://reviews.test/v1/reviews")
    reset_container()

    result = CliRunner().invoke(app, ["show-settings"])

    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout
    assert "Reviews URL:\thttp://reviews.test/v1/reviews" in result.stdout


def test_cli_show_movie(monkeypatch: pytest.MonkeyPatch) -> None:
    movie = Movie(
        movie_info=MovieInfo(movie_info_id=MovieInfoId("abc"), name="Dark Knight Rises"),
        reviews=(),
    )
    container = StubContainer(StubAggregator(movie))
    monkeypatch.setattr(app_module, "get_container", lambda: container)

    result = CliRunner().invoke(app, ["show-movie", "abc"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["movieInfo"]["name"] == "Dark Knight Rises"
    assert payload["reviews"] == []


@pytest.mark.parametrize(
    ("failure", "exit_code"),
    [(NotFoundError("Movie zzz not found"), 1), (RemoteError("review service down"), 2)],
)
def test_cli_show_movie_failures(
    monkeypatch: pytest.MonkeyPatch, failure: Exception, exit_code: int
) -> None:
    container = StubContainer(StubAggregator(failure))
    monkeypatch.setattr(app_module, "get_container", lambda: container)

    result = CliRunner().invoke(app, ["show-movie", "zzz"])

    assert result.exit_code == exit_code
    assert str(failure) in result.stdout
