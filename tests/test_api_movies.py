from __future__ import annotations

import asyncio
from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from movie_services.api import ClientDisconnected, create_app, run_until_disconnected
from movie_services.config import AppSettings
from movie_services.container import build_container
from movie_services.persistence import InMemoryUnitOfWork

MOVIE_INFO_URL = "http://movie-info.test/v1/movieinfos"
REVIEWS_URL = "http://reviews.test/v1/reviews"

DARK_KNIGHT_RISES = {
    "movieInfoId": "abc",
    "name": "Dark Knight Rises",
    "year": 2012,
    "cast": ["Christian Bale", "Tom Hardy"],
    "release_date": "2012-07-20",
}


class FakePeers:
    """Routes outbound calls to canned movie-info and review responses."""

    def __init__(
        self,
        *,
        movie_info: Callable[[str], httpx.Response] | None = None,
        reviews: Callable[[str], httpx.Response] | None = None,
    ) -> None:
        self._movie_info = movie_info or (lambda _: httpx.Response(200, json=DARK_KNIGHT_RISES))
        self._reviews = reviews or (lambda _: httpx.Response(200, json=[]))
        self.review_calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "movie-info.test":
            return self._movie_info(request.url.path.rsplit("/", 1)[-1])
        self.review_calls += 1
        return self._reviews(request.url.params["movieInfoId"])


def _movies_client(peers: FakePeers) -> TestClient:
    settings = AppSettings(
        environment="test",
        movie_info_base_url=MOVIE_INFO_URL,
        reviews_base_url=REVIEWS_URL,
        disconnect_poll_interval=0.01,
    )
    uow = InMemoryUnitOfWork()
    container = build_container(
        settings,
        unit_of_work_factory=lambda: uow,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(peers)),
    )
    return TestClient(create_app("movies", container))


def test_retrieve_movie_composes_info_and_reviews() -> None:
    reviews = [
        {"reviewId": "r1", "movieInfoId": "abc", "comment": "Awesome", "rating": 9.0},
        {"reviewId": "r2", "movieInfoId": "abc", "comment": "Good", "rating": 7.5},
    ]
    peers = FakePeers(reviews=lambda _: httpx.Response(200, json=reviews))

    with _movies_client(peers) as client:
        response = client.get("/v1/movies/abc")

    assert response.status_code == 200
    body = response.json()
    assert body["movieInfo"]["name"] == "Dark Knight Rises"
    assert body["reviews"] == reviews


def test_retrieve_movie_without_reviews() -> None:
    with _movies_client(FakePeers()) as client:
        response = client.get("/v1/movies/abc")

    assert response.status_code == 200
    assert response.json()["reviews"] == []


def test_unknown_movie_is_404_and_skips_review_peer() -> None:
    peers = FakePeers(movie_info=lambda _: httpx.Response(404))

    with _movies_client(peers) as client:
        response = client.get("/v1/movies/zzz")

    assert response.status_code == 404
    assert peers.review_calls == 0


def test_movie_info_peer_failure_is_bad_gateway() -> None:
    peers = FakePeers(movie_info=lambda _: httpx.Response(500))

    with _movies_client(peers) as client:
        response = client.get("/v1/movies/abc")

    assert response.status_code == 502
    assert peers.review_calls == 0
    assert "Traceback" not in response.text


def test_review_peer_failure_is_bad_gateway_without_partial_body() -> None:
    peers = FakePeers(reviews=lambda _: httpx.Response(503))

    with _movies_client(peers) as client:
        response = client.get("/v1/movies/abc")

    assert response.status_code == 502
    assert "movieInfo" not in response.json()


def test_peer_timeout_is_gateway_timeout() -> None:
    def _timeout(_: str) -> httpx.Response:
        raise httpx.ReadTimeout("too slow")

    with _movies_client(FakePeers(reviews=_timeout)) as client:
        response = client.get("/v1/movies/abc")

    assert response.status_code == 504


class FlakyProbe:
    def __init__(self, disconnect_after: int) -> None:
        self._remaining = disconnect_after
        self.checks = 0

    async def is_disconnected(self) -> bool:
        self.checks += 1
        self._remaining -= 1
        return self._remaining < 0


def test_run_until_disconnected_returns_result_when_work_finishes() -> None:
    async def _work() -> str:
        await asyncio.sleep(0)
        return "done"

    result = asyncio.run(
        run_until_disconnected(FlakyProbe(disconnect_after=10), _work(), poll_interval=0.01)
    )

    assert result == "done"


def test_run_until_disconnected_cancels_abandoned_work() -> None:
    cancelled: list[bool] = []

    async def _work() -> str:
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.append(True)
            raise
        return "never"

    probe = FlakyProbe(disconnect_after=1)
    with pytest.raises(ClientDisconnected):
        asyncio.run(run_until_disconnected(probe, _work(), poll_interval=0.01))

    assert cancelled == [True]
    assert probe.checks == 2


def test_run_until_disconnected_propagates_work_errors() -> None:
    async def _work() -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(
            run_until_disconnected(FlakyProbe(disconnect_after=10), _work(), poll_interval=0.01)
        )
