"""Movies (aggregate) service endpoints."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Protocol, TypeVar

from fastapi import APIRouter, Depends, Request, Response

from movie_services.aggregation import MovieAggregator
from movie_services.domain import Movie

from .deps import get_container, get_movie_aggregator

# nginx's non-standard "client closed request" status
CLIENT_CLOSED_REQUEST = 499

T = TypeVar("T")

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["movies"])


class ClientDisconnected(Exception):
    """Raised when the caller went away before the work finished."""


class DisconnectProbe(Protocol):
    async def is_disconnected(self) -> bool: ...


async def run_until_disconnected(
    probe: DisconnectProbe,
    work: Awaitable[T],
    *,
    poll_interval: float,
) -> T:
    """Await ``work`` unless the client disconnects first, in which case cancel it."""

    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await probe.is_disconnected():
                task.cancel()
                await asyncio.wait({task})
                raise ClientDisconnected
    finally:
        if not task.done():
            task.cancel()


@router.get("/movies/{movie_id}", response_model=Movie)
async def retrieve_movie(
    movie_id: str,
    request: Request,
    aggregator: MovieAggregator = Depends(get_movie_aggregator),
) -> Movie | Response:
    poll_interval = get_container(request).settings.disconnect_poll_interval
    try:
        return await run_until_disconnected(
            request,
            aggregator.retrieve_movie(movie_id),
            poll_interval=poll_interval,
        )
    except ClientDisconnected:
        logger.info("Client went away; abandoned aggregation for movie %s", movie_id)
        return Response(status_code=CLIENT_CLOSED_REQUEST)
