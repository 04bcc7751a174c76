"""Shared plumbing for httpx-backed peer clients."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

from .exceptions import RemoteError, RemoteNotFound

logger = logging.getLogger(__name__)


class PeerClient:
    """Issues GET requests against one peer base URL and classifies failures."""

    peer_name = "peer"

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_json(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        translate_not_found: bool = True,
    ) -> object:
        async with self._client_scope() as client:
            try:
                response = await client.get(url, params=params, timeout=self._timeout)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                if status_code == httpx.codes.NOT_FOUND and translate_not_found:
                    msg = f"{self.peer_name} has no record at {exc.request.url}"
                    raise RemoteNotFound(msg, status_code=status_code) from exc
                logger.warning("%s returned %s for %s", self.peer_name, status_code, url)
                msg = f"{self.peer_name} request failed with status {status_code}"
                raise RemoteError(msg, status_code=status_code) from exc
            except httpx.TimeoutException as exc:
                logger.warning("%s timed out after %ss: %s", self.peer_name, self._timeout, url)
                msg = f"{self.peer_name} request timed out"
                raise RemoteError(msg, timed_out=True) from exc
            except httpx.HTTPError as exc:
                logger.warning("%s request failed: %s", self.peer_name, exc)
                msg = f"{self.peer_name} request failed"
                raise RemoteError(msg) from exc
            except ValueError as exc:
                msg = f"{self.peer_name} returned a body that is not JSON"
                raise RemoteError(msg) from exc

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


__all__ = ["PeerClient"]
