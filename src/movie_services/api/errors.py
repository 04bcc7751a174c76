"""Translate service exceptions into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_services.catalog import NotFoundError, ValidationError
from movie_services.clients import RemoteError
from movie_services.persistence import RepositoryError

logger = logging.getLogger(__name__)


def _detail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def render_request_errors(exc: RequestValidationError) -> str:
    """Render body/query decoding errors in the same sorted, joined form as field violations."""

    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location} : {error.get('msg', 'invalid value')}")
    return ",".join(sorted(messages))


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, str(exc))


async def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, render_request_errors(exc))


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _detail(status.HTTP_404_NOT_FOUND, str(exc))


async def _remote_error(request: Request, exc: RemoteError) -> JSONResponse:
    if exc.timed_out:
        return _detail(status.HTTP_504_GATEWAY_TIMEOUT, str(exc))
    return _detail(status.HTTP_502_BAD_GATEWAY, str(exc))


async def _repository_error(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage failure")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(RemoteError, _remote_error)
    app.add_exception_handler(RepositoryError, _repository_error)


__all__ = ["install_error_handlers", "render_request_errors"]
