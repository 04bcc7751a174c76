"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///movie_services.db"
    movie_info_base_url: str = "http://localhost:8080/v1/movieinfos"
    reviews_base_url: str = "http://localhost:8081/v1/reviews"
    client_timeout: float = 5.0
    disconnect_poll_interval: float = 0.25
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("MOVIES_ENV", cls.environment),
            database_url=os.getenv("MOVIES_DATABASE_URL", cls.database_url),
            movie_info_base_url=os.getenv("MOVIES_MOVIE_INFO_URL", cls.movie_info_base_url),
            reviews_base_url=os.getenv("MOVIES_REVIEWS_URL", cls.reviews_base_url),
            client_timeout=_env_float("MOVIES_CLIENT_TIMEOUT", cls.client_timeout),
            disconnect_poll_interval=_env_float(
                "MOVIES_DISCONNECT_POLL", cls.disconnect_poll_interval
            ),
            log_level=os.getenv("MOVIES_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
