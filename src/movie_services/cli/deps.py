"""Process-wide settings and container for CLI commands."""

from __future__ import annotations

from functools import lru_cache

from movie_services.config import AppSettings
from movie_services.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings.from_env()


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Build the container once from :func:`get_settings`."""

    return build_container(get_settings())


def reset_container() -> None:
    """Forget cached settings and container so the environment is read again."""

    get_container.cache_clear()
    get_settings.cache_clear()
