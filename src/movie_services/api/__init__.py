"""HTTP surface for the movie services."""

from .app import HealthStatus, ServiceName, create_app
from .movies import ClientDisconnected, run_until_disconnected

__all__ = [
    "ClientDisconnected",
    "HealthStatus",
    "ServiceName",
    "create_app",
    "run_until_disconnected",
]
