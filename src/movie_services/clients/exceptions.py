"""Errors raised by clients calling peer services."""

from __future__ import annotations


class RemoteError(RuntimeError):
    """Raised when a peer call fails for transport or server-side reasons."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        timed_out: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.timed_out = timed_out


class RemoteNotFound(RemoteError):
    """Raised when a peer reports that the requested record does not exist."""


__all__ = ["RemoteError", "RemoteNotFound"]
