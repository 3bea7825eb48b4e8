"""Exceptions raised by og_mdx."""

from __future__ import annotations

from typing import Optional


class OpenGraphError(Exception):
    """Base class for errors surfaced by the package."""


class FetchTimeoutError(OpenGraphError):
    """The page did not respond within the timeout the caller asked for."""

    def __init__(self, uri: str, timeout: Optional[float]) -> None:
        super().__init__(f"Timed out after {timeout}s fetching {uri}")
        self.uri = uri
        self.timeout = timeout
