from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Base for every failure of a person provider call."""


class TransportError(FetchError):
    """The provider could not be reached (DNS, refused connection, timeout)."""


class HttpStatusError(FetchError):
    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(f"HTTP Error: {status_code}")
        self.status_code = status_code
        self.url = url


class ParseError(FetchError):
    """The provider answered, but not with a usable ``{results: [...]}`` payload."""
