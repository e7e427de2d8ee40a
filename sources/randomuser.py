"""
randomuser.me integration: one GET per call, decoded JSON back to the caller.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings
from sources.errors import HttpStatusError, ParseError, TransportError
from sources.registry import register
from utils.fetch_logger import log_fetch

logger = logging.getLogger(__name__)


class RandomUserSource:
    source_name = "randomuser"

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.url = self.settings.randomuser_api_url
        self.session = session or requests.Session()
        self.api_calls_made = 0

    def build_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.settings.randomuser_nat:
            params["nat"] = self.settings.randomuser_nat
        if self.settings.randomuser_seed:
            params["seed"] = self.settings.randomuser_seed
        return params

    def get_payload(self) -> Dict[str, Any]:
        """Blocking provider call. Raises TransportError, HttpStatusError or ParseError."""
        t0 = time.time()
        self.api_calls_made += 1
        logger.info(f"Requesting person from {self.url} (call {self.api_calls_made})")
        try:
            response = self.session.get(
                self.url,
                params=self.build_params(),
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            self._trace("error", t0, error=str(e))
            raise TransportError(f"Could not reach {self.url}: {e}") from e

        if not 200 <= response.status_code < 300:
            self._trace("error", t0, http_status=response.status_code, error=f"HTTP {response.status_code}")
            raise HttpStatusError(response.status_code, self.url)

        try:
            data = response.json()
        except ValueError as e:
            self._trace("error", t0, http_status=response.status_code, error="invalid json")
            raise ParseError(f"Response from {self.url} is not JSON") from e

        self._trace("ok", t0, http_status=response.status_code)
        return data

    async def fetch_payload(self) -> Dict[str, Any]:
        # requests is blocking; run it off the event loop
        return await asyncio.to_thread(self.get_payload)

    def _trace(self, status: str, t0: float, http_status: Optional[int] = None, error: Optional[str] = None) -> None:
        log_fetch(
            caller="randomuser.get_payload",
            provider=self.source_name,
            url=self.url,
            duration_ms=int((time.time() - t0) * 1000),
            status=status,
            http_status=http_status,
            error=error,
        )


def _register():
    register(RandomUserSource.source_name, RandomUserSource)


_register()
