from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List

from pydantic import ValidationError

from models.card_state import CardState
from models.load_state import LoadState
from models.person_record import PersonRecord
from ports.source import PersonProviderPort
from services.selection_tracker import SelectionTracker
from sources.errors import FetchError, HttpStatusError, ParseError

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to load user data. Check your connection and try again."

LoadListener = Callable[[LoadState], None]


def parse_person(payload: Any) -> PersonRecord:
    """Take ``results[0]`` out of a provider payload."""
    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")
    results = payload.get("results")
    if not isinstance(results, list) or not results:
        raise ParseError("Payload has no results")
    first = results[0]
    if not isinstance(first, dict):
        raise ParseError(f"results[0] is {type(first).__name__}, not an object")
    try:
        return PersonRecord.model_validate(first)
    except ValidationError as e:
        raise ParseError(f"results[0] does not look like a person: {e.error_count()} errors") from e


class FetchController:
    """Retrieves one person at a time and drives the LoadState of a CardState."""

    def __init__(self, state: CardState, provider: PersonProviderPort, selection: SelectionTracker) -> None:
        self.state = state
        self.provider = provider
        self.selection = selection
        self._listeners: List[LoadListener] = []

    def add_listener(self, listener: LoadListener) -> None:
        self._listeners.append(listener)

    async def request_new_record(self) -> LoadState:
        if self.state.in_flight:
            logger.debug("Fetch already in flight; request dropped", extra={"event": "fetch", "status": "dropped"})
            return self.state.load_state

        self.state.in_flight = True
        try:
            self._transition(LoadState.loading())
            t0 = time.time()
            provider_name = getattr(self.provider, "source_name", "unknown")
            try:
                payload = await self.provider.fetch_payload()
                record = parse_person(payload)
            except FetchError as e:
                extra: Dict[str, Any] = {
                    "event": "fetch",
                    "status": "error",
                    "provider": provider_name,
                    "error": type(e).__name__,
                    "duration_ms": int((time.time() - t0) * 1000),
                }
                if isinstance(e, HttpStatusError):
                    extra["http_status"] = e.status_code
                    extra["url"] = e.url
                logger.error("Error fetching user data: %s", e, extra=extra)
                self._transition(LoadState.failed(FAILURE_MESSAGE))
            else:
                self.state.record = record
                # the Loaded transition below announces the reset
                self.selection.reset(notify=False)
                logger.info(
                    "Loaded person record",
                    extra={"event": "fetch", "status": "ok", "provider": provider_name, "duration_ms": int((time.time() - t0) * 1000)},
                )
                self._transition(LoadState.loaded())
        finally:
            self.state.in_flight = False
        return self.state.load_state

    def _transition(self, new_state: LoadState) -> None:
        self.state.load_state = new_state
        for listener in self._listeners:
            listener(new_state)
