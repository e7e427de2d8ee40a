from __future__ import annotations

from typing import Any, Dict, Protocol


class PersonProviderPort(Protocol):
    source_name: str

    async def fetch_payload(self) -> Dict[str, Any]:
        """Return the decoded provider payload, shaped ``{"results": [...]}``.

        Raises a ``sources.errors.FetchError`` subclass on failure.
        """
        ...
