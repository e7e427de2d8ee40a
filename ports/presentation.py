from __future__ import annotations

from typing import Any, Protocol


class CardRendererPort(Protocol):
    def render(self, view: Any) -> None:
        """Reflect a ``services.presentation.CardView`` into visible UI."""
        ...
