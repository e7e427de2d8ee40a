from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


LoadStatus = Literal["idle", "loading", "loaded", "failed"]


@dataclass(frozen=True)
class LoadState:
    """Lifecycle stage of the fetch operation. Only ``failed`` carries a message."""

    status: LoadStatus
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "LoadState":
        return cls("idle")

    @classmethod
    def loading(cls) -> "LoadState":
        return cls("loading")

    @classmethod
    def loaded(cls) -> "LoadState":
        return cls("loaded")

    @classmethod
    def failed(cls, message: str) -> "LoadState":
        return cls("failed", message)

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"

    @property
    def is_loaded(self) -> bool:
        return self.status == "loaded"

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"
