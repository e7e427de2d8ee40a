from __future__ import annotations

from typing import Any, Dict, Optional

from config.settings import get_settings


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_source(name: Optional[str] = None):
    """Instantiate a registered provider; ``None`` means the configured default."""
    name = name or get_settings().card_source
    if name not in _REGISTRY:
        raise KeyError(f"Unknown source: {name}")
    return _REGISTRY[name]()


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)
