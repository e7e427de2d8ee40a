from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _as_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    randomuser_api_url: str
    request_timeout_seconds: float

    log_level: str

    # Core/runtime
    run_env: str
    card_source: str

    # Optional provider query params
    randomuser_nat: str | None = None
    randomuser_seed: str | None = None

    # Logging/tracing
    fetch_trace: bool = False
    fetch_log_path: str = "logs/fetch_calls.jsonl"

    # Feature flags
    demo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    demo = _as_bool(os.getenv("DEMO"))
    return Settings(
        randomuser_api_url=os.getenv("RANDOMUSER_API_URL", "https://randomuser.me/api/"),
        request_timeout_seconds=_as_float("REQUEST_TIMEOUT", "10"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        # DEMO switches the default source to the offline one
        card_source=os.getenv("CARD_SOURCE", "demo" if demo else "randomuser"),
        randomuser_nat=os.getenv("RANDOMUSER_NAT") or None,
        randomuser_seed=os.getenv("RANDOMUSER_SEED") or None,
        fetch_trace=_as_bool(os.getenv("FETCH_TRACE")),
        fetch_log_path=os.getenv("FETCH_LOG_PATH", "logs/fetch_calls.jsonl"),
        demo=demo,
    )
