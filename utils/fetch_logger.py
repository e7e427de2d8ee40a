from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def log_fetch(
    *,
    caller: str,
    provider: str,
    url: Optional[str],
    operation: str = "fetch_person",
    duration_ms: Optional[int] = None,
    status: str = "ok",
    http_status: Optional[int] = None,
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing a provider call if tracing is enabled.

    Controlled by FETCH_TRACE / FETCH_LOG_PATH in config/settings.py. A trace
    file that cannot be written is reported through logging and otherwise
    ignored, so tracing never changes the outcome of a fetch.
    """
    from config.settings import get_settings
    # Pick up env changes between calls (tests monkeypatch env)
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.fetch_trace:
        return

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "caller": caller,
        "provider": provider,
        "url": url,
        "operation": operation,
        "duration_ms": duration_ms,
        "status": status,
        "http_status": http_status,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id
    if extras:
        # Nested under a dedicated key to avoid collisions
        payload["extras"] = extras

    log_path = Path(settings.fetch_log_path)
    try:
        _ensure_parent_dir(log_path)
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.warning("Could not write fetch trace to %s: %s", log_path, e)
