from __future__ import annotations

import json
import logging

from utils.fetch_logger import log_fetch
from utils.logging_setup import SafeExtraFormatter


def test_fetch_trace_writes_jsonl(tmp_path, monkeypatch):
    log_file = tmp_path / "nested" / "fetch_calls.jsonl"
    monkeypatch.setenv("FETCH_TRACE", "true")
    monkeypatch.setenv("FETCH_LOG_PATH", str(log_file))
    monkeypatch.setenv("RUN_ID", "test-run-123")

    log_fetch(
        caller="unit.test",
        provider="randomuser",
        url="https://randomuser.me/api/",
        duration_ms=42,
        status="ok",
        http_status=200,
        extras={"seed": "abc"},
    )

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    rec = json.loads(lines[-1])
    assert rec["caller"] == "unit.test"
    assert rec["operation"] == "fetch_person"
    assert rec["run_id"] == "test-run-123"
    assert rec["extras"] == {"seed": "abc"}


def test_trace_disabled_writes_nothing(tmp_path, monkeypatch):
    log_file = tmp_path / "fetch_calls.jsonl"
    monkeypatch.setenv("FETCH_LOG_PATH", str(log_file))
    log_fetch(caller="unit.test", provider="randomuser", url=None)
    assert not log_file.exists()


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s event=%(event)s status=%(status)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    record.event = "fetch"
    assert formatter.format(record) == "hello event=fetch status=-"


def test_unwritable_trace_only_warns(tmp_path, monkeypatch, caplog):
    # a directory where the file should be makes open() fail
    monkeypatch.setenv("FETCH_TRACE", "true")
    monkeypatch.setenv("FETCH_LOG_PATH", str(tmp_path))
    with caplog.at_level(logging.WARNING, logger="utils.fetch_logger"):
        log_fetch(caller="unit.test", provider="randomuser", url=None)
    assert "Could not write fetch trace" in caplog.text
