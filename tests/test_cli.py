from __future__ import annotations

import io
import json
import sys
from typing import List

import pytest


def _run_cli_with_args(args_list: List[str]) -> int:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            return int(getattr(e, "code", 0) or 0)
        return 0
    finally:
        sys.argv = argv_backup


@pytest.fixture(autouse=True)
def _demo_source(monkeypatch):
    monkeypatch.setenv("RUN_ENV", "test")
    monkeypatch.setenv("DEMO", "true")


def test_show_prints_name(capsys):
    assert _run_cli_with_args(["show"]) == 0
    out = capsys.readouterr().out
    assert "Hi, My name is" in out
    assert "Ada Lovelace" in out


def test_show_field_as_json(capsys):
    assert _run_cli_with_args(["show", "--field", "birthday", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "loaded"
    assert data["active_field"] == "birthday"
    assert data["value"] == "3/12/1985"


def test_show_failure_exits_nonzero(capsys, monkeypatch):
    import sources.registry as reg
    from sources.errors import TransportError

    class _DownSource:
        source_name = "down"

        async def fetch_payload(self):
            raise TransportError("no route to host")

    monkeypatch.setattr(reg, "_REGISTRY", {"down": _DownSource})
    assert _run_cli_with_args(["show", "--source", "down"]) == 1
    out = capsys.readouterr().out
    assert "Check your connection and try again." in out
    assert "no route to host" not in out


def test_fields_lists_everything(capsys):
    assert _run_cli_with_args(["fields"]) == 0
    out = capsys.readouterr().out
    assert "My email address is: ada.lovelace@example.com" in out
    assert "My phone number is: 020 7946 0123" in out


def test_browse_session(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hover phone\nkey email Space\nhover nothing\nnew\nquit\nhover location\n"))
    assert _run_cli_with_args(["browse"]) == 0
    out = capsys.readouterr().out
    assert "020 7946 0123" in out
    assert "ada.lovelace@example.com" in out
    assert "Nothing to select for 'nothing'" in out
    # quit ends the session before the last command
    assert "12 St James's Square" not in out


def test_sources_lists_registered(capsys):
    assert _run_cli_with_args(["sources"]) == 0
    out = capsys.readouterr().out.split()
    assert "demo" in out and "randomuser" in out


def test_log_level_flag_sets_root_level(capsys):
    import logging
    root = logging.getLogger()
    before = root.level
    try:
        assert _run_cli_with_args(["--log-level", "DEBUG", "sources"]) == 0
        assert root.level == logging.DEBUG
        assert _run_cli_with_args(["-l", "WARNING", "sources"]) == 0
        assert root.level == logging.WARNING
    finally:
        root.setLevel(before)
