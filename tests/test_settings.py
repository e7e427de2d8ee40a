from __future__ import annotations

import pytest

from config.settings import get_settings


def test_defaults():
    s = get_settings()
    assert s.randomuser_api_url == "https://randomuser.me/api/"
    assert s.request_timeout_seconds == 10
    assert s.card_source == "randomuser"
    assert s.fetch_trace is False


def test_bad_timeout_raises(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "soon")
    get_settings.cache_clear()
    with pytest.raises(RuntimeError):
        get_settings()
