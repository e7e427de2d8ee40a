from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.field_extractor'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached; tests tweak env freely
    monkeypatch.delenv("FETCH_TRACE", raising=False)
    monkeypatch.delenv("CARD_SOURCE", raising=False)
    monkeypatch.delenv("DEMO", raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ada_payload():
    return {
        "results": [
            {
                "name": {"title": "Ms", "first": "Ada", "last": "Lovelace"},
                "picture": {"large": "https://example.com/ada.jpg"},
                "location": {"street": {"number": 12, "name": "St James's Square"}},
                "dob": {"date": "1985-03-12"},
                "email": "a@x.com",
                "phone": "020 7946 0123",
            }
        ]
    }
