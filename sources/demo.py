from __future__ import annotations

import copy
from typing import Any, Dict

from sources.registry import register


DEMO_PERSON: Dict[str, Any] = {
    "name": {"title": "Ms", "first": "Ada", "last": "Lovelace"},
    "picture": {
        "large": "https://randomuser.me/api/portraits/women/1.jpg",
        "medium": "https://randomuser.me/api/portraits/med/women/1.jpg",
        "thumbnail": "https://randomuser.me/api/portraits/thumb/women/1.jpg",
    },
    "location": {
        "street": {"number": 12, "name": "St James's Square"},
        "city": "London",
        "state": "Greater London",
        "country": "United Kingdom",
    },
    "dob": {"date": "1985-03-12T08:30:00.000Z", "age": 41},
    "email": "ada.lovelace@example.com",
    "phone": "020 7946 0123",
    "cell": "07700 900123",
}


class DemoSource:
    """Offline provider: always answers with the same person. Used for DEMO=true."""

    source_name = "demo"

    def __init__(self):
        self.api_calls_made = 0

    async def fetch_payload(self) -> Dict[str, Any]:
        self.api_calls_made += 1
        return {"results": [copy.deepcopy(DEMO_PERSON)], "info": {"seed": "demo", "results": 1}}


def _register():
    register(DemoSource.source_name, DemoSource)


_register()
