from __future__ import annotations

from enum import Enum
from typing import Optional


class FieldKey(str, Enum):
    """Selectable display category on the card."""

    NAME = "name"
    LOCATION = "location"
    BIRTHDAY = "birthday"
    EMAIL = "email"
    PHONE = "phone"

    @property
    def display_title(self) -> str:
        return FIELD_TITLES[self]

    @classmethod
    def parse(cls, value: object) -> Optional["FieldKey"]:
        """Return the matching key, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


FIELD_TITLES: dict[FieldKey, str] = {
    FieldKey.NAME: "Hi, My name is",
    FieldKey.LOCATION: "My address is",
    FieldKey.BIRTHDAY: "My birthday is",
    FieldKey.EMAIL: "My email address is",
    FieldKey.PHONE: "My phone number is",
}

DEFAULT_FIELD = FieldKey.NAME
