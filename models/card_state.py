from __future__ import annotations

from dataclasses import dataclass, field

from models.field_key import DEFAULT_FIELD, FieldKey
from models.load_state import LoadState
from models.person_record import PersonRecord


@dataclass
class CardState:
    """State owned by one card view; shared by reference between the core services."""

    record: PersonRecord | None = None
    load_state: LoadState = field(default_factory=LoadState.idle)
    in_flight: bool = False
    active_field: FieldKey = DEFAULT_FIELD
