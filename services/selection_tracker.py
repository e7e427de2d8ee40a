from __future__ import annotations

import logging
from typing import Any, Callable, List

from models.card_state import CardState
from models.field_key import DEFAULT_FIELD, FieldKey

logger = logging.getLogger(__name__)

SelectionListener = Callable[[FieldKey], None]


class SelectionTracker:
    """Keeps exactly one FieldKey active on the shared CardState."""

    def __init__(self, state: CardState) -> None:
        self.state = state
        self._listeners: List[SelectionListener] = []

    def add_listener(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def current(self) -> FieldKey:
        return self.state.active_field

    def is_active(self, field_key: Any) -> bool:
        return FieldKey.parse(field_key) is self.state.active_field

    def active_keys(self) -> List[FieldKey]:
        return [key for key in FieldKey if key is self.state.active_field]

    def select(self, field_key: Any) -> bool:
        """Activate ``field_key``. Unknown keys are ignored and return False."""
        key = FieldKey.parse(field_key)
        if key is None:
            logger.debug("Ignoring selection of unknown field %r", field_key, extra={"event": "select", "status": "ignored"})
            return False
        if key is not self.state.active_field:
            self.state.active_field = key
            self._notify(key)
        return True

    def reset(self, notify: bool = True) -> None:
        """Back to the default field. ``notify=False`` leaves announcing it to the caller."""
        self.state.active_field = DEFAULT_FIELD
        if notify:
            self._notify(DEFAULT_FIELD)

    def _notify(self, key: FieldKey) -> None:
        for listener in self._listeners:
            listener(key)
