from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from models.card_state import CardState
from models.field_key import FieldKey
from models.interaction import KeyActivation
from models.load_state import LoadState
from models.person_record import PersonRecord
from ports.presentation import CardRendererPort
from ports.source import PersonProviderPort
from services.fetch_controller import FetchController
from services.field_extractor import extract, title_for
from services.interaction import TargetLike, resolve_activation, resolve_field
from services.selection_tracker import SelectionTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardView:
    """Everything a renderer needs to draw the card at one moment."""

    load_state: LoadState
    active_field: FieldKey
    title: str
    value: str
    picture_url: Optional[str] = None
    picture_alt: Optional[str] = None
    show_card: bool = False
    show_skeleton: bool = True
    show_status: bool = False
    show_loader: bool = False
    status_text: str = ""


def _picture_alt(record: PersonRecord) -> Optional[str]:
    if record.name is None:
        return None
    parts = [p for p in (record.name.title, record.name.first, record.name.last) if p]
    if not parts:
        return None
    return f"{' '.join(parts)} profile picture"


def build_view(state: CardState) -> CardView:
    record = state.record
    load_state = state.load_state
    picture_url = record.picture.large if record and record.picture else None
    picture_alt = _picture_alt(record) if record else None
    base = dict(
        load_state=load_state,
        active_field=state.active_field,
        title=title_for(state.active_field),
        value=extract(state.active_field, record),
        picture_url=picture_url,
        picture_alt=picture_alt,
    )
    if load_state.is_loading:
        return CardView(**base, show_card=False, show_skeleton=True, show_status=True, show_loader=True)
    if load_state.is_loaded:
        return CardView(**base, show_card=True, show_skeleton=False, show_status=False, show_loader=False)
    if load_state.is_failed:
        return CardView(
            **base,
            show_card=False,
            show_skeleton=True,
            show_status=True,
            show_loader=False,
            status_text=load_state.message or "",
        )
    return CardView(**base)


class PresentationCoordinator:
    """Glue between the core services and a renderer.

    Owns the CardState for one card. Fetch and selection events both end in
    a fresh ``CardView`` pushed to the renderer, if one is attached.
    """

    def __init__(self, provider: PersonProviderPort, renderer: Optional[CardRendererPort] = None) -> None:
        self.state = CardState()
        self.selection = SelectionTracker(self.state)
        self.fetcher = FetchController(self.state, provider, self.selection)
        self.renderer = renderer
        self.view = build_view(self.state)
        self._closed = False
        self.fetcher.add_listener(self._on_load_state)
        self.selection.add_listener(self._on_selection)

    async def start(self) -> CardView:
        """Initial load."""
        await self.on_request_new_record()
        return self.view

    async def on_request_new_record(self) -> LoadState:
        return await self.fetcher.request_new_record()

    def on_hover(self, target: TargetLike) -> bool:
        key = resolve_field(target)
        if key is None:
            return False
        return self.selection.select(key)

    def on_activate_key(self, target: TargetLike, key_name: str) -> bool:
        return self.dispatch_key(KeyActivation(key=key_name, target=target))

    def dispatch_key(self, event: KeyActivation) -> bool:
        """Handle a key event; ``event.default_prevented`` tells the renderer to swallow it."""
        key = resolve_activation(event)
        if key is None:
            return False
        return self.selection.select(key)

    def close(self) -> None:
        """Tear down with the view; later events are no longer rendered."""
        self._closed = True
        self.renderer = None

    def _on_load_state(self, load_state: LoadState) -> None:
        logger.debug("Load state -> %s", load_state.status, extra={"event": "load_state", "status": load_state.status})
        self._refresh()

    def _on_selection(self, key: FieldKey) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self.view = build_view(self.state)
        if self.renderer is not None and not self._closed:
            self.renderer.render(self.view)
