from __future__ import annotations

from typing import Any, Dict, Optional

from models.field_key import FieldKey
from models.person_record import PersonRecord
from services.field_extractor import extract


def view_to_dict(view: Any) -> Dict[str, Any]:
    """JSON-friendly shape of a CardView."""
    return {
        "status": view.load_state.status,
        "message": view.load_state.message,
        "active_field": view.active_field.value,
        "title": view.title,
        "value": view.value,
        "picture_url": view.picture_url,
        "picture_alt": view.picture_alt,
    }


def print_card(view: Any) -> None:
    """Print the card the way the page would show it."""
    print("\n" + "="*60)
    if view.show_status and view.status_text:
        print(view.status_text)
    elif view.show_loader:
        print("Loading...")
    if view.show_card:
        if view.picture_url:
            print(f"[{view.picture_alt or 'profile picture'}] {view.picture_url}")
        print(view.title)
        print(f"  {view.value}")
        markers = [f"[{k.value}]" if k is view.active_field else k.value for k in FieldKey]
        print("  " + "  ".join(markers))
    print("="*60)


def print_fields(record: Optional[PersonRecord]) -> None:
    """Print every field of the current person, one per line."""
    print("\n" + "="*60)
    for key in FieldKey:
        print(f"{key.display_title}: {extract(key, record)}")
    print("="*60)


class TerminalRenderer:
    """Renderer that prints each view it receives; ``quiet`` only remembers the last one."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.last_view: Any = None
        self.renders = 0

    def render(self, view: Any) -> None:
        self.last_view = view
        self.renders += 1
        if not self.quiet:
            print_card(view)
