from __future__ import annotations

from typing import Optional, Union

from models.field_key import FieldKey
from models.interaction import InteractionTarget, KeyActivation


ACTIVATION_KEYS = frozenset({"Enter", " ", "Space", "Spacebar"})

TargetLike = Union[InteractionTarget, str, FieldKey, None]


def closest_selectable(target: Optional[InteractionTarget]) -> Optional[InteractionTarget]:
    """Walk from ``target`` up its parents to the nearest icon item."""
    node = target
    while node is not None:
        if node.selectable:
            return node
        node = node.parent
    return None


def resolve_field(target: TargetLike) -> Optional[FieldKey]:
    """FieldKey an interaction target stands for, or None for chrome and misses.

    Plain strings are accepted as already-resolved labels.
    """
    if target is None:
        return None
    if isinstance(target, (str, FieldKey)):
        return FieldKey.parse(target)
    item = closest_selectable(target)
    if item is None or not item.label:
        return None
    return FieldKey.parse(item.label)


def is_activation_key(key_name: Optional[str]) -> bool:
    return key_name in ACTIVATION_KEYS


def resolve_activation(event: KeyActivation) -> Optional[FieldKey]:
    """Resolve a key event; suppresses the key's default action only on a hit."""
    if not is_activation_key(event.key):
        return None
    key = resolve_field(event.target)
    if key is not None:
        event.prevent_default()
    return key
