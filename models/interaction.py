from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class InteractionTarget:
    """A node an interaction can land on.

    Icon items are marked ``selectable`` and usually carry a ``label`` naming
    their field. Anything nested inside an icon item (the glyph, a tooltip)
    points back to it through ``parent``.
    """

    selectable: bool = False
    label: Optional[str] = None
    parent: Optional["InteractionTarget"] = None

    def child(self) -> "InteractionTarget":
        return InteractionTarget(parent=self)


@dataclass
class KeyActivation:
    key: str
    target: Union[InteractionTarget, str, None]
    default_prevented: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True
