from .card_state import CardState
from .field_key import DEFAULT_FIELD, FIELD_TITLES, FieldKey
from .interaction import InteractionTarget, KeyActivation
from .load_state import LoadState
from .person_record import PersonRecord

__all__ = [
    "CardState",
    "DEFAULT_FIELD",
    "FIELD_TITLES",
    "FieldKey",
    "InteractionTarget",
    "KeyActivation",
    "LoadState",
    "PersonRecord",
]
