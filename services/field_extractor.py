from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from models.field_key import FieldKey
from models.person_record import PersonRecord


NOT_FOUND = "Data not found"
MISSING = "N/A"

RecordLike = Union[PersonRecord, Mapping[str, Any], None]


def _part(value: Any) -> str:
    if value is None:
        return MISSING
    return str(value)


def _coerce(record: RecordLike) -> Optional[PersonRecord]:
    if record is None:
        return None
    if isinstance(record, PersonRecord):
        return None if record.is_empty() else record
    if not isinstance(record, Mapping) or not record:
        return None
    try:
        parsed = PersonRecord.model_validate(dict(record))
    except ValidationError:
        return None
    return None if parsed.is_empty() else parsed


def format_birthday(raw: Optional[str]) -> str:
    """Format an ISO-8601 date as en-US ``M/D/YYYY``, or N/A when absent or unparseable."""
    if not raw:
        return MISSING
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return MISSING
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def extract(field_key: Any, record: RecordLike) -> str:
    """Display string for ``field_key`` on ``record``. Never raises."""
    person = _coerce(record)
    if person is None:
        return NOT_FOUND

    key = FieldKey.parse(field_key)
    if key is FieldKey.NAME:
        name = person.name
        return f"{_part(name and name.first)} {_part(name and name.last)}"
    if key is FieldKey.LOCATION:
        street = person.location.street if person.location else None
        return f"{_part(street and street.number)} {_part(street and street.name)}"
    if key is FieldKey.BIRTHDAY:
        return format_birthday(person.dob.date if person.dob else None)
    if key is FieldKey.EMAIL:
        return _part(person.email)
    if key is FieldKey.PHONE:
        return _part(person.phone)
    return NOT_FOUND


def title_for(field_key: Any) -> str:
    key = FieldKey.parse(field_key)
    return key.display_title if key else ""
