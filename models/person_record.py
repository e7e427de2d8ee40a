from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _to_text(value: Any) -> Optional[str]:
    # Scalars are shown as-is; nested junk in a leaf reads as missing
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _section(value: Any) -> Any:
    if isinstance(value, (Mapping, BaseModel)):
        return value
    return None


Text = Annotated[Optional[str], BeforeValidator(_to_text)]
Count = Annotated[Optional[int], BeforeValidator(_to_int)]


class _Part(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class PersonName(_Part):
    title: Text = None
    first: Text = None
    last: Text = None


class Picture(_Part):
    large: Text = None
    medium: Text = None
    thumbnail: Text = None


class Street(_Part):
    # randomuser sends an int, other providers may send "12B"
    number: Text = None
    name: Text = None


class Location(_Part):
    street: Annotated[Optional[Street], BeforeValidator(_section)] = None
    city: Text = None
    state: Text = None
    country: Text = None


class DateOfBirth(_Part):
    date: Text = None
    age: Count = None


class PersonRecord(_Part):
    """One generated person, as delivered in ``results[0]`` of the provider payload.

    Leaves are lenient: a wrong-typed field reads as missing (or as its text)
    instead of rejecting the whole record.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Annotated[Optional[PersonName], BeforeValidator(_section)] = None
    picture: Annotated[Optional[Picture], BeforeValidator(_section)] = None
    location: Annotated[Optional[Location], BeforeValidator(_section)] = None
    dob: Annotated[Optional[DateOfBirth], BeforeValidator(_section)] = None
    email: Text = None
    phone: Text = None
    cell: Text = None

    def is_empty(self) -> bool:
        return not self.model_fields_set and not self.model_extra
