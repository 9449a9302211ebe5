"""Validators for sub-structures shared by several request shapes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from jambojet_client.validation.rules import (
    is_integer,
    match_format,
    numeric_range,
    parse_date,
    parse_datetime,
    require_fields,
    require_list,
    require_mapping,
    string_length,
)
from jambojet_core.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping


def validate_passenger_type_count(passenger: Any, index: int) -> None:
    """One ``{type, count}`` entry; counts are whole numbers from 1 to 9."""
    passenger = require_mapping(passenger, f"Passenger at index {index}")
    require_fields(passenger, ["type", "count"])
    match_format(passenger, "type", "passenger_type", f"passenger type at index {index}")
    if not is_integer(passenger["count"]):
        raise ValidationError(f"Passenger count at index {index} must be an integer")
    numeric_range(passenger, "count", 1, 9, f"Passenger count at index {index}")


def validate_passengers_criteria(passengers: Any) -> None:
    """The ``passengers`` object of full and low-fare searches."""
    passengers = require_mapping(passengers, "Passengers")
    require_fields(passengers, ["types"])
    types = passengers["types"]
    if not isinstance(types, list) or not types:
        raise ValidationError("Passenger types must be a non-empty array")
    for index, passenger in enumerate(types):
        validate_passenger_type_count(passenger, index)
        string_length(passenger, "discountCode", maximum=4, label="Discount code")
    match_format(passengers, "residentCountry", "country_code", "resident country")


def validate_passenger_list(passengers: Any) -> None:
    """The flat ``passengers`` list of simple searches."""
    if not isinstance(passengers, list) or not passengers:
        raise ValidationError("Passengers must be a non-empty array")
    for index, passenger in enumerate(passengers):
        validate_passenger_type_count(passenger, index)


def _comparable(value: Any) -> datetime | None:
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        return None if day is None else datetime(day.year, day.month, day.day)
    if parsed.tzinfo is not None:
        return parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def ensure_not_before(
    start: Any, end: Any, message: str, *, inclusive: bool = True
) -> None:
    """Fail when ``end`` precedes ``start`` (or equals it if not inclusive).

    Unparseable values are left to the format rules.
    """
    begin_at, end_at = _comparable(start), _comparable(end)
    if begin_at is None or end_at is None:
        return
    if end_at < begin_at or (not inclusive and end_at == begin_at):
        raise ValidationError(message)


def validate_key_field(
    payload: Mapping[str, Any], field: str, label: str, min_length: int | None = None
) -> None:
    """A key stored inside a body rather than in the path."""
    value = payload.get(field)
    if value is None:
        return
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty")
    if min_length is not None and len(value) < min_length:
        raise ValidationError(f"Invalid {label.lower()} format")


def validate_string_list(value: Any, label: str) -> None:
    """A non-empty list whose items are all non-blank strings."""
    items = require_list(value, label, f"{label} cannot be empty")
    for index, item in enumerate(items):
        if not isinstance(item, str) or not item.strip():
            raise ValidationError(f"{label} at index {index} must be a non-empty string")
