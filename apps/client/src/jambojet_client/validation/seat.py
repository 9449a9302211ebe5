"""Validators for seat availability, assignment and seat maps."""

from __future__ import annotations

from typing import Any

from jambojet_client.validation.rules import (
    boolean,
    booleans,
    custom,
    fmt,
    is_number,
    length,
    match_pattern,
    non_empty_key,
    one_of,
    require_fields,
    require_mapping,
    rules,
)
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import CabinClass, SeatCategory, SeatMapFormat, SeatType

SEAT_NUMBER = r"[0-9]{1,3}[A-Z]"


def _non_negative(value: Any) -> bool:
    return is_number(value) and value >= 0


def validate_segment_key(key: Any) -> None:
    non_empty_key(key, "Segment key", min_length=5)


def validate_passenger_key(key: Any) -> None:
    non_empty_key(key, "Passenger key", min_length=5)


def validate_seat_assignment_key(key: Any) -> None:
    non_empty_key(key, "Seat assignment key", min_length=5)


def validate_seat_number(seat_number: Any) -> None:
    if not isinstance(seat_number, str) or not seat_number.strip():
        raise ValidationError("Seat number cannot be empty")
    match_pattern(
        {"seatNumber": seat_number},
        "seatNumber",
        SEAT_NUMBER,
        "Invalid seat number format. Expected format: 12A, 1F, etc.",
    )


def _segment_key_rule(payload: dict[str, Any]) -> None:
    if payload.get("segmentKey") is not None:
        validate_segment_key(payload["segmentKey"])


availability_rules = rules(
    one_of("cabinClass", CabinClass, "cabin class"),
    one_of("seatType", SeatType, "seat type"),
    one_of("seatCategory", SeatCategory, "seat category"),
    custom("maxPrice", _non_negative, "Max price must be a non-negative number"),
    boolean("includeOccupied"),
    cross=[_segment_key_rule],
)

seat_map_rules = rules(
    boolean("showPricing"),
    boolean("showAvailability"),
    boolean("includeBlocked"),
    one_of("cabinClass", CabinClass, "cabin class"),
    one_of("format", SeatMapFormat, "format"),
)

update_rules = rules(
    custom(
        "seatPrice", _non_negative, "Seat price must be a non-negative number"
    ),
    fmt("currency", "currency_code", "currency"),
    length("notes", maximum=500, label="notes"),
)

auto_assign_rules = rules(
    boolean("keepTogether"),
    one_of("seatType", SeatType, "seat type"),
    custom("maxPrice", _non_negative, "Max price must be a non-negative number"),
    boolean("avoidMiddleSeats"),
    boolean("preferFront"),
)


def validate_availability_criteria(criteria: dict[str, Any]) -> None:
    availability_rules.validate(criteria)


def validate_seat_assignments(request: dict[str, Any]) -> None:
    """``{assignments: [...], options: {...}}`` for a seat assignment call."""
    assignments = request.get("assignments")
    if not isinstance(assignments, list):
        raise ValidationError("assignments array is required")
    if not assignments:
        raise ValidationError("At least one seat assignment is required")
    for index, assignment in enumerate(assignments):
        _validate_single_assignment(
            require_mapping(assignment, f"Seat assignment {index}"), index
        )
    if request.get("options") is not None:
        booleans(
            require_mapping(request["options"], "options"),
            "overridePricing",
            "validateAvailability",
            "allowUpgrade",
        )


def _validate_single_assignment(assignment: dict[str, Any], index: int) -> None:
    require_fields(assignment, ["passengerKey", "segmentKey", "seatNumber"])
    validate_passenger_key(assignment["passengerKey"])
    validate_segment_key(assignment["segmentKey"])
    if assignment["passengerKey"] == assignment["segmentKey"]:
        raise ValidationError(
            f"Passenger key and segment key must be different for assignment {index}"
        )
    validate_seat_number(assignment["seatNumber"])
    price = assignment.get("seatPrice")
    if price is not None and not _non_negative(price):
        raise ValidationError(
            f"Seat price for assignment {index} must be a non-negative number"
        )
    fmt("currency", "currency_code", "currency").apply(assignment)
    unit_key = assignment.get("unitKey")
    if unit_key is not None and (not isinstance(unit_key, str) or not unit_key.strip()):
        raise ValidationError(f"Unit key for assignment {index} cannot be empty")


def validate_seat_assignment_update(update: dict[str, Any]) -> None:
    if update.get("seatNumber") is not None:
        validate_seat_number(update["seatNumber"])
    if update.get("segmentKey") is not None:
        validate_segment_key(update["segmentKey"])
    update_rules.validate(update)


def validate_seat_map_options(options: dict[str, Any]) -> None:
    seat_map_rules.validate(options)


def validate_pricing_criteria(criteria: dict[str, Any]) -> None:
    if isinstance(criteria.get("segmentKeys"), list):
        for key in criteria["segmentKeys"]:
            validate_segment_key(key)
    if isinstance(criteria.get("seatNumbers"), list):
        for seat_number in criteria["seatNumbers"]:
            validate_seat_number(seat_number)
    fmt("currency", "currency_code", "currency").apply(criteria)
    boolean("includeTaxes").apply(criteria)


def validate_auto_assign_preferences(preferences: dict[str, Any]) -> None:
    if isinstance(preferences.get("passengerKeys"), list):
        for key in preferences["passengerKeys"]:
            validate_passenger_key(key)
    auto_assign_rules.validate(preferences)
