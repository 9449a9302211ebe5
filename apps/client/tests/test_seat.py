"""Tests for seat validation and the seat service."""

from __future__ import annotations

import pytest

from jambojet_client.validation import seat as validators
from jambojet_core.exceptions import ValidationError


@pytest.fixture
def assignment():
    return {"passengerKey": "PAX-00001", "segmentKey": "SEG-00001", "seatNumber": "12A"}


# ---------------------------------------------------------------------------
# Seat numbers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("seat_number", ["12A", "1F", "123C"])
def test_seat_number_accepted(seat_number):
    validators.validate_seat_number(seat_number)


@pytest.mark.parametrize("seat_number", ["A12", "123", "12a", "1234A"])
def test_seat_number_rejected(seat_number):
    with pytest.raises(ValidationError, match="Invalid seat number format"):
        validators.validate_seat_number(seat_number)


def test_seat_number_empty():
    with pytest.raises(ValidationError, match="Seat number cannot be empty"):
        validators.validate_seat_number(" ")


# ---------------------------------------------------------------------------
# Assignments
# ---------------------------------------------------------------------------


def test_assignments_required():
    with pytest.raises(ValidationError, match="assignments array is required"):
        validators.validate_seat_assignments({})
    with pytest.raises(ValidationError, match="At least one seat assignment is required"):
        validators.validate_seat_assignments({"assignments": []})


def test_assignment_keys_must_differ(assignment):
    assignment["segmentKey"] = assignment["passengerKey"]
    with pytest.raises(ValidationError, match="must be different for assignment 0"):
        validators.validate_seat_assignments({"assignments": [assignment]})


def test_assignment_short_passenger_key(assignment):
    assignment["passengerKey"] = "P1"
    with pytest.raises(ValidationError, match="Invalid passenger key format"):
        validators.validate_seat_assignments({"assignments": [assignment]})


def test_assignment_negative_price(assignment):
    assignment["seatPrice"] = -5
    with pytest.raises(ValidationError, match="Seat price for assignment 0"):
        validators.validate_seat_assignments({"assignments": [assignment]})


def test_assignment_options_are_booleans(assignment):
    request = {"assignments": [assignment], "options": {"allowUpgrade": "yes"}}
    with pytest.raises(ValidationError, match="allowUpgrade must be a boolean value"):
        validators.validate_seat_assignments(request)


def test_availability_criteria_enums():
    validators.validate_availability_criteria({"seatType": "Window", "maxPrice": 0})
    with pytest.raises(ValidationError, match="Invalid seat type"):
        validators.validate_availability_criteria({"seatType": "window"})
    with pytest.raises(ValidationError, match="Max price must be a non-negative number"):
        validators.validate_availability_criteria({"maxPrice": -1})


def test_seat_map_options_format():
    with pytest.raises(ValidationError, match="Invalid format"):
        validators.validate_seat_map_options({"format": "Huge"})


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


def test_assign_seat_wrapper(client, spy):
    client.seat().assign_seat("PAX-00001", "SEG-00001", "1F")
    assert spy.last.method == "POST"
    assert spy.last.path == "api/nsk/v1/booking/seat/assignment"
    assert spy.last.body["assignments"][0]["seatNumber"] == "1F"


def test_assign_seat_invalid_number_never_dispatches(client, spy):
    with pytest.raises(ValidationError):
        client.seat().assign_seat("PAX-00001", "SEG-00001", "A12")
    assert spy.calls == []


def test_window_seats_query(client, spy):
    client.seat().get_window_seats("SEG-00001")
    assert spy.last.method == "GET"
    assert spy.last.path == "api/nsk/v1/booking/seat/availability"
    assert spy.last.query == {"segmentKey": "SEG-00001", "seatType": "Window"}


def test_premium_seats_query(client, spy):
    client.seat().get_premium_seats("SEG-00001")
    assert spy.last.query["seatCategory"] == "Premium"


def test_seat_map_path(client, spy):
    client.seat().get_seat_map("SEG-00001", {"showPricing": True})
    assert spy.last.path == "api/nsk/v1/booking/seat/map/SEG-00001"
    assert spy.last.query == {"showPricing": True}


def test_remove_and_update_assignment(client, spy):
    client.seat().remove_seat_assignment("SA-00001")
    assert (spy.last.method, spy.last.path) == (
        "DELETE",
        "api/nsk/v1/booking/seat/assignment/SA-00001",
    )
    client.seat().update_seat_assignment("SA-00001", {"seatNumber": "14C"})
    assert spy.last.method == "PUT"
    assert spy.last.body == {"seatNumber": "14C"}


def test_family_seats_keep_together(client, spy):
    client.seat().assign_family_seats(["PAX-00001", "PAX-00002"])
    assert spy.last.path == "api/nsk/v1/booking/seat/autoAssign"
    assert spy.last.body == {
        "passengerKeys": ["PAX-00001", "PAX-00002"],
        "keepTogether": True,
        "preferences": {"familyFriendly": True},
    }
