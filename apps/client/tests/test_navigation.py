"""Tests for booking workflow navigation."""

from __future__ import annotations

import pytest

from jambojet_client.validation import navigation as validators
from jambojet_core.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def test_context_goal_state():
    validators.validate_context_data({"goalState": "PaymentComplete", "timeConstraint": 15})
    with pytest.raises(ValidationError, match="Invalid goal state"):
        validators.validate_context_data({"goalState": "Done"})


def test_context_time_constraint():
    with pytest.raises(ValidationError, match="Time constraint must be a positive number"):
        validators.validate_context_data({"timeConstraint": 0})


def test_action_type_must_be_known():
    validators.validate_action_type("CommitBooking")
    with pytest.raises(ValidationError, match="Action type cannot be empty"):
        validators.validate_action_type("")
    with pytest.raises(ValidationError, match="Invalid action type"):
        validators.validate_action_type("commitBooking")


def test_validation_data_keys_and_amount():
    with pytest.raises(ValidationError, match="Invalid passenger key format"):
        validators.validate_action_validation_data({"passengerKey": "P1"})
    with pytest.raises(ValidationError, match="Amount must be a non-negative number"):
        validators.validate_action_validation_data({"amount": -10})


def test_execution_options_are_nested():
    data = {"executionOptions": {"retryCount": 2, "priority": "High"}}
    validators.validate_action_execution_data(data)
    with pytest.raises(ValidationError, match="Retry count must be a non-negative integer"):
        validators.validate_action_execution_data({"executionOptions": {"retryCount": -1}})
    with pytest.raises(ValidationError, match="executionOptions must be an object"):
        validators.validate_action_execution_data({"executionOptions": "fast"})


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


def test_validate_action_adds_action_type(client, spy):
    client.navigation().validate_action("AddSeat", {"segmentKey": "SEG-00001"})
    assert spy.last.path == "api/nsk/v1/booking/navigation/validateAction"
    assert spy.last.body == {"segmentKey": "SEG-00001", "actionType": "AddSeat"}


def test_can_proceed_to_payment(client, spy):
    client.navigation().can_proceed_to_payment()
    assert spy.last.body == {"actionType": "ProceedToPayment"}


def test_add_on_actions_filter(client, spy):
    client.navigation().get_add_on_actions()
    assert spy.last.path == "api/nsk/v1/booking/navigation/getNavigationActions"
    assert spy.last.body == {"actionCategory": "AddOns"}


def test_completion_steps(client, spy):
    client.navigation().get_completion_steps()
    assert spy.last.path == "api/nsk/v1/booking/navigation/getNextAction"
    assert spy.last.body == {"goalState": "BookingComplete"}


def test_execute_action(client, spy):
    client.navigation().execute_action("CommitBooking", {"confirmAction": True})
    assert spy.last.path == "api/nsk/v1/booking/navigation/executeAction"
    assert spy.last.body["actionType"] == "CommitBooking"


def test_booking_progress_from_status(client, spy):
    spy.response = {
        "success": True,
        "data": {"completionPercentage": 60, "currentStage": "Seats"},
    }
    progress = client.navigation().get_booking_progress()
    assert spy.last.path == "api/nsk/v1/booking/navigation/status"
    assert progress == {
        "completionPercentage": 60,
        "currentStage": "Seats",
        "nextStage": None,
        "remainingSteps": [],
    }


def test_booking_progress_defaults(client, spy):
    spy.response = {"success": True, "data": None}
    progress = client.navigation().get_booking_progress()
    assert progress["completionPercentage"] == 0
    assert progress["currentStage"] == "Unknown"
