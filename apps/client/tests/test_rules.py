"""Tests for the field rule primitives and declarative rule sets."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from jambojet_client.validation import rules
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import PassengerType


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [None, "", "   ", [], {}, ()])
def test_is_empty_true(value):
    assert rules.is_empty(value)


@pytest.mark.parametrize("value", [0, False, "x", [0], {"a": 1}])
def test_is_empty_false(value):
    assert not rules.is_empty(value)


def test_is_number_rejects_bool_and_nan():
    assert rules.is_number(3)
    assert rules.is_number(2.5)
    assert not rules.is_number(True)
    assert not rules.is_number(float("nan"))
    assert not rules.is_number("4")


def test_parse_date_accepts_date_time_strings():
    assert rules.parse_date("2030-01-15") == date(2030, 1, 15)
    assert rules.parse_date("2030-01-15T08:30:00") == date(2030, 1, 15)
    assert rules.parse_date("15/01/2030") is None
    assert rules.parse_date("") is None


def test_is_past_date_uses_calendar_days():
    assert rules.is_past_date((date.today() - timedelta(days=1)).isoformat())
    assert not rules.is_past_date(date.today().isoformat())
    assert not rules.is_past_date("not a date")


def test_allowed_values_from_enum():
    assert rules.allowed_values(PassengerType)[:3] == ["ADT", "CHD", "INF"]


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("format_name", "good", "bad"),
    [
        ("airport_code", "JFK", "jfk"),
        ("airport_code", "NBO", "JFKK"),
        ("country_code", "KE", "KEN"),
        ("currency_code", "KES", "ke"),
        ("record_locator", "AB12CD", "AB12C"),
        ("passenger_type", "CHD", "KID"),
        ("date", "2030-02-28", "2030-02-30"),
        ("datetime", "2030-02-28T10:00:00", "tomorrow"),
        ("email", "ops@jambojet.com", "ops@"),
        ("phone", "+254 (700) 123-456", "call me"),
        ("phone", "0700 123456", "\u0660\u0667\u0660\u0660 123456"),
        ("date", "2030-01-15", "\u0662\u0660\u0663\u0660-01-15"),
        ("positive_number", 0.5, 0),
        ("non_negative_number", 0, -1),
    ],
)
def test_format_catalog(format_name, good, bad):
    rules.match_format({"f": good}, "f", format_name)
    with pytest.raises(ValidationError, match="Invalid f format"):
        rules.match_format({"f": bad}, "f", format_name)


def test_match_format_skips_absent_field():
    rules.match_format({}, "origin", "airport_code")
    rules.match_format({"origin": ""}, "origin", "airport_code")


def test_match_format_message_uses_label():
    with pytest.raises(ValidationError) as exc_info:
        rules.match_format({"o": "X"}, "o", "airport_code", "origin")
    assert exc_info.value.message == (
        "Invalid origin format. Expected a 3-letter IATA airport code"
    )
    assert exc_info.value.code == 400


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def test_require_fields_lists_every_missing_field():
    with pytest.raises(ValidationError) as exc_info:
        rules.require_fields({"a": 1, "b": " "}, ["a", "b", "c"])
    assert exc_info.value.message == "Missing required parameters: b, c"
    assert exc_info.value.errors == {"missing_fields": ["b", "c"]}


def test_require_fields_accepts_zero_and_false():
    rules.require_fields({"count": 0, "flag": False}, ["count", "flag"])


@pytest.mark.parametrize(
    ("minimum", "maximum", "value", "message"),
    [
        (1, 9, 10, "Count must be between 1 and 9"),
        (1, None, 0, "Count must be at least 1"),
        (None, 9, 12, "Count cannot exceed 9"),
        (1, 9, "3", "Count must be a number"),
    ],
)
def test_numeric_range_messages(minimum, maximum, value, message):
    with pytest.raises(ValidationError, match=f"^{message}$"):
        rules.numeric_range({"count": value}, "count", minimum, maximum, "Count")


def test_numeric_range_bounds_are_inclusive():
    rules.numeric_range({"n": 1}, "n", 1, 9)
    rules.numeric_range({"n": 9}, "n", 1, 9)


def test_string_length():
    rules.string_length({"code": "ABCD"}, "code", maximum=4)
    with pytest.raises(ValidationError, match="code cannot exceed 4 characters"):
        rules.string_length({"code": "ABCDE"}, "code", maximum=4)
    with pytest.raises(ValidationError, match="must be at least 2 characters long"):
        rules.string_length({"code": "A"}, "code", minimum=2)
    with pytest.raises(ValidationError, match="code must be a string"):
        rules.string_length({"code": 12}, "code", maximum=4)


def test_enum_member_is_case_sensitive():
    rules.enum_member("Window", ["Window", "Aisle"], "seat type")
    with pytest.raises(ValidationError) as exc_info:
        rules.enum_member("window", ["Window", "Aisle"], "seat type")
    assert exc_info.value.message == "Invalid seat type. Expected one of: Window, Aisle"


def test_enum_items_reports_index():
    with pytest.raises(ValidationError, match="Invalid day at index 1"):
        rules.enum_items(["Monday", "Funday"], ["Monday", "Tuesday"], "day")


def test_boolean_type():
    rules.boolean_type({"flag": False}, "flag")
    with pytest.raises(ValidationError, match="flag must be a boolean value"):
        rules.boolean_type({"flag": "true"}, "flag")


def test_non_empty_key():
    rules.non_empty_key("ABCDE", "User key", min_length=5)
    with pytest.raises(ValidationError, match="User key cannot be empty"):
        rules.non_empty_key("  ", "User key")
    with pytest.raises(ValidationError, match="Invalid user key format"):
        rules.non_empty_key("AB", "User key", min_length=5)


def test_api_version():
    rules.api_version(3, (3, 4))
    with pytest.raises(ValidationError, match="Invalid API version: 2. Allowed versions: 3, 4"):
        rules.api_version(2, (3, 4))


def test_require_list_and_mapping():
    assert rules.require_list([1], "items") == [1]
    with pytest.raises(ValidationError, match="items must be an array"):
        rules.require_list("x", "items")
    with pytest.raises(ValidationError, match="No items"):
        rules.require_list([], "items", "No items")
    with pytest.raises(ValidationError, match="codes must be an object"):
        rules.require_mapping([], "codes")


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------


@pytest.fixture
def booking_rules() -> rules.RuleSet:
    def dates_in_order(payload):
        if payload["checkIn"] > payload["checkOut"]:
            raise ValidationError("Check-out must follow check-in")

    return rules.rules(
        rules.required("checkIn", "checkOut"),
        rules.fmt("checkIn", "date", "check-in date"),
        rules.fmt("checkOut", "date", "check-out date"),
        rules.in_range("rooms", 1, 5, "Rooms"),
        rules.one_of("currency", ["KES", "USD"]),
        rules.boolean("refundable"),
        cross=[dates_in_order],
    )


def test_rule_set_accepts_valid_payload(booking_rules):
    booking_rules({"checkIn": "2030-01-01", "checkOut": "2030-01-03", "rooms": 2})


def test_rule_set_first_failure_wins(booking_rules):
    with pytest.raises(ValidationError, match="Missing required parameters: checkOut"):
        booking_rules({"checkIn": "bad", "rooms": 12})


def test_rule_set_runs_cross_rules_last(booking_rules):
    with pytest.raises(ValidationError, match="Check-out must follow check-in"):
        booking_rules({"checkIn": "2030-01-05", "checkOut": "2030-01-03"})


def test_nested_and_custom_rules():
    inner = rules.rules(rules.fmt("code", "airport_code"))
    outer = rules.rules(
        rules.nested("station", inner),
        rules.custom("count", lambda v: v % 2 == 0, "count must be even"),
    )
    outer({"station": {"code": "NBO"}, "count": 2})
    with pytest.raises(ValidationError, match="Invalid code format"):
        outer({"station": {"code": "nbo"}})
    with pytest.raises(ValidationError, match="station must be an object"):
        outer({"station": "NBO"})
    with pytest.raises(ValidationError, match="count must be even"):
        outer({"count": 3})


def test_fmt_rejects_unknown_format():
    with pytest.raises(KeyError):
        rules.fmt("x", "postcode")


def test_validation_is_idempotent(booking_rules):
    payload = {"checkIn": "2030-01-05", "checkOut": "2030-01-03"}
    for _ in range(2):
        with pytest.raises(ValidationError, match="Check-out must follow check-in"):
            booking_rules(payload)
    assert payload == {"checkIn": "2030-01-05", "checkOut": "2030-01-03"}
