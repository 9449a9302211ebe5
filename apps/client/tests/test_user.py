"""Tests for user account, role, impersonation and person operations."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from jambojet_client.validation import user as validators
from jambojet_core.exceptions import ValidationError


def _born_years_ago(years: int) -> str:
    today = date.today()
    return date(today.year - years, today.month, 1).isoformat()


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("username", ["jane.doe@jambojet.com", "agent_007", "abc"])
def test_username_accepted(username):
    validators.validate_username(username)


@pytest.mark.parametrize("username", ["ab", "jane doe", "x" * 51])
def test_username_rejected(username):
    with pytest.raises(ValidationError, match="Username must be a valid email"):
        validators.validate_username(username)


def test_username_max_length():
    with pytest.raises(ValidationError, match="Username cannot exceed 100 characters"):
        validators.validate_username("a" * 95 + "@jambojet.com")


@pytest.mark.parametrize(
    ("password", "message"),
    [
        ("Sh0rt", "at least 8 characters"),
        ("12345678", "at least one letter"),
        ("Passwords", "at least one number"),
        ("a1" * 65, "cannot exceed 128 characters"),
    ],
)
def test_password_rules(password, message):
    with pytest.raises(ValidationError, match=message):
        validators.validate_password(password)


def test_password_change():
    validators.validate_password_change(
        {"currentPassword": "Safari2030", "newPassword": "Savanna2031"}
    )
    with pytest.raises(ValidationError, match="must be different from current password"):
        validators.validate_password_change(
            {"currentPassword": "Safari2030", "newPassword": "Safari2030"}
        )
    with pytest.raises(ValidationError, match="confirmation does not match"):
        validators.validate_password_change(
            {
                "currentPassword": "Safari2030",
                "newPassword": "Savanna2031",
                "confirmPassword": "Savanna2032",
            }
        )


def test_password_reset_expiry():
    with pytest.raises(ValidationError, match="Expiry minutes must be between 5 and 1440"):
        validators.validate_password_reset({"expiryMinutes": 2})


# ---------------------------------------------------------------------------
# Personal details
# ---------------------------------------------------------------------------


def test_date_of_birth_age_bounds():
    validators.validate_date_of_birth(_born_years_ago(13))
    validators.validate_date_of_birth(_born_years_ago(120))
    with pytest.raises(ValidationError, match="User must be at least 13 years old"):
        validators.validate_date_of_birth(_born_years_ago(12))
    with pytest.raises(ValidationError, match="Age cannot exceed 120 years"):
        validators.validate_date_of_birth(_born_years_ago(121))


def test_date_of_birth_in_future():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    with pytest.raises(ValidationError, match="Date of birth cannot be in the future"):
        validators.validate_date_of_birth(tomorrow)


def test_name_characters():
    info = {"firstName": "J4ne", "lastName": "Doe", "email": "jane@jambojet.com"}
    with pytest.raises(ValidationError, match="firstName contains invalid characters"):
        validators.validate_personal_info(info)


@pytest.mark.parametrize(
    ("postal_code", "country"),
    [("00100", "KE"), ("94105-1234", "US"), ("sw1a 1aa", "GB"), ("K1A 0B1", "CA"), ("ANY", "TZ")],
)
def test_postal_code_accepted(postal_code, country):
    validators.validate_postal_code(postal_code, country)


def test_postal_code_rejected():
    with pytest.raises(ValidationError, match="Invalid postal code format for country KE"):
        validators.validate_postal_code("0010", "KE")


@pytest.mark.parametrize(
    ("postal_code", "country"),
    [("\u0661\u0662\u0663\u0664\u0665", "US"), ("\u0660\u0660\u0661\u0660\u0660", "KE")],
)
def test_postal_code_digits_are_ascii(postal_code, country):
    with pytest.raises(ValidationError, match="Invalid postal code format"):
        validators.validate_postal_code(postal_code, country)


def test_preferences_time_zone():
    validators.validate_user_preferences({"timeZone": "Africa/Nairobi", "language": "sw-KE"})
    with pytest.raises(ValidationError, match="Invalid time zone"):
        validators.validate_user_preferences({"timeZone": "Mars/Olympus"})


def test_custom_field_names():
    validators.validate_custom_fields({"seat_pref": "aisle"})
    with pytest.raises(ValidationError, match="Invalid custom field name: 1st"):
        validators.validate_custom_fields({"1st": "x"})


def test_user_roles():
    validators.validate_user_roles(["Agent", "Support"])
    with pytest.raises(ValidationError, match="User must have at least one role"):
        validators.validate_user_roles([])
    with pytest.raises(ValidationError, match="Invalid role at index 0"):
        validators.validate_user_roles(["agent"])


# ---------------------------------------------------------------------------
# Account requests
# ---------------------------------------------------------------------------


def test_user_create_accepts_valid_user(make_user):
    validators.validate_user_create(make_user())


def test_user_create_requires_personal_info(make_user):
    user = make_user()
    del user["personalInfo"]
    with pytest.raises(ValidationError, match="Missing required parameters: personalInfo"):
        validators.validate_user_create(user)


def test_bulk_create_reports_index(make_user):
    users = [make_user("first@jambojet.com"), make_user("second@jambojet.com", password="short")]
    with pytest.raises(ValidationError, match="User validation failed at index 1: Password must be"):
        validators.validate_bulk_user_create(users)


def test_bulk_create_rejects_duplicates(make_user):
    with pytest.raises(ValidationError, match="Duplicate usernames"):
        validators.validate_bulk_user_create([make_user(), make_user()])


def test_bulk_create_batch_limit(make_user):
    users = [make_user(f"user{i}@jambojet.com") for i in range(101)]
    with pytest.raises(ValidationError, match="Maximum 100 users"):
        validators.validate_bulk_user_create(users)


def test_user_update_rejects_password():
    with pytest.raises(ValidationError, match="Use change_password instead"):
        validators.validate_user_update({"password": "Safari2030"})


def test_current_user_patch_cannot_be_empty():
    with pytest.raises(ValidationError, match="Patch request cannot be empty"):
        validators.validate_current_user_patch({})


def test_current_user_update_codes():
    validators.validate_current_user_update({"organizationCode": "JM", "languageCode": "en-US"})
    with pytest.raises(ValidationError, match="Organization code must be 2-10 characters"):
        validators.validate_current_user_update({"organizationCode": "jm"})


def test_users_search_sort_order():
    validators.validate_users_search({"sortBy": "lastName", "sortOrder": "ASC"})
    with pytest.raises(ValidationError, match="Invalid sort order"):
        validators.validate_users_search({"sortOrder": "sideways"})


def test_impersonation_needs_target():
    with pytest.raises(ValidationError, match="Either targetUserKey or targetRole"):
        validators.validate_impersonation({"reason": "audit"})
    validators.validate_impersonation({"targetRole": "Agent"})


def test_role_create_code():
    validators.validate_role_create({"roleCode": "GATE_AGENT", "permissions": ["checkin"]})
    with pytest.raises(ValidationError, match="Role code must be 2-20 characters"):
        validators.validate_role_create({"roleCode": "gate agent"})


def test_person_edit_requires_editable_field():
    with pytest.raises(ValidationError, match="At least one editable field"):
        validators.validate_person_edit({"version": 2})


def test_person_edit_expired_document():
    expired = (date.today() - timedelta(days=1)).isoformat()
    data = {
        "travelDocuments": [
            {
                "type": "PASSPORT",
                "number": "AK123456",
                "issuingCountry": "KE",
                "expirationDate": expired,
            }
        ]
    }
    with pytest.raises(ValidationError, match="Travel document at index 0 is expired"):
        validators.validate_person_edit(data)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


def test_create_user_path(client, spy, make_user):
    client.user().create_user(make_user())
    assert (spy.last.method, spy.last.path) == ("POST", "api/nsk/v1/user")


def test_create_multiple_users_wraps_body(client, spy, make_user):
    users = [make_user("a1@jambojet.com"), make_user("a2@jambojet.com")]
    client.user().create_multiple_users(users)
    assert spy.last.path == "api/nsk/v2/users"
    assert spy.last.body == {"users": users}


def test_create_users_version(client, spy, make_user):
    client.user().create_users([make_user()], use_v2=False)
    assert spy.last.path == "api/nsk/v1/users"
    with pytest.raises(ValidationError, match="Users data array is required"):
        client.user().create_users([])


def test_user_key_checked_before_dispatch(client, spy):
    with pytest.raises(ValidationError, match="Invalid user key format"):
        client.user().get_user_by_key("U1")
    assert spy.calls == []


def test_patch_current_user(client, spy):
    client.user().patch_current_user({"languageCode": "en"})
    assert (spy.last.method, spy.last.path) == ("PATCH", "api/nsk/v1/user")


def test_user_role_paths(client, spy):
    client.user().get_specific_user_role("USER-00001", "ROLE1")
    assert spy.last.path == "api/nsk/v1/users/USER-00001/roles/ROLE1"
    with pytest.raises(ValidationError, match="User role key is required"):
        client.user().delete_user_role("USER-00001", "")


def test_impersonation_lifecycle(client, spy):
    client.user().start_impersonation({"targetUserKey": "USER-00001"})
    assert (spy.last.method, spy.last.path) == ("POST", "api/nsk/v1/user/impersonate")
    client.user().reset_impersonation()
    assert spy.last.method == "DELETE"


def test_user_bookings_query(client, spy):
    client.user().get_user_bookings({"startDate": "2030-01-01"})
    assert spy.last.path == "api/nsk/v1/user/bookings"
    assert spy.last.query == {"startDate": "2030-01-01"}


def test_update_user_person(client, spy):
    client.user().update_user_person("USER-00001", {"name": {"first": "Jane", "last": "Doe"}})
    assert (spy.last.method, spy.last.path) == ("PUT", "api/nsk/v1/users/USER-00001/person")


def test_blank_role_and_person_keys_never_dispatch(client, spy):
    with pytest.raises(ValidationError, match="User role key is required"):
        client.user().get_specific_user_role("USER-12345", "   ")
    with pytest.raises(ValidationError, match="Person key is required"):
        client.user().get_user_by_person_key(" ")
    assert spy.calls == []
