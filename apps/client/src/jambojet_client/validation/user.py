"""Validators for user accounts, roles, impersonation and person records."""

from __future__ import annotations

import re
from datetime import date
from typing import Any
from zoneinfo import available_timezones

from jambojet_client.validation.rules import (
    allowed_values,
    booleans,
    enum_field,
    enum_member,
    is_integer,
    match_format,
    match_pattern,
    non_empty_key,
    numeric_range,
    parse_date,
    require_fields,
    require_list,
    require_mapping,
    string_length,
)
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import (
    AccountStatus,
    AddressType,
    ContactMethod,
    Gender,
    PersonContactMethod,
    ResetMethod,
    RoleStatus,
    SortOrder,
    Title,
    TravelDocumentType,
    UserRole,
    UserSortField,
    UserStatus,
    UserType,
)

USERNAME = re.compile(r"[A-Za-z0-9._-]{3,50}")
LANGUAGE = r"[a-z]{2}(-[A-Z]{2})?"
CULTURE_CODE = r"[a-z]{2}-[A-Z]{2}"
ORG_CODE = r"[A-Z0-9]{2,10}"
ROLE_CODE = r"[A-Z0-9_]{2,20}"
PERSON_KEY = re.compile(r"[A-Za-z0-9-]{5,50}")
NAME_CHARS = re.compile(r"[a-zA-Z\s\-'.]+")
PERSON_NAME_CHARS = re.compile(r"[a-zA-Z\s\-']+")
CUSTOM_FIELD_NAME = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")

MIN_AGE = 13
MAX_AGE = 120
MAX_BATCH = 100

POSTAL_CODES: dict[str, re.Pattern[str]] = {
    "US": re.compile(r"[0-9]{5}(-[0-9]{4})?"),
    "CA": re.compile(r"[A-Z][0-9][A-Z]\s?[0-9][A-Z][0-9]"),
    "GB": re.compile(
        r"[A-Z]{1,2}[0-9][A-Z0-9]?\s?[0-9][A-Z]{2}", re.IGNORECASE | re.ASCII
    ),
    "KE": re.compile(r"[0-9]{5}"),
    "DE": re.compile(r"[0-9]{5}"),
    "FR": re.compile(r"[0-9]{5}"),
}

TIME_ZONES = frozenset(available_timezones())

COMMUNICATION_FLAGS = (
    "emailMarketing",
    "smsMarketing",
    "phoneMarketing",
    "pushNotifications",
    "bookingUpdates",
    "flightAlerts",
    "promotionalOffers",
    "newsletter",
)
ACCESSIBILITY_FLAGS = (
    "largeText",
    "highContrast",
    "screenReader",
    "keyboardNavigation",
    "reducedMotion",
    "alternativeFormats",
)
PERSON_EDITABLE_FIELDS = (
    "name",
    "contactInfo",
    "addresses",
    "travelDocuments",
    "customerPrograms",
)

# ---------------------------------------------------------------------------
# Keys and codes
# ---------------------------------------------------------------------------


def validate_user_key(key: Any) -> None:
    non_empty_key(key, "User key", min_length=5)


def validate_user_role_key(key: Any) -> None:
    non_empty_key(key, "User role key", empty_message="User role key is required")


def require_person_key(key: Any) -> None:
    non_empty_key(key, "Person key", empty_message="Person key is required")


def validate_person_key(key: Any) -> None:
    non_empty_key(key, "Person key", min_length=5)
    if not PERSON_KEY.fullmatch(key):
        raise ValidationError(
            "Person key must be 5-50 characters, alphanumeric with hyphens"
        )


def _code(value: Any, label: str, regex: str, shape: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty")
    match_pattern({"code": value}, "code", regex, f"{label} must be {shape}")


def validate_organization_code(code: Any) -> None:
    _code(code, "Organization code", ORG_CODE, "2-10 characters, alphanumeric uppercase")


def validate_domain_code(code: Any) -> None:
    _code(code, "Domain code", ORG_CODE, "2-10 characters, alphanumeric uppercase")


def validate_location_group_code(code: Any) -> None:
    _code(
        code,
        "Location group code",
        ORG_CODE,
        "2-10 characters, alphanumeric uppercase",
    )


def validate_role_code(code: Any) -> None:
    _code(
        code,
        "Role code",
        ROLE_CODE,
        "2-20 characters, alphanumeric uppercase with underscores",
    )


def _optional_codes(data: dict[str, Any]) -> None:
    if data.get("organizationCode") is not None:
        validate_organization_code(data["organizationCode"])
    if data.get("domainCode") is not None:
        validate_domain_code(data["domainCode"])
    if data.get("locationGroupCode") is not None:
        validate_location_group_code(data["locationGroupCode"])


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def validate_username(username: Any) -> None:
    """An email address or a 3-50 character handle, at most 100 characters."""
    if not isinstance(username, str) or not username.strip():
        raise ValidationError("Username cannot be empty")
    string_length({"username": username}, "username", maximum=100, label="Username")
    is_email = "@" in username and _is_email(username)
    if not is_email and not USERNAME.fullmatch(username):
        raise ValidationError(
            "Username must be a valid email or alphanumeric string (3-50 characters)"
        )


def _is_email(value: str) -> bool:
    try:
        match_format({"email": value}, "email", "email")
    except ValidationError:
        return False
    return True


def validate_password(password: Any) -> None:
    if not isinstance(password, str):
        raise ValidationError("Password must be a string")
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters long")
    if len(password) > 128:
        raise ValidationError("Password cannot exceed 128 characters")
    if not re.search(r"[A-Za-z]", password):
        raise ValidationError("Password must contain at least one letter")
    if not re.search(r"[0-9]", password):
        raise ValidationError("Password must contain at least one number")


def validate_password_change(data: dict[str, Any]) -> None:
    require_fields(data, ["currentPassword", "newPassword"])
    validate_password(data["newPassword"])
    if data["currentPassword"] == data["newPassword"]:
        raise ValidationError("New password must be different from current password")
    confirm = data.get("confirmPassword")
    if confirm is not None and confirm != data["newPassword"]:
        raise ValidationError("Password confirmation does not match new password")


def validate_password_reset(data: dict[str, Any]) -> None:
    if data.get("newPassword") is not None:
        validate_password(data["newPassword"])
    enum_field(data, "resetMethod", ResetMethod, "reset method")
    booleans(data, "sendNotification")
    numeric_range(data, "expiryMinutes", 5, 1440, "Expiry minutes")


# ---------------------------------------------------------------------------
# Personal details
# ---------------------------------------------------------------------------


def _age_on(born: date, today: date) -> int:
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def validate_date_of_birth(value: Any) -> None:
    match_format({"dateOfBirth": value}, "dateOfBirth", "date", "date of birth")
    born = parse_date(value)
    if born is None:
        return
    today = date.today()
    if born > today:
        raise ValidationError("Date of birth cannot be in the future")
    age = _age_on(born, today)
    if age < MIN_AGE:
        raise ValidationError(f"User must be at least {MIN_AGE} years old")
    if age > MAX_AGE:
        raise ValidationError(
            f"Invalid date of birth. Age cannot exceed {MAX_AGE} years"
        )


def _validate_name_fields(info: dict[str, Any]) -> None:
    limits = {
        "title": (None, 10),
        "firstName": (1, 50),
        "middleName": (None, 50),
        "lastName": (1, 50),
        "suffix": (None, 10),
    }
    for field, (minimum, maximum) in limits.items():
        if info.get(field) is None:
            continue
        string_length(info, field, minimum, maximum)
        if not NAME_CHARS.fullmatch(info[field]):
            raise ValidationError(
                f"{field} contains invalid characters. Only letters, spaces, "
                "hyphens, and apostrophes are allowed"
            )


def _validate_personal_details(info: dict[str, Any]) -> None:
    match_format(info, "email", "email")
    match_format(info, "phone", "phone")
    if info.get("dateOfBirth") is not None:
        validate_date_of_birth(info["dateOfBirth"])
    enum_field(info, "gender", Gender, "gender value")
    enum_field(info, "title", Title, "title")
    match_format(info, "nationality", "country_code", "nationality")
    if info.get("emergencyContact") is not None:
        contact = require_mapping(info["emergencyContact"], "emergencyContact")
        require_fields(contact, ["name", "phone"])
        string_length(contact, "name", 2, 100, "Emergency contact name")
        string_length(contact, "relationship", maximum=50, label="Relationship")
        match_format(contact, "phone", "phone")
        match_format(contact, "email", "email")


def validate_personal_info(info: Any) -> None:
    info = require_mapping(info, "personalInfo")
    require_fields(info, ["firstName", "lastName", "email"])
    _validate_name_fields(info)
    _validate_personal_details(info)


def validate_personal_info_update(info: Any) -> None:
    info = require_mapping(info, "personalInfo")
    _validate_name_fields(info)
    _validate_personal_details(info)


def validate_postal_code(postal_code: str, country_code: str) -> None:
    """Countries without a known pattern are accepted as-is."""
    pattern = POSTAL_CODES.get(country_code)
    if pattern is not None and (
        not isinstance(postal_code, str) or not pattern.fullmatch(postal_code)
    ):
        raise ValidationError(f"Invalid postal code format for country {country_code}")


def validate_user_address(address: Any) -> None:
    address = require_mapping(address, "address")
    require_fields(address, ["lineOne", "city", "countryCode"])
    match_format(address, "countryCode", "country_code", "country code")
    for field, maximum in (
        ("lineOne", 100),
        ("lineTwo", 100),
        ("lineThree", 100),
        ("city", 50),
        ("provinceState", 50),
        ("postalCode", 20),
        ("county", 50),
    ):
        string_length(address, field, maximum=maximum)
    if address.get("postalCode") is not None:
        validate_postal_code(address["postalCode"], address["countryCode"])


def validate_user_preferences(preferences: Any) -> None:
    preferences = require_mapping(preferences, "preferences")
    match_pattern(
        preferences,
        "language",
        LANGUAGE,
        "Invalid language format. Expected format: en or en-US",
    )
    match_format(preferences, "currency", "currency_code", "currency")
    time_zone = preferences.get("timeZone")
    if time_zone is not None and time_zone not in TIME_ZONES:
        raise ValidationError("Invalid time zone")
    if preferences.get("communications") is not None:
        communications = require_mapping(preferences["communications"], "communications")
        booleans(communications, *COMMUNICATION_FLAGS)
        enum_field(
            communications,
            "preferredMethod",
            ContactMethod,
            "preferred contact method",
        )
    if preferences.get("accessibility") is not None:
        booleans(
            require_mapping(preferences["accessibility"], "accessibility"),
            *ACCESSIBILITY_FLAGS,
        )


def validate_loyalty_programs(programs: Any) -> None:
    for program in require_list(programs, "loyaltyPrograms"):
        program = require_mapping(program, "loyalty program")
        require_fields(program, ["programCode", "membershipNumber"])
        string_length(program, "programCode", maximum=10, label="Program code")
        string_length(
            program, "membershipNumber", maximum=50, label="Membership number"
        )
        string_length(program, "tier", maximum=20, label="Tier")
        match_format(program, "pointsBalance", "non_negative_number", "points balance")


def validate_custom_fields(fields: Any) -> None:
    for name, value in require_mapping(fields, "customFields").items():
        if not CUSTOM_FIELD_NAME.fullmatch(name):
            raise ValidationError(
                f"Invalid custom field name: {name}. Must start with letter and "
                "contain only alphanumeric characters and underscores"
            )
        if len(name) > 50:
            raise ValidationError(
                f"Custom field name {name} exceeds maximum length of 50 characters"
            )
        if isinstance(value, str) and len(value) > 500:
            raise ValidationError(
                f"Custom field value for {name} exceeds maximum length of 500 characters"
            )


def validate_user_roles(roles: Any) -> None:
    if not isinstance(roles, list) or not roles:
        raise ValidationError("User must have at least one role")
    for index, role in enumerate(roles):
        enum_member(role, UserRole, f"role at index {index}")


# ---------------------------------------------------------------------------
# Account requests
# ---------------------------------------------------------------------------


def validate_current_user_update(data: dict[str, Any]) -> None:
    """``PUT user``: every field is optional but checked when present."""
    if data.get("username") is not None:
        validate_username(data["username"])
    if data.get("password") is not None:
        validate_password(data["password"])
    if data.get("personKey") is not None:
        validate_person_key(data["personKey"])
    _optional_codes(data)
    enum_field(data, "status", UserStatus, "user status")
    enum_field(data, "userType", UserType, "user type")
    if data.get("emailNotifications") is not None and not isinstance(
        data["emailNotifications"], bool
    ):
        raise ValidationError("Email notifications must be a boolean value")
    match_pattern(
        data,
        "languageCode",
        LANGUAGE,
        "Invalid language code format. Expected format: en or en-US",
    )
    timezone = data.get("timezone")
    if timezone is not None and timezone not in TIME_ZONES:
        raise ValidationError("Invalid timezone format")


def validate_current_user_patch(data: dict[str, Any]) -> None:
    if not data:
        raise ValidationError("Patch request cannot be empty")
    validate_current_user_update(data)


def validate_user_create(data: dict[str, Any]) -> None:
    require_fields(data, ["username", "password", "personalInfo"])
    validate_username(data["username"])
    validate_password(data["password"])
    validate_personal_info(data["personalInfo"])
    if data.get("address") is not None:
        validate_user_address(data["address"])
    if data.get("preferences") is not None:
        validate_user_preferences(data["preferences"])
    if data.get("loyaltyPrograms") is not None:
        validate_loyalty_programs(data["loyaltyPrograms"])
    match_pattern(
        data,
        "cultureCode",
        CULTURE_CODE,
        "Invalid culture code format. Expected format: en-US",
    )
    booleans(data, "marketingConsent", "termsAccepted")
    if data.get("customFields") is not None:
        validate_custom_fields(data["customFields"])


def validate_users_create(users: Any) -> None:
    if not users:
        raise ValidationError("Users data array is required")


def validate_bulk_user_create(users: Any) -> None:
    """Each user must pass the single-user rules; usernames must be unique."""
    if not isinstance(users, list) or not users:
        raise ValidationError("Users data cannot be empty for bulk creation")
    if len(users) > MAX_BATCH:
        raise ValidationError(
            f"Maximum {MAX_BATCH} users can be created in a single batch"
        )
    for index, user in enumerate(users):
        try:
            validate_user_create(require_mapping(user, "User"))
        except ValidationError as exc:
            raise ValidationError(
                f"User validation failed at index {index}: {exc.message}",
                errors=exc.errors,
            ) from exc
    usernames = [user["username"] for user in users]
    if len(usernames) != len(set(usernames)):
        raise ValidationError("Duplicate usernames found in batch creation request")


def validate_user_update(data: dict[str, Any]) -> None:
    """``PUT users/{key}``; passwords go through the password endpoints."""
    if data.get("username") is not None:
        validate_username(data["username"])
    if data.get("password") is not None:
        raise ValidationError(
            "Password cannot be updated through this method. Use change_password instead."
        )
    if data.get("personalInfo") is not None:
        validate_personal_info_update(data["personalInfo"])
    if data.get("address") is not None:
        validate_user_address(data["address"])
    if data.get("preferences") is not None:
        validate_user_preferences(data["preferences"])
    if data.get("loyaltyPrograms") is not None:
        validate_loyalty_programs(data["loyaltyPrograms"])
    enum_field(data, "accountStatus", AccountStatus, "account status")
    if data.get("roles") is not None:
        validate_user_roles(data["roles"])


def validate_users_search(criteria: dict[str, Any]) -> None:
    match_format(criteria, "email", "email")
    string_length(criteria, "firstName", maximum=50, label="First name")
    string_length(criteria, "lastName", maximum=50, label="Last name")
    enum_field(criteria, "status", AccountStatus, "account status")
    string_length(criteria, "role", maximum=50, label="Role")
    match_format(criteria, "createdAfter", "date", "created after date")
    match_format(criteria, "createdBefore", "date", "created before date")
    numeric_range(criteria, "startIndex", minimum=0, label="Start index")
    numeric_range(criteria, "itemCount", 1, 100, "Item count")
    enum_field(criteria, "sortBy", UserSortField, "sort field")
    sort_order = criteria.get("sortOrder")
    if sort_order is not None and (
        not isinstance(sort_order, str)
        or sort_order.lower() not in allowed_values(SortOrder)
    ):
        raise ValidationError("Invalid sort order. Expected: asc or desc")


def validate_impersonation(data: dict[str, Any]) -> None:
    if data.get("targetUserKey") is None and data.get("targetRole") is None:
        raise ValidationError("Either targetUserKey or targetRole must be specified")
    if data.get("targetUserKey") is not None:
        validate_user_key(data["targetUserKey"])
    string_length(data, "targetRole", maximum=50, label="Target role")
    string_length(data, "reason", maximum=200, label="Reason")
    numeric_range(data, "sessionDurationMinutes", 5, 480, "Session duration minutes")


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------


def _permissions(data: dict[str, Any]) -> None:
    if isinstance(data.get("permissions"), list):
        for permission in data["permissions"]:
            if not isinstance(permission, str) or not permission.strip():
                raise ValidationError("Permission cannot be empty")


def validate_role_create(data: dict[str, Any]) -> None:
    require_fields(data, ["roleCode"])
    validate_role_code(data["roleCode"])
    _optional_codes(data)
    _permissions(data)
    string_length(data, "description", maximum=500, label="Description")


def validate_role_edit(data: dict[str, Any]) -> None:
    if data.get("roleCode") is not None:
        validate_role_code(data["roleCode"])
    enum_field(data, "status", RoleStatus, "role status")
    _permissions(data)
    _optional_codes(data)


# ---------------------------------------------------------------------------
# Person records
# ---------------------------------------------------------------------------


def _validate_person_name(name: Any) -> None:
    name = require_mapping(name, "name")
    require_fields(name, ["first", "last"])
    string_length(name, "first", 1, 50, "First name")
    string_length(name, "last", 1, 50, "Last name")
    string_length(name, "middle", maximum=50, label="Middle name")
    string_length(name, "title", maximum=10, label="Title")
    string_length(name, "suffix", maximum=10, label="Suffix")
    for field in ("first", "last", "middle"):
        if name.get(field) is not None and not PERSON_NAME_CHARS.fullmatch(name[field]):
            raise ValidationError(
                f"{field} name can only contain letters, spaces, hyphens, and apostrophes"
            )


def _validate_person_contact(contact: Any) -> None:
    contact = require_mapping(contact, "contactInfo")
    match_format(contact, "email", "email")
    if isinstance(contact.get("phones"), list):
        for index, phone in enumerate(contact["phones"]):
            phone = require_mapping(phone, f"Phone at index {index}")
            require_fields(phone, ["number"])
            match_format(phone, "number", "phone", f"phone number at index {index}")
    enum_field(
        contact, "preferredMethod", PersonContactMethod, "preferred contact method"
    )


def _validate_person_address(address: Any, index: int) -> None:
    address = require_mapping(address, f"Address at index {index}")
    require_fields(address, ["lineOne", "city", "countryCode"])
    string_length(address, "lineOne", 1, 100)
    string_length(address, "lineTwo", maximum=100)
    string_length(address, "city", 1, 50)
    string_length(address, "postalCode", maximum=20)
    string_length(address, "provinceState", maximum=50)
    match_format(address, "countryCode", "country_code", "country code")
    enum_field(address, "type", AddressType, f"address type at index {index}")


def _validate_travel_document(document: Any, index: int) -> None:
    document = require_mapping(document, f"Travel document at index {index}")
    require_fields(document, ["type", "number", "issuingCountry"])
    enum_member(document["type"], TravelDocumentType, f"document type at index {index}")
    match_format(document, "issuingCountry", "country_code", "issuing country")
    match_format(document, "nationality", "country_code", "nationality")
    if document.get("expirationDate") is not None:
        match_format(document, "expirationDate", "date", "expiration date")
        expires = parse_date(document["expirationDate"])
        if expires is not None and expires < date.today():
            raise ValidationError(f"Travel document at index {index} is expired")
    match_format(document, "issueDate", "date", "issue date")
    string_length(document, "number", 1, 50, "Document number")


def validate_person_edit(data: dict[str, Any]) -> None:
    if not any(data.get(field) is not None for field in PERSON_EDITABLE_FIELDS):
        raise ValidationError(
            "At least one editable field must be provided: "
            + ", ".join(PERSON_EDITABLE_FIELDS)
        )
    if data.get("name") is not None:
        _validate_person_name(data["name"])
    if data.get("contactInfo") is not None:
        _validate_person_contact(data["contactInfo"])
    if isinstance(data.get("addresses"), list):
        for index, address in enumerate(data["addresses"]):
            _validate_person_address(address, index)
    if isinstance(data.get("travelDocuments"), list):
        for index, document in enumerate(data["travelDocuments"]):
            _validate_travel_document(document, index)
    version = data.get("version")
    if version is not None and (not is_integer(version) or version < 1):
        raise ValidationError("Version must be a positive integer")
