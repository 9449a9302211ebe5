"""Validators for ancillary products sold alongside a booking.

Covers the add-on catalog: activities, hotels and cars (token based),
insurance, lounge access, merchandise, pet transport, seats, service
charges, special service requests (SSRs) and baggage, plus the availability,
quote and vendor lookups.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from jambojet_client.validation.common import ensure_not_before
from jambojet_client.validation.rules import (
    allowed_values,
    boolean_type,
    enum_field,
    enum_member,
    fmt,
    in_range,
    is_number,
    length,
    match_format,
    non_empty_key,
    numeric_range,
    one_of,
    parse_date,
    require_fields,
    require_list,
    require_mapping,
    required,
    rules,
    string_length,
)
from jambojet_client.validation.seat import SEAT_NUMBER
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import (
    BAGGAGE_MAX_WEIGHT,
    ActivityCategory,
    AutoAssignSeatType,
    BaggageType,
    BookingAddOnType,
    ChargeApplicability,
    ChargeType,
    CoverageType,
    DimensionUnit,
    PetType,
    SeatCharacteristic,
    SpecialHandling,
    SsrCode,
    VendorType,
)

logger = logging.getLogger(__name__)

_SEAT_NUMBER = re.compile(SEAT_NUMBER)
_SSR_CODE = re.compile(r"[A-Z]{4}")

MAX_DIMENSION = 300
MAX_POLICY_DAYS = 365

# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


def validate_product_key(key: Any) -> None:
    non_empty_key(key, "Product key", min_length=5)


def validate_token_request(data: dict[str, Any]) -> None:
    """Sell or quote requests that only carry a product token."""
    require_fields(data, ["productKey"])


def validate_add_on_key(key: Any) -> None:
    if not isinstance(key, str) or not key.strip():
        raise ValidationError("Add-on key is required")


def validate_booking_add_on_type(add_on_type: Any) -> None:
    if add_on_type not in allowed_values(BookingAddOnType):
        raise ValidationError(f"Invalid add-on type: {add_on_type}")


# ---------------------------------------------------------------------------
# Insurance
# ---------------------------------------------------------------------------


def validate_insurance_request(data: dict[str, Any]) -> None:
    require_fields(data, ["productKey", "coverageAmount"])
    validate_product_key(data["productKey"])
    match_format(data, "coverageAmount", "positive_number", "coverage amount")
    numeric_range(data, "coverageAmount", 100, 1_000_000, "Coverage amount")
    if data.get("beneficiaries") is not None:
        validate_beneficiaries(data["beneficiaries"])
    enum_field(data, "coverageType", CoverageType, "insurance coverage type")
    if data.get("policyPeriod") is not None:
        validate_policy_period(require_mapping(data["policyPeriod"], "policyPeriod"))
    boolean_type(data, "preExistingConditions")


def validate_beneficiaries(beneficiaries: Any) -> None:
    """Each beneficiary is checked, then the shares must total exactly 100."""
    beneficiaries = require_list(
        beneficiaries,
        "Beneficiaries",
        "At least one beneficiary is required for insurance",
    )
    for index, beneficiary in enumerate(beneficiaries):
        beneficiary = require_mapping(beneficiary, f"Beneficiary {index}")
        require_fields(beneficiary, ["name", "relationship", "percentage"])
        string_length(beneficiary, "name", 2, 100, "Beneficiary name")
        string_length(beneficiary, "relationship", maximum=50, label="Relationship")
        numeric_range(beneficiary, "percentage", 0, 100, "Beneficiary percentage")
        if beneficiary.get("contactInfo") is not None:
            _validate_beneficiary_contact(
                require_mapping(beneficiary["contactInfo"], "contactInfo")
            )
    if sum(b["percentage"] for b in beneficiaries) != 100:
        raise ValidationError("Beneficiary percentages must add up to 100%")


def _validate_beneficiary_contact(contact: dict[str, Any]) -> None:
    match_format(contact, "email", "email")
    match_format(contact, "phone", "phone")
    if contact.get("address") is not None:
        address = require_mapping(contact["address"], "address")
        require_fields(address, ["lineOne", "city", "countryCode"])
        match_format(address, "countryCode", "country_code", "country code")


def validate_policy_period(period: dict[str, Any]) -> None:
    require_fields(period, ["startDate", "endDate"])
    match_format(period, "startDate", "date", "start date")
    match_format(period, "endDate", "date", "end date")
    ensure_not_before(
        period["startDate"],
        period["endDate"],
        "Policy end date must be after start date",
        inclusive=False,
    )
    span = parse_date(period["endDate"]) - parse_date(period["startDate"])
    if span.days > MAX_POLICY_DAYS:
        raise ValidationError(
            f"Insurance policy period cannot exceed {MAX_POLICY_DAYS} days"
        )


# ---------------------------------------------------------------------------
# Lounge, merchandise, pets
# ---------------------------------------------------------------------------

lounge_rules = rules(
    required("loungeCode", "passengerKey"),
    length("loungeCode", maximum=10, label="Lounge code"),
    fmt("accessTime", "datetime", "access time"),
)


def validate_lounge_access_request(data: dict[str, Any]) -> None:
    lounge_rules.validate(data)


def validate_merchandise_request(data: dict[str, Any]) -> None:
    require_fields(data, ["productKey", "quantity"])
    validate_product_key(data["productKey"])
    numeric_range(data, "quantity", 1, 10, "Quantity")


pet_transport_rules = rules(
    required("petType", "weight", "passengerKey"),
    one_of("petType", PetType, "pet type"),
    fmt("weight", "positive_number", "weight"),
)


def validate_pet_transport_request(data: dict[str, Any]) -> None:
    pet_transport_rules.validate(data)


# ---------------------------------------------------------------------------
# Seats
# ---------------------------------------------------------------------------


def validate_seat_request(data: dict[str, Any]) -> None:
    require_fields(data, ["seats"])
    seats = require_list(data["seats"], "Seats", "Seats must be a non-empty array")
    for index, seat in enumerate(seats):
        _validate_seat(require_mapping(seat, f"Seat at index {index}"), index)
    string_length(data, "seatMapVersion", maximum=50, label="Seat map version")
    if data.get("autoAssignPreferences") is not None:
        preferences = require_mapping(
            data["autoAssignPreferences"], "autoAssignPreferences"
        )
        seat_type = preferences.get("seatType")
        if seat_type is not None and seat_type not in allowed_values(AutoAssignSeatType):
            raise ValidationError("Invalid auto-assign seat type preference")
        boolean_type(preferences, "keepTogether")


def _validate_seat(seat: dict[str, Any], index: int) -> None:
    require_fields(seat, ["seatNumber", "segmentKey", "passengerKey"])
    if not isinstance(seat["seatNumber"], str) or not _SEAT_NUMBER.fullmatch(
        seat["seatNumber"]
    ):
        raise ValidationError(
            f"Invalid seat number format at index {index}. Expected format: 12A"
        )
    if seat["segmentKey"] == seat["passengerKey"]:
        raise ValidationError(
            f"Segment key and passenger key must be different at index {index}"
        )
    for characteristic in seat.get("characteristics") or []:
        if characteristic not in allowed_values(SeatCharacteristic):
            raise ValidationError(
                f"Invalid seat characteristic at seat index {index}: {characteristic}"
            )
    for fee in seat.get("fees") or []:
        fee = require_mapping(fee, f"Fee for seat at index {index}")
        match_format(fee, "amount", "non_negative_number", "fee amount")


# ---------------------------------------------------------------------------
# Service charges and SSRs
# ---------------------------------------------------------------------------


def validate_service_charge_request(data: dict[str, Any]) -> None:
    require_fields(data, ["serviceCharges"])
    charges = require_list(
        data["serviceCharges"],
        "Service charges",
        "Service charges must be a non-empty array",
    )
    for index, charge in enumerate(charges):
        charge = require_mapping(charge, f"Service charge at index {index}")
        require_fields(charge, ["chargeCode", "amount"])
        string_length(charge, "chargeCode", maximum=10, label="Charge code")
        match_format(charge, "amount", "positive_number", "amount")
        enum_field(charge, "chargeType", ChargeType, f"charge type at index {index}")
        enum_field(
            charge,
            "applicability",
            ChargeApplicability,
            f"charge applicability at index {index}",
        )
        match_format(charge, "currencyCode", "currency_code", "currency code")


def validate_ssr_request(data: dict[str, Any]) -> None:
    """Codes must look like SSR codes; codes outside the known list are only logged."""
    require_fields(data, ["ssrs"])
    ssrs = require_list(data["ssrs"], "SSRs", "SSRs must be a non-empty array")
    known = allowed_values(SsrCode)
    for index, ssr in enumerate(ssrs):
        ssr = require_mapping(ssr, f"SSR at index {index}")
        require_fields(ssr, ["ssrCode"])
        code = ssr["ssrCode"]
        if not isinstance(code, str) or not _SSR_CODE.fullmatch(code):
            raise ValidationError(
                f"Invalid SSR code format at index {index}. Expected 4-letter code"
            )
        if code not in known:
            logger.warning("Unknown SSR code used: %s", code)
        passenger_key = ssr.get("passengerKey")
        if passenger_key is not None and (
            not isinstance(passenger_key, str) or not passenger_key.strip()
        ):
            raise ValidationError(f"Passenger key cannot be empty at SSR index {index}")
        if ssr.get("segmentKeys") is not None:
            segment_keys = require_list(
                ssr["segmentKeys"],
                "Segment keys",
                f"Segment keys must be a non-empty array at SSR index {index}",
            )
            for key in segment_keys:
                if not isinstance(key, str) or not key.strip():
                    raise ValidationError(
                        f"Segment key cannot be empty at SSR index {index}"
                    )
        string_length(ssr, "freeText", maximum=200, label="Free text")
        numeric_range(ssr, "quantity", 1, 10, "Quantity")


# ---------------------------------------------------------------------------
# Baggage
# ---------------------------------------------------------------------------


def validate_baggage_request(data: dict[str, Any]) -> None:
    require_fields(data, ["bags"])
    bags = require_list(data["bags"], "Bags", "Bags must be a non-empty array")
    for index, bag in enumerate(bags):
        _validate_bag(require_mapping(bag, f"Bag at index {index}"), index)


def _validate_bag(bag: dict[str, Any], index: int) -> None:
    require_fields(bag, ["baggageType", "weight", "passengerKey"])
    baggage_type = bag["baggageType"]
    enum_member(baggage_type, BaggageType, f"baggage type at index {index}")
    match_format(bag, "weight", "positive_number", "weight")
    if bag["weight"] > BAGGAGE_MAX_WEIGHT[BaggageType(baggage_type)]:
        raise ValidationError(
            f"Weight exceeds maximum limit for {baggage_type} baggage at index {index}"
        )
    if bag.get("dimensions") is not None:
        _validate_dimensions(require_mapping(bag["dimensions"], "dimensions"), index)
    if bag.get("journeyKeys") is not None:
        require_list(
            bag["journeyKeys"],
            "Journey keys",
            f"Journey keys must be a non-empty array at baggage index {index}",
        )
    for handling in bag.get("specialHandling") or []:
        if handling not in allowed_values(SpecialHandling):
            raise ValidationError(
                f"Invalid special handling type at baggage index {index}: {handling}"
            )


def _validate_dimensions(dimensions: dict[str, Any], index: int) -> None:
    require_fields(dimensions, ["length", "width", "height"])
    for side in ("length", "width", "height"):
        match_format(dimensions, side, "positive_number", side)
        if dimensions[side] > MAX_DIMENSION:
            raise ValidationError(
                f"Baggage {side} exceeds maximum limit at index {index}"
            )
    unit = dimensions.get("unit")
    if unit is not None and unit not in allowed_values(DimensionUnit):
        raise ValidationError(
            f"Invalid dimension unit at baggage index {index}. Expected: cm or in"
        )


# ---------------------------------------------------------------------------
# Availability and quotes
# ---------------------------------------------------------------------------


def validate_location(location: Any, label: str = "location") -> None:
    location = require_mapping(location, label)
    match_format(location, "airportCode", "airport_code", "airport code")
    string_length(location, "cityCode", maximum=5, label="City code")
    match_format(location, "countryCode", "country_code", "country code")
    if location.get("coordinates") is not None:
        coordinates = require_mapping(location["coordinates"], "coordinates")
        require_fields(coordinates, ["latitude", "longitude"])
        numeric_range(coordinates, "latitude", -90, 90, "Latitude")
        numeric_range(coordinates, "longitude", -180, 180, "Longitude")


def validate_date_range(date_range: Any) -> None:
    date_range = require_mapping(date_range, "dateRange")
    require_fields(date_range, ["startDate", "endDate"])
    match_format(date_range, "startDate", "date", "start date")
    match_format(date_range, "endDate", "date", "end date")
    ensure_not_before(
        date_range["startDate"],
        date_range["endDate"],
        "End date must be after start date",
    )


def validate_activity_availability_request(data: dict[str, Any]) -> None:
    if data.get("location") is not None:
        validate_location(data["location"])
    if data.get("dateRange") is not None:
        validate_date_range(data["dateRange"])
    for category in data.get("categories") or []:
        if category not in allowed_values(ActivityCategory):
            raise ValidationError(
                f"Invalid activity category: {category}. Expected one of: "
                + ", ".join(allowed_values(ActivityCategory))
            )
    numeric_range(data, "startIndex", minimum=0, label="Start index")
    numeric_range(data, "itemCount", 1, 100, "Item count")


def validate_hotel_availability_request(data: dict[str, Any]) -> None:
    if data.get("location") is not None:
        validate_location(data["location"])
    if data.get("dateRange") is not None:
        validate_date_range(data["dateRange"])


def validate_car_availability_request(data: dict[str, Any]) -> None:
    if data.get("pickupLocation") is not None:
        validate_location(data["pickupLocation"], "pickupLocation")
    if data.get("dateRange") is not None:
        validate_date_range(data["dateRange"])


def validate_insurance_availability_request(data: dict[str, Any]) -> None:
    coverage_type = data.get("coverageType")
    if coverage_type is not None and coverage_type not in allowed_values(CoverageType):
        raise ValidationError("Invalid insurance coverage type")


activity_quote_rules = rules(
    required("productKey", "quantity"),
    in_range("quantity", 1, 10, "Quantity"),
)


def validate_activity_quote_request(data: dict[str, Any]) -> None:
    activity_quote_rules.validate(data)
    validate_product_key(data["productKey"])
    for index, age in enumerate(data.get("participantAges") or []):
        if not is_number(age) or not 0 <= age <= 120:
            raise ValidationError(
                f"Participant age at index {index} must be between 0 and 120"
            )


def validate_vendor_request(data: dict[str, Any]) -> None:
    vendor_type = data.get("vendorType")
    if vendor_type is not None and vendor_type not in allowed_values(VendorType):
        raise ValidationError("Invalid vendor type")
