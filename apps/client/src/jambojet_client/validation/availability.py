"""Validators for availability and fare searches."""

from __future__ import annotations

import re
from typing import Any

from jambojet_client.validation.common import (
    ensure_not_before,
    validate_passenger_list,
    validate_passengers_criteria,
)
from jambojet_client.validation.rules import (
    booleans,
    enum_field,
    enum_items,
    is_number,
    is_past_date,
    match_format,
    non_empty_key,
    numeric_range,
    require_fields,
    require_list,
    require_mapping,
    string_length,
)
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import (
    Connections,
    DayOfWeek,
    LoyaltyFilter,
    SearchType,
    SsrCollectionsMode,
    TaxesAndFeesMode,
)

_TIME_INTERVAL = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]")
_CARRIER_CODE = re.compile(r"[A-Z]{2,3}")
_SSR_CODE = re.compile(r"[A-Z]{4}")

SIMPLE_SEARCH_VERSIONS = (3, 4)
LOW_FARE_VERSIONS = (2, 3)

# ---------------------------------------------------------------------------
# Full search
# ---------------------------------------------------------------------------


def validate_availability_search(data: dict[str, Any]) -> None:
    """``POST availability/search``: passengers plus a list of trips."""
    require_fields(data, ["passengers", "criteria"])
    validate_passengers_criteria(data["passengers"])
    _validate_trip_criteria(data["criteria"])
    if data.get("codes") is not None:
        _validate_codes(require_mapping(data["codes"], "codes"))
    enum_field(data, "taxesAndFees", TaxesAndFeesMode, "taxes and fees mode")


def _validate_trip_criteria(criteria: Any) -> None:
    criteria = require_list(criteria, "Criteria", "Criteria array cannot be empty")
    for index, trip in enumerate(criteria):
        trip = require_mapping(trip, f"Trip {index}")
        require_fields(trip, ["stations", "dates"])
        _validate_stations(require_mapping(trip["stations"], "stations"), index)
        _validate_dates(require_mapping(trip["dates"], "dates"), index)
        match_format(trip, "lowFarePrice", "positive_number", "low fare price")
        enum_field(trip, "ssrCollectionsMode", SsrCollectionsMode, "SSR collections mode")
        enum_field(trip, "type", SearchType, "trip type")


def _validate_stations(stations: dict[str, Any], index: int) -> None:
    require_fields(stations, ["departureStation", "arrivalStation"])
    match_format(stations, "departureStation", "airport_code", "departure station")
    match_format(stations, "arrivalStation", "airport_code", "arrival station")
    if stations["departureStation"] == stations["arrivalStation"]:
        raise ValidationError(
            f"Departure and arrival stations cannot be the same for trip {index}"
        )


def _validate_dates(dates: dict[str, Any], index: int) -> None:
    require_fields(dates, ["beginDate"])
    match_format(dates, "beginDate", "datetime", "begin date")
    if dates.get("endDate") is not None:
        match_format(dates, "endDate", "datetime", "end date")
        ensure_not_before(
            dates["beginDate"],
            dates["endDate"],
            f"End date must be after begin date for trip {index}",
        )
    if is_past_date(dates["beginDate"]):
        raise ValidationError(f"Begin date cannot be in the past for trip {index}")
    for field in ("beginTimeInterval", "endTimeInterval"):
        value = dates.get(field)
        if value is not None and (
            not isinstance(value, str) or not _TIME_INTERVAL.fullmatch(value)
        ):
            raise ValidationError("Invalid time interval format. Expected HH:MM format")
    if isinstance(dates.get("daysOfWeek"), list):
        enum_items(dates["daysOfWeek"], DayOfWeek, "day of week")


def _validate_codes(codes: dict[str, Any]) -> None:
    string_length(codes, "promotionCode", maximum=8, label="Promotion code")
    match_format(codes, "currencyCode", "currency_code", "currency code")


# ---------------------------------------------------------------------------
# Simple search
# ---------------------------------------------------------------------------


def validate_simple_search(data: dict[str, Any]) -> None:
    """``POST availability/search/simple``: one origin/destination pair."""
    require_fields(data, ["origin", "destination", "beginDate", "passengers"])
    _validate_route(data)
    validate_passenger_list(data["passengers"])
    string_length(data, "promotionCode", maximum=8, label="Promotion code")
    match_format(data, "currencyCode", "currency_code", "currency code")
    enum_field(data, "loyaltyFilter", LoyaltyFilter, "loyalty filter")


def _validate_route(data: dict[str, Any]) -> None:
    match_format(data, "origin", "airport_code", "origin")
    match_format(data, "destination", "airport_code", "destination")
    if data["origin"] == data["destination"]:
        raise ValidationError("Origin and destination cannot be the same")
    match_format(data, "beginDate", "datetime", "begin date")
    if data.get("endDate") is not None:
        match_format(data, "endDate", "datetime", "end date")
        ensure_not_before(
            data["beginDate"],
            data["endDate"],
            "Return date must be after departure date",
        )
    if is_past_date(data["beginDate"]):
        raise ValidationError("Departure date cannot be in the past")


def validate_low_fare_simple(data: dict[str, Any]) -> None:
    """``POST availability/lowfare/simple``.

    Accepts either the simple-search shape or a ``criteria`` list of
    ``{originStationCodes, destinationStationCodes, beginDate, endDate}``
    date windows, the form produced by flexible-date searches.
    """
    if "criteria" in data and "origin" not in data:
        require_fields(data, ["passengers", "criteria"])
        validate_passenger_list(data["passengers"])
        _validate_date_windows(data["criteria"])
    else:
        validate_simple_search(data)
    numeric_range(data, "flexibleDays", 0, 7, "Flexible days")


def _validate_date_windows(criteria: Any) -> None:
    criteria = require_list(criteria, "Criteria", "Criteria array cannot be empty")
    for index, window in enumerate(criteria):
        window = require_mapping(window, f"Criteria at index {index}")
        require_fields(
            window, ["originStationCodes", "destinationStationCodes", "beginDate"]
        )
        origins = require_list(window["originStationCodes"], "originStationCodes")
        destinations = require_list(
            window["destinationStationCodes"], "destinationStationCodes"
        )
        for code in origins + destinations:
            if not isinstance(code, str) or not code.strip():
                raise ValidationError(
                    f"Station codes must be non-empty strings for trip {index}"
                )
            match_format({"station": code}, "station", "airport_code", "station code")
        if set(origins) & set(destinations):
            raise ValidationError(
                f"Origin and destination cannot be the same for trip {index}"
            )
        match_format(window, "beginDate", "datetime", "begin date")
        if window.get("endDate") is not None:
            match_format(window, "endDate", "datetime", "end date")
            ensure_not_before(
                window["beginDate"],
                window["endDate"],
                f"End date must be after begin date for trip {index}",
            )
        if is_past_date(window["beginDate"]):
            raise ValidationError(f"Begin date cannot be in the past for trip {index}")


# ---------------------------------------------------------------------------
# Low fare
# ---------------------------------------------------------------------------


def validate_low_fare_request(data: dict[str, Any]) -> None:
    """``POST availability/lowfare``."""
    require_fields(data, ["passengers", "criteria"])
    validate_passengers_criteria(data["passengers"])
    _validate_low_fare_criteria(data["criteria"])
    booleans(data, "bypassCache", "getAllDetails", "includeTaxesAndFees")
    if data.get("codes") is not None:
        codes = require_mapping(data["codes"], "codes")
        _validate_codes(codes)
        if isinstance(codes.get("corporateCodes"), list):
            for index, code in enumerate(codes["corporateCodes"]):
                string_length(
                    {"code": code},
                    "code",
                    maximum=20,
                    label=f"Corporate code at index {index}",
                )
    if data.get("filters") is not None:
        _validate_low_fare_filters(require_mapping(data["filters"], "filters"))


def _validate_low_fare_criteria(criteria: Any) -> None:
    criteria = require_list(
        criteria, "Low fare criteria", "Low fare criteria array cannot be empty"
    )
    for index, trip in enumerate(criteria):
        trip = require_mapping(trip, f"Trip {index}")
        require_fields(trip, ["origin", "destination", "departureDate"])
        match_format(trip, "origin", "airport_code", "origin")
        match_format(trip, "destination", "airport_code", "destination")
        match_format(trip, "departureDate", "date", "departure date")
        if trip["origin"] == trip["destination"]:
            raise ValidationError(
                f"Origin and destination cannot be the same for trip {index}"
            )
        if trip.get("returnDate") is not None:
            match_format(trip, "returnDate", "date", "return date")
            ensure_not_before(
                trip["departureDate"],
                trip["returnDate"],
                f"Return date must be after departure date for trip {index}",
            )
        numeric_range(trip, "flexibleDays", 0, 7, "Flexible days")
        numeric_range(trip, "minLengthOfStay", 0, label="Minimum length of stay")
        numeric_range(trip, "maxLengthOfStay", 0, label="Maximum length of stay")
        minimum, maximum = trip.get("minLengthOfStay"), trip.get("maxLengthOfStay")
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValidationError(
                "Minimum length of stay cannot be greater than maximum "
                f"for trip {index}"
            )


def _validate_low_fare_filters(filters: dict[str, Any]) -> None:
    if filters.get("priceRange") is not None:
        price_range = require_mapping(filters["priceRange"], "priceRange")
        low, high = price_range.get("minPrice"), price_range.get("maxPrice")
        match_format(price_range, "minPrice", "non_negative_number", "minimum price")
        match_format(price_range, "maxPrice", "positive_number", "maximum price")
        if is_number(low) and is_number(high) and low > high:
            raise ValidationError("Minimum price cannot be greater than maximum price")
    enum_field(filters, "connections", Connections, "connection filter")
    if isinstance(filters.get("carrierCodes"), list):
        for index, code in enumerate(filters["carrierCodes"]):
            if not isinstance(code, str) or not _CARRIER_CODE.fullmatch(code):
                raise ValidationError(
                    f"Invalid carrier code at index {index}. "
                    "Expected 2-3 letter airline code"
                )


# ---------------------------------------------------------------------------
# SSR search and fare rule keys
# ---------------------------------------------------------------------------


def validate_search_with_ssr(data: dict[str, Any]) -> None:
    """Full search plus an optional list of four-letter SSR codes."""
    validate_availability_search(data)
    if data.get("ssrs") is not None:
        for index, code in enumerate(require_list(data["ssrs"], "ssrs")):
            if not isinstance(code, str) or not _SSR_CODE.fullmatch(code):
                raise ValidationError(
                    f"Invalid SSR code at index {index}. Expected 4 uppercase letters"
                )


def validate_fare_availability_key(key: Any) -> None:
    non_empty_key(key, "Fare availability key", min_length=10)


def validate_fare_key(key: Any) -> None:
    non_empty_key(key, "Fare key")


def validate_journey_key(key: Any) -> None:
    non_empty_key(key, "Journey key")
