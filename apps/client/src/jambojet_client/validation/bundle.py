"""Validators for fare bundles."""

from __future__ import annotations

import re
from typing import Any

from jambojet_client.validation.rules import (
    is_integer,
    is_number,
    match_format,
    require_fields,
    require_list,
)
from jambojet_core.exceptions import ValidationError

_BUNDLE_KEY = re.compile(r"[a-zA-Z0-9_-]+")
_BUNDLE_CODE = re.compile(r"[A-Z0-9_-]+")

UPDATABLE_FIELDS = ("bundleOptions", "passengerAssignments", "quantity", "price")


def _lists(data: dict[str, Any], *fields: str) -> None:
    for name in fields:
        if data.get(name) is not None:
            require_list(data[name], name)


def _non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_bundle_key(key: Any) -> None:
    if not _non_blank(key):
        raise ValidationError("bundleKey cannot be empty")
    if not _BUNDLE_KEY.fullmatch(key):
        raise ValidationError("bundleKey contains invalid characters")


def validate_bundle_code(code: Any) -> None:
    if not _non_blank(code):
        raise ValidationError("bundleCode cannot be empty")
    if not _BUNDLE_CODE.fullmatch(code):
        raise ValidationError(
            "bundleCode must be uppercase alphanumeric with underscores or hyphens only"
        )


def validate_bundle_availability(data: dict[str, Any]) -> None:
    _lists(data, "segmentKeys", "passengerKeys", "bundleTypes")


def validate_add_bundle(data: dict[str, Any]) -> None:
    require_fields(data, ["bundleCode"])
    if not _non_blank(data["bundleCode"]):
        raise ValidationError("bundleCode must be a non-empty string")
    if data.get("passengerAssignments") is not None:
        assignments = require_list(data["passengerAssignments"], "passengerAssignments")
        for assignment in assignments:
            if (
                not isinstance(assignment, dict)
                or "passengerKey" not in assignment
                or "segmentKey" not in assignment
            ):
                raise ValidationError(
                    "Each passenger assignment must have passengerKey and segmentKey"
                )
    options = data.get("bundleOptions")
    if options is not None and not isinstance(options, (list, dict)):
        raise ValidationError("bundleOptions must be an array")


def validate_update_bundle(data: dict[str, Any]) -> None:
    if not data:
        raise ValidationError("Update data cannot be empty")
    invalid = [name for name in data if name not in UPDATABLE_FIELDS]
    if invalid:
        raise ValidationError("Invalid fields: " + ", ".join(invalid))
    quantity = data.get("quantity")
    if quantity is not None and (not is_integer(quantity) or quantity < 0):
        raise ValidationError("quantity must be a non-negative integer")
    price = data.get("price")
    if price is not None and (not is_number(price) or price < 0):
        raise ValidationError("price must be a non-negative number")


def validate_bundle_pricing(data: dict[str, Any]) -> None:
    require_fields(data, ["bundleCode"])
    validate_bundle_code(data["bundleCode"])
    _lists(data, "segments", "passengers")
    match_format(data, "currency", "currency_code", "currency")
    match_format(data, "pricingDate", "date", "pricing date")


def validate_bundle_validation(data: dict[str, Any]) -> None:
    require_fields(data, ["bundleCode"])
    validate_bundle_code(data["bundleCode"])
    if data.get("bookingKey") is not None and not _non_blank(data["bookingKey"]):
        raise ValidationError("bookingKey must be a non-empty string")
    for name in ("segmentKeys", "passengerKeys"):
        if data.get(name) is None:
            continue
        for key in require_list(data[name], name):
            if not _non_blank(key):
                raise ValidationError(f"Each {name[:-1]} must be a non-empty string")
    _lists(data, "validationRules")
