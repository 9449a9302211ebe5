"""Validators for booking messages and teletype traffic."""

from __future__ import annotations

from typing import Any

from jambojet_client.validation.rules import (
    allowed_values,
    is_integer,
    is_number,
    length,
    require_fields,
    rules,
    string_length,
)
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import HiddenOption, SortOrder

create_rules = rules(
    length("typeCode", maximum=50),
    length("information", maximum=500),
    length("body", maximum=5000),
)


def validate_message_create(data: dict[str, Any]) -> None:
    if not any(data.get(name) for name in ("typeCode", "information", "body")):
        raise ValidationError(
            "At least one of typeCode, information, or body must be provided"
        )
    create_rules.validate(data)


def validate_message_search(criteria: dict[str, Any]) -> None:
    hidden = criteria.get("hiddenOptions")
    if hidden is not None and (
        not is_integer(hidden) or hidden not in allowed_values(HiddenOption)
    ):
        raise ValidationError(
            "Hidden options must be 0 (NonHidden), 1 (Hidden), or 2 (All)"
        )
    for field, label in (("pageSize", "Page size"), ("pageNumber", "Page number")):
        value = criteria.get(field)
        if value is not None and (not is_number(value) or value < 1):
            raise ValidationError(f"{label} must be at least 1")
    sort_order = criteria.get("sortOrder")
    if sort_order is not None and (
        not isinstance(sort_order, str)
        or sort_order.lower() not in allowed_values(SortOrder)
    ):
        raise ValidationError('Sort order must be "asc" or "desc"')


def validate_message_key(key: Any) -> None:
    if not isinstance(key, str) or not key.strip():
        raise ValidationError("Message key cannot be empty")
    if len(key) > 100:
        raise ValidationError("Message key cannot exceed 100 characters")


def validate_message_keys(keys: Any) -> None:
    if not isinstance(keys, list) or not keys:
        raise ValidationError("Message keys array cannot be empty")
    for key in keys:
        validate_message_key(key)


def validate_teletype(data: dict[str, Any]) -> None:
    require_fields(data, ["fromAddress", "toAddress", "body"])
    for field, label in (("fromAddress", "From address"), ("toAddress", "To address")):
        value = data[field]
        if not isinstance(value, str) or not 7 <= len(value) <= 8:
            raise ValidationError(f"{label} must be 7-8 characters long")
    string_length(data, "body", maximum=10000, label="Message body")
