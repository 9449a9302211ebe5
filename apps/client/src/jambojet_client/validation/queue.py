"""Validators for booking and travel queues."""

from __future__ import annotations

from typing import Any

from jambojet_client.validation.rules import is_integer, non_empty_key, parse_datetime
from jambojet_core.exceptions import ValidationError

MAX_QUEUE_EVENT_TYPE = 100


def validate_queue_code(code: Any) -> None:
    non_empty_key(code, "Queue code", empty_message="Queue code is required")
    if len(code) > 20:
        raise ValidationError("Invalid queue code format")


def validate_queue_item_key(key: Any) -> None:
    non_empty_key(key, "Queue item key", empty_message="Queue item key is required")


def validate_queue_search(
    queue_category_code: str | None = None, page_size: int | None = None
) -> None:
    if queue_category_code is not None and (
        not isinstance(queue_category_code, str) or len(queue_category_code) != 1
    ):
        raise ValidationError("Queue category code must be single character")
    if page_size is not None and (
        not is_integer(page_size) or not 10 <= page_size <= 5000
    ):
        raise ValidationError("Page size must be between 10 and 5000")


def validate_queue_dates(start_date: str | None, end_date: str | None) -> None:
    if start_date is not None and parse_datetime(start_date) is None:
        raise ValidationError("Invalid start date format (ISO 8601 required)")
    if end_date is not None and parse_datetime(end_date) is None:
        raise ValidationError("Invalid end date format (ISO 8601 required)")


def validate_move_request(request: dict[str, Any]) -> None:
    if not request:
        raise ValidationError("Move request cannot be empty")
    if not request.get("targetQueueCode"):
        raise ValidationError("Target queue code is required")


def validate_queue_event_type(event_type: Any) -> None:
    """Event type 0 is the platform's "Default" and never addressable."""
    if not is_integer(event_type):
        raise ValidationError("Queue event type must be an integer")
    if event_type == 0:
        raise ValidationError("Queue event type 0 (Default) is invalid")
    if event_type < 0 or event_type > MAX_QUEUE_EVENT_TYPE:
        raise ValidationError(
            f"Queue event type must be between 1 and {MAX_QUEUE_EVENT_TYPE}"
        )


def validate_travel_queue_item(request: dict[str, Any]) -> None:
    if not request:
        raise ValidationError("Travel queue item request cannot be empty")
