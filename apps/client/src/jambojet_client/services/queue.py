"""Booking and travel queue operations."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService, compact
from jambojet_client.validation import queue as validators
from jambojet_core.schemas import HttpMethod


class QueueService(BaseService):
    """Work through booking queues and travel queues.

    Booking queues hold bookings flagged for agent attention; travel queues
    hold travel-related items raised by the platform.
    """

    name = "queue"

    # ------------------------------------------------------------------
    # Booking queues
    # ------------------------------------------------------------------

    def get_booking_queues(
        self,
        queue_name: str | None = None,
        queue_code: str | None = None,
        queue_category_code: str | None = None,
        page_size: int | None = None,
        last_page_index: int | None = None,
    ) -> Any:
        validators.validate_queue_search(queue_category_code, page_size)
        params = compact(
            {
                "QueueName": queue_name,
                "QueueCode": queue_code,
                "QueueCategoryCode": queue_category_code,
                "PageSize": page_size,
                "LastPageIndex": last_page_index,
            }
        )
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v2/queues/bookings",
            query=params,
            failure="Failed to get booking queues",
        )

    def empty_booking_queue(
        self, booking_queue_code: str, sub_queue_code: str | None = None
    ) -> Any:
        validators.validate_queue_code(booking_queue_code)
        params = {"subQueueCode": sub_queue_code} if sub_queue_code else {}
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/queues/bookings/{booking_queue_code}/items",
            query=params,
            failure="Failed to empty booking queue",
        )

    def move_booking_queue_item(
        self,
        booking_queue_code: str,
        booking_queue_item_key: str,
        move_request: dict[str, Any],
    ) -> Any:
        validators.validate_queue_code(booking_queue_code)
        validators.validate_queue_item_key(booking_queue_item_key)
        validators.validate_move_request(move_request)
        return self._dispatch(
            HttpMethod.PUT,
            f"api/nsk/v1/queues/bookings/{booking_queue_code}/items/{booking_queue_item_key}",
            body=move_request,
            failure="Failed to move booking queue item",
        )

    def delete_booking_queue_item(
        self,
        booking_queue_code: str,
        booking_queue_item_key: str,
        delete_request: dict[str, Any] | None = None,
    ) -> Any:
        validators.validate_queue_code(booking_queue_code)
        validators.validate_queue_item_key(booking_queue_item_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/queues/bookings/{booking_queue_code}/items/{booking_queue_item_key}",
            query={},
            body=delete_request or {},
            failure="Failed to delete booking queue item",
        )

    def get_next_booking_queue_item(
        self,
        booking_queue_code: str,
        sub_queue_code: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        password: str | None = None,
    ) -> Any:
        validators.validate_queue_code(booking_queue_code)
        validators.validate_queue_dates(start_date, end_date)
        params = compact(
            {
                "SubQueueCode": sub_queue_code,
                "StartDate": start_date,
                "EndDate": end_date,
                "Password": password,
            }
        )
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v2/queues/bookings/{booking_queue_code}/next",
            query=params,
            failure="Failed to get next booking queue item",
        )

    def release_booking_queue_item(
        self, booking_queue_item_key: str, release_request: dict[str, Any]
    ) -> Any:
        validators.validate_queue_item_key(booking_queue_item_key)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v2/queues/bookings/items/{booking_queue_item_key}",
            body=release_request,
            failure="Failed to release booking queue item",
        )

    def get_queues_by_event_type(self, queue_event_type: int) -> Any:
        validators.validate_queue_event_type(queue_event_type)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/queues/bookings/queueEvents/{queue_event_type}",
            failure="Failed to get queues by event type",
        )

    # ------------------------------------------------------------------
    # Travel queues
    # ------------------------------------------------------------------

    def create_travel_queue_item(self, request: dict[str, Any]) -> Any:
        validators.validate_travel_queue_item(request)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/queues/travel",
            body=request,
            failure="Failed to create travel queue item",
        )

    def get_next_travel_queue_item(
        self, travel_queue_code: str, sub_queue_code: str | None = None
    ) -> Any:
        validators.validate_queue_code(travel_queue_code)
        params = {"subQueueCode": sub_queue_code} if sub_queue_code else {}
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/queues/travel/{travel_queue_code}/next",
            query=params,
            failure="Failed to get next travel queue item",
        )
