"""Seat maps, availability and seat assignments."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import seat as validators
from jambojet_core.schemas import HttpMethod, SeatCategory, SeatType


class SeatService(BaseService):
    """Seat operations on the booking in state."""

    name = "seat"

    def get_seat_availability(self, criteria: dict[str, Any] | None = None) -> Any:
        criteria = criteria or {}
        validators.validate_availability_criteria(criteria)
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/seat/availability",
            query=criteria,
            failure="Failed to get seat availability",
        )

    def assign_seats(self, request: dict[str, Any]) -> Any:
        validators.validate_seat_assignments(request)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/seat/assignment",
            body=request,
            failure="Failed to assign seats",
        )

    def remove_seat_assignment(self, seat_assignment_key: str) -> Any:
        validators.validate_seat_assignment_key(seat_assignment_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/booking/seat/assignment/{seat_assignment_key}",
            failure="Failed to remove seat assignment",
        )

    def get_seat_assignments(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/seat/assignments",
            failure="Failed to get seat assignments",
        )

    def update_seat_assignment(
        self, seat_assignment_key: str, update: dict[str, Any]
    ) -> Any:
        validators.validate_seat_assignment_key(seat_assignment_key)
        validators.validate_seat_assignment_update(update)
        return self._dispatch(
            HttpMethod.PUT,
            f"api/nsk/v1/booking/seat/assignment/{seat_assignment_key}",
            body=update,
            failure="Failed to update seat assignment",
        )

    def get_seat_map(self, segment_key: str, options: dict[str, Any] | None = None) -> Any:
        options = options or {}
        validators.validate_segment_key(segment_key)
        validators.validate_seat_map_options(options)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/booking/seat/map/{segment_key}",
            query=options,
            failure="Failed to get seat map",
        )

    def get_seat_pricing(self, criteria: dict[str, Any]) -> Any:
        validators.validate_pricing_criteria(criteria)
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/seat/pricing",
            query=criteria,
            failure="Failed to get seat pricing",
        )

    def auto_assign_seats(self, preferences: dict[str, Any] | None = None) -> Any:
        preferences = preferences or {}
        validators.validate_auto_assign_preferences(preferences)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/seat/autoAssign",
            body=preferences,
            failure="Failed to auto-assign seats",
        )

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def assign_seat(self, passenger_key: str, segment_key: str, seat_number: str) -> Any:
        return self.assign_seats(
            {
                "assignments": [
                    {
                        "passengerKey": passenger_key,
                        "segmentKey": segment_key,
                        "seatNumber": seat_number,
                    }
                ]
            }
        )

    def get_window_seats(self, segment_key: str) -> Any:
        return self.get_seat_availability(
            {"segmentKey": segment_key, "seatType": SeatType.WINDOW.value}
        )

    def get_aisle_seats(self, segment_key: str) -> Any:
        return self.get_seat_availability(
            {"segmentKey": segment_key, "seatType": SeatType.AISLE.value}
        )

    def get_premium_seats(self, segment_key: str) -> Any:
        return self.get_seat_availability(
            {"segmentKey": segment_key, "seatCategory": SeatCategory.PREMIUM.value}
        )

    def assign_family_seats(self, passenger_keys: list[str]) -> Any:
        """Auto-assign adjacent seats to a travelling family."""
        return self.auto_assign_seats(
            {
                "passengerKeys": passenger_keys,
                "keepTogether": True,
                "preferences": {"familyFriendly": True},
            }
        )
