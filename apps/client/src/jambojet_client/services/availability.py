"""Flight availability, low-fare and fare-rule lookups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jambojet_client.base import BaseService
from jambojet_client.validation import availability as validators
from jambojet_client.validation.rules import api_version, is_integer
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import HttpMethod, PassengerType

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Keys accepted by build_passenger_criteria, in output order.
_PASSENGER_COUNT_KEYS: dict[str, PassengerType] = {
    "adults": PassengerType.ADULT,
    "children": PassengerType.CHILD,
    "infants": PassengerType.INFANT,
}

SUPPORTED_SEARCH_TYPES: dict[str, dict[str, str]] = {
    "full_search": {
        "method": "search",
        "description": "Full availability search with complete control",
        "endpoint": "/api/nsk/v4/availability/search",
        "version": "v4",
    },
    "simple_search_v4": {
        "method": "search_simple",
        "description": "Simple availability search v4 (recommended)",
        "endpoint": "/api/nsk/v4/availability/search/simple",
        "version": "v4",
    },
    "simple_search_v3": {
        "method": "search_simple",
        "description": "Simple availability search v3",
        "endpoint": "/api/nsk/v3/availability/search/simple",
        "version": "v3",
    },
    "low_fare_search_v3": {
        "method": "get_lowest_fares",
        "description": "Low fare availability search v3",
        "endpoint": "/api/nsk/v3/availability/lowfare",
        "version": "v3",
    },
    "low_fare_simple_v3": {
        "method": "search_low_fare_simple",
        "description": "Simple low fare search v3",
        "endpoint": "/api/nsk/v3/availability/lowfare/simple",
        "version": "v3",
    },
    "search_with_ssr": {
        "method": "search_with_ssr",
        "description": "Availability search with SSR",
        "endpoint": "/api/nsk/v2/availability/search/ssr",
        "version": "v2",
    },
    "quick_search": {
        "method": "quick_search",
        "description": "Convenience method for simple searches",
        "endpoint": "Wrapper (uses simple search)",
        "version": "Wrapper",
    },
    "flexible_dates": {
        "method": "search_flexible_dates",
        "description": "Search with flexible date ranges",
        "endpoint": "Wrapper (uses low fare simple)",
        "version": "Wrapper",
    },
}


class AvailabilityService(BaseService):
    """Availability searches against the ``availability`` and ``fareRules`` APIs."""

    name = "availability"

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------

    def search(self, criteria: dict[str, Any]) -> Any:
        """Full trip-by-trip availability search (v4)."""
        validators.validate_availability_search(criteria)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v4/availability/search",
            body=criteria,
            failure="Availability search failed",
        )

    def search_simple(self, criteria: dict[str, Any], version: int = 4) -> Any:
        api_version(version, validators.SIMPLE_SEARCH_VERSIONS)
        validators.validate_simple_search(criteria)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v{version}/availability/search/simple",
            body=criteria,
            failure="Simple availability search failed",
        )

    def get_lowest_fares(self, request: dict[str, Any], version: int = 3) -> Any:
        api_version(version, validators.LOW_FARE_VERSIONS)
        validators.validate_low_fare_request(request)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v{version}/availability/lowfare",
            body=request,
            failure="Low fare search failed",
        )

    def search_low_fare_simple(self, criteria: dict[str, Any], version: int = 3) -> Any:
        api_version(version, validators.LOW_FARE_VERSIONS)
        validators.validate_low_fare_simple(criteria)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v{version}/availability/lowfare/simple",
            body=criteria,
            failure="Simple low fare search failed",
        )

    def search_with_ssr(self, request: dict[str, Any]) -> Any:
        validators.validate_search_with_ssr(request)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v2/availability/search/ssr",
            body=request,
            failure="Availability with SSR search failed",
        )

    # ------------------------------------------------------------------
    # Fare rules
    # ------------------------------------------------------------------

    def get_fare_rules(self, fare_availability_key: str) -> Any:
        validators.validate_fare_availability_key(fare_availability_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/fareRules/{fare_availability_key}",
            failure="Failed to get fare rules",
        )

    def get_booking_fare_rules(self) -> Any:
        """Fare rules for every fare in the booking held in state."""
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/fareRules",
            failure="Failed to get booking fare rules",
        )

    def get_booking_fare_rule_by_fare_key(self, fare_key: str) -> Any:
        validators.validate_fare_key(fare_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/booking/fareRules/fare/{fare_key}",
            failure="Failed to get fare rule by fare key",
        )

    def get_booking_fare_rules_by_journey_key(self, journey_key: str) -> Any:
        validators.validate_journey_key(journey_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/booking/fareRules/journey/{journey_key}",
            failure="Failed to get fare rules by journey key",
        )

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def quick_search(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        passengers: Mapping[str, int] | list[dict[str, Any]] | None = None,
        return_date: str | None = None,
    ) -> Any:
        """One-way or return simple search.

        ``passengers`` is either a ready ``[{type, count}]`` list or a count
        mapping such as ``{"adults": 2, "infants": 1}``; with no counts a
        single adult is searched.
        """
        if not isinstance(passengers, list):
            passengers = self.build_passenger_criteria(passengers or {})
        criteria: dict[str, Any] = {
            "origin": origin,
            "destination": destination,
            "beginDate": departure_date,
            "passengers": passengers,
        }
        if return_date:
            criteria["endDate"] = return_date
        return self.search_simple(criteria)

    def search_flexible_dates(
        self,
        origin: str,
        destination: str,
        start_date: str,
        end_date: str,
        passengers: Mapping[str, int] | list[dict[str, Any]] | None = None,
    ) -> Any:
        """Low-fare search over a departure window."""
        if not isinstance(passengers, list):
            passengers = self.build_passenger_criteria(passengers or {})
        criteria = {
            "passengers": passengers,
            "criteria": [
                {
                    "originStationCodes": [origin],
                    "destinationStationCodes": [destination],
                    "beginDate": start_date,
                    "endDate": end_date,
                }
            ],
        }
        return self.search_low_fare_simple(criteria)

    def get_fares(self, request: dict[str, Any]) -> Any:
        """Route to the low-fare search when ``lowFare`` is truthy."""
        if request.get("lowFare"):
            body = {k: v for k, v in request.items() if k != "lowFare"}
            return self.get_lowest_fares(body)
        return self.search(request)

    @staticmethod
    def build_passenger_criteria(counts: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Turn ``{"adults": 2, "children": 1}`` into ``[{type, count}]`` entries."""
        for key in _PASSENGER_COUNT_KEYS:
            count = counts.get(key)
            if count is not None and (not is_integer(count) or count < 0):
                raise ValidationError(f"{key} must be a non-negative integer")
        criteria = [
            {"type": passenger_type.value, "count": counts[key]}
            for key, passenger_type in _PASSENGER_COUNT_KEYS.items()
            if counts.get(key)
        ]
        if not criteria:
            logger.debug("No passenger counts given, searching for one adult")
            criteria.append({"type": PassengerType.ADULT.value, "count": 1})
        return criteria

    @staticmethod
    def get_supported_search_types() -> dict[str, dict[str, str]]:
        return {key: dict(value) for key, value in SUPPORTED_SEARCH_TYPES.items()}
