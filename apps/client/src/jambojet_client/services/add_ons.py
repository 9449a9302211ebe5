"""Ancillary products sold alongside a booking.

Covers the sell endpoints (activities, insurance, lounge access, bags,
SSRs, ...), availability and quote lookups for third-party products, and
the add-on payment and vendor resources.
"""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import add_ons as validators
from jambojet_core.schemas import HttpMethod


class AddOnsService(BaseService):
    name = "add_ons"

    def _post(self, path: str, data: dict[str, Any], failure: str) -> Any:
        return self._dispatch(
            HttpMethod.POST, f"api/nsk/v1/addOns/{path}", body=data, failure=failure
        )

    # ------------------------------------------------------------------
    # Sell
    # ------------------------------------------------------------------

    def add_activity(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("activities", data, "Failed to add activity")

    def add_insurance(self, data: dict[str, Any]) -> Any:
        validators.validate_insurance_request(data)
        return self._post("insurance", data, "Failed to add insurance")

    def add_lounge_access(self, data: dict[str, Any]) -> Any:
        validators.validate_lounge_access_request(data)
        return self._post("loungeAccess", data, "Failed to add lounge access")

    def add_merchandise(self, data: dict[str, Any]) -> Any:
        validators.validate_merchandise_request(data)
        return self._post("merchandise", data, "Failed to add merchandise")

    def add_pet_transport(self, data: dict[str, Any]) -> Any:
        validators.validate_pet_transport_request(data)
        return self._post("petTransport", data, "Failed to add pet transport")

    def add_seat_assignment(self, data: dict[str, Any]) -> Any:
        validators.validate_seat_request(data)
        return self._post("seats", data, "Failed to add seat assignment")

    def add_service_charges(self, data: dict[str, Any]) -> Any:
        validators.validate_service_charge_request(data)
        return self._post("serviceCharges", data, "Failed to add service charges")

    def add_special_service_request(self, data: dict[str, Any]) -> Any:
        validators.validate_ssr_request(data)
        return self._post(
            "specialServiceRequests", data, "Failed to add special service request"
        )

    def add_baggage(self, data: dict[str, Any]) -> Any:
        validators.validate_baggage_request(data)
        return self._post("bags", data, "Failed to add baggage")

    def add_hotel(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("hotels", data, "Failed to add hotel")

    def add_car_rental(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("cars", data, "Failed to add car rental")

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def get_available_activities(self, criteria: dict[str, Any]) -> Any:
        validators.validate_activity_availability_request(criteria)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v2/addOns/activities/available",
            body=criteria,
            failure="Failed to get available activities",
        )

    def get_available_hotels(self, criteria: dict[str, Any]) -> Any:
        validators.validate_hotel_availability_request(criteria)
        return self._post(
            "hotels/available", criteria, "Failed to get available hotels"
        )

    def get_available_cars(self, criteria: dict[str, Any]) -> Any:
        validators.validate_car_availability_request(criteria)
        return self._post("cars/available", criteria, "Failed to get available cars")

    def get_available_insurance(self, criteria: dict[str, Any]) -> Any:
        validators.validate_insurance_availability_request(criteria)
        return self._post(
            "insurance/available", criteria, "Failed to get available insurance"
        )

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------

    def quote_activity(self, data: dict[str, Any]) -> Any:
        validators.validate_activity_quote_request(data)
        return self._post("activities/quote", data, "Failed to quote activity")

    def quote_hotel(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("hotels/quote", data, "Failed to quote hotel")

    def quote_car(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("cars/quote", data, "Failed to quote car rental")

    def quote_insurance(self, data: dict[str, Any]) -> Any:
        validators.validate_token_request(data)
        return self._post("insurance/quote", data, "Failed to quote insurance")

    # ------------------------------------------------------------------
    # Booking add-ons, payments and vendors
    # ------------------------------------------------------------------

    def get_booking_add_ons_by_type(
        self, add_on_type: str, parameters: dict[str, Any] | None = None
    ) -> Any:
        validators.validate_booking_add_on_type(add_on_type)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/booking/addOns/{add_on_type}",
            query=parameters or {},
            failure=f"Failed to get booking {add_on_type} add-ons",
        )

    def get_add_on_payment_methods(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/addons/payments",
            failure="Failed to get add-on payment methods",
        )

    def get_specific_add_on_payment_methods(self, add_on_key: str) -> Any:
        validators.validate_add_on_key(add_on_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/booking/addons/{add_on_key}/payments",
            failure="Failed to get specific add-on payment methods",
        )

    def get_vendors(self, parameters: dict[str, Any] | None = None) -> Any:
        """List add-on vendors; ``{"version": "v2"}`` selects the v2 resource."""
        parameters = parameters or {}
        validators.validate_vendor_request(parameters)
        version = "v2" if parameters.get("version") == "v2" else "v1"
        query = {key: value for key, value in parameters.items() if key != "version"}
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/{version}/resources/addOns/vendors",
            query=query,
            failure="Failed to get vendors",
        )
