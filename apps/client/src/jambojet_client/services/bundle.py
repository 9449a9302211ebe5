"""Service bundles sold on the booking in state."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import bundle as validators
from jambojet_core.schemas import HttpMethod


class BundleService(BaseService):
    name = "bundle"

    def get_bundle_availability(self, criteria: dict[str, Any] | None = None) -> Any:
        criteria = criteria or {}
        validators.validate_bundle_availability(criteria)
        return self._dispatch(
            HttpMethod.POST,
            "/api/nsk/v1/booking/bundle/availability",
            body=criteria,
            failure="Failed to get bundle availability",
        )

    def add_bundle(self, bundle: dict[str, Any]) -> Any:
        validators.validate_add_bundle(bundle)
        return self._dispatch(
            HttpMethod.POST,
            "/api/nsk/v1/booking/bundle/add",
            body=bundle,
            failure="Failed to add bundle",
        )

    def remove_bundle(self, bundle_key: str) -> Any:
        validators.validate_bundle_key(bundle_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"/api/nsk/v1/booking/bundle/{bundle_key}",
            failure="Failed to remove bundle",
        )

    def get_bundles(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "/api/nsk/v1/booking/bundles",
            failure="Failed to get bundles",
        )

    def update_bundle(self, bundle_key: str, update: dict[str, Any]) -> Any:
        """Only quantity, price, options and passenger assignments may change."""
        validators.validate_bundle_key(bundle_key)
        validators.validate_update_bundle(update)
        return self._dispatch(
            HttpMethod.PUT,
            f"/api/nsk/v1/booking/bundle/{bundle_key}",
            body=update,
            failure="Failed to update bundle",
        )

    def get_bundle_configuration(self, bundle_code: str) -> Any:
        validators.validate_bundle_code(bundle_code)
        return self._dispatch(
            HttpMethod.GET,
            f"/api/nsk/v1/resources/bundles/{bundle_code}",
            failure="Failed to get bundle configuration",
        )

    def get_bundle_pricing(self, criteria: dict[str, Any]) -> Any:
        validators.validate_bundle_pricing(criteria)
        return self._dispatch(
            HttpMethod.POST,
            "/api/nsk/v1/booking/bundle/pricing",
            body=criteria,
            failure="Failed to get bundle pricing",
        )

    def validate_bundle(self, data: dict[str, Any]) -> Any:
        """Ask the platform whether a bundle can be applied to a booking."""
        validators.validate_bundle_validation(data)
        return self._dispatch(
            HttpMethod.POST,
            "/api/nsk/v1/booking/bundle/validate",
            body=data,
            failure="Failed to validate bundle",
        )
