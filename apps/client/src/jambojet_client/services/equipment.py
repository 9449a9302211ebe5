"""Departure-control equipment changes."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import equipment as validators
from jambojet_core.schemas import HttpMethod


class EquipmentService(BaseService):
    name = "equipment"

    def swap_equipment(self, request: dict[str, Any]) -> Any:
        validators.validate_equipment_swap(request)
        return self._dispatch(
            HttpMethod.POST,
            "api/dcs/v1/equipment/swap",
            body=request,
            failure="Equipment swap failed",
        )

    def assign_tail_number(self, request: dict[str, Any]) -> Any:
        validators.validate_tail_number(request)
        return self._dispatch(
            HttpMethod.POST,
            "api/dcs/v1/equipment/tailNumber",
            body=request,
            failure="Tail number assignment failed",
        )
