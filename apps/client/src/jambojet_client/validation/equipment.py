"""Validators for departure-control equipment changes."""

from __future__ import annotations

from typing import Any

from jambojet_core.exceptions import ValidationError


def _require(data: dict[str, Any], *fields: str) -> None:
    for name in fields:
        if data.get(name) is None:
            raise ValidationError(f"Missing required field: {name}")


def validate_equipment_swap(data: dict[str, Any]) -> None:
    _require(data, "legKeys", "newEquipmentCode")


def validate_tail_number(data: dict[str, Any]) -> None:
    _require(data, "legKey", "tailNumber")
