"""Validators for the booking navigation workflow.

Every request here is a flat mapping, so the shapes are declared as rule
sets rather than written out imperatively.
"""

from __future__ import annotations

from typing import Any

from jambojet_client.validation.rules import (
    FieldRule,
    RuleKind,
    boolean,
    custom,
    enum_member,
    fmt,
    is_integer,
    is_number,
    nested,
    non_empty_key,
    one_of,
    rules,
)
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import (
    ActionCategory,
    ActionScope,
    ActionType,
    ExecutionPriority,
    GoalState,
    NavigationPriority,
    NavigationUserRole,
    NavigationUserType,
)


def _positive(value: Any) -> bool:
    return is_number(value) and value > 0


def _non_negative(value: Any) -> bool:
    return is_number(value) and value >= 0


def _key(field: str, label: str) -> FieldRule:
    def check(payload: dict[str, Any]) -> None:
        if payload.get(field) is not None:
            non_empty_key(payload[field], label, min_length=5)

    return FieldRule(field, RuleKind.CUSTOM, check)


context_rules = rules(
    one_of("goalState", GoalState, "goal state"),
    one_of("priority", NavigationPriority, "priority"),
    one_of("userType", NavigationUserType, "user type"),
    custom(
        "timeConstraint",
        _positive,
        "Time constraint must be a positive number (in minutes)",
    ),
    custom(
        "preferences",
        lambda value: isinstance(value, (dict, list)),
        "Preferences must be an array",
    ),
)

action_criteria_rules = rules(
    one_of("actionCategory", ActionCategory, "action category"),
    one_of("scope", ActionScope, "scope"),
    boolean("includeCompleted"),
    one_of("userRole", NavigationUserRole, "user role"),
)

_validation_fields = (
    _key("passengerKey", "Passenger key"),
    _key("segmentKey", "Segment key"),
    custom("amount", _non_negative, "Amount must be a non-negative number"),
    fmt("currency", "currency_code", "currency"),
)

validation_data_rules = rules(*_validation_fields, boolean("validateOnly"))

execution_options_rules = rules(
    boolean("async", "async option"),
    custom("timeout", _positive, "Timeout must be a positive number (in seconds)"),
    custom(
        "retryCount",
        lambda value: is_integer(value) and value >= 0,
        "Retry count must be a non-negative integer",
    ),
    one_of("priority", ExecutionPriority, "priority"),
)

execution_data_rules = rules(
    *_validation_fields,
    boolean("confirmAction"),
    boolean("bypassWarnings"),
    custom(
        "metadata",
        lambda value: isinstance(value, (dict, list)),
        "Metadata must be an array",
    ),
    nested("executionOptions", execution_options_rules, "executionOptions"),
)


def validate_context_data(context: dict[str, Any]) -> None:
    context_rules.validate(context)


def validate_action_criteria(criteria: dict[str, Any]) -> None:
    action_criteria_rules.validate(criteria)


def validate_action_type(action_type: Any) -> None:
    if not isinstance(action_type, str) or not action_type.strip():
        raise ValidationError("Action type cannot be empty")
    enum_member(action_type, ActionType, "action type")


def validate_action_validation_data(data: dict[str, Any]) -> None:
    validation_data_rules.validate(data)


def validate_action_execution_data(data: dict[str, Any]) -> None:
    execution_data_rules.validate(data)
