"""Booking workflow navigation: what the booking needs next."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import navigation as validators
from jambojet_core.schemas import ActionCategory, ActionType, GoalState, HttpMethod


class NavigationService(BaseService):
    name = "navigation"

    def get_next_action(self, context: dict[str, Any] | None = None) -> Any:
        context = context or {}
        validators.validate_context_data(context)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/navigation/getNextAction",
            body=context,
            failure="Failed to get next action",
        )

    def get_navigation_actions(self, criteria: dict[str, Any] | None = None) -> Any:
        criteria = criteria or {}
        validators.validate_action_criteria(criteria)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/navigation/getNavigationActions",
            body=criteria,
            failure="Failed to get navigation actions",
        )

    def get_workflow_status(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/navigation/status",
            failure="Failed to get workflow status",
        )

    def validate_action(
        self, action_type: str, data: dict[str, Any] | None = None
    ) -> Any:
        """Check whether ``action_type`` is allowed without performing it."""
        data = data or {}
        validators.validate_action_type(action_type)
        validators.validate_action_validation_data(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/navigation/validateAction",
            body={**data, "actionType": action_type},
            failure="Failed to validate action",
        )

    def get_available_paths(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/booking/navigation/paths",
            failure="Failed to get available paths",
        )

    def execute_action(self, action_type: str, data: dict[str, Any]) -> Any:
        validators.validate_action_type(action_type)
        validators.validate_action_execution_data(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/booking/navigation/executeAction",
            body={**data, "actionType": action_type},
            failure="Failed to execute action",
        )

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def can_proceed_to_payment(self) -> Any:
        return self.validate_action(ActionType.PROCEED_TO_PAYMENT.value)

    def can_commit_booking(self) -> Any:
        return self.validate_action(ActionType.COMMIT_BOOKING.value)

    def get_add_on_actions(self) -> Any:
        return self.get_navigation_actions(
            {"actionCategory": ActionCategory.ADD_ONS.value}
        )

    def get_passenger_actions(self) -> Any:
        return self.get_navigation_actions(
            {"actionCategory": ActionCategory.PASSENGERS.value}
        )

    def get_completion_steps(self) -> Any:
        return self.get_next_action({"goalState": GoalState.BOOKING_COMPLETE.value})

    def get_booking_progress(self) -> dict[str, Any]:
        """Summarise the workflow status, filling gaps with neutral defaults."""
        status = self.get_workflow_status()
        data = status.get("data") if isinstance(status, dict) else None
        if not isinstance(data, dict):
            data = {}
        return {
            "completionPercentage": data.get("completionPercentage", 0),
            "currentStage": data.get("currentStage", "Unknown"),
            "nextStage": data.get("nextStage"),
            "remainingSteps": data.get("remainingSteps", []),
        }
