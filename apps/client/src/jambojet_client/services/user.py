"""User accounts, roles, impersonation and linked person records."""

from __future__ import annotations

from typing import Any

from jambojet_client.base import BaseService
from jambojet_client.validation import user as validators
from jambojet_core.schemas import HttpMethod


class UserService(BaseService):
    """Operations on the logged-in user (``user``) and on other users (``users``).

    Password changes only go through :meth:`change_password` and
    :meth:`reset_user_password`; :meth:`update_user` rejects a payload that
    carries one.
    """

    name = "user"

    # ------------------------------------------------------------------
    # Current user
    # ------------------------------------------------------------------

    def get_current_user(self) -> Any:
        return self._dispatch(
            HttpMethod.GET, "api/nsk/v1/user", failure="Failed to get current user"
        )

    def update_current_user(self, data: dict[str, Any]) -> Any:
        validators.validate_current_user_update(data)
        return self._dispatch(
            HttpMethod.PUT,
            "api/nsk/v1/user",
            body=data,
            failure="Failed to update current user",
        )

    def patch_current_user(self, data: dict[str, Any]) -> Any:
        validators.validate_current_user_patch(data)
        return self._dispatch(
            HttpMethod.PATCH,
            "api/nsk/v1/user",
            body=data,
            failure="Failed to patch current user",
        )

    def change_password(self, data: dict[str, Any]) -> Any:
        validators.validate_password_change(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/user/password/change",
            body=data,
            failure="Failed to change password",
        )

    # ------------------------------------------------------------------
    # User accounts
    # ------------------------------------------------------------------

    def create_user(self, data: dict[str, Any]) -> Any:
        validators.validate_user_create(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/user",
            body=data,
            failure="Failed to create user",
        )

    def create_users(self, users: Any, use_v2: bool = True) -> Any:
        validators.validate_users_create(users)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v2/users" if use_v2 else "api/nsk/v1/users",
            body=users,
            failure="Failed to create users",
        )

    def create_multiple_users(self, users: list[dict[str, Any]]) -> Any:
        """Create up to 100 users at once; each entry follows :meth:`create_user`."""
        validators.validate_bulk_user_create(users)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v2/users",
            body={"users": users},
            failure="Failed to create multiple users",
        )

    def get_users(self, criteria: dict[str, Any] | None = None) -> Any:
        criteria = criteria or {}
        validators.validate_users_search(criteria)
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/users",
            query=criteria,
            failure="Failed to get users",
        )

    def get_user_by_key(self, user_key: str) -> Any:
        validators.validate_user_key(user_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/users/{user_key}",
            failure="Failed to get user by key",
        )

    def update_user(self, user_key: str, data: dict[str, Any]) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_user_update(data)
        return self._dispatch(
            HttpMethod.PUT,
            f"api/nsk/v1/users/{user_key}",
            body=data,
            failure="Failed to update user",
        )

    def patch_user(self, user_key: str, data: dict[str, Any]) -> Any:
        validators.validate_user_key(user_key)
        return self._dispatch(
            HttpMethod.PATCH,
            f"api/nsk/v1/users/{user_key}",
            body=data,
            failure="Failed to patch user",
        )

    def delete_user(self, user_key: str) -> Any:
        validators.validate_user_key(user_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/users/{user_key}",
            failure="Failed to delete user",
        )

    def reset_user_password(
        self, user_key: str, data: dict[str, Any] | None = None
    ) -> Any:
        data = data or {}
        validators.validate_user_key(user_key)
        validators.validate_password_reset(data)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v1/users/{user_key}/password/reset",
            body=data,
            failure="Failed to reset user password",
        )

    def get_user_by_person_key(self, person_key: str) -> Any:
        validators.require_person_key(person_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/users/byPerson/{person_key}",
            failure="Failed to get user by person key",
        )

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def get_current_user_roles(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/user/roles",
            failure="Failed to get current user roles",
        )

    def create_current_user_role(self, data: dict[str, Any]) -> Any:
        validators.validate_role_create(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/user/roles",
            body=data,
            failure="Failed to create current user role",
        )

    def get_user_roles(self, user_key: str) -> Any:
        validators.validate_user_key(user_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/users/{user_key}/roles",
            failure="Failed to get user roles",
        )

    def create_user_role(self, user_key: str, data: dict[str, Any]) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_role_create(data)
        return self._dispatch(
            HttpMethod.POST,
            f"api/nsk/v1/users/{user_key}/roles",
            body=data,
            failure="Failed to create user role",
        )

    def get_specific_user_role(self, user_key: str, user_role_key: str) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_user_role_key(user_role_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/users/{user_key}/roles/{user_role_key}",
            failure="Failed to get specific user role",
        )

    def update_user_role(
        self, user_key: str, user_role_key: str, data: dict[str, Any]
    ) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_user_role_key(user_role_key)
        validators.validate_role_edit(data)
        return self._dispatch(
            HttpMethod.PUT,
            f"api/nsk/v1/users/{user_key}/roles/{user_role_key}",
            body=data,
            failure="Failed to update user role",
        )

    def delete_user_role(self, user_key: str, user_role_key: str) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_user_role_key(user_role_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/users/{user_key}/roles/{user_role_key}",
            failure="Failed to delete user role",
        )

    def patch_user_role(
        self, user_key: str, user_role_key: str, data: dict[str, Any]
    ) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_user_role_key(user_role_key)
        return self._dispatch(
            HttpMethod.PATCH,
            f"api/nsk/v1/users/{user_key}/roles/{user_role_key}",
            body=data,
            failure="Failed to patch user role",
        )

    # ------------------------------------------------------------------
    # Impersonation
    # ------------------------------------------------------------------

    def get_impersonation_state(self) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/user/impersonate",
            failure="Failed to get impersonation state",
        )

    def start_impersonation(self, data: dict[str, Any]) -> Any:
        validators.validate_impersonation(data)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/user/impersonate",
            body=data,
            failure="Failed to start impersonation",
        )

    def reset_impersonation(self) -> Any:
        return self._dispatch(
            HttpMethod.DELETE,
            "api/nsk/v1/user/impersonate",
            failure="Failed to reset impersonation",
        )

    # ------------------------------------------------------------------
    # Bookings and person record
    # ------------------------------------------------------------------

    def get_user_bookings(self, parameters: dict[str, Any] | None = None) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/user/bookings",
            query=parameters or {},
            failure="Failed to get user bookings",
        )

    def get_user_bookings_by_passenger(
        self, parameters: dict[str, Any] | None = None
    ) -> Any:
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v1/user/bookingsByPassenger",
            query=parameters or {},
            failure="Failed to get user bookings by passenger",
        )

    def get_user_person(self, user_key: str) -> Any:
        validators.validate_user_key(user_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/users/{user_key}/person",
            failure="Failed to get user person",
        )

    def update_user_person(self, user_key: str, data: dict[str, Any]) -> Any:
        validators.validate_user_key(user_key)
        validators.validate_person_edit(data)
        return self._dispatch(
            HttpMethod.PUT,
            f"api/nsk/v1/users/{user_key}/person",
            body=data,
            failure="Failed to update user person",
        )
