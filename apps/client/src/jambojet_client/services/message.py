"""Booking messages and teletype traffic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from jambojet_client.base import BaseService
from jambojet_client.validation import message as validators
from jambojet_core.schemas import (
    HttpMethod,
    MessageCreateRequest,
    MessageSearchRequest,
    TeletypeMessageRequest,
)


def _payload(request: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(request, BaseModel):
        return request.to_payload()
    return request


class MessageService(BaseService):
    """Messages attached to the booking in state.

    Request bodies may be passed as plain mappings or as the typed request
    models from :mod:`jambojet_core.schemas`; both go through the same rules.
    """

    name = "message"

    def create_message(self, request: MessageCreateRequest | dict[str, Any]) -> Any:
        body = _payload(request)
        validators.validate_message_create(body)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/messages",
            body=body,
            failure="Failed to create message",
        )

    def get_messages(
        self, criteria: MessageSearchRequest | dict[str, Any] | None = None
    ) -> Any:
        params = _payload(criteria) if criteria is not None else {}
        validators.validate_message_search(params)
        return self._dispatch(
            HttpMethod.GET,
            "api/nsk/v2/messages",
            query=params,
            failure="Failed to get messages",
        )

    def get_message(self, message_key: str) -> Any:
        validators.validate_message_key(message_key)
        return self._dispatch(
            HttpMethod.GET,
            f"api/nsk/v1/messages/{message_key}",
            failure="Failed to get message",
        )

    def delete_message(self, message_key: str) -> Any:
        validators.validate_message_key(message_key)
        return self._dispatch(
            HttpMethod.DELETE,
            f"api/nsk/v1/messages/{message_key}",
            failure="Failed to delete message",
        )

    def delete_messages(self, message_keys: list[str]) -> Any:
        """Delete several messages in one call; the keys travel in the body."""
        validators.validate_message_keys(message_keys)
        return self._dispatch(
            HttpMethod.DELETE,
            "api/nsk/v1/messages",
            body=message_keys,
            failure="Failed to delete messages",
        )

    def send_teletype_message(
        self, request: TeletypeMessageRequest | dict[str, Any]
    ) -> Any:
        body = _payload(request)
        validators.validate_teletype(body)
        return self._dispatch(
            HttpMethod.POST,
            "api/nsk/v1/messages/teletype",
            body=body,
            failure="Failed to send teletype message",
        )
