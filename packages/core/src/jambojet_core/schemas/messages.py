"""Typed request bodies for the booking message endpoints.

The models only shape the payload; the rules on it live in the client's
message validators so a bad value is reported with the same wording whether
the caller passes a model or a plain mapping.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .enums import HiddenOption


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Wire representation: camelCase keys, unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MessageCreateRequest(_CamelModel):
    type_code: str | None = None
    information: str | None = None
    body: str | None = None

    @classmethod
    def with_type(cls, type_code: str) -> MessageCreateRequest:
        return cls(type_code=type_code)


class MessageSearchRequest(_CamelModel):
    message_key: str | None = None
    type_code: str | None = None
    hidden_options: int | None = None
    page_size: int | None = None
    page_number: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    @classmethod
    def by_key(cls, message_key: str) -> MessageSearchRequest:
        return cls(message_key=message_key)

    @classmethod
    def by_type(cls, type_code: str) -> MessageSearchRequest:
        return cls(type_code=type_code)

    def with_pagination(self, page_size: int, page_number: int = 1) -> MessageSearchRequest:
        return self.model_copy(update={"page_size": page_size, "page_number": page_number})

    def with_sorting(self, sort_by: str, sort_order: str = "asc") -> MessageSearchRequest:
        return self.model_copy(update={"sort_by": sort_by, "sort_order": sort_order})

    def show_all(self) -> MessageSearchRequest:
        return self.model_copy(update={"hidden_options": HiddenOption.ALL.value})


class TeletypeMessageRequest(_CamelModel):
    from_address: str
    to_address: str
    body: str

    @classmethod
    def send(cls, sender: str, recipient: str, body: str) -> TeletypeMessageRequest:
        return cls(from_address=sender, to_address=recipient, body=body)
