"""Tests for booking messages, teletype traffic and the request models."""

from __future__ import annotations

import pytest

from jambojet_client.validation import message as validators
from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import (
    MessageCreateRequest,
    MessageSearchRequest,
    TeletypeMessageRequest,
)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


def test_create_request_payload_is_camel_case():
    request = MessageCreateRequest(type_code="NOTE", body="Gate change")
    assert request.to_payload() == {"typeCode": "NOTE", "body": "Gate change"}


def test_search_request_builders():
    request = MessageSearchRequest.by_type("NOTE").with_pagination(25, 2).show_all()
    assert request.to_payload() == {
        "typeCode": "NOTE",
        "hiddenOptions": 2,
        "pageSize": 25,
        "pageNumber": 2,
    }


def test_search_request_sorting_defaults_to_asc():
    payload = MessageSearchRequest().with_sorting("createdDate").to_payload()
    assert payload == {"sortBy": "createdDate", "sortOrder": "asc"}


def test_teletype_request():
    request = TeletypeMessageRequest.send("NBOKKJM", "MBAKKJM", "PNR UPDATED")
    assert request.to_payload() == {
        "fromAddress": "NBOKKJM",
        "toAddress": "MBAKKJM",
        "body": "PNR UPDATED",
    }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def test_create_needs_some_content():
    with pytest.raises(ValidationError, match="At least one of typeCode, information, or body"):
        validators.validate_message_create({})


def test_create_body_length():
    with pytest.raises(ValidationError, match="body cannot exceed 5000 characters"):
        validators.validate_message_create({"body": "x" * 5001})


@pytest.mark.parametrize(
    ("criteria", "message"),
    [
        ({"hiddenOptions": 3}, "Hidden options must be"),
        ({"pageSize": 0}, "Page size must be at least 1"),
        ({"pageNumber": 0}, "Page number must be at least 1"),
        ({"sortOrder": "up"}, "Sort order must be"),
    ],
)
def test_search_rejected(criteria, message):
    with pytest.raises(ValidationError, match=message):
        validators.validate_message_search(criteria)


def test_search_sort_order_ignores_case():
    validators.validate_message_search({"sortOrder": "DESC", "hiddenOptions": 0})


def test_teletype_address_length():
    with pytest.raises(ValidationError, match="From address must be 7-8 characters long"):
        validators.validate_teletype({"fromAddress": "NBO", "toAddress": "MBAKKJM", "body": "x"})


def test_message_key_limits():
    with pytest.raises(ValidationError, match="Message key cannot be empty"):
        validators.validate_message_key("")
    with pytest.raises(ValidationError, match="cannot exceed 100 characters"):
        validators.validate_message_key("k" * 101)
    with pytest.raises(ValidationError, match="Message keys array cannot be empty"):
        validators.validate_message_keys([])


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


def test_create_message_accepts_model(client, spy):
    client.message().create_message(MessageCreateRequest.with_type("NOTE"))
    assert (spy.last.method, spy.last.path) == ("POST", "api/nsk/v1/messages")
    assert spy.last.body == {"typeCode": "NOTE"}


def test_get_messages_uses_v2_query(client, spy):
    client.message().get_messages(MessageSearchRequest.by_key("MSG1"))
    assert spy.last.path == "api/nsk/v2/messages"
    assert spy.last.query == {"messageKey": "MSG1"}


def test_delete_messages_sends_keys_as_body(client, spy):
    client.message().delete_messages(["MSG1", "MSG2"])
    assert spy.last.method == "DELETE"
    assert spy.last.path == "api/nsk/v1/messages"
    assert spy.last.body == ["MSG1", "MSG2"]


def test_teletype_message_path(client, spy):
    client.message().send_teletype_message(
        {"fromAddress": "NBOKKJM", "toAddress": "MBAKKJM", "body": "PNR UPDATED"}
    )
    assert spy.last.path == "api/nsk/v1/messages/teletype"
