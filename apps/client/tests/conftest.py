"""Shared fixtures for the client tests.

No test here touches the network: services run against a recording
transport, and the HTTPX transport is exercised through
``httpx.MockTransport``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

import pytest

from jambojet_client.client import JamboJetClient
from jambojet_client.transport import Payload, Transport, TransportError


@dataclass
class Call:
    method: str
    path: str
    query: dict[str, Any] | None = None
    body: Any = None


@dataclass
class SpyTransport(Transport):
    """Records every call and answers with a fixed response."""

    response: Any = field(default_factory=lambda: {"success": True, "data": {}})
    error: Exception | None = None
    calls: list[Call] = field(default_factory=list)
    closed: bool = False

    def _record(self, call: Call) -> Any:
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, path: str, query: dict[str, Any] | None = None) -> Any:
        return self._record(Call("GET", path, query=query))

    def post(self, path: str, body: Payload = None) -> Any:
        return self._record(Call("POST", path, body=body))

    def put(self, path: str, body: Payload = None) -> Any:
        return self._record(Call("PUT", path, body=body))

    def patch(self, path: str, body: Payload = None) -> Any:
        return self._record(Call("PATCH", path, body=body))

    def delete(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: Payload = None,
    ) -> Any:
        return self._record(Call("DELETE", path, query=query, body=body))

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> Call:
        assert self.calls, "no request was dispatched"
        return self.calls[-1]


# ---------------------------------------------------------------------------
# Transport and client
# ---------------------------------------------------------------------------


@pytest.fixture
def spy() -> SpyTransport:
    return SpyTransport()


@pytest.fixture
def failing_transport() -> SpyTransport:
    """Transport that fails every call with a 503."""
    return SpyTransport(error=TransportError("Service unavailable", 503))


@pytest.fixture
def client(spy: SpyTransport) -> JamboJetClient:
    return JamboJetClient(spy)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


@pytest.fixture
def future_date() -> date:
    """Return a date ~30 days from now (avoids past-date errors)."""
    return date.today() + timedelta(days=30)


@pytest.fixture
def future_iso(future_date: date) -> str:
    return future_date.isoformat()


@pytest.fixture
def past_iso() -> str:
    return (date.today() - timedelta(days=3)).isoformat()


# ---------------------------------------------------------------------------
# Payload factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_simple_search(future_iso: str):
    """Factory fixture for simple availability search criteria."""

    def _make(**overrides: Any) -> dict[str, Any]:
        criteria: dict[str, Any] = {
            "origin": "NBO",
            "destination": "MBA",
            "beginDate": future_iso,
            "passengers": [{"type": "ADT", "count": 1}],
        }
        criteria.update(overrides)
        return criteria

    return _make


@pytest.fixture
def make_trip_search(future_iso: str):
    """Factory fixture for full (trip-by-trip) availability searches."""

    def _make(
        origin: str = "NBO",
        destination: str = "MBA",
        begin_date: str | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "passengers": {"types": [{"type": "ADT", "count": 2}]},
            "criteria": [
                {
                    "stations": {
                        "departureStation": origin,
                        "arrivalStation": destination,
                    },
                    "dates": {"beginDate": begin_date or future_iso},
                }
            ],
        }
        request.update(overrides)
        return request

    return _make


@pytest.fixture
def make_user():
    """Factory fixture for user-create payloads."""

    def _make(username: str = "jane.doe@jambojet.com", **overrides: Any) -> dict[str, Any]:
        user: dict[str, Any] = {
            "username": username,
            "password": "Safari2030",
            "personalInfo": {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane.doe@jambojet.com",
                "dateOfBirth": "1990-05-17",
            },
        }
        user.update(overrides)
        return user

    return _make
