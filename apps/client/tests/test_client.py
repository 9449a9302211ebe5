"""Tests for the client facade and the command-line entry point."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from jambojet_client import cli as cli_module
from jambojet_client.client import API_VERSIONS, JamboJetClient
from jambojet_client.config import ClientSettings
from jambojet_client.services import AddOnsService, SeatService
from jambojet_client.transport import HttpxTransport, TransportError


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


def test_services_share_one_transport(client, spy):
    assert client.transport is spy
    assert client.seat()._transport is spy
    assert client.user()._transport is spy


def test_accessors_return_cached_instances(client):
    assert client.availability() is client.availability()
    assert isinstance(client.seat(), SeatService)


def test_available_services(client):
    assert client.available_services() == [
        "availability",
        "bundle",
        "seat",
        "equipment",
        "message",
        "queue",
        "add_ons",
        "navigation",
        "user",
    ]


@pytest.mark.parametrize("name", ["add_ons", "addons", "AddOns", "add-ons"])
def test_service_lookup_is_lenient(client, name):
    assert isinstance(client.service(name), AddOnsService)
    assert client.has_service(name)


def test_unknown_service(client):
    assert not client.has_service("payments")
    with pytest.raises(KeyError, match="Unknown service: payments"):
        client.service("payments")


def test_api_versions():
    assert JamboJetClient.get_api_version("availability") == "v4"
    assert JamboJetClient.get_api_version("Payment") == "v6"
    assert JamboJetClient.get_api_version("unknown") == "v1"
    versions = JamboJetClient.api_versions()
    versions["availability"] = "v9"
    assert API_VERSIONS["availability"] == "v4"


def test_default_transport_uses_settings():
    settings = ClientSettings(base_url="https://jambojet.test/api/", subscription_key="k")
    client = JamboJetClient(settings=settings)
    assert isinstance(client.transport, HttpxTransport)
    assert client.base_url == "https://jambojet.test/api/"
    client.close()


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("JAMBOJET_BASE_URL", "https://jmprod.example/")
    monkeypatch.setenv("JAMBOJET_RETRY_ATTEMPTS", "5")
    settings = ClientSettings()
    assert settings.base_url == "https://jmprod.example/"
    assert settings.retry_attempts == 5


def test_context_manager_closes_transport(spy):
    with JamboJetClient(spy) as client:
        client.seat()
    assert spy.closed


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_spy(monkeypatch, spy):
    """Route the CLI's client through the recording transport."""
    monkeypatch.setattr(cli_module, "JamboJetClient", lambda: JamboJetClient(spy))
    return spy


def test_cli_quick_search(runner, cli_spy, future_iso):
    cli_spy.response = {"success": True, "data": {"trips": [{"journeys": []}]}}
    result = runner.invoke(
        cli_module.cli,
        ["quick-search", "nbo", "mba", future_iso, "--adults", "2", "--infants", "1"],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == cli_spy.response
    assert cli_spy.last.path == "api/nsk/v4/availability/search/simple"
    assert cli_spy.last.body["origin"] == "NBO"
    assert cli_spy.last.body["passengers"] == [
        {"type": "ADT", "count": 2},
        {"type": "INF", "count": 1},
    ]


def test_cli_invalid_search_exits_2(runner, cli_spy, future_iso):
    result = runner.invoke(cli_module.cli, ["quick-search", "NBO", "NBO", future_iso])
    assert result.exit_code == 2
    assert "Invalid search: Origin and destination cannot be the same" in result.output
    assert cli_spy.calls == []
    assert cli_spy.closed


def test_cli_api_failure_exits_1(runner, cli_spy, future_iso):
    cli_spy.error = TransportError("API request failed with status 500", 500)
    result = runner.invoke(cli_module.cli, ["quick-search", "NBO", "MBA", future_iso])
    assert result.exit_code == 1
    assert "Simple availability search failed" in result.output


def test_cli_versions(runner):
    result = runner.invoke(cli_module.cli, ["versions"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == len(API_VERSIONS)
    assert lines[0].split() == ["core", "v1"]


def test_cli_services(runner, cli_spy):
    result = runner.invoke(cli_module.cli, ["services"])
    assert result.exit_code == 0
    assert "add_ons" in result.output.splitlines()
