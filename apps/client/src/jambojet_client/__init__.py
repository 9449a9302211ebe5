"""Python client for the JamboJet booking platform REST API."""

from jambojet_client.client import JamboJetClient
from jambojet_core.exceptions import ApiError, JamboJetError, ValidationError

__all__ = ["ApiError", "JamboJetClient", "JamboJetError", "ValidationError"]
