"""Exception family raised by the JamboJet client.

Two kinds reach callers:

* :class:`ValidationError` is raised before any network attempt, when a
  payload or path key breaks a rule. Retrying without changing the input is
  pointless.
* :class:`ApiError` is raised after a network attempt failed or the remote
  system rejected the call.

Both derive from :class:`JamboJetError` but neither derives from the other,
so ``except ApiError`` never hides a local validation failure.
"""

from __future__ import annotations

from typing import Any


class JamboJetError(Exception):
    """Base class for every error raised by the client."""

    default_code = 0

    def __init__(self, message: str = "", code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else code

    def __str__(self) -> str:
        return self.message


class ValidationError(JamboJetError):
    """A request payload or path parameter failed a validation rule."""

    default_code = 400

    def __init__(
        self,
        message: str = "",
        code: int | None = None,
        errors: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code)
        self.errors: dict[str, Any] = errors or {}


class ApiError(JamboJetError):
    """The remote call failed or could not be completed."""

    def __init__(
        self,
        message: str = "",
        code: int | None = None,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code)
        self.cause = cause
        self.context: dict[str, Any] = context or {}
