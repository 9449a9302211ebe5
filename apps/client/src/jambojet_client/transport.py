"""HTTP transport for the booking platform REST API.

Service facades only see the :class:`Transport` interface: five verb methods
taking an already-resolved path and returning decoded data. The default
implementation, :class:`HttpxTransport`, owns everything network related:
authentication headers, timeouts, retries with exponential backoff and the
mapping of HTTP failures onto :class:`TransportError`.
"""

from __future__ import annotations

import abc
import logging
import time
import uuid
from typing import TYPE_CHECKING, Any

import httpx

from jambojet_client.config import settings as default_settings
from jambojet_client.retry import retry
from jambojet_core.schemas import ApiResponse, ResponseMeta

if TYPE_CHECKING:
    from collections.abc import Callable

    from jambojet_client.config import ClientSettings

logger = logging.getLogger(__name__)

Payload = dict[str, Any] | list[Any] | None


class Transport(abc.ABC):
    """Verb operations the services dispatch through."""

    @abc.abstractmethod
    def get(self, path: str, query: dict[str, Any] | None = None) -> Any:
        """Fetch ``path`` with optional query parameters."""

    @abc.abstractmethod
    def post(self, path: str, body: Payload = None) -> Any:
        """Send ``body`` to ``path`` as JSON."""

    @abc.abstractmethod
    def put(self, path: str, body: Payload = None) -> Any:
        """Replace the resource at ``path``."""

    @abc.abstractmethod
    def patch(self, path: str, body: Payload = None) -> Any:
        """Partially update the resource at ``path``."""

    @abc.abstractmethod
    def delete(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: Payload = None,
    ) -> Any:
        """Delete the resource at ``path``; some endpoints take a body."""

    def close(self) -> None:
        """Release any held resources."""


class TransportError(Exception):
    """A call could not be completed or the platform returned a failure."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        payload: Any = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload
        self.retry_after = retry_after

    @property
    def retryable(self) -> bool:
        """Network failures and 5xx responses are worth another attempt."""
        return self.status_code == 0 or self.status_code >= 500


class HttpxTransport(Transport):
    """Blocking transport built on ``httpx.Client``."""

    def __init__(
        self,
        config: ClientSettings | None = None,
        *,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = config or default_settings
        self._http = client
        self._access_token: str | None = self._settings.access_token or None
        self._send = retry(
            max_retries=max(self._settings.retry_attempts - 1, 0),
            base_delay=self._settings.retry_base_delay,
            max_delay=self._settings.retry_max_delay,
            exceptions=(TransportError,),
            should_retry=lambda exc: getattr(exc, "retryable", False),
            sleep=sleep,
        )(self._send_once)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(self, path: str, query: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._send("GET", path, params=query)

    def post(self, path: str, body: Payload = None) -> dict[str, Any]:
        return self._send("POST", path, json=body)

    def put(self, path: str, body: Payload = None) -> dict[str, Any]:
        return self._send("PUT", path, json=body)

    def patch(self, path: str, body: Payload = None) -> dict[str, Any]:
        return self._send("PATCH", path, json=body)

    def delete(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: Payload = None,
    ) -> dict[str, Any]:
        return self._send("DELETE", path, params=query, json=body)

    # ------------------------------------------------------------------
    # Token handling
    # ------------------------------------------------------------------

    def set_access_token(self, token: str) -> None:
        self._access_token = token

    def clear_access_token(self) -> None:
        self._access_token = None

    @property
    def has_access_token(self) -> bool:
        return bool(self._access_token)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Shut down the underlying HTTPX client."""
        if self._http is not None and not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_http(self) -> httpx.Client:
        if self._http is None or self._http.is_closed:
            self._http = httpx.Client(
                base_url=self._settings.base_url,
                timeout=httpx.Timeout(self._settings.timeout, connect=10),
            )
        return self._http

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._settings.subscription_key:
            headers["Ocp-Apim-Subscription-Key"] = self._settings.subscription_key
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def _send_once(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Payload = None,
    ) -> dict[str, Any]:
        http = self._ensure_http()
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        if self._settings.log_requests:
            logger.debug("%s %s params=%s", method, path, params)

        try:
            resp = http.request(
                method, path, params=params or None, json=json, headers=self._headers()
            )
        except httpx.TransportError as exc:
            raise TransportError(f"Network error calling {path}: {exc}") from exc

        if resp.is_success:
            return self._envelope(resp, path)
        raise self._error_for(resp, path)

    def _envelope(self, resp: httpx.Response, path: str) -> dict[str, Any]:
        data = self._decode(resp, path) if resp.content else None
        if self._settings.log_requests:
            logger.debug("%s returned %d", path, resp.status_code)
        return ApiResponse(
            data=data,
            meta=ResponseMeta(
                endpoint=path,
                status_code=resp.status_code,
                request_id=resp.headers.get("X-Request-ID") or uuid.uuid4().hex,
            ),
        ).model_dump(mode="json")

    @staticmethod
    def _decode(resp: httpx.Response, path: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"Invalid JSON response from {path}",
                status_code=resp.status_code,
            ) from exc

    def _error_for(self, resp: httpx.Response, path: str) -> TransportError:
        status = resp.status_code
        try:
            payload = resp.json() if resp.content else {}
        except ValueError:
            payload = {"message": resp.text}
        remote_message = payload.get("message") if isinstance(payload, dict) else None

        logger.error("Booking platform error on %s: HTTP %d", path, status)

        if status == 401:
            return TransportError(
                remote_message or "Authentication failed", status, payload
            )
        if status == 400:
            return TransportError(remote_message or "Validation failed", status, payload)
        if status == 429:
            raw = resp.headers.get("Retry-After", "60")
            retry_after = int(raw) if raw.isdigit() else 60
            return TransportError(
                f"Rate limit exceeded. Retry after {retry_after} seconds.",
                status,
                payload,
                retry_after=retry_after,
            )
        return TransportError(
            remote_message or f"API request failed with status {status}",
            status,
            payload,
        )
