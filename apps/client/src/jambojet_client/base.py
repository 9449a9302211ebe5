"""Base class shared by every service facade."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from jambojet_client.transport import TransportError
from jambojet_core.exceptions import ApiError
from jambojet_core.schemas import HttpMethod, RequestDescriptor

if TYPE_CHECKING:
    from jambojet_client.transport import Payload, Transport

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the shared transport and dispatches validated requests.

    Subclasses validate their input first and only then call
    :meth:`_dispatch`, so a payload that breaks a rule never reaches the
    transport.
    """

    #: Key under which the client facade registers the service.
    name: ClassVar[str] = ""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _dispatch(
        self,
        method: HttpMethod | str,
        path: str,
        *,
        body: Payload = None,
        query: dict[str, Any] | None = None,
        failure: str = "Request failed",
    ) -> Any:
        """Send a request through the transport.

        Any failure raised by the transport is re-raised as
        :class:`ApiError` prefixed with ``failure``; this is the only
        place where transport errors are converted.
        """
        request = RequestDescriptor(method=method, path=path, body=body, query=query)
        logger.debug("%s %s", request.method, request.path)
        try:
            return self._send(request)
        except ApiError:
            raise
        except TransportError as exc:
            raise ApiError(
                f"{failure}: {exc.message}",
                exc.status_code,
                cause=exc,
                context={"retry_after": exc.retry_after}
                if exc.retry_after is not None
                else None,
            ) from exc
        except Exception as exc:
            raise ApiError(f"{failure}: {exc}", 0, cause=exc) from exc

    def _send(self, request: RequestDescriptor) -> Any:
        transport = self._transport
        if request.method == HttpMethod.GET:
            return transport.get(request.path, request.query)
        if request.method == HttpMethod.DELETE:
            return transport.delete(request.path, request.query, request.body)
        verb = getattr(transport, request.method.lower())
        return verb(request.path, request.body)


def compact(params: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` values from a query mapping."""
    return {key: value for key, value in params.items() if value is not None}
