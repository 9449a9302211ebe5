"""Single entry point bundling every service facade."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jambojet_client.config import settings as default_settings
from jambojet_client.services import (
    AddOnsService,
    AvailabilityService,
    BundleService,
    EquipmentService,
    MessageService,
    NavigationService,
    QueueService,
    SeatService,
    UserService,
)
from jambojet_client.transport import HttpxTransport

if TYPE_CHECKING:
    from jambojet_client.base import BaseService
    from jambojet_client.config import ClientSettings
    from jambojet_client.transport import Transport

logger = logging.getLogger(__name__)

API_VERSIONS: dict[str, str] = {
    "core": "v1",
    "authentication": "v1",
    "availability": "v4",
    "booking": "v3",
    "payment": "v6",
    "user": "v2",
    "account": "v1",
    "addons": "v2",
    "resources": "v1",
    "organization": "v1",
    "loyaltyprogram": "v1",
    "navigation": "v1",
    "seat": "v1",
    "bundle": "v1",
    "boardingpass": "v3",
}

DEFAULT_API_VERSION = "v1"

SERVICE_CLASSES: tuple[type[BaseService], ...] = (
    AvailabilityService,
    BundleService,
    SeatService,
    EquipmentService,
    MessageService,
    QueueService,
    AddOnsService,
    NavigationService,
    UserService,
)


def _normalise(name: str) -> str:
    return name.lower().replace("_", "").replace("-", "")


class JamboJetClient:
    """Holds one instance of each service, all sharing a single transport.

    Usage::

        with JamboJetClient() as client:
            client.availability().quick_search("NBO", "MBA", "2030-01-15")
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        settings: ClientSettings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._transport = transport or HttpxTransport(self._settings)
        self._services: dict[str, BaseService] = {
            cls.name: cls(self._transport) for cls in SERVICE_CLASSES
        }
        logger.debug(
            "Client ready for %s with %d services",
            self._settings.base_url,
            len(self._services),
        )

    # ------------------------------------------------------------------
    # Service accessors
    # ------------------------------------------------------------------

    def availability(self) -> AvailabilityService:
        return self._services[AvailabilityService.name]  # type: ignore[return-value]

    def bundle(self) -> BundleService:
        return self._services[BundleService.name]  # type: ignore[return-value]

    def seat(self) -> SeatService:
        return self._services[SeatService.name]  # type: ignore[return-value]

    def equipment(self) -> EquipmentService:
        return self._services[EquipmentService.name]  # type: ignore[return-value]

    def message(self) -> MessageService:
        return self._services[MessageService.name]  # type: ignore[return-value]

    def queue(self) -> QueueService:
        return self._services[QueueService.name]  # type: ignore[return-value]

    def add_ons(self) -> AddOnsService:
        return self._services[AddOnsService.name]  # type: ignore[return-value]

    def navigation(self) -> NavigationService:
        return self._services[NavigationService.name]  # type: ignore[return-value]

    def user(self) -> UserService:
        return self._services[UserService.name]  # type: ignore[return-value]

    def service(self, name: str) -> BaseService:
        """Look a service up by name; ``addons`` and ``add_ons`` both work."""
        wanted = _normalise(name)
        for key, service in self._services.items():
            if _normalise(key) == wanted:
                return service
        raise KeyError(f"Unknown service: {name}")

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    @staticmethod
    def get_api_version(module: str) -> str:
        return API_VERSIONS.get(module.lower(), DEFAULT_API_VERSION)

    @staticmethod
    def api_versions() -> dict[str, str]:
        return dict(API_VERSIONS)

    def available_services(self) -> list[str]:
        return list(self._services)

    def has_service(self, name: str) -> bool:
        wanted = _normalise(name)
        return any(_normalise(key) == wanted for key in self._services)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> JamboJetClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
