"""Service facades, one per functional area of the booking platform."""

from .add_ons import AddOnsService
from .availability import AvailabilityService
from .bundle import BundleService
from .equipment import EquipmentService
from .message import MessageService
from .navigation import NavigationService
from .queue import QueueService
from .seat import SeatService
from .user import UserService

__all__ = [
    "AddOnsService",
    "AvailabilityService",
    "BundleService",
    "EquipmentService",
    "MessageService",
    "NavigationService",
    "QueueService",
    "SeatService",
    "UserService",
]
