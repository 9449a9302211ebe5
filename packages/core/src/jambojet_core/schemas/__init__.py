"""Core schemas for the JamboJet client."""

from .enums import (
    BAGGAGE_MAX_WEIGHT,
    AccountStatus,
    ActionCategory,
    ActionScope,
    ActionType,
    ActivityCategory,
    AddressType,
    AutoAssignSeatType,
    BaggageType,
    BookingAddOnType,
    CabinClass,
    ChargeApplicability,
    ChargeType,
    Connections,
    ContactMethod,
    CoverageType,
    DayOfWeek,
    DimensionUnit,
    ExecutionPriority,
    Gender,
    GoalState,
    HiddenOption,
    LoyaltyFilter,
    NavigationPriority,
    NavigationUserRole,
    NavigationUserType,
    PassengerType,
    PersonContactMethod,
    PetType,
    ResetMethod,
    RoleStatus,
    SearchType,
    SeatCategory,
    SeatCharacteristic,
    SeatMapFormat,
    SeatType,
    SortOrder,
    SpecialHandling,
    SsrCode,
    SsrCollectionsMode,
    TaxesAndFeesMode,
    Title,
    TravelDocumentType,
    UserRole,
    UserSortField,
    UserStatus,
    UserType,
    VendorType,
)
from .messages import MessageCreateRequest, MessageSearchRequest, TeletypeMessageRequest
from .requests import ApiResponse, HttpMethod, RequestDescriptor, ResponseMeta

__all__ = [
    "BAGGAGE_MAX_WEIGHT",
    "AccountStatus",
    "ActionCategory",
    "ActionScope",
    "ActionType",
    "ActivityCategory",
    "AddressType",
    "ApiResponse",
    "AutoAssignSeatType",
    "BaggageType",
    "BookingAddOnType",
    "CabinClass",
    "ChargeApplicability",
    "ChargeType",
    "Connections",
    "ContactMethod",
    "CoverageType",
    "DayOfWeek",
    "DimensionUnit",
    "ExecutionPriority",
    "Gender",
    "GoalState",
    "HiddenOption",
    "HttpMethod",
    "LoyaltyFilter",
    "MessageCreateRequest",
    "MessageSearchRequest",
    "NavigationPriority",
    "NavigationUserRole",
    "NavigationUserType",
    "PassengerType",
    "PersonContactMethod",
    "PetType",
    "RequestDescriptor",
    "ResetMethod",
    "ResponseMeta",
    "RoleStatus",
    "SearchType",
    "SeatCategory",
    "SeatCharacteristic",
    "SeatMapFormat",
    "SeatType",
    "SortOrder",
    "SpecialHandling",
    "SsrCode",
    "SsrCollectionsMode",
    "TaxesAndFeesMode",
    "TeletypeMessageRequest",
    "Title",
    "TravelDocumentType",
    "UserRole",
    "UserSortField",
    "UserStatus",
    "UserType",
    "VendorType",
]
