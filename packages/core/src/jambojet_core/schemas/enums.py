"""Closed vocabularies accepted by the booking platform.

Every enumerated request field is validated against one of these classes,
and validation messages list the allowed values straight from the class, so
the two cannot drift apart. Values are case-sensitive.
"""

from enum import IntEnum, StrEnum

# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class PassengerType(StrEnum):
    """Passenger type codes."""

    ADULT = "ADT"
    CHILD = "CHD"
    INFANT = "INF"
    INFANT_IN_SEAT = "INS"
    SENIOR = "SRC"
    YOUTH = "YTH"
    STUDENT = "STU"
    MILITARY = "MIL"


class CabinClass(StrEnum):
    ECONOMY = "Economy"
    PREMIUM = "Premium"
    BUSINESS = "Business"
    FIRST = "First"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------


class SearchType(StrEnum):
    """Trip shape of a full availability search."""

    ONE_WAY = "OneWay"
    ROUND_TRIP = "RoundTrip"
    MULTI_CITY = "MultiCity"
    OPEN_JAW = "OpenJaw"


class SsrCollectionsMode(StrEnum):
    NONE = "None"
    LEG = "Leg"


class TaxesAndFeesMode(StrEnum):
    NONE = "None"
    TAXES = "Taxes"
    TAXES_AND_FEES = "TaxesAndFees"


class DayOfWeek(StrEnum):
    NONE = "None"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class LoyaltyFilter(StrEnum):
    MONETARY_ONLY = "MonetaryOnly"
    POINTS_ONLY = "PointsOnly"
    POINTS_AND_MONETARY = "PointsAndMonetary"
    PRESERVE_CURRENT = "PreserveCurrent"


class Connections(StrEnum):
    NON_STOP = "NonStop"
    ONE_STOP = "OneStop"
    TWO_STOP = "TwoStop"
    ANY = "Any"


# ---------------------------------------------------------------------------
# Seats
# ---------------------------------------------------------------------------


class SeatType(StrEnum):
    WINDOW = "Window"
    MIDDLE = "Middle"
    AISLE = "Aisle"
    ANY = "Any"


class SeatCategory(StrEnum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    EXTRA_LEGROOM = "ExtraLegroom"
    PREFERRED = "Preferred"


class SeatMapFormat(StrEnum):
    STANDARD = "Standard"
    DETAILED = "Detailed"
    COMPACT = "Compact"


class SeatCharacteristic(StrEnum):
    WINDOW = "Window"
    AISLE = "Aisle"
    MIDDLE = "Middle"
    EXTRA_LEGROOM = "ExtraLegroom"
    PREMIUM = "Premium"
    BLOCKED = "Blocked"
    OCCUPIED = "Occupied"
    INFANT = "Infant"
    EMERGENCY = "Emergency"
    RESTRICTED = "Restricted"


class AutoAssignSeatType(StrEnum):
    """Seat preference used when the platform picks seats."""

    ANY = "Any"
    WINDOW = "Window"
    AISLE = "Aisle"
    MIDDLE = "Middle"
    EXTRA_LEGROOM = "ExtraLegroom"


# ---------------------------------------------------------------------------
# Add-ons
# ---------------------------------------------------------------------------


class CoverageType(StrEnum):
    TRIP = "Trip"
    MEDICAL = "Medical"
    CANCELLATION = "Cancellation"
    BAGGAGE = "Baggage"
    COMPREHENSIVE = "Comprehensive"


class PetType(StrEnum):
    DOG = "Dog"
    CAT = "Cat"
    BIRD = "Bird"
    RABBIT = "Rabbit"
    OTHER = "Other"


class ChargeType(StrEnum):
    FEE = "Fee"
    TAX = "Tax"
    SURCHARGE = "Surcharge"
    DISCOUNT = "Discount"
    CREDIT = "Credit"
    PENALTY = "Penalty"


class ChargeApplicability(StrEnum):
    PER_PERSON = "PerPerson"
    PER_BOOKING = "PerBooking"
    PER_SEGMENT = "PerSegment"
    PER_JOURNEY = "PerJourney"


class BaggageType(StrEnum):
    CHECKED = "Checked"
    CARRY_ON = "CarryOn"
    PERSONAL = "Personal"
    EXCESS = "Excess"
    OVERSIZE = "Oversize"
    SPORTS = "Sports"


# Maximum weight (kg) per piece for each baggage type.
BAGGAGE_MAX_WEIGHT: dict[BaggageType, float] = {
    BaggageType.CHECKED: 50,
    BaggageType.CARRY_ON: 10,
    BaggageType.PERSONAL: 5,
    BaggageType.EXCESS: 50,
    BaggageType.OVERSIZE: 50,
    BaggageType.SPORTS: 50,
}


class DimensionUnit(StrEnum):
    CENTIMETERS = "cm"
    INCHES = "in"


class SpecialHandling(StrEnum):
    FRAGILE = "Fragile"
    LIVE_ANIMALS = "LiveAnimals"
    PERISHABLE = "Perishable"
    VALUABLE = "Valuable"
    MEDICAL = "Medical"
    SPORTS = "Sports"
    MUSICAL = "Musical"
    OVERSIZED = "Oversized"
    HAZARDOUS = "Hazardous"
    DIPLOMATIC = "Diplomatic"


class ActivityCategory(StrEnum):
    ADVENTURE = "Adventure"
    CULTURAL = "Cultural"
    FOOD = "Food"
    ENTERTAINMENT = "Entertainment"
    SPORTS = "Sports"
    SIGHTSEEING = "Sightseeing"
    NATURE = "Nature"
    SHOPPING = "Shopping"
    RELAXATION = "Relaxation"
    EDUCATION = "Education"


class BookingAddOnType(StrEnum):
    ACTIVITIES = "activities"
    HOTELS = "hotels"
    INSURANCE = "insurance"
    CARS = "cars"
    LOUNGE = "lounge"
    MERCHANDISE = "merchandise"


class VendorType(StrEnum):
    HOTEL = "Hotel"
    CAR = "Car"
    ACTIVITY = "Activity"
    INSURANCE = "Insurance"
    TRANSFER = "Transfer"


class SsrCode(StrEnum):
    """Special service request codes known to the client.

    Unlike the other vocabularies this one is advisory: unknown codes that
    still have the four-letter shape are sent as-is.
    """

    VEGETARIAN_MEAL = "VGML"
    KOSHER_MEAL = "KSML"
    JAIN_MEAL = "JNML"
    ASIAN_VEGETARIAN_MEAL = "AVML"
    LACTO_OVO_MEAL = "VLML"
    HINDU_MEAL = "HNML"
    FRUIT_PLATTER = "FPML"
    DIABETIC_MEAL = "DBML"
    LOW_CALORIE_MEAL = "LCML"
    WHEELCHAIR_RAMP = "WCHR"
    WHEELCHAIR_STEPS = "WCHS"
    WHEELCHAIR_CABIN = "WCHC"
    BLIND = "BLND"
    DEAF = "DEAF"
    DISABLED_NEEDING_ASSISTANCE = "DPNA"
    UNACCOMPANIED_MINOR = "UMNR"
    PET_IN_CABIN = "PETC"
    ANIMAL_IN_HOLD = "AVIH"


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class HiddenOption(IntEnum):
    VISIBLE = 0
    HIDDEN = 1
    ALL = 2


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


class GoalState(StrEnum):
    BOOKING_COMPLETE = "BookingComplete"
    PAYMENT_COMPLETE = "PaymentComplete"
    PASSENGERS_COMPLETE = "PassengersComplete"
    ADD_ONS_COMPLETE = "AddOnsComplete"
    SEAT_SELECTION_COMPLETE = "SeatSelectionComplete"
    BAGGAGE_COMPLETE = "BaggageComplete"


class NavigationPriority(StrEnum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    CRITICAL = "Critical"


class ExecutionPriority(StrEnum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"


class NavigationUserType(StrEnum):
    CUSTOMER = "Customer"
    AGENT = "Agent"
    SYSTEM = "System"


class NavigationUserRole(StrEnum):
    CUSTOMER = "Customer"
    AGENT = "Agent"
    ADMINISTRATOR = "Administrator"


class ActionCategory(StrEnum):
    BOOKING = "Booking"
    PASSENGERS = "Passengers"
    PAYMENT = "Payment"
    ADD_ONS = "AddOns"
    SEATS = "Seats"
    BAGGAGE = "Baggage"
    LOYALTY = "Loyalty"
    NOTIFICATIONS = "Notifications"
    CANCELLATION = "Cancellation"


class ActionScope(StrEnum):
    REQUIRED = "Required"
    OPTIONAL = "Optional"
    RECOMMENDED = "Recommended"
    ALL = "All"


class ActionType(StrEnum):
    ADD_PASSENGER = "AddPassenger"
    REMOVE_PASSENGER = "RemovePassenger"
    UPDATE_PASSENGER = "UpdatePassenger"
    ADD_SEAT = "AddSeat"
    REMOVE_SEAT = "RemoveSeat"
    UPDATE_SEAT = "UpdateSeat"
    ADD_BAGGAGE = "AddBaggage"
    REMOVE_BAGGAGE = "RemoveBaggage"
    UPDATE_BAGGAGE = "UpdateBaggage"
    ADD_LOYALTY_PROGRAM = "AddLoyaltyProgram"
    REMOVE_LOYALTY_PROGRAM = "RemoveLoyaltyProgram"
    ADD_PAYMENT = "AddPayment"
    PROCESS_PAYMENT = "ProcessPayment"
    REFUND_PAYMENT = "RefundPayment"
    COMMIT_BOOKING = "CommitBooking"
    CANCEL_BOOKING = "CancelBooking"
    HOLD_BOOKING = "HoldBooking"
    PROCEED_TO_PAYMENT = "ProceedToPayment"
    SEND_CONFIRMATION = "SendConfirmation"
    GENERATE_TICKETS = "GenerateTickets"
    ADD_INSURANCE = "AddInsurance"
    ADD_ACTIVITY = "AddActivity"
    ADD_HOTEL = "AddHotel"
    ADD_CAR = "AddCar"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserStatus(StrEnum):
    ACTIVE = "Active"
    PENDING = "Pending"
    SUSPENDED = "Suspended"
    TERMINATED = "Terminated"


class UserType(StrEnum):
    CUSTOMER = "Customer"
    AGENT = "Agent"
    ADMINISTRATOR = "Administrator"
    SYSTEM = "System"


class AccountStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"
    LOCKED = "Locked"
    PENDING_VERIFICATION = "PendingVerification"
    CLOSED = "Closed"


class UserRole(StrEnum):
    CUSTOMER = "Customer"
    AGENT = "Agent"
    ADMIN = "Admin"
    SUPER_ADMIN = "SuperAdmin"
    MANAGER = "Manager"
    SUPPORT = "Support"
    FINANCE = "Finance"
    OPERATIONS = "Operations"
    MARKETING = "Marketing"


class RoleStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"


class Gender(StrEnum):
    M = "M"
    F = "F"
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    UNDISCLOSED = "Prefer not to say"


class Title(StrEnum):
    MR = "Mr"
    MRS = "Mrs"
    MS = "Ms"
    MISS = "Miss"
    DR = "Dr"
    PROF = "Prof"
    REV = "Rev"
    SIR = "Sir"
    MADAM = "Madam"


class ContactMethod(StrEnum):
    EMAIL = "Email"
    SMS = "SMS"
    PHONE = "Phone"
    PUSH = "Push"
    NONE = "None"


class PersonContactMethod(StrEnum):
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    SMS = "SMS"
    MAIL = "MAIL"


class ResetMethod(StrEnum):
    EMAIL = "Email"
    SMS = "SMS"
    ADMIN_RESET = "AdminReset"
    SECURITY_QUESTIONS = "SecurityQuestions"


class UserSortField(StrEnum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    CREATED_DATE = "createdDate"
    LAST_LOGIN_DATE = "lastLoginDate"


class AddressType(StrEnum):
    HOME = "HOME"
    WORK = "WORK"
    BILLING = "BILLING"
    MAILING = "MAILING"
    OTHER = "OTHER"


class TravelDocumentType(StrEnum):
    PASSPORT = "PASSPORT"
    NATIONAL_ID = "NATIONAL_ID"
    DRIVING_LICENSE = "DRIVING_LICENSE"
    MILITARY_ID = "MILITARY_ID"
    OTHER = "OTHER"
