"""Field rule primitives.

Every primitive takes a payload mapping plus a field name and either returns
quietly or raises :class:`~jambojet_core.exceptions.ValidationError`. A field
that is absent (or ``None``) passes every primitive except
:func:`require_fields`: optional fields are only checked when present.

The same primitives back the small declarative layer at the bottom of the
module (:class:`FieldRule` / :class:`RuleSet`), used for request shapes that
are flat enough to describe as a list of rules.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field as dc_field
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jambojet_core.exceptions import ValidationError
from jambojet_core.schemas import PassengerType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_EMAIL = TypeAdapter(EmailStr)

# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def is_empty(value: Any) -> bool:
    """``None``, blank strings and empty collections count as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Decimal)):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_date(value: Any) -> date | None:
    """Return the calendar date of a date or ISO date-time string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    if _DATE_RE.match(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


def parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def is_past_date(value: Any) -> bool:
    """True when ``value`` falls on a day before today."""
    parsed = parse_date(value)
    return parsed is not None and parsed < date.today()


def allowed_values(allowed: type[enum.Enum] | Iterable[Any]) -> list[Any]:
    """Render a vocabulary as the list of its raw values."""
    if isinstance(allowed, type) and issubclass(allowed, enum.Enum):
        return [member.value for member in allowed]
    return list(allowed)


# ---------------------------------------------------------------------------
# Format catalog
# ---------------------------------------------------------------------------


def _matches(regex: str) -> Callable[[Any], bool]:
    compiled = re.compile(regex)
    return lambda value: isinstance(value, str) and compiled.fullmatch(value) is not None


def _is_date(value: Any) -> bool:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_datetime(value: Any) -> bool:
    return parse_datetime(value) is not None


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        _EMAIL.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _is_passenger_type(value: Any) -> bool:
    return isinstance(value, str) and value in allowed_values(PassengerType)


@dataclass(frozen=True)
class Format:
    """A named format: a predicate plus what the caller should have sent."""

    check: Callable[[Any], bool]
    expected: str


FORMATS: dict[str, Format] = {
    "date": Format(_is_date, "a date in YYYY-MM-DD format"),
    "datetime": Format(_is_datetime, "an ISO 8601 date-time"),
    "email": Format(_is_email, "a valid email address"),
    "airport_code": Format(_matches(r"[A-Z]{3}"), "a 3-letter IATA airport code"),
    "country_code": Format(_matches(r"[A-Z]{2}"), "a 2-letter ISO country code"),
    "currency_code": Format(_matches(r"[A-Z]{3}"), "a 3-letter ISO currency code"),
    "passenger_type": Format(
        _is_passenger_type,
        "one of: " + ", ".join(allowed_values(PassengerType)),
    ),
    "phone": Format(
        _matches(r"\+?[0-9\s\-()]+"), "a phone number such as +254 700 123456"
    ),
    "record_locator": Format(
        _matches(r"[A-Z0-9]{6}"), "a 6-character alphanumeric record locator"
    ),
    "positive_number": Format(
        lambda value: is_number(value) and value > 0, "a number greater than 0"
    ),
    "non_negative_number": Format(
        lambda value: is_number(value) and value >= 0, "a number of at least 0"
    ),
}

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def require_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Fail when any of ``fields`` is absent or empty."""
    missing = [name for name in fields if is_empty(payload.get(name))]
    if missing:
        raise ValidationError(
            "Missing required parameters: " + ", ".join(missing),
            errors={"missing_fields": missing},
        )


def match_format(
    payload: Mapping[str, Any],
    field: str,
    format_name: str,
    label: str | None = None,
) -> None:
    """Check ``field`` against a named entry of :data:`FORMATS`."""
    fmt = FORMATS[format_name]
    value = payload.get(field)
    if is_empty(value):
        return
    if not fmt.check(value):
        raise ValidationError(
            f"Invalid {label or field} format. Expected {fmt.expected}",
            errors={"format_errors": {field: format_name}},
        )


def numeric_range(
    payload: Mapping[str, Any],
    field: str,
    minimum: float | None = None,
    maximum: float | None = None,
    label: str | None = None,
) -> None:
    value = payload.get(field)
    if value is None:
        return
    name = label or field
    if not is_number(value):
        raise ValidationError(f"{name} must be a number")
    if (minimum is not None and value < minimum) or (
        maximum is not None and value > maximum
    ):
        if minimum is not None and maximum is not None:
            message = f"{name} must be between {minimum} and {maximum}"
        elif minimum is not None:
            message = f"{name} must be at least {minimum}"
        else:
            message = f"{name} cannot exceed {maximum}"
        raise ValidationError(message, errors={"range_errors": {field: value}})


def string_length(
    payload: Mapping[str, Any],
    field: str,
    minimum: int | None = None,
    maximum: int | None = None,
    label: str | None = None,
) -> None:
    value = payload.get(field)
    if value is None:
        return
    name = label or field
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    if minimum is not None and len(value) < minimum:
        raise ValidationError(
            f"{name} must be at least {minimum} characters long",
            errors={"length_errors": {field: len(value)}},
        )
    if maximum is not None and len(value) > maximum:
        raise ValidationError(
            f"{name} cannot exceed {maximum} characters",
            errors={"length_errors": {field: len(value)}},
        )


def enum_member(
    value: Any, allowed: type[enum.Enum] | Iterable[Any], label: str = "value"
) -> None:
    """Fail unless ``value`` is one of ``allowed`` (exact, case-sensitive)."""
    options = allowed_values(allowed)
    if isinstance(value, bool) or value not in options:
        raise ValidationError(
            f"Invalid {label}. Expected one of: " + ", ".join(str(o) for o in options),
            errors={"allowed_values": options},
        )


def enum_field(
    payload: Mapping[str, Any],
    field: str,
    allowed: type[enum.Enum] | Iterable[Any],
    label: str | None = None,
) -> None:
    value = payload.get(field)
    if value is not None:
        enum_member(value, allowed, label or field)


def enum_items(
    values: Any, allowed: type[enum.Enum] | Iterable[Any], label: str
) -> None:
    """Every element of ``values`` must be one of ``allowed``."""
    if not isinstance(values, list):
        raise ValidationError(f"{label} must be an array")
    options = allowed_values(allowed)
    for index, value in enumerate(values):
        if isinstance(value, bool) or value not in options:
            raise ValidationError(
                f"Invalid {label} at index {index}. Expected one of: "
                + ", ".join(str(o) for o in options)
            )


def boolean_type(
    payload: Mapping[str, Any], field: str, label: str | None = None
) -> None:
    value = payload.get(field)
    if value is not None and not isinstance(value, bool):
        raise ValidationError(f"{label or field} must be a boolean value")


def booleans(payload: Mapping[str, Any], *fields: str) -> None:
    for name in fields:
        boolean_type(payload, name)


def match_pattern(
    payload: Mapping[str, Any], field: str, regex: str, message: str
) -> None:
    value = payload.get(field)
    if value is None:
        return
    if not isinstance(value, str) or re.fullmatch(regex, value) is None:
        raise ValidationError(message)


# ---------------------------------------------------------------------------
# Structural helpers
# ---------------------------------------------------------------------------


def require_mapping(value: Any, label: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(f"{label} must be an object")
    return value


def require_list(
    value: Any, label: str, empty_message: str | None = None
) -> list[Any]:
    """Return ``value`` when it is a list; reject empty lists if asked."""
    if not isinstance(value, list):
        raise ValidationError(f"{label} must be an array")
    if empty_message is not None and not value:
        raise ValidationError(empty_message)
    return value


def non_empty_key(
    value: Any,
    label: str,
    min_length: int | None = None,
    empty_message: str | None = None,
) -> None:
    """Validate a path parameter before it is interpolated into a URL."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(empty_message or f"{label} cannot be empty")
    if min_length is not None and len(value) < min_length:
        raise ValidationError(f"Invalid {label.lower()} format")


def api_version(version: int, allowed: Sequence[int]) -> None:
    if isinstance(version, bool) or version not in allowed:
        raise ValidationError(
            f"Invalid API version: {version}. Allowed versions: "
            + ", ".join(str(v) for v in allowed)
        )


# ---------------------------------------------------------------------------
# Declarative rule sets
# ---------------------------------------------------------------------------


class RuleKind(enum.StrEnum):
    REQUIRED = "required"
    FORMAT = "format"
    RANGE = "range"
    LENGTH = "length"
    ENUM = "enum"
    BOOLEAN = "boolean"
    PATTERN = "pattern"
    CUSTOM = "custom"
    NESTED = "nested"


@dataclass(frozen=True)
class FieldRule:
    """A single constraint on one field of a payload."""

    field: str
    kind: RuleKind
    check: Callable[[Mapping[str, Any]], None] = dc_field(repr=False, compare=False)

    def apply(self, payload: Mapping[str, Any]) -> None:
        self.check(payload)


@dataclass(frozen=True)
class RuleSet:
    """Ordered field rules followed by cross-field rules; first failure wins."""

    rules: tuple[FieldRule, ...] = ()
    cross: tuple[Callable[[Mapping[str, Any]], None], ...] = ()

    def validate(self, payload: Mapping[str, Any]) -> None:
        for rule in self.rules:
            rule.apply(payload)
        for check in self.cross:
            check(payload)

    __call__ = validate


def rules(*field_rules: FieldRule, cross: Sequence[Callable[..., None]] = ()) -> RuleSet:
    return RuleSet(tuple(field_rules), tuple(cross))


def required(*fields: str) -> FieldRule:
    return FieldRule(
        ", ".join(fields), RuleKind.REQUIRED, lambda p: require_fields(p, fields)
    )


def fmt(field: str, format_name: str, label: str | None = None) -> FieldRule:
    if format_name not in FORMATS:
        raise KeyError(format_name)
    return FieldRule(
        field, RuleKind.FORMAT, lambda p: match_format(p, field, format_name, label)
    )


def in_range(
    field: str,
    minimum: float | None = None,
    maximum: float | None = None,
    label: str | None = None,
) -> FieldRule:
    return FieldRule(
        field,
        RuleKind.RANGE,
        lambda p: numeric_range(p, field, minimum, maximum, label),
    )


def length(
    field: str,
    minimum: int | None = None,
    maximum: int | None = None,
    label: str | None = None,
) -> FieldRule:
    return FieldRule(
        field,
        RuleKind.LENGTH,
        lambda p: string_length(p, field, minimum, maximum, label),
    )


def one_of(
    field: str, allowed: type[enum.Enum] | Iterable[Any], label: str | None = None
) -> FieldRule:
    options = allowed_values(allowed)
    return FieldRule(
        field, RuleKind.ENUM, lambda p: enum_field(p, field, options, label)
    )


def boolean(field: str, label: str | None = None) -> FieldRule:
    return FieldRule(field, RuleKind.BOOLEAN, lambda p: boolean_type(p, field, label))


def pattern(field: str, regex: str, message: str) -> FieldRule:
    return FieldRule(
        field, RuleKind.PATTERN, lambda p: match_pattern(p, field, regex, message)
    )


def custom(field: str, predicate: Callable[[Any], bool], message: str) -> FieldRule:
    """Rule backed by an arbitrary predicate over the field value."""

    def check(payload: Mapping[str, Any]) -> None:
        value = payload.get(field)
        if value is not None and not predicate(value):
            raise ValidationError(message)

    return FieldRule(field, RuleKind.CUSTOM, check)


def nested(field: str, ruleset: RuleSet, label: str | None = None) -> FieldRule:
    """Apply ``ruleset`` to the mapping stored under ``field``."""

    def check(payload: Mapping[str, Any]) -> None:
        value = payload.get(field)
        if value is not None:
            ruleset.validate(require_mapping(value, label or field))

    return FieldRule(field, RuleKind.NESTED, check)
