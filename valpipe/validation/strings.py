"""String Actions

Text length, pattern and containment families, plus factories that wire the
``valpipe.checks`` catalog into format actions.

Usage:
    from valpipe.validation import StringPipe, strings

    pipe = StringPipe(
        email,
        strings.not_empty(message="email is required"),
        strings.is_email(),
        strings.max_length(254),
    )
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar

from valpipe import checks
from valpipe.core.errors import ErrorCode
from .actions import Action, Custom, Format
from .messages import ErrorMessage

Message = ErrorMessage | str | None


# ============================================================================
# Families
# ============================================================================

@dataclass(frozen=True, slots=True)
class NotEmpty(Action[str]):
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2001_REQUIRED_FIELD_MISSING

    @property
    def constraint_name(self) -> str:
        return "not_empty"

    @property
    def description(self) -> str:
        return "cannot be empty"

    def check(self, value: str) -> bool:
        return value != ""


@dataclass(frozen=True, slots=True)
class Length(Action[str]):
    """Length bounds in code points, both inclusive. ``None`` means unbounded."""
    min_length: int | None = None
    max_length: int | None = None
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2003_OUT_OF_RANGE

    @property
    def constraint_name(self) -> str:
        if self.max_length is None:
            return f"min_length={self.min_length}"
        if self.min_length is None:
            return f"max_length={self.max_length}"
        return f"length={self.min_length}..{self.max_length}"

    @property
    def description(self) -> str:
        if self.max_length is None:
            return "string length must be at least specified minimum"
        if self.min_length is None:
            return "string length exceeds maximum"
        return f"string length must be between {self.min_length} and {self.max_length}"

    def check(self, value: str) -> bool:
        size = len(value)
        if self.min_length is not None and size < self.min_length:
            return False
        if self.max_length is not None and size > self.max_length:
            return False
        return True


@dataclass(frozen=True, slots=True)
class Pattern(Action[str]):
    """Regex search against the value. Anchor the expression for a full match."""
    regex: re.Pattern[str]
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2002_INVALID_FORMAT

    @property
    def constraint_name(self) -> str:
        return f"pattern={self.regex.pattern}"

    @property
    def description(self) -> str:
        return f"string doesn't follow the pattern {self.regex.pattern}"

    def check(self, value: str) -> bool:
        return self.regex.search(value) is not None


@dataclass(frozen=True, slots=True)
class OneOf(Action[str]):
    allowed: frozenset[str]
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"one_of={sorted(self.allowed)}"

    @property
    def description(self) -> str:
        return "value is not allowed"

    def check(self, value: str) -> bool:
        return value in self.allowed


class AffixKind(Enum):
    PREFIX = ("prefix", "must start with")
    SUFFIX = ("suffix", "must end with")
    CONTAINS = ("contains", "must contain")

    def __init__(self, constraint: str, text: str):
        self.constraint, self.text = constraint, text


@dataclass(frozen=True, slots=True)
class Affix(Action[str]):
    kind: AffixKind
    needle: str
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"{self.kind.constraint}={self.needle}"

    @property
    def description(self) -> str:
        return f"{self.kind.text} {self.needle}"

    def check(self, value: str) -> bool:
        match self.kind:
            case AffixKind.PREFIX:
                return value.startswith(self.needle)
            case AffixKind.SUFFIX:
                return value.endswith(self.needle)
        return self.needle in value


@dataclass(frozen=True, slots=True)
class EqualFold(Action[str]):
    """Unicode case-insensitive equality (``str.casefold``)."""
    target: str
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"equal_fold={self.target}"

    @property
    def description(self) -> str:
        return f"must be equal to {self.target} (case-insensitive)"

    def check(self, value: str) -> bool:
        return value.casefold() == self.target.casefold()


# ============================================================================
# Length, pattern and containment factories
# ============================================================================

def not_empty(*, message: Message = None) -> NotEmpty:
    return NotEmpty(message=message)


def min_length(minimum: int, *, message: Message = None) -> Length:
    return Length(min_length=minimum, message=message)


def max_length(maximum: int, *, message: Message = None) -> Length:
    return Length(max_length=maximum, message=message)


def length_between(minimum: int, maximum: int, *, message: Message = None) -> Length:
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
    return Length(min_length=minimum, max_length=maximum, message=message)


def pattern(expression: str | re.Pattern[str], *, message: Message = None) -> Pattern:
    """Compile ``expression`` once; ``re.error`` surfaces at construction."""
    return Pattern(re.compile(expression), message=message)


def one_of(*allowed: str, message: Message = None) -> OneOf:
    return OneOf(frozenset(allowed), message=message)


def has_prefix(prefix: str, *, message: Message = None) -> Affix:
    return Affix(AffixKind.PREFIX, prefix, message=message)


def has_suffix(suffix: str, *, message: Message = None) -> Affix:
    return Affix(AffixKind.SUFFIX, suffix, message=message)


def contains(substring: str, *, message: Message = None) -> Affix:
    return Affix(AffixKind.CONTAINS, substring, message=message)


def equal_fold(target: str, *, message: Message = None) -> EqualFold:
    return EqualFold(target, message=message)


def custom(predicate: Callable[[str], bool], *, message: Message = None) -> Custom[str]:
    return Custom(predicate, type_name="string", message=message)


# ============================================================================
# Format factories
# ============================================================================

def format_check(checker: Callable[[str], bool], description: str, *, message: Message = None) -> Format:
    """Wrap any ``(str) -> bool`` checker as a format action.

    ``description`` is the built-in failure message.
    """
    name = getattr(checker, "__name__", "format")
    return Format(checker, name.removeprefix("is_"), label=description, message=message)


def _format(checker: Callable[[str], bool], name: str, description: str) -> Callable[..., Format]:
    def factory(*, message: Message = None) -> Format:
        return Format(checker, name, label=description, message=message)

    factory.__name__ = f"is_{name}"
    factory.__doc__ = f"Reject values that fail ``checks.{checker.__name__}``."
    return factory


is_email = _format(checks.is_email, "email", "not a valid email")
is_url = _format(checks.is_url, "url", "not a valid URL")
is_uuid = _format(checks.is_uuid, "uuid", "not a valid UUID")
is_uuid_v1 = _format(checks.is_uuid_v1, "uuid_v1", "not a valid UUIDv1")
is_uuid_v3 = _format(checks.is_uuid_v3, "uuid_v3", "not a valid UUIDv3")
is_uuid_v4 = _format(checks.is_uuid_v4, "uuid_v4", "not a valid UUIDv4")
is_uuid_v5 = _format(checks.is_uuid_v5, "uuid_v5", "not a valid UUIDv5")
is_ipv4 = _format(checks.is_ipv4, "ipv4", "not a valid IPv4 address")
is_ipv6 = _format(checks.is_ipv6, "ipv6", "not a valid IPv6 address")
is_port = _format(checks.is_port, "port", "not a valid port number")
is_json = _format(checks.is_json, "json", "not a valid JSON string")
is_xml = _format(checks.is_xml, "xml", "not a valid XML string")
is_html = _format(checks.is_html, "html", "not a valid HTML string")
is_base32 = _format(checks.is_base32, "base32", "not a valid base32 string")
is_base58 = _format(checks.is_base58, "base58", "not a valid base58 string")
is_base64 = _format(checks.is_base64, "base64", "not a valid base64 string")
is_hexadecimal = _format(checks.is_hexadecimal, "hexadecimal", "not a valid hexadecimal string")
is_hex_color = _format(checks.is_hex_color, "hex_color", "not a valid hex color")
is_rgb = _format(checks.is_rgb, "rgb", "not a valid RGB color")
is_hsl = _format(checks.is_hsl, "hsl", "not a valid HSL color")
is_alpha = _format(checks.is_alpha, "alpha", "must contain only alphabetic characters")
is_alphanumeric = _format(checks.is_alphanumeric, "alphanumeric", "must contain only alphanumeric characters")
is_ascii = _format(checks.is_ascii, "ascii", "must contain only ASCII characters")
is_decimal = _format(checks.is_decimal, "decimal", "not a valid decimal number")
is_credit_card = _format(checks.is_credit_card, "credit_card", "not a valid credit card number")
is_date = _format(checks.is_date, "date", "not a valid date")
is_data_uri = _format(checks.is_data_uri, "data_uri", "not a valid data URI")
is_evm_address = _format(checks.is_evm_address, "evm_address", "not a valid EVM address")
is_bitcoin_address = _format(checks.is_bitcoin_address, "bitcoin_address", "not a valid Bitcoin address")
is_ulid = _format(checks.is_ulid, "ulid", "not a valid ULID")
is_path = _format(checks.is_path, "path", "not a valid path")

# Time layouts
is_ansic = _format(checks.is_ansic, "ansic", "not a valid ANSIC time")
is_unix_date = _format(checks.is_unix_date, "unix_date", "not a valid UnixDate time")
is_ruby_date = _format(checks.is_ruby_date, "ruby_date", "not a valid RubyDate time")
is_rfc822 = _format(checks.is_rfc822, "rfc822", "not a valid RFC822 time")
is_rfc822z = _format(checks.is_rfc822z, "rfc822z", "not a valid RFC822Z time")
is_rfc850 = _format(checks.is_rfc850, "rfc850", "not a valid RFC850 time")
is_rfc1123 = _format(checks.is_rfc1123, "rfc1123", "not a valid RFC1123 time")
is_rfc1123z = _format(checks.is_rfc1123z, "rfc1123z", "not a valid RFC1123Z time")
is_rfc3339 = _format(checks.is_rfc3339, "rfc3339", "not a valid RFC3339 time")
is_rfc3339_nano = _format(checks.is_rfc3339_nano, "rfc3339_nano", "not a valid RFC3339Nano time")
is_kitchen = _format(checks.is_kitchen, "kitchen", "not a valid Kitchen time")
is_stamp = _format(checks.is_stamp, "stamp", "not a valid Stamp time")
is_stamp_milli = _format(checks.is_stamp_milli, "stamp_milli", "not a valid StampMilli time")
is_stamp_micro = _format(checks.is_stamp_micro, "stamp_micro", "not a valid StampMicro time")
is_stamp_nano = _format(checks.is_stamp_nano, "stamp_nano", "not a valid StampNano time")
is_date_time = _format(checks.is_date_time, "date_time", "not a valid DateTime")
is_time_only = _format(checks.is_time_only, "time_only", "not a valid TimeOnly")
