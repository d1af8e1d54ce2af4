"""Time Actions

Temporal families over ``datetime`` values.

Comparisons follow Python's datetime semantics: aware values compare by
instant, and ordering a naive value against an aware bound raises
``TypeError``, which the action reports as a failure. Calendar actions read
year/month/day fields in each value's own zone.

Relative actions (``before_now``, ``after_now``, ``old_of``, ``new_of``)
take an injectable ``clock``: a callable with the signature of
``datetime.now``. It is called with the value's ``tzinfo`` so that the
current time is read in the value's zone (naive for naive values).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Callable

from .actions import Action, Comparator, Compare, Custom
from .messages import ErrorMessage

Message = ErrorMessage | str | None
Clock = Callable[[tzinfo | None], datetime]

MIN_OFFSET_SECONDS = -12 * 3600
MAX_OFFSET_SECONDS = 14 * 3600


# ============================================================================
# Families
# ============================================================================

@dataclass(frozen=True, slots=True)
class Between(Action[datetime]):
    """Exclusive on both ends."""
    start: datetime
    end: datetime
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"between={self.start.isoformat()}..{self.end.isoformat()}"

    @property
    def description(self) -> str:
        return f"time must be between {self.start} and {self.end}"

    def check(self, value: datetime) -> bool:
        return self.start < value < self.end


class Direction(Enum):
    PAST = "past"
    FUTURE = "future"


@dataclass(frozen=True, slots=True)
class Relative(Action[datetime]):
    """Compare against the clock shifted by ``days``.

    A day is 24 elapsed hours (a ``timedelta``), not a calendar day, so the
    window does not stretch or shrink across a DST change.
    """
    direction: Direction
    days: int
    label: str
    clock: Clock = datetime.now
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"{self.direction.value}+{self.days}d"

    @property
    def description(self) -> str:
        return self.label

    def check(self, value: datetime) -> bool:
        now = self.clock(value.tzinfo)
        if self.direction is Direction.PAST:
            return value < now - timedelta(days=self.days)
        return value > now + timedelta(days=self.days)


class CalendarUnit(Enum):
    DAY = ("day", "on the same day as")
    WEEK = ("week", "in the same week as")
    MONTH = ("month", "in the same month as")
    YEAR = ("year", "in the same year as")

    def __init__(self, constraint: str, text: str):
        self.constraint, self.text = constraint, text

    def fields(self, value: datetime) -> tuple[int, ...]:
        match self:
            case CalendarUnit.DAY:
                return value.year, value.month, value.day
            case CalendarUnit.WEEK:
                iso = value.isocalendar()
                return iso[0], iso[1]
            case CalendarUnit.MONTH:
                return value.year, value.month
        return (value.year,)


@dataclass(frozen=True, slots=True)
class SameCalendar(Action[datetime]):
    unit: CalendarUnit
    reference: datetime
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return f"same_{self.unit.constraint}"

    @property
    def description(self) -> str:
        return f"time must be {self.unit.text} {self.reference}"

    def check(self, value: datetime) -> bool:
        return self.unit.fields(value) == self.unit.fields(self.reference)


@dataclass(frozen=True, slots=True)
class Weekday(Action[datetime]):
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return "weekday"

    @property
    def description(self) -> str:
        return "time must fall on a weekday (Monday-Friday)"

    def check(self, value: datetime) -> bool:
        return value.weekday() < 5


@dataclass(frozen=True, slots=True)
class NotZero(Action[datetime]):
    """Reject ``datetime.min``, the zero value of the type."""
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return "not_zero"

    @property
    def description(self) -> str:
        return "time cannot be zero value"

    def check(self, value: datetime) -> bool:
        return value.replace(tzinfo=None) != datetime.min


@dataclass(frozen=True, slots=True)
class ValidTimezone(Action[datetime]):
    """UTC offset within [-12:00, +14:00]. Naive values count as UTC."""
    message: ErrorMessage | str | None = None

    @property
    def constraint_name(self) -> str:
        return "timezone"

    @property
    def description(self) -> str:
        return "time has invalid timezone offset"

    def check(self, value: datetime) -> bool:
        offset = value.utcoffset()
        if offset is None:
            return True
        return MIN_OFFSET_SECONDS <= offset.total_seconds() <= MAX_OFFSET_SECONDS


# ============================================================================
# Factories
# ============================================================================

def before(bound: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.LT, bound, label=f"time must be before {bound}", message=message)


def after(bound: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.GT, bound, label=f"time must be after {bound}", message=message)


def between(start: datetime, end: datetime, *, message: Message = None) -> Between:
    return Between(start, end, message=message)


def min_date(minimum: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.GTE, minimum, label=f"time must be on or after {minimum}", message=message)


def max_date(maximum: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.LTE, maximum, label=f"time must be on or before {maximum}", message=message)


def equal(target: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.EQ, target, label=f"time must equal {target}", message=message)


def not_equal(target: datetime, *, message: Message = None) -> Compare[datetime]:
    return Compare(Comparator.NE, target, label=f"time must not equal {target}", message=message)


def before_now(*, clock: Clock = datetime.now, message: Message = None) -> Relative:
    return Relative(Direction.PAST, 0, "time must be in the past", clock=clock, message=message)


def after_now(*, clock: Clock = datetime.now, message: Message = None) -> Relative:
    return Relative(Direction.FUTURE, 0, "time must be in the future", clock=clock, message=message)


def old_of(days: int, *, clock: Clock = datetime.now, message: Message = None) -> Relative:
    """At least ``days`` days before now. Days are 24-hour periods; negative counts are treated as 0."""
    days = max(days, 0)
    return Relative(Direction.PAST, days, f"time must be at least {days} days old", clock=clock, message=message)


def new_of(days: int, *, clock: Clock = datetime.now, message: Message = None) -> Relative:
    """At least ``days`` days after now. Days are 24-hour periods; negative counts are treated as 0."""
    days = max(days, 0)
    return Relative(
        Direction.FUTURE, days, f"time must be at least {days} days in the future", clock=clock, message=message
    )


def same_day(reference: datetime, *, message: Message = None) -> SameCalendar:
    return SameCalendar(CalendarUnit.DAY, reference, message=message)


def same_week(reference: datetime, *, message: Message = None) -> SameCalendar:
    """ISO 8601 week: Monday start, week-numbering year."""
    return SameCalendar(CalendarUnit.WEEK, reference, message=message)


def same_month(reference: datetime, *, message: Message = None) -> SameCalendar:
    return SameCalendar(CalendarUnit.MONTH, reference, message=message)


def same_year(reference: datetime, *, message: Message = None) -> SameCalendar:
    return SameCalendar(CalendarUnit.YEAR, reference, message=message)


def is_weekday(*, message: Message = None) -> Weekday:
    return Weekday(message=message)


def not_zero(*, message: Message = None) -> NotZero:
    return NotZero(message=message)


def valid_timezone(*, message: Message = None) -> ValidTimezone:
    return ValidTimezone(message=message)


def custom(predicate: Callable[[datetime], bool], *, message: Message = None) -> Custom[datetime]:
    return Custom(predicate, type_name="time", message=message)
