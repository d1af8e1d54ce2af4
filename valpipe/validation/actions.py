"""Pipe Actions

An action is a single predicate over a typed value plus a policy for the
failure message. Actions are frozen dataclasses: the configuration
(bound, pattern, reference time, user predicate) is plain data and the
family's ``check`` method is its one dispatch function.

Features:
- ``run`` returns ``Ok(None)`` or ``Err(AppError)``, never raises
- Built-in description per family, overridable with ``message=``
- ``{VALUE}`` templates rendered against the failing value
- No logging and no I/O, so one action may be shared across pipes
"""
from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeVar

from valpipe.core.errors import AppError, Err, ErrorCode, Ok, Result, validation_error
from .messages import ErrorMessage, as_message

T = TypeVar("T")


class Action(ABC, Generic[T]):
    """Base class for pipe actions."""

    __slots__ = ()

    error_code: ClassVar[ErrorCode] = ErrorCode.E2005_CONSTRAINT_VIOLATION
    message: ErrorMessage | None

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", as_message(self.message))

    @abstractmethod
    def check(self, value: T) -> bool:
        """Return True when the value satisfies the action."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Short constraint label carried in error metadata."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Built-in failure message."""

    def run(self, value: T) -> Result[None, AppError]:
        try:
            passed = self.check(value)
        except Exception as e:
            return Err(self.failure(value, cause=e))
        if passed:
            return Ok(None)
        return Err(self.failure(value))

    def failure(self, value: T, *, cause: Exception | None = None) -> AppError:
        """Build the error reported when ``value`` is rejected."""
        text = self.message.render(value) if self.message is not None else self.description
        metadata: dict[str, Any] = {"constraint": self.constraint_name}
        if cause is not None:
            metadata["exception"] = str(cause)
        return validation_error(text, code=self.error_code, cause=cause, **metadata)

    def __call__(self, value: T) -> Result[None, AppError]:
        return self.run(value)


# ============================================================================
# Comparison
# ============================================================================

class Comparator(Enum):
    """Ordering relation between a value and a bound."""
    GT = (">", operator.gt, "value must be greater than specified value")
    GTE = (">=", operator.ge, "value must be greater than or equal to specified value")
    LT = ("<", operator.lt, "value must be less than specified value")
    LTE = ("<=", operator.le, "value must be less than or equal to specified value")
    EQ = ("==", operator.eq, "value must equal specified value")
    NE = ("!=", operator.ne, "value must not equal specified value")

    def __init__(self, symbol: str, fn: Callable[[Any, Any], bool], text: str):
        self.symbol, self.fn, self.text = symbol, fn, text

    @property
    def strict(self) -> bool:
        return self in (Comparator.GT, Comparator.LT)

    def apply(self, value: Any, bound: Any) -> bool:
        return bool(self.fn(value, bound))


@dataclass(frozen=True, slots=True)
class Compare(Action[T]):
    """Compare the value against a fixed bound."""
    op: Comparator
    bound: Any
    label: str | None = None
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2003_OUT_OF_RANGE

    @property
    def constraint_name(self) -> str:
        return f"{self.op.symbol}{self.bound}"

    @property
    def description(self) -> str:
        return self.label or self.op.text

    def check(self, value: T) -> bool:
        return self.op.apply(value, self.bound)


# ============================================================================
# Sign
# ============================================================================

class SignKind(Enum):
    POSITIVE = ("positive", "value must be positive")
    NEGATIVE = ("negative", "value must be negative")
    ZERO = ("zero", "value must be zero")
    NON_ZERO = ("non_zero", "value must not be zero")

    def __init__(self, constraint: str, text: str):
        self.constraint, self.text = constraint, text


@dataclass(frozen=True, slots=True)
class Sign(Action[T]):
    """Sign of a number. Positive and negative are strict: zero is neither."""
    kind: SignKind
    label: str | None = None
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2003_OUT_OF_RANGE

    @property
    def constraint_name(self) -> str:
        return self.kind.constraint

    @property
    def description(self) -> str:
        return self.label or self.kind.text

    def check(self, value: T) -> bool:
        match self.kind:
            case SignKind.POSITIVE:
                return value > 0
            case SignKind.NEGATIVE:
                return value < 0
            case SignKind.ZERO:
                return value == 0
            case SignKind.NON_ZERO:
                return value != 0
        return False


# ============================================================================
# Format (external checker)
# ============================================================================

@dataclass(frozen=True, slots=True)
class Format(Action[str]):
    """Delegate to a stateless ``(str) -> bool`` checker."""
    checker: Callable[[str], bool]
    name: str
    label: str | None = None
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2002_INVALID_FORMAT

    @property
    def constraint_name(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.label or f"not a valid {self.name}"

    def check(self, value: str) -> bool:
        return bool(self.checker(value))


# ============================================================================
# Custom
# ============================================================================

@dataclass(frozen=True, slots=True)
class Custom(Action[T]):
    """Wrap a caller-supplied predicate.

    Usage:
        even = Custom(lambda n: n % 2 == 0, type_name="integer", message="must be even")
    """
    predicate: Callable[[T], bool]
    type_name: str = "value"
    message: ErrorMessage | str | None = None

    error_code: ClassVar[ErrorCode] = ErrorCode.E2000_VALIDATION_GENERIC

    @property
    def constraint_name(self) -> str:
        return getattr(self.predicate, "__name__", "custom")

    @property
    def description(self) -> str:
        return f"invalid {self.type_name}"

    def check(self, value: T) -> bool:
        return bool(self.predicate(value))
