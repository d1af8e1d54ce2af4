"""Result and AppError

Actions, pipes, schemas and the parser report failure as data: an
``Err`` wrapping an ``AppError`` (or a keyed wrapper around one). Nothing
on a public entry point raises for a rejected value.

    match strings.not_empty().run(value):
        case Ok(_):
            ...
        case Err(error):
            print(error.code.name, error.message)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ErrorCode(Enum):
    """Numbered error codes.

    2xxx  rejected values and malformed input
    5xxx  rule construction failed before validation could start
    9xxx  unexpected failures
    """
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005
    E2021_INVALID_JSON = 2021

    E5003_PRECONDITION_FAILED = 5003

    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        match self.value // 1000:
            case 2:
                return "validation"
            case 5:
                return "precondition"
        return "internal"


def _short_id() -> str:
    return uuid4().hex[:8]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was raised."""
    correlation_id: str = field(default_factory=_short_id)
    timestamp: datetime = field(default_factory=_utcnow)
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Typed error value.

    ``metadata`` holds structured detail: actions always set
    ``constraint``; joined errors set ``errors`` and ``error_count``.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def with_metadata(self, **kwargs: Any) -> AppError:
        """Copy with extra metadata merged in."""
        return AppError(self.code, self.message, self.context, {**self.metadata, **kwargs}, self.cause)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "category": self.code.category,
                "message": self.message,
                "origin": self.context.origin,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return self.message


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"unwrap called on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata: Any,
) -> Err[AppError]:
    """Wrap an exception as ``Err(AppError)``, keeping it as the cause."""
    error = AppError(code, message or str(exc), ErrorContext(origin=origin), metadata, exc)
    return Err(error)


def try_result(
    f: Callable[[], T],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Call ``f`` and return its value as Ok, or the exception as Err."""
    try:
        return Ok(f())
    except Exception as e:
        return from_exception(e, code=code, origin=origin)
