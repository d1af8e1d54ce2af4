"""Typed Validation Pipes

A pipe owns one value and an ordered, immutable tuple of actions. It
validates by running the actions in order and stopping at the first
failure, so at most one error is reported per pipe.

Pipes are not mutated by validation; the same pipe may be validated from
several threads at once. The key is assigned once, by ``Schema.from_map``
or ``Entry``, before any validation happens.

Usage:
    from valpipe.validation import Entry, IntPipe, StringPipe, ints, strings

    age = IntPipe(15, ints.min_value(18))
    age.validate()                         # ValidationError(key="", ...)

    name = Entry("name").string("", strings.not_empty())
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from valpipe.core.errors import Err
from .actions import Action
from .errors import ValidationError
from .messages import ErrorMessage

T = TypeVar("T")


class Pipe(Generic[T]):
    """Base pipe. Subclasses fix the accepted value type."""

    __slots__ = ("_key", "_value", "_actions")

    type_name: ClassVar[str] = "value"

    def __init__(self, value: T, *actions: Action[T] | ErrorMessage):
        self._value: T = self._accept(value)
        self._actions: tuple[Action[T] | ErrorMessage, ...] = tuple(actions)
        self._key = ""

    @classmethod
    def _accept(cls, value: Any) -> T:
        return value

    @classmethod
    def _reject(cls, value: Any) -> TypeError:
        return TypeError(f"{cls.__name__} expects {cls.type_name}, got {type(value).__name__}")

    @property
    def key(self) -> str:
        """Assigned key, empty when unassigned."""
        return self._key

    @property
    def value(self) -> T:
        return self._value

    @property
    def actions(self) -> tuple[Action[T] | ErrorMessage, ...]:
        return self._actions

    def _set_key(self, key: str) -> None:
        self._key = key

    def validate(self) -> ValidationError | None:
        """Run actions in order; report the first failure only."""
        for action in self._actions:
            match action.run(self._value):
                case Err(error):
                    return ValidationError(key=self._key, error=error)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, value={self._value!r}, actions={len(self._actions)})"


class StringPipe(Pipe[str]):
    __slots__ = ()
    type_name = "str"

    @classmethod
    def _accept(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise cls._reject(value)
        return value


class IntPipe(Pipe[int]):
    __slots__ = ()
    type_name = "int"

    @classmethod
    def _accept(cls, value: Any) -> int:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise cls._reject(value)
        return int(value)


class FloatPipe(Pipe[float]):
    __slots__ = ()
    type_name = "float"

    @classmethod
    def _accept(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise cls._reject(value)
        return float(value)


class TimePipe(Pipe[datetime]):
    __slots__ = ()
    type_name = "datetime"

    @classmethod
    def _accept(cls, value: Any) -> datetime:
        if not isinstance(value, datetime):
            raise cls._reject(value)
        return value


class Entry:
    """Builds pipes that carry their key from the start.

    Usage:
        Schema(
            Entry("email").string(email, strings.is_email()),
            Entry("age").int(age, ints.min_value(18)),
        )
    """

    __slots__ = ("key",)

    def __init__(self, key: str):
        self.key = key

    def _keyed(self, pipe: Pipe[T]) -> Pipe[T]:
        pipe._set_key(self.key)
        return pipe

    def string(self, value: str, *actions: Action[str] | ErrorMessage) -> StringPipe:
        return self._keyed(StringPipe(value, *actions))

    def int(self, value: int, *actions: Action[int] | ErrorMessage) -> IntPipe:
        return self._keyed(IntPipe(value, *actions))

    def float(self, value: float, *actions: Action[float] | ErrorMessage) -> FloatPipe:
        return self._keyed(FloatPipe(value, *actions))

    def time(self, value: datetime, *actions: Action[datetime] | ErrorMessage) -> TimePipe:
        return self._keyed(TimePipe(value, *actions))
