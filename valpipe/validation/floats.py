"""Float actions.

Bounds are coerced to float so that ``floats.gt(1)`` and ``floats.gt(1.0)``
build equal actions.
"""
from __future__ import annotations

from typing import Callable

from .actions import Comparator, Compare, Custom, Sign, SignKind
from .messages import ErrorMessage

Message = ErrorMessage | str | None


def gt(bound: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.GT, float(bound), message=message)


def gte(bound: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.GTE, float(bound), message=message)


def lt(bound: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.LT, float(bound), message=message)


def lte(bound: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.LTE, float(bound), message=message)


def min_value(minimum: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.GTE, float(minimum), label="value must be at least specified minimum", message=message)


def max_value(maximum: float, *, message: Message = None) -> Compare[float]:
    return Compare(Comparator.LTE, float(maximum), label="value exceeds maximum", message=message)


def is_positive(*, message: Message = None) -> Sign[float]:
    """Strictly greater than zero; ``0.0`` and ``-0.0`` are rejected."""
    return Sign(SignKind.POSITIVE, message=message)


def is_negative(*, message: Message = None) -> Sign[float]:
    return Sign(SignKind.NEGATIVE, message=message)


def custom(predicate: Callable[[float], bool], *, message: Message = None) -> Custom[float]:
    return Custom(predicate, type_name="float", message=message)
