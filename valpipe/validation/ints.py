"""Integer actions.

Usage:
    from valpipe.validation import ints

    IntPipe(age, ints.min_value(18, message="must be at least 18, but is {VALUE}"))
"""
from __future__ import annotations

from typing import Callable

from .actions import Comparator, Compare, Custom, Sign, SignKind
from .messages import ErrorMessage

Message = ErrorMessage | str | None


def gt(bound: int, *, message: Message = None) -> Compare[int]:
    return Compare(Comparator.GT, bound, message=message)


def gte(bound: int, *, message: Message = None) -> Compare[int]:
    return Compare(Comparator.GTE, bound, message=message)


def lt(bound: int, *, message: Message = None) -> Compare[int]:
    return Compare(Comparator.LT, bound, message=message)


def lte(bound: int, *, message: Message = None) -> Compare[int]:
    return Compare(Comparator.LTE, bound, message=message)


def min_value(minimum: int, *, message: Message = None) -> Compare[int]:
    """Inclusive lower bound."""
    return Compare(Comparator.GTE, minimum, label="value must be at least specified minimum", message=message)


def max_value(maximum: int, *, message: Message = None) -> Compare[int]:
    """Inclusive upper bound."""
    return Compare(Comparator.LTE, maximum, label="value exceeds maximum", message=message)


def is_positive(*, message: Message = None) -> Sign[int]:
    return Sign(SignKind.POSITIVE, message=message)


def is_negative(*, message: Message = None) -> Sign[int]:
    return Sign(SignKind.NEGATIVE, message=message)


def is_zero(*, message: Message = None) -> Sign[int]:
    return Sign(SignKind.ZERO, message=message)


def non_zero(*, message: Message = None) -> Sign[int]:
    return Sign(SignKind.NON_ZERO, message=message)


def custom(predicate: Callable[[int], bool], *, message: Message = None) -> Custom[int]:
    return Custom(predicate, type_name="integer", message=message)
