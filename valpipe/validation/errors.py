"""Keyed Validation Errors

A ``ValidationError`` pairs a pipe key with the ``AppError`` produced by the
first failing action. ``ValidationErrorList`` is what ``validate_all``
returns; ``join_errors`` folds any number of them into a single AppError.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, overload

from valpipe.core.errors import AppError, ErrorCode


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Failure of one pipe."""
    key: str
    error: AppError

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def cause(self) -> AppError:
        return self.error

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "msg": self.error.message}

    def __str__(self) -> str:
        return self.error.message


class ValidationErrorList:
    """Immutable, ordered collection of ValidationError."""

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[ValidationError] = ()):
        self._errors: tuple[ValidationError, ...] = tuple(errors)

    @overload
    def __getitem__(self, index: int) -> ValidationError: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ValidationError, ...]: ...

    def __getitem__(self, index):
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrorList):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationErrorList({list(self._errors)!r})"

    def keys(self) -> list[str]:
        return [e.key for e in self._errors]

    def by_key(self) -> dict[str, ValidationError]:
        return {e.key: e for e in self._errors}

    def to_list(self) -> list[dict[str, str]]:
        """Transport form: ``[{"key": ..., "msg": ...}, ...]``."""
        return [e.to_dict() for e in self._errors]

    def to_error(self) -> AppError | None:
        return join_errors(self._errors)


def unwrap_error(error: ValidationError | None) -> AppError | None:
    """Underlying AppError of a keyed error, None passes through."""
    if error is None:
        return None
    return error.error


def join_errors(errors: Iterable[ValidationError | None] | None) -> AppError | None:
    """Join messages with newlines into one AppError.

    ``None`` members are skipped. Returns None when nothing remains.
    """
    if errors is None:
        return None
    present = [e for e in errors if e is not None]
    if not present:
        return None
    return AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message="\n".join(e.message for e in present),
        metadata={
            "errors": [e.to_dict() for e in present],
            "error_count": len(present),
        },
    )
