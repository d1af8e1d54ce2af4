"""Builders for the AppErrors produced by the validation layer."""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata: Any,
) -> AppError:
    """Rejected value. ``field`` is recorded only when given."""
    if field is not None:
        metadata["field"] = field
    return AppError(code, message, ErrorContext(origin=origin), metadata, cause)


def invalid_json(message: str, *, origin: str = "", cause: Exception | None = None, **metadata: Any) -> AppError:
    """Input could not be decoded into the target model."""
    return AppError(ErrorCode.E2021_INVALID_JSON, message, ErrorContext(origin=origin), metadata, cause)


def precondition_failed(
    message: str, *, origin: str = "", cause: Exception | None = None, **metadata: Any
) -> AppError:
    """A model's ``rules()`` raised before any pipe ran."""
    return AppError(ErrorCode.E5003_PRECONDITION_FAILED, message, ErrorContext(origin=origin), metadata, cause)
