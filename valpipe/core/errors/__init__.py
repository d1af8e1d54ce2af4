"""Error values for valpipe.

- Result[T, E]: ``Ok`` or ``Err``
- AppError: code, message, metadata and tracing context
- ErrorCode: numbered taxonomy with a category
- Builders for the errors the validation layer produces
"""
from .builders import invalid_json, precondition_failed, validation_error
from .types import (
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
    from_exception,
    try_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "try_result",
    "validation_error",
    "invalid_json",
    "precondition_failed",
]
