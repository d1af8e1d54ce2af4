"""Validation pipes.

Key components:
- Actions: frozen predicate + message objects (``strings``, ``ints``, ``floats``, ``times``)
- Pipes: one typed value and its ordered actions
- Schema: keyed pipes, fail-fast ``validate`` or concurrent ``validate_all``
- Parser: decode JSON into a ``RuleModel`` and validate it
"""
from . import floats, ints, strings, times
from .actions import Action, Comparator, Compare, Custom, Format, Sign, SignKind
from .errors import ValidationError, ValidationErrorList, join_errors, unwrap_error
from .messages import VALUE_PLACEHOLDER, ErrorMessage, format_value
from .parser import (
    PRE_CHECK_KEY,
    FailureKind,
    ParseFailure,
    RuleModel,
    parse,
    validate_model,
    validate_model_all,
)
from .pipe import Entry, FloatPipe, IntPipe, Pipe, StringPipe, TimePipe
from .schema import Schema

__all__ = [
    # Action modules
    "strings",
    "ints",
    "floats",
    "times",
    # Actions
    "Action",
    "Comparator",
    "Compare",
    "Custom",
    "Format",
    "Sign",
    "SignKind",
    # Messages
    "ErrorMessage",
    "VALUE_PLACEHOLDER",
    "format_value",
    # Pipes
    "Pipe",
    "StringPipe",
    "IntPipe",
    "FloatPipe",
    "TimePipe",
    "Entry",
    # Schema
    "Schema",
    # Errors
    "ValidationError",
    "ValidationErrorList",
    "join_errors",
    "unwrap_error",
    # Parser
    "RuleModel",
    "PRE_CHECK_KEY",
    "FailureKind",
    "ParseFailure",
    "parse",
    "validate_model",
    "validate_model_all",
]
