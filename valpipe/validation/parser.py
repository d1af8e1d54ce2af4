"""Decode-then-validate

A record is a pydantic model whose ``rules()`` builds a Schema over its own
fields. ``parse`` decodes JSON into the record, then runs the schema with
``validate_all``. Decode failures short-circuit: rules never run against a
partially decoded record.

Usage:
    class Signup(RuleModel):
        email: str
        age: int

        def rules(self) -> Schema:
            return Schema.from_map({
                "email": StringPipe(self.email, strings.is_email()),
                "age": IntPipe(self.age, ints.min_value(18)),
            })

    match parse(Signup, request_body):
        case Ok(signup):
            ...
        case Err(failure):
            return failure.to_dict()
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from valpipe.core.errors import AppError, Err, Ok, Result, invalid_json, precondition_failed
from valpipe.core.logging import parser_logger
from .errors import ValidationError, ValidationErrorList
from .schema import Schema

log = parser_logger()

PRE_CHECK_KEY = "_pre-check"


class RuleModel(BaseModel):
    """Base for records that carry their own validation rules."""

    def rules(self) -> Schema | None:
        """Schema for this record; None skips validation."""
        return None


M = TypeVar("M", bound=RuleModel)


class FailureKind(str, Enum):
    PARSE = "parse"
    PRE_CHECK = "pre_check"
    VALIDATION = "validation"


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Why ``parse`` rejected its input.

    ``errors`` is set only for VALIDATION failures.
    """
    kind: FailureKind
    error: AppError
    errors: ValidationErrorList | None = None

    @property
    def message(self) -> str:
        return self.error.message

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind.value, "msg": self.error.message}
        if self.errors is not None:
            payload["errors"] = self.errors.to_list()
        return payload


def _rules(model: RuleModel) -> Result[Schema | None, AppError]:
    try:
        return Ok(model.rules())
    except Exception as e:
        log.debug("rules_failed", model=type(model).__name__, error=str(e))
        return Err(precondition_failed(str(e), origin=type(model).__name__, cause=e))


def validate_model(model: RuleModel) -> ValidationError | None:
    """Fail-fast validation of a record."""
    match _rules(model):
        case Err(error):
            return ValidationError(key=PRE_CHECK_KEY, error=error)
        case Ok(None):
            return None
        case Ok(schema):
            return schema.validate()


def validate_model_all(model: RuleModel) -> ValidationErrorList | None:
    """Exhaustive validation of a record."""
    match _rules(model):
        case Err(error):
            return ValidationErrorList([ValidationError(key=PRE_CHECK_KEY, error=error)])
        case Ok(None):
            return None
        case Ok(schema):
            return schema.validate_all()


def _read(source: bytes | bytearray | str | IO[bytes] | IO[str]) -> bytes | str:
    if isinstance(source, (bytes, str)):
        return source
    if isinstance(source, bytearray):
        return bytes(source)
    return source.read()


def parse(model_cls: type[M], source: bytes | bytearray | str | IO[bytes] | IO[str]) -> Result[M, ParseFailure]:
    """Decode JSON into ``model_cls`` and validate it.

    Returns ``Ok(model)`` when decoding succeeds and the rules pass (or are
    None). Otherwise returns ``Err(ParseFailure)``; a decode failure takes
    precedence over everything else.
    """
    name = model_cls.__name__
    try:
        data = _read(source)
    except (OSError, ValueError) as e:
        log.debug("parse_failed", model=name, kind=FailureKind.PARSE.value, error=str(e))
        return Err(ParseFailure(FailureKind.PARSE, invalid_json(f"could not read input: {e}", origin=name, cause=e)))

    try:
        model = model_cls.model_validate_json(data)
    except PydanticValidationError as e:
        log.debug("parse_failed", model=name, kind=FailureKind.PARSE.value, error_count=e.error_count())
        error = invalid_json(
            str(e),
            origin=name,
            cause=e,
            errors=e.errors(include_url=False, include_context=False),
        )
        return Err(ParseFailure(FailureKind.PARSE, error))

    match _rules(model):
        case Err(error):
            return Err(ParseFailure(FailureKind.PRE_CHECK, error))
        case Ok(None):
            log.debug("model_parsed", model=name, validated=False)
            return Ok(model)
        case Ok(schema):
            errors = schema.validate_all()

    if errors is not None:
        log.debug("parse_failed", model=name, kind=FailureKind.VALIDATION.value, failures=len(errors))
        return Err(ParseFailure(FailureKind.VALIDATION, errors.to_error(), errors))

    log.debug("model_parsed", model=name, validated=True)
    return Ok(model)
