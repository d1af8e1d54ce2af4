"""valpipe: typed validation pipes with fail-fast and concurrent schemas."""
from valpipe.validation import (
    Entry,
    ErrorMessage,
    FloatPipe,
    IntPipe,
    RuleModel,
    Schema,
    StringPipe,
    TimePipe,
    ValidationError,
    ValidationErrorList,
    floats,
    ints,
    join_errors,
    parse,
    strings,
    times,
    unwrap_error,
    validate_model,
    validate_model_all,
)

__version__ = "0.1.0"
