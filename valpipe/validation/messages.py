"""Custom Error Message Templates

An ``ErrorMessage`` replaces an action's built-in failure description. The
template may reference the failing value through the ``{VALUE}`` token:

    ints.min_value(18, message="must be at least 18, but is {VALUE}")

renders ``"must be at least 18, but is 15"`` when the pipe holds ``15``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from valpipe.core.errors import Ok

VALUE_PLACEHOLDER = "{VALUE}"


def format_value(value: Any) -> str | None:
    """Canonical text for a scalar, or None when the type is unsupported."""
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return None


@dataclass(frozen=True, slots=True)
class ErrorMessage:
    """Message policy rendering a template against the failing value."""
    template: str

    @property
    def has_placeholder(self) -> bool:
        return VALUE_PLACEHOLDER in self.template

    def render(self, value: Any) -> str:
        if not self.has_placeholder:
            return self.template
        if (text := format_value(value)) is None:
            return self.template
        return self.template.replace(VALUE_PLACEHOLDER, text)

    def run(self, value: Any) -> Ok[None]:
        """No-op: a message policy never rejects a value."""
        return Ok(None)

    @property
    def constraint_name(self) -> str:
        return "message"


def as_message(message: ErrorMessage | str | None) -> ErrorMessage | None:
    """Promote a plain template string to an ErrorMessage."""
    if message is None or isinstance(message, ErrorMessage):
        return message
    return ErrorMessage(message)
