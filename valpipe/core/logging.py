"""Structured logging

valpipe logs through structlog. Library modules only ask for loggers;
applications call ``configure_logging`` (or ``configure_from_settings``)
once at startup to choose between console and JSON output.

Events emitted by the library:
    schema_validated       fail-fast run finished (``failed_key``)
    schema_validated_all   exhaustive run finished (``failures``)
    model_parsed           decode-then-validate succeeded
    parse_failed           decode-then-validate failed (``kind``)
    rules_failed           a model's ``rules()`` raised
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from valpipe.core.config import get_settings

SERVICE_NAME = "valpipe"
SERVICE_VERSION = "0.1.0"

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset({"password", "token", "secret", "authorization", "cookie"})
_MAX_REDACT_DEPTH = 5


def _redact(obj: object, depth: int = 0) -> object:
    if depth > _MAX_REDACT_DEPTH:
        return obj
    if isinstance(obj, dict):
        return {
            key: REDACTED if isinstance(key, str) and key.lower() in SENSITIVE_KEYS else _redact(val, depth + 1)
            for key, val in obj.items()
        }
    if isinstance(obj, list):
        return [_redact(item, depth + 1) for item in obj]
    return obj


def _censor_sensitive_keys(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of sensitive keys, including nested ones."""
    return _redact(event_dict)


def _add_service_info(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_service_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog through the stdlib root logger.

    Args:
        level: stdlib level name; unknown names fall back to INFO
        json_logs: JSON lines when True, colored console output otherwise
    """
    shared = get_shared_processors()
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def configure_from_settings() -> None:
    """``configure_logging`` driven by ``VALPIPE_LOG_LEVEL`` / ``VALPIPE_LOG_JSON``."""
    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


def get_logger(name: str = SERVICE_NAME) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Attach key/value pairs to every event logged in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LoggerRegistry:
    """One named logger per library domain, created on first use."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, domain: str) -> structlog.stdlib.BoundLogger:
        if domain not in cls._loggers:
            cls._loggers[domain] = get_logger(f"{SERVICE_NAME}.{domain}")
        return cls._loggers[domain]


def schema_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("schema")


def parser_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("parser")
