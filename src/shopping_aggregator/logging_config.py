"""Structured logging configuration for the shopping aggregator."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from shopping_aggregator.config import get_settings

PACKAGE_LOGGER = "shopping_aggregator"

# Context variables for aggregation tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
aggregation_id_ctx: ContextVar[str | None] = ContextVar("aggregation_id", default=None)
recipe_id_ctx: ContextVar[str | None] = ContextVar("recipe_id", default=None)

# field -> (variable, short label, characters shown in text logs)
_CONTEXT_FIELDS: dict[str, tuple[ContextVar[str | None], str, int | None]] = {
    "request_id": (request_id_ctx, "req", 8),
    "aggregation_id": (aggregation_id_ctx, "agg", 8),
    "recipe_id": (recipe_id_ctx, "recipe", None),
}


def current_context() -> dict[str, str]:
    """Return the context fields that are currently set."""
    return {
        name: value for name, (var, _, _) in _CONTEXT_FIELDS.items() if (value := var.get())
    }


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **current_context(),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, ensure_ascii=False)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with context for development."""

    def format(self, record: logging.LogRecord) -> str:
        context = current_context()
        parts = []
        for name, (_, label, width) in _CONTEXT_FIELDS.items():
            if name in context:
                parts.append(f"{label}={context[name][:width]}")
        context_str = f" [{', '.join(parts)}]" if parts else ""

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        formatted = (
            f"{timestamp} | {record.levelname.ljust(8)} | "
            f"{record.name}{context_str} | {record.getMessage()}"
        )

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that copies the current context onto every record."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        kwargs["extra"] = {**current_context(), **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for applications embedding the aggregator.

    Args:
        log_level: Minimum log level. Defaults to Settings.log_level.
        json_format: Use JSON lines. Defaults to Settings.log_format == "json",
            or to JSON when running non-interactively in production.
        log_file: Optional file path to write logs to.
    """
    settings = get_settings()

    level_name = (log_level or settings.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    if json_format is None:
        json_format = settings.log_format.lower() == "json" or (
            not sys.stdout.isatty() and settings.environment.lower() == "production"
        )

    formatter: logging.Formatter = (
        StructuredJsonFormatter() if json_format else ContextualFormatter()
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    get_logger(__name__).info(
        f"Logging configured: level={level_name}, format={'json' if json_format else 'text'}"
    )


def set_context(
    request_id: str | None = None,
    aggregation_id: str | None = None,
    recipe_id: str | None = None,
) -> None:
    """Set logging context variables; None leaves a field unchanged."""
    values = {"request_id": request_id, "aggregation_id": aggregation_id, "recipe_id": recipe_id}
    for name, value in values.items():
        if value is not None:
            _CONTEXT_FIELDS[name][0].set(value)


def clear_context() -> None:
    """Clear all logging context variables."""
    for var, _, _ in _CONTEXT_FIELDS.values():
        var.set(None)


class LoggingContext:
    """
    Context manager for setting logging context.

    Example:
        with LoggingContext(aggregation_id=str(uuid.uuid4())):
            ...
    """

    def __init__(
        self,
        request_id: str | None = None,
        aggregation_id: str | None = None,
        recipe_id: str | None = None,
    ):
        self._values = {
            "request_id": request_id,
            "aggregation_id": aggregation_id,
            "recipe_id": recipe_id,
        }
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContext":
        for name, value in self._values.items():
            if value is not None:
                self._tokens[name] = _CONTEXT_FIELDS[name][0].set(value)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            _CONTEXT_FIELDS[name][0].reset(token)
        self._tokens.clear()
