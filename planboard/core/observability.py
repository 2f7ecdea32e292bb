"""
Observability Infrastructure

Structured logging with correlation tracking for the planning board.
Library modules log through the standard ``logging`` module; this module
wires structlog and stdlib logging to the same output.
"""

import contextvars
import logging
import sys
import uuid
from typing import Any

import structlog

from .config import Settings, settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)
planner_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "planner_id", default=""
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")
        planner_id = planner_id_var.get("")

        if correlation_id:
            event_dict["correlation_id"] = correlation_id
        if planner_id:
            event_dict["planner_id"] = planner_id

        return event_dict


def setup_structured_logging(app_settings: Settings | None = None) -> None:
    """Configure structured logging with JSON or console output."""
    app_settings = app_settings or settings
    log_level = getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
    ]

    if app_settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=app_settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library loggers used inside the domain layer
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def set_planner_id(planner_id: str) -> None:
    """Set the planner identity for request tracking."""
    planner_id_var.set(planner_id)


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id_var.get("")
