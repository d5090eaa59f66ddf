# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with replica context
# PURPOSE: Consistent, queryable logging across all listeners
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Provides structured logging for the replica healthcheck agent.

Features:
- Component-based loggers
- Contextual fields (replica, listen_port, request method/path)
- JSON output for log aggregation, human format for terminals

Context is stored in a ContextVar, so every asyncio task (and therefore
every in-flight HTTP request) sees its own fields.

Usage:
    from core.logging import get_logger, log_context

    logger = get_logger("fleet.endpoint")

    with log_context(replica="replica1", listen_port=8080):
        logger.info("Listener started")
"""

import json
import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from enum import Enum


class ComponentType(str, Enum):
    """Component types for logging categorization."""
    FLEET = "fleet"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class LogContext:
    """Context for structured logging."""
    replica: Optional[str] = None
    listen_port: Optional[int] = None
    method: Optional[str] = None
    path: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, excluding None values."""
        result = {}
        for key, value in asdict(self).items():
            if value is not None and key != "extra":
                result[key] = value
        if self.extra:
            result.update(self.extra)
        return result


_current_context: ContextVar[LogContext] = ContextVar("log_context", default=LogContext())


def get_current_context() -> LogContext:
    """Get current logging context."""
    return _current_context.get()


@contextmanager
def log_context(**kwargs):
    """
    Context manager for adding logging context.

    Fields not given are inherited from the enclosing context.

    Example:
        with log_context(replica="replica1", method="GET", path="/"):
            logger.info("Probing replica")
    """
    parent = get_current_context()
    extra = kwargs.pop("extra", {})
    new_context = replace(parent, extra={**parent.extra, **extra}, **kwargs)

    token = _current_context.set(new_context)
    try:
        yield new_context
    finally:
        _current_context.reset(token)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON for easy parsing by log aggregators.
    """

    def __init__(self, include_context: bool = True, include_source: bool = True):
        super().__init__()
        self.include_context = include_context
        self.include_source = include_source

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": _utc_now().isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            context_dict = get_current_context().to_dict()
            if context_dict:
                log_data["context"] = context_dict

        # Extra fields attached by ContextLogger
        if hasattr(record, "extra") and record.extra:
            log_data["data"] = record.extra

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.include_source:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """
    Human-readable formatter for development.

    Includes context fields inline for easy reading.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human reading."""
        timestamp = _utc_now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)

        context = get_current_context()
        context_parts = []
        if context.replica:
            context_parts.append(f"replica={context.replica}")
        if context.listen_port:
            context_parts.append(f"port={context.listen_port}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        result = f"{timestamp} {level} {record.name}{context_str}: {record.getMessage()}"

        if record.exc_info:
            result += f"\n{self.formatException(record.exc_info)}"

        return result


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that includes context in log records.

    Merges the current LogContext with any extra fields passed per call.
    """

    def process(self, msg, kwargs):
        """Process log record to include context."""
        extra = dict(kwargs.get("extra") or {})
        if self.extra.get("component"):
            extra.setdefault("component", self.extra["component"])
        extra.update(get_current_context().to_dict())

        # Stored as one attribute for formatter access
        kwargs["extra"] = {"extra": extra}

        return msg, kwargs


def get_logger(
    name: str,
    component: Optional[ComponentType] = None,
) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (e.g., "fleet.manager")
        component: Optional component type for categorization

    Returns:
        ContextLogger instance
    """
    base_logger = logging.getLogger(name)
    return ContextLogger(base_logger, {"component": component.value if component else None})


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
) -> None:
    """
    Configure logging for the agent.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Use JSON format (for production)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        formatter = StructuredFormatter(include_context=True)
    else:
        formatter = HumanFormatter()

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
