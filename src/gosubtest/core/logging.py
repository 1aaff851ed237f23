"""Structured logging routed through the stdlib ``logging`` tree.

Loggers from :func:`get_logger` wrap a stdlib logger, so a host that never
calls :func:`configure_logging` only sees what its own ``logging`` setup
lets through (nothing below WARNING by default). The CLI calls
:func:`configure_logging` once per invocation to attach console or file
outputs and tag every event with a request id.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from gosubtest.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set or generate request correlation ID."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _level(name: str | None, fallback: int) -> int:
    if name is None:
        return fallback
    return _LEVELS.get(name.upper(), fallback)


def get_logger(name: str) -> Any:
    """Lazy structlog logger on top of ``logging.getLogger(name)``.

    Processors and level filtering are resolved on every call, so loggers
    created at import time pick up a later :func:`configure_logging`.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(*, config: LoggingConfig) -> None:
    """Install structlog processors and one root handler per configured output."""
    default_level = _level(config.level, logging.INFO)

    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Re-resolved per call so reconfiguration reaches module-level loggers
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(default_level)

    for output in config.outputs:
        handler = _create_handler(output.destination)
        handler.setLevel(_level(output.level or config.level, default_level))
        handler.setFormatter(_formatter(output, shared))
        root.addHandler(handler)


def _create_handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _formatter(
    output: LogOutputConfig,
    shared: list[structlog.types.Processor],
) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        renderer = structlog.dev.ConsoleRenderer(
            colors=output.destination in ("stderr", "stdout") and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
