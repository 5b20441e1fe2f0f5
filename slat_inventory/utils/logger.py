"""Structured logging: structlog over stdlib logging, console plus a JSONL file.

Commands bind a ``command`` context for their duration; long string values
(inline photo data URIs) are shortened before rendering.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog

from slat_inventory.config import LOG_FILE, LOG_LEVEL, VERBOSE_LOGGING

BoundLogger = structlog.stdlib.BoundLogger

MAX_FIELD_CHARS = 200

# Chatty third-party loggers kept at WARNING
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore", "multipart")

_configured = False


def _coerce_level(level_name: str) -> int:
    if level_name.isdigit():
        return int(level_name)
    return getattr(logging, level_name.upper(), logging.INFO)


def shorten_long_values(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Cut string fields longer than MAX_FIELD_CHARS, noting the full length."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_FIELD_CHARS:
            event_dict[key] = f"{value[:MAX_FIELD_CHARS]}... ({len(value)} chars)"
    return event_dict


def _file_handler(log_file: Path) -> logging.Handler | None:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning("Log file %s unavailable (%s); console only", log_file, e)
        return None


def _configure_logging(log_file: Path = LOG_FILE) -> None:
    global _configured
    if _configured:
        return

    effective_level = logging.DEBUG if VERBOSE_LOGGING else _coerce_level(LOG_LEVEL)
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        timestamper,
    ]

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=pre_chain,
        )
    )
    handlers: list[logging.Handler] = [console_handler]

    file_handler = _file_handler(log_file)
    if file_handler is not None:
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=pre_chain,
            )
        )
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(effective_level)
    for handler in handlers:
        handler.setLevel(effective_level)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            shorten_long_values,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(effective_level),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str = "slat_inventory", **bindings: Any) -> BoundLogger:
    """Return the structured logger, optionally bound with context."""
    if not _configured:
        _configure_logging()
    logger = structlog.get_logger(name)
    if bindings:
        logger = logger.bind(**bindings)
    return logger


def bind_context(**context: Any) -> None:
    """Attach context (e.g. command=...) to every log entry until clear_context()."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
