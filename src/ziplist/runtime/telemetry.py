"""Logging helpers for ziplist.

``configure(...)`` -- attach console/file handlers to the ``ziplist`` logger
``get_logger(name)`` -- logger under the ``ziplist`` namespace
``record_event(name, ...)`` -- emit one structured event
``span(name, ...)`` -- time a block and log it with its own metadata
"""

from __future__ import annotations

import logging
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

ENV_PREFIX = "ZIPLIST_"
ROOT_LOGGER_NAME = "ziplist"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(message: str, data: Dict[str, Any]) -> str:
    pairs = [f"{key}={_stringify(value)}" for key, value in data.items()]
    return " | ".join([message] + pairs)


def configure(
    *,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: Optional[bool] = None,
) -> logging.Logger:
    """Set up handlers on the ``ziplist`` logger.

    Unset arguments fall back to ``ZIPLIST_LOG_LEVEL`` (default ``INFO``),
    ``ZIPLIST_LOG_FILE`` and ``ZIPLIST_DISABLE_CONSOLE``. Calling it again
    replaces the handlers installed by the previous call.
    """

    resolved_level = (level or _env("LOG_LEVEL") or "INFO").upper()
    numeric_level = logging.getLevelName(resolved_level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{resolved_level}'.")

    log = logging.getLogger(ROOT_LOGGER_NAME)
    log.setLevel(numeric_level)
    for handler in list(log.handlers):
        if not isinstance(handler, logging.NullHandler):
            log.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    if console is None:
        console = not _env_flag("DISABLE_CONSOLE", False)
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        log.addHandler(console_handler)

    path = log_file or _env("LOG_FILE")
    if path:
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    return log


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` followed by ``data`` as key=value pairs."""

    log = get_logger(logger_name)
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    if log.isEnabledFor(numeric_level):
        log.log(numeric_level, _format_pairs(f"event::{name}", data or {}))


@dataclass
class SpanHandle:
    """Per-block metadata; never shared between spans."""

    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def payload(self, **extra: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.component_name:
            data["component"] = self.component_name
        data.update(self.metadata)
        data.update(extra)
        return data


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block and log ``span::<name>`` at debug level when it ends.

    ``component=True`` tags the record with ``name``; a string tags it with
    that string. A block that raises is logged at error level as
    ``span::fail`` and the exception propagates.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(span_name=name, component_name=component_name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)

    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        log.error(
            _format_pairs("span::fail", handle.payload(span=name, reason=str(exc)))
        )
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            _format_pairs(
                f"span::{name}", handle.payload(elapsed_ms=f"{elapsed_ms:.3f}")
            )
        )


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
