"""
Structured logging (OpenTelemetry-compliant).

Records follow the OpenTelemetry Logging Data Model. Native handle
lifecycles are logged under the ``core`` and ``line_descriptor`` scopes
(creation at DEBUG, release at TRACE), library loading under ``loader``.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("loader")
    log.debug("Loaded native library", extra={"path": path})

Environment::

    LINEDESC_LOG_LEVEL=trace|debug|info|warn|error|fatal|off (default: info)
    LINEDESC_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

from ._version import __version__

__all__ = ["TRACE", "logger", "setup_logging", "scoped_logger"]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_SEVERITY = (
    (logging.CRITICAL, "FATAL"),
    (logging.ERROR, "ERROR"),
    (logging.WARNING, "WARN"),
    (logging.INFO, "INFO"),
    (logging.DEBUG, "DEBUG"),
)

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}

# Records at or below DEBUG, and errors, carry their source location
_LOCATED = frozenset({logging.ERROR, logging.CRITICAL})

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "scope", "taskName"}

_SCOPES = (
    ("_bindings", "loader"),
    ("_config", "loader"),
    ("types", "marshal"),
    ("line_descriptor", "line_descriptor"),
    ("core", "core"),
)


def _severity(levelno: int) -> str:
    for threshold, name in _SEVERITY:
        if levelno >= threshold:
            return name
    return "TRACE"


def _scope(record: logging.LogRecord) -> str:
    scope = getattr(record, "scope", None)
    if scope:
        return scope
    for marker, name in _SCOPES:
        if marker in record.name:
            return name
    return record.name.rsplit(".", 1)[-1] or "linedesc"


def _located(levelno: int) -> bool:
    return levelno <= logging.DEBUG or levelno in _LOCATED


def _source_path(pathname: str) -> str:
    """Path relative to the package root (``core/mat.py``)."""
    marker = "linedesc/"
    if marker in pathname:
        return pathname[pathname.rindex(marker) + len(marker) :]
    return pathname


def _attributes(record: logging.LogRecord) -> dict[str, Any]:
    attributes: dict[str, Any] = {"scope": _scope(record)}
    attributes.update(
        (key, value)
        for key, value in record.__dict__.items()
        if key not in _RECORD_FIELDS and not key.startswith("_")
    )
    return attributes


# =============================================================================
# Formatters
# =============================================================================


class JsonFormatter(logging.Formatter):
    """One JSON object per record (OpenTelemetry Logging Data Model)."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        # RFC3339 with nanosecond precision
        nanos = created.microsecond * 1000
        attributes = _attributes(record)
        if "handle" in attributes:
            attributes["handle"] = f"0x{attributes['handle']:x}"
        if _located(record.levelno):
            attributes["code.filepath"] = _source_path(record.pathname)
            attributes["code.lineno"] = record.lineno

        return json.dumps(
            {
                "timestamp": f"{created:%Y-%m-%dT%H:%M:%S}.{nanos:09d}Z",
                "severityText": _severity(record.levelno),
                "body": record.getMessage(),
                "attributes": attributes,
                "resource": {"service.name": "linedesc", "service.version": __version__},
            },
            separators=(",", ":"),
            default=str,
        )


class HumanFormatter(logging.Formatter):
    """Single-line terminal output: ``time SEVERITY [scope] message (type)``."""

    _RESET = "\x1b[0m"
    _COLORS = {"TRACE": "\x1b[2m", "DEBUG": "\x1b[2m", "WARN": "\x1b[33m"}
    _ERROR = "\x1b[31m"
    _SCOPE = "\x1b[36m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _paint(self, text: str, color: str | None) -> str:
        if not self._use_colors or not color:
            return text
        return f"{color}{text}{self._RESET}"

    def format(self, record: logging.LogRecord) -> str:
        severity = _severity(record.levelno)
        color = self._ERROR if record.levelno >= logging.ERROR else self._COLORS.get(severity)
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)

        line = (
            f"{created:%H:%M:%S} {self._paint(f'{severity:<5}', color)} "
            f"{self._paint(f'[{_scope(record)}]', self._SCOPE)} {record.getMessage()}"
        )
        type_name = getattr(record, "type_name", None)
        handle = getattr(record, "handle", None)
        if type_name and handle is not None:
            line += f" ({type_name} 0x{handle:x})"
        elif type_name:
            line += f" ({type_name})"
        if _located(record.levelno):
            location = f" [{_source_path(record.pathname)}:{record.lineno}]"
            line += self._paint(location, self._COLORS["DEBUG"])
        return line


# =============================================================================
# Logger Setup
# =============================================================================


def _get_log_level() -> int:
    """Level from LINEDESC_LOG_LEVEL (or its short form LINEDESC_LOG)."""
    name = os.environ.get("LINEDESC_LOG_LEVEL") or os.environ.get("LINEDESC_LOG", "info")
    return _LEVELS.get(name.lower(), logging.INFO)


def _get_log_format() -> str:
    fmt = os.environ.get("LINEDESC_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "human" if sys.stderr.isatty() else "json"


def _create_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if _get_log_format() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))
    return handler


logger = logging.getLogger("linedesc")


def setup_logging(level: str | int = "INFO", format: str | None = None) -> None:
    """
    Configure linedesc logging.

    Replaces any handler on the ``linedesc`` logger with a single stderr
    handler.

    Parameters
    ----------
    level : str or int, default "INFO"
        Level name ("TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL",
        "OFF") or a ``logging`` constant. Unknown names mean INFO.
    format : str, optional
        "json" or "human". Defaults to LINEDESC_LOG_FORMAT, then TTY
        detection.

    Examples
    --------
    Trace handle creation and release while hunting a leak::

        >>> import linedesc
        >>> linedesc.setup_logging("TRACE", format="human")
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.INFO)
    if format:
        os.environ["LINEDESC_LOG_FORMAT"] = format

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_create_handler())
    logger.setLevel(level)


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Adds the fixed scope to every record, keeping per-call ``extra``."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(TRACE, msg, *args, **kwargs)


def scoped_logger(scope: str) -> _ScopedLoggerAdapter:
    """
    Logger adapter bound to ``scope`` ("loader", "marshal", "core",
    "line_descriptor").
    """
    return _ScopedLoggerAdapter(logger, {"scope": scope})


# Leave handlers configured by the application alone
if not logger.handlers:
    logger.addHandler(_create_handler())
    logger.setLevel(_get_log_level())
