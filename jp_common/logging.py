"""Logging setup for the select widgets and the jp-select CLI (structlog over stdlib)."""

from __future__ import annotations

import logging
import os
import sys

import structlog

from jp_common.config.env import parse_bool_env

_TIMESTAMPER = structlog.processors.TimeStamper(fmt="iso", utc=True)

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    _TIMESTAMPER,
]


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    if value.strip().isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.strip().upper(), logging.INFO)


def _formatter(as_json: bool) -> logging.Formatter:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=list(_SHARED_PROCESSORS),
    )


def _handlers(formatter: logging.Formatter, log_file: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Explicit arguments win over ``JP_LOG_LEVEL``, ``JP_LOG_JSON`` and
    ``JP_LOG_FILE``. Existing root handlers are kept unless ``force`` is set.
    """
    if json is None:
        json = bool(parse_bool_env(os.environ.get("JP_LOG_JSON")))
    if log_file is None:
        log_file = os.environ.get("JP_LOG_FILE") or None

    root = logging.getLogger()
    if force or not root.handlers:
        if force:
            for handler in list(root.handlers):
                root.removeHandler(handler)
        for handler in _handlers(_formatter(json), log_file):
            root.addHandler(handler)
        root.setLevel(_resolve_level(level or os.environ.get("JP_LOG_LEVEL"), debug))

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
