"""
@file: ms_passport/logger.py
@description: Loguru setup with console and JSON-lines sinks.
@dependencies: loguru, ms_passport.config
@created: 2025-10-02
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger

if TYPE_CHECKING:
    from ms_passport.config import Settings

# Silent unless an application opts in via configure_logging().
logger.disable("ms_passport")

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_RESERVED = {"time", "level", "message", "name", "function", "line", "exception"}


def _json_record(record: dict[str, Any]) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    if record["exception"]:
        entry["exception"] = str(record["exception"])
    for key, value in record.get("extra", {}).items():
        if key not in _RESERVED:
            entry[key] = value
    return entry


def json_sink(stream: TextIO):
    """Build a sink writing one JSON object per log record to ``stream``."""

    def _sink(message) -> None:
        stream.write(json.dumps(_json_record(message.record), ensure_ascii=False, default=str) + "\n")
        stream.flush()

    return _sink


def configure_logging(settings: "Settings", stream: TextIO | None = None) -> None:
    """Enable package logging and replace loguru handlers with one sink."""

    target = stream if stream is not None else sys.stderr
    logger.remove()
    if settings.log_json:
        logger.add(sink=json_sink(target), level=settings.log_level, backtrace=False, diagnose=False)
    else:
        logger.add(
            sink=target,
            format=_CONSOLE_FORMAT,
            level=settings.log_level,
            colorize=False if stream is not None else None,
            backtrace=True,
            diagnose=False,
        )
    logger.enable("ms_passport")


__all__ = ["configure_logging", "json_sink", "logger"]
