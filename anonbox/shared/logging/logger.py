"""loguru setup for the API process.

Every record carries ``extra["correlation_id"]`` (the id of the HTTP request
being served, ``-`` outside a request) and is redacted before it reaches a
sink. stdlib ``logging`` output from Flask, werkzeug and SQLAlchemy is routed
into loguru so there is a single format.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from .sensitive_filter import redact_record

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "instance" / "app.log"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def _patch_record(record: dict[str, Any]) -> None:
    record["extra"]["correlation_id"] = _correlation_id.get()
    redact_record(record)


logger.configure(extra={"correlation_id": "-"}, patcher=_patch_record)


class _StdlibToLoguru(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def clear_correlation_id() -> None:
    _correlation_id.set("-")


def setup_logging(
    level: str = "INFO",
    *,
    log_file: str | Path | None = None,
    debug_mode: bool = False,
) -> None:
    """Replace loguru's sinks with stderr plus a rotating file sink."""

    level = "DEBUG" if debug_mode else level.upper()
    path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True, diagnose=False)
    logger.add(
        path,
        level=level,
        format=LOG_FORMAT,
        colorize=False,
        diagnose=False,
        enqueue=True,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
    )

    logging.basicConfig(handlers=[_StdlibToLoguru()], level=logging.NOTSET, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOG_FORMAT",
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
