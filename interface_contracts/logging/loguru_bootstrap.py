"""
Loguru sinks for applications that want interface_contracts diagnostics.

The package itself only logs through stdlib loggers. ``setup_logging`` routes
those records into loguru, tagging each one with its stdlib logger name so
sinks can show or filter on it. The level defaults to
``ContractSettings.log_level``, so ``INTERFACE_CONTRACTS_LOG_LEVEL`` applies
here as well.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from loguru import logger as _logger

from .config import LOGGER_NAME_PREFIX

if TYPE_CHECKING:
    from ..config import ContractSettings

PACKAGE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)


def is_package_record(record: Dict[str, Any]) -> bool:
    """True for records that came from an ``interface_contracts`` logger."""
    name = record["extra"].get("logger_name", record["name"]) or ""
    return name == LOGGER_NAME_PREFIX or name.startswith(LOGGER_NAME_PREFIX + ".")


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging records to loguru, keeping the logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        _logger.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def setup_logging(
    *,
    level: Optional[str] = None,
    settings: Optional["ContractSettings"] = None,
    console: bool = True,
    file_path: Optional[str | Path] = None,
    rotation: Optional[str | int] = None,
    retention: Optional[str | int] = None,
    serialize: bool = False,
    package_only: bool = False,
) -> List[int]:
    """Replace loguru's sinks and bridge stdlib logging into them.

    Args:
        level: Sink and package logger level; from ``settings`` when omitted
        settings: Settings to read the level from, the environment by default
        console: Add a stderr sink
        file_path: Add a file sink at this path
        rotation: Passed to loguru for the file sink
        retention: Passed to loguru for the file sink
        serialize: Emit JSON lines instead of formatted text
        package_only: Drop records from loggers outside ``interface_contracts``

    Returns:
        Ids of the sinks added, for ``logger.remove``
    """
    if level is None:
        from ..config import ContractSettings

        level = (settings or ContractSettings.from_env()).log_level
    lvl = level.upper()

    _logger.remove()
    # Direct loguru calls carry no stdlib name
    _logger.configure(extra={"logger_name": "loguru"})
    sink_options: Dict[str, Any] = {
        "level": lvl,
        "format": PACKAGE_FORMAT,
        "filter": is_package_record if package_only else None,
        "backtrace": False,
        "diagnose": False,
        "serialize": serialize,
    }

    sink_ids = []
    if console:
        sink_ids.append(_logger.add(sys.stderr, **sink_options))
    if file_path:
        sink_ids.append(
            _logger.add(
                str(file_path), rotation=rotation, retention=retention, **sink_options
            )
        )
    _bridge_stdlib(level=lvl)
    return sink_ids


def _bridge_stdlib(level: str = "INFO") -> None:
    """Route stdlib logging into loguru through a single root handler."""
    numeric = getattr(logging, level, logging.INFO)
    logging.root.handlers = [
        h for h in logging.root.handlers if not isinstance(h, InterceptHandler)
    ]
    logging.root.addHandler(InterceptHandler())
    logging.root.setLevel(numeric)
    package_logger = logging.getLogger(LOGGER_NAME_PREFIX)
    package_logger.setLevel(numeric)
    package_logger.propagate = True


def get_logger():
    """Return the configured loguru logger instance."""
    return _logger
