"""Minimal logging configuration bridge for interface_contracts modules."""

from __future__ import annotations

import logging
from typing import Any, Dict

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME_PREFIX = "interface_contracts"


def get_logger(name: str | None = None, **kwargs: Any) -> logging.Logger:
    """Return a logger namespaced under ``interface_contracts``."""
    logger_name = kwargs.get("logger_name") or name or LOGGER_NAME_PREFIX
    logger_name = str(logger_name)
    if logger_name != LOGGER_NAME_PREFIX and not logger_name.startswith(
        LOGGER_NAME_PREFIX + "."
    ):
        logger_name = f"{LOGGER_NAME_PREFIX}.{logger_name}"
    return logging.getLogger(logger_name)


def install_null_handler() -> logging.Logger:
    """Attach a NullHandler to the package root logger once.

    Library code never configures handlers of its own; applications opt in
    through ``configure_development_logging`` or the loguru bootstrap.
    """
    root = logging.getLogger(LOGGER_NAME_PREFIX)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    return root


def configure_development_logging(
    *, level: int | str = logging.DEBUG, format: str = DEFAULT_FORMAT, **_: Any
) -> Dict[str, Any]:
    """Apply a simple development logging configuration."""
    logging.basicConfig(level=level, format=format)
    logging.getLogger(LOGGER_NAME_PREFIX).setLevel(level)
    return {"level": level, "format": format}
