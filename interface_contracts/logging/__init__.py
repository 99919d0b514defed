"""
Logging entry points for interface_contracts.

Library modules log through stdlib loggers named ``interface_contracts.<module>``
and never install handlers beyond a NullHandler. Applications that want the
records routed somewhere call :func:`setup_logging` (loguru sinks) or
:func:`configure_development_logging` (plain ``logging.basicConfig``).
"""

from .config import (
    DEFAULT_FORMAT,
    LOGGER_NAME_PREFIX,
    configure_development_logging,
    get_logger,
    install_null_handler,
)
from .loguru_bootstrap import InterceptHandler, is_package_record, setup_logging
from .loguru_bootstrap import get_logger as get_loguru_logger

__all__ = [
    "DEFAULT_FORMAT",
    "LOGGER_NAME_PREFIX",
    "InterceptHandler",
    "configure_development_logging",
    "get_logger",
    "get_loguru_logger",
    "install_null_handler",
    "is_package_record",
    "setup_logging",
]
