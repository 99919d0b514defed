"""
Shared fixtures for the interface_contracts test suite.

Every test starts in strict mode: the test-mode environment variable is removed
unless a test opts in through the ``testing_environment`` fixture. Tests that bind
implementations use a private registry so bindings never leak between tests.
"""

import logging
import sys

import pytest
from loguru import logger as loguru_logger

from interface_contracts import BindingRegistry, Interface
from interface_contracts.config import DEFAULT_ENV_VAR
from interface_contracts.logging import install_null_handler


@pytest.fixture(autouse=True)
def _strict_environment(monkeypatch):
    """Ensure bindings default to read-only regardless of the outer environment."""
    monkeypatch.delenv(DEFAULT_ENV_VAR, raising=False)
    yield


@pytest.fixture
def testing_environment(monkeypatch):
    """Flag the process as a test environment so new bindings are writable."""
    monkeypatch.setenv(DEFAULT_ENV_VAR, "test")
    return DEFAULT_ENV_VAR


@pytest.fixture
def registry():
    """Fresh binding side-table isolated from the process-wide default."""
    return BindingRegistry()


@pytest.fixture
def make_interface(registry):
    """Factory creating interfaces bound to the per-test registry."""

    def _make(name="Foo", parameter_types=None):
        return Interface(name, parameter_types, registry=registry)

    return _make


@pytest.fixture
def restore_logging():
    """Undo loguru/stdlib bridging performed by setup_logging."""
    root_handlers = list(logging.root.handlers)
    root_level = logging.root.level
    yield
    loguru_logger.remove()
    loguru_logger.configure(extra={})
    loguru_logger.add(sys.stderr)
    logging.root.handlers = root_handlers
    logging.root.setLevel(root_level)
    logging.getLogger("interface_contracts").setLevel(logging.NOTSET)
    install_null_handler()
