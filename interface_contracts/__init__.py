"""Runtime interface contracts for duck-typed Python code.

Declare a named contract with :class:`Interface`, attach implementations to
classes, instances or plain records, and have every call through the contract
checked for arity and argument types.
"""

from __future__ import annotations

from .config import ContractSettings, is_test_mode
from .core import (
    Any,
    Binding,
    BindingMode,
    BindingRegistry,
    BoundImplementation,
    ImplementationBinder,
    Interface,
    Scope,
    default_registry,
)
from .logging import get_logger, install_null_handler, setup_logging
from .utils.exceptions import (
    ArityError,
    ConstructionError,
    DuplicateImplementationError,
    ErrorSeverity,
    InterfaceContractError,
    InvalidImplementationError,
    NotImplementedByError,
    ReadOnlyAssignmentError,
    TypeMismatchError,
)

__version__ = "0.1.0"
PACKAGE_NAME = "interface_contracts"

install_null_handler()

__all__ = [
    "Any",
    "ArityError",
    "Binding",
    "BindingMode",
    "BindingRegistry",
    "BoundImplementation",
    "ConstructionError",
    "ContractSettings",
    "DuplicateImplementationError",
    "ErrorSeverity",
    "ImplementationBinder",
    "Interface",
    "InterfaceContractError",
    "InvalidImplementationError",
    "NotImplementedByError",
    "PACKAGE_NAME",
    "ReadOnlyAssignmentError",
    "Scope",
    "TypeMismatchError",
    "__version__",
    "default_registry",
    "get_logger",
    "is_test_mode",
    "setup_logging",
]
