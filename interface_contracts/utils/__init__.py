"""
Utility package for interface_contracts providing the exception taxonomy used
across descriptor construction, binding and call-time argument checking.
"""

from .exceptions import (
    ArityError,
    ConstructionError,
    DuplicateImplementationError,
    ErrorContext,
    ErrorSeverity,
    InterfaceContractError,
    InvalidImplementationError,
    NotImplementedByError,
    ReadOnlyAssignmentError,
    TypeMismatchError,
    create_error_context,
    pluralize_arguments,
)

__all__ = [
    "InterfaceContractError",
    "ConstructionError",
    "DuplicateImplementationError",
    "InvalidImplementationError",
    "ArityError",
    "TypeMismatchError",
    "ReadOnlyAssignmentError",
    "NotImplementedByError",
    "ErrorSeverity",
    "ErrorContext",
    "create_error_context",
    "pluralize_arguments",
]
