"""Core contract machinery: descriptors, the binding side-table and signature helpers."""

from .interface import ImplementationBinder, Interface
from .registry import (
    Binding,
    BindingMode,
    BindingRegistry,
    BoundImplementation,
    Scope,
    Slot,
    default_registry,
    resolve_binding_mode,
    resolve_scope,
)
from .signature import Any, AnyType, accepted_positional_count, describe_type

__all__ = [
    "Any",
    "AnyType",
    "Binding",
    "BindingMode",
    "BindingRegistry",
    "BoundImplementation",
    "ImplementationBinder",
    "Interface",
    "Scope",
    "Slot",
    "accepted_positional_count",
    "default_registry",
    "describe_type",
    "resolve_binding_mode",
    "resolve_scope",
]
