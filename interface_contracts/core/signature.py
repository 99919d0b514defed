"""Type-tag helpers and implementation signature inspection."""

from __future__ import annotations

import inspect
import typing
from typing import Callable, Optional

__all__ = [
    "Any",
    "AnyType",
    "accepted_positional_count",
    "describe_type",
    "is_type_tag",
    "is_wildcard",
    "matches",
]


class AnyType:
    """Wildcard placeholder: counts toward arity, never type-checked."""

    _instance: Optional["AnyType"] = None

    def __new__(cls) -> "AnyType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Any"

    def __reduce__(self):
        return (AnyType, ())


Any = AnyType()


def is_wildcard(tag: object) -> bool:
    return tag is Any or tag is typing.Any


def is_type_tag(tag: object) -> bool:
    """Return True for ``Any``, a class, or a non-empty tuple of classes."""
    if is_wildcard(tag) or isinstance(tag, type):
        return True
    if isinstance(tag, tuple) and tag:
        return all(isinstance(item, type) for item in tag)
    return False


def matches(tag: object, value: object) -> bool:
    if is_wildcard(tag):
        return True
    return isinstance(value, tag)  # type: ignore[arg-type]


def describe_type(tag: object) -> str:
    """Display name of a type tag as used in diagnostics."""
    if is_wildcard(tag):
        return "Any"
    if isinstance(tag, tuple):
        return " | ".join(describe_type(item) for item in tag)
    return getattr(tag, "__name__", None) or repr(tag)


def accepted_positional_count(func: Callable[..., object]) -> Optional[int]:
    """Number of positional arguments ``func`` accepts, or None when unbounded.

    Parameters with defaults count: they can still receive a positional value.
    Signatures that cannot be inspected (some builtins) are reported as
    unbounded.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count
