"""
Interface descriptors: named runtime contracts with a minimum arity and an
optional positional type signature.

Example:
    >>> from interface_contracts import Any, Interface
    >>>
    >>> Greeter = Interface("Greeter", [str])
    >>> class Person:
    ...     pass
    >>> @Greeter.implemented_by(Person)
    ... def greet(self, name):
    ...     return "hi " + name
    >>> Greeter[Person()]("sam")
    'hi sam'
"""

from __future__ import annotations

import itertools
from typing import Any as AnyValue
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from ..config import ContractSettings
from ..logging import get_logger
from ..utils.exceptions import (
    ArityError,
    ConstructionError,
    DuplicateImplementationError,
    InvalidImplementationError,
    NotImplementedByError,
    ReadOnlyAssignmentError,
    TypeMismatchError,
    create_error_context,
    pluralize_arguments,
)
from .registry import (
    Binding,
    BindingMode,
    BindingRegistry,
    Scope,
    default_registry,
    resolve_binding_mode,
    resolve_scope,
)
from .signature import (
    accepted_positional_count,
    describe_type,
    is_type_tag,
    matches,
)

__all__ = ["Interface", "ImplementationBinder"]

F = TypeVar("F", bound=Callable[..., AnyValue])

logger = get_logger(__name__)

_serials = itertools.count(1)
_MISSING = object()


class Interface:
    """A named contract that delegates can implement.

    Two descriptors are the same contract only if they are the same object;
    ``name`` is used for diagnostics alone. ``str(interface)`` is the
    descriptor's unique key.

    Args:
        name: Non-empty display name
        parameter_types: Sequence of classes, tuples of classes or ``Any``.
            Its length is the contract's minimum arity.
        registry: Binding side-table, the process-wide one by default
    """

    __slots__ = ("_name", "_key", "_parameter_types", "_registry")

    def __init__(
        self,
        name: str,
        parameter_types: Optional[Sequence[AnyValue]] = None,
        *,
        registry: Optional[BindingRegistry] = None,
    ):
        if not isinstance(name, str):
            raise ConstructionError(
                "[Interface] Constructor expected argument 1 to be of type "
                f'"str" but got "{type(name).__name__}".',
                argument_position=1,
                received_type=type(name).__name__,
            )
        if not name:
            raise ConstructionError(
                "[Interface] Constructor expected argument 1 to be a non-empty string.",
                argument_position=1,
                received_type="str",
            )
        if parameter_types is not None and not isinstance(
            parameter_types, (list, tuple)
        ):
            raise ConstructionError(
                "[Interface] Constructor expected argument 2 to be None or a "
                f'sequence but got "{type(parameter_types).__name__}".',
                argument_position=2,
                received_type=type(parameter_types).__name__,
            )

        types: Tuple[AnyValue, ...] = tuple(parameter_types or ())
        for index, tag in enumerate(types, start=1):
            if not is_type_tag(tag):
                raise ConstructionError(
                    f"[Interface] Parameter type {index} must be a class, a tuple "
                    f'of classes or Any but got "{type(tag).__name__}".',
                    argument_position=2,
                    received_type=type(tag).__name__,
                )

        self._name = name
        self._key = f"@@{name}#{next(_serials)}"
        self._parameter_types = types
        self._registry = registry if registry is not None else default_registry()

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    @property
    def parameter_types(self) -> Tuple[AnyValue, ...]:
        return self._parameter_types

    @property
    def arity(self) -> int:
        """Minimum number of positional arguments a call must supply."""
        return len(self._parameter_types)

    @property
    def registry(self) -> BindingRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Call-time guard
    # ------------------------------------------------------------------

    def check_arguments(self, *args: AnyValue) -> bool:
        """Check positional call arguments against the contract.

        Only the declared prefix is type-checked; trailing arguments are
        accepted unconditionally.

        Returns:
            True when the arguments satisfy the contract

        Raises:
            ArityError: Fewer arguments than the contract's arity
            TypeMismatchError: First argument not matching its declared type
        """
        if len(args) < self.arity:
            raise ArityError(
                f"[Interface: {self._name}] Must be invoked with at least "
                f"{pluralize_arguments(self.arity)}.",
                interface_name=self._name,
                minimum_arity=self.arity,
                received_count=len(args),
                context=create_error_context("check_arguments"),
            )

        for index, (tag, arg) in enumerate(zip(self._parameter_types, args), start=1):
            if matches(tag, arg):
                continue
            expected = describe_type(tag)
            actual = type(arg).__name__
            raise TypeMismatchError(
                f"[Interface: {self._name}] Expected argument {index} to be of "
                f'type "{expected}" but got "{actual}".',
                interface_name=self._name,
                position=index,
                expected_type=expected,
                actual_type=actual,
                context=create_error_context("check_arguments"),
            )
        return True

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def is_implemented_by(self, delegate: AnyValue, scope: Optional[Scope] = None) -> bool:
        """True if ``delegate`` (or, for instances, its class) has a binding."""
        effective = resolve_scope(delegate, scope)
        return self._registry.resolve(delegate, self, effective) is not None

    def implemented_by(
        self, delegate: AnyValue, scope: Optional[Scope] = None
    ) -> "ImplementationBinder":
        """Start binding an implementation onto ``delegate``.

        Classes bind for all of their instances unless ``scope`` says
        otherwise; any other object binds directly.
        """
        return ImplementationBinder(self, delegate, resolve_scope(delegate, scope))

    # ------------------------------------------------------------------
    # Lookup and invocation
    # ------------------------------------------------------------------

    def lookup(self, delegate: AnyValue, scope: Optional[Scope] = None) -> AnyValue:
        """Return the callable bound for ``delegate``.

        Raises:
            NotImplementedByError: Nothing is bound for ``delegate``
        """
        value = self.get(delegate, _MISSING, scope=scope)
        if value is _MISSING:
            raise NotImplementedByError(
                f'[Interface: {self._name}] {delegate!r} does not implement "{self._name}".',
                interface_name=self._name,
                delegate=delegate,
            )
        return value

    def get(
        self,
        delegate: AnyValue,
        default: AnyValue = None,
        *,
        scope: Optional[Scope] = None,
    ) -> AnyValue:
        found = self._registry.resolve(delegate, self, resolve_scope(delegate, scope))
        if found is None:
            return default
        _, slot = found
        return slot.read(delegate)

    def invoke(self, delegate: AnyValue, *args: AnyValue, **kwargs: AnyValue) -> AnyValue:
        """Call the implementation bound for ``delegate`` with guarded arguments."""
        return self.lookup(delegate)(*args, **kwargs)

    def assign(
        self, delegate: AnyValue, value: AnyValue, scope: Optional[Scope] = None
    ) -> None:
        """Replace the binding visible from ``delegate`` with ``value``.

        Only bindings installed in test mode may be replaced. The new value is
        stored on ``delegate`` itself, so a class-level binding is shadowed for
        that delegate only.

        Raises:
            NotImplementedByError: Nothing is bound for ``delegate``
            ReadOnlyAssignmentError: The visible binding is read-only
        """
        effective = resolve_scope(delegate, scope)
        found = self._registry.resolve(delegate, self, effective)
        if found is None:
            raise NotImplementedByError(
                f'[Interface: {self._name}] {delegate!r} does not implement "{self._name}".',
                interface_name=self._name,
                delegate=delegate,
            )
        _, slot = found
        if not slot.binding.writable:
            raise ReadOnlyAssignmentError(
                f"[Interface: {self._name}] Cannot assign to read only binding "
                f"on {delegate!r}.",
                interface_name=self._name,
                delegate=delegate,
                context=create_error_context("assign"),
            )
        self._registry.assign(delegate, self, effective, value)
        logger.debug("Reassigned %r on %r", self, delegate)

    def __getitem__(self, delegate: AnyValue) -> AnyValue:
        return self.lookup(delegate)

    def __setitem__(self, delegate: AnyValue, value: AnyValue) -> None:
        self.assign(delegate, value)

    def __delitem__(self, delegate: AnyValue) -> None:
        raise ReadOnlyAssignmentError(
            f"[Interface: {self._name}] Cannot delete binding on {delegate!r}.",
            interface_name=self._name,
            delegate=delegate,
        )

    # Subscripting takes delegates, not indexes
    __iter__ = None

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        types = ", ".join(describe_type(tag) for tag in self._parameter_types)
        return f"<Interface {self._name!r} ({types})>"


class ImplementationBinder:
    """Binds one implementation for an interface onto a resolved delegate.

    Use ``as_`` directly or apply the binder as a decorator::

        Greeter.implemented_by(Person).as_(greet)

        @Greeter.implemented_by(Person)
        def greet(self, name): ...

    Implementations receive the object the binding was looked up through as
    their first argument, followed by the caller's arguments.
    """

    __slots__ = ("interface", "delegate", "scope")

    def __init__(self, interface: Interface, delegate: AnyValue, scope: Scope):
        self.interface = interface
        self.delegate = delegate
        self.scope = scope

    def as_(
        self,
        implementation: Callable[..., AnyValue],
        mode: Optional[BindingMode] = None,
        *,
        settings: Optional[ContractSettings] = None,
    ) -> Binding:
        """Install ``implementation`` and return the resulting binding.

        Args:
            implementation: Callable taking the receiver plus the contract arguments
            mode: STRICT or TEST; read from the environment when omitted
            settings: Settings consulted when ``mode`` is omitted

        Raises:
            DuplicateImplementationError: The delegate already owns a binding
            InvalidImplementationError: ``implementation`` is not callable
            ArityError: ``implementation`` accepts too few parameters
        """
        interface = self.interface
        registry = interface.registry

        if registry.owns(self.delegate, interface, self.scope):
            raise DuplicateImplementationError(
                "[Interface] Delegate object already implements interface "
                f'"{interface.name}".',
                interface_name=interface.name,
                delegate=self.delegate,
                context=create_error_context("implemented_by.as_"),
            )

        if not callable(implementation):
            raise InvalidImplementationError(
                f"[{interface.name}] Implementation must be callable.",
                interface_name=interface.name,
                implementation=implementation,
            )

        accepted = accepted_positional_count(implementation)
        # First positional parameter receives the delegate
        capacity = None if accepted is None else max(accepted - 1, 0)
        if accepted is not None and accepted - 1 < interface.arity:
            raise ArityError(
                f"[{interface.name}] Expected implementation to accept a receiver "
                f"followed by at least {pluralize_arguments(interface.arity)}.",
                interface_name=interface.name,
                minimum_arity=interface.arity,
                received_count=capacity,
                context=create_error_context("implemented_by.as_"),
            )

        binding = Binding(
            interface=interface,
            implementation=implementation,
            scope=self.scope,
            mode=resolve_binding_mode(mode, settings),
            capacity=capacity,
        )
        registry.install(self.delegate, binding)
        logger.debug(
            "Bound %r on %r (scope=%s, mode=%s)",
            interface,
            self.delegate,
            self.scope.value,
            binding.mode.value,
        )
        return binding

    def __call__(self, implementation: F) -> F:
        self.as_(implementation)
        return implementation
