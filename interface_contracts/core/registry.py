"""
Side-table of interface bindings keyed by delegate identity.

Bindings are never written into a delegate's own namespace. Each delegate gets
an entry per scope holding one slot per interface; class-scope entries are
consulted along the MRO so a binding made on a class is visible from every
instance and subclass instance.
"""

from __future__ import annotations

import dataclasses
import enum
import weakref
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Optional, Tuple

from ..config import ContractSettings, is_test_mode
from ..utils.exceptions import ConstructionError

if TYPE_CHECKING:
    from .interface import Interface

__all__ = [
    "Binding",
    "BindingMode",
    "BindingRegistry",
    "BoundImplementation",
    "Scope",
    "Slot",
    "default_registry",
    "resolve_binding_mode",
    "resolve_scope",
]


class Scope(enum.Enum):
    """Where a binding lives.

    TYPE: on a class, shared by all of its instances (resolved through the MRO).
    INSTANCE: on the exact object given, private to it.
    """

    TYPE = "type"
    INSTANCE = "instance"


class BindingMode(enum.Enum):
    """Whether an installed binding may later be reassigned."""

    STRICT = "strict"
    TEST = "test"

    @property
    def writable(self) -> bool:
        return self is BindingMode.TEST


def resolve_scope(delegate: Any, scope: Optional[Scope] = None) -> Scope:
    """Classes default to TYPE scope, everything else to INSTANCE scope.

    Raises:
        ConstructionError: TYPE scope requested for something that is not a class
    """
    if scope is not None:
        scope = Scope(scope)
        if scope is Scope.TYPE and not isinstance(delegate, type):
            error = ConstructionError(
                "[Interface] Scope.TYPE requires a class delegate but got "
                f'"{type(delegate).__name__}".',
                argument_position=1,
                received_type=type(delegate).__name__,
            )
            error.set_recovery_suggestion(
                "Bind the class itself, or use Scope.INSTANCE for a single object."
            )
            raise error
        return scope
    return Scope.TYPE if isinstance(delegate, type) else Scope.INSTANCE


def resolve_binding_mode(
    mode: Optional[BindingMode] = None,
    settings: Optional[ContractSettings] = None,
) -> BindingMode:
    """Return ``mode`` when given, otherwise read the test-mode signal afresh."""
    if mode is not None:
        return BindingMode(mode)
    return BindingMode.TEST if is_test_mode(settings) else BindingMode.STRICT


@dataclasses.dataclass(frozen=True, eq=False)
class Binding:
    """One implementation installed for one interface on one delegate.

    ``capacity`` is how many positional arguments the implementation takes
    after its receiver, or None when it takes any number. Trailing arguments
    past the capacity are dropped before the call.
    """

    interface: "Interface"
    implementation: Callable[..., Any]
    scope: Scope
    mode: BindingMode
    capacity: Optional[int] = None

    @property
    def writable(self) -> bool:
        return self.mode.writable

    def call(self, receiver: Any, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        # Guard runs on every call; nothing is cached between invocations
        self.interface.check_arguments(*args)
        if self.capacity is not None:
            args = args[: self.capacity]
        return self.implementation(receiver, *args, **kwargs)


class BoundImplementation:
    """A binding paired with the receiver it was looked up through."""

    __slots__ = ("binding", "receiver")

    def __init__(self, binding: Binding, receiver: Any):
        self.binding = binding
        self.receiver = receiver

    @property
    def interface(self) -> "Interface":
        return self.binding.interface

    @property
    def implementation(self) -> Callable[..., Any]:
        return self.binding.implementation

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.binding.call(self.receiver, args, kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundImplementation):
            return NotImplemented
        return self.binding is other.binding and self.receiver is other.receiver

    def __hash__(self) -> int:
        return hash((id(self.binding), id(self.receiver)))

    def __repr__(self) -> str:
        return (
            f"<bound implementation of {self.binding.interface!r} "
            f"for {self.receiver!r}>"
        )


_UNSET = object()


@dataclasses.dataclass
class Slot:
    """Current value of one (delegate, interface) pair.

    ``override`` holds a value assigned in test mode; until then reads produce
    the guarded implementation bound to the receiver.
    """

    binding: Binding
    override: Any = _UNSET

    @property
    def overridden(self) -> bool:
        return self.override is not _UNSET

    def read(self, receiver: Any) -> Any:
        if self.overridden:
            return self.override
        return BoundImplementation(self.binding, receiver)


class _DelegateEntry:
    __slots__ = ("ref", "slots")

    def __init__(self, ref: Callable[[], Any]):
        self.ref = ref
        self.slots: Dict["Interface", Slot] = {}


class BindingRegistry:
    """Maps delegate identity to the interface slots it owns.

    Weak-referenceable delegates are tracked weakly and their entries vanish
    when they are collected; other delegates (dicts, lists, ...) are held
    strongly until ``discard`` is called for them. The registry performs no
    locking: bindings are expected to be installed during single-threaded
    setup.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[Scope, int], _DelegateEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _entry(self, delegate: Any, scope: Scope) -> Optional[_DelegateEntry]:
        entry = self._entries.get((scope, id(delegate)))
        if entry is not None and entry.ref() is delegate:
            return entry
        return None

    def _ensure_entry(self, delegate: Any, scope: Scope) -> _DelegateEntry:
        entry = self._entry(delegate, scope)
        if entry is not None:
            return entry

        key = (scope, id(delegate))
        entry_ref: list = []

        def _discard(_ref: Any) -> None:
            current = self._entries.get(key)
            if current is not None and entry_ref and current is entry_ref[0]:
                del self._entries[key]

        try:
            ref: Callable[[], Any] = weakref.ref(delegate, _discard)
        except TypeError:
            ref = _StrongRef(delegate)
        entry = _DelegateEntry(ref)
        entry_ref.append(entry)
        self._entries[key] = entry
        return entry

    def owns(self, delegate: Any, interface: "Interface", scope: Scope) -> bool:
        """True if ``delegate`` itself (not a base class) holds a slot."""
        entry = self._entry(delegate, scope)
        return entry is not None and interface in entry.slots

    def own_slot(
        self, delegate: Any, interface: "Interface", scope: Scope
    ) -> Optional[Slot]:
        entry = self._entry(delegate, scope)
        if entry is None:
            return None
        return entry.slots.get(interface)

    def install(self, delegate: Any, binding: Binding) -> Slot:
        entry = self._ensure_entry(delegate, binding.scope)
        if binding.interface in entry.slots:
            raise KeyError(binding.interface)
        slot = Slot(binding)
        entry.slots[binding.interface] = slot
        return slot

    def discard(self, delegate: Any) -> int:
        """Forget every binding owned by ``delegate`` in either scope.

        Returns the number of slots removed. Bindings reached through a base
        class are left alone.
        """
        removed = 0
        for scope in Scope:
            entry = self._entry(delegate, scope)
            if entry is not None:
                removed += len(entry.slots)
                del self._entries[(scope, id(delegate))]
        return removed

    def _owners(self, delegate: Any, scope: Scope) -> Iterator[Tuple[Any, Scope]]:
        if scope is Scope.INSTANCE:
            yield delegate, Scope.INSTANCE
            mro = type(delegate).__mro__
        else:
            mro = delegate.__mro__
        for klass in mro:
            yield klass, Scope.TYPE

    def resolve(
        self, delegate: Any, interface: "Interface", scope: Scope
    ) -> Optional[Tuple[Any, Slot]]:
        """Find the slot visible from ``delegate`` and the object owning it."""
        for owner, owner_scope in self._owners(delegate, scope):
            slot = self.own_slot(owner, interface, owner_scope)
            if slot is not None:
                return owner, slot
        return None

    def assign(
        self, delegate: Any, interface: "Interface", scope: Scope, value: Any
    ) -> Slot:
        """Store ``value`` as the delegate's own slot, shadowing inherited ones.

        Callers check writability first; this only performs the write.
        """
        own = self.own_slot(delegate, interface, scope)
        if own is not None:
            own.override = value
            return own
        found = self.resolve(delegate, interface, scope)
        if found is None:
            raise KeyError(interface)
        _, inherited = found
        entry = self._ensure_entry(delegate, scope)
        own = Slot(inherited.binding, override=value)
        entry.slots[interface] = own
        return own


class _StrongRef:
    __slots__ = ("_obj",)

    def __init__(self, obj: Any):
        self._obj = obj

    def __call__(self) -> Any:
        return self._obj


_DEFAULT_REGISTRY = BindingRegistry()


def default_registry() -> BindingRegistry:
    """Process-wide registry used by interfaces created without their own."""
    return _DEFAULT_REGISTRY
