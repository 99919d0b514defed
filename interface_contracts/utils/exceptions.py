# External imports with version comments
import dataclasses
import enum
import inspect  # >=3.10 - Frame inspection for caller information in error contexts
import logging  # >=3.10 - Logger integration for contract violation reporting
import threading  # >=3.10 - Thread identification for error contexts
import time  # >=3.10 - Timestamp generation for error tracking
import uuid
from typing import Any, Dict, Optional, Union

# Global constants for error handling configuration
RECOVERY_SUGGESTION_MAX_LENGTH = 500
DEFAULT_EXCEPTIONS_LOGGER = "interface_contracts.exceptions"

# Module exports - contract violation taxonomy
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


class ErrorSeverity(enum.IntEnum):
    """Severity levels used to classify contract violations and pick a log level."""

    LOW = 1  # Lookups that may be retried with another delegate
    MEDIUM = 2  # Call-time violations made by a caller
    HIGH = 3  # Definition-time violations made by an implementer
    CRITICAL = 4  # Reserved for failures of the binding machinery itself

    def get_description(self) -> str:
        """Get human-readable description of error severity level.

        Returns:
            str: Description of severity level for logging and user display
        """
        severity_descriptions = {
            ErrorSeverity.LOW: "Lookup miss that callers may handle",
            ErrorSeverity.MEDIUM: "Contract violated by a caller",
            ErrorSeverity.HIGH: "Contract violated by a definition or implementation",
            ErrorSeverity.CRITICAL: "Binding machinery failure",
        }
        return severity_descriptions.get(self, "Unknown severity level")

    def should_escalate(self) -> bool:
        return self in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL)


@dataclasses.dataclass
class ErrorContext:
    """Structured context describing where a contract violation happened.

    Captures the component and operation names together with optional caller
    information so that violations can be traced back to the offending call site.
    """

    component_name: str
    operation_name: str
    timestamp: float

    function_name: Optional[str] = None
    line_number: Optional[int] = None
    thread_id: Optional[str] = None
    additional_data: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def add_caller_info(self, stack_depth: int = 2) -> None:
        """Add caller function and line information using stack inspection.

        Args:
            stack_depth (int): Stack depth to inspect for caller information
        """
        try:
            frame_info = inspect.stack(context=0)[stack_depth]
            self.function_name = frame_info.function
            self.line_number = frame_info.lineno
        except (IndexError, AttributeError):
            self.function_name = "<unknown>"
            self.line_number = 0

    def add_thread_info(self) -> None:
        current = threading.current_thread()
        self.thread_id = str(current.ident)
        self.additional_data.setdefault("thread_name", current.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error context to dictionary for logging.

        Returns:
            dict: Dictionary representation of the error context
        """
        result: Dict[str, Any] = {
            "component_name": self.component_name,
            "operation_name": self.operation_name,
            "timestamp": self.timestamp,
        }
        if self.function_name is not None:
            result["function_name"] = self.function_name
        if self.line_number is not None:
            result["line_number"] = self.line_number
        if self.thread_id is not None:
            result["thread_id"] = self.thread_id
        result["additional_data"] = dict(self.additional_data)
        return result


class InterfaceContractError(Exception):
    """Base exception class for all interface_contracts errors.

    Every contract violation raised by the package derives from this class so
    callers can catch the whole taxonomy at once. Instances carry a unique id,
    a severity, an optional structured context and a recovery suggestion.
    """

    default_severity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
        severity: Optional[Union[ErrorSeverity, str]] = None,
        **kwargs: Any,
    ):
        """Initialize base exception with message, context and severity level.

        Args:
            message (str): Primary error description
            context (Optional[ErrorContext]): Error context for debugging and analysis
            severity (ErrorSeverity): Error severity level, defaults to the class severity
        """
        super().__init__(message)

        self.message = message
        self._context_obj: Optional[ErrorContext] = None
        self._context_dict: Optional[Dict[str, Any]] = None
        self.context = context
        if severity is None:
            self.severity = self.default_severity
        elif isinstance(severity, str):
            try:
                self.severity = ErrorSeverity[severity.upper()]
            except KeyError:
                self.severity = self.default_severity
        else:
            self.severity = severity
        self.timestamp = time.time()
        self.error_id = str(uuid.uuid4())
        self.recovery_suggestion: Optional[str] = None
        self.error_details: Dict[str, Any] = {}
        # Extra keyword arguments are kept as details rather than rejected
        for k, v in kwargs.items():
            if k not in {"message", "context", "severity"}:
                self.error_details[k] = v
        self.logged = False

    @property
    def context(self) -> Optional[Union[Dict[str, Any], ErrorContext]]:
        if self._context_dict is not None:
            return dict(self._context_dict)
        return self._context_obj

    @context.setter
    def context(self, value: Optional[Union[ErrorContext, Dict[str, Any]]]) -> None:
        if value is None:
            self._context_obj = None
            self._context_dict = None
        elif isinstance(value, ErrorContext):
            self._context_obj = value
            self._context_dict = None
        elif isinstance(value, dict):
            self._context_dict = dict(value)
            self._context_obj = ErrorContext(
                component_name=self.__class__.__module__,
                operation_name=self.__class__.__name__,
                timestamp=time.time(),
                additional_data=dict(value),
            )
        else:
            raise TypeError(
                "context must be an ErrorContext instance, a dictionary, or None"
            )

    def get_error_details(self) -> Dict[str, Any]:
        """Get error details including context, timestamp and recovery information.

        Returns:
            dict: Dictionary containing all error details and metadata
        """
        details = {
            "error_id": self.error_id,
            "message": self.message,
            "timestamp": self.timestamp,
            "severity": self.severity.name,
            "severity_description": self.severity.get_description(),
            "exception_type": self.__class__.__name__,
            "module": self.__class__.__module__,
        }

        if self._context_dict is not None:
            details["context"] = dict(self._context_dict)
        elif self._context_obj is not None:
            details["context"] = self._context_obj.to_dict()

        if self.recovery_suggestion:
            details["recovery_suggestion"] = self.recovery_suggestion

        details["error_details"] = self.error_details
        return details

    def log_error(self, logger: Optional[logging.Logger] = None) -> None:
        """Log the error once, at a level matching its severity.

        Args:
            logger (Optional[logging.Logger]): Logger instance or None for default
        """
        if self.logged:
            return

        if logger is None:
            logger = logging.getLogger(DEFAULT_EXCEPTIONS_LOGGER)

        context_str = ""
        if self._context_obj:
            context_str = (
                f" [{self._context_obj.component_name}."
                f"{self._context_obj.operation_name}]"
            )
        log_message = f"[{self.error_id}]{context_str} {self.message}"

        if self.severity == ErrorSeverity.LOW:
            logger.info(log_message)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning(log_message)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error(log_message)
        else:  # CRITICAL
            logger.critical(log_message)

        self.logged = True

    def set_recovery_suggestion(self, suggestion: str) -> None:
        if len(suggestion) > RECOVERY_SUGGESTION_MAX_LENGTH:
            suggestion = suggestion[: RECOVERY_SUGGESTION_MAX_LENGTH - 3] + "..."
        self.recovery_suggestion = suggestion
        self.error_details["has_recovery_guidance"] = True

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the error.

        Args:
            key (str): Context key
            value (Any): Context value
        """
        if not key or not isinstance(key, str):
            raise ValueError("Context key must be a non-empty string")
        self.error_details[key] = value


class ConstructionError(InterfaceContractError, TypeError):
    """Raised when an interface descriptor is created with a malformed name or parameter types."""

    default_severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        argument_position: Optional[int] = None,
        received_type: Optional[str] = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.argument_position = argument_position
        self.received_type = received_type
        self.set_recovery_suggestion(
            "Pass a non-empty str name and, optionally, a list or tuple of types "
            "or Any placeholders."
        )


class DuplicateImplementationError(InterfaceContractError, ValueError):
    """Raised when a delegate already owns a binding for an interface."""

    default_severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        interface_name: str,
        delegate: Any = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        self.delegate = delegate
        self.set_recovery_suggestion(
            "Bind each interface once per delegate; in test mode replace the "
            "binding by assignment instead of binding again."
        )


class InvalidImplementationError(InterfaceContractError, TypeError):
    """Raised when the value handed to a binder is not callable."""

    default_severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        interface_name: str,
        implementation: Any = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        self.implementation = implementation


class ArityError(InterfaceContractError, TypeError):
    """Raised when an implementation or a live call has fewer arguments than a contract requires.

    ``received_count`` is the number of positional arguments supplied by a call,
    or the number of contract parameters an implementation can accept when the
    error is raised at bind time.
    """

    def __init__(
        self,
        message: str,
        interface_name: str,
        minimum_arity: int,
        received_count: Optional[int] = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        self.minimum_arity = minimum_arity
        self.received_count = received_count
        self.set_recovery_suggestion(
            f"Supply at least {pluralize_arguments(minimum_arity)}."
        )


class TypeMismatchError(InterfaceContractError, TypeError):
    """Raised when a live call passes an argument of the wrong type at a typed position."""

    def __init__(
        self,
        message: str,
        interface_name: str,
        position: int,
        expected_type: str,
        actual_type: str,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        # 1-based, as reported in the message
        self.position = position
        self.expected_type = expected_type
        self.actual_type = actual_type


class ReadOnlyAssignmentError(InterfaceContractError, AttributeError):
    """Raised when a read-only binding is reassigned or removed."""

    default_severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        interface_name: str,
        delegate: Any = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        self.delegate = delegate
        self.set_recovery_suggestion(
            "Bindings can only be replaced when they were installed in test mode."
        )


class NotImplementedByError(InterfaceContractError, LookupError):
    """Raised when a delegate is asked for a binding it does not have."""

    default_severity = ErrorSeverity.LOW

    def __init__(
        self,
        message: str,
        interface_name: str,
        delegate: Any = None,
        context: Optional[Union[ErrorContext, Dict[str, Any]]] = None,
    ):
        super().__init__(message, context=context)
        self.interface_name = interface_name
        self.delegate = delegate


def pluralize_arguments(count: int) -> str:
    """Return ``"1 argument"`` or ``"<n> arguments"``."""
    return f"{count} argument{'' if count == 1 else 's'}"


def create_error_context(
    operation_name: str,
    component_name: str = "interface",
    include_caller_info: bool = True,
    additional_context: Optional[Dict[str, Any]] = None,
) -> ErrorContext:
    """Create an ErrorContext for a violation raised by ``component_name``.

    Args:
        operation_name (str): Operation that detected the violation
        component_name (str): Component raising the error
        include_caller_info (bool): Whether to record the caller frame
        additional_context (Optional[dict]): Extra data stored on the context

    Returns:
        ErrorContext: Populated context object
    """
    if not operation_name or not isinstance(operation_name, str):
        raise ValueError("Operation name must be a non-empty string")

    context = ErrorContext(
        component_name=component_name,
        operation_name=operation_name,
        timestamp=time.time(),
    )
    if include_caller_info:
        # Skip this helper and the raising method
        context.add_caller_info(stack_depth=3)
    context.add_thread_info()
    if additional_context:
        context.additional_data.update(additional_context)
    return context
