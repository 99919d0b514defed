"""Contract enforcement tests for exception classes.

Keeps constructor signatures and base classes stable so callers can rely on
both the package hierarchy and the builtin exception types they extend.
"""

import inspect
import logging

import pytest

from interface_contracts.utils.exceptions import (
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


@pytest.mark.parametrize(
    "error_cls, builtin",
    [
        (ConstructionError, TypeError),
        (DuplicateImplementationError, ValueError),
        (InvalidImplementationError, TypeError),
        (ArityError, TypeError),
        (TypeMismatchError, TypeError),
        (ReadOnlyAssignmentError, AttributeError),
        (NotImplementedByError, LookupError),
    ],
)
def test_inherits_from_correct_parents(error_cls, builtin):
    assert issubclass(error_cls, InterfaceContractError)
    assert issubclass(error_cls, builtin)


class TestArityErrorContract:
    def test_signature_is_stable(self):
        params = list(inspect.signature(ArityError.__init__).parameters)
        assert params == [
            "self",
            "message",
            "interface_name",
            "minimum_arity",
            "received_count",
            "context",
        ]

    def test_stores_fields_and_recovery_suggestion(self):
        error = ArityError("boom", interface_name="Foo", minimum_arity=2, received_count=1)

        assert error.message == "boom"
        assert str(error) == "boom"
        assert error.minimum_arity == 2
        assert error.received_count == 1
        assert error.recovery_suggestion == "Supply at least 2 arguments."
        assert error.severity is ErrorSeverity.MEDIUM

    def test_interface_name_is_required(self):
        with pytest.raises(TypeError):
            ArityError("boom")  # type: ignore[call-arg]


class TestTypeMismatchErrorContract:
    def test_signature_is_stable(self):
        params = list(inspect.signature(TypeMismatchError.__init__).parameters)
        assert params == [
            "self",
            "message",
            "interface_name",
            "position",
            "expected_type",
            "actual_type",
            "context",
        ]

    def test_stores_fields(self):
        error = TypeMismatchError(
            "boom", interface_name="Foo", position=1, expected_type="str", actual_type="int"
        )
        assert (error.position, error.expected_type, error.actual_type) == (1, "str", "int")


class TestSeverityDefaults:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (ConstructionError("x"), ErrorSeverity.HIGH),
            (DuplicateImplementationError("x", interface_name="I"), ErrorSeverity.HIGH),
            (InvalidImplementationError("x", interface_name="I"), ErrorSeverity.HIGH),
            (ReadOnlyAssignmentError("x", interface_name="I"), ErrorSeverity.HIGH),
            (NotImplementedByError("x", interface_name="I"), ErrorSeverity.LOW),
            (InterfaceContractError("x"), ErrorSeverity.MEDIUM),
        ],
    )
    def test_default_severity(self, error, expected):
        assert error.severity is expected

    def test_severity_accepts_names(self):
        assert InterfaceContractError("x", severity="critical").severity is ErrorSeverity.CRITICAL
        assert InterfaceContractError("x", severity="bogus").severity is ErrorSeverity.MEDIUM

    def test_escalation(self):
        assert ErrorSeverity.HIGH.should_escalate()
        assert not ErrorSeverity.LOW.should_escalate()
        assert ErrorSeverity.LOW.get_description()


class TestBaseErrorBehaviour:
    def test_error_details(self):
        error = InterfaceContractError("broken", context={"delegate": "Foo"}, hint="x")
        details = error.get_error_details()

        assert details["message"] == "broken"
        assert details["exception_type"] == "InterfaceContractError"
        assert details["context"] == {"delegate": "Foo"}
        assert details["error_details"] == {"hint": "x"}
        assert error.error_id != InterfaceContractError("broken").error_id

    def test_context_object_round_trip(self):
        context = create_error_context("check_arguments", additional_context={"n": 2})
        error = InterfaceContractError("broken", context=context)

        assert error.context is context
        data = error.get_error_details()["context"]
        assert data["operation_name"] == "check_arguments"
        assert data["component_name"] == "interface"
        assert data["additional_data"]["n"] == 2
        assert "thread_id" in data

    def test_rejects_invalid_context(self):
        with pytest.raises(TypeError):
            InterfaceContractError("broken", context=["nope"])

    def test_add_context_validates_key(self):
        error = InterfaceContractError("broken")
        error.add_context("delegate", "Foo")
        assert error.error_details["delegate"] == "Foo"
        with pytest.raises(ValueError):
            error.add_context("", 1)

    def test_log_error_logs_once_at_severity_level(self, caplog):
        logger = logging.getLogger("interface_contracts.tests")
        caplog.set_level(logging.DEBUG, logger="interface_contracts")
        error = ReadOnlyAssignmentError("cannot assign", interface_name="Foo")

        error.log_error(logger)
        error.log_error(logger)

        matching = [r for r in caplog.records if "cannot assign" in r.getMessage()]
        assert len(matching) == 1
        assert matching[0].levelno == logging.ERROR
        assert error.logged

    def test_long_recovery_suggestions_are_truncated(self):
        error = InterfaceContractError("x")
        error.set_recovery_suggestion("a" * 1000)
        assert len(error.recovery_suggestion) == 500
        assert error.recovery_suggestion.endswith("...")


def test_error_context_caller_info():
    context = ErrorContext("interface", "bind", 0.0)
    context.add_caller_info(stack_depth=1)
    assert context.function_name == "test_error_context_caller_info"


def test_pluralize_arguments():
    assert pluralize_arguments(0) == "0 arguments"
    assert pluralize_arguments(1) == "1 argument"
    assert pluralize_arguments(3) == "3 arguments"
