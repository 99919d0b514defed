"""Tests for construction and the call-time argument guard of Interface."""

import typing

import pytest

from interface_contracts import (
    Any,
    ArityError,
    ConstructionError,
    Interface,
    TypeMismatchError,
)


class TestConstruction:
    def test_requires_str_name(self):
        with pytest.raises(
            ConstructionError,
            match='Constructor expected argument 1 to be of type "str" but got "NoneType"',
        ):
            Interface(None)

    def test_rejects_empty_name(self):
        with pytest.raises(ConstructionError, match="non-empty string"):
            Interface("")

    @pytest.mark.parametrize("bad", ["bar", 3, {"a": str}, {str}])
    def test_parameter_types_must_be_a_sequence(self, bad):
        with pytest.raises(
            ConstructionError,
            match="Constructor expected argument 2 to be None or a sequence",
        ):
            Interface("foo", bad)

    def test_rejects_entries_that_are_not_type_tags(self):
        with pytest.raises(ConstructionError, match="Parameter type 2") as excinfo:
            Interface("foo", [str, "int"])
        assert excinfo.value.argument_position == 2
        assert excinfo.value.received_type == "str"

    def test_returns_new_interface(self):
        i = Interface("foo", [str])
        j = Interface("foo")

        assert isinstance(i, Interface)
        assert isinstance(j, Interface)
        assert i.parameter_types == (str,)
        assert j.parameter_types == ()
        assert j.arity == 0

    def test_same_name_produces_distinct_keys(self):
        i = Interface("Foo")
        j = Interface("Foo")

        assert i.key != j.key
        assert str(i) == i.key
        assert "Foo" in i.key
        assert i != j

    def test_parameter_types_are_frozen(self):
        types = [str, int]
        i = Interface("foo", types)
        types.append(float)

        assert i.parameter_types == (str, int)
        with pytest.raises(AttributeError):
            i.parameter_types = (float,)

    def test_accepts_tuple_tags_and_typing_any(self):
        i = Interface("foo", [(int, float), typing.Any, Any])
        assert i.arity == 3

    def test_repr_names_contract(self):
        assert repr(Interface("Greeter", [str, Any])) == "<Interface 'Greeter' (str, Any)>"


class TestArity:
    def test_passes_with_exact_count(self):
        assert Interface("Foo", [Any, Any]).check_arguments(1, 2) is True

    def test_singular_message(self):
        i = Interface("Bar", [Any])
        with pytest.raises(ArityError, match=r"Must be invoked with at least 1 argument\.") as excinfo:
            i.check_arguments()
        assert excinfo.value.minimum_arity == 1
        assert excinfo.value.received_count == 0

    def test_plural_message(self):
        i = Interface("Foo", [Any, Any])
        with pytest.raises(ArityError, match=r"\[Interface: Foo\] Must be invoked with at least 2 arguments\."):
            i.check_arguments(None)

    def test_zero_arity_accepts_anything(self):
        i = Interface("Foo")
        assert i.check_arguments() is True
        assert i.check_arguments(1, "a", None) is True

    def test_arity_errors_are_type_errors(self):
        with pytest.raises(TypeError):
            Interface("Foo", [Any]).check_arguments()


class TestTypeChecks:
    def test_reports_first_mismatch(self):
        i = Interface("Foo", [str, bool])

        with pytest.raises(TypeMismatchError, match='Expected argument 1 to be of type "str"') as excinfo:
            i.check_arguments(None, None)
        assert excinfo.value.position == 1
        assert excinfo.value.actual_type == "NoneType"

        with pytest.raises(TypeMismatchError, match='Expected argument 2 to be of type "bool" but got "NoneType"'):
            i.check_arguments("foo", None)

    def test_accepts_matching_arguments_and_extras(self):
        i = Interface("Foo", [str, bool])

        assert i.check_arguments("foo", True)
        assert i.check_arguments("foo", True, "bar")
        assert i.check_arguments("foo", True, 1, 2, 3)

    def test_wildcard_positions_are_never_checked(self):
        i = Interface("Foo", [Any, int])

        assert i.check_arguments(None, 1)
        assert i.check_arguments(object(), 2)
        with pytest.raises(TypeMismatchError) as excinfo:
            i.check_arguments(None, "2")
        assert excinfo.value.position == 2

    def test_subclass_instances_match(self):
        class Base:
            pass

        class Child(Base):
            pass

        assert Interface("Foo", [Base]).check_arguments(Child())

    def test_tuple_tags_use_isinstance_semantics(self):
        i = Interface("Num", [(int, float)])

        assert i.check_arguments(1)
        assert i.check_arguments(1.5)
        with pytest.raises(TypeMismatchError, match='"int \\| float" but got "str"'):
            i.check_arguments("1")

