"""Tests for the Optional container."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from domaincrafters_std.domain.exceptions import (
    IllegalArgumentException,
    IllegalStateException,
    NotFoundException,
)
from domaincrafters_std.domain.optional import Optional


class TestConstruction:
    @pytest.mark.parametrize("value", [42, "text", 0, "", False, [1, 2], {"a": 1}])
    def test_of_holds_value(self, value: object) -> None:
        optional = Optional.of(value)
        assert optional.is_present
        assert optional.value is value

    def test_of_none_raises(self) -> None:
        with pytest.raises(IllegalArgumentException, match="Cannot create Optional.of with None"):
            Optional.of(None)

    def test_of_nullable_with_value(self) -> None:
        optional = Optional.of_nullable("test")
        assert optional.is_present
        assert optional.value == "test"

    def test_of_nullable_with_none_is_empty(self) -> None:
        assert not Optional.of_nullable(None).is_present

    def test_falsy_values_are_present(self) -> None:
        """Only None means absent; 0, "" and False are real values."""
        assert Optional.of_nullable(0).is_present
        assert Optional.of_nullable("").is_present
        assert Optional.of_nullable(False).is_present

    def test_empty(self) -> None:
        assert not Optional.empty().is_present


class TestAccessors:
    def test_value_on_empty_raises(self) -> None:
        with pytest.raises(IllegalStateException, match="Value is not present"):
            _ = Optional.empty().value

    def test_get_or_else_present(self) -> None:
        assert Optional.of(42).get_or_else(0) == 42

    @pytest.mark.parametrize("default", [0, "fallback", None, [1]])
    def test_get_or_else_empty_returns_default(self, default: object) -> None:
        assert Optional.empty().get_or_else(default) is default

    def test_get_or_else_keeps_falsy_value(self) -> None:
        assert Optional.of(0).get_or_else(99) == 0


class TestMap:
    def test_applies_mapper(self) -> None:
        result = Optional.of(5).map(lambda x: x * 2)
        assert result.is_present
        assert result.value == 10

    def test_mapper_returning_none_gives_empty(self) -> None:
        assert not Optional.of(5).map(lambda _: None).is_present

    def test_empty_does_not_call_mapper(self) -> None:
        calls: list[int] = []
        result = Optional.empty().map(lambda x: calls.append(x))
        assert not result.is_present
        assert calls == []

    def test_mapper_exception_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Optional.of(1).map(lambda x: x / 0)


class TestFlatMap:
    def test_returns_mapper_result(self) -> None:
        result = Optional.of(5).flat_map(lambda x: Optional.of(x * 2))
        assert result.is_present
        assert result.value == 10

    def test_result_is_not_rewrapped(self) -> None:
        inner = Optional.of("inner")
        assert Optional.of(1).flat_map(lambda _: inner) is inner

    def test_mapper_returning_none_gives_empty(self) -> None:
        assert not Optional.of(5).flat_map(lambda _: None).is_present

    def test_mapper_returning_empty(self) -> None:
        assert not Optional.of(5).flat_map(lambda _: Optional.empty()).is_present

    def test_empty_does_not_call_mapper(self) -> None:
        calls: list[int] = []

        def mapper(x: int) -> Optional[int]:
            calls.append(x)
            return Optional.of(x)

        assert not Optional.empty().flat_map(mapper).is_present
        assert calls == []


class TestFilter:
    def test_predicate_true_returns_same_instance(self) -> None:
        optional = Optional.of(5)
        result = optional.filter(lambda x: x > 3)
        assert result is optional
        assert result.value == 5

    def test_predicate_false_gives_empty(self) -> None:
        assert not Optional.of(2).filter(lambda x: x > 3).is_present

    def test_empty_returns_itself(self) -> None:
        optional: Optional[int] = Optional.empty()
        assert optional.filter(lambda x: x > 3) is optional


class TestIfPresent:
    def test_calls_consumer_when_present(self) -> None:
        seen: list[str] = []
        assert Optional.of("hello").if_present(seen.append) is None
        assert seen == ["hello"]

    def test_skips_consumer_when_empty(self) -> None:
        seen: list[str] = []
        Optional.empty().if_present(seen.append)
        assert seen == []

    def test_consumer_exception_propagates(self) -> None:
        def consumer(_: object) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            Optional.of(1).if_present(consumer)


class TestRaisingAccessors:
    def test_or_else_raise_returns_value(self) -> None:
        assert Optional.of(5).or_else_raise(lambda: ValueError("missing")) == 5

    def test_or_else_raise_raises_factory_error(self) -> None:
        with pytest.raises(ValueError, match="Custom error"):
            Optional.empty().or_else_raise(lambda: ValueError("Custom error"))

    def test_get_or_raise_returns_value(self) -> None:
        assert Optional.of(42).get_or_raise("Value not found") == 42

    def test_get_or_raise_raises_not_found(self) -> None:
        with pytest.raises(NotFoundException) as exc_info:
            Optional.empty().get_or_raise("Could not find this value.")
        assert exc_info.value.message == "Could not find this value."


class TestEquality:
    def test_same_scalar_values_equal(self) -> None:
        assert Optional.of(5).equals(Optional.of(5))
        assert Optional.of(5) == Optional.of(5)
        assert Optional.of("a") == Optional.of("a")

    def test_different_values_not_equal(self) -> None:
        assert not Optional.of(5).equals(Optional.of(10))

    def test_two_empties_equal(self) -> None:
        assert Optional.empty().equals(Optional.empty())

    def test_empty_and_present_not_equal(self) -> None:
        assert not Optional.of(5).equals(Optional.empty())
        assert not Optional.empty().equals(Optional.of(5))

    def test_objects_compare_by_identity(self) -> None:
        obj1 = {"a": 1}
        obj2 = {"a": 1}
        assert Optional.of(obj1).equals(Optional.of(obj1))
        assert not Optional.of(obj1).equals(Optional.of(obj2))

    def test_not_equal_to_raw_value(self) -> None:
        assert Optional.of(5) != 5

    def test_hash_consistent_with_equality(self) -> None:
        obj = [1]
        assert hash(Optional.of(5)) == hash(Optional.of(5))
        assert hash(Optional.of(obj)) == hash(Optional.of(obj))
        assert len({Optional.empty(), Optional.empty(), Optional.of(5), Optional.of(5)}) == 2


class TestDisplay:
    def test_str_present(self) -> None:
        assert str(Optional.of(5)) == "Optional(5)"

    def test_str_empty(self) -> None:
        assert str(Optional.empty()) == "Optional.empty"

    def test_repr_uses_payload_repr(self) -> None:
        assert repr(Optional.of("x")) == "Optional('x')"


class TestImmutability:
    def test_cannot_set_attributes(self) -> None:
        optional = Optional.of(5)
        with pytest.raises(AttributeError):
            optional._value = 6  # type: ignore[misc]
        assert optional.value == 5

    def test_is_a_frozen_slotted_dataclass(self) -> None:
        optional = Optional.of([1])
        with pytest.raises(FrozenInstanceError):
            optional._value = None  # type: ignore[misc]
        assert not hasattr(optional, "__dict__")
