"""
Tests for the type-checked ordered container.
"""

import math
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from typeit import (
    TypedContainer,
    PrimitiveTypes,
    InvalidArgumentError,
    TypeMismatchError,
    IndexOutOfRangeError,
    TypeItError,
)


@pytest.fixture
def numbers():
    return TypedContainer([10, 20, 30])


class TestConstruction:
    """Construction and expected-type inference."""

    def test_infers_type_from_first_element(self, numbers):
        assert numbers.expected_type == "number"
        assert numbers.length() == 3

    def test_empty_container_locks_on_first_push(self):
        container = TypedContainer()
        assert container.expected_type is None
        container.push("a")
        assert container.expected_type == "string"
        with pytest.raises(TypeMismatchError):
            container.push(1)

    def test_explicit_expected_type(self):
        container = TypedContainer(expected_type=PrimitiveTypes.BOOLEAN)
        assert container.expected_type == "boolean"
        with pytest.raises(TypeMismatchError):
            container.push(1)
        container.push(True)
        assert len(container) == 1

    def test_initial_values_not_validated(self):
        """Only mutations are checked; mixed initial values are accepted."""
        container = TypedContainer([1, "two", 3])
        assert container.expected_type == "number"
        assert container.length() == 3

    @pytest.mark.parametrize("initial", ["abc", 42, {"a": 1}, {1, 2}])
    def test_rejects_non_array_like(self, initial):
        with pytest.raises(InvalidArgumentError):
            TypedContainer(initial)

    def test_accepts_tuple(self):
        assert TypedContainer((1, 2)).to_list() == [1, 2]

    def test_unknown_type_name(self):
        with pytest.raises(InvalidArgumentError):
            TypedContainer(expected_type="integer")

    @pytest.mark.parametrize("name", ["undefined", "symbol", "bigint", "void", "never", "map"])
    def test_rejects_type_no_value_can_have(self, name):
        with pytest.raises(InvalidArgumentError):
            TypedContainer(expected_type=name)
        with pytest.raises(InvalidArgumentError):
            TypedContainer.assert_type(None, name)

    def test_pattern_expected_type(self):
        emails = TypedContainer(expected_type="email")
        emails.push("a@b.io").insert_at(0, "jane@example.com")
        with pytest.raises(TypeMismatchError) as exc_info:
            emails.push("not an email")
        assert exc_info.value.expected == "email"
        with pytest.raises(TypeMismatchError):
            emails.push(42)
        assert emails.to_list() == ["jane@example.com", "a@b.io"]
        assert emails.filter(lambda v: True).expected_type == "email"

    def test_does_not_alias_initial_list(self):
        initial = [1, 2]
        container = TypedContainer(initial)
        container.push(3)
        assert initial == [1, 2]


class TestMutation:
    """push / pop / insert_at / remove_at."""

    def test_push_chains(self, numbers):
        assert numbers.push(40).push(50) is numbers
        assert numbers.to_list() == [10, 20, 30, 40, 50]

    def test_push_wrong_type_leaves_length(self, numbers):
        with pytest.raises(TypeMismatchError) as exc_info:
            numbers.push("x")
        assert numbers.length() == 3
        assert exc_info.value.expected == "number"
        assert exc_info.value.actual == "string"
        assert "Expected type number, but received string" in str(exc_info.value)

    def test_bool_is_not_a_number(self, numbers):
        with pytest.raises(TypeMismatchError):
            numbers.push(True)

    def test_type_mismatch_is_type_error(self, numbers):
        with pytest.raises(TypeError):
            numbers.push(None)

    def test_pop(self, numbers):
        assert numbers.pop() == 30
        assert numbers.length() == 2

    def test_pop_empty_returns_default(self):
        container = TypedContainer()
        assert container.pop() is None
        assert container.pop(default=-1) == -1
        assert container.length() == 0

    def test_insert_bounds(self, numbers):
        numbers.insert_at(3, 9)
        assert numbers.to_list() == [10, 20, 30, 9]
        with pytest.raises(IndexOutOfRangeError):
            numbers.insert_at(5, 9)
        with pytest.raises(IndexOutOfRangeError):
            numbers.insert_at(-1, 9)
        assert numbers.length() == 4

    def test_insert_past_end_fails(self, numbers):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            numbers.insert_at(4, 9)
        assert exc_info.value.index == 4
        assert exc_info.value.length == 3
        assert numbers.length() == 3

    def test_insert_wrong_type(self, numbers):
        with pytest.raises(TypeMismatchError):
            numbers.insert_at(0, "x")
        assert numbers.to_list() == [10, 20, 30]

    def test_remove_bounds(self, numbers):
        with pytest.raises(IndexOutOfRangeError):
            numbers.remove_at(3)
        assert numbers.remove_at(2) == 30
        assert numbers.to_list() == [10, 20]

    def test_remove_from_empty(self):
        with pytest.raises(IndexOutOfRangeError):
            TypedContainer().remove_at(0)

    def test_index_errors_share_base(self, numbers):
        with pytest.raises(IndexError):
            numbers.remove_at(10)
        with pytest.raises(TypeItError):
            numbers.remove_at(10)

    def test_non_integer_index(self, numbers):
        with pytest.raises(InvalidArgumentError):
            numbers.insert_at("1", 5)

    def test_scenario(self, numbers):
        numbers.push(40)
        assert numbers.to_list() == [10, 20, 30, 40]
        numbers.insert_at(1, 15)
        assert numbers.to_list() == [10, 15, 20, 30, 40]
        numbers.remove_at(2)
        assert numbers.to_string() == "[10, 15, 30, 40]"
        assert numbers.reduce(lambda acc, value: acc + value, 0) == 95


class TestQueries:
    """at / length / contains and the Python protocol."""

    def test_at(self, numbers):
        assert numbers.at(0) == 10
        assert numbers.at(2) == 30
        assert numbers.at(3) is None
        assert numbers.at(-1) is None
        assert numbers.at(99, default="missing") == "missing"

    def test_contains_exact_match(self):
        container = TypedContainer([1, 2.5, float("nan")])
        assert container.contains(1)
        assert container.contains(2.5)
        assert container.contains(float("nan"))
        assert not container.contains(True)
        assert not container.contains("1")
        assert 2.5 in container

    def test_protocol(self, numbers):
        assert len(numbers) == 3
        assert list(numbers) == [10, 20, 30]
        assert numbers[1] == 20
        with pytest.raises(IndexOutOfRangeError):
            numbers[3]
        assert repr(numbers) == "TypedContainer([10, 20, 30], expected_type='number')"

    def test_equality(self, numbers):
        assert numbers == TypedContainer([10, 20, 30])
        assert numbers != TypedContainer([10, 20])
        assert numbers != [10, 20, 30]


class TestTransformations:
    """map / filter / reduce / for_each / clone."""

    def test_map_returns_new_container(self, numbers):
        doubled = numbers.map(lambda x: x * 2)
        assert doubled is not numbers
        assert doubled.to_list() == [20, 40, 60]
        assert numbers.to_list() == [10, 20, 30]
        assert numbers.length() == 3

    def test_map_infers_new_type(self, numbers):
        labels = numbers.map(str)
        assert labels.expected_type == "string"
        assert labels.to_list() == ["10", "20", "30"]

    def test_map_does_not_revalidate_by_default(self):
        mixed = TypedContainer([1, 2]).map(lambda x: x if x == 1 else "two")
        assert mixed.to_list() == [1, "two"]

    def test_map_strict(self):
        with pytest.raises(TypeMismatchError):
            TypedContainer([1, 2]).map(lambda x: x if x == 1 else "two", strict=True)
        assert TypedContainer([1, 2]).map(float, strict=True).expected_type == "number"

    def test_filter(self, numbers):
        big = numbers.filter(lambda x: x > 15)
        assert big.to_list() == [20, 30]
        assert big.expected_type == "number"
        assert numbers.length() == 3

    def test_filter_keeps_type_when_empty(self, numbers):
        none = numbers.filter(lambda x: False)
        assert none.length() == 0
        assert none.expected_type == "number"
        with pytest.raises(TypeMismatchError):
            none.push("x")

    def test_filter_strict(self):
        container = TypedContainer([1, "a", 2])
        assert container.filter(lambda x: True).length() == 3
        with pytest.raises(TypeMismatchError):
            container.filter(lambda x: True, strict=True)

    def test_reduce(self, numbers):
        assert numbers.reduce(lambda acc, x: acc + x, 0) == 60
        assert numbers.reduce(max) == 30
        assert TypedContainer().reduce(lambda acc, x: acc + x, 7) == 7

    def test_for_each(self, numbers):
        seen = []
        assert numbers.for_each(seen.append) is None
        assert seen == [10, 20, 30]

    def test_clone_is_independent(self, numbers):
        copy = numbers.clone()
        assert copy.to_string() == numbers.to_string()
        assert copy.expected_type == numbers.expected_type
        copy.push(40)
        copy.remove_at(0)
        assert numbers.length() == 3
        assert numbers.to_list() == [10, 20, 30]

    def test_clone_keeps_explicit_type(self):
        copy = TypedContainer(expected_type="string").clone()
        with pytest.raises(TypeMismatchError):
            copy.push(1)


class TestRendering:

    def test_to_string(self, numbers):
        assert numbers.to_string() == "[10, 20, 30]"
        assert str(numbers) == "[10, 20, 30]"
        assert str(TypedContainer()) == "[]"

    def test_assert_type(self, numbers):
        numbers.assert_type(20, "number")
        with pytest.raises(TypeMismatchError):
            numbers.assert_type("not a number", "number")

    def test_infinity_renders(self):
        assert TypedContainer([math.inf]).to_string() == "[inf]"
