"""Type-checked ordered container for TypeIt.

TypedContainer is a list-like sequence locked to a single runtime type
name. Every push and insert is checked against that type; positional
operations are bounds-checked and never mutate state on failure.
"""

import functools
import logging
import math
from typing import Any, Callable, Iterator, List, Optional, Sequence, Union

from .errors import IndexOutOfRangeError, InvalidArgumentError, TypeMismatchError
from .predicates import PATTERN_PREDICATES
from .types import (
    RUNTIME_TYPE_NAMES,
    ComplexTypes,
    PrimitiveTypes,
    normalize_type_name,
    type_name,
)

logger = logging.getLogger(__name__)

_MISSING = object()

TypeSpec = Union[str, PrimitiveTypes, ComplexTypes]


def is_array_like(value: Any) -> bool:
    """True for lists and tuples; strings, bytes and mappings are not array-like."""
    return isinstance(value, (list, tuple))


def resolve_expected_type(expected_type: TypeSpec) -> str:
    """Normalize a type name that a container can be locked to.

    Pattern categories (email, phone, url) are accepted and checked with
    their predicates. Names no runtime value can have are rejected.

    Raises:
        InvalidArgumentError: If the name is unknown or never produced by
            type_name
    """
    name = normalize_type_name(expected_type)
    if name not in RUNTIME_TYPE_NAMES and name not in PATTERN_PREDICATES:
        raise InvalidArgumentError(f"No runtime value has type {name!r}")
    return name


def _same_value(left: Any, right: Any) -> bool:
    """Exact-match equality: same type name and equal, with NaN equal to NaN."""
    if type_name(left) != type_name(right):
        return False
    if left == right:
        return True
    return (isinstance(left, float) and isinstance(right, float)
            and math.isnan(left) and math.isnan(right))


class TypedContainer:
    """Ordered container that enforces a single element type.

    The expected type is either given at construction, inferred from the
    first initial element, or locked on the first successful insertion.
    The initial elements themselves are not validated.

    Example:
        >>> numbers = TypedContainer([10, 20, 30])
        >>> numbers.push(40).insert_at(1, 15).remove_at(2)
        20
        >>> str(numbers)
        '[10, 15, 30, 40]'
        >>> numbers.reduce(lambda acc, x: acc + x, 0)
        95
    """

    def __init__(self,
                 initial: Optional[Sequence[Any]] = None,
                 expected_type: Optional[TypeSpec] = None):
        """Initialize the container.

        Args:
            initial: list or tuple of starting elements (copied)
            expected_type: Type name to lock to, e.g. "number" or
                PrimitiveTypes.NUMBER; inferred when omitted

        Raises:
            InvalidArgumentError: If initial is not array-like or the type
                name is unknown
        """
        if initial is None:
            initial = []
        if not is_array_like(initial):
            raise InvalidArgumentError(
                f"Initial values must be an array-like structure, got {type_name(initial)}"
            )

        self._data: List[Any] = list(initial)
        self._expected_type: Optional[str] = None

        if expected_type is not None:
            self._expected_type = resolve_expected_type(expected_type)
        elif self._data:
            self._expected_type = type_name(self._data[0])

    @property
    def expected_type(self) -> Optional[str]:
        """Locked type name, or None while nothing has been inserted."""
        return self._expected_type

    # Validation

    def type_guard(self, element: Any) -> None:
        """Check an element against the expected type, locking it if unset.

        Raises:
            TypeMismatchError: If the element has a different type
        """
        if self._expected_type is None:
            self._expected_type = type_name(element)
            logger.debug("Container locked to type %s", self._expected_type)
            return
        self.assert_type(element, self._expected_type)

    @staticmethod
    def assert_type(element: Any, expected_type: TypeSpec) -> None:
        """Raise unless the element has expected_type.

        Pattern categories match strings their predicate accepts; every
        other name must equal the element's type name.

        Raises:
            TypeMismatchError: On mismatch
            InvalidArgumentError: If expected_type cannot be satisfied
        """
        expected = resolve_expected_type(expected_type)
        actual = type_name(element)
        if expected in PATTERN_PREDICATES:
            matched = PATTERN_PREDICATES[expected](element)
        else:
            matched = actual == expected
        if not matched:
            raise TypeMismatchError(expected, actual, element)

    def _check_index(self, index: int, upper: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Index must be an integer, got {type_name(index)}")
        if index < 0 or index > upper:
            raise IndexOutOfRangeError(index, len(self._data))

    # Mutation

    def push(self, element: Any) -> 'TypedContainer':
        """Append an element; returns self for chaining."""
        self.type_guard(element)
        self._data.append(element)
        return self

    def pop(self, default: Any = None) -> Any:
        """Remove and return the last element, or default when empty."""
        if not self._data:
            return default
        return self._data.pop()

    def insert_at(self, index: int, element: Any) -> 'TypedContainer':
        """Insert before index, shifting later elements right.

        Args:
            index: Position in [0, length]; length appends
            element: Value of the expected type

        Raises:
            IndexOutOfRangeError: If index is outside [0, length]
            TypeMismatchError: If element has the wrong type
        """
        self._check_index(index, len(self._data))
        self.type_guard(element)
        self._data.insert(index, element)
        return self

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at index, shifting later elements left.

        Raises:
            IndexOutOfRangeError: If index is outside [0, length)
        """
        self._check_index(index, len(self._data) - 1)
        return self._data.pop(index)

    # Queries

    def at(self, index: int, default: Any = None) -> Any:
        """Element at index, or default when index is outside [0, length)."""
        if isinstance(index, int) and 0 <= index < len(self._data):
            return self._data[index]
        return default

    def length(self) -> int:
        return len(self._data)

    def contains(self, value: Any) -> bool:
        """Exact-match membership; 1 does not match True."""
        return any(_same_value(element, value) for element in self._data)

    # Transformations

    def map(self, fn: Callable[[Any], Any], strict: bool = False) -> 'TypedContainer':
        """Return a new container over fn's outputs.

        The new container's type is inferred from the first output. Outputs
        are only checked against it when strict is True.

        Raises:
            TypeMismatchError: In strict mode, if outputs have mixed types
        """
        mapped = [fn(element) for element in self._data]
        if strict:
            return self._validated(mapped, None)
        return TypedContainer(mapped)

    def filter(self, fn: Callable[[Any], bool], strict: bool = False) -> 'TypedContainer':
        """Return a new container with the elements fn accepts, in order.

        The new container keeps this container's expected type.
        """
        kept = [element for element in self._data if fn(element)]
        if strict:
            return self._validated(kept, self._expected_type)
        return TypedContainer(kept, expected_type=self._expected_type)

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """Fold the elements left to right with fn(accumulator, element)."""
        if initial is _MISSING:
            return functools.reduce(fn, self._data)
        return functools.reduce(fn, self._data, initial)

    def for_each(self, fn: Callable[[Any], Any]) -> None:
        for element in self._data:
            fn(element)

    def clone(self) -> 'TypedContainer':
        """Independent shallow copy with the same expected type."""
        return TypedContainer(self._data, expected_type=self._expected_type)

    def _validated(self, elements: List[Any], expected_type: Optional[str]) -> 'TypedContainer':
        container = TypedContainer(expected_type=expected_type)
        for element in elements:
            container.push(element)
        return container

    # Rendering

    def to_string(self) -> str:
        return f"[{', '.join(str(element) for element in self._data)}]"

    def to_list(self) -> List[Any]:
        """Shallow copy of the elements as a plain list."""
        return list(self._data)

    # Python protocol

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r}, expected_type={self._expected_type!r})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> Any:
        if isinstance(index, int) and not 0 <= index < len(self._data):
            raise IndexOutOfRangeError(index, len(self._data))
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedContainer):
            return NotImplemented
        return self._expected_type == other._expected_type and self._data == other._data

