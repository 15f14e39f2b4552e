"""Exception hierarchy for TypeIt.

Every failure raised by the library derives from TypeItError, and each
concrete error also derives from the closest built-in exception so callers
can catch either.
"""

from typing import Any, Optional


class TypeItError(Exception):
    """Base exception class for errors raised by TypeIt."""


class InvalidArgumentError(TypeItError, ValueError):
    """Raised when an argument fails a basic shape check.

    Examples: constructing a container from something that is not
    array-like, or asking for an unknown traversal order.
    """


class TypeMismatchError(TypeItError, TypeError):
    """Raised when a value's runtime type differs from the expected type."""

    def __init__(self, expected: str, actual: str, value: Any = None):
        self.expected = expected
        self.actual = actual
        self.value = value
        super().__init__(f"Expected type {expected}, but received {actual}")


class IndexOutOfRangeError(TypeItError, IndexError):
    """Raised when a positional operation receives an index outside its bound."""

    def __init__(self, index: int, length: int, message: Optional[str] = None):
        self.index = index
        self.length = length
        super().__init__(message or f"Index {index} out of bounds for length {length}")


class PredicateFailureError(TypeItError):
    """Raised when a value fails a type assertion."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Type assertion failed for value: {value!r}")
