"""Predicate sets for TypeIt.

A predicate set maps a type name to a one-argument test. The traversal
engine keeps a leaf when at least one predicate in the set accepts it.
Predicate sets are immutable once built so they can be shared freely.
"""

import functools
import logging
import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .errors import PredicateFailureError
from .types import ComplexTypes, PrimitiveTypes, ValueKind, classify_kind

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")
URL_PATTERN = re.compile(r"^(https?|ftp)://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


def is_string(value: Any) -> bool:
    return classify_kind(value) is ValueKind.STRING


def is_number(value: Any) -> bool:
    return classify_kind(value) is ValueKind.NUMBER


def is_boolean(value: Any) -> bool:
    return classify_kind(value) is ValueKind.BOOLEAN


def is_regexp(value: Any) -> bool:
    return classify_kind(value) is ValueKind.PATTERN


def is_email(value: Any) -> bool:
    """Approximate email check; only strings can match."""
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def is_phone(value: Any) -> bool:
    """Approximate E.164-style phone check; only strings can match."""
    return isinstance(value, str) and PHONE_PATTERN.match(value) is not None


def is_url(value: Any) -> bool:
    """Approximate http/https/ftp URL check; only strings can match."""
    return isinstance(value, str) and URL_PATTERN.match(value) is not None


class PredicateSet(Mapping):
    """Read-only mapping from type name to predicate.

    Iteration order is the order the predicates were registered in, which
    is also the order the traversal engine tries them.

    Example:
        >>> predicates = PredicateSet.default().extend(email=is_email)
        >>> predicates.classify("email", "a@b.io")
        True
        >>> predicates.classify("phone", "+1555") is None
        True
    """

    def __init__(self, predicates: Optional[Mapping] = None, **named: Predicate):
        table: Dict[str, Predicate] = {}
        for name, predicate in {**dict(predicates or {}), **named}.items():
            key = name.value if isinstance(name, Enum) else name
            if not isinstance(key, str):
                raise TypeError(f"Predicate names must be strings, got {key!r}")
            if not callable(predicate):
                raise TypeError(f"Predicate for {key!r} is not callable")
            table[key] = predicate
        self._predicates = MappingProxyType(table)

    @classmethod
    def default(cls) -> "PredicateSet":
        """Predicates for string, number, boolean and regexp leaves."""
        return DEFAULT_PREDICATES

    @classmethod
    def with_patterns(cls) -> "PredicateSet":
        """Default predicates plus the email, phone and url patterns."""
        return DEFAULT_PREDICATES.extend(PATTERN_PREDICATES)

    @classmethod
    def coerce(cls, predicates: Union["PredicateSet", Mapping, None]) -> "PredicateSet":
        """Accept a PredicateSet, a plain mapping or None (the default set)."""
        if predicates is None:
            return DEFAULT_PREDICATES
        if isinstance(predicates, PredicateSet):
            return predicates
        return cls(predicates)

    def __getitem__(self, name: str) -> Predicate:
        return self._predicates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._predicates)!r})"

    def classify(self, name: str, value: Any) -> Optional[bool]:
        """Test a value against one named predicate.

        Returns:
            The predicate's verdict, or None if no predicate has that name
        """
        predicate = self._predicates.get(name)
        if predicate is None:
            return None
        return bool(predicate(value))

    def matches(self, value: Any) -> bool:
        """Check whether any predicate accepts the value.

        Exceptions raised by a predicate are not caught.
        """
        return any(predicate(value) for predicate in self._predicates.values())

    def extend(self, predicates: Optional[Mapping] = None, **named: Predicate) -> "PredicateSet":
        """Return a new set with extra predicates; same names are replaced."""
        return PredicateSet({**self._predicates, **dict(predicates or {}), **named})


DEFAULT_PREDICATES = PredicateSet({
    PrimitiveTypes.STRING: is_string,
    PrimitiveTypes.NUMBER: is_number,
    PrimitiveTypes.BOOLEAN: is_boolean,
    ComplexTypes.REGEXP: is_regexp,
})

PATTERN_PREDICATES = PredicateSet({
    ComplexTypes.EMAIL: is_email,
    ComplexTypes.PHONE: is_phone,
    ComplexTypes.URL: is_url,
})


def create_checker(predicate: Predicate) -> Predicate:
    """Wrap a predicate so it never raises.

    Any exception from the wrapped predicate is logged and turned into
    False, which makes the result safe to use inside a traversal.

    Args:
        predicate: Function(value) -> bool

    Returns:
        Function with the same signature that returns False on error
    """
    @functools.wraps(predicate)
    def checker(*args, **kwargs) -> bool:
        try:
            return bool(predicate(*args, **kwargs))
        except Exception as e:
            logger.error("Type check function failed: %s", e)
            return False

    return checker


def assert_type(value: Any, checker: Predicate) -> Any:
    """Return the value if the checker accepts it.

    Raises:
        PredicateFailureError: If the checker rejects the value
    """
    if not checker(value):
        raise PredicateFailureError(value)
    return value
