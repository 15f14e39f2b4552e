"""Type taxonomy for TypeIt.

Defines the fixed vocabulary of primitive and complex (computed) type names,
plus the closed ValueKind classification the traversal engine applies to
every value it meets.
"""

import datetime
import inspect
import io
import numbers
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from itertools import chain
from typing import Any, FrozenSet

from .errors import InvalidArgumentError


class PrimitiveTypes(str, Enum):
    """Names of the primitive runtime types."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    NULL = "null"
    UNDEFINED = "undefined"
    SYMBOL = "symbol"
    BIGINT = "bigint"
    VOID = "void"
    NEVER = "never"


class ComplexTypes(str, Enum):
    """Names of the complex types, including the pattern-based categories."""
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    REGEXP = "regexp"
    MAP = "map"
    SET = "set"
    PROMISE = "promise"
    ITERABLE = "iterable"
    FILE = "file"
    BLOB = "blob"
    EMAIL = "email"         # Pattern-based string categories
    PHONE = "phone"
    URL = "url"


# Primitive and complex names in a single enumeration, e.g. Types.EMAIL
Types = Enum(
    "Types",
    [(member.name, member.value) for member in chain(PrimitiveTypes, ComplexTypes)],
    type=str,
    module=__name__,
)

TYPE_NAMES: FrozenSet[str] = frozenset(member.value for member in Types)


class ValueKind(Enum):
    """Closed classification of a runtime value.

    Every value falls into exactly one kind. SEQUENCE and MAPPING are the
    composite kinds the traversal engine expands; all others are leaves.
    """
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    PATTERN = "pattern"     # Compiled regular expression
    SEQUENCE = "sequence"   # list / tuple
    MAPPING = "mapping"     # Any collections.abc.Mapping
    OTHER = "other"

    @property
    def is_composite(self) -> bool:
        """True for kinds whose children are traversed."""
        return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


def classify_kind(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    bool is checked before numbers because it is an int subclass, and str
    is checked before sequences so that strings are always leaves.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, re.Pattern):
        return ValueKind.PATTERN
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.OTHER


_KIND_NAMES = {
    ValueKind.NULL: PrimitiveTypes.NULL.value,
    ValueKind.BOOLEAN: PrimitiveTypes.BOOLEAN.value,
    ValueKind.NUMBER: PrimitiveTypes.NUMBER.value,
    ValueKind.STRING: PrimitiveTypes.STRING.value,
    ValueKind.PATTERN: ComplexTypes.REGEXP.value,
    ValueKind.SEQUENCE: ComplexTypes.ARRAY.value,
    ValueKind.MAPPING: ComplexTypes.OBJECT.value,
}


def type_name(value: Any) -> str:
    """Return the runtime type name of a value.

    The name is always one of TYPE_NAMES. Values outside the closed kinds
    are refined into date, set, blob, file, promise, function and iterable
    before falling back to "object".

    Args:
        value: Any value

    Returns:
        Type name string, e.g. "number" for 3.5 or "array" for [1, 2]
    """
    kind = classify_kind(value)
    if kind is not ValueKind.OTHER:
        return _KIND_NAMES[kind]

    if isinstance(value, (datetime.date, datetime.time)):
        return ComplexTypes.DATE.value
    if isinstance(value, (set, frozenset)):
        return ComplexTypes.SET.value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ComplexTypes.BLOB.value
    if isinstance(value, io.IOBase):
        return ComplexTypes.FILE.value
    if inspect.isawaitable(value):
        return ComplexTypes.PROMISE.value
    if callable(value):
        return PrimitiveTypes.FUNCTION.value
    if isinstance(value, Iterable):
        return ComplexTypes.ITERABLE.value
    return ComplexTypes.OBJECT.value


# Every name type_name can return; undefined, symbol, bigint, void, never
# and map have no runtime counterpart, the pattern categories are strings
RUNTIME_TYPE_NAMES: FrozenSet[str] = frozenset(_KIND_NAMES.values()) | frozenset(
    member.value for member in (
        ComplexTypes.DATE,
        ComplexTypes.SET,
        ComplexTypes.BLOB,
        ComplexTypes.FILE,
        ComplexTypes.PROMISE,
        PrimitiveTypes.FUNCTION,
        ComplexTypes.ITERABLE,
    )
)


def normalize_type_name(name: Any) -> str:
    """Turn a type name or taxonomy enum member into a plain string.

    Raises:
        InvalidArgumentError: If the name is not part of the taxonomy
    """
    value = name.value if isinstance(name, Enum) else name
    if value not in TYPE_NAMES:
        raise InvalidArgumentError(
            f"Unknown type name: {name!r}. "
            f"Choose from: {', '.join(sorted(TYPE_NAMES))}"
        )
    return value
