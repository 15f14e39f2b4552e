"""TypeIt - runtime type classification and nested-structure traversal.

TypeIt classifies runtime values against a fixed taxonomy of primitive and
computed types, flattens nested lists/tuples/mappings into their matching
scalar leaves, and provides a container locked to a single element type.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Flatten:
    from typeit import traverse
    traverse([[1, 2], [3, 4]], order="depth-first")   # [3, 4, 1, 2]

Type-checked container:
    from typeit import TypedContainer
    TypedContainer([10, 20, 30]).push(40)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .errors import (
    TypeItError,
    InvalidArgumentError,
    TypeMismatchError,
    IndexOutOfRangeError,
    PredicateFailureError,
)
from .types import (
    PrimitiveTypes,
    ComplexTypes,
    Types,
    TYPE_NAMES,
    ValueKind,
    classify_kind,
    type_name,
)
from .predicates import (
    PredicateSet,
    DEFAULT_PREDICATES,
    PATTERN_PREDICATES,
    is_string,
    is_number,
    is_boolean,
    is_regexp,
    is_email,
    is_phone,
    is_url,
    create_checker,
    assert_type,
)
from .config import TraversalConfig, TraversalStrategy, TraversalType
from .traverser import (
    LeafTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    create_traverser,
)
from .container import TypedContainer
from .api import (
    traverse,
    iter_leaves,
    bfs_traversal,
    dfs_traversal,
    collect_leaves,
)

__all__ = [
    "__version__",
    # Errors
    'TypeItError',
    'InvalidArgumentError',
    'TypeMismatchError',
    'IndexOutOfRangeError',
    'PredicateFailureError',
    # Taxonomy
    'PrimitiveTypes',
    'ComplexTypes',
    'Types',
    'TYPE_NAMES',
    'ValueKind',
    'classify_kind',
    'type_name',
    # Predicates
    'PredicateSet',
    'DEFAULT_PREDICATES',
    'PATTERN_PREDICATES',
    'is_string',
    'is_number',
    'is_boolean',
    'is_regexp',
    'is_email',
    'is_phone',
    'is_url',
    'create_checker',
    'assert_type',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'TraversalType',
    # Traversal
    'LeafTraverser',
    'BreadthFirstTraverser',
    'DepthFirstTraverser',
    'create_traverser',
    'traverse',
    'iter_leaves',
    'bfs_traversal',
    'dfs_traversal',
    'collect_leaves',
    # Container
    'TypedContainer',
]
