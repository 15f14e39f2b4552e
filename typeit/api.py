"""High-level API for TypeIt.

This module provides simple, functional interfaces for flattening nested
structures. These functions wrap the traverser classes for ease of use in
simple cases.
"""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Union

from .config import TraversalConfig, TraversalStrategy
from .container import TypedContainer
from .predicates import PredicateSet
from .traverser import create_traverser
from .types import ComplexTypes, PrimitiveTypes

logger = logging.getLogger(__name__)

PredicateInput = Union[PredicateSet, Mapping, None]


def iter_leaves(
    root: Any,
    predicates: PredicateInput = None,
    order: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    guard_cycles: bool = False,
    max_depth: Optional[int] = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Any]:
    """Lazily yield the matching leaves of a nested structure.

    The configuration is validated when this is called; the structure is
    only walked as the returned iterator is consumed.

    Args:
        root: Any value; lists, tuples and mappings are expanded
        predicates: Leaf tests (PredicateSet or name -> callable mapping);
            None means string/number/boolean/regexp
        order: "breadth-first"/"bfs" or "depth-first"/"dfs"
        guard_cycles: Expand each composite at most once, by identity
        max_depth: Deepest level leaves are collected from (root = 0)
        config: Complete TraversalConfig; overrides the other options

    Returns:
        Iterator over matching leaves in visitation order

    Raises:
        InvalidArgumentError: If the order or configuration is invalid
    """
    if config is None:
        config = TraversalConfig(
            strategy=order,
            predicates=predicates,
            guard_cycles=guard_cycles,
            max_depth=max_depth,
        )
    config.ensure_valid()
    logger.debug("Starting %s traversal", config.strategy.name.lower())

    traverser = create_traverser(
        config.strategy, config.predicates, guard_cycles=config.guard_cycles
    )
    return traverser.traverse(root, max_depth=config.max_depth)


def traverse(
    root: Any,
    predicates: PredicateInput = None,
    order: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    **kwargs
) -> List[Any]:
    """Flatten a nested structure into a list of matching leaves.

    This is the primary high-level function. Predicate errors are not
    caught and propagate to the caller unchanged.

    Args:
        root: Any value; lists, tuples and mappings are expanded
        predicates: Leaf tests; None means the default predicate set
        order: Traversal order (see iter_leaves)
        **kwargs: guard_cycles, max_depth or config (see iter_leaves)

    Returns:
        New list of leaves in visitation order

    Example:
        >>> traverse([[1, 2], [3, 4]])
        [1, 2, 3, 4]
        >>> traverse([[1, 2], [3, 4]], order="depth-first")
        [3, 4, 1, 2]
        >>> traverse(["a", True, {}], {"number": lambda v: type(v) is int})
        []
    """
    leaves = list(iter_leaves(root, predicates, order, **kwargs))
    logger.debug("Traversal collected %d leaves", len(leaves))
    return leaves


def bfs_traversal(root: Any, predicates: PredicateInput = None) -> List[Any]:
    """Breadth-first flattening with the given (or default) predicates."""
    return traverse(root, predicates, TraversalStrategy.BREADTH_FIRST)


def dfs_traversal(root: Any, predicates: PredicateInput = None) -> List[Any]:
    """Depth-first flattening with the given (or default) predicates."""
    return traverse(root, predicates, TraversalStrategy.DEPTH_FIRST)


def collect_leaves(
    root: Any,
    predicates: PredicateInput = None,
    order: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    expected_type: Optional[Union[str, PrimitiveTypes, ComplexTypes]] = None,
    **kwargs
) -> TypedContainer:
    """Traverse and gather the leaves into a type-checked container.

    Every leaf is pushed, so a leaf of a different type than the first one
    (or than expected_type) raises TypeMismatchError.

    Args:
        root: Any value
        predicates: Leaf tests; None means the default predicate set
        order: Traversal order
        expected_type: Type to lock the container to
        **kwargs: guard_cycles, max_depth or config (see iter_leaves)

    Returns:
        TypedContainer holding the leaves in visitation order
    """
    container = TypedContainer(expected_type=expected_type)
    for leaf in iter_leaves(root, predicates, order, **kwargs):
        container.push(leaf)
    return container
