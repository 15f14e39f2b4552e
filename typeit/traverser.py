"""Leaf traversal strategies for TypeIt.

Traversers walk an arbitrarily nested structure of sequences and mappings
and yield the scalar leaves accepted by a predicate set. Lists and tuples
are expanded in index order, mappings in iteration order; everything else
is a leaf.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Mapping, Optional, Set, Tuple, Union

from .config import TraversalStrategy, parse_strategy
from .predicates import PredicateSet
from .types import ValueKind, classify_kind


def iter_children(item: Any, kind: ValueKind) -> Iterator[Any]:
    """Enumerate the children of a composite in natural order.

    Args:
        item: A composite value
        kind: Its ValueKind (SEQUENCE or MAPPING)

    Returns:
        Iterator over list/tuple items or mapping values
    """
    if kind is ValueKind.MAPPING:
        return iter(item.values())
    return iter(item)


class LeafTraverser(ABC):
    """Abstract base class for leaf traversal strategies.

    The traverser never mutates the structure it walks. Without the cycle
    guard a self-referential structure is walked forever.
    """

    def __init__(self,
                 predicates: Union[PredicateSet, Mapping, None] = None,
                 guard_cycles: bool = False):
        """Initialize traverser.

        Args:
            predicates: Leaf tests; None means the default predicate set
            guard_cycles: Expand each composite at most once, by identity
        """
        self.predicates = PredicateSet.coerce(predicates)
        self.guard_cycles = guard_cycles

    @abstractmethod
    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Any]:
        """Traverse the structure starting from root.

        Args:
            root: Any value; composites are expanded
            max_depth: Deepest level leaves are collected from (None = unlimited)

        Yields:
            Matching leaves in visitation order
        """
        pass

    def collect(self, root: Any, max_depth: Optional[int] = None) -> List[Any]:
        """Run the traversal to completion and return the leaves as a list."""
        return list(self.traverse(root, max_depth))

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a composite at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth

    def _first_visit(self, item: Any, visited: Set[int]) -> bool:
        """Record a composite and report whether it is new.

        Always True when the cycle guard is off.
        """
        if not self.guard_cycles:
            return True
        item_id = id(item)
        if item_id in visited:
            return False
        visited.add(item_id)
        return True


class BreadthFirstTraverser(LeafTraverser):
    """Breadth-first leaf traversal.

    Every item goes through a FIFO queue, so all leaves at depth N come
    before leaves at depth N+1:

        [[1, 2], [3, 4]]  ->  [1, 2, 3, 4]
    """

    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Any]:
        # Queue stores (item, depth) tuples
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            item, depth = queue.popleft()
            kind = classify_kind(item)

            if not kind.is_composite:
                if self.predicates.matches(item):
                    yield item
                continue

            if not self._should_explore(depth, max_depth):
                continue
            if not self._first_visit(item, visited):
                continue

            for child in iter_children(item, kind):
                queue.append((child, depth + 1))


class DepthFirstTraverser(LeafTraverser):
    """Depth-first leaf traversal driven by a LIFO stack.

    When a composite is popped its children are enumerated in natural
    order: scalar children are classified right away, composite children
    are pushed. The last composite pushed is expanded first, so sibling
    composites come out in reverse order:

        [[1, 2], [3, 4]]  ->  [3, 4, 1, 2]
    """

    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Any]:
        root_kind = classify_kind(root)
        if not root_kind.is_composite:
            if self.predicates.matches(root):
                yield root
            return

        # Stack stores (item, kind, depth) for composites only
        stack: List[Tuple[Any, ValueKind, int]] = [(root, root_kind, 0)]
        visited: Set[int] = set()

        while stack:
            item, kind, depth = stack.pop()

            if not self._should_explore(depth, max_depth):
                continue
            if not self._first_visit(item, visited):
                continue

            for child in iter_children(item, kind):
                child_kind = classify_kind(child)
                if child_kind.is_composite:
                    stack.append((child, child_kind, depth + 1))
                elif self.predicates.matches(child):
                    yield child


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     predicates: Union[PredicateSet, Mapping, None] = None,
                     guard_cycles: bool = False) -> LeafTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (bfs, dfs, breadth-first, depth-first)
        predicates: Leaf tests; None means the default predicate set
        guard_cycles: Expand each composite at most once

    Returns:
        LeafTraverser instance

    Raises:
        InvalidArgumentError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
        TraversalStrategy.DEPTH_FIRST: DepthFirstTraverser,
    }
    return strategies[parse_strategy(strategy)](predicates, guard_cycles=guard_cycles)
