"""Configuration system for TypeIt traversals.

This module defines how users specify a traversal: which order to walk
the structure in, which leaves to keep, and the optional safety limits.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .errors import InvalidArgumentError
from .predicates import PredicateSet


class TraversalStrategy(Enum):
    """How to walk a nested structure.

    The values double as the short order names, so
    TraversalStrategy("bfs") works.
    """
    BREADTH_FIRST = "bfs"   # FIFO queue
    DEPTH_FIRST = "dfs"     # LIFO stack

    # Short names
    BFS = "bfs"
    DFS = "dfs"


# Alternative name for the enumeration
TraversalType = TraversalStrategy

_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth-first': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'depth-first': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or one of its string names

    Returns:
        TraversalStrategy enum value

    Raises:
        InvalidArgumentError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise InvalidArgumentError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES)}"
    )


@dataclass
class TraversalConfig:
    """Complete configuration for a leaf traversal.

    Attributes:
        strategy: Breadth-first or depth-first visitation
        predicates: Leaf tests; None means the default predicate set
        guard_cycles: Skip composites that were already expanded, by identity
        max_depth: Deepest level leaves are collected from (root = 0);
            None = unlimited
    """

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    predicates: PredicateSet = field(default_factory=PredicateSet.default)
    guard_cycles: bool = False
    max_depth: Optional[int] = None

    def __post_init__(self):
        self.strategy = parse_strategy(self.strategy)
        self.predicates = PredicateSet.coerce(self.predicates)

    # Convenience constructors for common configurations

    @classmethod
    def breadth_first(cls, predicates: Optional[PredicateSet] = None) -> 'TraversalConfig':
        """Create config for a plain breadth-first traversal."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST, predicates=predicates)

    @classmethod
    def depth_first(cls, predicates: Optional[PredicateSet] = None) -> 'TraversalConfig':
        """Create config for a plain depth-first traversal."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST, predicates=predicates)

    @classmethod
    def guarded(cls,
                strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
                predicates: Optional[PredicateSet] = None) -> 'TraversalConfig':
        """Create config that terminates on self-referential structures.

        Args:
            strategy: Traversal order
            predicates: Leaf tests (default set if None)

        Returns:
            TraversalConfig with the cycle guard enabled
        """
        return cls(strategy=strategy, predicates=predicates, guard_cycles=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if not isinstance(self.guard_cycles, bool):
            errors.append("guard_cycles must be a boolean")

        return errors

    def ensure_valid(self) -> 'TraversalConfig':
        """Raise if validate() reports any problem.

        Raises:
            InvalidArgumentError: With all validation messages joined
        """
        errors = self.validate()
        if errors:
            raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")
        return self
