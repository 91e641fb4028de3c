"""Configuration for Deferred parsers.

Provides a single frozen dataclass passed at construction time. Debug
tracing and recursion limits are fixed for the lifetime of the node; there
is no switch to flip on an existing grammar.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from rewindparse.constants import MAX_RECURSION_DEPTH

__all__ = ["DEFAULT_CONFIG", "GrammarConfig"]


@dataclass(frozen=True, slots=True)
class GrammarConfig:
    """Immutable configuration for a Deferred parser.

    Attributes:
        debug: Log every attempt and unparse forwarded by the node at DEBUG
            level (default: False).
        max_recursion_depth: Maximum number of nested attempts through the
            node before RecursionDepthError is raised (default: 150). Clamped
            against sys.getrecursionlimit().

    Example:
        >>> expr = Deferred("expr", config=GrammarConfig(debug=True))
    """

    debug: bool = False
    max_recursion_depth: int = MAX_RECURSION_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_recursion_depth is not positive
        """
        if self.max_recursion_depth <= 0:
            msg = "max_recursion_depth must be positive"
            raise ValueError(msg)


DEFAULT_CONFIG = GrammarConfig()
