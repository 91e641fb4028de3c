"""Deferred parser: named indirection for recursive grammars.

A Deferred node is created before the grammar it stands for exists, used
freely while building that grammar (including inside itself), and then
defined exactly once:

    >>> expr = Deferred("expr")
    >>> term = Integer() | ("(" >> expr >> ")")
    >>> expr.define((term >> "+" >> expr) | term)

Every attempt/unparse/result call is forwarded to the defined node through
the Stream protocol, so the same node works with any stream
implementation.
"""

import logging

from rewindparse.core.depth_guard import DepthGuard
from rewindparse.diagnostics import DefinitionError, ErrorTemplate
from rewindparse.grammar.config import DEFAULT_CONFIG, GrammarConfig
from rewindparse.grammar.cursor import Stream
from rewindparse.grammar.node import GrammarNode, Operand, coerce
from rewindparse.grammar.results import ResultValue

__all__ = ["Deferred"]

logger = logging.getLogger(__name__)


class Deferred(GrammarNode):
    """Placeholder for a grammar defined after construction.

    Attributes:
        name: Label used in logs, repr and diagnostics
        config: Debug and recursion settings fixed at construction
    """

    __slots__ = ("_guard", "_target", "config", "name")

    def __init__(self, name: str, *, config: GrammarConfig = DEFAULT_CONFIG) -> None:
        super().__init__()
        self.name = name
        self.config = config
        self._target: GrammarNode | None = None
        self._guard = DepthGuard(max_depth=config.max_recursion_depth, name=name)

    @property
    def is_defined(self) -> bool:
        """True once define() has been called."""
        return self._target is not None

    @property
    def depth(self) -> int:
        """Number of attempts currently in progress through this node."""
        return self._guard.current_depth

    def define(self, grammar: Operand) -> None:
        """Assign the grammar this node stands for.

        Raises:
            DefinitionError: If the node is already defined
        """
        if self._target is not None:
            raise DefinitionError(ErrorTemplate.deferred_redefined(self.name))
        self._target = coerce(grammar)

    def _require_target(self) -> GrammarNode:
        if self._target is None:
            raise DefinitionError(ErrorTemplate.deferred_undefined(self.name))
        return self._target

    def attempt(self, stream: Stream) -> bool:
        target = self._require_target()
        if self.config.debug:
            logger.debug("[%s] trying at %d", self.name, stream.position)
        with self._guard:
            matched = target.attempt(stream)
        if self.config.debug:
            logger.debug(
                "[%s] %s at %d", self.name, "matched" if matched else "failed", stream.position
            )
        return matched

    def unparse(self, stream: Stream) -> None:
        target = self._require_target()
        if self.config.debug:
            logger.debug("[%s] undo at %d", self.name, stream.position)
        target.unparse(stream)

    def result(self) -> ResultValue:
        return self._require_target().result()

    def children(self) -> tuple[GrammarNode, ...]:
        return () if self._target is None else (self._target,)

    def clear_state(self) -> None:
        super().clear_state()
        self._guard.reset()

    def __repr__(self) -> str:
        return f"Deferred({self.name!r})"
