"""Grammar node capability shared by every parser and combinator.

A grammar node supports exactly three operations against a Stream:

    attempt(stream) -> bool
        Try to match at the current position. On success the stream has
        moved past the match and the node has pushed whatever it needs to
        undo it. On failure the stream and the node are exactly as before.

    unparse(stream) -> None
        Undo the most recent successful attempt that has not been undone.

    result() -> ResultValue
        Value of the most recent successful attempt. Only valid right after
        that attempt; the slot is cleared by unparse() and by a failed
        attempt.

Construction never touches input. Combining nodes with ``>>`` (sequence) and
``|`` (alternative) builds new nodes that hold references to their operands.

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from rewindparse.diagnostics import ErrorTemplate, ProtocolError

if TYPE_CHECKING:
    from rewindparse.grammar.combinators import Alternative, SemanticAction, Sequence
    from rewindparse.grammar.cursor import Stream
    from rewindparse.grammar.results import ResultValue

__all__ = ["GrammarNode", "Operand", "coerce"]


class GrammarNode(ABC):
    """Base class of all grammar nodes."""

    __slots__ = ("_result",)

    def __init__(self) -> None:
        self._result: ResultValue | None = None

    # ------------------------------------------------------------------
    # Execution protocol
    # ------------------------------------------------------------------

    @abstractmethod
    def attempt(self, stream: Stream) -> bool:
        """Try to match at the stream's current position."""

    @abstractmethod
    def unparse(self, stream: Stream) -> None:
        """Undo the most recent successful attempt."""

    def result(self) -> ResultValue:
        """Value produced by the most recent successful attempt.

        Raises:
            ProtocolError: If there is no successful attempt to read from
        """
        if self._result is None:
            raise ProtocolError(ErrorTemplate.result_unavailable(repr(self)))
        return self._result

    def items(self) -> tuple[ResultValue, ...]:
        """Contribution of this node to an enclosing Sequence.

        Most nodes contribute their single result. Sequence splices its own
        items; End and Epsilon contribute nothing.
        """
        return (self.result(),)

    # ------------------------------------------------------------------
    # Introspection (used by the runner)
    # ------------------------------------------------------------------

    def children(self) -> tuple[GrammarNode, ...]:
        """Directly wrapped nodes, in construction order."""
        return ()

    @property
    def pending(self) -> int:
        """Number of undo entries this node itself holds."""
        return 0

    def clear_state(self) -> None:
        """Drop undo entries and the result slot of this node only."""
        self._result = None

    # ------------------------------------------------------------------
    # Construction operators
    # ------------------------------------------------------------------

    def __rshift__(self, other: Operand) -> Sequence:
        from rewindparse.grammar.combinators import Sequence  # noqa: PLC0415 - circular

        return Sequence(self, coerce(other))

    def __rrshift__(self, other: Operand) -> Sequence:
        from rewindparse.grammar.combinators import Sequence  # noqa: PLC0415 - circular

        return Sequence(coerce(other), self)

    def __or__(self, other: Operand) -> Alternative:
        from rewindparse.grammar.combinators import Alternative  # noqa: PLC0415 - circular

        return Alternative(self, coerce(other))

    def __ror__(self, other: Operand) -> Alternative:
        from rewindparse.grammar.combinators import Alternative  # noqa: PLC0415 - circular

        return Alternative(coerce(other), self)

    def action(self, transform: Callable[..., ResultValue]) -> SemanticAction:
        """Attach a semantic action to this node.

        The transform receives the flat tuple of items when this node is a
        Sequence, otherwise the node's single result value.
        """
        from rewindparse.grammar.combinators import SemanticAction  # noqa: PLC0415 - circular

        return SemanticAction(self, transform)


Operand: TypeAlias = GrammarNode | str | bytes


def coerce(operand: Operand) -> GrammarNode:
    """Turn a bare string operand into a Literal with the default skip policy.

    Raises:
        TypeError: If operand is neither a GrammarNode nor text
    """
    if isinstance(operand, GrammarNode):
        return operand
    if isinstance(operand, (str, bytes)):
        from rewindparse.grammar.primitives import Literal  # noqa: PLC0415 - circular

        return Literal(operand)
    msg = f"Cannot use {type(operand).__name__} as a grammar node"
    raise TypeError(msg)
