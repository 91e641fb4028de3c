"""Combinators: nodes built from other nodes.

Sequence (a >> b)
    Left then right. The left result is captured before the right child
    runs, because the right child may re-enter this very node through a
    Deferred parser and overwrite its result slot. If right fails, left is
    undone. Unparse undoes right, then left.

Alternative (a | b)
    First match wins. Records which branch matched so that unparse undoes
    only that branch.

Repetition (many)
    Zero or more matches of the wrapped node; always succeeds. Records the
    iteration count so that unparse undoes exactly that many matches.

Optional (maybe)
    Zero or one match; always succeeds. Records whether it matched.

SemanticAction (node.action(fn))
    Delegates matching to the wrapped node and transforms its result into
    a domain value, once per successful match, immediately.
"""

from collections.abc import Callable

from rewindparse.diagnostics import ActionError, ErrorTemplate
from rewindparse.enums import Branch
from rewindparse.grammar.cursor import Stream
from rewindparse.grammar.node import GrammarNode, Operand, coerce
from rewindparse.grammar.results import EMPTY, ResultValue, SequenceValue
from rewindparse.grammar.undo import UndoLog

__all__ = [
    "Alternative",
    "Optional",
    "Repetition",
    "SemanticAction",
    "Sequence",
    "many",
    "maybe",
    "one_or_more",
]


class Sequence(GrammarNode):
    """Match left, then right; both must succeed.

    Result: SequenceValue of the flattened items of both children (a nested
    Sequence splices its items in; End and Epsilon contribute none).
    """

    __slots__ = ("_items", "left", "right")

    def __init__(self, left: GrammarNode, right: GrammarNode) -> None:
        super().__init__()
        self.left = left
        self.right = right
        self._items: tuple[ResultValue, ...] = ()

    def attempt(self, stream: Stream) -> bool:
        self._result = None
        if not self.left.attempt(stream):
            return False
        captured = self.left.items()
        if not self.right.attempt(stream):
            self.left.unparse(stream)
            self._result = None
            return False
        self._items = captured + self.right.items()
        self._result = SequenceValue(self._items)
        return True

    def unparse(self, stream: Stream) -> None:
        self.right.unparse(stream)
        self.left.unparse(stream)
        self.clear_state()

    def items(self) -> tuple[ResultValue, ...]:
        self.result()
        return self._items

    def children(self) -> tuple[GrammarNode, ...]:
        return (self.left, self.right)

    def clear_state(self) -> None:
        super().clear_state()
        self._items = ()

    def __repr__(self) -> str:
        return f"({self.left!r} >> {self.right!r})"


class Alternative(GrammarNode):
    """Match left, or failing that, right.

    Ordered choice: when both would match, left always wins.

    Result: result of the branch that matched.
    """

    __slots__ = ("_choices", "left", "right")

    def __init__(self, left: GrammarNode, right: GrammarNode) -> None:
        super().__init__()
        self.left = left
        self.right = right
        self._choices: UndoLog[Branch] = UndoLog(self.__repr__)

    def attempt(self, stream: Stream) -> bool:
        self._result = None
        if self.left.attempt(stream):
            self._choices.push(Branch.LEFT)
            self._result = self.left.result()
            return True
        if self.right.attempt(stream):
            self._choices.push(Branch.RIGHT)
            self._result = self.right.result()
            return True
        self._result = None
        return False

    def unparse(self, stream: Stream) -> None:
        match self._choices.pop():
            case Branch.LEFT:
                self.left.unparse(stream)
            case Branch.RIGHT:
                self.right.unparse(stream)
        self._result = None

    @property
    def last_choice(self) -> Branch | None:
        """Branch recorded by the most recent match still in effect."""
        return self._choices.peek()

    def children(self) -> tuple[GrammarNode, ...]:
        return (self.left, self.right)

    @property
    def pending(self) -> int:
        return len(self._choices)

    def clear_state(self) -> None:
        super().clear_state()
        self._choices.clear()

    def __repr__(self) -> str:
        return f"({self.left!r} | {self.right!r})"


class Repetition(GrammarNode):
    """Zero or more matches of the wrapped node.

    Stops at the first failing attempt (which restores itself). An
    iteration that succeeds without moving the stream is undone and ends
    the loop, so wrapping a node that can match empty input terminates.

    Result: SequenceValue with one item per iteration.
    """

    __slots__ = ("_counts", "wrapped")

    def __init__(self, wrapped: GrammarNode) -> None:
        super().__init__()
        self.wrapped = wrapped
        self._counts: UndoLog[int] = UndoLog(self.__repr__)

    def attempt(self, stream: Stream) -> bool:
        self._result = None
        values: list[ResultValue] = []
        start = stream.position
        while self.wrapped.attempt(stream):
            if stream.position == start:
                self.wrapped.unparse(stream)
                break
            values.append(self.wrapped.result())
            start = stream.position
        self._counts.push(len(values))
        self._result = SequenceValue(tuple(values))
        return True

    def unparse(self, stream: Stream) -> None:
        for _ in range(self._counts.pop()):
            self.wrapped.unparse(stream)
        self._result = None

    def children(self) -> tuple[GrammarNode, ...]:
        return (self.wrapped,)

    @property
    def pending(self) -> int:
        return len(self._counts)

    def clear_state(self) -> None:
        super().clear_state()
        self._counts.clear()

    def __repr__(self) -> str:
        return f"many({self.wrapped!r})"


class Optional(GrammarNode):
    """Zero or one match of the wrapped node.

    Result: the wrapped result, or EMPTY when it did not match.
    """

    __slots__ = ("_matched", "wrapped")

    def __init__(self, wrapped: GrammarNode) -> None:
        super().__init__()
        self.wrapped = wrapped
        self._matched: UndoLog[bool] = UndoLog(self.__repr__)

    def attempt(self, stream: Stream) -> bool:
        matched = self.wrapped.attempt(stream)
        self._matched.push(matched)
        self._result = self.wrapped.result() if matched else EMPTY
        return True

    def unparse(self, stream: Stream) -> None:
        if self._matched.pop():
            self.wrapped.unparse(stream)
        self._result = None

    def children(self) -> tuple[GrammarNode, ...]:
        return (self.wrapped,)

    @property
    def pending(self) -> int:
        return len(self._matched)

    def clear_state(self) -> None:
        super().clear_state()
        self._matched.clear()

    def __repr__(self) -> str:
        return f"maybe({self.wrapped!r})"


class SemanticAction(GrammarNode):
    """Wrapped node whose result is passed through a transform.

    The transform receives the flat tuple of items when the wrapped node is
    a Sequence, otherwise its single result value. It must return a
    ResultValue (typically a CustomValue subclass).

    When the transform raises, or returns anything else, the wrapped match
    is undone before the exception propagates.
    """

    __slots__ = ("transform", "wrapped")

    def __init__(
        self, wrapped: GrammarNode, transform: Callable[..., ResultValue]
    ) -> None:
        super().__init__()
        self.wrapped = wrapped
        self.transform = transform

    def attempt(self, stream: Stream) -> bool:
        self._result = None
        if not self.wrapped.attempt(stream):
            return False
        try:
            if isinstance(self.wrapped, Sequence):
                value = self.transform(self.wrapped.items())
            else:
                value = self.transform(self.wrapped.result())
        except Exception:
            self.wrapped.unparse(stream)
            raise
        if not isinstance(value, ResultValue):
            self.wrapped.unparse(stream)
            raise ActionError(
                ErrorTemplate.action_result_invalid(repr(self), type(value).__name__)
            )
        self._result = value
        return True

    def unparse(self, stream: Stream) -> None:
        self.wrapped.unparse(stream)
        self._result = None

    def children(self) -> tuple[GrammarNode, ...]:
        return (self.wrapped,)

    def __repr__(self) -> str:
        name = getattr(self.transform, "__name__", type(self.transform).__name__)
        return f"{self.wrapped!r}.action({name})"


def many(node: Operand) -> Repetition:
    """Zero or more repetitions of node."""
    return Repetition(coerce(node))


def one_or_more(node: Operand) -> Sequence:
    """One or more repetitions of node, built as ``node >> many(node)``.

    Result items: the first match, then a SequenceValue of the rest.
    """
    wrapped = coerce(node)
    return Sequence(wrapped, Repetition(wrapped))


def maybe(node: Operand) -> Optional:
    """Zero or one occurrence of node."""
    return Optional(coerce(node))
