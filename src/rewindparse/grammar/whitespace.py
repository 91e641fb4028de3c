"""Skip policies: pluggable consumption of ignorable input before a token.

Every primitive parser owns one skip policy instance. It calls skip() before
testing its token and unskip() when undoing (or abandoning) the match, so
backtracking restores skipped whitespace as well as the token itself.

Two built-in policies:
    - NoSkip: consume nothing
    - WhitespaceSkip: consume a maximal run of C-locale whitespace
      (space, tab, LF, CR, VT, FF)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeAlias

from rewindparse.constants import WHITESPACE_BYTES
from rewindparse.grammar.cursor import Stream
from rewindparse.grammar.undo import UndoLog

__all__ = ["NoSkip", "SkipFactory", "SkipPolicy", "WhitespaceSkip"]


class SkipPolicy(ABC):
    """Backtrackable consumption of ignorable input."""

    __slots__ = ()

    @abstractmethod
    def skip(self, stream: Stream) -> None:
        """Consume ignorable input and remember how much."""

    @abstractmethod
    def unskip(self, stream: Stream) -> None:
        """Give back what the most recent skip() consumed."""

    @property
    def pending(self) -> int:
        """Number of skip() calls not yet undone."""
        return 0

    def clear(self) -> None:
        """Forget every pending skip (used only when a parse is aborted)."""


class NoSkip(SkipPolicy):
    """Consume nothing; tokens must start exactly at the cursor."""

    __slots__ = ()

    def skip(self, stream: Stream) -> None:
        return None

    def unskip(self, stream: Stream) -> None:
        return None


class WhitespaceSkip(SkipPolicy):
    """Consume a maximal run of whitespace bytes before a token.

    Each skip() pushes the consumed length (possibly zero) onto the policy's
    undo log; unskip() pops it and retreats by that length.

    Example:
        >>> cursor = Cursor(b"  \\tx")
        >>> policy = WhitespaceSkip()
        >>> policy.skip(cursor)
        >>> cursor.position
        3
        >>> policy.unskip(cursor)
        >>> cursor.position
        0
    """

    __slots__ = ("_lengths", "_whitespace")

    def __init__(self, whitespace: bytes = WHITESPACE_BYTES) -> None:
        self._whitespace = whitespace
        self._lengths: UndoLog[int] = UndoLog(lambda: "WhitespaceSkip()")

    def skip(self, stream: Stream) -> None:
        count = 0
        while (ahead := stream.peek(1)) is not None and ahead in self._whitespace:
            stream.advance(1)
            count += 1
        self._lengths.push(count)

    def unskip(self, stream: Stream) -> None:
        count = self._lengths.pop()
        if count:
            stream.retreat(count)

    @property
    def pending(self) -> int:
        return len(self._lengths)

    def clear(self) -> None:
        self._lengths.clear()


# Primitives take a factory so that each one gets its own undo log.
SkipFactory: TypeAlias = Callable[[], SkipPolicy]
