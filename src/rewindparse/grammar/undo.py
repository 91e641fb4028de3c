"""Per-node undo log.

A grammar node that changes state on a successful attempt pushes exactly one
entry describing how to undo it; unparse pops that entry. Because a node can
be re-entered through a Deferred parser before its earlier match is undone,
the log is a stack rather than a single slot.

Python 3.13+.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from rewindparse.diagnostics import ErrorTemplate, ProtocolError

__all__ = ["UndoLog"]

T = TypeVar("T")


class UndoLog(Generic[T]):
    """LIFO stack of undo entries owned by one grammar node.

    Entries are choice markers (Alternative), repeat counters (Repetition),
    match flags (Optional), consumed lengths (primitives), or skipped
    whitespace lengths (skip policies).

    Example:
        >>> log: UndoLog[int] = UndoLog(lambda: "Integer()")
        >>> log.push(3)
        >>> len(log)
        1
        >>> log.pop()
        3
    """

    __slots__ = ("_describe", "_entries")

    def __init__(self, describe: Callable[[], str]) -> None:
        """Create an empty log.

        Args:
            describe: Returns a description of the owning node, used only
                when reporting misuse
        """
        self._entries: list[T] = []
        self._describe = describe

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, entry: T) -> None:
        """Record how to undo the match that just succeeded."""
        self._entries.append(entry)

    def pop(self) -> T:
        """Remove and return the most recent entry.

        Raises:
            ProtocolError: If the log is empty (unparse without a match)
        """
        if not self._entries:
            raise ProtocolError(ErrorTemplate.empty_undo_log(self._describe()))
        return self._entries.pop()

    def peek(self) -> T | None:
        """Most recent entry without removing it, or None if empty."""
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        """Drop every entry (used only when a parse is aborted)."""
        self._entries.clear()
