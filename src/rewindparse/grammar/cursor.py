"""Mutable cursor infrastructure for backtracking parsing.

Every grammar node moves a shared cursor forward on a match and moves it
back by exactly the same amount when the match is undone. The cursor
therefore only knows three things: where it is, what lies ahead, and how
to move.

Design Philosophy:
    - Cursor is mutable: advance()/retreat() change position in place
    - peek() never moves the cursor
    - Moving outside [0, len(buffer)] is a defect (CursorError), not a failure
    - Nodes depend on the Stream protocol, never on Cursor itself

Python 3.13+.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from rewindparse.diagnostics import CursorError, ErrorTemplate

__all__ = ["Cursor", "Stream", "TracingStream"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Stream(Protocol):
    """Capability every grammar node parses against.

    Any object with these members can drive a grammar; Deferred parsers
    forward the stream unchanged, so one grammar works over any
    implementation.
    """

    @property
    def position(self) -> int:
        """Current offset into the input."""
        ...

    def peek(self, count: int) -> bytes | None:
        """Return the next count bytes without advancing, or None if fewer remain."""
        ...

    def advance(self, count: int) -> None:
        """Move forward by count bytes."""
        ...

    def retreat(self, count: int) -> None:
        """Move backward by count bytes."""
        ...


@dataclass(slots=True)
class Cursor:
    """Position-tracking view over an input buffer.

    Invariant: ``0 <= position <= len(buffer)``.

    Example:
        >>> cursor = Cursor(b"hello")
        >>> cursor.peek(2)
        b'he'
        >>> cursor.advance(2)
        >>> cursor.position
        2
        >>> cursor.peek(10) is None
        True
        >>> cursor.retreat(2)
        >>> cursor.position
        0
    """

    buffer: bytes
    position: int = 0

    def __post_init__(self) -> None:
        """Validate the starting position."""
        if not 0 <= self.position <= len(self.buffer):
            msg = f"Cursor position {self.position} outside input of size {len(self.buffer)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when no bytes remain."""
        return self.position >= len(self.buffer)

    @property
    def remaining(self) -> int:
        """Number of bytes between position and end of input."""
        return len(self.buffer) - self.position

    def peek(self, count: int) -> bytes | None:
        """Return the next count bytes without advancing.

        Args:
            count: Number of bytes to look at

        Returns:
            Exactly count bytes, or None if fewer than count remain.
            ``peek(0)`` returns ``b""`` at any position.
        """
        end = self.position + count
        if end > len(self.buffer):
            return None
        return self.buffer[self.position : end]

    def advance(self, count: int) -> None:
        """Move forward by count bytes.

        Raises:
            CursorError: If the move would pass the end of input
        """
        if count > self.remaining:
            raise CursorError(
                ErrorTemplate.cursor_overflow(self.position, count, len(self.buffer))
            )
        self.position += count

    def retreat(self, count: int) -> None:
        """Move backward by count bytes.

        Raises:
            CursorError: If the move would pass the start of input
        """
        if count > self.position:
            raise CursorError(ErrorTemplate.cursor_underflow(self.position, count))
        self.position -= count


@dataclass(slots=True)
class TracingStream:
    """Stream wrapper that logs and counts every cursor move.

    Wraps any Stream. Useful when debugging a grammar that backtracks more
    than expected: the DEBUG log shows each advance and retreat, and the
    counters summarize how much work was thrown away.

    Attributes:
        inner: Wrapped stream
        advances: Number of advance() calls
        retreats: Number of retreat() calls
        furthest: Largest position reached so far
    """

    inner: Stream
    advances: int = field(default=0, init=False)
    retreats: int = field(default=0, init=False)
    furthest: int = field(default=0, init=False)

    @property
    def position(self) -> int:
        """Position of the wrapped stream."""
        return self.inner.position

    def peek(self, count: int) -> bytes | None:
        """Forward to the wrapped stream."""
        return self.inner.peek(count)

    def advance(self, count: int) -> None:
        """Forward to the wrapped stream, then record the move."""
        self.inner.advance(count)
        self.advances += 1
        self.furthest = max(self.furthest, self.inner.position)
        logger.debug("advance %d -> %d", count, self.inner.position)

    def retreat(self, count: int) -> None:
        """Forward to the wrapped stream, then record the move."""
        self.inner.retreat(count)
        self.retreats += 1
        logger.debug("retreat %d -> %d", count, self.inner.position)
