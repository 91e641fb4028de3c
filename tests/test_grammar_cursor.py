"""Tests for grammar/cursor.py: Cursor, Stream protocol, TracingStream.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from rewindparse.diagnostics import CursorError, DiagnosticCode, ProtocolError
from rewindparse.grammar import Cursor, Stream, TracingStream

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestCursorConstruction:
    """Test cursor creation and position validation."""

    def test_create_cursor(self) -> None:
        """Cursor starts at position 0 by default."""
        cursor = Cursor(b"hello")

        assert cursor.position == 0
        assert cursor.remaining == 5
        assert not cursor.is_eof

    def test_create_cursor_at_end(self) -> None:
        """Position equal to the input length is valid and at EOF."""
        cursor = Cursor(b"hello", 5)

        assert cursor.is_eof
        assert cursor.remaining == 0

    def test_empty_input_is_eof(self) -> None:
        """Empty input is immediately at EOF."""
        assert Cursor(b"").is_eof

    @pytest.mark.parametrize("position", [-1, 6])
    def test_out_of_range_position_rejected(self, position: int) -> None:
        """Starting outside [0, len] raises ValueError."""
        with pytest.raises(ValueError, match="outside input"):
            Cursor(b"hello", position)

    def test_cursor_satisfies_stream_protocol(self) -> None:
        """Cursor is usable wherever a Stream is expected."""
        assert isinstance(Cursor(b"x"), Stream)
        assert isinstance(TracingStream(Cursor(b"x")), Stream)


# ============================================================================
# PEEK
# ============================================================================


class TestCursorPeek:
    """Test non-moving look-ahead."""

    def test_peek_returns_prefix(self) -> None:
        """peek(n) returns the next n bytes."""
        cursor = Cursor(b"hello")

        assert cursor.peek(1) == b"h"
        assert cursor.peek(3) == b"hel"
        assert cursor.position == 0

    def test_peek_past_end_returns_none(self) -> None:
        """peek(n) returns None when fewer than n bytes remain."""
        cursor = Cursor(b"hello", 3)

        assert cursor.peek(2) == b"lo"
        assert cursor.peek(3) is None

    def test_peek_zero(self) -> None:
        """peek(0) returns empty bytes, even at EOF."""
        assert Cursor(b"ab").peek(0) == b""
        assert Cursor(b"ab", 2).peek(0) == b""

    def test_peek_at_eof_returns_none(self) -> None:
        """peek(1) at EOF returns None."""
        assert Cursor(b"ab", 2).peek(1) is None


# ============================================================================
# MOVEMENT
# ============================================================================


class TestCursorMovement:
    """Test advance() and retreat()."""

    def test_advance_and_retreat(self) -> None:
        """advance and retreat move the position by the given count."""
        cursor = Cursor(b"hello")

        cursor.advance(4)
        assert cursor.position == 4
        assert cursor.peek(1) == b"o"

        cursor.retreat(3)
        assert cursor.position == 1

    def test_advance_to_end(self) -> None:
        """Advancing exactly to the end is allowed."""
        cursor = Cursor(b"hi")

        cursor.advance(2)

        assert cursor.is_eof

    def test_retreat_past_start_raises(self) -> None:
        """Retreating past position 0 is a CursorError with underflow code."""
        cursor = Cursor(b"hello", 1)

        with pytest.raises(CursorError) as exc_info:
            cursor.retreat(2)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURSOR_UNDERFLOW
        assert exc_info.value.diagnostic.position == 1
        assert cursor.position == 1

    def test_advance_past_end_raises(self) -> None:
        """Advancing past the end is a CursorError with overflow code."""
        cursor = Cursor(b"hello", 4)

        with pytest.raises(CursorError) as exc_info:
            cursor.advance(2)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURSOR_OVERFLOW
        assert cursor.position == 4

    def test_cursor_error_is_protocol_error(self) -> None:
        """CursorError is caught by handlers for ProtocolError."""
        with pytest.raises(ProtocolError):
            Cursor(b"").retreat(1)

    @given(
        data=st.binary(max_size=50),
        steps=st.lists(st.integers(min_value=0, max_value=10), max_size=10),
    )
    def test_advance_then_retreat_restores(self, data: bytes, steps: list[int]) -> None:
        """Property: retreating every successful advance returns to start."""
        cursor = Cursor(data)
        moved: list[int] = []
        for step in steps:
            if step <= cursor.remaining:
                cursor.advance(step)
                moved.append(step)
        event(f"moves={len(moved)}")
        for step in reversed(moved):
            cursor.retreat(step)

        assert cursor.position == 0


# ============================================================================
# TRACING STREAM
# ============================================================================


class TestTracingStream:
    """Test the move-counting Stream wrapper."""

    def test_forwards_to_inner(self) -> None:
        """Position and peek reflect the wrapped cursor."""
        inner = Cursor(b"hello")
        stream = TracingStream(inner)

        stream.advance(2)

        assert stream.position == inner.position == 2
        assert stream.peek(3) == b"llo"

    def test_counts_moves(self) -> None:
        """advances, retreats and furthest summarize the moves made."""
        stream = TracingStream(Cursor(b"hello"))

        stream.advance(3)
        stream.retreat(2)
        stream.advance(1)

        assert stream.advances == 2
        assert stream.retreats == 1
        assert stream.furthest == 3
        assert stream.position == 2

    def test_logs_moves_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each move is logged at DEBUG level."""
        caplog.set_level(logging.DEBUG, logger="rewindparse.grammar.cursor")
        stream = TracingStream(Cursor(b"hello"))

        stream.advance(2)
        stream.retreat(1)

        assert "advance 2 -> 2" in caplog.text
        assert "retreat 1 -> 1" in caplog.text

    def test_failed_move_not_counted(self) -> None:
        """A move rejected by the wrapped cursor is not recorded."""
        stream = TracingStream(Cursor(b"ab"))

        with pytest.raises(CursorError):
            stream.advance(5)

        assert stream.advances == 0
        assert stream.furthest == 0
