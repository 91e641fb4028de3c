"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for grammar misuse.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Cursor errors (position moved outside the input)
        2000-2999: Protocol errors (attempt/unparse/result misuse)
        3000-3999: Definition errors (Deferred assignment)
        4000-4999: Evaluation errors (recursion depth, semantic actions)
    """

    # Cursor errors (1000-1999)
    CURSOR_UNDERFLOW = 1001
    CURSOR_OVERFLOW = 1002

    # Protocol errors (2000-2999)
    EMPTY_UNDO_LOG = 2001
    RESULT_UNAVAILABLE = 2002
    GRAMMAR_BUSY = 2003

    # Definition errors (3000-3999)
    DEFERRED_REDEFINED = 3001
    DEFERRED_UNDEFINED = 3002

    # Evaluation errors (4000-4999)
    RECURSION_DEPTH_EXCEEDED = 4001
    ACTION_RESULT_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        node: Description of the grammar node involved (repr or Deferred name)
        position: Cursor position at the time of the error, if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    node: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DEFERRED_REDEFINED]: Deferred parser 'expr' is already defined
              --> node: Deferred('expr')
              = help: Define each Deferred parser exactly once

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
