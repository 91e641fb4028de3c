"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every structural misuse the
    engine can detect.
    """

    # =========================================================================
    # CURSOR ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def cursor_underflow(position: int, count: int) -> Diagnostic:
        """Retreat past the start of the input.

        Args:
            position: Cursor position before the retreat
            count: Number of bytes the caller asked to retreat

        Returns:
            Diagnostic for CURSOR_UNDERFLOW
        """
        msg = f"Cannot retreat {count} bytes from position {position}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_UNDERFLOW,
            message=msg,
            position=position,
            hint="Every retreat must pair with an earlier advance of the same length",
        )

    @staticmethod
    def cursor_overflow(position: int, count: int, size: int) -> Diagnostic:
        """Advance past the end of the input.

        Args:
            position: Cursor position before the advance
            count: Number of bytes the caller asked to advance
            size: Length of the input buffer

        Returns:
            Diagnostic for CURSOR_OVERFLOW
        """
        msg = f"Cannot advance {count} bytes from position {position} (input size {size})"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_OVERFLOW,
            message=msg,
            position=position,
            hint="Only advance by lengths previously confirmed with peek()",
        )

    # =========================================================================
    # PROTOCOL ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def empty_undo_log(node: str) -> Diagnostic:
        """Unparse called with nothing to undo.

        Args:
            node: Description of the grammar node

        Returns:
            Diagnostic for EMPTY_UNDO_LOG
        """
        msg = f"Nothing to undo on {node}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_UNDO_LOG,
            message=msg,
            node=node,
            hint="Call unparse() only after a successful attempt() that was not already undone",
        )

    @staticmethod
    def result_unavailable(node: str) -> Diagnostic:
        """Result read without a preceding successful attempt.

        Args:
            node: Description of the grammar node

        Returns:
            Diagnostic for RESULT_UNAVAILABLE
        """
        msg = f"No result available on {node}"
        return Diagnostic(
            code=DiagnosticCode.RESULT_UNAVAILABLE,
            message=msg,
            node=node,
            hint="Read result() immediately after a successful attempt(), before any unparse()",
        )

    @staticmethod
    def grammar_busy(node: str, pending: int) -> Diagnostic:
        """Top-level parse started while undo logs still hold entries.

        Args:
            node: Description of the root grammar node
            pending: Number of undo entries still held by the grammar

        Returns:
            Diagnostic for GRAMMAR_BUSY
        """
        msg = f"Grammar {node} has {pending} pending undo entries"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_BUSY,
            message=msg,
            node=node,
            hint="Unparse the previous match or call reset() before starting a new parse",
        )

    # =========================================================================
    # DEFINITION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def deferred_redefined(name: str) -> Diagnostic:
        """Deferred parser assigned twice.

        Args:
            name: Name of the Deferred parser

        Returns:
            Diagnostic for DEFERRED_REDEFINED
        """
        msg = f"Deferred parser '{name}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.DEFERRED_REDEFINED,
            message=msg,
            node=f"Deferred({name!r})",
            hint="Define each Deferred parser exactly once",
        )

    @staticmethod
    def deferred_undefined(name: str) -> Diagnostic:
        """Deferred parser used before assignment.

        Args:
            name: Name of the Deferred parser

        Returns:
            Diagnostic for DEFERRED_UNDEFINED
        """
        msg = f"Deferred parser '{name}' was used before being defined"
        return Diagnostic(
            code=DiagnosticCode.DEFERRED_UNDEFINED,
            message=msg,
            node=f"Deferred({name!r})",
            hint="Call define() on every Deferred parser before running the grammar",
        )

    # =========================================================================
    # EVALUATION ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def recursion_depth_exceeded(name: str, max_depth: int) -> Diagnostic:
        """Deferred parser re-entered too deeply.

        Args:
            name: Name of the Deferred parser (or the grammar root)
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for RECURSION_DEPTH_EXCEEDED
        """
        msg = f"Maximum recursion depth ({max_depth}) exceeded in '{name}'"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_DEPTH_EXCEEDED,
            message=msg,
            node=name,
            hint="Check for left recursion, or raise GrammarConfig.max_recursion_depth",
        )

    @staticmethod
    def action_result_invalid(node: str, received: str) -> Diagnostic:
        """Semantic action returned something that is not a ResultValue.

        Args:
            node: Description of the SemanticAction node
            received: Type name of the returned object

        Returns:
            Diagnostic for ACTION_RESULT_INVALID
        """
        msg = f"Semantic action on {node} returned {received}, expected ResultValue"
        return Diagnostic(
            code=DiagnosticCode.ACTION_RESULT_INVALID,
            message=msg,
            node=node,
            hint="Return an IntegerValue, TextValue, SequenceValue, or CustomValue subclass",
        )
