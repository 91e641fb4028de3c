"""Grammar exception hierarchy with structured diagnostics.

Local match failure is never an exception: it is the False returned by
attempt(). Everything raised from here signals a defect in grammar
construction or in engine usage.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ActionError",
    "CursorError",
    "DefinitionError",
    "GrammarError",
    "ProtocolError",
    "RecursionDepthError",
]


class GrammarError(Exception):
    """Base exception for all rewindparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GrammarError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ProtocolError(GrammarError):
    """Misuse of the attempt/unparse/result protocol.

    Examples:
    - unparse() with an empty undo log
    - result() without a preceding successful attempt()
    - Starting a top-level parse while undo logs still hold entries
    """


class CursorError(ProtocolError):
    """Cursor moved outside the input.

    Retreating past the start or advancing past the end is always a
    combinator implementation defect, never a parse failure.
    """


class DefinitionError(GrammarError):
    """Deferred parser defined twice, or used before being defined."""


class RecursionDepthError(GrammarError):
    """Maximum re-entry depth of a Deferred parser exceeded.

    This error indicates either:
    - A left-recursive grammar (expr := expr '+' term)
    - Input nested deeper than the configured limit
    """


class ActionError(GrammarError):
    """Semantic action produced a value outside the result model."""
