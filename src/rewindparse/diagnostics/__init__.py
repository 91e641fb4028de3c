"""Diagnostic system for grammar errors.

Provides structured error diagnostics with codes, hints, and formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ActionError,
    CursorError,
    DefinitionError,
    GrammarError,
    ProtocolError,
    RecursionDepthError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ActionError",
    "CursorError",
    "DefinitionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "OutputFormat",
    "ProtocolError",
    "RecursionDepthError",
]
