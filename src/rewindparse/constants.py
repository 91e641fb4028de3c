"""Shared constants for rewindparse.

This module provides centralized configuration constants used across
the grammar engine and its runner. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for deferred (self-referential) grammars
- Input limits: DoS prevention via size constraints
- Byte classes: Whitespace and quoting bytes consumed by primitive parsers

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_RECURSION_DEPTH",
    "RESERVED_FRAMES",
    # Input limits
    "MAX_INPUT_SIZE",
    # Byte classes
    "WHITESPACE_BYTES",
    "DIGIT_BYTES",
    "QUOTE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A Deferred node is the only way a grammar can call back into itself, so it
# is the only place where evaluation depth can grow without bound. Each level
# of re-entry costs several interpreter frames (Deferred -> Alternative ->
# Sequence -> ...), so the bound is well below sys.getrecursionlimit().
#
# 150 levels of re-entry through a single Deferred node keeps a bracket-style
# grammar under ~600 frames, leaving room for the caller's own stack.
#
# ============================================================================

# Maximum re-entry depth of a single Deferred node.
MAX_RECURSION_DEPTH: int = 150

# Frames reserved for call overhead when clamping against the interpreter limit.
RESERVED_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum input size accepted by run()/match() (10 MiB).
MAX_INPUT_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# BYTE CLASSES
# ============================================================================

# Same set as C isspace() in the "C" locale.
WHITESPACE_BYTES: bytes = b" \t\n\r\x0b\x0c"

# ASCII digits only; bytes.isdigit() agrees, but membership is explicit here.
DIGIT_BYTES: bytes = b"0123456789"

# Opening and closing delimiter of a quoted string (no escapes).
QUOTE: bytes = b'"'
