"""rewindparse - backtracking parser combinators with explicit undo.

Grammars are built bottom-up from leaf parsers (Char, Literal, Integer,
QuotedString, End) with sequencing (``>>``), ordered alternation (``|``),
repetition (many, one_or_more), optional matching (maybe) and semantic
actions (``node.action(fn)``). Deferred parsers allow self- and mutually
recursive grammars. A successful parse yields a frozen ResultValue tree.

Public API:
    run - Parse input and return the result (or None)
    match - Parse a prefix and return (result, consumed bytes)
    Deferred - Named placeholder for recursive grammars
    GrammarConfig - Debug and recursion settings for Deferred parsers

Exceptions:
    GrammarError - Base exception class
    ProtocolError - attempt/unparse/result misuse
    CursorError - Cursor moved outside the input
    DefinitionError - Deferred parser defined twice or never
    RecursionDepthError - Recursion limit exceeded
    ActionError - Semantic action returned a non-ResultValue

Submodules:
    rewindparse.grammar - Engine: cursor, primitives, combinators, results
    rewindparse.diagnostics - Error codes, templates and formatting
    rewindparse.core - Recursion depth guard
"""

from .diagnostics import (
    ActionError,
    CursorError,
    DefinitionError,
    GrammarError,
    ProtocolError,
    RecursionDepthError,
)
from .grammar import (
    EMPTY,
    Alternative,
    Char,
    Cursor,
    CustomValue,
    Deferred,
    End,
    Epsilon,
    GrammarConfig,
    GrammarNode,
    Integer,
    IntegerValue,
    Literal,
    NoSkip,
    Optional,
    QuotedString,
    Repetition,
    ResultValue,
    SemanticAction,
    Sequence,
    SequenceValue,
    TextValue,
    WhitespaceSkip,
    many,
    match,
    maybe,
    one_or_more,
    run,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rewindparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EMPTY",
    "ActionError",
    "Alternative",
    "Char",
    "Cursor",
    "CursorError",
    "CustomValue",
    "Deferred",
    "DefinitionError",
    "End",
    "Epsilon",
    "GrammarConfig",
    "GrammarError",
    "GrammarNode",
    "Integer",
    "IntegerValue",
    "Literal",
    "NoSkip",
    "Optional",
    "ProtocolError",
    "QuotedString",
    "RecursionDepthError",
    "Repetition",
    "ResultValue",
    "SemanticAction",
    "Sequence",
    "SequenceValue",
    "TextValue",
    "WhitespaceSkip",
    "__version__",
    "many",
    "match",
    "maybe",
    "one_or_more",
    "run",
]
