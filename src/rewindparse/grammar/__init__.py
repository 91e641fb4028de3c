"""Backtracking parser-combinator engine.

Provides the cursor, skip policies, primitive parsers, combinators, the
Deferred indirection for recursive grammars, the result model, and the
run()/match() entry points.

Python 3.13+.
"""

from .combinators import (
    Alternative,
    Optional,
    Repetition,
    SemanticAction,
    Sequence,
    many,
    maybe,
    one_or_more,
)
from .config import GrammarConfig
from .cursor import Cursor, Stream, TracingStream
from .deferred import Deferred
from .node import GrammarNode
from .primitives import Char, End, Epsilon, Integer, Literal, QuotedString
from .results import (
    EMPTY,
    CustomValue,
    EmptyValue,
    IntegerValue,
    ResultValue,
    SequenceValue,
    TextValue,
)
from .runner import execute, iter_nodes, match, pending_entries, reset, run
from .undo import UndoLog
from .whitespace import NoSkip, SkipPolicy, WhitespaceSkip

__all__ = [
    "EMPTY",
    "Alternative",
    "Char",
    "Cursor",
    "CustomValue",
    "Deferred",
    "EmptyValue",
    "End",
    "Epsilon",
    "GrammarConfig",
    "GrammarNode",
    "Integer",
    "IntegerValue",
    "Literal",
    "NoSkip",
    "Optional",
    "QuotedString",
    "Repetition",
    "ResultValue",
    "SemanticAction",
    "Sequence",
    "SequenceValue",
    "SkipPolicy",
    "Stream",
    "TextValue",
    "TracingStream",
    "UndoLog",
    "WhitespaceSkip",
    "execute",
    "iter_nodes",
    "many",
    "match",
    "maybe",
    "one_or_more",
    "pending_entries",
    "reset",
    "run",
]
