"""Enumerations for rewindparse type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["Branch", "ResultKind"]


class Branch(StrEnum):
    """Branch of an Alternative that produced the most recent match.

    StrEnum provides automatic string conversion: str(Branch.LEFT) == "left"
    """

    LEFT = "left"
    """The first (preferred) alternative matched."""

    RIGHT = "right"
    """The first alternative failed and the second one matched."""


class ResultKind(StrEnum):
    """Tag of a ResultValue variant.

    The result model is a closed set: every ResultValue subclass carries
    exactly one of these tags in its ``kind`` class attribute.
    """

    INTEGER = "integer"
    """Decimal number produced by the Integer primitive."""

    TEXT = "text"
    """Matched text (literal, character, or quoted string contents)."""

    SEQUENCE = "sequence"
    """Ordered list of sub-results (Sequence, Repetition)."""

    CUSTOM = "custom"
    """Domain node built by a semantic action."""

    EMPTY = "empty"
    """No value (End, Epsilon, unmatched Optional)."""
