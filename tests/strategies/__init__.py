"""Hypothesis strategies for grammars and inputs."""

from .grammar import (
    arithmetic_sources,
    bracket_sources,
    grammar_trees,
    padded,
    parse_inputs,
    whitespace,
)

__all__ = [
    "arithmetic_sources",
    "bracket_sources",
    "grammar_trees",
    "padded",
    "parse_inputs",
    "whitespace",
]
