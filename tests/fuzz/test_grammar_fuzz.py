"""Intensive fuzzing of recursive grammars.

Excluded from normal runs; execute with: pytest -m fuzz

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from rewindparse.diagnostics import RecursionDepthError
from rewindparse.grammar import GrammarConfig, match, pending_entries, run
from tests.helpers.grammars import (
    arithmetic_grammar,
    bracket_grammar,
    complete,
    record_grammar,
)

pytestmark = pytest.mark.fuzz


@given(st.text(alphabet='{}"a1:, \n', max_size=60))
@settings(max_examples=2000, suppress_health_check=[HealthCheck.too_slow])
def test_record_grammar_never_leaks_state(source: str) -> None:
    """Arbitrary record-like input never raises and never leaves state behind."""
    grammar = record_grammar()

    value = run(grammar, source)

    event(f"accepted={value is not None}")
    assert pending_entries(grammar) == 0


@given(st.text(alphabet="0123456789+*-() \"x", max_size=40))
@settings(max_examples=2000, suppress_health_check=[HealthCheck.too_slow])
def test_arithmetic_grammar_never_leaks_state(source: str) -> None:
    """Arbitrary expression-like input is accepted or rejected cleanly."""
    grammar = complete(arithmetic_grammar())

    first = match(grammar, source)
    second = match(grammar, source)

    event(f"accepted={first is not None}")
    assert first == second
    assert pending_entries(grammar) == 0


@given(st.integers(min_value=1, max_value=400))
@settings(max_examples=300)
def test_bracket_depth_limit_is_exact(depth: int) -> None:
    """Nesting within the limit parses; beyond it raises, then recovers."""
    limit = 120
    block = bracket_grammar(GrammarConfig(max_recursion_depth=limit))
    grammar = complete(block)
    source = "{" * depth + "}" * depth

    if depth <= limit:
        assert run(grammar, source) is not None
        event("within limit")
    else:
        with pytest.raises(RecursionDepthError):
            run(grammar, source)
        event("beyond limit")

    assert block.depth == 0
    assert pending_entries(grammar) == 0
