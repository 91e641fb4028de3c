"""Reference grammars used across tests.

- Arithmetic expressions with add/multiply/negate/parenthesize actions
- Balanced brackets
- Nested key/value blocks ("JSON-like" records)

The arithmetic AST nodes are CustomValue subclasses that render as
``[+:l,r]``, ``[*:l,r]`` and ``[negate:x]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from rewindparse.grammar import (
    CustomValue,
    Deferred,
    End,
    GrammarConfig,
    GrammarNode,
    Integer,
    Literal,
    QuotedString,
    ResultValue,
    many,
)

# =============================================================================
# Arithmetic AST
# =============================================================================


@dataclass(frozen=True, slots=True)
class AddNode(CustomValue):
    """left + right"""

    left: ResultValue
    right: ResultValue

    def render(self) -> str:
        return f"[+:{self.left.render()},{self.right.render()}]"


@dataclass(frozen=True, slots=True)
class MulNode(CustomValue):
    """left * right"""

    left: ResultValue
    right: ResultValue

    def render(self) -> str:
        return f"[*:{self.left.render()},{self.right.render()}]"


@dataclass(frozen=True, slots=True)
class NegateNode(CustomValue):
    """-operand"""

    operand: ResultValue

    def render(self) -> str:
        return f"[negate:{self.operand.render()}]"


def _add(items: tuple[ResultValue, ...]) -> AddNode:
    return AddNode(items[0], items[2])


def _mul(items: tuple[ResultValue, ...]) -> MulNode:
    return MulNode(items[0], items[2])


def _negate(items: tuple[ResultValue, ...]) -> NegateNode:
    return NegateNode(items[1])


def _parenthesize(items: tuple[ResultValue, ...]) -> ResultValue:
    return items[1]


def arithmetic_grammar(config: GrammarConfig | None = None) -> Deferred:
    """Right-recursive expression grammar.

        expr    := factor '+' expr | factor
        factor  := bigunit '*' factor | bigunit
        bigunit := '-' unit | unit
        unit    := integer | quoted | '(' expr ')'
    """
    config = config or GrammarConfig()
    expr = Deferred("expr", config=config)
    factor = Deferred("factor", config=config)

    unit = Integer() | QuotedString() | ("(" >> expr >> ")").action(_parenthesize)
    bigunit = ("-" >> unit).action(_negate) | unit
    factor.define((bigunit >> "*" >> factor).action(_mul) | bigunit)
    expr.define((factor >> "+" >> expr).action(_add) | factor)
    return expr


def evaluate(value: ResultValue) -> int:
    """Evaluate an arithmetic AST built by arithmetic_grammar()."""
    match value:
        case AddNode(left=left, right=right):
            return evaluate(left) + evaluate(right)
        case MulNode(left=left, right=right):
            return evaluate(left) * evaluate(right)
        case NegateNode(operand=operand):
            return -evaluate(operand)
        case _:
            return value.value  # type: ignore[attr-defined]


# =============================================================================
# Brackets
# =============================================================================


def bracket_grammar(config: GrammarConfig | None = None) -> Deferred:
    """block := '{' '}' | '{' block '}'"""
    block = Deferred("block", config=config or GrammarConfig())
    block.define((Literal("{") >> "}") | (Literal("{") >> block >> "}"))
    return block


def _only(items: tuple[ResultValue, ...]) -> ResultValue:
    return items[0]


def complete(grammar: GrammarNode) -> GrammarNode:
    """grammar followed by end of input, yielding grammar's own result."""
    return (grammar >> End()).action(_only)


# =============================================================================
# Records
# =============================================================================


def record_grammar() -> GrammarNode:
    """Nested key/value blocks, each entry terminated by a comma.

        block := '{' item* '}'
        item  := quoted ':' (integer | quoted | block) ','
    """
    block = Deferred("block")
    value = Integer() | QuotedString() | block
    item = QuotedString() >> ":" >> value >> ","
    block.define("{" >> many(item) >> "}")
    return block >> End()
