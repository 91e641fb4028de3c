"""Quickstart example for rewindparse.

This example builds a small calculator grammar with semantic actions, shows
prefix matching, recursive grammars, debug tracing and error diagnostics.

Note: Examples print results directly for brevity. In production, check for
None (no match) and handle GrammarError subclasses where grammars are built
from user input.
"""

import logging
from dataclasses import dataclass

from rewindparse import (
    CustomValue,
    Deferred,
    DefinitionError,
    End,
    GrammarConfig,
    Integer,
    IntegerValue,
    Literal,
    RecursionDepthError,
    ResultValue,
    many,
    match,
    run,
)
from rewindparse.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Primitives and sequences
print("=" * 50)
print("Example 1: Primitives and Sequences")
print("=" * 50)

pair = Integer() >> "," >> Integer() >> End()
print(run(pair, "12 , 34"))
# Output: [Seq:[Int:12],[String:,],[Int:34]]

print(run(pair, "12 , "))
# Output: None

# Example 2: Prefix matching
print("\n" + "=" * 50)
print("Example 2: Prefix Matching")
print("=" * 50)

numbers = many(Integer())
value, consumed = match(numbers, "1 2 3 rest")  # type: ignore[misc]
print(value, consumed)
# Output: [Seq:[Int:1],[Int:2],[Int:3]] 5

# Example 3: Recursive grammar with semantic actions
print("\n" + "=" * 50)
print("Example 3: Calculator")
print("=" * 50)


@dataclass(frozen=True, slots=True)
class BinOp(CustomValue):
    op: str
    left: ResultValue
    right: ResultValue

    def render(self) -> str:
        return f"[{self.op}:{self.left.render()},{self.right.render()}]"


def evaluate(node: ResultValue) -> int:
    if isinstance(node, BinOp):
        left, right = evaluate(node.left), evaluate(node.right)
        return left + right if node.op == "+" else left * right
    assert isinstance(node, IntegerValue)
    return node.value


expr = Deferred("expr")
term = Deferred("term")
atom = Integer() | ("(" >> expr >> ")").action(lambda items: items[1])
term.define((atom >> "*" >> term).action(lambda items: BinOp("*", items[0], items[2])) | atom)
expr.define((term >> "+" >> expr).action(lambda items: BinOp("+", items[0], items[2])) | term)
calculator = expr >> End()

for source in ["(1 + 2) * 3", "2 * 3 + 4", "((7))"]:
    tree = run(calculator, source)
    assert tree is not None
    print(f"{source!r:15} -> {tree}  = {evaluate(tree[0])}")  # type: ignore[index]
# Output:
# '(1 + 2) * 3'   -> [Seq:[*:[+:[Int:1],[Int:2]],[Int:3]]]  = 9
# '2 * 3 + 4'     -> [Seq:[+:[*:[Int:2],[Int:3]],[Int:4]]]  = 10
# '((7))'         -> [Seq:[Int:7]]  = 7

# Example 4: Debug tracing
print("\n" + "=" * 50)
print("Example 4: Debug Tracing")
print("=" * 50)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
block = Deferred("block", config=GrammarConfig(debug=True))
block.define((Literal("{") >> "}") | ("{" >> block >> "}"))
run(block >> End(), "{ { } }")
logging.getLogger().setLevel(logging.WARNING)
# Output (abridged):
# rewindparse.grammar.deferred: [block] trying at 0
# rewindparse.grammar.deferred: [block] trying at 1
# ...

# Example 5: Diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

undefined = Deferred("value")
try:
    run(undefined, "1")
except DefinitionError as e:
    print(e)
# Output:
# error[DEFERRED_UNDEFINED]: Deferred parser 'value' was used before being defined
#   --> node: Deferred('value')
#   = help: Call define() on every Deferred parser before running the grammar

shallow = Deferred("shallow", config=GrammarConfig(max_recursion_depth=5))
shallow.define((Literal("{") >> "}") | ("{" >> shallow >> "}"))
try:
    run(shallow, "{" * 10 + "}" * 10)
except RecursionDepthError as e:
    assert e.diagnostic is not None
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
# Output: {"code": "RECURSION_DEPTH_EXCEEDED", "code_value": 4001, ...}
