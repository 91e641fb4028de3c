"""Grammar-level entry points.

run() and match() wrap one complete top-level parse:

1. Refuse to start if any node reachable from the grammar still holds undo
   entries (a previous parse was not unwound).
2. Attempt the grammar against a fresh Cursor.
3. On success, read the result, then unparse the grammar so every undo log
   is empty again. The returned value is frozen and owned by the caller.
4. If anything raises mid-parse, clear every log and result slot before
   re-raising, so the grammar object stays usable.

Total consumption is not implied: include End() in the grammar to require
it.

Security:
    Validates input size before parsing (default limit 10 MiB).
"""

import logging
import sys
from collections.abc import Iterator

from rewindparse.constants import MAX_INPUT_SIZE
from rewindparse.diagnostics import ErrorTemplate, ProtocolError, RecursionDepthError
from rewindparse.grammar.cursor import Cursor, Stream
from rewindparse.grammar.node import GrammarNode
from rewindparse.grammar.results import ResultValue

__all__ = ["execute", "iter_nodes", "match", "pending_entries", "reset", "run"]

logger = logging.getLogger(__name__)


def iter_nodes(root: GrammarNode) -> Iterator[GrammarNode]:
    """Yield every node reachable from root exactly once.

    Follows Deferred definitions, so recursive grammars terminate. Iterative
    (explicit stack) so deeply nested grammars do not recurse.
    """
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(node.children()))


def pending_entries(root: GrammarNode) -> int:
    """Total number of undo entries held by nodes reachable from root."""
    return sum(node.pending for node in iter_nodes(root))


def reset(root: GrammarNode) -> None:
    """Clear undo logs, result slots and depth counters of every reachable node.

    Only needed after a parse was aborted by an exception outside run()
    or match(), which call it themselves.
    """
    for node in iter_nodes(root):
        node.clear_state()


def _describe(grammar: GrammarNode) -> str:
    return getattr(grammar, "name", type(grammar).__name__)


def _rewind(stream: Stream, start: int) -> None:
    if stream.position > start:
        stream.retreat(stream.position - start)


def execute(grammar: GrammarNode, stream: Stream) -> tuple[ResultValue, int] | None:
    """Run one complete top-level parse against an existing stream.

    The stream is left at the position where the parse started, also when
    the parse raises.

    Args:
        grammar: Root grammar node
        stream: Any Stream implementation

    Returns:
        (result, consumed byte count) on success, None on failure

    Raises:
        ProtocolError: If the grammar still holds undo entries
        RecursionDepthError: If the parse recursed too deeply
    """
    pending = pending_entries(grammar)
    if pending:
        raise ProtocolError(ErrorTemplate.grammar_busy(_describe(grammar), pending))

    start = stream.position
    try:
        if not grammar.attempt(stream):
            logger.debug("No match for %s at %d", _describe(grammar), start)
            return None
        value = grammar.result()
        consumed = stream.position - start
        grammar.unparse(stream)
    except RecursionError as e:
        reset(grammar)
        _rewind(stream, start)
        raise RecursionDepthError(
            ErrorTemplate.recursion_depth_exceeded(_describe(grammar), sys.getrecursionlimit())
        ) from e
    except Exception:
        reset(grammar)
        _rewind(stream, start)
        raise

    logger.debug("Matched %s: %d bytes from %d", _describe(grammar), consumed, start)
    return value, consumed


def _to_bytes(source: str | bytes, max_input_size: int | None) -> bytes:
    data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    limit = MAX_INPUT_SIZE if max_input_size is None else max_input_size
    if limit > 0 and len(data) > limit:
        msg = (
            f"Input size ({len(data):,} bytes) exceeds maximum "
            f"({limit:,} bytes). Pass max_input_size to increase the limit."
        )
        raise ValueError(msg)
    return data


def match(
    grammar: GrammarNode, source: str | bytes, *, max_input_size: int | None = None
) -> tuple[ResultValue, int] | None:
    """Match grammar against a prefix of source.

    Args:
        grammar: Root grammar node
        source: Input text (str is encoded as UTF-8)
        max_input_size: Size limit in bytes; None uses MAX_INPUT_SIZE,
            0 disables the check

    Returns:
        (result, consumed byte count) on success, None on failure

    Raises:
        ValueError: If source exceeds max_input_size
    """
    data = _to_bytes(source, max_input_size)
    logger.debug("Parsing %d bytes with %s", len(data), _describe(grammar))
    return execute(grammar, Cursor(data))


def run(
    grammar: GrammarNode, source: str | bytes, *, max_input_size: int | None = None
) -> ResultValue | None:
    """Parse source with grammar and return the result, or None on failure.

    Example:
        >>> grammar = Integer() >> "+" >> Integer() >> End()
        >>> run(grammar, "1 + 2").render()
        '[Seq:[Int:1],[String:+],[Int:2]]'
        >>> run(grammar, "1 +") is None
        True
    """
    matched = match(grammar, source, max_input_size=max_input_size)
    return None if matched is None else matched[0]
