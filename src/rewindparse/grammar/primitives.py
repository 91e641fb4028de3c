"""Primitive (leaf) parsers.

Each primitive skips ignorable input with its own skip policy, tests its
token, and on success advances past it and records the consumed length.
On failure it gives the skipped input back, so the cursor ends exactly
where attempt() found it.

Primitives:
    Literal: exact byte sequence, fixed-length equality
    Char: exactly one specific byte
    Integer: maximal run of ASCII digits, value accumulated in base 10
    QuotedString: '"' ... '"' without escapes; unterminated input fails
    End: succeeds only when no input remains; never consumes
    Epsilon: always succeeds; never consumes
"""

import logging
from abc import abstractmethod

from rewindparse.constants import DIGIT_BYTES, QUOTE
from rewindparse.grammar.cursor import Stream
from rewindparse.grammar.node import GrammarNode
from rewindparse.grammar.results import EMPTY, IntegerValue, ResultValue, TextValue
from rewindparse.grammar.undo import UndoLog
from rewindparse.grammar.whitespace import NoSkip, SkipFactory, WhitespaceSkip

__all__ = ["Char", "End", "Epsilon", "Integer", "Literal", "Primitive", "QuotedString"]

logger = logging.getLogger(__name__)


def _encode(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class Primitive(GrammarNode):
    """Leaf parser: skip policy plus a log of consumed lengths.

    Subclasses implement _match(), which runs after skip() and must either
    advance the stream and return the consumed length and value, or leave
    the stream untouched (relative to the post-skip position) and return
    None.
    """

    __slots__ = ("_consumed", "_skipper")

    def __init__(self, skip: SkipFactory = WhitespaceSkip) -> None:
        super().__init__()
        self._skipper = skip()
        self._consumed: UndoLog[int] = UndoLog(self.__repr__)

    @abstractmethod
    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        """Match the token after skipping; return (length, value) or None."""

    def attempt(self, stream: Stream) -> bool:
        self._result = None
        self._skipper.skip(stream)
        matched = self._match(stream)
        if matched is None:
            self._skipper.unskip(stream)
            return False
        length, value = matched
        self._consumed.push(length)
        self._result = value
        return True

    def unparse(self, stream: Stream) -> None:
        length = self._consumed.pop()
        if length:
            stream.retreat(length)
        self._skipper.unskip(stream)
        self._result = None

    @property
    def pending(self) -> int:
        return len(self._consumed) + self._skipper.pending

    def clear_state(self) -> None:
        super().clear_state()
        self._consumed.clear()
        self._skipper.clear()


class Literal(Primitive):
    """Exact byte sequence.

    Result: TextValue of the literal itself.

    Example:
        >>> run(Literal("hello"), "  hello")
        TextValue(value='hello')
    """

    __slots__ = ("_token", "_value")

    def __init__(self, token: str | bytes, skip: SkipFactory = WhitespaceSkip) -> None:
        """Create a literal parser.

        Raises:
            ValueError: If token is empty
        """
        encoded = _encode(token)
        if not encoded:
            msg = "Literal token must not be empty"
            raise ValueError(msg)
        self._token = encoded
        self._value = TextValue(_decode(encoded))
        super().__init__(skip)

    @property
    def token(self) -> bytes:
        """Bytes this literal matches."""
        return self._token

    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        if stream.peek(len(self._token)) != self._token:
            return None
        stream.advance(len(self._token))
        return len(self._token), self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value.value!r})"


class Char(Literal):
    """Exactly one specific byte.

    Raises:
        ValueError: If the character does not encode to exactly one byte
    """

    __slots__ = ()

    def __init__(self, char: str | bytes, skip: SkipFactory = WhitespaceSkip) -> None:
        if len(_encode(char)) != 1:
            msg = f"Char expects a single byte, got {char!r}"
            raise ValueError(msg)
        super().__init__(char, skip)


class Integer(Primitive):
    """Maximal run of decimal digits.

    Fails when the first byte after skipping is not a digit. Python integers
    do not overflow, so arbitrarily long runs produce exact values.

    Result: IntegerValue.
    """

    __slots__ = ()

    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        digits = bytearray()
        while (ahead := stream.peek(1)) is not None and ahead in DIGIT_BYTES:
            stream.advance(1)
            digits += ahead
        if not digits:
            return None
        return len(digits), IntegerValue(int(bytes(digits)))

    def __repr__(self) -> str:
        return "Integer()"


class QuotedString(Primitive):
    """Double-quoted string without escape handling.

    Consumes the opening quote, everything up to the next quote, and the
    closing quote. When input ends before a closing quote the match fails
    as unterminated and every consumed byte is given back.

    Result: TextValue of the contents between the quotes.
    """

    __slots__ = ()

    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        if stream.peek(1) != QUOTE:
            return None
        stream.advance(1)
        contents = bytearray()
        while (ahead := stream.peek(1)) is not None and ahead != QUOTE:
            stream.advance(1)
            contents += ahead
        if ahead is None:
            logger.debug("Unterminated quoted string at %d", stream.position)
            stream.retreat(len(contents) + 1)
            return None
        stream.advance(1)
        return len(contents) + 2, TextValue(_decode(bytes(contents)))

    def __repr__(self) -> str:
        return "QuotedString()"


class End(Primitive):
    """End of input, after skipping trailing ignorable input.

    Contributes no items to an enclosing Sequence.
    """

    __slots__ = ()

    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        if stream.peek(1) is not None:
            return None
        return 0, EMPTY

    def items(self) -> tuple[ResultValue, ...]:
        self.result()
        return ()

    def __repr__(self) -> str:
        return "End()"


class Epsilon(Primitive):
    """Empty match: always succeeds and consumes nothing.

    Contributes no items to an enclosing Sequence.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(NoSkip)

    def _match(self, stream: Stream) -> tuple[int, ResultValue] | None:
        return 0, EMPTY

    def items(self) -> tuple[ResultValue, ...]:
        self.result()
        return ()

    def __repr__(self) -> str:
        return "Epsilon()"
