"""Result model: typed values produced by successful matches.

The set of variants is closed:

- IntegerValue: decimal number from the Integer primitive
- TextValue: matched text (Char, Literal, QuotedString contents)
- SequenceValue: ordered sub-results (Sequence, Repetition)
- CustomValue: base class for domain nodes built by semantic actions
- EmptyValue: no value (End, Epsilon, unmatched Optional); use EMPTY

All values are frozen, so a result handed to a caller can never be changed
by later backtracking in the grammar that produced it.

Rendering follows a compact bracketed form, e.g. ``[Int:1]``,
``[String:abc]``, ``[Seq:[Int:1],[String:+]]``.

Python 3.13+.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, overload

from rewindparse.enums import ResultKind

__all__ = [
    "EMPTY",
    "CustomValue",
    "EmptyValue",
    "IntegerValue",
    "ResultValue",
    "SequenceValue",
    "TextValue",
]


class ResultValue(ABC):
    """Base of every parse result.

    Subclasses set ``kind`` and implement render().
    """

    __slots__ = ()

    kind: ClassVar[ResultKind]

    @abstractmethod
    def render(self) -> str:
        """Textual rendering of this value and its children."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class IntegerValue(ResultValue):
    """Decimal number.

    Attributes:
        value: Accumulated value of the matched digits
    """

    kind: ClassVar[ResultKind] = ResultKind.INTEGER

    value: int

    def render(self) -> str:
        return f"[Int:{self.value}]"


@dataclass(frozen=True, slots=True)
class TextValue(ResultValue):
    """Matched text.

    Attributes:
        value: Decoded text (UTF-8, undecodable bytes replaced)
    """

    kind: ClassVar[ResultKind] = ResultKind.TEXT

    value: str

    def render(self) -> str:
        return f"[String:{self.value}]"


@dataclass(frozen=True, slots=True)
class SequenceValue(ResultValue):
    """Ordered sub-results.

    Supports len(), iteration and indexing, so semantic actions can pick
    items by position:

        >>> seq = SequenceValue((IntegerValue(1), TextValue("+")))
        >>> seq[0]
        IntegerValue(value=1)
        >>> len(seq)
        2

    Attributes:
        items: Sub-results in match order
    """

    kind: ClassVar[ResultKind] = ResultKind.SEQUENCE

    items: tuple[ResultValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ResultValue]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> ResultValue: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ResultValue, ...]: ...

    def __getitem__(self, index: int | slice) -> ResultValue | tuple[ResultValue, ...]:
        return self.items[index]

    def render(self) -> str:
        return "[Seq:" + ",".join(item.render() for item in self.items) + "]"


@dataclass(frozen=True, slots=True)
class EmptyValue(ResultValue):
    """Absence of a value. Compare with EMPTY or check ``kind``."""

    kind: ClassVar[ResultKind] = ResultKind.EMPTY

    def render(self) -> str:
        return "[Empty]"


class CustomValue(ResultValue):
    """Base class for domain nodes produced by semantic actions.

    Subclass it with a frozen dataclass and implement render():

        @dataclass(frozen=True, slots=True)
        class AddNode(CustomValue):
            left: ResultValue
            right: ResultValue

            def render(self) -> str:
                return f"[+:{self.left.render()},{self.right.render()}]"
    """

    __slots__ = ()

    kind: ClassVar[ResultKind] = ResultKind.CUSTOM


EMPTY: EmptyValue = EmptyValue()
