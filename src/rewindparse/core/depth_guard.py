"""Depth limiting for recursive grammars.

Provides reusable depth tracking so that a self-referential grammar fails
with RecursionDepthError instead of exhausting the interpreter stack.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from rewindparse.constants import MAX_RECURSION_DEPTH, RESERVED_FRAMES
from rewindparse.diagnostics import ErrorTemplate, RecursionDepthError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in a Deferred parser:
        guard = DepthGuard(max_depth=100, name="expr")
        with guard:
            matched = target.attempt(stream)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_RECURSION_DEPTH)
        name: Label reported in RecursionDepthError
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_RECURSION_DEPTH
    name: str = "<anonymous>"
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            RecursionDepthError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            raise RecursionDepthError(
                ErrorTemplate.recursion_depth_exceeded(self.name, self.max_depth)
            )

    def reset(self) -> None:
        """Reset depth to zero (used when a parse is aborted by an exception)."""
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = RESERVED_FRAMES) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to 150
        150
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
