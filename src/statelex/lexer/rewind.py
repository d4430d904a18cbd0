"""Bounded undo log for code-point consumption.

Every Lexer.next() pushes one entry; Lexer.rewind() pops one. The log is
cleared at each emission boundary (emit or ignore), which bounds how far
back a state function can ever rewind.

Thread Safety:
Owned by exactly one Lexer and never exposed to state functions.

"""

from __future__ import annotations


class RewindLog:
    """Stack of (code point, byte width) pairs consumed since the last boundary.

    End-of-stream is logged as (EOF_RUNE, 0) so that rewinding it is a no-op
    for the cursor but still balances the preceding next().

    Usage:
            >>> log = RewindLog()
            >>> log.push("a", 1)
            >>> log.push("", 0)  # EOF_RUNE
            >>> log.pop()
            ('', 0)
            >>> log.pop()
            ('a', 1)
            >>> log.pop() is None
            True

    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[tuple[str, int]] = []

    def push(self, rune: str, width: int) -> None:
        """Record one consumed code point."""
        self._entries.append((rune, width))

    def pop(self) -> tuple[str, int] | None:
        """Remove and return the most recent entry, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        """Forget everything consumed before the current boundary."""
        self._entries.clear()

