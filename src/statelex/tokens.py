"""Token and TokenType definitions for the statelex engine.

State functions emit Token objects; the engine hands each one to the active
token sink and keeps no reference afterwards.

Token kinds are chosen by the client. Any hashable value works: plain ints,
IntEnum or Enum members. TokenType holds the few kinds the engine itself needs.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final


class TokenType(Enum):
    """Token kinds reserved by the engine.

    EMPTY is free for clients that want a boundary marker kind.
    EOF only ever appears on EOF_TOKEN, the pull-mode end-of-output sentinel.

    """

    EMPTY = auto()
    EOF = auto()


# End-of-stream sentinel returned by Lexer.next() instead of a code point.
# Real code points are always one-character strings, so "" never collides.
EOF_RUNE: Final = ""


@dataclass(frozen=True, slots=True)
class Token:
    """A token emitted by a state function.

    Attributes:
        type: The token kind passed to Lexer.emit()
        value: The text consumed between the last boundary and the emission

    """

    type: Hashable
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        kind = self.type.name if isinstance(self.type, Enum) else self.type
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({kind}, {val!r})"


EOF_TOKEN: Final = Token(TokenType.EOF, "")
