"""Protocols for statelex.

Defines the contract for state functions and the callback shapes
used by the token sink and the error channel.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from statelex.lexer.core import Lexer
    from statelex.tokens import Token


class StateFunc(Protocol):
    """Protocol for one state of a client lexer.

    A state consumes input through the lexer's public operations
    (next, peek, rewind, take, emit, ignore, error) and returns the
    state to run next, or None to stop scanning.

    Plain functions, bound methods and objects defining __call__ all
    satisfy this protocol. States must not touch the lexer's internals.

    Example:
        >>> def number_state(lexer: Lexer) -> StateFunc | None:
        ...     lexer.take("0123456789")
        ...     lexer.emit(NUMBER)
        ...     return None

    """

    def __call__(self, lexer: Lexer) -> StateFunc | None: ...


TokenHandler: TypeAlias = "Callable[[Token], None]"
ErrorHandler: TypeAlias = Callable[[str], None]
