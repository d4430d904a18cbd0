"""State-function driven lexer engine.

Client lexers are written as a set of state functions. Each one consumes
code points through the cursor operations, emits or ignores the consumed
span, and returns the next state (or None to stop).

The engine keeps a window [start, position) over the code points decoded
since the last emission boundary. Consumption can be undone with rewind()
back to that boundary, never past it.

Consumption modes:
- scan(callback): push every token to a callback until the chain stops
- next_token_batch(): run one state, return what it emitted
- next_token(): return exactly one token, running states as needed

All modes share one pending-state reference and can be mixed.

Thread Safety:
Lexer instances are single-use. Create one per source stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import io
from collections import deque
from collections.abc import Container, Hashable, Iterator
from typing import Any, BinaryIO

from statelex.config import LexerConfig, get_lexer_config
from statelex.errors import LexError, UnhandledLexError
from statelex.lexer.rewind import RewindLog
from statelex.lexer.source import RuneSource
from statelex.protocols import ErrorHandler, StateFunc, TokenHandler
from statelex.tokens import EOF_RUNE, EOF_TOKEN, Token
from statelex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Lexer engine driven by client state functions.

    Usage:
            >>> def number_state(lexer):
            ...     lexer.take("0123456789")
            ...     lexer.emit("NUMBER")
            ...     return None
            >>> lexer = Lexer.from_string("123", number_state)
            >>> lexer.scan(print)
        Token(NUMBER, '123')

    Attributes:
        source: The code-point source adapter
        state: The state to run next (None once scanning has stopped)
        err: Last error reported through a registered error handler
        token_handler: Sink for tokens emitted outside scan() and pull modes
        error_handler: Recoverable error callback; None makes errors fatal

    Thread Safety:
        Lexer instances are single-use. Create one per source stream.

    """

    __slots__ = (
        "source",
        "state",
        "err",
        "token_handler",
        "error_handler",
        "_config",
        "_buf",  # Decoded code points not yet emitted or ignored
        "_widths",  # Encoded byte width of each entry in _buf
        "_start",
        "_position",
        "_rewind",
        "_consumed",  # Bytes consumed up to _position since construction
        "_pending",  # Pull-mode token queue
    )

    def __init__(
        self,
        source: BinaryIO,
        start: StateFunc | None = None,
        *,
        error_handler: ErrorHandler | None = None,
        token_handler: TokenHandler | None = None,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer over a byte stream.

        Args:
            source: Binary stream to decode (anything with read(n) -> bytes)
            start: Initial state function; None makes every driver stop at once
            error_handler: Callback for error(); omit to make errors fatal
            token_handler: Sink for tokens emitted outside scan() and pull modes
            config: Lexer configuration (defaults to the context config)
        """
        self._config = config or get_lexer_config()
        self.source = RuneSource(source, self._config)
        self.state = start
        self.err: LexError | None = None
        self.token_handler = token_handler
        self.error_handler = error_handler

        self._buf: list[str] = []
        self._widths: list[int] = []
        self._start = 0
        self._position = 0
        self._rewind = RewindLog()
        self._consumed = 0

        self._pending: deque[Token] = deque()

    @classmethod
    def from_string(cls, text: str, start: StateFunc | None = None, **kwargs: Any) -> Lexer:
        """Create a lexer over in-memory text, encoded with the configured codec."""
        config = kwargs.get("config") or get_lexer_config()
        return cls(io.BytesIO(text.encode(config.encoding)), start, **kwargs)

    @classmethod
    def from_bytes(cls, data: bytes, start: StateFunc | None = None, **kwargs: Any) -> Lexer:
        """Create a lexer over in-memory bytes."""
        return cls(io.BytesIO(data), start, **kwargs)

    # =========================================================================
    # Cursor operations (for use inside state functions)
    # =========================================================================

    def next(self) -> str:
        """Consume and return the next code point, or EOF_RUNE at end of input."""
        if self._position < len(self._buf):
            rune = self._buf[self._position]
            width = self._widths[self._position]
            self._position += 1
            self._consumed += width
            self._rewind.push(rune, width)
            return rune

        rune, width = self.source.next_rune()
        if rune != EOF_RUNE:
            self._buf.append(rune)
            self._widths.append(width)
            self._position += 1
            self._consumed += width
        self._rewind.push(rune, width)
        return rune

    def rewind(self) -> None:
        """Undo the most recent next().

        Can be repeated back to the last emission boundary; rewinding
        further is a no-op.
        """
        entry = self._rewind.pop()
        if entry is None:
            return
        rune, width = entry
        if rune != EOF_RUNE and self._position > self._start:
            self._position -= 1
            self._consumed -= width

    def peek(self) -> str:
        """Return the next code point without consuming it."""
        rune = self.next()
        self.rewind()
        return rune

    def take(self, accept: Container[str]) -> None:
        """Consume the longest run of code points that are members of accept.

        Args:
            accept: A string of acceptable characters, or any container of them.
        """
        rune = self.next()
        while rune != EOF_RUNE and rune in accept:
            rune = self.next()
        self.rewind()  # last next() was not a match

    def current(self) -> str:
        """Return the text consumed since the last emission boundary."""
        return "".join(self._buf[self._start : self._position])

    @property
    def bytes_read(self) -> int:
        """Bytes consumed up to the cursor since construction (lookahead excluded)."""
        return self._consumed

    # =========================================================================
    # Emission protocol
    # =========================================================================

    def emit(self, kind: Hashable) -> None:
        """Deliver the current span as a token of the given kind.

        Zero-length spans are legal and produce an empty-valued token.
        """
        tok = Token(kind, self.current())
        if self.token_handler is not None:
            self.token_handler(tok)
        self._slide()

    def ignore(self) -> None:
        """Discard the current span without producing a token."""
        self._slide()

    def _slide(self) -> None:
        """Move the emission boundary up to the cursor."""
        del self._buf[: self._position]
        del self._widths[: self._position]
        self._start = 0
        self._position = 0
        self._rewind.clear()

    # =========================================================================
    # Error channel
    # =========================================================================

    def error(self, message: str) -> None:
        """Report a grammar error.

        With an error handler registered the error is recorded on err and
        the handler is called; the calling state decides whether to stop.
        Without one this raises UnhandledLexError.

        Raises:
            UnhandledLexError: No error handler is registered.
        """
        if self.error_handler is None:
            logger.error("Lexing error with no error handler registered: %s", message)
            raise UnhandledLexError(message, offset=self._consumed)
        logger.debug("Lexing error at byte %d: %s", self._consumed, message)
        self.err = LexError(message, offset=self._consumed)
        self.error_handler(message)

    # =========================================================================
    # Driver and consumption modes
    # =========================================================================

    def _step(self) -> None:
        """Run the pending state once and advance to its successor."""
        state = self.state
        if state is None:
            return
        self.state = state(self)
        if self._config.trace_states:
            logger.debug(
                "%s -> %s",
                getattr(state, "__name__", state),
                getattr(self.state, "__name__", self.state),
            )

    def scan(self, callback: TokenHandler) -> None:
        """Run states until one returns None, pushing every token to callback.

        Tokens still queued by next_token() are delivered first.
        """
        while self._pending:
            callback(self._pending.popleft())

        previous = self.token_handler
        self.token_handler = callback
        try:
            while self.state is not None:
                self._step()
        finally:
            self.token_handler = previous

    def next_token_batch(self) -> list[Token]:
        """Run exactly one state and return the tokens it emitted.

        Tokens still queued by next_token() are returned instead, without
        running any state.

        Returns:
            The tokens emitted by that state, possibly none, in emission order.
            [EOF_TOKEN] once the chain has terminated.
        """
        if self._pending:
            queued = list(self._pending)
            self._pending.clear()
            return queued

        if self.state is None:
            return [EOF_TOKEN]

        batch: list[Token] = []
        previous = self.token_handler
        self.token_handler = batch.append
        try:
            self._step()
        finally:
            self.token_handler = previous
        return batch

    def next_token(self) -> Token:
        """Return the next token, running as many states as needed.

        Tokens left over from a state that emitted several are returned
        first, without running any state.

        Returns:
            The next token, or EOF_TOKEN once the chain has terminated.
        """
        while not self._pending:
            self._pending.extend(self.next_token_batch())
        return self._pending.popleft()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source into a token stream.

        Yields:
            Token objects one at a time, ending with EOF_TOKEN.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok is EOF_TOKEN:
                return
