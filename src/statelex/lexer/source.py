"""Code-point source adapter.

Wraps a binary stream and decodes it one Unicode code point at a time,
reading a single byte per call to the underlying stream so that no input
is ever pulled beyond the code point being decoded.

End-of-stream, a short read in the middle of a multi-byte sequence, an
OSError from the stream and a decode error under the "strict" policy all
surface identically as EOF_RUNE.

"""

from __future__ import annotations

import codecs
from collections import deque
from typing import BinaryIO

from statelex.config import LexerConfig, get_lexer_config
from statelex.tokens import EOF_RUNE
from statelex.utils.logger import get_logger

logger = get_logger(__name__)


class RuneSource:
    """Decode code points from a byte stream.

    Attributes:
        bytes_read: Bytes pulled from the stream so far, lookahead included
        read_error: The OSError or UnicodeDecodeError that ended the stream, if any

    Usage:
            >>> import io
            >>> src = RuneSource(io.BytesIO("né".encode()))
            >>> src.next_rune()
            ('n', 1)
            >>> src.next_rune()
            ('é', 2)
            >>> src.next_rune()
            ('', 0)
            >>> src.bytes_read
            3

    """

    __slots__ = (
        "_stream",
        "_decoder",
        "_pending",  # Code points released by the decoder but not yet returned
        "_exhausted",
        "bytes_read",
        "read_error",
    )

    def __init__(self, stream: BinaryIO, config: LexerConfig | None = None) -> None:
        """Initialize the adapter.

        Args:
            stream: Any object with a read(n) -> bytes method
            config: Decoding configuration (defaults to the context config)
        """
        config = config or get_lexer_config()
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder(config.encoding)(
            errors=config.decode_errors
        )
        self._pending: deque[tuple[str, int]] = deque()
        self._exhausted = False
        self.bytes_read = 0
        self.read_error: OSError | UnicodeDecodeError | None = None

    def next_rune(self) -> tuple[str, int]:
        """Decode the next code point.

        Returns:
            (code point, bytes consumed for it), or (EOF_RUNE, 0) at end of input.
        """
        if self._pending:
            return self._pending.popleft()

        consumed = 0
        while True:
            chunk = self._read_byte()
            if not chunk:
                return EOF_RUNE, 0
            consumed += 1
            self.bytes_read += 1
            try:
                text = self._decoder.decode(chunk)
            except UnicodeDecodeError as e:
                logger.warning("Undecodable input, treating as end of stream: %s", e)
                self.read_error = e
                self._exhausted = True
                return EOF_RUNE, 0
            if text:
                break

        # Extra code points come from the byte that completed the sequence
        extra = len(text) - 1
        self._pending.extend((rune, 1) for rune in text[1:])
        return text[0], max(consumed - extra, 0)

    def _read_byte(self) -> bytes:
        if self._exhausted:
            return b""
        try:
            chunk = self._stream.read(1)
        except OSError as e:
            logger.warning("Read from source failed, treating as end of stream: %s", e)
            self.read_error = e
            chunk = b""
        if not chunk:
            self._exhausted = True
            return b""
        return chunk
