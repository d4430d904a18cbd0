"""Exception classes for statelex.

Provides standardized exceptions for error handling throughout statelex.
"""

from __future__ import annotations


class StatelexError(Exception):
    """Base exception for all statelex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(StatelexError):
    """Error reported by a state function through Lexer.error().

    Stored on Lexer.err when an error handler is registered, so the
    caller can inspect it once scanning stops.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize lex error.

        Args:
            message: Error description, exactly as the state function gave it
            offset: Consumed-byte offset at which the error was raised (optional)
        """
        self.message = message
        self.offset = offset
        super().__init__(message)


class UnhandledLexError(LexError):
    """Error reported while no error handler is registered.

    This is a contract violation by the embedding application, not a
    data error. The driver never catches it; it aborts the scan.
    """

    pass
