"""
statelex: State-Function Lexer Engine for Python

A building block for hand-written lexers. Clients define token kinds and
state functions; statelex supplies code-point decoding from a byte stream,
lookahead with bounded rewind, and token emission.

Quick Start:
    >>> from statelex import EOF_RUNE, Lexer
    >>> def number(lexer):
    ...     lexer.take("0123456789")
    ...     lexer.emit("NUMBER")
    ...     return whitespace if lexer.peek() != EOF_RUNE else None
    >>> def whitespace(lexer):
    ...     lexer.take(" \\t\\n")
    ...     lexer.ignore()
    ...     return number
    >>> tokens = []
    >>> Lexer.from_string("12 34", number).scan(tokens.append)
    >>> tokens
    [Token(NUMBER, '12'), Token(NUMBER, '34')]

    >>> # Or pull one token at a time
    >>> lexer = Lexer.from_string("12 34", number)
    >>> lexer.next_token()
    Token(NUMBER, '12')

Installation:
    pip install statelex              # zero runtime dependencies
"""

from statelex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from statelex.errors import LexError, StatelexError, UnhandledLexError
from statelex.lexer import Lexer, RewindLog, RuneSource
from statelex.protocols import ErrorHandler, StateFunc, TokenHandler
from statelex.tokens import EOF_RUNE, EOF_TOKEN, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "EOF_RUNE",
    "EOF_TOKEN",
    "ErrorHandler",
    "LexError",
    "Lexer",
    "LexerConfig",
    "RewindLog",
    "RuneSource",
    "StateFunc",
    "StatelexError",
    "Token",
    "TokenHandler",
    "TokenType",
    "UnhandledLexError",
    "__version__",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
