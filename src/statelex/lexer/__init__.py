"""State-function driven lexer engine for statelex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, RuneSource, RewindLog
├── core.py              # Lexer (cursor, emission, driver, pull modes, errors)
├── source.py            # RuneSource (byte stream -> code points)
└── rewind.py            # RewindLog (undo log bounded by emission boundary)

Usage:
    >>> from statelex.lexer import Lexer
    >>> def digits(lexer):
    ...     lexer.take("0123456789")
    ...     lexer.emit("NUMBER")
    ...     return None
    >>> for token in Lexer.from_string("42", digits).tokenize():
    ...     print(token)
Token(NUMBER, '42')
Token(EOF, '')

"""

from statelex.lexer.core import Lexer
from statelex.lexer.rewind import RewindLog
from statelex.lexer.source import RuneSource

__all__ = ["Lexer", "RewindLog", "RuneSource"]
