"""Scan numbers, dotted identifiers and whitespace with three state functions."""

from enum import IntEnum

from statelex import EOF_RUNE, Lexer


class Kind(IntEnum):
    NUMBER = 0
    OP = 1
    IDENT = 2


def number(lexer):
    lexer.take("0123456789")
    lexer.emit(Kind.NUMBER)
    if lexer.peek() == ".":
        lexer.next()
        lexer.emit(Kind.OP)
        return ident
    return None


def ident(lexer):
    r = lexer.next()
    while "a" <= r <= "z" or r == "_":
        r = lexer.next()
    lexer.rewind()
    lexer.emit(Kind.IDENT)
    return whitespace


def whitespace(lexer):
    r = lexer.next()
    if r == EOF_RUNE:
        return None
    if r not in " \t\n\r":
        lexer.error(f"unexpected token {r!r}")
        return None
    lexer.take(" \t\n\r")
    lexer.ignore()
    return number


lexer = Lexer.from_string("123.hello  675.world", number, error_handler=print)
lexer.scan(print)
