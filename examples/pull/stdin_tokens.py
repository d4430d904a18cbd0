"""Pull words from stdin one token at a time, reading at most one code point ahead."""

import sys

from statelex import EOF_RUNE, EOF_TOKEN, Lexer


def word(lexer):
    r = lexer.next()
    while r != EOF_RUNE and not r.isspace():
        r = lexer.next()
    lexer.rewind()
    if lexer.current():
        lexer.emit("WORD")
    lexer.take(" \t\r\n")
    lexer.ignore()
    return word if lexer.peek() != EOF_RUNE else None


lexer = Lexer(sys.stdin.buffer, word)
while (tok := lexer.next_token()) is not EOF_TOKEN:
    print(f"{tok.value!r} (after {lexer.bytes_read} bytes)")
