"""Property-based tests for cursor invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from statelex import EOF_RUNE, Lexer, RewindLog, Token

text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=200)


def _window_ok(lexer: Lexer) -> bool:
    return 0 <= lexer._start <= lexer._position <= len(lexer._buf)


class TestCursorInvariants:
    """Invariants of next, rewind and peek."""

    @given(text)
    @settings(max_examples=100)
    def test_next_reproduces_source(self, source: str) -> None:
        """Consuming everything yields the source, then EOF."""
        lexer = Lexer.from_string(source)
        runes = []
        while (r := lexer.next()) != EOF_RUNE:
            runes.append(r)
        assert "".join(runes) == source
        assert lexer.current() == source
        assert lexer.bytes_read == len(source.encode())

    @given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=50))
    @settings(max_examples=100)
    def test_rewind_single_rune_empties_current(self, source: str) -> None:
        lexer = Lexer.from_string(source)
        lexer.next()
        lexer.rewind()
        assert lexer.current() == ""

    @given(text, st.integers(min_value=0, max_value=50))
    @settings(max_examples=100)
    def test_peek_changes_nothing(self, source: str, steps: int) -> None:
        lexer = Lexer.from_string(source)
        for _ in range(steps):
            lexer.next()
        before = (lexer.current(), lexer.bytes_read)
        peeked = lexer.peek()
        assert (lexer.current(), lexer.bytes_read) == before
        assert lexer.next() == peeked

    @given(text, st.integers(min_value=0, max_value=60), st.integers(min_value=0, max_value=80))
    @settings(max_examples=200)
    def test_rewinds_stop_at_boundary(self, source: str, forward: int, back: int) -> None:
        lexer = Lexer.from_string(source)
        for _ in range(forward):
            lexer.next()
        consumed = lexer.current()
        for _ in range(back):
            lexer.rewind()
            assert _window_ok(lexer)
        assert consumed.startswith(lexer.current())
        assert lexer.bytes_read == len(lexer.current().encode())


class TestTakeInvariants:
    """take() consumes the maximal accepted prefix."""

    @given(st.text(alphabet="abc123 ", max_size=60))
    @settings(max_examples=200)
    def test_take_maximal_prefix(self, source: str) -> None:
        accept = "abc"
        lexer = Lexer.from_string(source)
        lexer.take(accept)

        taken = lexer.current()
        assert all(ch in accept for ch in taken)
        assert source.startswith(taken)
        rest = source[len(taken) :]
        if rest:
            assert rest[0] not in accept
            assert lexer.next() == rest[0]
        else:
            assert lexer.next() == EOF_RUNE


class TestBoundaryInvariants:
    """Emission resets the window and hides earlier input from rewind."""

    @given(text, st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
    @settings(max_examples=100)
    def test_emit_then_rewind(self, source: str, forward: int, back: int) -> None:
        tokens: list[Token] = []
        lexer = Lexer.from_string(source, token_handler=tokens.append)
        for _ in range(forward):
            lexer.next()
        expected = lexer.current()
        lexer.emit("SPAN")

        assert tokens == [Token("SPAN", expected)]
        assert lexer.current() == ""
        bytes_after_emit = lexer.bytes_read
        for _ in range(back):
            lexer.rewind()
        assert lexer.current() == ""
        assert lexer.bytes_read == bytes_after_emit
        assert lexer._rewind.pop() is None

    @given(text)
    @settings(max_examples=50)
    def test_alternating_emit_and_ignore(self, source: str) -> None:
        """Emitting every other code point and ignoring the rest loses no input."""
        tokens: list[Token] = []
        lexer = Lexer.from_string(source, token_handler=tokens.append)
        keep = True
        while lexer.next() != EOF_RUNE:
            if keep:
                lexer.emit("KEEP")
            else:
                lexer.ignore()
            keep = not keep
        assert [t.value for t in tokens] == list(source[::2])
        assert lexer.bytes_read == len(source.encode())


class TestRewindLog:
    """RewindLog is a plain undo stack."""

    def test_push_pop_order(self) -> None:
        log = RewindLog()
        log.push("a", 1)
        log.push("é", 2)
        assert log.pop() == ("é", 2)
        assert log.pop() == ("a", 1)
        assert log.pop() is None

    def test_eof_entry_is_kept(self) -> None:
        log = RewindLog()
        log.push("a", 1)
        log.push(EOF_RUNE, 0)
        assert log.pop() == (EOF_RUNE, 0)
        assert log.pop() == ("a", 1)

    def test_clear(self) -> None:
        log = RewindLog()
        log.push("a", 1)
        log.clear()
        assert log.pop() is None

    @given(text)
    @settings(max_examples=50)
    def test_log_matches_consumption(self, source: str) -> None:
        """The lexer's log holds exactly what was consumed since the boundary."""
        lexer = Lexer.from_string(source)
        for _ in range(len(source)):
            lexer.next()
        undone = []
        while (entry := lexer._rewind.pop()) is not None:
            undone.append(entry[0])
        assert "".join(reversed(undone)) == lexer.current() == source
