"""
Cursor tests - reading, pushback, echo and line counting

Line breaks may be \\n, \\r or \\r\\n; each must count as exactly one line.
"""

import io

import pytest

from jsdev.lib.cursor import Cursor
from jsdev.models.scanner import EOF
from jsdev.models.errors import InputError, OutputError


def cursor_make(text: str) -> Cursor:
    return Cursor(io.StringIO(text, newline=""), io.StringIO(newline=""))


def cursor_drain(cursor: Cursor) -> None:
    while cursor.read() != EOF:
        pass


class TestReading:
    """Test peek, read and pushback"""

    def test_read_in_order(self):
        """Characters come back in input order"""
        cursor = cursor_make("ab")
        assert cursor.read() == "a"
        assert cursor.read() == "b"
        assert cursor.read() == EOF

    def test_peek_does_not_consume(self):
        """peek() returns the next character and leaves it pending"""
        cursor = cursor_make("xy")
        assert cursor.peek() == "x"
        assert cursor.peek() == "x"
        assert cursor.read() == "x"
        assert cursor.peek() == "y"

    def test_pushback(self):
        """A pushed back character is returned by the next read"""
        cursor = cursor_make("bc")
        c = cursor.read()
        cursor.pushback(c)
        assert cursor.peek() == "b"
        assert cursor.read() == "b"
        assert cursor.read() == "c"

    def test_end_repeats(self):
        """Reading past the end keeps returning EOF"""
        cursor = cursor_make("")
        assert cursor.peek() == EOF
        assert cursor.read() == EOF
        assert cursor.read() == EOF

    def test_nul_is_end_of_input(self):
        """A NUL character ends the input"""
        cursor = cursor_make("a\0b")
        assert cursor.read() == "a"
        assert cursor.read() == EOF

    def test_peek_nul_is_end_of_input(self):
        """peek() also reports a NUL character as EOF"""
        cursor = cursor_make("a\0b")
        assert cursor.read() == "a"
        assert cursor.peek() == EOF
        assert cursor.read() == EOF

    def test_failed_read(self):
        """A source that cannot be read raises InputError"""

        class BrokenSource(io.StringIO):
            def read(self, size=-1):
                raise OSError("device gone")

        cursor = Cursor(BrokenSource(), io.StringIO())
        with pytest.raises(InputError, match="read error"):
            cursor.peek()
        with pytest.raises(InputError, match="read error"):
            cursor.read()


class TestEcho:
    """Test echo and emit"""

    def test_echo_writes_to_sink(self):
        """read(echo=True) copies the character to the sink"""
        cursor = cursor_make("abc")
        cursor.read(echo=True)
        cursor.read()
        cursor.read(echo=True)
        assert cursor.sink.getvalue() == "ac"

    def test_emit_interleaves_with_echo(self):
        """Explicit emits appear in call order"""
        cursor = cursor_make("b")
        cursor.emit("a")
        cursor.read(echo=True)
        cursor.emit("c")
        assert cursor.sink.getvalue() == "abc"

    def test_failed_write(self):
        """A sink that cannot be written raises OutputError"""

        class BrokenSink(io.StringIO):
            def write(self, text):
                raise OSError("disk full")

        cursor = Cursor(io.StringIO("x"), BrokenSink())
        with pytest.raises(OutputError, match="write error"):
            cursor.read(echo=True)


class TestLineCounting:
    """Test line numbers for the three line break styles"""

    def test_starts_at_one(self):
        """A fresh cursor is on line 1"""
        assert cursor_make("abc").line == 1

    @pytest.mark.parametrize("text", ["a\nb\nc", "a\r\nb\r\nc", "a\rb\rc"])
    def test_break_styles_count_once(self, text):
        """LF, CRLF and CR each count as one line break"""
        cursor = cursor_make(text)
        cursor_drain(cursor)
        assert cursor.line == 3

    def test_cr_counts_immediately(self):
        """The line advances as soon as the carriage return is read"""
        cursor = cursor_make("a\r\nb")
        cursor.read()
        cursor.read()
        assert cursor.line == 2
        cursor.read()
        assert cursor.line == 2

    def test_blank_crlf_lines(self):
        """Consecutive CRLF pairs are not merged"""
        cursor = cursor_make("\r\n\r\n\r\n")
        cursor_drain(cursor)
        assert cursor.line == 4

    def test_cr_cr_lf(self):
        """CR CR LF is two line breaks"""
        cursor = cursor_make("\r\r\n")
        cursor_drain(cursor)
        assert cursor.line == 3
