"""
Character cursor over a text stream

The Cursor is the only thing in jsdev that touches the streams. It reads
one character at a time with a single character of pushback, counts
lines, and optionally echoes what it reads to the output sink, so the
output order is exactly the order of echoing reads and explicit emits.

Streams must be opened with newline="" so that carriage returns reach
the Cursor untranslated.
"""

from typing import TextIO

from ..models.scanner import CursorState, EOF
from ..models.errors import InputError, OutputError


class Cursor:
    """
    One-pass reader with pushback, line counting and echo

    Line breaks are "\\r", "\\n" or "\\r\\n", each counted exactly once.
    A NUL character is reported as end of input.
    """

    def __init__(self, source: TextIO, sink: TextIO) -> None:
        """
        Args:
            source: Text stream to scan
            sink: Text stream receiving echoed and emitted output
        """
        self.source = source
        self.sink = sink
        self.state = CursorState()

    @property
    def line(self) -> int:
        return self.state.line

    @line.setter
    def line(self, value: int) -> None:
        self.state.line = value

    def peek(self) -> str:
        """Return the next character without consuming it (EOF at end)"""
        if self.state.pending is None:
            c = self.source_read()
            self.state.pending = EOF if c == "\0" else c
        return self.state.pending

    def read(self, echo: bool = False) -> str:
        """
        Consume and return the next character.

        Args:
            echo: Also write the character to the sink

        Returns:
            The character, or EOF at end of input
        """
        if self.state.pending is not None:
            c = self.state.pending
            self.state.pending = None
        else:
            c = self.source_read()
        if not c or c == "\0":
            return EOF
        if c == "\r":
            self.state.saw_cr = True
            self.state.line += 1
        else:
            if c == "\n" and not self.state.saw_cr:
                self.state.line += 1
            self.state.saw_cr = False
        if echo:
            self.emit(c)
        return c

    def source_read(self) -> str:
        """Read one character from the source, raising InputError on failure"""
        try:
            return self.source.read(1)
        except OSError as e:
            raise InputError(e) from e

    def pushback(self, c: str) -> None:
        """Make `c` the next character returned by peek()/read()"""
        self.state.pending = c

    def emit(self, text: str) -> None:
        """Write text to the sink, raising OutputError on failure"""
        if not text:
            return
        try:
            self.sink.write(text)
        except (OSError, ValueError) as e:
            raise OutputError(e) from e
