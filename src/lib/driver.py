"""
Top-level scanner for jsdev

Walks the whole input once, echoing ordinary text and handing activated
comments to the MacroExpander. The only JavaScript it understands is what
is needed to find literal and comment boundaries:

- quotes start string literals, which are skipped whole
- // starts a line comment, echoed through the end of the line
- /* starts a block comment; if the identifier right after it is an
  activated tag the comment is expanded, otherwise it is echoed
- any other / is division, or the start of a regexp literal when the
  previous significant character is one of ( , = : [ ! & | ? { } ;

Example:
    >>> from jsdev.lib.tags import registry_fromTokens
    >>> transform("/*log 'hi'*/", registry_fromTokens(["log:console.log"]))
    "{console.log('hi');}"
"""

import io
from typing import Optional, TextIO

from .cursor import Cursor
from .expander import MacroExpander
from .lexical import QUOTE_CHARS, identifierChar_is, regexp_precedes, significant_is
from .literals import string_scan, regexp_scan
from .tags import TagRegistry
from .log import LOG
from ..config import appsettings
from ..models.scanner import EOF, TransformResult
from ..models.errors import NestedComment, UnterminatedComment


class Preprocessor:
    """
    One-shot transformation of a source stream into a sink stream

    Attributes:
        registry: Activated tags
        cursor: Cursor over source/sink
        expander: MacroExpander sharing the cursor
        left: Most recent significant character at top level, used to tell
              a regexp from a division
        result: Statistics for the run
    """

    def __init__(
        self,
        registry: TagRegistry,
        source: TextIO,
        sink: TextIO,
        max_tag_length: Optional[int] = None,
    ) -> None:
        self.registry = registry
        self.cursor = Cursor(source, sink)
        self.expander = MacroExpander(self.cursor)
        self.max_tag_length = max_tag_length or appsettings.max_tag_length
        self.left = ""
        self.result = TransformResult()

    def run(self) -> TransformResult:
        """
        Transform the entire source.

        Returns:
            TransformResult for the run

        Raises:
            ScanError: On the first malformed construct
            OutputError: If the sink cannot be written
        """
        cursor = self.cursor
        cursor.emit(self.registry.header())
        cursor.line = 1

        c = cursor.read()
        while c != EOF:
            if c in QUOTE_CHARS:
                cursor.emit(c)
                string_scan(cursor, c)
            elif c == "/":
                self.slash_process()
            else:
                cursor.emit(c)
                if significant_is(c):
                    self.left = c
            c = cursor.read()

        self.result.lines = cursor.line
        return self.result

    def slash_process(self) -> None:
        """Sort a '/' into line comment, block comment, regexp or division"""
        cursor = self.cursor
        following = cursor.peek()
        if following == "/":
            self.lineComment_echo()
        elif following == "*":
            cursor.read()
            self.blockComment_process()
        else:
            cursor.emit("/")
            if regexp_precedes(self.left):
                regexp_scan(cursor)
            self.left = "/"

    def lineComment_echo(self) -> None:
        """Echo a // comment through its line break (or end of input)"""
        cursor = self.cursor
        cursor.emit("/")
        while True:
            c = cursor.read(echo=True)
            if c in ("\n", "\r", EOF):
                return

    def tag_read(self) -> str:
        """Read the identifier run that follows /* (possibly empty)"""
        cursor = self.cursor
        chars = []
        while len(chars) < self.max_tag_length and identifierChar_is(cursor.peek()):
            chars.append(cursor.read())
        return "".join(chars)

    def blockComment_process(self) -> None:
        """
        Expand or echo a block comment whose /* has been consumed.

        An empty tag never matches, so a plain /* comment */ is echoed.
        """
        tag_name = self.tag_read()
        index = self.registry.lookup(tag_name) if tag_name else None
        if index is None:
            self.cursor.emit("/*" + tag_name)
            self.comment_echo()
            self.result.comments_echoed += 1
            return
        tag = self.registry.get(index)
        self.expander.expand(tag)
        self.result.expansion_record(tag.name)

    def comment_echo(self) -> None:
        """
        Echo the rest of an unmatched block comment through its */.

        Raises:
            NestedComment: A /* or // appears inside the comment
            UnterminatedComment: End of input before */; reports the line
                                 where the comment began
        """
        cursor = self.cursor
        start_line = cursor.line
        c = cursor.read(echo=True)
        while True:
            if c == EOF:
                raise UnterminatedComment("unterminated comment.", start_line)
            if c == "/":
                c = cursor.read(echo=True)
                if c in ("*", "/"):
                    raise NestedComment("nested comment.", cursor.line)
            elif c == "*":
                c = cursor.read(echo=True)
                if c == "/":
                    return
            else:
                c = cursor.read(echo=True)


def stream_transform(
    source: TextIO,
    sink: TextIO,
    registry: TagRegistry,
    max_tag_length: Optional[int] = None,
) -> TransformResult:
    """
    Transform `source` into `sink` with the given registry.

    Both streams should be opened with newline="" so line endings pass
    through untouched.
    """
    result = Preprocessor(registry, source, sink, max_tag_length).run()
    LOG(
        f"Scanned {result.lines} lines: {result.expansion_total} expanded, "
        f"{result.comments_echoed} comments passed through",
        level=2,
    )
    return result


def transform(text: str, registry: TagRegistry, max_tag_length: Optional[int] = None) -> str:
    """
    Transform an in-memory source text.

    Args:
        text: JavaScript source
        registry: Activated tags
        max_tag_length: Longest tag name read after /* (defaults to settings)

    Returns:
        The transformed source
    """
    sink = io.StringIO(newline="")
    stream_transform(io.StringIO(text, newline=""), sink, registry, max_tag_length)
    return sink.getvalue()
