"""
Literal scanners

Skip over string and regexp literals, echoing them unchanged, so that
quotes, slashes and brackets inside literals never confuse the driver or
the macro expander.

Both scanners start just after the opening delimiter has been consumed.
With in_comment=True they are scanning inside a tagged comment and refuse
anything that looks like the comment closing early.
"""

from .cursor import Cursor
from ..models.scanner import EOF
from ..models.errors import (
    UnterminatedString,
    UnterminatedRegex,
    UnterminatedCharClass,
    UnexpectedComment,
    UnexpectedCommentClose,
)


def closeAhead_is(cursor: Cursor, c: str) -> bool:
    """True when `c` and the pending character spell the comment close"""
    return c == "*" and cursor.peek() == "/"


def string_scan(cursor: Cursor, quote: str, in_comment: bool = False) -> None:
    """
    Consume and echo a string literal through its closing quote.

    A backslash escapes whatever follows it. Strings may span lines.

    Args:
        cursor: Cursor positioned after the opening quote
        quote: The opening quote character (', " or `)
        in_comment: Scanning inside a tagged comment

    Raises:
        UnexpectedCommentClose: in_comment and the string contains */
        UnterminatedString: End of input before the closing quote; reports
                            the line where the string began
    """
    start_line = cursor.line
    while True:
        c = cursor.read(echo=True)
        if c == quote:
            return
        if c == "\\":
            c = cursor.read(echo=True)
        if in_comment and closeAhead_is(cursor, c):
            raise UnexpectedCommentClose("unexpected close comment in string.", cursor.line)
        if c == EOF:
            raise UnterminatedString("unterminated string literal.", start_line)


def regexp_scan(cursor: Cursor, in_comment: bool = False) -> None:
    """
    Consume and echo a regexp literal through its closing slash.

    Inside a [...] set only ']' ends the set, so a '/' there is literal.
    Backslash escapes apply both inside and outside sets. Flags after the
    closing slash are left for the caller to echo as ordinary text.

    Args:
        cursor: Cursor positioned after the opening slash
        in_comment: Scanning inside a tagged comment

    Raises:
        UnexpectedComment: in_comment and the closing slash is followed by
                           '/' or '*'
        UnexpectedCommentClose: in_comment and the regexp contains */
        UnterminatedCharClass: End of input inside a [...] set
        UnterminatedRegex: End of input before the closing slash
    """
    start_line = cursor.line
    while True:
        c = cursor.read(echo=True)
        if c == "[":
            while True:
                c = cursor.read(echo=True)
                if c == "]":
                    break
                if c == "\\":
                    c = cursor.read(echo=True)
                if in_comment and closeAhead_is(cursor, c):
                    raise UnexpectedCommentClose("unexpected close comment in regexp.", cursor.line)
                if c == EOF:
                    raise UnterminatedCharClass(
                        "unterminated set in Regular Expression literal.", start_line
                    )
        elif c == "/":
            if in_comment and cursor.peek() in ("/", "*"):
                raise UnexpectedComment("unexpected comment.", cursor.line)
            return
        elif c == "\\":
            c = cursor.read(echo=True)
        if in_comment and closeAhead_is(cursor, c):
            raise UnexpectedCommentClose("unexpected close comment in regexp.", cursor.line)
        if c == EOF:
            raise UnterminatedRegex("unterminated regexp literal.", start_line)
