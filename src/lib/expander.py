"""
Macro expander for activated comments

Turns a tagged comment into code. The cursor sits just after the tag name
when expansion starts, and just after the closing */ when it ends.

    /*tag stuff*/               ->  {stuff}
    /*tag(cond) stuff*/         ->  if (cond) {stuff}
    /*tag stuff*/  (tag:fn)     ->  {fn(stuff);}
    /*tag(cond) stuff*/ (tag:fn) -> if (cond) {fn(stuff);}

The condition and the stuff are echoed as they are scanned. Strings and
regexps inside them are skipped with the literal scanners so that brackets
and slashes inside literals are not counted.
"""

from .cursor import Cursor
from .lexical import (
    OPEN_BRACKETS,
    CLOSE_BRACKETS,
    QUOTE_CHARS,
    regexp_precedes,
    significant_is,
)
from .literals import string_scan, regexp_scan
from .log import LOG
from ..models.tags import TagDefinition
from ..models.scanner import EOF, REGION_LEFT
from ..models.errors import (
    UnclosedCondition,
    UnbalancedStuff,
    UnexpectedComment,
    UnterminatedStuff,
)


class MacroExpander:
    """
    Expands one matched tagged comment at a time

    Holds no state between expansions apart from the shared Cursor.
    """

    def __init__(self, cursor: Cursor) -> None:
        self.cursor = cursor

    def expand(self, tag: TagDefinition) -> None:
        """
        Emit the code form of the tagged comment under the cursor.

        Args:
            tag: The matched tag definition

        Raises:
            ScanError: Any problem in the condition or stuff body
        """
        cursor = self.cursor
        start_line = cursor.line
        if cursor.peek() == "(":
            cursor.emit("if ")
            self.condition_scan()
            cursor.emit(" ")
        cursor.emit("{")
        if tag.bound_call:
            cursor.emit(f"{tag.bound_call}(")
            self.stuff_scan()
            cursor.emit(");}")
        else:
            self.stuff_scan()
            cursor.emit("}")
        LOG(f"Expanded /*{tag.name}*/ at line {start_line}", level=3)

    def condition_scan(self) -> None:
        """
        Echo a parenthesized condition, parens included.

        A single depth counter covers (), {} and []; the condition ends when
        it returns to zero, so mismatched bracket kinds are not detected.

        Raises:
            UnclosedCondition: End of input, or the comment closes first
            UnexpectedComment: A // or /* inside the condition
        """
        cursor = self.cursor
        left = REGION_LEFT
        depth = 0
        while True:
            c = cursor.read(echo=True)
            if c == EOF:
                raise UnclosedCondition("unterminated condition.", cursor.line)
            elif c in OPEN_BRACKETS:
                depth += 1
            elif c in CLOSE_BRACKETS:
                depth -= 1
                if depth == 0:
                    return
            elif c in QUOTE_CHARS:
                string_scan(cursor, c, in_comment=True)
            elif c == "/":
                if cursor.peek() in ("/", "*"):
                    raise UnexpectedComment("unexpected comment.", cursor.line)
                if regexp_precedes(left):
                    regexp_scan(cursor, in_comment=True)
            elif c == "*" and cursor.peek() == "/":
                raise UnclosedCondition("unclosed condition.", cursor.line)
            if significant_is(c):
                left = c

    def stuff_scan(self) -> None:
        """
        Echo the stuff body and consume the closing */.

        Leading spaces are dropped. A run of '*' is held back until it is
        known not to be the start of the comment close.

        Raises:
            UnbalancedStuff: Bracket depth below zero, or above zero at the end
            UnexpectedComment: A // or /* inside the body
            UnterminatedStuff: End of input before */
        """
        cursor = self.cursor
        left = REGION_LEFT
        depth = 0
        while cursor.peek() == " ":
            cursor.read()
        while True:
            while cursor.peek() == "*":
                cursor.read()
                if cursor.peek() == "/":
                    cursor.read()
                    if depth > 0:
                        raise UnbalancedStuff("unbalanced stuff.", cursor.line)
                    return
                cursor.emit("*")
            c = cursor.read(echo=True)
            if c == EOF:
                raise UnterminatedStuff("unterminated stuff.", cursor.line)
            elif c in QUOTE_CHARS:
                string_scan(cursor, c, in_comment=True)
            elif c in OPEN_BRACKETS:
                depth += 1
            elif c in CLOSE_BRACKETS:
                depth -= 1
                if depth < 0:
                    raise UnbalancedStuff("unbalanced stuff.", cursor.line)
            elif c == "/":
                if cursor.peek() in ("/", "*"):
                    raise UnexpectedComment("unexpected comment.", cursor.line)
                if regexp_precedes(left):
                    regexp_scan(cursor, in_comment=True)
            if significant_is(c):
                left = c
