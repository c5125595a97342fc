"""
Lexical classifiers

Pure character predicates shared by the scanners.
"""

import string

from ..models.tags import IDENTIFIER_PUNCTUATION


IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + IDENTIFIER_PUNCTUATION)

# A '/' after one of these begins a regexp literal; after anything else it
# is division. This is a convention, not a parse: `f(x) /re/` is misread.
PRE_REGEXP_CHARS = frozenset("(,=:[!&|?{};")

QUOTE_CHARS = frozenset("'\"`")
OPEN_BRACKETS = frozenset("({[")
CLOSE_BRACKETS = frozenset(")}]")


def identifierChar_is(c: str) -> bool:
    """True for ASCII letters, digits, underscore, dollar and period"""
    return c in IDENTIFIER_CHARS


def regexp_precedes(left: str) -> bool:
    """
    Decide whether a '/' following `left` starts a regexp literal.

    Args:
        left: Most recent non-whitespace character

    Returns:
        True if a following '/' begins a regexp, False for division

    Example:
        >>> regexp_precedes("=")
        True
        >>> regexp_precedes("c")
        False
    """
    return left in PRE_REGEXP_CHARS


def significant_is(c: str) -> bool:
    """True for characters that update the left-significant character"""
    return bool(c) and c > " "
