"""
Error taxonomy for jsdev

Every failure is fatal. Errors are raised at the point of detection and
propagate untouched to the single handler in __main__, which prints the
diagnostic and exits non-zero.

Four families:
    - ConfigurationError: malformed tag/method tokens (no line number)
    - ScanError subclasses: lexical problems in the input (carry a line)
    - OutputError: a write to the output sink failed
    - InputError: a read from the input source failed
"""

from typing import Optional


class JsdevError(Exception):
    """Mixin base shared by every classified jsdev failure"""

    def diagnostic(self) -> str:
        """Render the message shown to the user (without program prefix)"""
        return str(self)


class ConfigurationError(JsdevError, ValueError):
    """
    A configuration token could not be turned into a tag definition

    Raised before any input is read, so there is no line number.

    Attributes:
        token: The offending token (or a description of the problem)
    """

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    def diagnostic(self) -> str:
        return f"bad method line {self.token}"


class ScanError(JsdevError, SyntaxError):
    """
    Base class for errors detected while scanning the input

    Attributes:
        message: Human-readable description
        line: Best-known line number (where the construct began for
              unterminated literals)
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.lineno = line

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"

    def diagnostic(self) -> str:
        return f"{self.line}. {self.message}"


class UnterminatedString(ScanError):
    """End of input inside a string literal"""


class UnterminatedRegex(ScanError):
    """End of input inside a regular expression literal"""


class UnterminatedCharClass(ScanError):
    """End of input inside a [...] set of a regular expression literal"""


class UnterminatedComment(ScanError):
    """End of input inside a block comment"""


class NestedComment(ScanError):
    """An unmatched block comment contains another comment opener"""


class UnexpectedComment(ScanError):
    """A comment-like sequence where a condition, stuff or regexp is scanned"""


class UnexpectedCommentClose(ScanError):
    """A string or regexp inside a tagged comment contains the comment close"""


class UnclosedCondition(ScanError):
    """A condition was not closed before the comment or the input ended"""


class UnbalancedStuff(ScanError):
    """Bracket depth of a stuff body went negative or did not return to zero"""


class UnterminatedStuff(ScanError):
    """End of input before the stuff body reached its comment close"""


class OutputError(JsdevError, OSError):
    """Writing to the output sink failed"""

    def __init__(self, reason: Optional[BaseException] = None) -> None:
        super().__init__(f"write error: {reason}" if reason else "write error.")
        self.reason = reason


class InputError(JsdevError, OSError):
    """Reading from the input source failed"""

    def __init__(self, reason: Optional[BaseException] = None) -> None:
        super().__init__(f"read error: {reason}" if reason else "read error.")
        self.reason = reason
