"""
Scanner data models

State carried by the Cursor while scanning, plus the summary returned
once a whole input has been transformed.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


# End-of-stream marker returned by Cursor.peek() and Cursor.read()
EOF: str = ""

# Initial left-significant character for condition and stuff scans.
# A '/' at the very start of either region is therefore taken as a regexp.
REGION_LEFT: str = "{"


@dataclass
class CursorState:
    """
    Mutable reading state of a Cursor

    Attributes:
        pending: One character of lookahead/pushback, or None when empty
        line: Current line number (1-based once scanning starts)
        saw_cr: True when the previous character read was a carriage return,
                so that a following line feed is not counted twice
    """
    pending: Optional[str] = None
    line: int = 1
    saw_cr: bool = False


@dataclass
class TransformResult:
    """
    Summary of one input-to-output transformation

    Attributes:
        lines: Number of input lines scanned
        expansions: Count of expanded comments, keyed by tag name
        comments_echoed: Block comments passed through unmatched
    """
    lines: int = 0
    expansions: Dict[str, int] = field(default_factory=dict)
    comments_echoed: int = 0

    @property
    def expansion_total(self) -> int:
        return sum(self.expansions.values())

    def expansion_record(self, tag_name: str) -> None:
        """Count one expansion of tag_name"""
        self.expansions[tag_name] = self.expansions.get(tag_name, 0) + 1
