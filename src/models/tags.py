"""
Tag definition model

A tag is the identifier that opens an activated comment (/*debug ...*/).
Tags are declared once from configuration and never change afterwards.
"""

from dataclasses import dataclass
from typing import Optional


# Characters allowed in tag and method names, besides ASCII letters and digits
IDENTIFIER_PUNCTUATION: str = "_$."


@dataclass(frozen=True)
class TagDefinition:
    """
    Specification for one activated tag

    Attributes:
        name: Tag name as it appears after /* (e.g., "debug", "log")
        bound_call: Optional call target; when set, matched comments expand
                    into a call statement (e.g., "console.log")

    Example:
        The token "log:console.log" produces
        TagDefinition(name="log", bound_call="console.log")
    """
    name: str
    bound_call: Optional[str] = None

    @property
    def is_bound(self) -> bool:
        """True when matched comments expand into a call"""
        return bool(self.bound_call)

    def token(self) -> str:
        """Render back to the configuration token form"""
        if self.bound_call:
            return f"{self.name}:{self.bound_call}"
        return self.name
