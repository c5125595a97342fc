"""
Tag registry and configuration builder

The registry holds the activated tags in declaration order. Lookup is an
exact match and the first declaration wins, so duplicates are allowed but
only the earliest one is ever used.

The registry is built once from configuration tokens:

    debug                 activate /*debug ...*/
    log:console.log       activate /*log ...*/ as a call to console.log
    -comment "Devel"      prepend "// Devel" to the output
"""

import re
from typing import Iterator, List, Optional, Sequence

from ..config import appsettings
from ..models.tags import TagDefinition, IDENTIFIER_PUNCTUATION
from ..models.errors import ConfigurationError
from .log import LOG


COMMENT_OPTION = "-comment"

_NAME = r"[A-Za-z0-9" + re.escape(IDENTIFIER_PUNCTUATION) + r"]+"
TOKEN_PATTERN = re.compile(rf"(?P<name>{_NAME})(?::(?P<call>{_NAME}))?")


class TagRegistry:
    """
    Ordered collection of activated tags plus leading comment lines

    Read-only once scanning begins.
    """

    def __init__(self) -> None:
        self.tags: List[TagDefinition] = []
        self.comments: List[str] = []

    def register(self, tag: TagDefinition) -> None:
        """Append a tag declaration (no deduplication)"""
        self.tags.append(tag)

    def comment_add(self, text: str) -> None:
        self.comments.append(text)

    def lookup(self, name: str) -> Optional[int]:
        """
        Find a tag by exact name.

        Args:
            name: Candidate tag scanned from a comment

        Returns:
            Index of the first declaration with that name, or None

        Example:
            >>> registry = registry_fromTokens(["debug", "log:console.log"])
            >>> registry.lookup("log")
            1
            >>> registry.lookup("trace") is None
            True
        """
        for index, tag in enumerate(self.tags):
            if tag.name == name:
                return index
        return None

    def get(self, index: int) -> TagDefinition:
        return self.tags[index]

    def header(self) -> str:
        """Leading comment lines, one '// <text>' line per comment"""
        return "".join(f"// {text}\n" for text in self.comments)

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> Iterator[TagDefinition]:
        return iter(self.tags)


def tag_parse(token: str, max_length: int) -> TagDefinition:
    """
    Parse one `<tag>` or `<tag>:<method>` token.

    Args:
        token: Configuration token
        max_length: Longest allowed tag or method name

    Returns:
        The TagDefinition described by the token

    Raises:
        ConfigurationError: Empty name, bad colon syntax, trailing
                            characters or an oversized name
    """
    match = TOKEN_PATTERN.fullmatch(token)
    if match is None:
        raise ConfigurationError(token)
    name = match.group("name")
    call = match.group("call")
    if len(name) > max_length or (call is not None and len(call) > max_length):
        raise ConfigurationError(token)
    return TagDefinition(name=name, bound_call=call)


def registry_fromTokens(
    tokens: Sequence[str],
    max_length: Optional[int] = None,
    max_tags: Optional[int] = None,
) -> TagRegistry:
    """
    Build a TagRegistry from configuration tokens.

    Tokens are processed in order. "-comment" consumes the token after it
    as the text of a leading comment line; every other token declares a tag.

    Args:
        tokens: Configuration tokens (e.g., command line arguments)
        max_length: Longest tag/method name (defaults to settings)
        max_tags: Most tag declarations allowed (defaults to settings)

    Returns:
        Populated TagRegistry

    Raises:
        ConfigurationError: For the first malformed token

    Example:
        >>> registry = registry_fromTokens(
        ...     ["debug", "log:console.log", "-comment", "Devel Edition"]
        ... )
        >>> [tag.token() for tag in registry]
        ['debug', 'log:console.log']
        >>> registry.header()
        '// Devel Edition\\n'
    """
    if max_length is None:
        max_length = appsettings.max_tag_length
    if max_tags is None:
        max_tags = appsettings.max_tags

    registry = TagRegistry()
    remaining = iter(tokens)
    for token in remaining:
        if token == COMMENT_OPTION:
            text = next(remaining, None)
            if text is None:
                raise ConfigurationError(f"{COMMENT_OPTION} needs a comment text")
            registry.comment_add(text)
            continue
        if len(registry) >= max_tags:
            raise ConfigurationError(f"{token} (more than {max_tags} tags)")
        tag = tag_parse(token, max_length)
        registry.register(tag)
        LOG(f"Activated tag {tag.token()}", level=3)
    return registry
