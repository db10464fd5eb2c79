"""Tag grammar: classification of bracket bodies.

A bracket body is the text between ``[`` and ``]``. It is matched against
one pattern per tag kind, in a fixed order; the first pattern found anywhere
in the body decides the kind and its digit run becomes the identifier.

Matching is a substring search, not anchored to the whole body, so
``"xxuser:5yy"`` classifies as ``Tag.user(5)``. Whitespace is allowed on
either side of the colon.

Thread Safety:
Patterns are compiled once at import and never mutated. Tag is frozen.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from papyrus.config import DEFAULT_MAX_ID
from papyrus.errors import CaptureNotFoundError, CaptureParseError, UnknownTagError


class TagKind(Enum):
    """Kinds of entity a tag can reference."""

    USER = "user"
    ARTICLE = "article"


# Tried in order; the first match wins. \d matches any Unicode decimal digit;
# _parse_id rejects non-ASCII runs.
_TAG_PATTERNS: tuple[tuple[TagKind, re.Pattern[str]], ...] = (
    (TagKind.USER, re.compile(r"user\s*:\s*(?P<id>\d+)")),
    (TagKind.ARTICLE, re.compile(r"article\s*:\s*(?P<id>\d+)")),
)


@dataclass(frozen=True, slots=True)
class Tag:
    """A classified reference to a user or article.

    Attributes:
        kind: The referenced entity kind
        id: Non-negative identifier, exactly as captured from the body

    """

    kind: TagKind
    id: int

    @classmethod
    def user(cls, id: int) -> Tag:
        return cls(TagKind.USER, id)

    @classmethod
    def article(cls, id: int) -> Tag:
        return cls(TagKind.ARTICLE, id)

    def __str__(self) -> str:
        """Render in source notation, e.g. ``[user:42]``."""
        return f"[{self.kind.value}:{self.id}]"


def parse_tag(body: str, *, max_id: int = DEFAULT_MAX_ID) -> Tag:
    """Classify a bracket body as a Tag.

    Args:
        body: Text found between ``[`` and ``]`` (brackets excluded)
        max_id: Largest identifier accepted

    Returns:
        The Tag for the first matching kind.

    Raises:
        CaptureNotFoundError: A pattern matched without an ``id`` capture
        CaptureParseError: The captured digits are not ASCII or exceed ``max_id``
        UnknownTagError: No pattern matched; carries ``[body]``

    Example:
        >>> parse_tag("user:42")
        Tag(kind=<TagKind.USER: 'user'>, id=42)
    """
    for kind, pattern in _TAG_PATTERNS:
        match = pattern.search(body)
        if match is None:
            continue
        return Tag(kind, _parse_id(match, max_id))

    raise UnknownTagError(f"[{body}]")


def _parse_id(match: re.Match[str], max_id: int) -> int:
    """Extract the identifier from a pattern match."""
    capture = match.groupdict().get("id")
    if capture is None:
        raise CaptureNotFoundError()
    if not capture.isascii():
        raise CaptureParseError(capture)
    try:
        value = int(capture)
    except ValueError:
        raise CaptureParseError(capture) from None
    if value > max_id:
        raise CaptureParseError(capture)
    return value
