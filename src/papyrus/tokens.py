"""Token and TokenType definitions for the Papyrus lexer.

The lexer produces a stream of Token objects: literal text runs and
resolved tags. Each Token records the Position at which it was read.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from papyrus.location import Position
from papyrus.tags import Tag


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # Literal text between tags
    TAG = auto()  # [user:1], [article:2]


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type
        value: Non-empty text run for TEXT, the parsed Tag for TAG
        position: Where the token was read; excluded from comparison so
            tokens compare by content

    """

    type: TokenType
    value: str | Tag
    position: Position = field(default_factory=Position.start, compare=False)

    @classmethod
    def text(cls, contents: str, position: Position | None = None) -> Token:
        return cls(TokenType.TEXT, contents, position or Position.start())

    @classmethod
    def tag(cls, tag: Tag, position: Position | None = None) -> Token:
        return cls(TokenType.TAG, tag, position or Position.start())

    @property
    def is_tag(self) -> bool:
        return self.type is TokenType.TAG

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.position.line

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        elif isinstance(val, Tag):
            val = str(val)
        return f"Token({self.type.name}, {val!r}, {self.position})"
