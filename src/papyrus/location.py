"""Source position tracking for error messages.

Provides the Position dataclass attached to tokens and tokenize errors.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Line-based location of a token in the source text.

    Lines are 1-indexed. The lexer advances its line counter as soon as it
    consumes a newline, so a Position points at what comes next: a token
    that begins with a newline reports the line after it.

    Examples:
            >>> Position(1)
        Position(line=1)
            >>> str(Position(42))
            'line 42'

    """

    line: int

    def __str__(self) -> str:
        """Format position for error messages."""
        return f"line {self.line}"

    @classmethod
    def start(cls) -> Position:
        """Position of the first line of any source."""
        return cls(line=1)
