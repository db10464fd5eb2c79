"""Exception classes for Papyrus.

Provides standardized exceptions for error handling throughout Papyrus.

Tag grammar failures (TagParseError subclasses) describe why a bracket body
could not become a Tag. The lexer wraps them in a TokenizeError that carries
the Position of the offending tag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papyrus.location import Position


class PapyrusError(Exception):
    """Base exception for all Papyrus errors.

    Subclass this for specific error categories.
    """

    pass


class TagParseError(PapyrusError):
    """A bracket body failed to classify as a Tag.

    Errors of the same class with the same arguments compare equal, so a
    stream of lexer results can be asserted against expected values.
    """

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self.args)
        return f"{type(self).__name__}({args})"


class CaptureNotFoundError(TagParseError):
    """A tag pattern matched but produced no identifier capture."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "tag pattern matched without an id capture"


class CaptureParseError(TagParseError):
    """The identifier capture is not a valid identifier.

    Raised when the digit run does not fit the configured identifier width.
    """

    def __init__(self, capture: str) -> None:
        """Initialize capture parse error.

        Args:
            capture: The captured digit run that failed to parse
        """
        self.capture = capture
        super().__init__(capture)

    def __str__(self) -> str:
        return f"invalid tag id {self.capture!r}"


class UnknownTagError(TagParseError):
    """The bracket body matched no known tag kind."""

    def __init__(self, text: str) -> None:
        """Initialize unknown tag error.

        Args:
            text: The offending body, re-wrapped in brackets for display
        """
        self.text = text
        super().__init__(text)

    def __str__(self) -> str:
        return f"unknown tag {self.text}"


class UnterminatedTagError(TagParseError):
    """A tag reached end of input without a closing bracket.

    Only raised when LexConfig.strict_brackets is enabled.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(text)

    def __str__(self) -> str:
        return f"unterminated tag {self.text}"


class TokenizeError(PapyrusError):
    """A malformed tag found while lexing.

    Scoped to a single token: the lexer keeps going after reporting it.
    """

    def __init__(self, position: Position, cause: TagParseError) -> None:
        """Initialize tokenize error.

        Args:
            position: Position at which the offending tag began
            cause: The grammar error for the tag body
        """
        self.position = position
        self.cause = cause
        super().__init__(position, cause)

    def __str__(self) -> str:
        return f"{self.cause!r} at {self.position}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenizeError):
            return NotImplemented
        return self.position == other.position and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.position, self.cause))

    def __repr__(self) -> str:
        return f"TokenizeError({self.position!r}, {self.cause!r})"
