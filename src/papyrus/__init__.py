"""
Papyrus — Lexer for inline entity tags in plain text

Turns prose with bracketed references such as ``[user:42]`` or
``[article:7]`` into a stream of text and tag tokens. Malformed tags are
reported with their line number without stopping the stream.

Quick Start:
    >>> from papyrus import tokenize
    >>> tokenize("hello [user:5] world")
    [Token(TEXT, 'hello ', line 1), Token(TAG, '[user:5]', line 1), Token(TEXT, ' world', line 1)]

    >>> # Pull tokens one at a time
    >>> from papyrus import Lexer
    >>> lexer = Lexer("[article:7]")
    >>> lexer.next_token().value
    Tag(kind=<TagKind.ARTICLE: 'article'>, id=7)

Installation:
    pip install papyrus              # zero runtime dependencies
"""

from papyrus.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from papyrus.errors import (
    CaptureNotFoundError,
    CaptureParseError,
    PapyrusError,
    TagParseError,
    TokenizeError,
    UnknownTagError,
    UnterminatedTagError,
)
from papyrus.lexer import Lexer, LexerMode
from papyrus.location import Position
from papyrus.tags import Tag, TagKind, parse_tag
from papyrus.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    strict: bool = False,
    config: LexConfig | None = None,
) -> list[Token | TokenizeError]:
    """Tokenize source text into a list.

    Args:
        source: Text to tokenize
        strict: Raise the first TokenizeError instead of collecting it
        config: Lexer configuration (uses the active context config if None)

    Returns:
        Tokens in source order, with a TokenizeError in place of each
        malformed tag when not strict

    Raises:
        TokenizeError: In strict mode, for the first malformed tag

    Example:
        >>> tokenize("[unknown:0]")
        [TokenizeError(Position(line=1), UnknownTagError('[unknown:0]'))]
    """
    lexer = Lexer(source, config=config)
    if not strict:
        return list(lexer.tokenize())

    tokens: list[Token | TokenizeError] = []
    while (token := lexer.next_token()) is not None:
        tokens.append(token)
    return tokens


__all__ = [
    # Main API
    "tokenize",
    "parse_tag",
    # Lexer
    "Lexer",
    "LexerMode",
    # Data model
    "Position",
    "Tag",
    "TagKind",
    "Token",
    "TokenType",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "PapyrusError",
    "TagParseError",
    "CaptureNotFoundError",
    "CaptureParseError",
    "UnknownTagError",
    "UnterminatedTagError",
    "TokenizeError",
    # Version
    "__version__",
]
