"""Lexer scanning modes.

Each call to Lexer.next_token() picks a mode from the first character it
reads and finishes in that mode; nothing carries over between calls except
the cursor and line counter.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer scanning modes.

    - TEXT: Scanning a literal text run up to the next ``[``
    - TAG: Scanning a bracket body up to the next ``]``
    - EOF: Source exhausted; every further call returns None

    """

    TEXT = auto()
    TAG = auto()
    EOF = auto()


# Delimiters of a tag body
TAG_OPEN = "["
TAG_CLOSE = "]"
