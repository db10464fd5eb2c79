"""Pull-based lexer for Papyrus inline tags.

The lexer walks the source once, producing one token per request: a text
run up to the next ``[``, or a tag parsed from the bracket body.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (cursor + line tracking)
└── modes.py             # LexerMode enum, delimiters

Usage:
    >>> from papyrus.lexer import Lexer
    >>> lexer = Lexer("hello [user:5] world")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(TEXT, 'hello ', line 1)
Token(TAG, '[user:5]', line 1)
Token(TEXT, ' world', line 1)

"""

from papyrus.lexer.core import Lexer
from papyrus.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
