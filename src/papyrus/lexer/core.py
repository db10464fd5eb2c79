"""Pull-based lexer over a borrowed source string.

Each call to next_token() scans exactly one token starting at the cursor
and leaves the cursor just past it, so no character is read twice.

Uses str.find to locate the end of each run and counts newlines in the
consumed slice, keeping the scan O(n) with a low constant factor.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from papyrus.config import LexConfig, get_lex_config
from papyrus.errors import TagParseError, TokenizeError, UnterminatedTagError
from papyrus.lexer.modes import TAG_CLOSE, TAG_OPEN, LexerMode
from papyrus.location import Position
from papyrus.tags import parse_tag
from papyrus.tokens import Token
from papyrus.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Stateful cursor that turns text into Text and Tag tokens.

    Malformed tags are reported per token: next_token() raises a
    TokenizeError for the bad tag and the following call resumes just past
    its closing bracket.

    Usage:
            >>> lexer = Lexer("hi [article:7]")
            >>> lexer.next_token()
        Token(TEXT, 'hi ', line 1)
            >>> lexer.next_token()
        Token(TAG, '[article:7]', line 1)
            >>> lexer.next_token() is None
        True

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_mode",
        "_config",
    )

    def __init__(self, source: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to tokenize
            config: Lexer configuration; defaults to the active context config
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._mode = LexerMode.TEXT if source else LexerMode.EOF
        self._config = config if config is not None else get_lex_config()

    @property
    def position(self) -> Position:
        """Current position: lines consumed so far."""
        return Position(self._lineno)

    @property
    def exhausted(self) -> bool:
        return self._pos >= self._source_len

    def next_token(self) -> Token | None:
        """Scan the next token.

        Returns:
            The next Token, or None once the source is exhausted. Calls after
            the end keep returning None.

        Raises:
            TokenizeError: The tag starting at the cursor is malformed. The
                cursor has already moved past it.
        """
        if self._pos >= self._source_len:
            self._mode = LexerMode.EOF
        else:
            char = self._advance()
            self._mode = LexerMode.TAG if char == TAG_OPEN else LexerMode.TEXT
        return self._dispatch_mode(Position(self._lineno))

    def _dispatch_mode(self, start: Position) -> Token | None:
        """Dispatch to the scanner for the current mode.

        Args:
            start: Position of the character that selected the mode

        Returns:
            Token from the mode-specific scanner, or None in EOF mode.
        """
        if self._mode == LexerMode.TAG:
            return self._scan_tag(start)
        if self._mode == LexerMode.TEXT:
            return self._scan_text(start)
        return None

    def tokenize(self) -> Iterator[Token | TokenizeError]:
        """Iterate over the remaining tokens.

        Malformed tags are yielded as TokenizeError instances rather than
        raised, so one bad tag never ends the iteration.

        Yields:
            Token objects, or TokenizeError for each malformed tag
        """
        while True:
            try:
                token = self.next_token()
            except TokenizeError as e:
                yield e
                continue
            if token is None:
                return
            yield token

    def __iter__(self) -> Iterator[Token | TokenizeError]:
        return self.tokenize()

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_text(self, start: Position) -> Token:
        """Scan a text run; the first character is already consumed."""
        run_start = self._pos - 1
        end = self._source.find(TAG_OPEN, self._pos)
        if end == -1:
            end = self._source_len
        self._commit_to(end)
        return Token.text(self._source[run_start:end], start)

    def _scan_tag(self, start: Position) -> Token:
        """Scan a bracket body; the ``[`` is already consumed.

        Without a closing bracket the body runs to end of input and is
        classified like any other body.
        """
        end = self._source.find(TAG_CLOSE, self._pos)
        terminated = end != -1
        if not terminated:
            end = self._source_len

        body = self._source[self._pos : end]
        self._commit_to(end)
        if terminated:
            self._pos += 1  # discard "]"

        try:
            if not terminated and self._config.strict_brackets:
                raise UnterminatedTagError(f"{TAG_OPEN}{body}")
            tag = parse_tag(body, max_id=self._config.max_id)
        except TagParseError as e:
            logger.debug("Malformed tag at %s: %r", start, e)
            raise TokenizeError(start, e) from e

        return Token.tag(tag, start)

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _advance(self) -> str:
        """Consume one character, counting it if it is a newline."""
        char = self._source[self._pos]
        self._pos += 1
        if char == "\n":
            self._lineno += 1
        return char

    def _commit_to(self, end: int) -> None:
        """Move the cursor to end, counting newlines in the skipped slice."""
        if end > self._pos:
            self._lineno += self._source.count("\n", self._pos, end)
        self._pos = end
