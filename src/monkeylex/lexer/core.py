"""Character-at-a-time lexer with one character of lookahead.

The cursor holds the character under it in ``_ch``. All cursor movement
goes through ``_read_char``; scanners and ``next_token`` are built on it.

End of input is represented by ``_ch is None``. Once reached it is
absorbing: every further ``next_token`` call returns an EOF token.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from monkeylex.config import LexConfig, get_lex_config
from monkeylex.errors import IllegalTokenError
from monkeylex.lexer.charsets import DIGITS, LOWERCASE, SINGLE_CHAR_TOKENS
from monkeylex.lexer.scanners import (
    IdentifierScannerMixin,
    NumberScannerMixin,
    WhitespaceScannerMixin,
)
from monkeylex.tokens import EOF_LITERAL, Token, TokenType, lookup_ident
from monkeylex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    IdentifierScannerMixin,
    NumberScannerMixin,
    WhitespaceScannerMixin,
):
    """Pull-based lexer for the scripting language.

    Usage:
            >>> lexer = Lexer("let x = 5;")
            >>> lexer.next_token()
        Token(LET, 'let')
            >>> [t.type.name for t in lexer.tokenize()]
        ['IDENT', 'ASSIGN', 'INT', 'SEMICOLON', 'EOF']

    The cursor steps one Python character (code point) at a time, so
    non-ASCII text never splits a character; such characters lex as
    single ILLEGAL tokens.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",  # Index of the character under the cursor
        "_read_pos",  # Index of the next character to read
        "_ch",  # Character under the cursor, None past end of input
        "_config",
    )

    def __init__(self, source: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with source text and load the first character.

        Args:
            source: Program source text
            config: Optional config; defaults to the active context config

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            raise TypeError(f"Lexer source must be str, not {type(source).__name__}")

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._read_pos = 0
        self._ch: str | None = None
        self._config = config if config is not None else get_lex_config()

        self._read_char()

        if self._config.trace:
            logger.debug("Lexer created for %d characters", self._source_len)

    @property
    def at_end(self) -> bool:
        """True once the cursor is past the last character."""
        return self._ch is None

    def next_token(self) -> Token:
        """Scan and return the next token.

        Never raises. Unknown characters become ILLEGAL tokens, and calls
        after end of input keep returning EOF.

        Returns:
            The next Token in the stream.
        """
        self._skip_whitespace()

        ch = self._ch
        if ch is None:
            token = self._emit_and_advance(TokenType.EOF, EOF_LITERAL)
        elif ch in SINGLE_CHAR_TOKENS:
            token = self._emit_and_advance(SINGLE_CHAR_TOKENS[ch], ch)
        elif ch in LOWERCASE:
            ident = self._read_identifier()
            token = self._emit_already_advanced(lookup_ident(ident), ident)
        elif ch in DIGITS:
            token = self._emit_already_advanced(TokenType.INT, self._read_number())
        else:
            token = self._emit_and_advance(TokenType.ILLEGAL, ch)

        if self._config.trace:
            logger.debug("Emitted %r", token)
        return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source into a token stream.

        Yields tokens up to and including the first EOF token.

        Yields:
            Token objects one at a time

        Raises:
            IllegalTokenError: In strict mode, on the first ILLEGAL token

        Complexity: O(n) where n = len(source)
        """
        strict = self._config.strict
        index = 0
        while True:
            token = self.next_token()
            if strict and token.type is TokenType.ILLEGAL:
                logger.debug("Strict tokenize stopped at token %d: %r", index, token)
                raise IllegalTokenError(token, index)
            yield token
            if token.type is TokenType.EOF:
                return
            index += 1

    # =========================================================================
    # Emit paths
    # =========================================================================

    def _emit_and_advance(self, token_type: TokenType, literal: str) -> Token:
        """Build a token for the character under the cursor, then step past it."""
        token = Token(token_type, literal)
        self._read_char()
        return token

    def _emit_already_advanced(self, token_type: TokenType, literal: str) -> Token:
        """Build a token for a run the scanner has already consumed."""
        return Token(token_type, literal)

    # =========================================================================
    # Cursor
    # =========================================================================

    def _read_char(self) -> None:
        """Load the next character under the cursor.

        At end of input the cursor parks at ``_pos == len(source)`` and
        further calls leave it there, so ``_read_pos == _pos + 1`` always
        holds and ``_ch`` stays None.
        """
        if self._read_pos >= self._source_len:
            self._ch = None
            self._pos = self._source_len
            self._read_pos = self._source_len + 1
            return

        self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1
