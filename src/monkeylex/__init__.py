"""
monkeylex: Lexer for a small C-like scripting language

Turns source text into a flat stream of typed tokens for a parser to
consume. Pure in-memory, zero runtime dependencies.

Quick Start:
    >>> from monkeylex import tokenize
    >>> [t.type.name for t in tokenize("let add = fn(x, y) { x + y; };")][:4]
    ['LET', 'IDENT', 'ASSIGN', 'FUNCTION']

    >>> # Or drive the lexer yourself
    >>> from monkeylex import Lexer
    >>> lexer = Lexer("x + 1")
    >>> lexer.next_token()
    Token(IDENT, 'x')

Strict Mode:
    >>> from monkeylex import LexConfig
    >>> tokenize("a @ b", config=LexConfig(strict=True))
    Traceback (most recent call last):
        ...
    monkeylex.errors.IllegalTokenError: Illegal character '@' at token 1
"""

from monkeylex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from monkeylex.errors import IllegalTokenError, MonkeylexError
from monkeylex.lexer import Lexer
from monkeylex.tokens import EOF_LITERAL, KEYWORDS, Token, TokenType, lookup_ident

__version__ = "0.1.0"


def tokenize(source: str, *, config: LexConfig | None = None) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Args:
        source: Program source text
        config: Optional config; defaults to the active context config

    Returns:
        All tokens in order, ending with exactly one EOF token.

    Raises:
        IllegalTokenError: If config.strict is set and an ILLEGAL token occurs

    Example:
        >>> tokenize("5;")
        [Token(INT, '5'), Token(SEMICOLON, ';'), Token(EOF, '\\\\')]
    """
    return list(Lexer(source, config=config).tokenize())


__all__ = [
    "EOF_LITERAL",
    "IllegalTokenError",
    "KEYWORDS",
    "LexConfig",
    "Lexer",
    "MonkeylexError",
    "Token",
    "TokenType",
    "__version__",
    "get_lex_config",
    "lex_config_context",
    "lookup_ident",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
