"""Token and TokenType definitions for the monkeylex lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token pairs a TokenType with the literal text it was scanned from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).
KEYWORDS is a read-only mapping built once at import time.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    """Token types produced by the lexer.

    Each member's value is its display label. Punctuation kinds use the
    character they stand for; the rest use an upper-case name.

    """

    # Special
    ILLEGAL = "ILLEGAL"  # Unrecognized character
    EOF = "EOF"  # End of input (repeats forever)

    # Identifiers and literals
    IDENT = "IDENT"  # add, foobar, x, y
    INT = "INT"  # 1343456

    # Operators
    ASSIGN = "="
    PLUS = "+"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"


# Literal carried by every EOF token. Never read from source text.
EOF_LITERAL = "\\"

KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
    }
)


def lookup_ident(text: str) -> TokenType:
    """Classify an identifier-shaped run.

    Args:
        text: A run of lowercase letters

    Returns:
        The keyword type if text is a keyword, otherwise TokenType.IDENT.

    Example:
        >>> lookup_ident("fn")
        <TokenType.FUNCTION: 'FUNCTION'>
        >>> lookup_ident("fnord")
        <TokenType.IDENT: 'IDENT'>
    """
    return KEYWORDS.get(text, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to parser. No validation
    is performed on construction; the lexer is trusted to pair type and
    literal consistently.

    Attributes:
        type: The token type (from TokenType enum)
        literal: The matched source text, or EOF_LITERAL for EOF tokens

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    literal: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lit = self.literal
        if len(lit) > 20:
            lit = lit[:17] + "..."
        return f"Token({self.type.name}, {lit!r})"
