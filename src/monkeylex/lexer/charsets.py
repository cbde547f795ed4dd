"""Character sets for O(1) classification.

All sets are frozensets (or read-only mappings) so they are immutable and
built once at import. Membership tests accept None, which is never a
member; the lexer uses None for "past end of input".

Only ASCII is classified. Everything outside these sets lexes as ILLEGAL.
"""

from types import MappingProxyType

from monkeylex.tokens import TokenType

# Identifier runs are lowercase ASCII only. Uppercase is ILLEGAL.
LOWERCASE: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")

# ASCII digits. str.isdigit() would also accept other Unicode digits.
DIGITS: frozenset[str] = frozenset("0123456789")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# Single-character tokens
SINGLE_CHAR_TOKENS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "=": TokenType.ASSIGN,
        ";": TokenType.SEMICOLON,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        ",": TokenType.COMMA,
        "+": TokenType.PLUS,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }
)
