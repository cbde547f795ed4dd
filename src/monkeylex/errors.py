"""Exception classes for monkeylex.

The lexer itself never raises on bad input; unknown characters become
ILLEGAL tokens. These exceptions are for callers that opt into strict
tokenization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylex.tokens import Token


class MonkeylexError(Exception):
    """Base exception for all monkeylex errors.

    Subclass this for specific error categories.
    """

    pass


class IllegalTokenError(MonkeylexError):
    """An ILLEGAL token was produced while tokenizing in strict mode.

    Attributes:
        token: The offending ILLEGAL token
        index: Ordinal of the token in the stream (0-indexed). This counts
            tokens, not characters.
    """

    def __init__(self, token: Token, index: int) -> None:
        """Initialize illegal token error.

        Args:
            token: The ILLEGAL token
            index: Position of the token in the token stream
        """
        self.token = token
        self.index = index
        super().__init__(f"Illegal character {token.literal!r} at token {index}")
