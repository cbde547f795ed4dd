"""Identifier run scanner mixin."""

from monkeylex.lexer.charsets import LOWERCASE


class IdentifierScannerMixin:
    """Mixin providing maximal-munch scanning of lowercase letter runs."""

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _ch: str | None

    def _read_char(self) -> None:
        """Advance the cursor by one character. Implemented by Lexer."""
        raise NotImplementedError

    def _read_identifier(self) -> str:
        """Consume the run of lowercase letters under the cursor.

        Leaves the cursor on the first character that is not a lowercase
        ASCII letter (or at end of input).

        Returns:
            The identifier text (possibly a keyword).
        """
        start = self._pos
        while self._ch in LOWERCASE:
            self._read_char()
        return self._source[start : self._pos]
