"""Integer literal scanner mixin."""

from monkeylex.lexer.charsets import DIGITS


class NumberScannerMixin:
    """Mixin providing maximal-munch scanning of digit runs."""

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _ch: str | None

    def _read_char(self) -> None:
        """Advance the cursor by one character. Implemented by Lexer."""
        raise NotImplementedError

    def _read_number(self) -> str:
        """Consume the run of ASCII digits under the cursor.

        "12345" is one INT, never five. Leading zeros are kept as written.

        Returns:
            The digit run.
        """
        start = self._pos
        while self._ch in DIGITS:
            self._read_char()
        return self._source[start : self._pos]
