"""Whitespace skipping mixin."""

from monkeylex.config import LexConfig
from monkeylex.lexer.charsets import WHITESPACE
from monkeylex.utils.logger import get_logger

logger = get_logger(__name__)


class WhitespaceScannerMixin:
    """Mixin that moves the cursor past whitespace without emitting tokens."""

    # These will be set by the Lexer class
    _ch: str | None
    _config: LexConfig

    def _read_char(self) -> None:
        """Advance the cursor by one character. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_whitespace(self) -> None:
        """Advance while the current character is space, tab, CR or LF."""
        trace = self._config.trace
        while self._ch in WHITESPACE:
            self._read_char()
            if trace:
                logger.debug("Skipped whitespace, now at %r", self._ch)
