"""Run scanners for the monkeylex lexer.

Each scanner is a mixin that moves the cursor over one character class.
Scanners are consuming: they leave the cursor on the first character
outside the run.
"""

from __future__ import annotations

from monkeylex.lexer.scanners.identifier import IdentifierScannerMixin
from monkeylex.lexer.scanners.number import NumberScannerMixin
from monkeylex.lexer.scanners.whitespace import WhitespaceScannerMixin

__all__ = [
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "WhitespaceScannerMixin",
]
