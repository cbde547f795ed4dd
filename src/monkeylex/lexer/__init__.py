"""Character-at-a-time lexer for the monkeylex scripting language.

The lexer classifies the character under its cursor, scans maximal runs
for identifiers and integers, and never fails: unknown characters become
ILLEGAL tokens and end of input repeats as EOF.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, dispatch, emit paths)
├── charsets.py          # Character classes and single-character token table
└── scanners/            # Consuming run scanners (mixins)
    ├── identifier.py    # Lowercase letter runs
    ├── number.py        # Digit runs
    └── whitespace.py    # Whitespace skipping

Usage:
    >>> from monkeylex.lexer import Lexer
    >>> for token in Lexer("let five = 5;").tokenize():
    ...     print(token)
Token(LET, 'let')
Token(IDENT, 'five')
Token(ASSIGN, '=')
Token(INT, '5')
Token(SEMICOLON, ';')
Token(EOF, '\\\\')

"""

from monkeylex.lexer.core import Lexer

__all__ = ["Lexer"]
