"""Mode-stack lexer for rant templates.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, lex
├── core.py              # Lexer class (mode stack + scanning)
└── modes.py             # LexerMode enum, stop sets, escape table

Usage:
    >>> from rant.lexer import lex
    >>> lex("{a|b}")
    [Token(LBRACE, '{', 1:1), Token(TEXT, 'a', 1:2), Token(PIPE, '|', 1:3), Token(TEXT, 'b', 1:4), Token(RBRACE, '}', 1:5)]

"""

from rant.lexer.core import Lexer, lex
from rant.lexer.modes import LexerMode, resolve_escape

__all__ = ["Lexer", "LexerMode", "lex", "resolve_escape"]
