"""Lexer operating modes and constants.

This module defines the finite state machine modes for the lexer and the
immutable character tables each mode consults.
"""

from __future__ import annotations

from enum import Enum, auto
from types import MappingProxyType


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer keeps a stack of modes; the top decides how the next
    character is read:
    - NORMAL: Top level, outside any block
    - BLOCK: Inside ``{ ... }``, one entry per nesting level
    - ESCAPE: Right after a backslash, reads exactly one character

    """

    NORMAL = auto()
    BLOCK = auto()
    ESCAPE = auto()


ESCAPE_CHAR = "\\"

# Characters that end a text run, per mode. "|" is plain text at top level.
STOP_CHARS: MappingProxyType[LexerMode, frozenset[str]] = MappingProxyType(
    {
        LexerMode.NORMAL: frozenset("{}\\"),
        LexerMode.BLOCK: frozenset("{}|\\"),
    }
)

# Characters that an escape turns into themselves
LITERAL_ESCAPES = frozenset("{}\\|")

# Control sequences
CONTROL_ESCAPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "n": "\n",
        "r": "\r",
        "b": "\b",
    }
)


def resolve_escape(char: str) -> str:
    """Return the text an escaped character stands for.

    Unknown escapes are passed through verbatim, backslash included.

    Example:
        >>> resolve_escape("{")
        '{'
        >>> resolve_escape("n")
        '\\n'
        >>> resolve_escape("q")
        '\\\\q'
    """
    if char in LITERAL_ESCAPES:
        return char
    control = CONTROL_ESCAPES.get(char)
    if control is not None:
        return control
    return ESCAPE_CHAR + char
