"""State-machine lexer for rant templates.

The lexer keeps an explicit stack of modes. ``{`` pushes BLOCK, ``}`` pops
it, and a backslash pushes a one-shot ESCAPE mode that reads a single
character and returns to whatever mode it interrupted.

No regex in the hot path. O(n) in the length of the source.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the mode tables are immutable module data.

"""

from __future__ import annotations

from collections.abc import Iterator

from rant.errors import LexError
from rant.lexer.modes import ESCAPE_CHAR, STOP_CHARS, LexerMode, resolve_escape
from rant.tokens import Token, TokenType
from rant.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """State-machine lexer producing LBRACE, RBRACE, PIPE and TEXT tokens.

    Usage:
        >>> lexer = Lexer("hi {a|b}")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(TEXT, 'hi ', 1:1)
        Token(LBRACE, '{', 1:4)
        Token(TEXT, 'a', 1:5)
        Token(PIPE, '|', 1:6)
        Token(TEXT, 'b', 1:7)
        Token(RBRACE, '}', 1:8)

    Unterminated blocks are not a lexical error; the stream simply ends
    without the closing RBRACE and the parser reports it.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_mode_stack",
        "_saved_lineno",
        "_saved_col",
        "_saved_pos",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Template source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._mode_stack: list[LexerMode] = [LexerMode.NORMAL]

        self._saved_lineno: int = 1
        self._saved_col: int = 1
        self._saved_pos: int = 0

    @property
    def mode(self) -> LexerMode:
        """The active (top of stack) mode."""
        return self._mode_stack[-1]

    @property
    def depth(self) -> int:
        """Number of blocks currently open."""
        return self._mode_stack.count(LexerMode.BLOCK)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in source order

        Raises:
            LexError: If the source ends with an unfinished escape.
        """
        source_len = self._source_len
        while self._pos < source_len:
            mode = self._mode_stack[-1]
            if mode is LexerMode.ESCAPE:
                yield self._scan_escape()
            else:
                token = self._scan(mode)
                if token is not None:
                    yield token

        if self._mode_stack[-1] is LexerMode.ESCAPE:
            raise LexError(
                "dangling escape",
                lineno=self._saved_lineno,
                col_offset=self._saved_col,
                source_file=self._source_file,
            )

        if len(self._mode_stack) > 1:
            logger.debug(
                "End of input with %d unterminated block(s) at %d:%d",
                self.depth,
                self._lineno,
                self._col,
            )

    def _scan(self, mode: LexerMode) -> Token | None:
        """Scan one structural character or one text run in NORMAL/BLOCK mode.

        Returns None when a backslash switched into ESCAPE mode.
        """
        char = self._source[self._pos]

        if char == "{":
            token = self._scan_char(TokenType.LBRACE)
            self._mode_stack.append(LexerMode.BLOCK)
            return token

        if char == "}":
            # Outside a block the stack is left alone; the parser rejects it
            if mode is LexerMode.BLOCK:
                self._mode_stack.pop()
            return self._scan_char(TokenType.RBRACE)

        if char == "|" and mode is LexerMode.BLOCK:
            return self._scan_char(TokenType.PIPE)

        if char == ESCAPE_CHAR:
            self._save_location()
            self._advance_to(self._pos + 1)
            self._mode_stack.append(LexerMode.ESCAPE)
            return None

        return self._scan_text(STOP_CHARS[mode])

    def _scan_escape(self) -> Token:
        """Consume the escaped character and return to the interrupted mode.

        Location was saved when the backslash was read, so the token spans
        the whole two-character sequence.
        """
        char = self._source[self._pos]
        self._advance_to(self._pos + 1)
        self._mode_stack.pop()
        return self._make_token(TokenType.TEXT, resolve_escape(char))

    def _scan_text(self, stops: frozenset[str]) -> Token:
        """Scan a maximal run of characters not in ``stops``.

        The caller guarantees the current character is not a stop
        character, so the run is never empty.
        """
        self._save_location()
        source = self._source
        source_len = self._source_len
        end = self._pos + 1
        while end < source_len and source[end] not in stops:
            end += 1
        value = source[self._pos : end]
        self._advance_to(end)
        return self._make_token(TokenType.TEXT, value)

    def _scan_char(self, token_type: TokenType) -> Token:
        self._save_location()
        value = self._source[self._pos]
        self._advance_to(self._pos + 1)
        return self._make_token(token_type, value)

    # =========================================================================
    # Position and location tracking
    # =========================================================================

    def _advance_to(self, end: int) -> None:
        """Move position to ``end``, updating line/column tracking."""
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos = end

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col
        self._saved_pos = self._pos

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a Token spanning from the saved location to the current one."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )


def lex(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize a whole template.

    Args:
        source: Template source text
        source_file: Optional source file path for error messages

    Returns:
        List of tokens in source order

    Raises:
        LexError: If the source ends with a dangling escape. No partial
            token list is returned.

    Example:
        >>> [t.value for t in lex("a\\\\{b")]
        ['a', '{', 'b']
    """
    return list(Lexer(source, source_file=source_file).tokenize())
