"""Recursive descent parser producing a typed AST.

Consumes the token stream from the Lexer and builds immutable nodes.

Grammar (one token of lookahead):
    pattern    := subpattern+
    subpattern := block | TEXT
    block      := LBRACE options RBRACE
    options    := pattern (PIPE pattern)*

Adjacent TEXT tokens are kept as separate Text leaves. Every token must be
consumed; leftovers after the top-level pattern are a syntax error.

Thread Safety:
- Parser instances are single-use; all state is instance-local
- The nesting limit is read from ContextVar configuration (thread-local)
- The resulting AST is immutable and safe to share across threads

"""

from __future__ import annotations

from collections.abc import Iterable

from rant.config import get_config
from rant.errors import TemplateSyntaxError
from rant.nodes import Block, Pattern, Subpattern, Text
from rant.tokens import Token, TokenType
from rant.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser for rant templates.

    Usage:
        >>> from rant.lexer import lex
        >>> tree = Parser(lex("hi {a|b}")).parse()
        >>> [type(node).__name__ for node in tree.subpatterns]
        ['Text', 'Block']

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_source_file",
        "_depth",
        "_max_depth",
    )

    def __init__(
        self,
        tokens: Iterable[Token],
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with a token stream.

        Args:
            tokens: Tokens as produced by the lexer
            source_file: Optional source file path for error messages

        """
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current: Token | None = self._tokens[0] if self._tokens else None
        self._source_file = source_file
        self._depth = 0
        self._max_depth = get_config().max_depth

    def parse(self) -> Pattern:
        """Parse the whole token stream into a Pattern.

        Raises:
            TemplateSyntaxError: On any grammar violation or leftover tokens.
        """
        pattern = self._parse_pattern()
        if self._current is not None:
            raise self._unexpected(self._current)
        return pattern

    # =========================================================================
    # Token navigation
    # =========================================================================

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    # =========================================================================
    # Productions
    # =========================================================================

    def _parse_pattern(self) -> Pattern:
        subpatterns: list[Subpattern] = []
        while (token := self._current) is not None:
            if token.type is TokenType.TEXT:
                subpatterns.append(Text(token.value, location=token.location))
                self._advance()
            elif token.type is TokenType.LBRACE:
                subpatterns.append(self._parse_block())
            else:
                break

        if not subpatterns:
            if self._current is None:
                raise self._error("unexpected end of input, expected text or '{'")
            raise self._unexpected(self._current)

        location = subpatterns[0].location.span_to(subpatterns[-1].location)
        return Pattern(tuple(subpatterns), location=location)

    def _parse_block(self) -> Block:
        opening = self._current
        assert opening is not None
        self._advance()

        self._depth += 1
        if self._depth > self._max_depth:
            raise self._error(
                f"blocks nested deeper than {self._max_depth} levels", opening
            )

        options = [self._parse_pattern()]
        while self._current is not None and self._current.type is TokenType.PIPE:
            self._advance()
            options.append(self._parse_pattern())

        closing = self._current
        if closing is None or closing.type is not TokenType.RBRACE:
            raise self._error("unterminated block, expected '}'", opening)
        self._advance()
        self._depth -= 1

        return Block(
            tuple(options),
            location=opening.location.span_to(closing.location),
        )

    # =========================================================================
    # Errors
    # =========================================================================

    def _unexpected(self, token: Token) -> TemplateSyntaxError:
        """Error for a token that cannot start a subpattern here."""
        if self._depth == 0:
            return self._error(f"unexpected {token.value!r} outside of a block", token)
        return self._error(f"empty option before {token.value!r}", token)

    def _error(self, message: str, token: Token | None = None) -> TemplateSyntaxError:
        if token is None and self._tokens:
            token = self._tokens[-1]
        logger.debug("Syntax error: %s (token %r)", message, token)
        if token is None:
            return TemplateSyntaxError(message, source_file=self._source_file)
        loc = token.location
        return TemplateSyntaxError(
            message,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=self._source_file or loc.source_file,
        )


def parse(tokens: Iterable[Token], *, source_file: str | None = None) -> Pattern:
    """Parse a token stream into a Pattern-rooted tree.

    Args:
        tokens: Tokens as produced by ``lex``
        source_file: Optional source file path for error messages

    Returns:
        Root Pattern node

    Raises:
        TemplateSyntaxError: If the tokens do not match the grammar or are
            not fully consumed. No partial tree is returned.
    """
    return Parser(tokens, source_file=source_file).parse()
