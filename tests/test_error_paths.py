"""Error-path and malformed input tests.

Exercises the error hierarchy, message formatting, and the failure cases of
the lex -> parse -> run pipeline.
"""

import pytest

from rant import run
from rant.errors import LexError, RantError, TemplateSyntaxError
from rant.lexer import lex
from rant.parser import parse

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestErrorFormatting:
    """Verify RantError subclasses produce well-formatted messages."""

    def test_message_only(self) -> None:
        err = TemplateSyntaxError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = TemplateSyntaxError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = LexError("dangling escape", lineno=10, col_offset=5)
        assert str(err) == "10:5 dangling escape"

    def test_with_source_file(self) -> None:
        err = LexError("error", lineno=1, col_offset=1, source_file="lines.txt")
        assert str(err) == "lines.txt:1:1 error"

    def test_message_attribute(self) -> None:
        err = TemplateSyntaxError("missing brace", lineno=1, col_offset=2)
        assert err.message == "missing brace"


class TestHierarchy:
    def test_lex_error_is_rant_error(self) -> None:
        assert isinstance(LexError("x"), RantError)

    def test_syntax_error_is_rant_error(self) -> None:
        assert isinstance(TemplateSyntaxError("x"), RantError)

    def test_does_not_shadow_builtin_syntax_error(self) -> None:
        assert not issubclass(TemplateSyntaxError, SyntaxError)

    def test_catch_all_with_base_class(self) -> None:
        for source in ("\\", "{", "}"):
            with pytest.raises(RantError):
                run(source)


# =========================================================================
# Pipeline failure cases
# =========================================================================


class TestFailureCases:
    def test_unterminated_block(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            run("{a")

    def test_stray_rbrace(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            run("}")

    def test_empty_source(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            run("")

    def test_lone_backslash(self) -> None:
        with pytest.raises(LexError):
            run("\\")

    def test_lex_error_before_syntax_error(self) -> None:
        """An unterminated block with a dangling escape fails in the lexer first."""
        with pytest.raises(LexError):
            run("{a\\")

    def test_lex_error_location(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("ab\ncd\\")
        assert exc_info.value.lineno == 2
        assert exc_info.value.col_offset == 3

    def test_no_partial_tree(self) -> None:
        """Parsing either returns a complete tree or raises; nothing in between."""
        tokens = lex("{a|b} tail }")
        with pytest.raises(TemplateSyntaxError):
            parse(tokens)
