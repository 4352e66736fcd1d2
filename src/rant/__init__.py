"""
rant: random-alternation text templates

Compiles a small template grammar into an immutable tree and evaluates it,
picking one option of every ``{a|b|c}`` block at random on each run.
Useful for dialogue and flavor-text variation.

Quick Start:
    >>> import random
    >>> from rant import run
    >>> run("Hello {world|there}!", random.Random(0)) in ("Hello world!", "Hello there!")
    True

    >>> # Compile once, evaluate many times
    >>> from rant import lex, parse
    >>> tree = parse(lex("{small: {a|b}|BIG: {A|B}}"))
    >>> outputs = {run(tree) for _ in range(100)}

Escapes:
    \\{ \\} \\| \\\\   literal brace, pipe, backslash
    \\n \\r \\b        newline, carriage return, backspace
    \\<other>          passed through unchanged, backslash included

Reproducible output:
    >>> from rant import RantConfig, config_context
    >>> with config_context(RantConfig(seed=42)):
    ...     assert run("{a|b|c}") == run("{a|b|c}")

"""

from rant.config import (
    RantConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from rant.errors import LexError, RantError, TemplateSyntaxError
from rant.interpreter import Interpreter, compile_template, default_rng, evaluate, run
from rant.lexer import Lexer, LexerMode, lex
from rant.location import SourceLocation
from rant.nodes import Block, Node, Pattern, Text
from rant.parser import Parser, parse
from rant.protocols import RandomSource
from rant.tokens import Token, TokenType

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "lex",
    "parse",
    "run",
    "compile_template",
    "evaluate",
    "default_rng",
    "Interpreter",
    # Nodes
    "Node",
    "Pattern",
    "Block",
    "Text",
    # Pipeline components
    "Lexer",
    "LexerMode",
    "Parser",
    "Token",
    "TokenType",
    "RandomSource",
    # Errors
    "RantError",
    "LexError",
    "TemplateSyntaxError",
    # Configuration (ContextVar-based)
    "RantConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    # Location
    "SourceLocation",
]
