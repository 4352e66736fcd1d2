"""Evaluation of rant trees.

``evaluate`` is the single evaluator for the closed node set: it matches on
the variant and walks the tree depth-first, left to right. Randomness is an
explicit argument; nothing here touches global random state.

Thread Safety:
    Trees are immutable and ``evaluate`` keeps no state of its own, so one
    tree may be evaluated from many threads at once. Each ``run`` without an
    explicit ``rng`` builds its own source. An ``Interpreter`` owns one
    source and should not be shared across threads unless that source is.

"""

from __future__ import annotations

import random
from collections.abc import Iterable

from rant.config import get_config
from rant.lexer import lex
from rant.nodes import Block, Node, Pattern, Text
from rant.parser import parse
from rant.protocols import RandomSource
from rant.utils.logger import get_logger

logger = get_logger(__name__)


def default_rng() -> random.Random:
    """Build a fresh randomness source from the active configuration.

    Seeded from ``RantConfig.seed``; a None seed draws OS entropy.
    """
    return random.Random(get_config().seed)


def evaluate(node: Node, rng: RandomSource) -> str:
    """Evaluate a node to text.

    Text yields its content, Pattern concatenates its children in order,
    and Block evaluates one option picked with ``rng.randrange``.

    The walk uses an explicit stack, so trees of any depth evaluate without
    hitting the recursion limit. Draws still happen in pre-order.

    Raises:
        TypeError: If the tree holds anything but rant node types.
    """
    parts: list[str] = []
    pending: list[Node] = [node]
    while pending:
        match current := pending.pop():
            case Text(content=content):
                parts.append(content)
            case Pattern(subpatterns=subpatterns):
                pending.extend(reversed(subpatterns))
            case Block(options=options):
                pending.append(options[rng.randrange(len(options))])
            case _:
                msg = f"Cannot evaluate {type(current).__name__!r}"
                raise TypeError(msg)
    return "".join(parts)


def compile_template(source: str, *, source_file: str | None = None) -> Pattern:
    """Lex and parse ``source`` into a tree.

    Raises:
        LexError: On a dangling escape.
        TemplateSyntaxError: On a grammar violation.
    """
    logger.debug("Compiling template (%d chars)", len(source))
    return parse(lex(source, source_file=source_file), source_file=source_file)


def _as_tree(source_or_ast: str | Node, source_file: str | None) -> Node:
    if isinstance(source_or_ast, str):
        return compile_template(source_or_ast, source_file=source_file)
    if isinstance(source_or_ast, Node):
        return source_or_ast
    msg = f"Expected template text or a parsed tree, got {type(source_or_ast).__name__}"
    raise TypeError(msg)


def run(
    source_or_ast: str | Node,
    rng: RandomSource | None = None,
    *,
    source_file: str | None = None,
) -> str:
    """Generate text from template source or an already parsed tree.

    Args:
        source_or_ast: Template text (lexed and parsed first) or a tree
        rng: Randomness source; defaults to ``default_rng()``
        source_file: Optional source file path for error messages

    Returns:
        Generated text

    Raises:
        LexError: Propagated unchanged from lexing.
        TemplateSyntaxError: Propagated unchanged from parsing.

    Example:
        >>> run("{a|b}", random.Random(1)) in ("a", "b")
        True
    """
    tree = _as_tree(source_or_ast, source_file)
    return evaluate(tree, rng if rng is not None else default_rng())


class Interpreter:
    """Compiles and evaluates templates with one randomness source.

    Usage:
        >>> interpreter = Interpreter(random.Random(42))
        >>> tree = interpreter.compile("{small: {a|b}|BIG: {A|B}}")
        >>> interpreter.run(tree) in ("small: a", "small: b", "BIG: A", "BIG: B")
        True

        >>> len(interpreter.run_many(["one {x|y}", "two {p|q}"]))
        2

    Successive runs draw from the same source, so a seeded Interpreter
    produces a reproducible sequence of outputs.

    """

    __slots__ = ("_rng", "_source_file")

    def __init__(
        self,
        rng: RandomSource | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize interpreter.

        Args:
            rng: Randomness source; defaults to ``default_rng()``
            source_file: Optional source file path for error messages
        """
        self._rng = rng if rng is not None else default_rng()
        self._source_file = source_file

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def compile(self, source: str) -> Pattern:
        """Lex and parse ``source`` without evaluating it."""
        return compile_template(source, source_file=self._source_file)

    def run(self, source_or_ast: str | Node) -> str:
        """Generate text from template source or a parsed tree."""
        return evaluate(_as_tree(source_or_ast, self._source_file), self._rng)

    def run_many(self, sources: Iterable[str | Node]) -> list[str]:
        """Generate one output per template, in order.

        Stops at the first template that fails to compile.
        """
        return [self.run(source) for source in sources]
