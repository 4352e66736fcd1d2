"""Typed AST nodes for rant.

All AST nodes are frozen dataclasses with slots for:
- Immutability: one parsed tree can be evaluated from many threads
- Pattern matching: the evaluator is a single ``match`` over the variants
- Structural equality: ``location`` is excluded from comparison

Node Hierarchy:
Node (base)
├── Pattern   ordered subpatterns, concatenated
├── Block     alternation, one option picked per evaluation
└── Text      literal, fully unescaped content

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from rant.location import UNKNOWN_LOCATION, SourceLocation

if TYPE_CHECKING:
    from rant.protocols import RandomSource


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """Base class for all AST nodes.

    Nodes built by the parser record where they came from; nodes built by
    hand default to an unknown location.

    """

    location: SourceLocation = field(
        default=UNKNOWN_LOCATION, repr=False, compare=False
    )

    def run(self, rng: RandomSource | None = None) -> str:
        """Evaluate this node to text.

        Shorthand for ``rant.interpreter.evaluate(self, rng)``; a fresh
        default randomness source is used when ``rng`` is None.
        """
        from rant.interpreter import default_rng, evaluate

        return evaluate(self, rng if rng is not None else default_rng())


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text.

    Escapes are already resolved; ``content`` is emitted as-is.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Alternation: ``{a|b|c}``.

    Evaluates exactly one of ``options``, chosen uniformly at random.

    """

    options: tuple[Pattern, ...]

    def __post_init__(self) -> None:
        if not self.options:
            msg = "Block requires at least one option"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Pattern(Node):
    """Sequence of blocks and text, evaluated left to right and concatenated."""

    subpatterns: tuple[Block | Text, ...]

    def __post_init__(self) -> None:
        if not self.subpatterns:
            msg = "Pattern requires at least one subpattern"
            raise ValueError(msg)


Subpattern: TypeAlias = Block | Text
