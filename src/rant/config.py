"""ContextVar-based configuration for rant.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The parser reads the nesting limit from it and ``rant.run`` reads the
seed used when no randomness source is passed in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from rant.config import RantConfig, config_context

    with config_context(RantConfig(seed=42)):
        text = run("{a|b}")  # reproducible

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

# The parser recurses twice per nesting level; this keeps it well inside
# the default interpreter recursion limit.
MAX_DEPTH_CEILING = 256


@dataclass(frozen=True, slots=True)
class RantConfig:
    """Immutable rant configuration.

    Attributes:
        max_depth: Deepest allowed block nesting; deeper templates are
            rejected by the parser with TemplateSyntaxError; at most
            MAX_DEPTH_CEILING
        seed: Seed for the default randomness source used by ``run`` when
            the caller passes no ``rng``; None draws from OS entropy

    """

    max_depth: int = 64
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_CEILING:
            msg = (
                f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, "
                f"got {self.max_depth}"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RantConfig":
        """Create RantConfig from dictionary.

        Only includes keys that are valid RantConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RantConfig.from_dict({"seed": 7, "unknown_key": 1})
            >>> config.seed
            7

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RantConfig = RantConfig()

_config: ContextVar[RantConfig] = ContextVar(
    "rant_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> RantConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: RantConfig) -> None:
    """Set configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to the default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: RantConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(RantConfig(max_depth=2)):
        ...     parse(lex("{a{b}}"))
        >>> # Automatically reset to previous config

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "MAX_DEPTH_CEILING",
    "RantConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
