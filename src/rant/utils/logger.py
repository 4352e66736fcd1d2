"""Minimal logging utilities for rant.

Provides a simple get_logger function that wraps the standard library logging.
Every rant logger lives under the "rant." namespace and only emits debug
records: unterminated blocks at the end of lexing, syntax errors just
before they are raised, and template compilation. No handlers are installed.

Example:
    >>> import logging
    >>> logging.getLogger("rant").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name under the "rant." namespace.

    Example:
        >>> get_logger("rant.parser").name
        'rant.parser'
        >>> get_logger("mymodule").name
        'rant.mymodule'
    """
    if not (name == "rant" or name.startswith("rant.")):
        name = f"rant.{name}"
    return logging.getLogger(name)
