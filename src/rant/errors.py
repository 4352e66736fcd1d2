"""Exception classes for rant.

Both error kinds are raised where they are detected and propagate unchanged
through ``rant.run``; presenting them to an end user is the caller's job.
"""

from __future__ import annotations


class RantError(Exception):
    """Base exception for all rant errors.

    Carries an optional source position and formats it in front of the
    message as ``file:line:col message``.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class LexError(RantError):
    """Error during tokenization.

    The only lexical failure is a backslash at the very end of the input
    (a dangling escape); every other character run is representable as text.
    """

    pass


class TemplateSyntaxError(RantError):
    """Grammar violation found by the parser.

    Raised for unmatched braces, a stray ``|`` or ``}`` outside a block,
    an empty pattern (including empty source), leftover tokens after a
    complete parse, and blocks nested deeper than the configured limit.
    """

    pass
