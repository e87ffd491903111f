"""Exception classes for testmark.

Provides standardized exceptions for error handling throughout testmark.
I/O failures are not wrapped: they surface as the OSError raised by the
filesystem call.
"""

from __future__ import annotations


class TestmarkError(Exception):
    """Base exception for all testmark errors.

    Subclass this for specific error categories.
    """

    # Keep pytest from collecting the class when tests import it
    __test__ = False


class ParseError(TestmarkError):
    """Structural error while scanning a document for hunks.

    Raised when a marker comment is found but the bytes after it do not
    follow the convention (missing closing parenthesis, marker not followed
    by a fence, unterminated fence). Fatal to the parse: no partial
    document is produced.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            offset: Absolute byte offset where the error occurred
            lineno: Line number where error occurred (1-indexed)
            col_offset: Byte column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
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


__all__ = ["ParseError", "TestmarkError"]
