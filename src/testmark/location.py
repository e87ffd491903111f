"""Byte-span tracking for hunks.

Provides the HunkPosition dataclass that records where a hunk sat in the
original document, plus offset to line/column conversion for error messages.

Spans are absolute byte offsets, never line numbers: rendering splices the
original body by slice copy, so offsets must survive payloads that are not
valid UTF-8.

Thread Safety:
HunkPosition is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HunkPosition:
    """Half-open byte span ``[start, end)`` into a document body.

    Covers the full extent of a hunk as it was parsed: the first byte of the
    marker comment through the last backtick of the closing fence.

    Attributes:
        start: Offset of the marker comment's first byte
        end: Offset just past the closing fence

    Examples:
            >>> pos = HunkPosition(10, 42)
            >>> str(pos)
            '[10, 42)'
            >>> len(pos)
            32

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def contains(self, offset: int) -> bool:
        """Return True if offset falls inside the span."""
        return self.start <= offset < self.end

    def slice(self, body: bytes) -> bytes:
        """Return the bytes of body covered by this span."""
        return body[self.start : self.end]


def line_and_column(body: bytes, offset: int) -> tuple[int, int]:
    """Convert an absolute byte offset into a 1-indexed (line, column) pair.

    Columns count bytes, not characters.

    Args:
        body: Document bytes
        offset: Absolute offset into body (clamped to its length)

    Returns:
        Tuple of (lineno, col_offset)

    Example:
        >>> line_and_column(b"ab\\ncd", 4)
        (2, 2)
    """
    offset = max(0, min(offset, len(body)))
    lineno = body.count(b"\n", 0, offset) + 1
    line_start = body.rfind(b"\n", 0, offset) + 1
    return lineno, offset - line_start + 1


__all__ = ["HunkPosition", "line_and_column"]
