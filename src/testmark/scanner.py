"""Single-pass hunk scanner with O(n) guaranteed performance.

Walks a document body left to right, looking ahead for whichever comes
first: a marker comment (``[testmark]:# (``) or a bare fence opener
(three backticks). A marker commits the scanner to parse a header and the
fenced block that must follow it; a bare fence is parsed and skipped so that
ordinary code blocks in the prose never become hunks.

Everything else is prose. The scanner does not retain it; the Document
copies it back verbatim from the original body when rendering.

No regex in the hot path. Lookahead results are cached and only recomputed
once the cursor moves past them, so each byte is searched a bounded number
of times.

Thread Safety:
Scanner instances are single-use. Create one per document body.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from testmark.config import DocumentConfig, get_document_config
from testmark.errors import ParseError
from testmark.hunk import FENCE, MARKER_PREFIX, MARKER_SUFFIX, Hunk
from testmark.location import HunkPosition, line_and_column
from testmark.utils.logger import get_logger

logger = get_logger(__name__)

# Sentinel for "no further occurrence"
_NOT_FOUND = -1


class Scanner:
    """Scans a byte buffer for marker+fence hunks.

    Usage:
            >>> scanner = Scanner(b"[testmark]:# (greeting)\\n```text\\nhi\\n```\\n")
            >>> scanner.scan()
        [Hunk(name='greeting', info='text', data=2 bytes, pos=[0, 38))]

    Thread Safety:
        Scanner instances are single-use. Create one per body.

    """

    __slots__ = (
        "_body",
        "_body_len",  # Cached len(body)
        "_pos",
        "_source_file",
        "_strict_names",
        "_next_marker",  # Cached offset of the next marker prefix
        "_next_fence",  # Cached offset of the next fence opener
    )

    def __init__(
        self,
        body: bytes,
        source_file: str | None = None,
        config: DocumentConfig | None = None,
    ) -> None:
        """Initialize scanner with a document body.

        Args:
            body: Raw document bytes
            source_file: Optional source file path for error messages
            config: Explicit config; defaults to the active context config
        """
        if config is None:
            config = get_document_config()
        self._body = body
        self._body_len = len(body)
        self._pos = 0
        self._source_file = source_file
        self._strict_names = config.strict_names
        self._next_marker = body.find(MARKER_PREFIX)
        self._next_fence = body.find(FENCE)

    def scan(self) -> list[Hunk]:
        """Scan the whole body and return its hunks in document order.

        Raises:
            ParseError: If a marker or fence is structurally malformed.

        Complexity: O(n) where n = len(body)
        """
        hunks: list[Hunk] = []
        skipped_fences = 0
        while True:
            start = self._find_next_block()
            if start == _NOT_FOUND:
                break
            self._pos = start
            if start == self._next_marker:
                hunks.append(self._scan_hunk())
            else:
                self._scan_code_block()
                skipped_fences += 1

        logger.debug(
            "Scanned %d hunks (%d plain fences skipped) in %d bytes",
            len(hunks),
            skipped_fences,
            self._body_len,
        )
        return hunks

    # =========================================================================
    # Lookahead
    # =========================================================================

    def _find_next_block(self) -> int:
        """Return the offset of the next marker or fence, whichever is first.

        Returns:
            Offset of the nearest block start, or -1 if none remain.
        """
        pos = self._pos
        if self._next_marker != _NOT_FOUND and self._next_marker < pos:
            self._next_marker = self._body.find(MARKER_PREFIX, pos)
        if self._next_fence != _NOT_FOUND and self._next_fence < pos:
            self._next_fence = self._body.find(FENCE, pos)

        marker, fence = self._next_marker, self._next_fence
        if marker == _NOT_FOUND:
            return fence
        if fence == _NOT_FOUND:
            return marker
        return min(marker, fence)

    # =========================================================================
    # Block parsers
    # =========================================================================

    def _scan_hunk(self) -> Hunk:
        """Parse a marker comment and the fenced block that must follow it."""
        start = self._pos
        name = self._scan_header()
        if not self._body.startswith(FENCE, self._pos):
            raise self._error("marker comment is not followed by a fenced code block")
        info_start = self._pos + len(FENCE)
        raw_info, data, end = self._scan_code_block()
        info = self._decode(raw_info, info_start, "info string").strip()
        return Hunk(name, info or None, data, HunkPosition(start, end))

    def _scan_header(self) -> str:
        """Parse ``[testmark]:# (name)`` and discard the rest of its line.

        Returns:
            The hunk name.
        """
        name_start = self._pos + len(MARKER_PREFIX)
        name_end = self._body.find(MARKER_SUFFIX, name_start)
        if name_end == _NOT_FOUND:
            raise self._error("marker comment has no closing parenthesis")
        if name_end == name_start:
            raise self._error("marker comment has an empty name")

        line_end = self._body.find(b"\n", name_end)
        if line_end == _NOT_FOUND:
            raise self._error("marker comment is not terminated by a line break", name_end)

        name = self._decode(self._body[name_start:name_end], name_start, "hunk name")
        self._pos = line_end + 1
        return name

    def _scan_code_block(self) -> tuple[bytes, bytes, int]:
        """Parse a fenced code block starting at the cursor.

        The payload runs from the line after the opening fence up to the next
        fence. One line break directly before the closing fence separates the
        payload from the fence and is not part of the payload.

        Returns:
            Tuple of (raw info bytes, payload, end offset past the closing fence)
        """
        fence_start = self._pos
        info_start = fence_start + len(FENCE)
        info_end = self._body.find(b"\n", info_start)
        if info_end == _NOT_FOUND:
            raise self._error("fence opener is not terminated by a line break")

        data_start = info_end + 1
        close = self._body.find(FENCE, data_start)
        if close == _NOT_FOUND:
            raise self._error("unterminated fenced code block")

        data = self._body[data_start:close]
        if data.endswith(b"\n"):
            data = data[:-1]

        end = close + len(FENCE)
        self._pos = end
        return self._body[info_start:info_end], data, end

    # =========================================================================
    # Helpers
    # =========================================================================

    def _decode(self, raw: bytes, offset: int, what: str) -> str:
        """Decode header bytes as UTF-8, lossily unless strict names are on."""
        if not self._strict_names:
            return raw.decode("utf-8", errors="replace")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise self._error(f"{what} is not valid UTF-8", offset + e.start) from e

    def _error(self, message: str, offset: int | None = None) -> ParseError:
        """Build a ParseError located at offset (default: the cursor)."""
        if offset is None:
            offset = self._pos
        lineno, col = line_and_column(self._body, offset)
        return ParseError(
            message,
            offset=offset,
            lineno=lineno,
            col_offset=col,
            source_file=self._source_file,
        )


def scan(
    body: bytes,
    *,
    source_file: str | None = None,
    config: DocumentConfig | None = None,
) -> list[Hunk]:
    """Scan body and return its hunks in document order.

    Args:
        body: Raw document bytes
        source_file: Optional source file path for error messages
        config: Explicit config; defaults to the active context config

    Raises:
        ParseError: If the document is structurally malformed.
    """
    return Scanner(body, source_file=source_file, config=config).scan()


__all__ = ["Scanner", "scan"]
