"""The Document: original bytes plus the hunks parsed from them.

A Document owns the raw body it was built from and the ordered hunks the
scanner found in it. The body is never modified; rendering splices hunk
representations back into the untouched spans between them.

Example:
    >>> doc = Document.from_string(source)
    >>> doc.hunks[0].text = "updated payload"
    >>> doc.write_file("fixtures.md")

Thread Safety:
Documents are mutable through their hunks and carry no locking. Use one
Document per thread or serialize access externally.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import BinaryIO, overload

from testmark.config import DocumentConfig, get_document_config
from testmark.hunk import Hunk
from testmark.scanner import Scanner
from testmark.utils.logger import get_logger

logger = get_logger(__name__)


class Document:
    """A text document with embedded testmark hunks.

    Attributes:
        body: The original bytes, exactly as supplied
        hunks: Hunks in document order
        source_file: Path the document was read from, if any
        config: Config captured at construction

    Raises:
        ParseError: From the constructors, if the body is structurally malformed.

    """

    __slots__ = ("_body", "_hunks", "_source_file", "_config")

    def __init__(
        self,
        body: bytes,
        *,
        source_file: str | None = None,
        config: DocumentConfig | None = None,
    ) -> None:
        if config is None:
            config = get_document_config()
        body = bytes(body)
        hunks = Scanner(body, source_file=source_file, config=config).scan()
        self._body = body
        self._hunks = tuple(hunks)
        self._source_file = source_file
        self._config = config

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_bytes(
        cls,
        body: bytes,
        *,
        source_file: str | None = None,
        config: DocumentConfig | None = None,
    ) -> Document:
        """Parse a document from raw bytes."""
        return cls(body, source_file=source_file, config=config)

    @classmethod
    def from_string(
        cls,
        source: str,
        *,
        source_file: str | None = None,
        config: DocumentConfig | None = None,
    ) -> Document:
        """Parse a document from text, encoded as UTF-8."""
        return cls(source.encode("utf-8"), source_file=source_file, config=config)

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO | Iterable[bytes],
        *,
        source_file: str | None = None,
        config: DocumentConfig | None = None,
    ) -> Document:
        """Parse a document from a binary reader or an iterable of byte chunks.

        The whole stream is read into memory before scanning.
        """
        if hasattr(stream, "read"):
            body = stream.read()
        else:
            body = b"".join(stream)
        return cls(body, source_file=source_file, config=config)

    @classmethod
    def from_file(
        cls,
        path: str | PathLike[str],
        *,
        config: DocumentConfig | None = None,
    ) -> Document:
        """Read and parse the file at path.

        Raises:
            OSError: If the file cannot be read.
            ParseError: If its content is structurally malformed.
        """
        path = Path(path)
        body = path.read_bytes()
        logger.debug("Read %d bytes from %s", len(body), path)
        return cls(body, source_file=str(path), config=config)

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def body(self) -> bytes:
        return self._body

    @property
    def hunks(self) -> tuple[Hunk, ...]:
        return self._hunks

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def config(self) -> DocumentConfig:
        return self._config

    @property
    def modified(self) -> bool:
        """True if any hunk has been mutated since parsing."""
        return any(hunk.modified for hunk in self._hunks)

    def __len__(self) -> int:
        return len(self._hunks)

    def __iter__(self) -> Iterator[Hunk]:
        return iter(self._hunks)

    @overload
    def __getitem__(self, index: int) -> Hunk: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Hunk, ...]: ...

    def __getitem__(self, index: int | slice) -> Hunk | tuple[Hunk, ...]:
        return self._hunks[index]

    def __repr__(self) -> str:
        source = f" {self._source_file!r}" if self._source_file else ""
        return f"<Document{source}: {len(self._hunks)} hunks, {len(self._body)} bytes>"

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> bytes:
        """Render the document with its hunks' current contents.

        Bytes between hunks are copied from the original body unchanged.
        Mutated hunks are written in canonical form; unmutated ones are
        copied from their original span when ``preserve_unmodified`` is set,
        and regenerated otherwise.

        Complexity: O(n) where n = len(body) plus the size of edited hunks
        """
        body = self._body
        preserve = self._config.preserve_unmodified
        parts: list[bytes] = []
        cursor = 0
        for hunk in self._hunks:
            pos = hunk.original_pos
            parts.append(body[cursor : pos.start])
            if preserve and not hunk.modified:
                parts.append(pos.slice(body))
            else:
                parts.append(hunk.render())
            cursor = pos.end
        parts.append(body[cursor:])
        return b"".join(parts)

    def render_text(self) -> str:
        """Render and decode as UTF-8, replacing invalid sequences."""
        return self.render().decode("utf-8", errors="replace")

    def write_file(self, path: str | PathLike[str]) -> None:
        """Render and write to path, creating or truncating it.

        Raises:
            OSError: If the file cannot be written.
        """
        rendered = self.render()
        Path(path).write_bytes(rendered)
        logger.debug("Wrote %d bytes to %s", len(rendered), path)


def parse(
    source: bytes | str,
    *,
    source_file: str | None = None,
    config: DocumentConfig | None = None,
) -> Document:
    """Parse bytes or text into a Document.

    Args:
        source: Document content; text is encoded as UTF-8
        source_file: Optional source file path for error messages
        config: Explicit config; defaults to the active context config

    Returns:
        Document with its hunks in document order

    Raises:
        ParseError: If the content is structurally malformed.
    """
    if isinstance(source, str):
        return Document.from_string(source, source_file=source_file, config=config)
    return Document.from_bytes(source, source_file=source_file, config=config)


__all__ = ["Document", "parse"]
