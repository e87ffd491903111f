"""
testmark: round-trip-preserving data hunks in Markdown documents

Reads and edits named data blocks embedded in prose. A hunk is a marker
comment followed directly by a fenced code block:

    [testmark]:# (greeting)
    ```text
    hello, world
    ```

Everything around the hunks is left byte-for-byte untouched, so a document
can be parsed, edited and written back without disturbing the prose.

Quick Start:
    >>> from testmark import parse
    >>> doc = parse(source)
    >>> [hunk.name for hunk in doc]
    ['greeting']
    >>> doc.hunks[0].text = "hello, testmark"
    >>> updated = doc.render()

Installation:
    pip install testmark
"""

from testmark.config import (
    DocumentConfig,
    document_config_context,
    get_document_config,
    reset_document_config,
    set_document_config,
)
from testmark.document import Document, parse
from testmark.errors import ParseError, TestmarkError
from testmark.hunk import Hunk
from testmark.location import HunkPosition
from testmark.scanner import Scanner, scan

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core
    "Document",
    "Hunk",
    "HunkPosition",
    "Scanner",
    "parse",
    "scan",
    # Configuration
    "DocumentConfig",
    "document_config_context",
    "get_document_config",
    "reset_document_config",
    "set_document_config",
    # Errors
    "ParseError",
    "TestmarkError",
]
