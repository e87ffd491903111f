"""ContextVar-based document configuration for testmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Scanner and Document read the active config once, at construction, unless
an explicit config is passed in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from testmark import Document
    from testmark.config import DocumentConfig, document_config_context

    with document_config_context(DocumentConfig(strict_names=True)):
        doc = Document.from_file("fixtures.md")

    # Or pass it explicitly
    doc = Document.from_bytes(raw, config=DocumentConfig(preserve_unmodified=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """Immutable document configuration.

    Attributes:
        preserve_unmodified: Render hunks that were never mutated by copying
            their original bytes instead of regenerating them. Keeps
            non-canonical hunks (trailing text after the marker, CRLF line
            endings) byte-identical across a round trip.
        strict_names: Raise ParseError when a marker name or fence info
            string is not valid UTF-8, instead of substituting U+FFFD.

    """

    preserve_unmodified: bool = True
    strict_names: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DocumentConfig":
        """Create DocumentConfig from dictionary.

        Only includes keys that are valid DocumentConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = DocumentConfig.from_dict({
            ...     "strict_names": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_names
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: DocumentConfig = DocumentConfig()

_document_config: ContextVar[DocumentConfig] = ContextVar(
    "document_config",
    default=_DEFAULT_CONFIG,
)


def get_document_config() -> DocumentConfig:
    """Get current document configuration (thread-local)."""
    return _document_config.get()


def set_document_config(config: DocumentConfig) -> None:
    """Set document configuration for current context.

    Args:
        config: DocumentConfig instance to use for this context.

    """
    _document_config.set(config)


def reset_document_config() -> None:
    """Reset to default configuration."""
    _document_config.set(_DEFAULT_CONFIG)


@contextmanager
def document_config_context(config: DocumentConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with document_config_context(DocumentConfig(strict_names=True)):
        ...     doc = Document.from_bytes(raw)
        >>> # Automatically reset to previous config

    """
    previous = _document_config.get()
    _document_config.set(config)
    try:
        yield
    finally:
        _document_config.set(previous)


__all__ = [
    "DocumentConfig",
    "get_document_config",
    "set_document_config",
    "reset_document_config",
    "document_config_context",
]
