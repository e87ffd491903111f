"""The Hunk: a named, typed data block found in a document.

Hunks are created by the scanner, one per marker comment, in document order.
Every field except ``original_pos`` may be reassigned; the position always
refers to the layout of the document as it was parsed.

Thread Safety:
Hunks are mutable and carry no locking. Mutate them from one thread only.

"""

from __future__ import annotations

from testmark.location import HunkPosition

MARKER_PREFIX = b"[testmark]:# ("
MARKER_SUFFIX = b")"
FENCE = b"```"


class Hunk:
    """A named data block with an optional info tag and a byte payload.

    Attributes:
        name: Text from the marker comment's parentheses
        info: Fence info string, trimmed; None when absent
        data: Raw payload bytes
        original_pos: Span the hunk occupied in the parsed document

    Example:
        >>> hunk = doc.hunks[0]
        >>> hunk.name = "renamed"
        >>> hunk.text = "new payload"
        >>> hunk.modified
        True

    """

    __slots__ = ("_name", "_info", "_data", "_original_pos", "_modified")

    def __init__(
        self,
        name: str,
        info: str | None,
        data: bytes,
        original_pos: HunkPosition,
    ) -> None:
        self._name = name
        self._info = _normalize_info(info)
        self._data = bytes(data)
        self._original_pos = original_pos
        self._modified = False

    def __repr__(self) -> str:
        return (
            f"Hunk(name={self._name!r}, info={self._info!r}, "
            f"data={len(self._data)} bytes, pos={self._original_pos})"
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self._modified = True

    @property
    def info(self) -> str | None:
        return self._info

    @info.setter
    def info(self, value: str | None) -> None:
        self._info = _normalize_info(value)
        self._modified = True

    @property
    def data(self) -> bytes:
        return self._data

    @data.setter
    def data(self, value: bytes) -> None:
        self._data = bytes(value)
        self._modified = True

    @property
    def text(self) -> str:
        """Payload decoded as UTF-8, with invalid sequences replaced."""
        return self._data.decode("utf-8", errors="replace")

    @text.setter
    def text(self, value: str) -> None:
        self.data = value.encode("utf-8")

    @property
    def original_pos(self) -> HunkPosition:
        return self._original_pos

    @property
    def modified(self) -> bool:
        """True once any field has been assigned since parsing."""
        return self._modified

    def render(self) -> bytes:
        """Render the canonical form of this hunk.

        Produces the marker line, the opening fence with the info tag, the
        payload, a line break, and the closing fence. The original text of
        the hunk plays no part.
        """
        parts = [
            MARKER_PREFIX,
            self._name.encode("utf-8"),
            MARKER_SUFFIX,
            b"\n",
            FENCE,
            (self._info or "").encode("utf-8"),
            b"\n",
            self._data,
            b"\n",
            FENCE,
        ]
        return b"".join(parts)


def _normalize_info(info: str | None) -> str | None:
    """Trim an info string; empty results become None."""
    if info is None:
        return None
    info = info.strip()
    return info or None


__all__ = ["FENCE", "Hunk", "MARKER_PREFIX", "MARKER_SUFFIX"]
