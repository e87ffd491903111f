"""Tests for byte-span bookkeeping and offset to line/column conversion."""

import pytest

from testmark.location import HunkPosition, line_and_column


class TestHunkPosition:
    """HunkPosition is a frozen half-open span."""

    def test_length_and_str(self) -> None:
        pos = HunkPosition(10, 42)
        assert len(pos) == 32
        assert str(pos) == "[10, 42)"

    def test_contains_is_half_open(self) -> None:
        pos = HunkPosition(3, 6)
        assert not pos.contains(2)
        assert pos.contains(3)
        assert pos.contains(5)
        assert not pos.contains(6)

    def test_slice(self) -> None:
        assert HunkPosition(2, 5).slice(b"abcdefg") == b"cde"

    def test_empty_span_allowed(self) -> None:
        assert len(HunkPosition(4, 4)) == 0

    @pytest.mark.parametrize("start,end", [(-1, 3), (5, 4)])
    def test_invalid_span_rejected(self, start: int, end: int) -> None:
        with pytest.raises(ValueError):
            HunkPosition(start, end)

    def test_frozen(self) -> None:
        pos = HunkPosition(0, 1)
        with pytest.raises(AttributeError):
            pos.start = 5  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert HunkPosition(1, 2) == HunkPosition(1, 2)
        assert len({HunkPosition(1, 2), HunkPosition(1, 2)}) == 1


class TestLineAndColumn:
    """Offsets map to 1-indexed lines and byte columns."""

    @pytest.mark.parametrize(
        "offset,expected",
        [
            (0, (1, 1)),
            (2, (1, 3)),
            (3, (2, 1)),
            (4, (2, 2)),
            (6, (3, 1)),
        ],
    )
    def test_positions(self, offset: int, expected: tuple[int, int]) -> None:
        assert line_and_column(b"ab\ncd\nef", offset) == expected

    def test_columns_count_bytes(self) -> None:
        body = "é=x".encode()
        assert line_and_column(body, body.index(b"=")) == (1, 3)

    def test_offset_clamped(self) -> None:
        assert line_and_column(b"ab", 99) == (1, 3)
        assert line_and_column(b"ab", -5) == (1, 1)

    def test_empty_body(self) -> None:
        assert line_and_column(b"", 0) == (1, 1)
