"""Tests for single-range header parsing."""

from __future__ import annotations

import pytest

from reelstream.core.errors import RangeNotSatisfiableError
from reelstream.core.models import ByteRange
from reelstream.core.ranges import content_range, parse_range


class TestParseRange:
    def test_closed_range(self) -> None:
        assert parse_range("bytes=0-99", 1000) == ByteRange(0, 99)

    def test_open_ended_range(self) -> None:
        assert parse_range("bytes=100-", 1000) == ByteRange(100, 999)

    def test_single_byte(self) -> None:
        assert parse_range("bytes=5-5", 10) == ByteRange(5, 5)

    def test_last_byte(self) -> None:
        assert parse_range("bytes=9-9", 10) == ByteRange(9, 9)

    def test_end_past_eof_is_clamped(self) -> None:
        assert parse_range("bytes=900-5000", 1000) == ByteRange(900, 999)

    def test_end_exactly_at_size_is_clamped(self) -> None:
        assert parse_range("bytes=0-1000", 1000) == ByteRange(0, 999)

    def test_whitespace_and_case_tolerated(self) -> None:
        assert parse_range(" Bytes = 10 - 20 ", 100) == ByteRange(10, 20)

    @pytest.mark.parametrize("header", [None, ""])
    def test_absent_header(self, header: str | None) -> None:
        assert parse_range(header, 100) is None

    @pytest.mark.parametrize(
        "header",
        [
            "bytes=abc",
            "bytes=-500",
            "bytes=",
            "bytes=10-5",
            "bytes=0-10,20-30",
            "items=0-10",
            "0-10",
            "bytes=1.5-2",
            "bytes=0-10 junk",
        ],
    )
    def test_malformed_falls_back_to_none(self, header: str) -> None:
        assert parse_range(header, 100) is None

    def test_start_at_size_is_unsatisfiable(self) -> None:
        with pytest.raises(RangeNotSatisfiableError) as exc_info:
            parse_range("bytes=100-", 100)
        assert exc_info.value.size == 100
        assert exc_info.value.status_code == 416

    def test_start_past_size_is_unsatisfiable(self) -> None:
        with pytest.raises(RangeNotSatisfiableError):
            parse_range("bytes=500-600", 100)

    def test_any_range_on_empty_file_is_unsatisfiable(self) -> None:
        with pytest.raises(RangeNotSatisfiableError):
            parse_range("bytes=0-", 0)


class TestByteRange:
    def test_length_is_inclusive(self) -> None:
        assert ByteRange(10, 19).length == 10

    @pytest.mark.parametrize(("start", "end"), [(-1, 5), (5, 4)])
    def test_rejects_invalid_bounds(self, start: int, end: int) -> None:
        with pytest.raises(ValueError):
            ByteRange(start, end)


def test_content_range_header() -> None:
    assert content_range(ByteRange(0, 99), 1000) == "bytes 0-99/1000"
