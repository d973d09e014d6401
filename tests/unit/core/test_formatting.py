"""Unit tests for formatting helpers."""

import pytest

from rqd.core import format_file_size, format_ratio, format_score


@pytest.mark.parametrize(
    "size,expected",
    [
        (512, "512 B"),
        (1536, "1.5 KB"),
        (128 * 1024**2, "128.0 MB"),
        (int(4.2 * 1024**3), "4.2 GB"),
    ],
)
def test_format_file_size(size: int, expected: str) -> None:
    """Should pick the largest fitting unit with one decimal."""
    assert format_file_size(size) == expected


def test_format_ratio() -> None:
    """Should round to two decimals with an x suffix."""
    assert format_ratio(12.3456) == "12.35x"


def test_format_score() -> None:
    """Should show two decimals."""
    assert format_score(93.4) == "93.40"
