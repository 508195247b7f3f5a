from __future__ import annotations

import pytest

from symwatch.utils import parse_sleep_millis, split_output_lines


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1000", 1.0),
        (250, 0.25),
        (" 20 ", 0.02),
        ("0", 0.5),
        ("-10", 0.5),
        ("soon", 0.5),
        ("", 0.5),
        (None, 0.5),
    ],
)
def test_parse_sleep_millis(value, expected) -> None:
    assert parse_sleep_millis(value) == pytest.approx(expected)


def test_split_output_lines_strips_surrounding_whitespace() -> None:
    assert split_output_lines(b"\n  one\ntwo\n\n") == ["one", "two"]
    assert split_output_lines(b"   \n") == []


def test_split_output_lines_tolerates_invalid_utf8() -> None:
    assert split_output_lines(b"bad \xff byte") == ["bad � byte"]


def test_split_output_lines_splits_on_newline_only() -> None:
    assert split_output_lines(b"50%\r100%\ndone\n") == ["50%\r100%", "done"]
