"""Tests for "row,col" coordinate parsing."""

import pytest

from parking_status.coordinates import format_coordinates, parse_coordinates


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0,0", (0, 0)),
        ("2,5", (2, 5)),
        ("12,3", (12, 3)),
        ("+1,4", (1, 4)),
        ("-1,3", (-1, 3)),  # parsed; bounds are the lot's concern
        ("1,2,", (1, 2)),  # trailing empty fields are dropped
        ("1,2,,", (1, 2)),
    ],
)
def test_valid_coordinates(text, expected):
    assert parse_coordinates(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "1",
        "1,2,3",
        "a,b",
        "1,b",
        "1.5,2",
        ",",
        "1,",
        ",1",
        "1;2",
        " 1, 4 ",
        "1 ,2",
        "1_0,2",
        "1,,2",
    ],
)
def test_malformed_coordinates_are_absent(text):
    assert parse_coordinates(text) is None


def test_format_matches_parse():
    assert format_coordinates(3, 7) == "3,7"
    assert parse_coordinates(format_coordinates(3, 7)) == (3, 7)
