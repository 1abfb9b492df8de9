"""Parsing of the "row,col" spot address used by click events."""

import re
from typing import Optional

_INTEGER = re.compile(r"[+-]?\d+")


def parse_coordinates(text: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a "row,col" string into integer coordinates.

    Trailing empty fields are dropped, so "1,2," parses as (1, 2). Each
    field must be an optional sign followed by digits; whitespace and
    digit-group underscores are rejected. Bounds are not checked here;
    that is the lot's job.

    Args:
        text: Coordinate string such as "2,5"

    Returns:
        (row, col) tuple, or None if the text is not exactly two integers
    """
    if not text:
        return None

    parts = text.split(",")
    while parts and parts[-1] == "":
        parts.pop()

    if len(parts) != 2:
        return None
    if not all(_INTEGER.fullmatch(part) for part in parts):
        return None

    return int(parts[0]), int(parts[1])


def format_coordinates(row: int, col: int) -> str:
    """Encode coordinates as "row,col"."""
    return f"{row},{col}"
