"""Helpers for reading the game's CSV data tables."""

from __future__ import annotations

import os
import re
from typing import Callable, Iterable, Iterator

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, none gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def split_fields(line: str, sep: str) -> list[str]:
    """Split on ``sep``; a trailing empty field is not produced."""
    parts = line.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_quoted(line: str) -> list[str]:
    """Split on commas outside double quotes, keeping the quotes in the cells."""
    cells: list[str] = []
    cell: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
            cell.append(char)
        elif char == "," and not in_quotes:
            cells.append("".join(cell))
            cell = []
        else:
            cell.append(char)
    cells.append("".join(cell))
    return cells


def restore_json(text: str) -> str:
    """Undo CSV quoting of a JSON cell: collapse doubled quotes, drop the outer pair."""
    if not text:
        raise ValueError("cannot restore JSON from an empty cell")
    unescaped = text.replace('""', '"')
    return unescaped[1:-1] if len(unescaped) >= 2 else ""


def data_rows(
    lines: Iterable[str], splitter: Callable[[str], list[str]]
) -> Iterator[list[str]]:
    """Yield the split fields of every line after the header."""
    iterator = iter(lines)
    next(iterator, None)
    for line in iterator:
        yield splitter(line)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a table file as a list of lines without line endings."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\n") for line in handle]