"""The input table: names and bit masks of every button."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable

from .csvutil import atoi, data_rows, read_lines, split_fields
from .records import InputTableRow

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
LP = "LP"
RP = "RP"
LK = "LK"
RK = "RK"

_COLUMNS = 6


@dataclass
class InputTable:
    """Maps input ids to one-byte bit masks and names to input ids."""

    bitmasks: dict[int, int] = field(default_factory=dict)
    names: dict[str, int] = field(default_factory=dict)
    rows: list[InputTableRow] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "InputTable":
        """Build the table from CSV lines; the first line is a header."""
        table = cls()
        for fields in data_rows(lines, partial(split_fields, sep=",")):
            if len(fields) != _COLUMNS:
                continue
            row = InputTableRow(
                input_id=atoi(fields[0]),
                name=fields[1],
                bit_index=atoi(fields[2]),
                bit_mask_dec=atoi(fields[3]),
                bit_mask_hex=fields[4],
                bit_mask_bin=fields[5],
            )
            table.rows.append(row)
            table.bitmasks[row.input_id] = (1 << row.bit_index) & 0xFF
            table.names[row.name] = row.input_id
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "InputTable":
        return cls.from_lines(read_lines(path))

    def bitmask(self, index: int) -> int:
        """Bit mask of an input id; unknown ids give 0."""
        return self.bitmasks.get(index, 0)

    def index(self, name: str) -> int:
        """Input id of a name; unknown names give 0."""
        return self.names.get(name, 0)