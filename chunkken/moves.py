"""The move table: frame data of every move and the commands that start them."""

from __future__ import annotations

import os
from functools import partial
from typing import Iterable

from .csvutil import atoi, data_rows, read_lines, split_fields
from .input_table import LEFT, RIGHT, InputTable
from .records import MoveData

_COLUMNS = 14
_U64_MASK = (1 << 64) - 1


def bitmask_to_binary(bitmask: int) -> str:
    """Render a 64-bit command as 64 binary digits."""
    return format(bitmask & _U64_MASK, "064b")


class MoveTable:
    """Moves indexed by character and command, and by move id."""

    def __init__(self, inputs: InputTable) -> None:
        self.inputs = inputs
        self._ids_by_command: dict[int, dict[int, int]] = {}
        self._by_char: dict[int, dict[int, MoveData]] = {}
        self._by_id: dict[int, MoveData] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str], inputs: InputTable) -> "MoveTable":
        """Build the table from CSV lines; the first line is a header."""
        table = cls(inputs)
        for fields in data_rows(lines, partial(split_fields, sep=",")):
            if len(fields) != _COLUMNS:
                continue
            table.add(
                MoveData(
                    move_id=atoi(fields[0]),
                    char_id=atoi(fields[1]),
                    command=table.parse_command(fields[2]),
                    relative_id=atoi(fields[3]),
                    attack_type=fields[4].upper(),
                    damage=atoi(fields[5]),
                    hits=atoi(fields[6]),
                    hit_level=fields[7].upper(),
                    startup=atoi(fields[8]),
                    active_frames=atoi(fields[9]),
                    recovery=atoi(fields[10]),
                    on_block=atoi(fields[11]),
                    on_hit=atoi(fields[12]),
                )
            )
        return table

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], inputs: InputTable
    ) -> "MoveTable":
        return cls.from_lines(read_lines(path), inputs)

    def calculate_bitmask(self, text: str) -> int:
        """Bit mask of one chord such as ``f+lp``; ``f`` is right, ``b`` is left."""
        bitmask = 0
        for token in split_fields(text, "+"):
            if token == "f":
                token = RIGHT
            if token == "b":
                token = LEFT
            bitmask |= self.inputs.bitmask(self.inputs.index(token.upper()))
        return bitmask & 0xFF

    def parse_command(self, text: str) -> int:
        """Pack a ``|``-separated chord sequence into a 64-bit command, one byte per chord."""
        command = 0
        for chord in split_fields(text, "|"):
            command |= self.calculate_bitmask(chord)
            command = (command << 8) & _U64_MASK
        return command >> 8

    def add(self, move: MoveData) -> None:
        """Register a move under its character, command and id."""
        self._ids_by_command.setdefault(move.char_id, {})[move.command] = move.move_id
        self._by_char.setdefault(move.char_id, {})[move.move_id] = move
        self._by_id[move.move_id] = move

    def move_id(self, char_id: int, command: int) -> int:
        """Move id started by ``command`` for a character, or -1."""
        return self._ids_by_command.get(char_id, {}).get(command, -1)

    def move_data(self, char_id: int, move_id: int) -> MoveData | None:
        """Move data looked up in the per-character index; None when absent."""
        # The per-character index is keyed by the move id here, as the table lookup has always done.
        return self._by_char.get(move_id, {}).get(move_id)

    def move_data_by_id(self, move_id: int) -> MoveData | None:
        """Move data by move id; None when absent."""
        return self._by_id.get(move_id)

    def describe(self) -> list[str]:
        """One summary line per move, ordered by character then move id."""
        lines = []
        for char_id in sorted(self._by_char):
            moves = self._by_char[char_id]
            for move_id in sorted(moves):
                data = moves[move_id]
                lines.append(
                    f"MoveID: {data.move_id}, CharID: {data.char_id}, "
                    f"Command: (Bitmask: {data.command}, "
                    f"Binary: {bitmask_to_binary(data.command)}), "
                    f"RelativeID: {data.relative_id}, AttackType: {data.attack_type}, "
                    f"Damage: {data.damage}, Hits: {data.hits}, "
                    f"HitLevel: {data.hit_level}, StartUp: {data.startup}, "
                    f"ActiveFrames: {data.active_frames}, Recovery: {data.recovery}, "
                    f"OnBlock: {data.on_block}, OnHit: {data.on_hit}"
                )
        return lines