"""Loading every data table of the game from its content directory."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .csvutil import read_lines
from .input_manager import InputManager
from .input_table import InputTable
from .move_combos import MoveComboTree
from .moves import MoveTable
from .state_tables import ConditionTable, StateTable, TransitionTable
from .tables import CharacterTable, ComboTable, HitEffectTable

logger = logging.getLogger(__name__)

_TABLE_DIR = "DataTable"


def _table_lines(content_dir: Path, name: str) -> list[str]:
    path = content_dir / _TABLE_DIR / name
    try:
        return read_lines(path)
    except OSError:
        logger.warning("Failed to open file: %s", path)
        return []


@dataclass
class GameData:
    """All the game's tables, loaded together."""

    inputs: InputTable
    hit_effects: HitEffectTable
    states: StateTable
    moves: MoveTable
    characters: CharacterTable
    combos: ComboTable
    conditions: ConditionTable
    transitions: TransitionTable
    move_combos: MoveComboTree

    @classmethod
    def load(cls, content_dir: str | os.PathLike[str]) -> "GameData":
        """Read every table under ``content_dir``; a missing file gives an empty table."""
        root = Path(content_dir)
        inputs = InputTable.from_lines(_table_lines(root, "InputTable.csv"))
        hit_effects = HitEffectTable.from_lines(_table_lines(root, "HitEffectTable.csv"))
        states = StateTable.from_lines(_table_lines(root, "StateListTable.csv"))
        moves = MoveTable.from_lines(_table_lines(root, "MoveTable.csv"), inputs)
        characters = CharacterTable.from_lines(_table_lines(root, "CharacterTable.csv"))
        combos = ComboTable.from_lines(
            _table_lines(root, "ComboTable.csv"),
            _table_lines(root, "ComboDetailsTable.csv"),
        )
        conditions = ConditionTable.from_lines(
            _table_lines(root, "ConditionListTable.csv")
        )
        transitions = TransitionTable.from_lines(
            _table_lines(root, "TransitionListTable.csv")
        )
        move_combos = MoveComboTree.from_lines(_table_lines(root, "MoveComboTable.csv"))
        return cls(
            inputs=inputs,
            hit_effects=hit_effects,
            states=states,
            moves=moves,
            characters=characters,
            combos=combos,
            conditions=conditions,
            transitions=transitions,
            move_combos=move_combos,
        )

    def input_manager(self) -> InputManager:
        """A fresh input buffer backed by these tables."""
        return InputManager(self.inputs, self.moves, self.move_combos)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the tables from a content directory and print what they hold."""
    parser = argparse.ArgumentParser(description="Load and summarise the game data tables.")
    parser.add_argument("content_dir", nargs="?", default="Content")
    args = parser.parse_args(argv)

    data = GameData.load(args.content_dir)
    print(f"Characters: {len(data.characters.characters)}")
    print(f"States: {len(data.states.states)}")
    print(f"Conditions: {len(data.conditions.conditions)}")
    print(f"Hit effects: {len(data.hit_effects.effects)}")
    for line in data.moves.describe():
        print(line)
    for line in data.combos.describe():
        print(line)
    for line in data.transitions.describe():
        print(line)
    print(data.move_combos.format_tree())
    return 0