"""The move-combo tree: which moves may follow which in a string."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable, Sequence

from .csvutil import atoi, data_rows, read_lines, split_fields
from .records import ExecutingMove

_COLUMNS = 3


@dataclass
class MoveNode:
    """A move in the combo tree with the moves that may follow it."""

    move_id: int
    children: dict[int, "MoveNode"] = field(default_factory=dict)


@dataclass
class MoveComboTree:
    """Combo strings as a tree of moves, one root per starting move."""

    roots: dict[int, MoveNode] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MoveComboTree":
        """Build the tree from CSV lines of (combo id, step order, move id)."""
        chains: dict[int, list[int]] = {}
        for fields in data_rows(lines, partial(split_fields, sep=",")):
            if len(fields) != _COLUMNS:
                continue
            chains.setdefault(atoi(fields[0]), []).append(atoi(fields[2]))
        tree = cls()
        for parent_id in sorted(chains):
            tree.add_chain(chains[parent_id])
        return tree

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "MoveComboTree":
        return cls.from_lines(read_lines(path))

    def add_chain(self, chain: Sequence[int]) -> None:
        """Insert a string of moves, sharing any prefix already present."""
        if not chain:
            raise ValueError("a combo chain needs at least one move")
        first, *rest = chain
        node = self.roots.setdefault(first, MoveNode(first))
        for move_id in rest:
            node = node.children.setdefault(move_id, MoveNode(move_id))

    def is_move_in_combo(self, moveset: Sequence[ExecutingMove], move_id: int) -> bool:
        """Whether ``move_id`` may follow the moves already performed."""
        if not moveset:
            raise ValueError("the moveset is empty")
        node = self.roots.get(moveset[0].move_id)
        if node is None:
            return False
        for move in moveset[1:]:
            node = node.children.get(move.move_id)
            if node is None:
                return False
        return move_id in node.children

    def format_tree(self) -> str:
        """Render the tree as indented text."""
        lines = ["MoveTree Structure:"]

        def walk(node: MoveNode, indent: str) -> None:
            lines.append(f"{indent}├── MoveID: {node.move_id}")
            for child_id in sorted(node.children):
                walk(node.children[child_id], indent + "|  ")

        for root_id in sorted(self.roots):
            walk(self.roots[root_id], "")
        return "\n".join(lines)

    def clear(self) -> None:
        """Drop every combo."""
        self.roots.clear()