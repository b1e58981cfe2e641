"""Condition, state and transition tables of the character state machine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable

from .csvutil import atoi, data_rows, read_lines, restore_json, split_fields, split_quoted
from .records import Condition, ConditionLogic, StateData, Transition

logger = logging.getLogger(__name__)

_CONDITION_COLUMNS = 8
_STATE_COLUMNS = 7
_TRANSITION_COLUMNS = 8
_TRANSITION_HEADER = "========= Transition Map ========="


def parse_condition_ids(text: str) -> list[int]:
    """Read a ``|``-separated list of condition ids."""
    return [atoi(token) for token in split_fields(text, "|")]


@dataclass
class ConditionTable:
    """State-machine conditions by id."""

    conditions: dict[int, Condition] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ConditionTable":
        """Build the table from CSV lines; the JSON cell may hold quoted commas."""
        table = cls()
        for fields in data_rows(lines, split_quoted):
            if len(fields) != _CONDITION_COLUMNS:
                continue
            condition = Condition(
                condition_id=atoi(fields[0]),
                name=fields[1],
                checker=fields[2],
                data=restore_json(fields[3]),
                group=fields[4],
                invert=fields[5] == "TRUE",
                priority=atoi(fields[6]),
            )
            table.conditions[condition.condition_id] = condition
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ConditionTable":
        return cls.from_lines(read_lines(path))

    def get(self, condition_id: int) -> Condition | None:
        """Condition by id; None when absent."""
        return self.conditions.get(condition_id)


@dataclass
class StateTable:
    """Character states by id."""

    states: dict[int, StateData] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "StateTable":
        """Build the table from CSV lines; rows without a state id are skipped."""
        table = cls()
        for fields in data_rows(lines, split_quoted):
            if len(fields) != _STATE_COLUMNS:
                logger.warning("Invalid row with %d columns", len(fields))
                continue
            if not fields[0]:
                logger.warning("Invalid StateID")
                continue
            state = StateData(
                state_id=atoi(fields[0]),
                name=fields[1].upper(),
                state_group=fields[2].upper(),
                parent_state_id=atoi(fields[3]),
                default_duration=atoi(fields[4]),
                animation_ref=fields[5].upper(),
            )
            table.states[state.state_id] = state
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "StateTable":
        return cls.from_lines(read_lines(path))

    def get(self, state_id: int) -> StateData | None:
        """State by id; None when absent."""
        return self.states.get(state_id)


@dataclass
class TransitionTable:
    """Transitions between states by id."""

    transitions: dict[int, Transition] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TransitionTable":
        """Build the table from CSV lines; the first line is a header."""
        table = cls()
        for fields in data_rows(lines, partial(split_fields, sep=",")):
            if len(fields) != _TRANSITION_COLUMNS:
                logger.warning("Invalid row with %d columns", len(fields))
                continue
            transition = Transition(
                transition_id=atoi(fields[0]),
                from_state_id=atoi(fields[1]),
                parent_state_check=fields[2] == "TRUE",
                condition_logic=ConditionLogic.from_token(fields[3]),
                condition_ids=parse_condition_ids(fields[4]),
                to_state_id=atoi(fields[5]),
                priority=atoi(fields[6]),
            )
            table.transitions[transition.transition_id] = transition
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "TransitionTable":
        return cls.from_lines(read_lines(path))

    def get(self, transition_id: int) -> Transition | None:
        """Transition by id; None when absent."""
        return self.transitions.get(transition_id)

    def describe(self) -> list[str]:
        """A header and one line per transition ordered by id; empty when there are none."""
        if not self.transitions:
            logger.warning("TransitionMap is empty!")
            return []
        lines = [_TRANSITION_HEADER]
        for transition_id in sorted(self.transitions):
            t = self.transitions[transition_id]
            ids = ", ".join(str(i) for i in t.condition_ids)
            lines.append(
                f"ID: {t.transition_id}, From: {t.from_state_id}, To: {t.to_state_id}, "
                f"ParentCheck: {t.parent_state_check}, "
                f"Logic: {t.condition_logic.display_name}, ConditionIDs: [{ids}], "
                f"Priority: {t.priority}, Action: {t.on_transition_action}"
            )
        return lines