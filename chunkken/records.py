"""Plain records for the rows of the game's data tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class CharacterData:
    """One playable character."""

    char_id: int = 0
    char_name: str = ""
    title: str = ""
    hp: int = 0
    base_speed: int = 0
    wakeup_speed: int = 0


@dataclass
class ComboDetail:
    """One step of a combo."""

    combo_id: int = 0
    step_order: int = 0
    move_id: int = 0
    dash_event: bool = False
    tail_spin_event: bool = False


@dataclass
class ComboData:
    """A named combo with its notation and steps."""

    combo_id: int = 0
    char_id: int = 0
    combo_name: str = ""
    notation: list[int] = field(default_factory=list)
    details: list[ComboDetail] = field(default_factory=list)
    estimated_damage: int = 0


@dataclass
class Condition:
    """A state-machine condition; ``data`` holds its JSON parameters."""

    condition_id: int = 0
    name: str = ""
    checker: str = ""
    data: str = ""
    group: str = ""
    invert: bool = False
    priority: int = 0


@dataclass
class InputTableRow:
    """One row of the input table."""

    input_id: int = 0
    name: str = ""
    bit_index: int = 0
    bit_mask_dec: int = 0
    bit_mask_hex: str = ""
    bit_mask_bin: str = ""


@dataclass
class HitEffect:
    """What happens when a move connects."""

    hit_effect_id: int = 0
    move_id: int = 0
    condition: str = ""
    extra_damage: int = 0
    launch: int = 0
    stun_frames: int = 0
    hit_reaction: str = ""


@dataclass
class MoveData:
    """Frame data and command of one move."""

    move_id: int = 0
    char_id: int = 0
    command: int = 0
    relative_id: int = 0
    attack_type: str = ""
    damage: int = 0
    hits: int = 0
    hit_level: str = ""
    startup: int = 0
    active_frames: int = 0
    recovery: int = 0
    on_block: int = 0
    on_hit: int = 0


@dataclass
class StateData:
    """One character state."""

    state_id: int = 0
    name: str = ""
    parent_state_id: int = 0
    state_group: str = ""
    default_duration: int = 0
    animation_ref: str = ""


class ConditionLogic(Enum):
    """How the conditions of a transition are combined."""

    NONE = 0
    AND = 1
    OR = 2
    NOT = 3

    @classmethod
    def from_token(cls, token: str) -> "ConditionLogic":
        """Map a table token to a logic value; unknown tokens give NONE."""
        for logic in (cls.AND, cls.OR, cls.NOT):
            if token == logic.name:
                return logic
        return cls.NONE

    @property
    def display_name(self) -> str:
        return "None" if self is ConditionLogic.NONE else self.name


@dataclass
class Transition:
    """A transition between two states."""

    transition_id: int = 0
    from_state_id: int = 0
    parent_state_check: bool = False
    condition_logic: ConditionLogic = ConditionLogic.NONE
    condition_ids: list[int] = field(default_factory=list)
    to_state_id: int = 0
    priority: int = 0
    on_transition_action: str = ""


@dataclass
class ExecutingMove:
    """A move recognised from input.

    ``move_id`` of -1 means plain movement, ``ignore`` drops the input and
    ``combo_done`` marks the end of a combo.
    """

    move_id: int = 0
    frame_index: int = 0
    ignore: bool = False
    combo_done: bool = False